"""
Global exception handling for the application.
Standardizes error responses into a single error envelope.
"""

from typing import Any, Dict, Optional

import structlog
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

logger = structlog.get_logger(__name__)


class AppError(Exception):
    """Base class for all application exceptions."""
    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class EntityNotFoundException(AppError):
    """Resource not found error."""
    def __init__(self, message: str = "Entity not found", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status.HTTP_404_NOT_FOUND, details)


class ValidationException(AppError):
    """Malformed or missing input."""
    def __init__(self, message: str = "Validation failed", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status.HTTP_400_BAD_REQUEST, details)


class StorageException(AppError):
    """Failure in the persistence layer. Details are logged, never returned."""
    def __init__(self, message: str = "Storage failure", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status.HTTP_500_INTERNAL_SERVER_ERROR, details)


class ProviderException(AppError):
    """Failure talking to the billing provider."""
    def __init__(self, message: str = "Billing provider error", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status.HTTP_500_INTERNAL_SERVER_ERROR, details)


def _error_response(request: Request, status_code: int, code: str, message: str, details: Any = None) -> JSONResponse:
    body: Dict[str, Any] = {
        "code": code,
        "message": message,
        "path": request.url.path,
    }
    if details:
        body["details"] = details
    return JSONResponse(status_code=status_code, content={"error": jsonable_encoder(body)})


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Handle AppError subclasses raised by routes and services."""
    if exc.status_code >= 500:
        logger.error(
            "Request failed",
            code=exc.__class__.__name__,
            message=exc.message,
            cause=repr(exc.__cause__) if exc.__cause__ else None,
            path=request.url.path,
        )
        # Server-side detail stays in the log
        return _error_response(request, exc.status_code, exc.__class__.__name__, exc.message)
    return _error_response(request, exc.status_code, exc.__class__.__name__, exc.message, exc.details)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Input validation failures are reported as 400 with field-level detail."""
    return _error_response(
        request,
        status.HTTP_400_BAD_REQUEST,
        ValidationException.__name__,
        "Invalid request",
        exc.errors(),
    )


async def storage_exception_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Database errors surface as a generic storage failure."""
    logger.exception("Storage error", path=request.url.path, error=str(exc))
    return _error_response(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        StorageException.__name__,
        "A storage error occurred. Please try again later.",
    )


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle all uncaught exceptions globally."""
    logger.exception("Unexpected error occurred", path=request.url.path)
    return _error_response(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "InternalServerError",
        "An unexpected error occurred. Please try again later.",
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(SQLAlchemyError, storage_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)
