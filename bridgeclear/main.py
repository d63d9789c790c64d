"""FastAPI application — main entry point."""

import structlog
from contextlib import asynccontextmanager

from fastapi import FastAPI

from bridgeclear.config import get_settings
from bridgeclear.infrastructure.database import SessionLocal, init_db
from bridgeclear.core.logging import configure_logging
from bridgeclear.core.middleware import setup_middleware
from bridgeclear.core.exceptions import register_exception_handlers

# Import all models so SQLAlchemy knows about them
from bridgeclear.domain.models.user import User
from bridgeclear.domain.models.bridge import Bridge
from bridgeclear.domain.models.vehicle_profile import VehicleProfile  # noqa: F401
from bridgeclear.domain.models.route import Route  # noqa: F401
from bridgeclear.domain.models import billing  # noqa: F401

# Import routers
from bridgeclear.interfaces.api.bridges import router as bridges_router
from bridgeclear.interfaces.api.vehicle_profiles import router as vehicle_profiles_router
from bridgeclear.interfaces.api.routes import router as routes_router
from bridgeclear.interfaces.api.billing import router as billing_router

settings = get_settings()

# Configure logging immediately
configure_logging()
logger = structlog.get_logger(__name__)


def bootstrap_data() -> None:
    """Seed demo bridges and the demo user on a fresh database."""
    from bridgeclear.application.services.seed_service import ensure_demo_user, seed_bridges
    from bridgeclear.infrastructure.repositories.bridge_repository import SQLAlchemyBridgeRepository
    from bridgeclear.infrastructure.repositories.user_repository import SQLAlchemyUserRepository

    db = SessionLocal()
    try:
        ensure_demo_user(SQLAlchemyUserRepository(db, User), settings.DEMO_USER_ID, settings.DEMO_USERNAME)
        seed_bridges(SQLAlchemyBridgeRepository(db, Bridge))
    finally:
        db.close()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan — startup and shutdown events."""
    logger.info("Starting BridgeClear API...", env=settings.ENVIRONMENT)

    # Create DB tables (dev only — use migrations in production)
    init_db()
    logger.info("Database tables created/verified")

    if settings.SEED_ON_STARTUP:
        bootstrap_data()

    yield

    logger.info("BridgeClear API stopped")


app = FastAPI(
    title="BridgeClear — Low Clearance Route Planner",
    description="Vehicle profiles, low-clearance bridge map and subscription billing",
    version="1.0.0",
    lifespan=lifespan,
)

setup_middleware(app)
register_exception_handlers(app)

app.include_router(bridges_router, prefix=settings.API_PREFIX)
app.include_router(vehicle_profiles_router, prefix=settings.API_PREFIX)
app.include_router(routes_router, prefix=settings.API_PREFIX)
app.include_router(billing_router, prefix=settings.API_PREFIX)


@app.get("/")
def root():
    return {
        "name": "BridgeClear API",
        "version": "1.0.0",
        "status": "running",
        "docs": "/docs",
    }


@app.get("/health")
def health():
    return {"status": "healthy"}
