"""Routes API — saved routes and the demo safe route."""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from bridgeclear.application.services.route_service import get_safe_route
from bridgeclear.domain.repositories.bridge_repository import BridgeRepository
from bridgeclear.domain.repositories.route_repository import RouteRepository
from bridgeclear.domain.schemas.route import RouteCreate, RouteRead, SafeRoute
from bridgeclear.interfaces.deps import get_bridge_repository, get_current_user_id, get_route_repository

router = APIRouter(prefix="/routes", tags=["Routes"])


@router.get("", response_model=List[RouteRead])
def list_routes(
    repo: RouteRepository = Depends(get_route_repository),
    user_id: str = Depends(get_current_user_id),
):
    return [RouteRead.model_validate(r) for r in repo.get_for_user(user_id)]


@router.post("", response_model=RouteRead, status_code=status.HTTP_201_CREATED)
def create_route(
    body: RouteCreate,
    repo: RouteRepository = Depends(get_route_repository),
    user_id: str = Depends(get_current_user_id),
):
    return RouteRead.model_validate(repo.create_for_user(body, user_id))


@router.get("/safe-route", response_model=SafeRoute)
def safe_route(
    height_inches: Optional[int] = Query(None, alias="heightInches", ge=0),
    repo: BridgeRepository = Depends(get_bridge_repository),
):
    """Static demo route plus the bridges too low for the given vehicle height."""
    return get_safe_route(repo, height_inches)
