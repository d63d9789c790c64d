"""Bridges API routes — listing, geofencing, clearance filter, creation."""

from typing import List

from fastapi import APIRouter, Depends, Path, Query, status

from bridgeclear.domain.repositories.bridge_repository import BridgeRepository
from bridgeclear.domain.schemas.bridge import BridgeCreate, BridgeRead
from bridgeclear.interfaces.deps import get_bridge_repository

router = APIRouter(prefix="/bridges", tags=["Bridges"])


@router.get("", response_model=List[BridgeRead])
def list_bridges(repo: BridgeRepository = Depends(get_bridge_repository)):
    return [BridgeRead.model_validate(b) for b in repo.get_all()]


@router.get("/in-bounds", response_model=List[BridgeRead])
def bridges_in_bounds(
    min_lat: float = Query(..., alias="minLat"),
    max_lat: float = Query(..., alias="maxLat"),
    min_lng: float = Query(..., alias="minLng"),
    max_lng: float = Query(..., alias="maxLng"),
    repo: BridgeRepository = Depends(get_bridge_repository),
):
    """Bridges inside the closed bounding box; edges are included."""
    bridges = repo.get_in_bounds(min_lat, max_lat, min_lng, max_lng)
    return [BridgeRead.model_validate(b) for b in bridges]


@router.get("/below-clearance/{clearance_inches}", response_model=List[BridgeRead])
def bridges_below_clearance(
    clearance_inches: int = Path(...),
    repo: BridgeRepository = Depends(get_bridge_repository),
):
    return [BridgeRead.model_validate(b) for b in repo.get_below_clearance(clearance_inches)]


@router.post("", response_model=BridgeRead, status_code=status.HTTP_201_CREATED)
def create_bridge(
    body: BridgeCreate,
    repo: BridgeRepository = Depends(get_bridge_repository),
):
    return BridgeRead.model_validate(repo.create_bridge(body))
