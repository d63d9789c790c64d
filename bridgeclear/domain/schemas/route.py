"""Pydantic schemas for Route domain."""

from typing import Optional

from bridgeclear.domain.schemas.bridge import BridgeRead
from bridgeclear.domain.schemas.common import CamelModel


class RouteBase(CamelModel):
    vehicle_profile_id: int
    start_lat: float
    start_lng: float
    end_lat: float
    end_lng: float
    route_data: str
    avoided_bridges: str


class RouteCreate(RouteBase):
    created_at: Optional[str] = None


class RouteRead(RouteBase):
    id: int
    user_id: str
    created_at: str


class SafeRoute(CamelModel):
    points: list[tuple[float, float]]
    height_inches: int
    hazards: list[BridgeRead] = []
