"""Pydantic schemas for Bridge domain."""

from pydantic import Field

from bridgeclear.domain.schemas.common import CamelModel


class BridgeBase(CamelModel):
    name: str
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    # Display string and canonical inches are both caller-supplied
    clearance_height: str
    clearance_inches: int = Field(..., ge=0)
    state: str
    city: str
    road_name: str


class BridgeCreate(BridgeBase):
    pass


class BridgeRead(BridgeBase):
    id: int
