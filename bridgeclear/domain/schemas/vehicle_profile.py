"""Pydantic schemas for VehicleProfile domain."""

from typing import Optional

from pydantic import Field, model_validator

from bridgeclear.domain.schemas.common import CamelModel


class VehicleProfileBase(CamelModel):
    name: str
    height: str
    height_inches: int = Field(..., ge=0)
    weight: str
    length: str
    width: str


class VehicleProfileCreate(VehicleProfileBase):
    """Client input. The owner is injected server-side, never read from the body."""


class VehicleProfileUpdate(CamelModel):
    name: Optional[str] = None
    height: Optional[str] = None
    height_inches: Optional[int] = Field(None, ge=0)
    weight: Optional[str] = None
    length: Optional[str] = None
    width: Optional[str] = None

    @model_validator(mode="after")
    def reject_nulls(self) -> "VehicleProfileUpdate":
        nulls = [name for name in self.model_fields_set if getattr(self, name) is None]
        if nulls:
            raise ValueError(f"fields cannot be null: {', '.join(sorted(nulls))}")
        return self


class VehicleProfileRead(VehicleProfileBase):
    id: int
    user_id: str
