"""
SQLAlchemy Implementation of Vehicle Profile Repository.
"""

from typing import List, Optional

from bridgeclear.core.exceptions import EntityNotFoundException
from bridgeclear.domain.models.vehicle_profile import VehicleProfile
from bridgeclear.domain.repositories.vehicle_profile_repository import VehicleProfileRepository
from bridgeclear.domain.schemas.vehicle_profile import VehicleProfileCreate, VehicleProfileUpdate
from bridgeclear.infrastructure.repositories.base_repository import SQLAlchemyRepository


class SQLAlchemyVehicleProfileRepository(SQLAlchemyRepository[VehicleProfile], VehicleProfileRepository):
    """VehicleProfile repository implementation using SQLAlchemy."""

    def get_profile(self, id: int) -> Optional[VehicleProfile]:
        return self.get_by_id(id)

    def get_for_user(self, user_id: str) -> List[VehicleProfile]:
        return (
            self.db.query(VehicleProfile)
            .filter(VehicleProfile.user_id == user_id)
            .order_by(VehicleProfile.id)
            .all()
        )

    def create_for_user(self, profile: VehicleProfileCreate, user_id: str) -> VehicleProfile:
        return self.create({**profile.model_dump(), "user_id": user_id})

    def update_profile(self, id: int, changes: VehicleProfileUpdate) -> VehicleProfile:
        profile = self.get_by_id(id)
        if profile is None:
            raise EntityNotFoundException("Vehicle profile not found", details={"id": id})
        return self.update(profile, changes)
