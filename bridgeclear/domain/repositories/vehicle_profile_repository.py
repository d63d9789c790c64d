"""
Vehicle Profile Repository Interface.
"""

from typing import List, Optional

from bridgeclear.domain.repositories.base import BaseRepository
from bridgeclear.domain.models.vehicle_profile import VehicleProfile
from bridgeclear.domain.schemas.vehicle_profile import VehicleProfileCreate, VehicleProfileUpdate


class VehicleProfileRepository(BaseRepository[VehicleProfile]):
    """Interface for VehicleProfile-specific operations."""

    def get_profile(self, id: int) -> Optional[VehicleProfile]:
        ...

    def get_for_user(self, user_id: str) -> List[VehicleProfile]:
        """All profiles owned by user_id."""
        ...

    def create_for_user(self, profile: VehicleProfileCreate, user_id: str) -> VehicleProfile:
        """Insert a profile, stamping ownership."""
        ...

    def update_profile(self, id: int, changes: VehicleProfileUpdate) -> VehicleProfile:
        """Patch only the supplied fields. Raises EntityNotFoundException for unknown ids."""
        ...
