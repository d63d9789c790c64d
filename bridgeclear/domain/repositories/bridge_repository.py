"""
Bridge Repository Interface.
Geofencing and clearance queries over bridges.
"""

from typing import List

from bridgeclear.domain.repositories.base import BaseRepository
from bridgeclear.domain.models.bridge import Bridge
from bridgeclear.domain.schemas.bridge import BridgeCreate


class BridgeRepository(BaseRepository[Bridge]):
    """Interface for Bridge-specific operations."""

    def get_all(self) -> List[Bridge]:
        """All bridges, unordered."""
        ...

    def get_in_bounds(self, min_lat: float, max_lat: float, min_lng: float, max_lng: float) -> List[Bridge]:
        """Bridges inside the closed lat/lng box. Callers ensure min <= max."""
        ...

    def get_below_clearance(self, clearance_inches: int) -> List[Bridge]:
        """Bridges with clearance_inches <= the threshold."""
        ...

    def count(self) -> int:
        ...

    def create_bridge(self, bridge: BridgeCreate) -> Bridge:
        ...

    def create_bridges(self, bridges: List[BridgeCreate]) -> List[Bridge]:
        """Insert several bridges atomically."""
        ...
