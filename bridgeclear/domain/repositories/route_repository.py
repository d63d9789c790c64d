"""
Route Repository Interface.
Routes are append-only.
"""

from typing import List, Optional

from bridgeclear.domain.repositories.base import BaseRepository
from bridgeclear.domain.models.route import Route
from bridgeclear.domain.schemas.route import RouteCreate


class RouteRepository(BaseRepository[Route]):
    """Interface for Route-specific operations."""

    def get_route(self, id: int) -> Optional[Route]:
        ...

    def get_for_user(self, user_id: str) -> List[Route]:
        ...

    def create_for_user(self, route: RouteCreate, user_id: str) -> Route:
        """Insert a route owned by user_id, stamping created_at when absent."""
        ...
