"""
SQLAlchemy Implementation of Route Repository.
"""

from datetime import datetime
from typing import List, Optional

import pytz

from bridgeclear.config import get_settings
from bridgeclear.domain.models.route import Route
from bridgeclear.domain.repositories.route_repository import RouteRepository
from bridgeclear.domain.schemas.route import RouteCreate
from bridgeclear.infrastructure.repositories.base_repository import SQLAlchemyRepository

settings = get_settings()
tz = pytz.timezone(settings.TIMEZONE)


class SQLAlchemyRouteRepository(SQLAlchemyRepository[Route], RouteRepository):
    """Route repository implementation using SQLAlchemy."""

    def get_current_timestamp(self) -> str:
        """ISO-8601 timestamp in the configured timezone."""
        return datetime.now(tz).isoformat()

    def get_route(self, id: int) -> Optional[Route]:
        return self.get_by_id(id)

    def get_for_user(self, user_id: str) -> List[Route]:
        return self.db.query(Route).filter(Route.user_id == user_id).order_by(Route.id).all()

    def create_for_user(self, route: RouteCreate, user_id: str) -> Route:
        data = route.model_dump()
        data["created_at"] = data.get("created_at") or self.get_current_timestamp()
        data["user_id"] = user_id
        return self.create(data)
