"""
SQLAlchemy Implementation of Bridge Repository.
"""

from typing import List

from sqlalchemy import func

from bridgeclear.domain.models.bridge import Bridge
from bridgeclear.domain.repositories.bridge_repository import BridgeRepository
from bridgeclear.domain.schemas.bridge import BridgeCreate
from bridgeclear.infrastructure.repositories.base_repository import SQLAlchemyRepository


class SQLAlchemyBridgeRepository(SQLAlchemyRepository[Bridge], BridgeRepository):
    """Bridge repository implementation using SQLAlchemy."""

    def get_all(self) -> List[Bridge]:
        return self.db.query(Bridge).all()

    def get_in_bounds(self, min_lat: float, max_lat: float, min_lng: float, max_lng: float) -> List[Bridge]:
        return (
            self.db.query(Bridge)
            .filter(
                Bridge.latitude >= min_lat,
                Bridge.latitude <= max_lat,
                Bridge.longitude >= min_lng,
                Bridge.longitude <= max_lng,
            )
            .all()
        )

    def get_below_clearance(self, clearance_inches: int) -> List[Bridge]:
        return self.db.query(Bridge).filter(Bridge.clearance_inches <= clearance_inches).all()

    def count(self) -> int:
        return self.db.query(func.count(Bridge.id)).scalar() or 0

    def create_bridge(self, bridge: BridgeCreate) -> Bridge:
        return self.create(bridge.model_dump())

    def create_bridges(self, bridges: List[BridgeCreate]) -> List[Bridge]:
        """Insert all rows in one transaction; nothing is kept if any insert fails."""
        db_objs = [Bridge(**bridge.model_dump()) for bridge in bridges]
        self.db.add_all(db_objs)
        self._commit()
        return db_objs
