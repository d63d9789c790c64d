"""Seed service — demo bridges and the demo user."""

from typing import List, Optional

import structlog
from sqlalchemy.exc import SQLAlchemyError

from bridgeclear.domain.models.user import User
from bridgeclear.domain.repositories.bridge_repository import BridgeRepository
from bridgeclear.domain.repositories.user_repository import UserRepository
from bridgeclear.domain.schemas.bridge import BridgeCreate
from bridgeclear.domain.schemas.user import UserCreate

logger = structlog.get_logger(__name__)

SEED_BRIDGES: List[BridgeCreate] = [
    BridgeCreate(name="Holland Tunnel Approach", latitude=40.7128, longitude=-74.0060, clearance_height="12' 8\"", clearance_inches=152, state="NY", city="New York", road_name="Canal Street"),
    BridgeCreate(name="Times Square Underpass", latitude=40.7589, longitude=-73.9851, clearance_height="11' 6\"", clearance_inches=138, state="NY", city="New York", road_name="Broadway"),
    BridgeCreate(name="Riverside Drive Bridge", latitude=40.8075, longitude=-73.9626, clearance_height="12' 0\"", clearance_inches=144, state="NY", city="New York", road_name="Riverside Dr"),
    BridgeCreate(name="Atlantic Ave Overpass", latitude=40.6782, longitude=-73.9442, clearance_height="12' 4\"", clearance_inches=148, state="NY", city="Brooklyn", road_name="Atlantic Ave"),
    BridgeCreate(name="Brooklyn Battery Tunnel", latitude=40.6940, longitude=-74.0134, clearance_height="12' 1\"", clearance_inches=145, state="NY", city="Brooklyn", road_name="FDR Drive"),
    BridgeCreate(name="Queens-Midtown Tunnel", latitude=40.7433, longitude=-73.9677, clearance_height="12' 8\"", clearance_inches=152, state="NY", city="Queens", road_name="I-495"),
    BridgeCreate(name="Lincoln Tunnel", latitude=40.7614, longitude=-74.0055, clearance_height="13' 0\"", clearance_inches=156, state="NY", city="New York", road_name="NJ-495"),
    BridgeCreate(name="FDR Drive Underpass", latitude=40.7489, longitude=-73.9680, clearance_height="11' 8\"", clearance_inches=140, state="NY", city="New York", road_name="FDR Drive"),
]


def seed_bridges(repo: BridgeRepository) -> int:
    """Insert the demo bridges into an empty table. Returns how many were inserted."""
    try:
        existing = repo.count()
        if existing > 0:
            logger.info("Bridges already present, skipping seed", count=existing)
            return 0

        repo.create_bridges(SEED_BRIDGES)
    except SQLAlchemyError:
        logger.exception("Error seeding bridges")
        return 0

    logger.info("Seeded bridges", count=len(SEED_BRIDGES))
    return len(SEED_BRIDGES)


def ensure_demo_user(repo: UserRepository, user_id: str, username: str) -> Optional[User]:
    """Create the stand-in demo user when missing. Returns None if it cannot be created."""
    try:
        user = repo.get_by_id(user_id)
        if user is None:
            user = repo.create_user(UserCreate(id=user_id, username=username, password=""))
            logger.info("Demo user created", user_id=user_id)
    except SQLAlchemyError:
        logger.exception("Error ensuring demo user", user_id=user_id, username=username)
        return None
    return user
