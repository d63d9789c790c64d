"""Seed the demo bridges and the demo user into a database.

Usage: python scripts/seed_bridges.py [DATABASE_URL]
"""

import sys
import os

# Add parent dir to path
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from sqlalchemy.orm import sessionmaker

from bridgeclear.config import get_settings
from bridgeclear.infrastructure.database import build_engine, init_db
from bridgeclear.domain.models.bridge import Bridge
from bridgeclear.domain.models.user import User
from bridgeclear.domain.models import billing, route, vehicle_profile  # noqa: F401
from bridgeclear.infrastructure.repositories.bridge_repository import SQLAlchemyBridgeRepository
from bridgeclear.infrastructure.repositories.user_repository import SQLAlchemyUserRepository
from bridgeclear.application.services.seed_service import ensure_demo_user, seed_bridges


def seed(database_url: str):
    settings = get_settings()
    engine = build_engine(database_url)
    init_db(engine)

    db = sessionmaker(bind=engine)()
    try:
        ensure_demo_user(SQLAlchemyUserRepository(db, User), settings.DEMO_USER_ID, settings.DEMO_USERNAME)
        inserted = seed_bridges(SQLAlchemyBridgeRepository(db, Bridge))
        print(f"Inserted {inserted} bridges into {engine.url.render_as_string(hide_password=True)}")
    finally:
        db.close()
        engine.dispose()


if __name__ == "__main__":
    seed(sys.argv[1] if len(sys.argv) > 1 else get_settings().DATABASE_URL)
