"""
API Dependencies.
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from bridgeclear.config import get_settings
from bridgeclear.domain.models.bridge import Bridge
from bridgeclear.domain.models.route import Route
from bridgeclear.domain.models.user import User
from bridgeclear.domain.models.vehicle_profile import VehicleProfile
from bridgeclear.domain.repositories.billing_repository import BillingRepository
from bridgeclear.domain.repositories.bridge_repository import BridgeRepository
from bridgeclear.domain.repositories.route_repository import RouteRepository
from bridgeclear.domain.repositories.user_repository import UserRepository
from bridgeclear.domain.repositories.vehicle_profile_repository import VehicleProfileRepository
from bridgeclear.infrastructure.database import get_db
from bridgeclear.infrastructure.repositories.billing_repository import SQLAlchemyBillingRepository
from bridgeclear.infrastructure.repositories.bridge_repository import SQLAlchemyBridgeRepository
from bridgeclear.infrastructure.repositories.route_repository import SQLAlchemyRouteRepository
from bridgeclear.infrastructure.repositories.user_repository import SQLAlchemyUserRepository
from bridgeclear.infrastructure.repositories.vehicle_profile_repository import SQLAlchemyVehicleProfileRepository
from bridgeclear.infrastructure.stripe_client import StripeBillingClient


def get_current_user_id() -> str:
    """Caller identity. Returns the demo user until an auth middleware supplies one."""
    return get_settings().DEMO_USER_ID


def get_bridge_repository(db: Session = Depends(get_db)) -> BridgeRepository:
    return SQLAlchemyBridgeRepository(db, Bridge)


def get_vehicle_profile_repository(db: Session = Depends(get_db)) -> VehicleProfileRepository:
    return SQLAlchemyVehicleProfileRepository(db, VehicleProfile)


def get_route_repository(db: Session = Depends(get_db)) -> RouteRepository:
    return SQLAlchemyRouteRepository(db, Route)


def get_user_repository(db: Session = Depends(get_db)) -> UserRepository:
    return SQLAlchemyUserRepository(db, User)


def get_billing_repository(db: Session = Depends(get_db)) -> BillingRepository:
    return SQLAlchemyBillingRepository(db)


def get_billing_client() -> StripeBillingClient:
    return StripeBillingClient()
