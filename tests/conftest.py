"""Shared fixtures: in-memory SQLite database and a FastAPI test client."""

import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SEED_ON_STARTUP"] = "false"
os.environ["STRIPE_SECRET_KEY"] = ""
os.environ["DEMO_USER_ID"] = "demo-user"

from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from bridgeclear.application.services.seed_service import ensure_demo_user, seed_bridges
from bridgeclear.domain.models.bridge import Bridge
from bridgeclear.domain.models.user import User
from bridgeclear.infrastructure.database import build_engine, get_db, init_db
from bridgeclear.infrastructure.repositories.bridge_repository import SQLAlchemyBridgeRepository
from bridgeclear.infrastructure.repositories.user_repository import SQLAlchemyUserRepository
from bridgeclear.interfaces.deps import get_billing_client
from bridgeclear.main import app


# ============================================================================
# Database
# ============================================================================

@pytest.fixture
def engine():
    """Fresh in-memory database per test."""
    engine = build_engine("sqlite://", poolclass=StaticPool)
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db(engine):
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    yield session
    session.close()


@pytest.fixture
def seeded_db(db):
    """Database holding the eight demo bridges and the demo user."""
    ensure_demo_user(SQLAlchemyUserRepository(db, User), "demo-user", "demo")
    seed_bridges(SQLAlchemyBridgeRepository(db, Bridge))
    return db


# ============================================================================
# Billing
# ============================================================================

class FakeBillingClient:
    """Records calls instead of talking to Stripe."""

    def __init__(self):
        self.customers = []
        self.sessions = []

    def create_customer(self, email, user_id):
        customer = SimpleNamespace(id=f"cus_test_{len(self.customers) + 1}", email=email, user_id=user_id)
        self.customers.append(customer)
        return customer

    def create_checkout_session(self, customer_id, price_id, success_url, cancel_url):
        session_id = f"cs_test_{len(self.sessions) + 1}"
        session = SimpleNamespace(
            id=session_id,
            url=f"https://checkout.stripe.com/c/pay/{session_id}",
            customer=customer_id,
            price=price_id,
            success_url=success_url,
            cancel_url=cancel_url,
        )
        self.sessions.append(session)
        return session


@pytest.fixture
def billing_client():
    return FakeBillingClient()


# ============================================================================
# HTTP
# ============================================================================

@pytest.fixture
def client(seeded_db, billing_client):
    """Test client wired to the seeded database and the fake billing client."""

    def override_get_db():
        yield seeded_db

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_billing_client] = lambda: billing_client
    yield TestClient(app)
    app.dependency_overrides.clear()
