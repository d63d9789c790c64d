"""Checkout service — customer + checkout session orchestration."""

import structlog

from bridgeclear.config import get_settings
from bridgeclear.core.exceptions import EntityNotFoundException
from bridgeclear.domain.repositories.user_repository import UserRepository
from bridgeclear.domain.schemas.billing import CheckoutRequest, CheckoutResponse
from bridgeclear.infrastructure.stripe_client import StripeBillingClient

settings = get_settings()
logger = structlog.get_logger(__name__)


def checkout_urls() -> tuple[str, str]:
    """Success and cancel redirect targets for the hosted checkout page."""
    base = settings.FRONTEND_URL.rstrip("/")
    return base + settings.CHECKOUT_SUCCESS_PATH, base + settings.CHECKOUT_CANCEL_PATH


def start_checkout(
    billing: StripeBillingClient,
    users: UserRepository,
    request: CheckoutRequest,
    user_id: str,
) -> CheckoutResponse:
    """Create a fresh customer for the caller and open a checkout session.

    A new customer is created on every call, even for a known email.
    """
    customer = billing.create_customer(request.email, user_id)

    try:
        users.update_stripe_info(user_id, stripe_customer_id=customer.id)
    except EntityNotFoundException:
        logger.warning("Checkout caller has no user record", user_id=user_id)

    success_url, cancel_url = checkout_urls()
    session = billing.create_checkout_session(customer.id, request.price_id, success_url, cancel_url)
    return CheckoutResponse(url=session.url)
