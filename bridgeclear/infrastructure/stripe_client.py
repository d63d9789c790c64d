"""Stripe billing adapter.

Keeps the HTTP layer away from the Stripe SDK. Calls are synchronous and
carry no retry policy; a failure surfaces as ProviderException.
"""

import structlog
import stripe

from bridgeclear.config import get_settings
from bridgeclear.core.exceptions import ProviderException

settings = get_settings()
logger = structlog.get_logger(__name__)


class StripeBillingClient:
    """Create Stripe customers and subscription checkout sessions."""

    def __init__(self, api_key: str | None = None):
        self.api_key = api_key if api_key is not None else settings.STRIPE_SECRET_KEY

    def _ensure_configured(self) -> None:
        if not self.api_key:
            raise ProviderException("Stripe not configured")
        stripe.api_key = self.api_key

    def create_customer(self, email: str, user_id: str) -> stripe.Customer:
        """Create a new customer upstream. Existing customers are not looked up."""
        self._ensure_configured()
        try:
            customer = stripe.Customer.create(email=email, metadata={"userId": user_id})
        except stripe.StripeError as e:
            logger.error("Stripe customer creation failed", user_id=user_id, error=str(e))
            raise ProviderException("Failed to create customer") from e

        logger.info("Stripe customer created", customer_id=customer.id, user_id=user_id)
        return customer

    def create_checkout_session(
        self,
        customer_id: str,
        price_id: str,
        success_url: str,
        cancel_url: str,
    ) -> stripe.checkout.Session:
        """Create a subscription checkout session; the caller redirects to session.url."""
        self._ensure_configured()
        try:
            session = stripe.checkout.Session.create(
                customer=customer_id,
                payment_method_types=["card"],
                line_items=[{"price": price_id, "quantity": 1}],
                mode="subscription",
                success_url=success_url,
                cancel_url=cancel_url,
            )
        except stripe.StripeError as e:
            logger.error(
                "Stripe checkout session failed",
                customer_id=customer_id,
                price_id=price_id,
                error=str(e),
            )
            raise ProviderException("Failed to create checkout session") from e

        logger.info("Stripe checkout session created", session_id=session.id, price_id=price_id)
        return session
