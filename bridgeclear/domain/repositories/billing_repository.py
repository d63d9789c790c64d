"""
Billing Catalog Repository Interface.
Read-only access to the Stripe tables synced by the billing provider.
"""

from typing import List, Optional, Protocol

from bridgeclear.domain.models.billing import BillingPrice, BillingProduct, BillingSubscription
from bridgeclear.domain.schemas.billing import ProductWithPrices


class BillingRepository(Protocol):
    """Interface for billing catalog reads. Never writes."""

    def get_product(self, product_id: str) -> Optional[BillingProduct]:
        ...

    def list_products(self, active: bool = True, limit: int = 20, offset: int = 0) -> List[BillingProduct]:
        ...

    def list_products_with_prices(self, active: bool = True, limit: int = 20, offset: int = 0) -> List[ProductWithPrices]:
        """Products with their prices grouped beneath them, cheapest first.

        Products without any matching price are returned with an empty list.
        """
        ...

    def get_price(self, price_id: str) -> Optional[BillingPrice]:
        ...

    def list_prices(self, active: bool = True, limit: int = 20, offset: int = 0) -> List[BillingPrice]:
        ...

    def get_prices_for_product(self, product_id: str, active: bool = True) -> List[BillingPrice]:
        ...

    def get_subscription(self, subscription_id: str) -> Optional[BillingSubscription]:
        ...
