"""Billing API routes — catalog reads and Stripe checkout."""

from fastapi import APIRouter, Depends, Query

from bridgeclear.application.services.checkout_service import start_checkout
from bridgeclear.core.exceptions import EntityNotFoundException
from bridgeclear.domain.repositories.billing_repository import BillingRepository
from bridgeclear.domain.repositories.user_repository import UserRepository
from bridgeclear.domain.schemas.billing import (
    CatalogPage,
    CheckoutRequest,
    CheckoutResponse,
    DataEnvelope,
    PriceRead,
    ProductRead,
    ProductWithPrices,
    SubscriptionRead,
)
from bridgeclear.infrastructure.stripe_client import StripeBillingClient
from bridgeclear.interfaces.deps import (
    get_billing_client,
    get_billing_repository,
    get_current_user_id,
    get_user_repository,
)

router = APIRouter(tags=["Billing"])


def catalog_page(
    active: bool = True,
    limit: int = Query(20, ge=1, le=100),
    offset: int = Query(0, ge=0),
) -> CatalogPage:
    return CatalogPage(active=active, limit=limit, offset=offset)


@router.get("/products", response_model=DataEnvelope[ProductRead])
def list_products(
    page: CatalogPage = Depends(catalog_page),
    repo: BillingRepository = Depends(get_billing_repository),
):
    products = repo.list_products(page.active, page.limit, page.offset)
    return {"data": [ProductRead.model_validate(p) for p in products]}


@router.get("/products-with-prices", response_model=DataEnvelope[ProductWithPrices])
def list_products_with_prices(
    page: CatalogPage = Depends(catalog_page),
    repo: BillingRepository = Depends(get_billing_repository),
):
    return {"data": repo.list_products_with_prices(page.active, page.limit, page.offset)}


@router.get("/prices", response_model=DataEnvelope[PriceRead])
def list_prices(
    page: CatalogPage = Depends(catalog_page),
    repo: BillingRepository = Depends(get_billing_repository),
):
    prices = repo.list_prices(page.active, page.limit, page.offset)
    return {"data": [PriceRead.model_validate(p) for p in prices]}


@router.get("/products/{product_id}/prices", response_model=DataEnvelope[PriceRead])
def list_prices_for_product(
    product_id: str,
    active: bool = True,
    repo: BillingRepository = Depends(get_billing_repository),
):
    if repo.get_product(product_id) is None:
        raise EntityNotFoundException("Product not found", details={"id": product_id})
    prices = repo.get_prices_for_product(product_id, active)
    return {"data": [PriceRead.model_validate(p) for p in prices]}


@router.get("/subscriptions/{subscription_id}", response_model=SubscriptionRead)
def get_subscription(
    subscription_id: str,
    repo: BillingRepository = Depends(get_billing_repository),
):
    subscription = repo.get_subscription(subscription_id)
    if subscription is None:
        raise EntityNotFoundException("Subscription not found", details={"id": subscription_id})
    return SubscriptionRead.model_validate(subscription)


@router.post("/checkout", response_model=CheckoutResponse)
def create_checkout_session(
    body: CheckoutRequest,
    billing: StripeBillingClient = Depends(get_billing_client),
    users: UserRepository = Depends(get_user_repository),
    user_id: str = Depends(get_current_user_id),
):
    """Create a Stripe checkout session; the client redirects to the returned url."""
    return start_checkout(billing, users, body, user_id)
