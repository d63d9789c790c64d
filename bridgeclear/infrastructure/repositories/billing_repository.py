"""
SQLAlchemy Implementation of the Billing Catalog Repository.
"""

from typing import Dict, List, Optional

from sqlalchemy import and_
from sqlalchemy.orm import Session, aliased

from bridgeclear.domain.models.billing import BillingPrice, BillingProduct, BillingSubscription
from bridgeclear.domain.repositories.billing_repository import BillingRepository
from bridgeclear.domain.schemas.billing import PriceRead, ProductRead, ProductWithPrices


class SQLAlchemyBillingRepository(BillingRepository):
    """Read-only pass-through to the synced Stripe tables."""

    def __init__(self, db: Session):
        self.db = db

    def get_product(self, product_id: str) -> Optional[BillingProduct]:
        return self.db.get(BillingProduct, product_id)

    def list_products(self, active: bool = True, limit: int = 20, offset: int = 0) -> List[BillingProduct]:
        query = self.db.query(BillingProduct)
        if active:
            query = query.filter(BillingProduct.active.is_(True))
        return query.order_by(BillingProduct.id).offset(offset).limit(limit).all()

    def list_products_with_prices(self, active: bool = True, limit: int = 20, offset: int = 0) -> List[ProductWithPrices]:
        # Paginate products first so a product's prices are never split across pages
        page = self.db.query(BillingProduct)
        if active:
            page = page.filter(BillingProduct.active.is_(True))
        page = page.order_by(BillingProduct.id).offset(offset).limit(limit).subquery()
        product = aliased(BillingProduct, page)

        join_on = BillingPrice.product == product.id
        if active:
            join_on = and_(join_on, BillingPrice.active.is_(True))

        rows = (
            self.db.query(product, BillingPrice)
            .outerjoin(BillingPrice, join_on)
            .order_by(product.id, BillingPrice.unit_amount.asc())
            .all()
        )

        grouped: Dict[str, ProductWithPrices] = {}
        for prod, price in rows:
            entry = grouped.get(prod.id)
            if entry is None:
                entry = ProductWithPrices(**ProductRead.model_validate(prod).model_dump(), prices=[])
                grouped[prod.id] = entry
            if price is not None:
                entry.prices.append(PriceRead.model_validate(price))
        return list(grouped.values())

    def get_price(self, price_id: str) -> Optional[BillingPrice]:
        return self.db.get(BillingPrice, price_id)

    def list_prices(self, active: bool = True, limit: int = 20, offset: int = 0) -> List[BillingPrice]:
        query = self.db.query(BillingPrice)
        if active:
            query = query.filter(BillingPrice.active.is_(True))
        return query.order_by(BillingPrice.id).offset(offset).limit(limit).all()

    def get_prices_for_product(self, product_id: str, active: bool = True) -> List[BillingPrice]:
        query = self.db.query(BillingPrice).filter(BillingPrice.product == product_id)
        if active:
            query = query.filter(BillingPrice.active.is_(True))
        return query.order_by(BillingPrice.unit_amount.asc()).all()

    def get_subscription(self, subscription_id: str) -> Optional[BillingSubscription]:
        return self.db.get(BillingSubscription, subscription_id)
