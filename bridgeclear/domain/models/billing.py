"""Billing catalog models — mirror the externally-synced Stripe tables.

The service only reads these rows; a sync process owned by the billing
provider writes them.
"""

from sqlalchemy import Column, String, Text, Boolean, Integer, JSON

from bridgeclear.config import get_settings
from bridgeclear.infrastructure.database import Base

settings = get_settings()


class BillingProduct(Base):
    __tablename__ = "products"
    __table_args__ = {"schema": settings.BILLING_SCHEMA}

    id = Column(String(255), primary_key=True)
    name = Column(Text, nullable=True)
    description = Column(Text, nullable=True)
    active = Column(Boolean, nullable=True)
    metadata_ = Column("metadata", JSON, nullable=True)
    created = Column(Integer, nullable=True)

    def __repr__(self):
        return f"<BillingProduct {self.id} - {self.name}>"


class BillingPrice(Base):
    __tablename__ = "prices"
    __table_args__ = {"schema": settings.BILLING_SCHEMA}

    id = Column(String(255), primary_key=True)
    product = Column(String(255), nullable=True, index=True)
    active = Column(Boolean, nullable=True)
    currency = Column(String(16), nullable=True)
    unit_amount = Column(Integer, nullable=True)
    recurring = Column(JSON, nullable=True)
    type = Column(String(32), nullable=True)
    metadata_ = Column("metadata", JSON, nullable=True)

    def __repr__(self):
        return f"<BillingPrice {self.id} {self.unit_amount} {self.currency}>"


class BillingSubscription(Base):
    __tablename__ = "subscriptions"
    __table_args__ = {"schema": settings.BILLING_SCHEMA}

    id = Column(String(255), primary_key=True)
    customer = Column(String(255), nullable=True, index=True)
    status = Column(String(64), nullable=True)
    metadata_ = Column("metadata", JSON, nullable=True)
    current_period_end = Column(Integer, nullable=True)

    def __repr__(self):
        return f"<BillingSubscription {self.id} ({self.status})>"
