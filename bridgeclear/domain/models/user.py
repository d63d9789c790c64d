"""User domain model — maps to the 'users' table."""

import uuid

from sqlalchemy import Column, String, Text, DateTime
from sqlalchemy.sql import func

from bridgeclear.infrastructure.database import Base


class User(Base):
    __tablename__ = "users"

    id = Column(String(64), primary_key=True, default=lambda: str(uuid.uuid4()))
    username = Column(Text, unique=True, nullable=False, index=True)
    password = Column(Text, nullable=False)

    # Billing identifiers, attached after checkout
    stripe_customer_id = Column(String(255), nullable=True)
    stripe_subscription_id = Column(String(255), nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    def __repr__(self):
        return f"<User {self.username}>"
