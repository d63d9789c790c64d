"""
SQLAlchemy Implementation of User Repository.
"""

from typing import Optional

from bridgeclear.core.exceptions import EntityNotFoundException
from bridgeclear.domain.models.user import User
from bridgeclear.domain.repositories.user_repository import UserRepository
from bridgeclear.domain.schemas.user import UserCreate
from bridgeclear.infrastructure.repositories.base_repository import SQLAlchemyRepository


class SQLAlchemyUserRepository(SQLAlchemyRepository[User], UserRepository):
    """User repository implementation using SQLAlchemy."""

    def get_by_username(self, username: str) -> Optional[User]:
        return self.db.query(User).filter(User.username == username).first()

    def create_user(self, user: UserCreate) -> User:
        return self.create(user.model_dump(exclude_none=True))

    def update_stripe_info(
        self,
        user_id: str,
        stripe_customer_id: Optional[str] = None,
        stripe_subscription_id: Optional[str] = None,
    ) -> User:
        user = self.get_by_id(user_id)
        if user is None:
            raise EntityNotFoundException("User not found", details={"id": user_id})

        changes = {}
        if stripe_customer_id is not None:
            changes["stripe_customer_id"] = stripe_customer_id
        if stripe_subscription_id is not None:
            changes["stripe_subscription_id"] = stripe_subscription_id
        return self.update(user, changes)
