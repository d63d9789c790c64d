"""
User Repository Interface.
"""

from typing import Optional

from bridgeclear.domain.repositories.base import BaseRepository
from bridgeclear.domain.models.user import User
from bridgeclear.domain.schemas.user import UserCreate


class UserRepository(BaseRepository[User]):
    """Interface for User-specific operations."""

    def get_by_username(self, username: str) -> Optional[User]:
        ...

    def create_user(self, user: UserCreate) -> User:
        ...

    def update_stripe_info(
        self,
        user_id: str,
        stripe_customer_id: Optional[str] = None,
        stripe_subscription_id: Optional[str] = None,
    ) -> User:
        """Attach billing identifiers. Raises EntityNotFoundException for unknown ids."""
        ...
