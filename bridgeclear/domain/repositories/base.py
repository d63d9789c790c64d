"""
Base Repository Interface.
Defines the standard contract for data access operations.
"""

from typing import TypeVar, List, Optional, Any, Protocol

T = TypeVar("T")


class BaseRepository(Protocol[T]):
    """Interface for generic CRUD operations."""

    def get_by_id(self, id: Any) -> Optional[T]:
        """Get a single entity by primary key, or None when absent."""
        ...

    def list(self, skip: int = 0, limit: Optional[int] = None) -> List[T]:
        """List entities with optional pagination."""
        ...

    def create(self, obj_in: Any) -> T:
        """Create a new entity."""
        ...

    def update(self, db_obj: T, obj_in: Any) -> T:
        """Apply the fields present in obj_in to an existing entity."""
        ...
