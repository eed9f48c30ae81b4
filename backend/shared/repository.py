"""
Base repository class for entity access.

Provides a common abstraction layer for all repositories, encapsulating
store access and providing shared utilities for data operations.
"""

from typing import TypeVar, Generic

from .store import KeyValueStore


T = TypeVar("T")


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for entity operations:
    - Store access via self._store
    - Generic type parameter for model type hints

    Subclasses should implement domain-specific access methods
    and keep all read-modify-write sequences behind the store's key locks.

    Example:
        class ProductRepository(BaseRepository[Product]):
            def get(self, product_id: str) -> Optional[Product]:
                return self._store.get(product_id)
    """

    def __init__(self, store: KeyValueStore[T]) -> None:
        """
        Initialize the repository with a keyed store.

        Args:
            store: Store holding this repository's entities.
        """
        self._store = store

    def count(self) -> int:
        """Number of stored entities."""
        return len(self._store)
