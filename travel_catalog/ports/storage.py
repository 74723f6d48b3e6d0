"""Storage ports - Injectable persistence for user-side lists.

Bookings, the wishlist, recent searches and newsletter subscriptions are
each a JSON-compatible list stored under a key. Services receive a store
instead of touching files or globals directly.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, List, Protocol

BOOKINGS_KEY = "bookings"
WISHLIST_KEY = "wishlist"
RECENT_SEARCHES_KEY = "recentSearches"
NEWSLETTER_KEY = "newsletter"


class ListStorePort(Protocol):
    """Port for keyed list storage.

    Implementations:
    - adapters/storage/json_store.py (JSONFileListStore) - Production
    - adapters/storage/memory_store.py (InMemoryListStore) - Testing
    """

    def load(self, key: str) -> List[Any]:
        """Load the list stored under ``key``.

        Args:
            key: Storage key.

        Returns:
            The stored items, or an empty list if nothing is stored.
        """
        ...

    def save(self, key: str, items: List[Any]) -> None:
        """Replace the list stored under ``key``.

        Args:
            key: Storage key.
            items: JSON-serializable items.

        Raises:
            StorageError: If the items cannot be persisted.
        """
        ...


class ClockPort(Protocol):
    """Source of the current time, injectable for deterministic tests."""

    def __call__(self) -> datetime:
        ...
