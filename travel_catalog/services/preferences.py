"""User-side lists: wishlist, recent searches, newsletter subscriptions.

Each service owns one key in a ListStorePort and is independent of the
catalog and pricing logic.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List

from ..core.validation import is_valid_email
from ..ports.storage import (
    NEWSLETTER_KEY,
    RECENT_SEARCHES_KEY,
    WISHLIST_KEY,
    ListStorePort,
)


@dataclass
class WishlistService:
    """Set of wished-for package ids, stored as a list without duplicates."""

    store: ListStorePort
    key: str = WISHLIST_KEY

    def ids(self) -> List[int]:
        return [int(i) for i in self.store.load(self.key)]

    def contains(self, package_id: int) -> bool:
        return package_id in self.ids()

    def toggle(self, package_id: int) -> bool:
        """Add or remove a package.

        Returns:
            True if the package is now on the wishlist.
        """
        current = self.ids()
        if package_id in current:
            self.store.save(self.key, [i for i in current if i != package_id])
            return False
        self.store.save(self.key, [*current, package_id])
        return True


@dataclass
class RecentSearchService:
    """Most recent distinct search queries, newest first.

    Attributes:
        store: Underlying list store
        limit: How many queries to keep
    """

    store: ListStorePort
    limit: int = 6
    key: str = RECENT_SEARCHES_KEY

    def list(self) -> List[str]:
        return [str(q) for q in self.store.load(self.key)]

    def record(self, query: str) -> List[str]:
        """Move ``query`` to the front of the list.

        Blank queries are ignored.

        Returns:
            The updated list.
        """
        q = (query or "").strip()
        if not q:
            return self.list()
        updated = [q, *(r for r in self.list() if r != q)][: self.limit]
        self.store.save(self.key, updated)
        return updated

    def clear(self) -> None:
        self.store.save(self.key, [])


@dataclass
class NewsletterService:
    """Newsletter sign-ups."""

    store: ListStorePort
    key: str = NEWSLETTER_KEY
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def subscribe(self, email: str) -> bool:
        """Store ``email`` if it looks valid.

        Returns:
            False for an invalid address, True once stored.
        """
        if not is_valid_email(email):
            self._logger.debug("Newsletter sign-up rejected")
            return False
        self.store.save(self.key, [*self.store.load(self.key), email])
        self._logger.info("Newsletter sign-up stored")
        return True

    def subscribers(self) -> List[str]:
        return [str(e) for e in self.store.load(self.key)]
