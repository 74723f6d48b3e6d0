"""Storage adapters - Implementations of ListStorePort.

Available implementations:
- JSONFileListStore: One JSON file per key on disk
- InMemoryListStore: Dict-backed store for testing
- BookingRepository: Typed booking list on top of either store
"""

from .booking_repository import BookingRepository
from .json_store import JSONFileListStore
from .memory_store import InMemoryListStore

__all__ = ["JSONFileListStore", "InMemoryListStore", "BookingRepository"]
