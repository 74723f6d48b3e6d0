"""In-memory list store for testing.

Keeps deep copies so callers cannot mutate stored state by holding on to
a list they saved or loaded.
"""

from __future__ import annotations

import copy
import threading
from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass
class InMemoryListStore:
    """Dict-backed implementation of ListStorePort."""

    _data: Dict[str, List[Any]] = field(default_factory=dict, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    def load(self, key: str) -> List[Any]:
        with self._lock:
            return copy.deepcopy(self._data.get(key, []))

    def save(self, key: str, items: List[Any]) -> None:
        with self._lock:
            self._data[key] = copy.deepcopy(list(items))

    def keys(self) -> list[str]:
        with self._lock:
            return list(self._data.keys())

    def clear(self) -> int:
        """Drop every stored list and return how many keys were cleared."""
        with self._lock:
            count = len(self._data)
            self._data.clear()
            return count
