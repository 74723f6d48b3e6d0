"""JSON file list store.

One ``<key>.json`` file per key under the storage directory. Reads are
forgiving: a missing, unreadable or corrupt file loads as an empty list
and logs a warning. Writes go through a temporary file and an atomic
replace, and failures raise StorageError.
"""

from __future__ import annotations

import json
import logging
import os
import re
import tempfile
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List

from ...config import StorageConfig, get_config
from ...domain.errors import StorageError

_KEY_PATTERN = re.compile(r"^[A-Za-z0-9_\-]+$")


@dataclass
class JSONFileListStore:
    """File-backed implementation of ListStorePort.

    Attributes:
        config: Storage configuration (data directory)
    """

    config: StorageConfig = field(default_factory=lambda: get_config().storage)

    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def path_for(self, key: str) -> Path:
        """Return the file backing ``key``.

        Raises:
            StorageError: If the key is not a plain identifier.
        """
        if not _KEY_PATTERN.match(key):
            raise StorageError(f"Invalid storage key: {key!r}", key=key)
        return self.config.data_dir / f"{key}.json"

    def load(self, key: str) -> List[Any]:
        path = self.path_for(key)
        with self._lock:
            if not path.exists():
                return []
            try:
                with path.open(encoding="utf-8") as f:
                    data = json.load(f)
            except (OSError, ValueError) as e:
                self._logger.warning(
                    "Failed to read stored list",
                    extra={"key": key, "path": str(path), "error": str(e)},
                )
                return []

        if not isinstance(data, list):
            self._logger.warning(
                "Stored value is not a list",
                extra={"key": key, "type": type(data).__name__},
            )
            return []
        return data

    def save(self, key: str, items: List[Any]) -> None:
        path = self.path_for(key)
        with self._lock:
            try:
                path.parent.mkdir(parents=True, exist_ok=True)
                fd, tmp_name = tempfile.mkstemp(
                    prefix=f".{key}.", suffix=".tmp", dir=path.parent
                )
                try:
                    with os.fdopen(fd, "w", encoding="utf-8") as f:
                        json.dump(list(items), f, ensure_ascii=False, indent=2)
                    os.replace(tmp_name, path)
                except BaseException:
                    Path(tmp_name).unlink(missing_ok=True)
                    raise
            except (OSError, TypeError, ValueError) as e:
                raise StorageError(f"Failed to save {key}", key=key, cause=e)

        self._logger.debug("Stored list saved", extra={"key": key, "items": len(items)})
