"""In-memory catalog repository.

Wraps an explicit sequence of packages, for tests and for callers that
embed their catalog as a constant.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Sequence

from ...domain.errors import CatalogError
from ...domain.models import Package
from .json_repository import parse_catalog


@dataclass
class InMemoryCatalogRepository:
    """Catalog repository over packages held in memory.

    Implements CatalogRepositoryPort. Duplicate ids are rejected at
    construction time, as the file-backed repository does at load time.
    """

    packages: Sequence[Package] = field(default_factory=tuple)
    _by_id: Dict[int, Package] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.packages = tuple(self.packages)
        self._by_id = {}
        for package in self.packages:
            if package.id in self._by_id:
                raise CatalogError(f"Duplicate package id {package.id}")
            self._by_id[package.id] = package

    @classmethod
    def from_records(cls, records: Iterable[Dict[str, Any]]) -> InMemoryCatalogRepository:
        """Build from raw record dicts, validating them like the JSON adapter."""
        return cls(parse_catalog(list(records)))

    def load(self) -> Sequence[Package]:
        return self.packages

    def get(self, package_id: int) -> Optional[Package]:
        return self._by_id.get(package_id)

    def ids(self) -> List[int]:
        return list(self._by_id)
