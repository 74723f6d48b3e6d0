"""Catalog port - Abstraction for loading the package catalog.

The catalog is read-only and loaded once; services never mutate it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol, Sequence

if TYPE_CHECKING:
    from ..domain.models import Package


class CatalogRepositoryPort(Protocol):
    """Port for reading the package catalog.

    Implementations:
    - adapters/catalog/json_repository.py (JSONCatalogRepository) - Production
    - adapters/catalog/memory_repository.py (InMemoryCatalogRepository) - Testing
    """

    def load(self) -> Sequence[Package]:
        """Load all packages in catalog order.

        Returns:
            The packages.

        Raises:
            CatalogError: If the catalog is malformed.
        """
        ...

    def get(self, package_id: int) -> Optional[Package]:
        """Get a package by id.

        Args:
            package_id: The package id to look up.

        Returns:
            The package, or None if not found.
        """
        ...
