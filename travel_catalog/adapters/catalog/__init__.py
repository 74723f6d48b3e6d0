"""Catalog adapters - Implementations of CatalogRepositoryPort.

Available implementations:
- JSONCatalogRepository: Loads packages from a JSON file
- InMemoryCatalogRepository: Serves an explicit package sequence
"""

from .json_repository import JSONCatalogRepository, PackageRecord, parse_catalog
from .memory_repository import InMemoryCatalogRepository

__all__ = [
    "JSONCatalogRepository",
    "InMemoryCatalogRepository",
    "PackageRecord",
    "parse_catalog",
]
