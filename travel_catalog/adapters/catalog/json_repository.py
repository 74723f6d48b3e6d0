"""JSON catalog repository adapter.

Loads the package catalog from a JSON array of records and adds:
- Configuration injection (path from config)
- Strict record validation with pydantic (no string to number coercion)
- Id uniqueness check
- Caching of the loaded catalog
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ...config import CatalogConfig, get_config
from ...domain.errors import CatalogError
from ...domain.models import Package


class PackageRecord(BaseModel):
    """Schema of one raw catalog record."""

    model_config = ConfigDict(
        extra="ignore", str_strip_whitespace=True, strict=True
    )

    id: int
    name: str = Field(min_length=1)
    location: str
    description: str = ""
    tags: List[str] = Field(default_factory=list)
    price: int = Field(ge=0)
    duration: str = ""
    image: Optional[str] = None
    images: List[str] = Field(default_factory=list)

    def to_domain(self) -> Package:
        return Package(
            id=self.id,
            name=self.name,
            location=self.location,
            description=self.description,
            tags=tuple(self.tags),
            price=self.price,
            duration=self.duration,
            image=self.image,
            images=tuple(self.images),
        )


def parse_catalog(raw: Any, source: str = "<memory>") -> List[Package]:
    """Validate raw decoded JSON and build packages.

    Args:
        raw: Decoded JSON, expected to be a list of records.
        source: Description of the origin, used in error messages.

    Returns:
        Packages in record order.

    Raises:
        CatalogError: On a non-list payload, an invalid record or a duplicate id.
    """
    if not isinstance(raw, list):
        raise CatalogError(
            f"Catalog must be a JSON array, got {type(raw).__name__}",
            file_path=source,
        )

    packages: List[Package] = []
    seen: Dict[int, int] = {}
    for index, item in enumerate(raw):
        try:
            record = PackageRecord.model_validate(item)
        except ValidationError as e:
            raise CatalogError(
                f"Invalid package record at index {index}",
                file_path=source,
                cause=e,
            )
        if record.id in seen:
            raise CatalogError(
                f"Duplicate package id {record.id} at index {index} "
                f"(first seen at index {seen[record.id]})",
                file_path=source,
            )
        seen[record.id] = index
        packages.append(record.to_domain())
    return packages


@dataclass
class JSONCatalogRepository:
    """Catalog repository that loads from a JSON file.

    This adapter implements CatalogRepositoryPort.

    Attributes:
        config: Catalog configuration (data dir, file name)
    """

    config: CatalogConfig = field(default_factory=lambda: get_config().catalog)
    _logger: logging.Logger = field(init=False, repr=False)

    # Cached data
    _packages: Optional[List[Package]] = field(default=None, repr=False)
    _by_id: Optional[Dict[int, Package]] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load(self) -> Sequence[Package]:
        """Load the catalog from the JSON file.

        Returns:
            Packages in file order.

        Raises:
            CatalogError: If the file cannot be read or is malformed.
        """
        if self._packages is not None:
            return self._packages

        path = self.config.packages_path
        self._logger.debug("Loading catalog", extra={"path": str(path)})

        try:
            with path.open(encoding="utf-8") as f:
                raw = json.load(f)
        except (OSError, ValueError) as e:
            raise CatalogError(
                "Failed to read catalog",
                file_path=str(path),
                cause=e,
            )

        packages = parse_catalog(raw, source=str(path))
        self._packages = packages
        self._by_id = {p.id: p for p in packages}
        self._logger.info("Catalog loaded", extra={"packages": len(packages)})
        return packages

    def get(self, package_id: int) -> Optional[Package]:
        """Get a package by id.

        Args:
            package_id: The package id to look up.

        Returns:
            The package, or None if not found.
        """
        self.load()
        assert self._by_id is not None
        return self._by_id.get(package_id)

    def clear_cache(self) -> None:
        """Clear the cached catalog so the next load re-reads the file."""
        self._packages = None
        self._by_id = None
        self._logger.debug("Catalog cache cleared")
