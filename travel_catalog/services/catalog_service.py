"""Catalog service - browsing, search and recommendations.

Reads the catalog through the repository port and delegates scoring to
the pure functions in ``travel_catalog.core``.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from ..config import SearchConfig, get_config
from ..core.recommend import recommend
from ..core.search import filter_packages, search, suggest
from ..domain.errors import PackageNotFoundError
from ..domain.models import Package, SearchFilters
from ..ports.catalog import CatalogRepositoryPort


@dataclass
class CatalogService:
    """Use cases over the package catalog.

    Attributes:
        repository: Catalog source
        config: Search and recommendation limits
    """

    repository: CatalogRepositoryPort
    config: SearchConfig = field(default_factory=lambda: get_config().search)

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def list_packages(self) -> Sequence[Package]:
        return self.repository.load()

    def get_package(self, package_id: int) -> Package:
        """Get a package by id.

        Raises:
            PackageNotFoundError: If no package has this id.
        """
        package = self.repository.get(package_id)
        if package is None:
            raise PackageNotFoundError(
                f"Package not found: {package_id}",
                package_id=package_id,
            )
        return package

    def search(
        self, query: Optional[str], filters: Optional[SearchFilters] = None
    ) -> List[Package]:
        """Search the catalog, then apply the optional results-page filters.

        Args:
            query: Free-text query; empty returns the whole catalog.
            filters: Max price / duration filters.

        Returns:
            Matching packages, best first.
        """
        results = search(query, self.repository.load())
        filtered = filter_packages(results, filters)
        self._logger.info(
            "Search completed",
            extra={
                "query_length": len(query or ""),
                "matches": len(results),
                "after_filters": len(filtered),
            },
        )
        return filtered

    def default_filters(self, duration: Optional[str] = None) -> SearchFilters:
        return SearchFilters(max_price=self.config.default_max_price, duration=duration)

    def recommend(self, package_id: int, limit: Optional[int] = None) -> List[Package]:
        """Packages similar to ``package_id``; empty if the id is unknown."""
        if limit is None:
            limit = self.config.recommendation_limit
        results = recommend(package_id, self.repository.load(), limit)
        self._logger.debug(
            "Recommendations computed",
            extra={"package_id": package_id, "count": len(results)},
        )
        return results

    def suggest(self, query: Optional[str]) -> List[Package]:
        """Search-as-you-type suggestions."""
        return suggest(
            query,
            self.repository.load(),
            limit=self.config.suggestion_limit,
            popular_limit=self.config.popular_limit,
        )

    def highlight(self, rng: Optional[random.Random] = None) -> Optional[Package]:
        """Pick a random featured package, or None for an empty catalog."""
        packages = self.repository.load()
        if not packages:
            return None
        return (rng or random).choice(list(packages))
