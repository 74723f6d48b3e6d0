"""Travel package catalog: search, recommendations and booking pricing.

The pure query and pricing functions live in ``travel_catalog.core``;
services in ``travel_catalog.services`` wire them to catalog and storage
adapters through the container in ``travel_catalog.container``.
"""

from .core import (
    compute_price,
    recommend,
    search,
    validate_booking,
    validate_promo,
)

__all__ = [
    "search",
    "recommend",
    "compute_price",
    "validate_promo",
    "validate_booking",
]
