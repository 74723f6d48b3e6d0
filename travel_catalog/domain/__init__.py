"""Domain layer - Core business models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    BookingValidationError,
    CatalogError,
    PackageNotFoundError,
    PricingError,
    StorageError,
    TravelCatalogError,
)
from .models import (
    Booking,
    BookingRequest,
    Package,
    PriceBreakdown,
    PricingPolicy,
    ScoredPackage,
    SearchFilters,
)

__all__ = [
    # Models
    "Package",
    "ScoredPackage",
    "PricingPolicy",
    "PriceBreakdown",
    "SearchFilters",
    "BookingRequest",
    "Booking",
    # Errors
    "TravelCatalogError",
    "CatalogError",
    "PackageNotFoundError",
    "PricingError",
    "BookingValidationError",
    "StorageError",
]
