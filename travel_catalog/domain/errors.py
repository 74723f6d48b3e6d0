"""Typed domain errors for the travel catalog.

Expected conditions (empty query, unknown package in recommendations,
unrecognized promo code, failed form validation) never raise. These
errors cover contract violations and infrastructure failures only.

All errors inherit from TravelCatalogError and can optionally
wrap a root cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional


@dataclass
class TravelCatalogError(Exception):
    """Base error for the travel catalog domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class CatalogError(TravelCatalogError):
    """Catalog data could not be loaded or violates its invariants.

    Raised at load time for malformed records, duplicate ids or
    negative prices, so that scoring code never sees bad data.

    Attributes:
        file_path: Path to the catalog file if relevant
    """

    file_path: Optional[str] = None


@dataclass
class PackageNotFoundError(TravelCatalogError):
    """No package with the requested id exists in the catalog.

    Attributes:
        package_id: The id that was looked up
    """

    package_id: Optional[int] = None


@dataclass
class PricingError(TravelCatalogError):
    """Pricing inputs would produce a negative amount."""


@dataclass
class BookingValidationError(TravelCatalogError):
    """Booking form fields failed validation.

    Attributes:
        errors: Mapping of field name to error message
    """

    errors: Dict[str, str] = field(default_factory=dict)


@dataclass
class StorageError(TravelCatalogError):
    """A storage adapter failed to persist data.

    Attributes:
        key: Storage key being written
    """

    key: str = ""

