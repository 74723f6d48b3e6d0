"""Booking service - quotes, promo codes and confirmation.

Orchestrates the booking flow:
1. Form validation
2. Promo code lookup
3. Price calculation
4. Booking construction and persistence
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import Any, List, Optional

from ..adapters.storage.booking_repository import BookingRepository
from ..core.pricing import compute_price, normalize_promo, validate_promo
from ..core.validation import parse_travellers, validate_booking
from ..domain.errors import BookingValidationError, PackageNotFoundError
from ..domain.models import Booking, BookingRequest, Package, PriceBreakdown, PricingPolicy
from ..ports.catalog import CatalogRepositoryPort
from ..ports.storage import ClockPort


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _trimmed(value: Any) -> Any:
    return value.strip() if isinstance(value, str) else value


@dataclass
class BookingService:
    """Main service for pricing and confirming bookings.

    Attributes:
        catalog: Catalog source for package prices
        bookings: Where confirmed bookings are stored
        policy: Discount, tax and promo settings
        clock: Current time source
        max_travellers: Optional upper bound on travellers per booking
    """

    catalog: CatalogRepositoryPort
    bookings: BookingRepository
    policy: PricingPolicy = field(default_factory=PricingPolicy)
    clock: ClockPort = utc_now
    max_travellers: Optional[int] = None

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def _package(self, package_id: int) -> Package:
        package = self.catalog.get(package_id)
        if package is None:
            raise PackageNotFoundError(
                f"Package not found: {package_id}",
                package_id=package_id,
            )
        return package

    def apply_promo(self, code: Optional[str]) -> bool:
        """Check a promo code; True means the discount applies."""
        ok = validate_promo(code, self.policy)
        self._logger.info("Promo code checked", extra={"accepted": ok})
        return ok

    def quote(
        self, package_id: int, travellers: int, promo_code: Optional[str] = None
    ) -> PriceBreakdown:
        """Live price breakdown for the booking form.

        Raises:
            PackageNotFoundError: If the package does not exist.
            PricingError: If ``travellers`` is negative.
        """
        package = self._package(package_id)
        return compute_price(
            package.price,
            travellers,
            validate_promo(promo_code, self.policy),
            self.policy,
        )

    def confirm(self, package_id: int, request: BookingRequest) -> Booking:
        """Validate, price and store a booking.

        Args:
            package_id: Id of the package being booked.
            request: Raw form fields. Name and email are trimmed before
                validation.

        Returns:
            The stored booking.

        Raises:
            BookingValidationError: If any form field is invalid.
            PackageNotFoundError: If the package does not exist.
        """
        request = replace(
            request,
            name=_trimmed(request.name),
            email=_trimmed(request.email),
        )
        errors = validate_booking(request, max_travellers=self.max_travellers)
        if errors:
            self._logger.info(
                "Booking rejected",
                extra={"package_id": package_id, "fields": sorted(errors)},
            )
            raise BookingValidationError("Booking validation failed", errors=errors)

        package = self._package(package_id)
        travellers = parse_travellers(request.travellers)
        assert travellers is not None

        promo_applied = validate_promo(request.promo_code, self.policy)
        price = compute_price(package.price, travellers, promo_applied, self.policy)

        created_at = self.clock()
        booking = Booking(
            id=f"BK{int(created_at.timestamp() * 1000)}",
            package_id=package.id,
            name=request.name,
            email=request.email,
            travellers=travellers,
            notes=request.notes,
            subtotal=price.subtotal,
            discount=price.discount,
            tax=price.tax,
            total=price.total,
            promo_code=normalize_promo(request.promo_code) if promo_applied else None,
            created_at=created_at,
        )
        self.bookings.add(booking)
        self._logger.info(
            "Booking confirmed",
            extra={"booking_id": booking.id, "total": booking.total},
        )
        return booking

    def list_bookings(self) -> List[Booking]:
        return self.bookings.list()
