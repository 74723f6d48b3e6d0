"""Immutable domain models for the travel catalog.

All models are frozen dataclasses with slots. They have no external
dependencies; validation of raw catalog records happens in the
catalog adapters before these objects are built.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, FrozenSet, Mapping, Optional


@dataclass(frozen=True, slots=True)
class Package:
    """A sellable travel itinerary.

    Attributes:
        id: Unique package identifier
        name: Display name
        location: Destination (city, region)
        description: Free-text description, searchable
        tags: Category keywords in display order
        price: Price per traveller in whole currency units
        duration: Display string such as '5 Days / 4 Nights'
        image: Primary image URL
        images: Additional image URLs
    """

    id: int
    name: str
    location: str
    description: str = ""
    tags: tuple[str, ...] = field(default_factory=tuple)
    price: int = 0
    duration: str = ""
    image: Optional[str] = None
    images: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        """Validate the price invariant."""
        if self.price < 0:
            raise ValueError(f"Package price must be >= 0, got {self.price}")

    @property
    def tag_set(self) -> FrozenSet[str]:
        """Tags as a set, for order-insensitive matching."""
        return frozenset(self.tags)


@dataclass(frozen=True, slots=True)
class ScoredPackage:
    """A package paired with its per-query relevance score."""

    package: Package
    score: int


@dataclass(frozen=True, slots=True)
class PricingPolicy:
    """Discount, cap, tax and promo settings used by the pricing calculator.

    Attributes:
        discount_rate: Fraction of the subtotal taken off when a promo applies
        discount_cap: Maximum discount in currency units
        tax_rate: Tax fraction applied to the post-discount amount
        promo_codes: Recognized promo codes, upper case
    """

    discount_rate: float = 0.12
    discount_cap: int = 2500
    tax_rate: float = 0.05
    promo_codes: FrozenSet[str] = frozenset({"TRAVEL10", "WELCOME"})


@dataclass(frozen=True, slots=True)
class PriceBreakdown:
    """Computed price of a booking. All amounts are non-negative."""

    subtotal: int
    discount: int
    tax: int
    total: int

    def as_dict(self) -> Dict[str, int]:
        return {
            "subtotal": self.subtotal,
            "discount": self.discount,
            "tax": self.tax,
            "total": self.total,
        }


@dataclass(frozen=True, slots=True)
class SearchFilters:
    """Post-search filters from the results page.

    Attributes:
        max_price: Upper bound on the per-traveller price (inclusive)
        duration: Substring the package duration must contain, e.g. '5'
    """

    max_price: int = 50000
    duration: Optional[str] = None


@dataclass(frozen=True, slots=True)
class BookingRequest:
    """Raw booking form input, before validation."""

    name: str = ""
    email: str = ""
    travellers: Any = 1
    notes: str = ""
    promo_code: Optional[str] = None


@dataclass(frozen=True, slots=True)
class Booking:
    """A confirmed booking, handed to the booking repository once.

    Attributes:
        id: Booking reference, 'BK' followed by epoch milliseconds
        package_id: Id of the booked package
        name: Trimmed traveller name
        email: Trimmed contact email
        travellers: Number of travellers (>= 1)
        notes: Free-text notes
        subtotal: Price before discount and tax
        discount: Promo discount
        tax: Tax on the discounted amount
        total: Amount payable
        promo_code: Applied promo code, upper case, or None
        created_at: Confirmation timestamp (timezone-aware)
    """

    id: str
    package_id: int
    name: str
    email: str
    travellers: int
    notes: str
    subtotal: int
    discount: int
    tax: int
    total: int
    promo_code: Optional[str]
    created_at: datetime

    @property
    def price(self) -> PriceBreakdown:
        return PriceBreakdown(
            subtotal=self.subtotal,
            discount=self.discount,
            tax=self.tax,
            total=self.total,
        )

    def to_record(self) -> Dict[str, Any]:
        """Serialize with the camelCase keys used by stored bookings."""
        return {
            "id": self.id,
            "packageId": self.package_id,
            "name": self.name,
            "email": self.email,
            "travellers": self.travellers,
            "notes": self.notes,
            "subtotal": self.subtotal,
            "discount": self.discount,
            "tax": self.tax,
            "total": self.total,
            "promoCode": self.promo_code,
            "createdAt": self.created_at.isoformat(),
        }

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> Booking:
        return cls(
            id=str(record["id"]),
            package_id=int(record["packageId"]),
            name=record["name"],
            email=record["email"],
            travellers=int(record["travellers"]),
            notes=record.get("notes", ""),
            subtotal=int(record["subtotal"]),
            discount=int(record["discount"]),
            tax=int(record["tax"]),
            total=int(record["total"]),
            promo_code=record.get("promoCode"),
            created_at=datetime.fromisoformat(record["createdAt"]),
        )
