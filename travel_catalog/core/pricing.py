"""Booking price calculation and promo code lookup.

Amounts are whole currency units. Percentages are rounded half-up to the
nearest unit using ``Decimal`` so that e.g. ``12.5`` always becomes ``13``
regardless of binary float representation.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from ..domain.errors import PricingError
from ..domain.models import PriceBreakdown, PricingPolicy

DEFAULT_POLICY = PricingPolicy()


def round_half_up(value: Decimal) -> int:
    return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def _percent_of(amount: int, rate: float) -> int:
    # str() keeps the rate's decimal literal, e.g. 0.12 rather than 0.11999...
    return round_half_up(Decimal(amount) * Decimal(str(rate)))


def compute_price(
    unit_price: int,
    travellers: int,
    promo_applied: bool,
    policy: PricingPolicy = DEFAULT_POLICY,
) -> PriceBreakdown:
    """Compute subtotal, discount, tax and total for a booking.

    Args:
        unit_price: Package price per traveller.
        travellers: Number of travellers.
        promo_applied: Whether a recognized promo code was applied.
        policy: Discount/tax settings.

    Returns:
        The price breakdown.

    Raises:
        PricingError: If ``unit_price`` or ``travellers`` is negative.
    """
    if unit_price < 0:
        raise PricingError(f"Unit price must be >= 0, got {unit_price}")
    if travellers < 0:
        raise PricingError(f"Travellers must be >= 0, got {travellers}")

    subtotal = unit_price * travellers
    discount = 0
    if promo_applied:
        discount = min(policy.discount_cap, _percent_of(subtotal, policy.discount_rate))
    discount = max(0, min(discount, subtotal))
    tax = _percent_of(subtotal - discount, policy.tax_rate)
    total = subtotal - discount + tax

    assert min(subtotal, discount, tax, total) >= 0
    return PriceBreakdown(subtotal=subtotal, discount=discount, tax=tax, total=total)


def normalize_promo(code: Optional[str]) -> str:
    return (code or "").strip().upper()


def validate_promo(
    code: Optional[str], policy: PricingPolicy = DEFAULT_POLICY
) -> bool:
    """Return True if ``code`` is a recognized promo code.

    Matching is case-insensitive and ignores surrounding whitespace.
    """
    normalized = normalize_promo(code)
    return bool(normalized) and normalized in policy.promo_codes
