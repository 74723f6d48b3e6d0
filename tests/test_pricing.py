import pytest

from travel_catalog.core.pricing import compute_price, validate_promo
from travel_catalog.domain.errors import PricingError
from travel_catalog.domain.models import PriceBreakdown, PricingPolicy


def test_price_without_promo():
    assert compute_price(1000, 2, False) == PriceBreakdown(
        subtotal=2000, discount=0, tax=100, total=2100
    )


def test_price_with_promo():
    # discount = round(2000 * 0.12) = 240; tax = round(1760 * 0.05) = 88
    assert compute_price(1000, 2, True) == PriceBreakdown(
        subtotal=2000, discount=240, tax=88, total=1848
    )


def test_discount_is_capped():
    price = compute_price(1_000_000, 1, True)
    assert price.discount == 2500
    assert price.tax == 49875
    assert price.total == 1_047_375


def test_rounding_is_half_up():
    # 10 * 0.05 = 0.5 rounds up to 1
    assert compute_price(10, 1, False).tax == 1
    assert compute_price(30, 1, False).tax == 2


def test_zero_travellers_costs_nothing():
    assert compute_price(5000, 0, True) == PriceBreakdown(0, 0, 0, 0)


@pytest.mark.parametrize("unit_price,travellers", [(-1, 1), (100, -2)])
def test_negative_inputs_are_rejected(unit_price, travellers):
    with pytest.raises(PricingError):
        compute_price(unit_price, travellers, False)


def test_custom_policy():
    policy = PricingPolicy(discount_rate=0.5, discount_cap=100, tax_rate=0.0)
    assert compute_price(1000, 1, True, policy) == PriceBreakdown(1000, 100, 0, 900)


def test_amounts_are_never_negative():
    for unit_price in (0, 1, 99, 12345, 987654):
        for travellers in (0, 1, 3, 20):
            for promo in (True, False):
                price = compute_price(unit_price, travellers, promo)
                assert min(price.as_dict().values()) >= 0
                assert price.discount <= 2500
                assert price.total == price.subtotal - price.discount + price.tax


@pytest.mark.parametrize(
    "code,expected",
    [
        ("travel10", True),
        ("TRAVEL10", True),
        ("  Welcome ", True),
        ("bogus", False),
        ("", False),
        (None, False),
    ],
)
def test_validate_promo(code, expected):
    assert validate_promo(code) is expected


def test_validate_promo_uses_policy_codes():
    policy = PricingPolicy(promo_codes=frozenset({"SUMMER"}))
    assert validate_promo("summer", policy)
    assert not validate_promo("welcome", policy)
