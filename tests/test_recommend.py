import pytest

from travel_catalog.core.recommend import recommend, similarity
from travel_catalog.domain.models import Package


def _pkg(id, tags, price):
    return Package(id=id, name=f"Package {id}", location="Somewhere", tags=tags, price=price)


BASE = _pkg(1, ("beach", "relaxation"), 18000)
TREK = _pkg(2, ("adventure", "mountains"), 15000)
GOA = _pkg(3, ("beach", "nightlife"), 13000)
COORG = _pkg(4, ("nature", "relaxation"), 11000)

CATALOG = [BASE, TREK, GOA, COORG]


def test_similarity_combines_tag_overlap_and_price():
    # one shared tag (20) + price 5000 apart (30 - 5)
    assert similarity(BASE, GOA) == 45
    # no shared tags, price 3000 apart
    assert similarity(BASE, TREK) == 27


def test_price_score_never_goes_negative():
    far = _pkg(9, ("city",), 200000)
    assert similarity(BASE, far) == 0


def test_price_difference_is_floored_per_thousand():
    near = _pkg(9, (), 18999)
    assert similarity(BASE, near) == 30


def test_recommend_orders_by_score():
    assert recommend(1, CATALOG) == [GOA, COORG, TREK]


def test_recommend_respects_limit():
    assert recommend(1, CATALOG, limit=2) == [GOA, COORG]
    assert recommend(1, CATALOG, limit=0) == []


def test_recommend_excludes_base_package():
    for package in CATALOG:
        results = recommend(package.id, CATALOG, limit=10)
        assert package not in results
        assert len(results) == len(CATALOG) - 1


def test_recommend_unknown_id_returns_empty():
    assert recommend(999, CATALOG) == []
    assert recommend(1, []) == []


def test_ties_keep_catalog_order():
    a = _pkg(5, ("x",), 18000)
    b = _pkg(6, ("x",), 18000)
    assert recommend(1, [BASE, a, b]) == [a, b]
    assert recommend(1, [BASE, b, a]) == [b, a]


@pytest.mark.parametrize("limit", [1, 2, 3, 5])
def test_output_length_bounded_by_limit(limit):
    assert len(recommend(1, CATALOG, limit=limit)) <= limit
