from travel_catalog.core.search import (
    filter_packages,
    rank,
    score_package,
    search,
    searchable_text,
    suggest,
    tokenize,
)
from travel_catalog.domain.models import Package, SearchFilters


KERALA = Package(
    id=1,
    name="Kerala Backwaters",
    location="Alleppey, Kerala",
    description="Houseboat stay",
    tags=("beach", "relaxation"),
    price=18000,
    duration="5 Days / 4 Nights",
)
MANALI = Package(
    id=2,
    name="Manali Trek",
    location="Manali",
    description="Himalayan trek",
    tags=("adventure", "mountains"),
    price=15000,
    duration="7 Days / 6 Nights",
)
GOA = Package(
    id=3,
    name="Goa Beach",
    location="Goa",
    description="Sun and sand",
    tags=("beach", "nightlife"),
    price=13000,
    duration="3 Days / 2 Nights",
)

CATALOG = [KERALA, MANALI, GOA]


def test_empty_query_returns_catalog_unchanged():
    assert search("", CATALOG) == CATALOG
    assert search(None, CATALOG) == CATALOG
    assert search("   ", CATALOG) == CATALOG


def test_empty_catalog_returns_empty_list():
    assert search("beach", []) == []
    assert search("", []) == []


def test_tokenize_lowercases_and_drops_empty_tokens():
    assert tokenize("  Goa   BEACH ") == ["goa", "beach"]
    assert tokenize("") == []


def test_searchable_text_includes_all_fields():
    text = searchable_text(KERALA)
    assert "kerala backwaters" in text
    assert "alleppey" in text
    assert "relaxation" in text
    assert "houseboat" in text


def test_substring_and_prefix_scores_add_up():
    # "beach" is a substring (+10) and a word prefix (+2)
    assert score_package(["beach"], KERALA) == 12


def test_short_tokens_get_no_prefix_bonus():
    assert score_package(["be"], KERALA) == 10


def test_substring_inside_word_scores_without_prefix_bonus():
    # "ach" occurs inside "beach" but starts no word
    assert score_package(["ach"], KERALA) == 10


def test_scoring_is_monotonic_in_matching_tokens():
    assert score_package(["beach"], KERALA) > score_package(["xyz"], KERALA)
    assert score_package(["beach", "houseboat"], KERALA) > score_package(["beach"], KERALA)


def test_results_are_ranked_by_score():
    results = search("goa beach", CATALOG)
    assert results == [GOA, KERALA]


def test_ties_keep_catalog_order():
    results = search("beach", CATALOG)
    assert results == [KERALA, GOA]
    assert [s.score for s in rank("beach", CATALOG)] == [12, 12]


def test_exact_name_match_is_found_case_insensitively():
    for package in CATALOG:
        assert package in search(package.name.upper(), CATALOG)


def test_non_matching_packages_are_excluded():
    assert MANALI not in search("beach", CATALOG)


def test_no_match_returns_empty():
    assert search("zanzibar", CATALOG) == []


def test_suggest_returns_popular_packages_for_empty_query():
    assert suggest("", CATALOG, popular_limit=2) == [KERALA, MANALI]


def test_suggest_caps_search_results():
    assert suggest("beach", CATALOG, limit=1) == [KERALA]


def test_filter_by_max_price_and_duration():
    filters = SearchFilters(max_price=15000, duration="3")
    assert filter_packages(CATALOG, filters) == [GOA]


def test_filter_without_filters_keeps_everything():
    assert filter_packages(CATALOG) == CATALOG
    assert filter_packages(CATALOG, SearchFilters(max_price=18000)) == CATALOG
