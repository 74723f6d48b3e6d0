"""Token-based package search.

Each whitespace-delimited token of the query scores a package against a
lowercased text blob built from its name, location, tags and description:

- ``+10`` when the blob contains the token as a substring
- ``+2`` more when the token is longer than two characters and some word of
  the blob starts with it

Packages scoring above zero are returned best first, ties keeping catalog
order. When nothing scores, the engine falls back to a plain substring match
of the whole query against name and location.
"""

from __future__ import annotations

import re
from typing import Iterable, List, Optional, Sequence

from ..domain.models import Package, ScoredPackage, SearchFilters

SUBSTRING_SCORE = 10
PREFIX_SCORE = 2
PREFIX_MIN_LENGTH = 3

_WORD_SPLIT = re.compile(r"\W+")


def normalize_query(query: Optional[str]) -> str:
    return (query or "").strip().lower()


def tokenize(query: Optional[str]) -> List[str]:
    """Split a query into lowercase tokens, dropping empty ones."""
    return normalize_query(query).split()


def searchable_text(package: Package) -> str:
    """Lowercased text blob a package is matched against."""
    parts = [package.name, package.location, " ".join(package.tags), package.description]
    return " ".join(parts).lower()


def score_package(tokens: Iterable[str], package: Package) -> int:
    """Score one package against already-normalized tokens.

    Args:
        tokens: Lowercase query tokens.
        package: Package to score.

    Returns:
        Non-negative relevance score.
    """
    text = searchable_text(package)
    words = _WORD_SPLIT.split(text)
    score = 0
    for token in tokens:
        if token in text:
            score += SUBSTRING_SCORE
        if len(token) >= PREFIX_MIN_LENGTH and any(w.startswith(token) for w in words):
            score += PREFIX_SCORE
    return score


def rank(query: Optional[str], catalog: Sequence[Package]) -> List[ScoredPackage]:
    """Score every package and return the positive ones, best first.

    ``sorted`` is stable, so equal scores keep catalog order.
    """
    tokens = tokenize(query)
    scored = [ScoredPackage(package=p, score=score_package(tokens, p)) for p in catalog]
    matches = [s for s in scored if s.score > 0]
    return sorted(matches, key=lambda s: s.score, reverse=True)


def search(query: Optional[str], catalog: Sequence[Package]) -> List[Package]:
    """Search the catalog by free text.

    Args:
        query: Raw user query. Empty or blank returns the whole catalog.
        catalog: Packages in catalog order.

    Returns:
        Matching packages, ranked by score, or the fallback name/location
        matches in catalog order when no package scores.
    """
    q = normalize_query(query)
    if not q:
        return list(catalog)

    ranked = rank(q, catalog)
    if ranked:
        return [s.package for s in ranked]

    return [
        p for p in catalog if q in p.name.lower() or q in p.location.lower()
    ]


def suggest(
    query: Optional[str],
    catalog: Sequence[Package],
    limit: int = 8,
    popular_limit: int = 6,
) -> List[Package]:
    """Autocomplete suggestions: top search hits, or the first packages
    of the catalog when the query is empty."""
    if not normalize_query(query):
        return list(catalog[:popular_limit])
    return search(query, catalog)[:limit]


def filter_packages(
    packages: Iterable[Package], filters: Optional[SearchFilters] = None
) -> List[Package]:
    """Apply the max-price and duration filters, preserving order."""
    if filters is None:
        return list(packages)
    return [
        p
        for p in packages
        if p.price <= filters.max_price
        and (not filters.duration or filters.duration in p.duration)
    ]
