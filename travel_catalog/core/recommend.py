"""Similar-package recommendations.

Candidates are scored by tag overlap with the base package plus a price
proximity bonus:

    score = overlap * 20 + max(0, 30 - |price difference| // 1000)
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from ..domain.models import Package, ScoredPackage

TAG_WEIGHT = 20
PRICE_SCORE_CEILING = 30
PRICE_BUCKET = 1000


def find_package(package_id: int, catalog: Sequence[Package]) -> Optional[Package]:
    return next((p for p in catalog if p.id == package_id), None)


def similarity(base: Package, candidate: Package) -> int:
    """Similarity score of ``candidate`` relative to ``base``.

    Overlap counts candidate tags that are members of the base tag set.
    """
    base_tags = base.tag_set
    overlap = sum(1 for tag in candidate.tags if tag in base_tags)
    price_diff = abs(candidate.price - base.price)
    price_score = max(0, PRICE_SCORE_CEILING - price_diff // PRICE_BUCKET)
    return overlap * TAG_WEIGHT + price_score


def rank_similar(base: Package, catalog: Sequence[Package]) -> List[ScoredPackage]:
    scored = [
        ScoredPackage(package=p, score=similarity(base, p))
        for p in catalog
        if p.id != base.id
    ]
    return sorted(scored, key=lambda s: s.score, reverse=True)


def recommend(
    package_id: int, catalog: Sequence[Package], limit: int = 3
) -> List[Package]:
    """Recommend packages similar to the one with ``package_id``.

    Args:
        package_id: Id of the base package.
        catalog: Packages in catalog order; ties keep this order.
        limit: Maximum number of recommendations.

    Returns:
        Up to ``limit`` packages, never including the base package. An
        unknown id yields an empty list.
    """
    base = find_package(package_id, catalog)
    if base is None or limit <= 0:
        return []
    return [s.package for s in rank_similar(base, catalog)[:limit]]
