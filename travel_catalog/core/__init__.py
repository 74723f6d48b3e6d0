"""Pure query, pricing and validation functions over explicit data.

Nothing in this package performs I/O or keeps state between calls.
"""

from .pricing import compute_price, validate_promo
from .recommend import recommend
from .search import filter_packages, score_package, search, suggest, tokenize
from .validation import is_valid_email, validate_booking

__all__ = [
    "search",
    "score_package",
    "tokenize",
    "suggest",
    "filter_packages",
    "recommend",
    "compute_price",
    "validate_promo",
    "validate_booking",
    "is_valid_email",
]
