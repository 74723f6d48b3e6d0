"""Services layer - Application orchestration.

Available services:
- CatalogService: Browsing, search, suggestions and recommendations
- BookingService: Quotes, promo codes and booking confirmation
- WishlistService, RecentSearchService, NewsletterService: User-side lists
"""

from .booking_service import BookingService
from .catalog_service import CatalogService
from .preferences import NewsletterService, RecentSearchService, WishlistService

__all__ = [
    "CatalogService",
    "BookingService",
    "WishlistService",
    "RecentSearchService",
    "NewsletterService",
]
