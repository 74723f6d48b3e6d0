"""Centralized configuration using Pydantic Settings.

Configuration can be overridden via environment variables:
- TRAVEL_CATALOG_DATA_DIR=/path/to/data
- TRAVEL_PRICING_DISCOUNT_CAP=3000
- TRAVEL_STORAGE_BACKEND=memory
- TRAVEL_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import FrozenSet, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .domain.models import PricingPolicy

_PROJECT_ROOT = Path(__file__).resolve().parent.parent


class CatalogConfig(BaseSettings):
    """Catalog data configuration.

    Environment variables prefixed with TRAVEL_CATALOG_.
    """

    model_config = SettingsConfigDict(env_prefix="TRAVEL_CATALOG_")

    data_dir: Path = Field(default_factory=lambda: _PROJECT_ROOT / "data")
    packages_file: str = "packages.json"

    @property
    def packages_path(self) -> Path:
        """Full path to the packages JSON file."""
        return self.data_dir / self.packages_file


class SearchConfig(BaseSettings):
    """Search, suggestion and recommendation limits.

    Environment variables prefixed with TRAVEL_SEARCH_.
    """

    model_config = SettingsConfigDict(env_prefix="TRAVEL_SEARCH_")

    suggestion_limit: int = 8
    popular_limit: int = 6
    recommendation_limit: int = 3
    default_max_price: int = 50000


class PricingConfig(BaseSettings):
    """Discount, tax and promo code settings.

    Environment variables prefixed with TRAVEL_PRICING_.
    """

    model_config = SettingsConfigDict(env_prefix="TRAVEL_PRICING_")

    discount_rate: float = Field(default=0.12, ge=0, le=1)
    discount_cap: int = Field(default=2500, ge=0)
    tax_rate: float = Field(default=0.05, ge=0)
    promo_codes: FrozenSet[str] = frozenset({"TRAVEL10", "WELCOME"})

    @field_validator("promo_codes")
    @classmethod
    def _upper_codes(cls, value: FrozenSet[str]) -> FrozenSet[str]:
        return frozenset(code.strip().upper() for code in value if code.strip())

    def policy(self) -> PricingPolicy:
        """Build the PricingPolicy used by the pricing calculator."""
        return PricingPolicy(
            discount_rate=self.discount_rate,
            discount_cap=self.discount_cap,
            tax_rate=self.tax_rate,
            promo_codes=self.promo_codes,
        )


class StorageConfig(BaseSettings):
    """User-side storage configuration.

    Environment variables prefixed with TRAVEL_STORAGE_.
    """

    model_config = SettingsConfigDict(env_prefix="TRAVEL_STORAGE_")

    backend: Literal["json", "memory"] = "json"
    data_dir: Path = Field(default_factory=lambda: Path.cwd() / ".travel_catalog")
    recent_search_limit: int = 6
    max_travellers: int = 20


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with TRAVEL_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="TRAVEL_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = False  # Set True for JSON logging


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

    Sub-configurations can be accessed via attributes:

        config = get_config()
        print(config.catalog.packages_path)
        print(config.pricing.policy())

    Environment variables prefixed with TRAVEL_.
    """

    model_config = SettingsConfigDict(env_prefix="TRAVEL_")

    catalog: CatalogConfig = Field(default_factory=CatalogConfig)
    search: SearchConfig = Field(default_factory=SearchConfig)
    pricing: PricingConfig = Field(default_factory=PricingConfig)
    storage: StorageConfig = Field(default_factory=StorageConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)

    @property
    def project_root(self) -> Path:
        """Return the project root directory."""
        return _PROJECT_ROOT


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache."""
    get_config.cache_clear()
