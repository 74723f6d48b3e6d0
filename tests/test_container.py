"""Tests for configuration, logging setup and the DI container."""

import json
import logging

import pytest

from travel_catalog.adapters.storage import InMemoryListStore, JSONFileListStore
from travel_catalog.config import (
    AppConfig,
    ObservabilityConfig,
    StorageConfig,
    get_config,
    reset_config,
)
from travel_catalog.container import Container, get_container, reset_container
from travel_catalog.logging_setup import JSONFormatter, configure_logging
from travel_catalog.ports.catalog import CatalogRepositoryPort
from travel_catalog.ports.storage import ListStorePort
from travel_catalog.services import BookingService, CatalogService, RecentSearchService


@pytest.fixture
def memory_config():
    return AppConfig(storage=StorageConfig(backend="memory"))


@pytest.fixture(autouse=True)
def _fresh_globals():
    reset_config()
    reset_container()
    yield
    reset_config()
    reset_container()


def test_default_pricing_policy():
    policy = get_config().pricing.policy()
    assert policy.discount_rate == 0.12
    assert policy.discount_cap == 2500
    assert policy.tax_rate == 0.05
    assert policy.promo_codes == frozenset({"TRAVEL10", "WELCOME"})


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("TRAVEL_PRICING_DISCOUNT_CAP", "3000")
    monkeypatch.setenv("TRAVEL_PRICING_PROMO_CODES", '["summer", " winter "]')
    monkeypatch.setenv("TRAVEL_SEARCH_SUGGESTION_LIMIT", "5")
    reset_config()

    config = get_config()
    assert config.pricing.discount_cap == 3000
    assert config.pricing.promo_codes == frozenset({"SUMMER", "WINTER"})
    assert config.search.suggestion_limit == 5


def test_config_is_cached():
    assert get_config() is get_config()


def test_catalog_path_points_at_bundled_data():
    config = get_config()
    assert config.catalog.packages_path == config.project_root / "data" / "packages.json"


def test_default_container_wires_services(memory_config):
    container = Container.create_default(memory_config)

    catalog = container.resolve(CatalogService)
    assert catalog.search("beach")
    assert container.resolve(CatalogService) is catalog

    booking = container.resolve(BookingService)
    assert booking.policy == memory_config.pricing.policy()
    assert booking.max_travellers == 20
    assert isinstance(container.resolve(ListStorePort), InMemoryListStore)


def test_services_share_one_store(memory_config):
    container = Container.create_default(memory_config)
    container.resolve(RecentSearchService).record("goa")
    assert container.resolve(ListStorePort).load("recentSearches") == ["goa"]


def test_json_backend_is_default(tmp_path):
    config = AppConfig(storage=StorageConfig(data_dir=tmp_path))
    container = Container.create_default(config)
    assert isinstance(container.resolve(ListStorePort), JSONFileListStore)


def test_register_overrides_binding(memory_config):
    container = Container.create_default(memory_config)
    sentinel = object()
    container.register(CatalogRepositoryPort, lambda: sentinel)
    assert container.resolve(CatalogRepositoryPort) is sentinel


def test_non_singleton_registration():
    container = Container()
    container.register(list, list, singleton=False)
    assert container.resolve(list) is not container.resolve(list)


def test_resolve_unregistered_raises():
    container = Container()
    with pytest.raises(KeyError):
        container.resolve(CatalogService)


def test_clear_drops_bindings():
    container = Container()
    container.register(list, list)
    container.clear()
    with pytest.raises(KeyError):
        container.resolve(list)


def test_reregistering_discards_built_instance():
    container = Container()
    container.register(list, list)
    first = container.resolve(list)
    container.register(list, lambda: ["fresh"])
    assert container.resolve(list) == ["fresh"]
    assert container.resolve(list) is not first


def test_get_container_is_lazy_singleton(monkeypatch):
    monkeypatch.setenv("TRAVEL_STORAGE_BACKEND", "memory")
    reset_config()
    container = get_container()
    assert get_container() is container
    reset_container()
    assert get_container() is not container


def test_configure_logging_plain():
    logger = configure_logging(ObservabilityConfig(level="debug"))
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1
    assert not isinstance(logger.handlers[0].formatter, JSONFormatter)

    configure_logging(ObservabilityConfig())
    assert len(logger.handlers) == 1


def test_configure_logging_structured():
    logger = configure_logging(ObservabilityConfig(structured=True))
    assert isinstance(logger.handlers[0].formatter, JSONFormatter)


def test_json_formatter_includes_extra_fields():
    record = logging.makeLogRecord(
        {"name": "travel_catalog.test", "levelname": "INFO", "msg": "Search completed", "matches": 3}
    )
    data = json.loads(JSONFormatter().format(record))
    assert data["message"] == "Search completed"
    assert data["matches"] == 3
    assert data["logger"] == "travel_catalog.test"
