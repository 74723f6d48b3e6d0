"""Dependency injection container.

Registers adapters and services explicitly and resolves them by type.
Adapters are instantiated lazily on first use, and the container is
thread-safe so a single instance can back a web server.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from .config import AppConfig, get_config


@dataclass
class _Binding:
    """A factory plus, for shared bindings, the instance it built."""

    factory: Callable[[], Any]
    shared: bool = True
    instance: Optional[Any] = None
    built: bool = False

    def get(self) -> Any:
        if not self.shared:
            return self.factory()
        if not self.built:
            self.instance = self.factory()
            self.built = True
        return self.instance


@dataclass
class Container:
    """Dependency injection container.

    Usage:
        # Production
        container = Container.create_default()
        catalog = container.resolve(CatalogService)

        # Testing
        container = Container()
        container.register(CatalogRepositoryPort, lambda: InMemoryCatalogRepository(pkgs))
        repo = container.resolve(CatalogRepositoryPort)

    Attributes:
        config: Application configuration
    """

    config: AppConfig = field(default_factory=get_config)

    _bindings: Dict[type[Any], _Binding] = field(default_factory=dict, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    def register(
        self,
        port_type: type[Any],
        factory: Callable[[], Any],
        singleton: bool = True,
    ) -> None:
        """Bind ``port_type`` to ``factory``, replacing any earlier binding.

        With ``singleton`` the first resolved instance is reused; otherwise
        every ``resolve`` calls the factory again.
        """
        with self._lock:
            self._bindings[port_type] = _Binding(factory, shared=singleton)

    def resolve(self, port_type: type[Any]) -> Any:
        """Build or fetch the instance bound to ``port_type``.

        Raises:
            KeyError: If nothing is bound to the type.
        """
        with self._lock:
            binding = self._bindings.get(port_type)
            if binding is None:
                raise KeyError(f"Type not registered: {port_type}")
            return binding.get()

    def clear(self) -> None:
        """Drop every binding along with the instances it built."""
        with self._lock:
            self._bindings.clear()

    @classmethod
    def create_default(cls, config: Optional[AppConfig] = None) -> Container:
        """Create a container with default production bindings.

        The storage backend (JSON files or memory) follows
        ``config.storage.backend``.

        Args:
            config: Optional configuration override.

        Returns:
            A configured Container instance.
        """
        from .adapters.catalog import JSONCatalogRepository
        from .adapters.storage import (
            BookingRepository,
            InMemoryListStore,
            JSONFileListStore,
        )
        from .ports.catalog import CatalogRepositoryPort
        from .ports.storage import ListStorePort
        from .services import (
            BookingService,
            CatalogService,
            NewsletterService,
            RecentSearchService,
            WishlistService,
        )

        config = config or get_config()
        container = cls(config=config)

        # Catalog
        container.register(
            CatalogRepositoryPort,
            lambda: JSONCatalogRepository(config.catalog),
        )

        # Storage
        def create_store() -> ListStorePort:
            if config.storage.backend == "memory":
                return InMemoryListStore()
            return JSONFileListStore(config.storage)

        container.register(ListStorePort, create_store)
        container.register(
            BookingRepository,
            lambda: BookingRepository(container.resolve(ListStorePort)),
        )

        # Services
        container.register(
            CatalogService,
            lambda: CatalogService(
                repository=container.resolve(CatalogRepositoryPort),
                config=config.search,
            ),
        )
        container.register(
            BookingService,
            lambda: BookingService(
                catalog=container.resolve(CatalogRepositoryPort),
                bookings=container.resolve(BookingRepository),
                policy=config.pricing.policy(),
                max_travellers=config.storage.max_travellers,
            ),
        )
        container.register(
            WishlistService,
            lambda: WishlistService(container.resolve(ListStorePort)),
        )
        container.register(
            RecentSearchService,
            lambda: RecentSearchService(
                container.resolve(ListStorePort),
                limit=config.storage.recent_search_limit,
            ),
        )
        container.register(
            NewsletterService,
            lambda: NewsletterService(container.resolve(ListStorePort)),
        )

        return container


# Global default container (lazy initialized)
_default_container: Optional[Container] = None
_container_lock = threading.Lock()


def get_container() -> Container:
    """Get the default application container, creating it if needed."""
    global _default_container
    if _default_container is None:
        with _container_lock:
            if _default_container is None:
                _default_container = Container.create_default()
    return _default_container


def reset_container() -> None:
    """Reset the default container.

    Call this in tests to ensure a fresh container.
    """
    global _default_container
    with _container_lock:
        if _default_container is not None:
            _default_container.clear()
        _default_container = None
