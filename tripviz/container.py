"""Dependency injection container.

This module provides a simple DI container without external frameworks.
It wires renderers, the surface backend and the main service from the
application configuration.

Design principles:
1. No magic - explicit registration and resolution
2. Testable - easy to swap renderers or surfaces
3. Lazy loading - services instantiated on first use
4. Thread-safe - resolution guarded by a lock
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, TypeVar

from .config import AppConfig, get_config

T = TypeVar("T")


@dataclass
class Container:
    """Dependency injection container.

    Usage:
        # Production
        container = Container.create_default()
        service = container.resolve(TripVisualsService)

        # Testing
        container = Container()
        container.register(SurfaceFactoryPort, lambda: RecordingSurface)
        factory = container.resolve(SurfaceFactoryPort)

    Attributes:
        config: Application configuration
    """

    config: AppConfig = field(default_factory=get_config)

    _factories: Dict[type[Any], Callable[[], Any]] = field(
        default_factory=dict, repr=False
    )
    _singletons: Dict[type[Any], Any] = field(default_factory=dict, repr=False)
    _singleton_types: set[type[Any]] = field(default_factory=set, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    def register(
        self,
        port_type: type[Any],
        factory: Callable[[], Any],
        singleton: bool = True,
    ) -> None:
        """Register a factory for a port type.

        Args:
            port_type: The type (usually a Protocol) to register.
            factory: A callable that creates instances of the type.
            singleton: If True, only one instance is created.
        """
        with self._lock:
            self._factories[port_type] = factory
            if singleton:
                self._singleton_types.add(port_type)
            else:
                self._singleton_types.discard(port_type)
            self._singletons.pop(port_type, None)

    def resolve(self, port_type: type[Any]) -> Any:
        """Resolve an instance of a port type.

        Args:
            port_type: The type to resolve.

        Returns:
            An instance of the requested type.

        Raises:
            KeyError: If the type is not registered.
        """
        with self._lock:
            if port_type not in self._factories:
                raise KeyError(f"Type not registered: {port_type}")

            if port_type in self._singleton_types:
                if port_type not in self._singletons:
                    self._singletons[port_type] = self._factories[port_type]()
                return self._singletons[port_type]

            return self._factories[port_type]()

    def is_registered(self, port_type: type[Any]) -> bool:
        """Check if a type is registered."""
        return port_type in self._factories

    def clear_singletons(self) -> None:
        """Clear all cached singletons.

        Call this in tests to ensure fresh instances.
        """
        with self._lock:
            self._singletons.clear()

    def clear_all(self) -> None:
        """Clear all registrations and singletons."""
        with self._lock:
            self._factories.clear()
            self._singletons.clear()
            self._singleton_types.clear()

    @classmethod
    def create_default(cls, config: Optional[AppConfig] = None) -> Container:
        """Create a container with default production bindings.

        The surface backend and export format come from
        ``config.export``.

        Args:
            config: Optional configuration override.

        Returns:
            A configured Container instance.

        Raises:
            ConfigurationError: If the export backend cannot write the
                configured format.
        """
        from .adapters.surface import FORMAT_EXTENSIONS, surface_factory
        from .ports.rendering import (
            LogSheetRendererPort,
            RouteMapRendererPort,
            SurfaceFactoryPort,
        )
        from .services import LogSheetRenderer, RouteMapRenderer, TripVisualsService

        config = config or get_config()
        container = cls(config=config)

        backend = config.export.backend
        fmt = config.export.default_format or ("png" if backend == "pillow" else "pdf")
        factory = surface_factory(backend, fmt)

        # Surfaces
        container.register(SurfaceFactoryPort, lambda: factory)

        # Renderers
        container.register(
            RouteMapRendererPort,
            lambda: RouteMapRenderer(config.map),
        )
        container.register(
            LogSheetRendererPort,
            lambda: LogSheetRenderer(config.log_sheet),
        )

        # Main service
        def create_trip_visuals() -> TripVisualsService:
            return TripVisualsService(
                route_map_renderer=container.resolve(RouteMapRendererPort),
                log_sheet_renderer=container.resolve(LogSheetRendererPort),
                surface_factory=container.resolve(SurfaceFactoryPort),
                file_extension=FORMAT_EXTENSIONS[fmt],
                map_size=(config.map.width, config.map.height),
                sheet_size=(config.log_sheet.width, config.log_sheet.height),
                output_dir=config.export.output_dir,
            )

        container.register(TripVisualsService, create_trip_visuals)

        return container


# Global default container (lazy initialized)
_default_container: Optional[Container] = None
_container_lock = threading.Lock()


def get_container() -> Container:
    """Get the default application container.

    Returns:
        The default Container instance (creates one if needed).
    """
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
            _default_container.clear_all()
        _default_container = None
