"""Minimal service container for host applications.

Hosts register factories by name; shared bindings are built once and cached.
The string service provider binds a StringToolkit under "string", built from
whatever provider the host stored under "config".

Usage:
    from stringkit.container import create_container

    container = create_container({"encoding": "UTF-8", ...})
    toolkit = container["string"]
    assert toolkit is container["string"]

    # Register custom services
    container.share("slugger", lambda c: c["string"].slug)
"""

import logging
import threading
from abc import ABC, abstractmethod
from typing import Any, Callable

from .config import as_provider
from .errors import BindingResolutionError
from .toolkit import StringToolkit

logger = logging.getLogger(__name__)

Factory = Callable[["Container"], Any]


class Container:
    """Name -> factory registry with shared (singleton) bindings."""

    def __init__(self):
        self._bindings: dict[str, tuple[Factory, bool]] = {}
        self._instances: dict[str, Any] = {}
        # Reentrant: factories resolve their own dependencies
        self._lock = threading.RLock()

    def bind(self, name: str, factory: Factory, shared: bool = False) -> None:
        """Register a factory.

        Args:
            name: Name to register under.
            factory: Callable receiving the container and returning the service.
            shared: Build once and return the same instance afterwards.
        """
        with self._lock:
            self._bindings[name] = (factory, shared)
            # Clear cached instance if exists
            self._instances.pop(name, None)
        logger.debug("Bound %s (shared=%s)", name, shared)

    def share(self, name: str, factory: Factory) -> None:
        """Register a factory whose result is built once and cached."""
        self.bind(name, factory, shared=True)

    def instance(self, name: str, obj: Any) -> None:
        """Register an already built object."""
        with self._lock:
            self._bindings.pop(name, None)
            self._instances[name] = obj

    def bound(self, name: str) -> bool:
        return name in self._instances or name in self._bindings

    def forget(self, name: str) -> None:
        """Drop a binding and any cached instance."""
        with self._lock:
            self._bindings.pop(name, None)
            self._instances.pop(name, None)

    def make(self, name: str) -> Any:
        """Resolve a service by name.

        Raises:
            BindingResolutionError: if nothing is bound under name.
        """
        with self._lock:
            if name in self._instances:
                return self._instances[name]

            if name not in self._bindings:
                raise BindingResolutionError(
                    f"Unknown service: {name}. Available: {self.list_bindings()}"
                )

            factory, shared = self._bindings[name]
            obj = factory(self)
            if shared:
                self._instances[name] = obj
            return obj

    def list_bindings(self) -> list[str]:
        """List registered service names."""
        return sorted(set(self._bindings) | set(self._instances))

    def __getitem__(self, name: str) -> Any:
        return self.make(name)

    def __setitem__(self, name: str, obj: Any) -> None:
        self.instance(name, obj)

    def __contains__(self, name: str) -> bool:
        return self.bound(name)


class ServiceProvider(ABC):
    """Base class for objects that register services into a container."""

    def __init__(self, container: Container):
        self.container = container

    @abstractmethod
    def register(self) -> None:
        """Register bindings into the container."""
        pass

    def boot(self) -> None:
        """Hook run after every provider has registered."""
        pass

    def provides(self) -> list[str]:
        """Names of the services this provider registers."""
        return []


class StringServiceProvider(ServiceProvider):
    """Registers a shared StringToolkit under "string"."""

    def boot(self) -> None:
        """Make sure a configuration provider is available under "config"."""
        if not self.container.bound("config"):
            self.container.instance("config", as_provider(None))

    def register(self) -> None:
        self.container.share("string", self._make_toolkit)

    @staticmethod
    def _make_toolkit(container: Container) -> StringToolkit:
        return StringToolkit(as_provider(container.make("config")))

    def provides(self) -> list[str]:
        return ["string"]


def create_container(config: Any = None) -> Container:
    """Convenience function to build a container with the string service.

    Args:
        config: A ConfigProvider, a mapping, a path to a JSON file, or None
            for the bundled defaults.

    Returns:
        Container with "config" and "string" registered.
    """
    container = Container()
    container.instance("config", as_provider(config))
    provider = StringServiceProvider(container)
    provider.register()
    provider.boot()
    return container
