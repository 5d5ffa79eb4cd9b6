# Standard library imports
from typing import Any, Callable, Dict, Hashable


class BaseContainer:
    """
    Minimal dependency injection container.

    Keys are usually classes (interfaces or use cases) but may be plain
    strings for infrastructure handles such as collections.
    - Singletons: one shared instance, registered eagerly.
    - Factories: a new instance built on every ``get``.
    """

    def __init__(self) -> None:
        self._singletons: Dict[Hashable, Any] = {}
        self._factories: Dict[Hashable, Callable[[], Any]] = {}

    def register_singleton(self, key: Hashable, instance: Any) -> None:
        self._singletons[key] = instance

    def register_factory(self, key: Hashable, factory: Callable[[], Any]) -> None:
        self._factories[key] = factory

    def get(self, key: Hashable) -> Any:
        """
        Resolve a registered dependency

        Raises:
            KeyError: If nothing is registered under the key
        """
        if key in self._singletons:
            return self._singletons[key]
        if key in self._factories:
            return self._factories[key]()
        name = getattr(key, "__name__", key)
        raise KeyError(f"No dependency registered for {name}")

    def is_registered(self, key: Hashable) -> bool:
        return key in self._singletons or key in self._factories
