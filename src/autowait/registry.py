"""
Element kind registry - maps a kind tag to the constructor of its handle class
"""

import logging
from typing import Any, Callable, Dict, List, Union

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

ElementFactory = Callable[..., Any]


class ElementRegistry:
    """
    Factory table keyed by element kind.

    Factories are called with keyword arguments only (locator, session, raw, index,
    timeout, scope, registry), so any handle class with the BaseElement constructor
    signature can be registered without touching the resolver.
    """

    def __init__(self):
        self._factories: Dict[str, ElementFactory] = {}

    def register(self, kind: str, factory: ElementFactory, replace: bool = False) -> ElementFactory:
        if not isinstance(kind, str) or not kind.strip():
            raise ConfigurationError(f"Element kind must be a non-empty string, got {kind!r}")
        existing = self._factories.get(kind)
        if existing is not None and existing is not factory and not replace:
            raise ConfigurationError(f"Element kind {kind!r} is already registered to {existing!r}")
        self._factories[kind] = factory
        logger.debug("Registered element kind %r -> %r", kind, factory)
        return factory

    def element(self, kind: str, replace: bool = False):
        """Class decorator form of ``register``"""
        def decorator(cls):
            self.register(kind, cls, replace=replace)
            return cls
        return decorator

    def unregister(self, kind: str):
        self._factories.pop(kind, None)

    def kind_of(self, kind: Union[str, type]) -> str:
        """Normalise a kind given as a tag or as a registered class"""
        if isinstance(kind, str):
            if kind not in self._factories:
                raise ConfigurationError(f"Unknown element kind {kind!r}; registered: {self.kinds()}")
            return kind
        for tag, factory in self._factories.items():
            if factory is kind:
                return tag
        raise ConfigurationError(f"Element class {kind!r} is not registered")

    def create(self, kind: Union[str, type], **kwargs) -> Any:
        factory = self._factories[self.kind_of(kind)]
        kwargs.setdefault('registry', self)
        return factory(**kwargs)

    def kinds(self) -> List[str]:
        return sorted(self._factories)

    def __contains__(self, kind) -> bool:
        try:
            self.kind_of(kind)
        except ConfigurationError:
            return False
        return True


# Built-in kinds register themselves here when autowait.elements is imported
default_registry = ElementRegistry()
