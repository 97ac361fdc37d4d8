"""Process-wide lookup of message classes by fully-qualified type name."""

from __future__ import annotations

import logging
from typing import Callable, Dict, Iterator

logger = logging.getLogger(__name__)


class RegistryError(Exception):
    """Raised on conflicting registrations, unknown names, or writes after freeze."""


class MessageRegistry:
    """Maps fully-qualified schema names (``google.cloud.vision.v1.Product``)
    to the factory that constructs that message type.

    Generated modules register their classes at import time. Call
    :meth:`freeze` once startup is complete to make the mapping read-only.
    """

    def __init__(self) -> None:
        self._factories: Dict[str, Callable] = {}
        self._frozen = False

    def register(self, full_name: str, factory: Callable) -> None:
        if self._frozen:
            raise RegistryError(f"Registry is frozen; cannot register {full_name!r}")
        existing = self._factories.get(full_name)
        if existing is not None and existing is not factory:
            if getattr(existing, "__qualname__", None) != getattr(factory, "__qualname__", None) \
                    or getattr(existing, "__module__", None) != getattr(factory, "__module__", None):
                raise RegistryError(f"Type {full_name!r} is already registered")
            # Same class re-created by a module reload.
            logger.debug("Replacing registration for %s", full_name)
        self._factories[full_name] = factory

    def get(self, full_name: str) -> Callable:
        name = full_name.lstrip(".")
        try:
            return self._factories[name]
        except KeyError:
            raise RegistryError(f"Unknown message type {name!r}") from None

    def create(self, full_name: str):
        """Construct an empty instance of the named type."""
        return self.get(full_name)()

    def freeze(self) -> None:
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def __contains__(self, full_name: str) -> bool:
        return full_name.lstrip(".") in self._factories

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._factories))

    def __len__(self) -> int:
        return len(self._factories)


default_registry = MessageRegistry()
