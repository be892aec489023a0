"""Registry of rating systems, looked up by id at runtime.

The registry has two phases: rating systems are registered during
application startup, then the registry is read concurrently. Writes are
serialized by a lock, and :meth:`RatingSystemRegistry.freeze` ends the
registration phase so later writes fail loudly.
"""

from __future__ import annotations

import threading
from typing import Any

import structlog

from oppr.core.errors import (
    DuplicateRatingSystemError,
    RatingSystemNotFoundError,
    RegistryFrozenError,
)
from oppr.ranking.base import RatingSystem

logger = structlog.get_logger()


class RatingSystemRegistry:
    """Maps rating system ids to rating system instances."""

    def __init__(self) -> None:
        self._systems: dict[str, RatingSystem[Any]] = {}
        self._lock = threading.Lock()
        self._frozen = False

    @property
    def frozen(self) -> bool:
        return self._frozen

    def register(self, system: RatingSystem[Any]) -> None:
        """Register a rating system.

        Raises:
            DuplicateRatingSystemError: If the id is already registered.
            RegistryFrozenError: If the registry was frozen.
        """
        with self._lock:
            if self._frozen:
                raise RegistryFrozenError("register")
            if system.id in self._systems:
                raise DuplicateRatingSystemError(system.id)
            self._systems = {**self._systems, system.id: system}
        logger.info("rating_system_registered", system_id=system.id, name=system.name)

    def get(self, system_id: str) -> RatingSystem[Any] | None:
        """Rating system for ``system_id``, or None."""
        return self._systems.get(system_id)

    def get_rating_system(self, system_id: str) -> RatingSystem[Any]:
        """Rating system for ``system_id``.

        Raises:
            RatingSystemNotFoundError: Listing the registered ids (or ``none``).
        """
        system = self._systems.get(system_id)
        if system is None:
            logger.warning("rating_system_not_found", system_id=system_id)
            raise RatingSystemNotFoundError(system_id, self._systems)
        return system

    def has(self, system_id: str) -> bool:
        return system_id in self._systems

    def get_all(self) -> list[str]:
        """Registered ids in registration order."""
        return list(self._systems)

    def freeze(self) -> None:
        """End the registration phase."""
        with self._lock:
            self._frozen = True

    def unregister(self, system_id: str) -> bool:
        """Remove a rating system (tests only).

        Returns:
            True if removed, False if the id was not registered.
        """
        with self._lock:
            if self._frozen:
                raise RegistryFrozenError("unregister")
            if system_id not in self._systems:
                return False
            self._systems = {k: v for k, v in self._systems.items() if k != system_id}
            return True

    def clear(self) -> None:
        """Remove every rating system and reopen registration (tests only)."""
        with self._lock:
            self._systems = {}
            self._frozen = False

    def __contains__(self, system_id: object) -> bool:
        return system_id in self._systems

    def __len__(self) -> int:
        return len(self._systems)


default_registry = RatingSystemRegistry()


def register_rating_system(
    system: RatingSystem[Any], registry: RatingSystemRegistry | None = None
) -> None:
    """Register with ``registry`` (the default registry when None)."""
    _resolve(registry).register(system)


def get_rating_system(
    system_id: str, registry: RatingSystemRegistry | None = None
) -> RatingSystem[Any]:
    """Look up a rating system, raising if it is not registered."""
    return _resolve(registry).get_rating_system(system_id)


def has_rating_system(system_id: str, registry: RatingSystemRegistry | None = None) -> bool:
    return _resolve(registry).has(system_id)


def get_registered_rating_systems(registry: RatingSystemRegistry | None = None) -> list[str]:
    return _resolve(registry).get_all()


def _resolve(registry: RatingSystemRegistry | None) -> RatingSystemRegistry:
    return registry if registry is not None else default_registry
