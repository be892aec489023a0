"""Helpers for reading per-system ratings stored on a player."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def _value_of(rating_data: Any) -> float | None:
    if rating_data is None:
        return None
    if isinstance(rating_data, Mapping):
        return rating_data.get("value")
    return getattr(rating_data, "value", None)


def get_primary_rating(ratings: Mapping[str, Any] | None, system_id: str) -> float | None:
    """Rating value stored for ``system_id``, or None.

    Rating data may be a rating object or a mapping with a ``value`` key.
    """
    if not ratings:
        return None
    return _value_of(ratings.get(system_id))


def has_rating(ratings: Mapping[str, Any] | None, system_id: str) -> bool:
    return bool(ratings) and ratings.get(system_id) is not None


def get_player_rating_systems(ratings: Mapping[str, Any] | None) -> list[str]:
    """Ids of the systems the player has a rating for."""
    if not ratings:
        return []
    return [system_id for system_id, data in ratings.items() if data is not None]
