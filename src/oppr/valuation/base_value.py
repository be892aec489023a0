"""Base value: 0.5 points per rated player, capped at 32."""

from __future__ import annotations

from collections.abc import Iterable

from oppr.core.config import OPPRConfig, resolve_config
from oppr.models import Player


def count_rated_players(players: Iterable[Player]) -> int:
    """Count players with the rated flag set."""
    return sum(1 for player in players if player.is_rated)


def calculate_base_value_for_count(
    rated_player_count: int, config: OPPRConfig | None = None
) -> float:
    """Base value for a known number of rated players.

    Reaches ``max_base_value`` once the count hits ``max_player_count``.
    """
    constants = resolve_config(config).base_value
    return min(rated_player_count * constants.points_per_player, constants.max_base_value)


def calculate_base_value(players: Iterable[Player], config: OPPRConfig | None = None) -> float:
    """Calculate the base value for an event.

    Only rated players count.

    Args:
        players: Event participants.
        config: Coefficient set; defaults apply when None.

    Returns:
        Base value in points.
    """
    return calculate_base_value_for_count(count_rated_players(players), config)


def is_player_rated(event_count: int, config: OPPRConfig | None = None) -> bool:
    """True once a player has reached the rated-player event threshold."""
    return event_count >= resolve_config(config).base_value.rated_player_threshold
