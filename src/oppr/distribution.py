"""Point distribution: linear share plus a top-heavy dynamic share.

Linear points give every finisher a slice of 10% of the first place value:

    (player_count + 1 - position) * 0.10 * (first_place_value / player_count)

Dynamic points give 90% of the first place value to the winner and decay
steeply toward the edge of the dynamic window, which covers the top half of
the rated field (at most 64 positions):

    cap = min(rated_player_count / 2, 64)
    (1 - ((position - 1) / cap) ** 0.7) ** 3 * 0.90 * first_place_value

Positions at or beyond the window edge get no dynamic points.
"""

from __future__ import annotations

from collections.abc import Sequence

from oppr.core.config import OPPRConfig, resolve_config
from oppr.core.errors import ValidationError
from oppr.models import PlayerResult, PointDistribution


def calculate_linear_points(
    position: int,
    player_count: int,
    first_place_value: float,
    config: OPPRConfig | None = None,
) -> float:
    """Linear share for a finishing position."""
    constants = resolve_config(config).point_distribution
    return (
        (player_count + 1 - position)
        * constants.linear_percentage
        * (first_place_value / player_count)
    )


def calculate_dynamic_points(
    position: int,
    rated_player_count: int,
    first_place_value: float,
    config: OPPRConfig | None = None,
) -> float:
    """Dynamic share for a finishing position.

    Args:
        position: Finishing position, 1 is first.
        rated_player_count: Rated players in the event.
        first_place_value: Value of first place.
        config: Coefficient set; defaults apply when None.

    Returns:
        Dynamic points, exactly 0 outside the dynamic window.
    """
    constants = resolve_config(config).point_distribution
    dynamic_cap = min(rated_player_count / 2, constants.max_dynamic_players)

    if position - 1 >= dynamic_cap:
        return 0.0

    position_ratio = (position - 1) / dynamic_cap
    decay_factor = (
        1 - position_ratio**constants.position_exponent
    ) ** constants.value_exponent
    return decay_factor * constants.dynamic_percentage * first_place_value


def calculate_player_points(
    position: int,
    player_count: int,
    rated_player_count: int,
    first_place_value: float,
    config: OPPRConfig | None = None,
) -> float:
    """Total points for one position without building the full distribution."""
    linear = calculate_linear_points(position, player_count, first_place_value, config)
    dynamic = calculate_dynamic_points(position, rated_player_count, first_place_value, config)
    return linear + dynamic


def get_points_for_position(
    position: int,
    player_count: int,
    rated_player_count: int,
    first_place_value: float,
    config: OPPRConfig | None = None,
) -> float:
    """Alias of :func:`calculate_player_points` for preview lookups."""
    return calculate_player_points(
        position, player_count, rated_player_count, first_place_value, config
    )


def calculate_position_percentage(
    position: int,
    player_count: int,
    rated_player_count: int,
    config: OPPRConfig | None = None,
) -> float:
    """Fraction of the first place value a position receives (0.0 - 1.0)."""
    return calculate_player_points(position, player_count, rated_player_count, 100, config) / 100


def active_results(results: Sequence[PlayerResult]) -> list[PlayerResult]:
    """Results that take part in point distribution (not opted out)."""
    return [result for result in results if not result.opted_out]


def distribute_points(
    results: Sequence[PlayerResult],
    first_place_value: float,
    config: OPPRConfig | None = None,
) -> list[PointDistribution]:
    """Distribute an event's value across its finishers.

    Opted-out players are dropped before sizing the field, so they change
    neither the player count nor the rated player count.

    Args:
        results: Finishing results for the event.
        first_place_value: Value of first place.
        config: Coefficient set; defaults apply when None.

    Returns:
        One PointDistribution per active result, in input order.

    Raises:
        ValidationError: If no active results remain.
    """
    cfg = resolve_config(config)
    active = active_results(results)
    if not active:
        raise ValidationError("Cannot distribute points without active results")

    player_count = len(active)
    rated_player_count = sum(1 for result in active if result.player.is_rated)

    distributions = []
    for result in active:
        linear = calculate_linear_points(result.position, player_count, first_place_value, cfg)
        dynamic = calculate_dynamic_points(
            result.position, rated_player_count, first_place_value, cfg
        )
        distributions.append(
            PointDistribution(
                player=result.player,
                position=result.position,
                linear_points=linear,
                dynamic_points=dynamic,
                total_points=linear + dynamic,
            )
        )
    return distributions
