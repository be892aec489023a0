"""Apply an event's results to player ratings through a rating system."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import fields, is_dataclass, replace
from typing import Any

import structlog

from oppr.core.config import OPPRConfig, resolve_config
from oppr.distribution import active_results
from oppr.models import Player, PlayerResult
from oppr.ranking.base import PlayerRatingResult, RatingSystem, simulate_tournament_matches
from oppr.ranking.glicko import GlickoRatingSystem

logger = structlog.get_logger()

# System whose rating mirrors Player.rating and Player.rating_deviation.
PRIMARY_RATING_SYSTEM = GlickoRatingSystem.id

_MAPPING_KEYS = {"ratingDeviation": "deviation", "rating_deviation": "deviation"}


def _rating_from_mapping(data: Mapping[str, Any], system: RatingSystem[Any]) -> Any:
    """Build a rating object from JSON-shaped data such as ``{"value", "ratingDeviation"}``."""
    fresh = system.create_new_rating()
    if not is_dataclass(fresh):
        return fresh
    names = {f.name for f in fields(fresh)} - {"last_updated"}
    changes = {}
    for key, value in data.items():
        name = _MAPPING_KEYS.get(key, key)
        if name in names and value is not None:
            changes[name] = value
    return replace(fresh, **changes)


def current_rating(player: Player, system: RatingSystem[Any]) -> Any:
    """Starting rating of ``player`` under ``system``.

    Stored rating objects are used as-is and mappings are converted. With
    nothing stored, the primary system starts from ``Player.rating`` and
    ``Player.rating_deviation``; other systems start fresh.
    """
    existing = player.ratings.get(system.id)
    if isinstance(existing, Mapping):
        return _rating_from_mapping(existing, system)
    if existing is not None:
        return existing
    fresh = system.create_new_rating()
    if system.id == PRIMARY_RATING_SYSTEM:
        return replace(fresh, value=player.rating, deviation=player.rating_deviation)
    return fresh


def update_tournament_ratings(
    results: Sequence[PlayerResult],
    system: RatingSystem[Any],
    config: OPPRConfig | None = None,
    opponents_range: int | None = None,
) -> list[Player]:
    """Rate one event and return updated players.

    Standings become simulated head-to-head games (see
    :func:`~oppr.ranking.base.simulate_tournament_matches`), and every
    player's rating is updated against the pre-event ratings of their
    neighbours. Only the primary (Glicko) system writes back
    ``Player.rating`` and ``Player.rating_deviation``. Inputs are never mutated.

    Args:
        results: Event results; opted-out players come back unchanged.
        system: Rating system to drive.
        config: Coefficient set; defaults apply when None.
        opponents_range: Neighbours considered on each side of a player.

    Returns:
        Players in the order of ``results``.
    """
    cfg = resolve_config(config)
    if opponents_range is None:
        opponents_range = cfg.rating.opponents_range

    active = sorted(active_results(results), key=lambda r: r.position)
    standings = [
        PlayerRatingResult(position=r.position, rating=current_rating(r.player, system))
        for r in active
    ]

    updated: dict[str, Player] = {}
    provisional = 0
    for index, result in enumerate(active):
        player = result.player
        matches = simulate_tournament_matches(index, standings, opponents_range)
        outcome = system.update_rating(standings[index].rating, matches)
        new_rating = outcome.new_rating

        changes: dict[str, Any] = {"ratings": {**player.ratings, system.id: new_rating}}
        if system.id == PRIMARY_RATING_SYSTEM:
            changes["rating"] = system.get_rating_value(new_rating)
            changes["rating_deviation"] = new_rating.deviation
        refreshed = player.with_event_count(player.event_count + 1, cfg).model_copy(
            update=changes
        )
        if system.is_provisional(new_rating, refreshed.event_count):
            provisional += 1
        updated[player.id] = refreshed

    logger.info(
        "tournament_ratings_updated",
        system_id=system.id,
        players=len(updated),
        provisional=provisional,
    )
    return [updated.get(result.player.id, result.player) for result in results]
