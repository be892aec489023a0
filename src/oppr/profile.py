"""Player ranking profiles built from decayed event points."""

from __future__ import annotations

import dataclasses
from collections.abc import Sequence

import structlog

from oppr.core.config import OPPRConfig, resolve_config
from oppr.decay import DateLike, recalculate_time_decay
from oppr.efficiency import calculate_overall_efficiency
from oppr.models import Player, PlayerEvent, PlayerProfile, Tournament, TournamentResult

logger = structlog.get_logger()


def build_player_events(
    result: TournamentResult,
    tournament: Tournament,
    reference_date: DateLike | None = None,
    config: OPPRConfig | None = None,
) -> dict[str, PlayerEvent]:
    """Turn a calculated event into one decayed PlayerEvent per player.

    Args:
        result: Output of :func:`~oppr.valuation.calculate_tournament`.
        tournament: The event, for its date.
        reference_date: Point in time to age the event against (now when None).
        config: Coefficient set; defaults apply when None.

    Returns:
        Mapping of player id to that player's event record.
    """
    raw = [
        PlayerEvent(
            tournament_id=result.tournament_id,
            position=distribution.position,
            points_earned=distribution.total_points,
            first_place_value=result.value.first_place_value,
            date=tournament.date,
        )
        for distribution in result.points_distribution
    ]
    decayed = recalculate_time_decay(raw, reference_date, config)
    return {
        distribution.player.id: event
        for distribution, event in zip(result.points_distribution, decayed, strict=True)
    }


def build_player_profile(
    player: Player,
    events: Sequence[PlayerEvent],
    config: OPPRConfig | None = None,
) -> PlayerProfile:
    """Summarise a player's counting events.

    Only events with a non-zero decay multiplier count. The best
    ``top_events_count`` of them by decayed points make up the total.
    """
    cfg = resolve_config(config)
    active = [event for event in events if event.decay_multiplier > 0]
    top_events = sorted(active, key=lambda e: e.decayed_points, reverse=True)[
        : cfg.ranking.top_events_count
    ]
    return PlayerProfile(
        player=player,
        events=list(events),
        top_events=top_events,
        total_points=sum(event.decayed_points for event in top_events),
        efficiency=calculate_overall_efficiency(active),
    )


def rank_profiles(profiles: Sequence[PlayerProfile]) -> list[PlayerProfile]:
    """Order profiles by total points and assign 1-based rankings.

    Equal totals are ordered by player id. The returned profiles carry the
    ranking on both the profile and its player.
    """
    ordered = sorted(profiles, key=lambda p: (-p.total_points, p.player.id))
    ranked = [
        dataclasses.replace(
            profile,
            ranking=position,
            player=profile.player.model_copy(update={"ranking": position}),
        )
        for position, profile in enumerate(ordered, start=1)
    ]
    logger.debug("profiles_ranked", players=len(ranked))
    return ranked
