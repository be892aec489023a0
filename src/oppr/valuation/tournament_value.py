"""First place value: (base value + TVA) * TGP * event booster."""

from __future__ import annotations

from collections.abc import Sequence

import structlog

from oppr.core.config import OPPRConfig, resolve_config
from oppr.distribution import active_results, distribute_points
from oppr.models import (
    EventBooster,
    Player,
    PlayerResult,
    TGPConfig,
    Tournament,
    TournamentResult,
    TournamentValue,
)
from oppr.valuation.base_value import calculate_base_value_for_count, count_rated_players
from oppr.valuation.boosters import get_event_booster_multiplier
from oppr.valuation.tgp import calculate_tgp
from oppr.valuation.tva import calculate_ranking_tva, calculate_rating_tva

logger = structlog.get_logger()


def calculate_first_place_value(
    base_value: float, total_tva: float, tgp: float, booster_multiplier: float
) -> float:
    """Combine the value components without intermediate rounding.

    TGP is applied to ``base_value + total_tva`` first, then the booster.
    """
    return (base_value + total_tva) * tgp * booster_multiplier


def calculate_tournament_value(
    players: Sequence[Player],
    tgp_config: TGPConfig,
    event_booster: EventBooster | str = EventBooster.NONE,
    config: OPPRConfig | None = None,
) -> TournamentValue:
    """Value an event from its field, format and booster tier.

    Args:
        players: Players counted toward the event (opted-out players excluded).
        tgp_config: Qualifying/finals format.
        event_booster: Booster tier.
        config: Coefficient set; defaults apply when None.

    Returns:
        TournamentValue with every component of the first place value.
    """
    cfg = resolve_config(config)

    rated_player_count = count_rated_players(players)
    base_value = calculate_base_value_for_count(rated_player_count, cfg)

    if rated_player_count == 0:
        tva_rating = tva_ranking = 0.0
    else:
        tva_rating = calculate_rating_tva(players, cfg)
        tva_ranking = calculate_ranking_tva(players, cfg)
    total_tva = tva_rating + tva_ranking

    tgp = calculate_tgp(tgp_config, cfg)
    booster_multiplier = get_event_booster_multiplier(event_booster, cfg)
    first_place_value = calculate_first_place_value(base_value, total_tva, tgp, booster_multiplier)

    logger.debug(
        "tournament_valued",
        rated_players=rated_player_count,
        base_value=base_value,
        tva=total_tva,
        tgp=tgp,
        booster=booster_multiplier,
        first_place_value=first_place_value,
    )

    return TournamentValue(
        base_value=base_value,
        tva_rating=tva_rating,
        tva_ranking=tva_ranking,
        total_tva=total_tva,
        tgp=tgp,
        event_booster_multiplier=booster_multiplier,
        first_place_value=first_place_value,
    )


def calculate_tournament(
    tournament: Tournament,
    results: Sequence[PlayerResult],
    config: OPPRConfig | None = None,
) -> TournamentResult:
    """Value an event and distribute its points.

    The event is valued from the players with a non-opted-out result, so
    opted-out players affect neither the value nor the distribution.
    """
    cfg = resolve_config(config)
    counted = [result.player for result in active_results(results)]
    value = calculate_tournament_value(
        counted, tournament.tgp_config, tournament.event_booster, cfg
    )
    distribution = distribute_points(results, value.first_place_value, cfg)

    logger.info(
        "tournament_calculated",
        tournament_id=tournament.id,
        players=len(distribution),
        first_place_value=value.first_place_value,
    )
    return TournamentResult(
        tournament_id=tournament.id,
        value=value,
        points_distribution=distribution,
    )
