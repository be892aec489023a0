"""Tournament Value Adjustment from participant ratings and rankings.

Rating component: each player adds ``rating * 0.000546875 - 0.703125``
(floored at zero, so players below ~1285.71 add nothing). A field of 64
perfect (2000) players reaches the 25 point cap.

Ranking component: each ranked player adds
``ln(ranking) * -0.211675054 + 1.459827968`` (floored at zero). World #1
adds ~1.46 points; the sum is capped at 50.

Both components consider at most 64 players.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

from oppr.core.config import OPPRConfig, resolve_config
from oppr.models import Player


@dataclass(frozen=True)
class TVABreakdown:
    rating_tva: float
    ranking_tva: float
    total_tva: float


def calculate_player_rating_contribution(
    rating: float, config: OPPRConfig | None = None
) -> float:
    """Single player's rating contribution, never negative."""
    constants = resolve_config(config).tva.rating
    return max(0.0, rating * constants.coefficient - constants.offset)


def rating_contributes_to_tva(rating: float, config: OPPRConfig | None = None) -> bool:
    """True if the rating is above the minimum effective rating."""
    return rating > resolve_config(config).tva.rating.min_effective_rating


def get_top_rated_players(players: Sequence[Player], count: int = 64) -> list[Player]:
    """Top ``count`` players by rating, highest first."""
    return sorted(players, key=lambda p: p.rating, reverse=True)[:count]


def calculate_rating_tva(players: Sequence[Player], config: OPPRConfig | None = None) -> float:
    """Rating-based TVA for an event.

    Args:
        players: Event participants.
        config: Coefficient set; defaults apply when None.

    Returns:
        Sum of the top players' contributions, capped at the rating maximum.
    """
    cfg = resolve_config(config)
    top = get_top_rated_players(players, cfg.tva.max_players_considered)
    total = sum(calculate_player_rating_contribution(p.rating, cfg) for p in top)
    return min(total, cfg.tva.rating.max_value)


def calculate_player_ranking_contribution(
    ranking: float, config: OPPRConfig | None = None
) -> float:
    """Single player's ranking contribution, never negative.

    Rankings below 1 are treated as 1 so the logarithm stays defined.
    """
    constants = resolve_config(config).tva.ranking
    valid_ranking = max(1.0, ranking)
    return max(0.0, math.log(valid_ranking) * constants.coefficient + constants.offset)


def get_top_ranked_players(players: Sequence[Player], count: int = 64) -> list[Player]:
    """Top ``count`` ranked players, best (lowest) ranking first.

    Unranked players (None or non-positive ranking) are skipped.
    """
    ranked = [p for p in players if p.ranking is not None and p.ranking > 0]
    return sorted(ranked, key=lambda p: p.ranking)[:count]


def calculate_ranking_tva(players: Sequence[Player], config: OPPRConfig | None = None) -> float:
    """Ranking-based TVA for an event, capped at the ranking maximum."""
    cfg = resolve_config(config)
    top = get_top_ranked_players(players, cfg.tva.max_players_considered)
    total = sum(calculate_player_ranking_contribution(p.ranking, cfg) for p in top)
    return min(total, cfg.tva.ranking.max_value)


def calculate_total_tva(
    players: Sequence[Player], config: OPPRConfig | None = None
) -> TVABreakdown:
    """Combined rating and ranking TVA."""
    rating_tva = calculate_rating_tva(players, config)
    ranking_tva = calculate_ranking_tva(players, config)
    return TVABreakdown(
        rating_tva=rating_tva,
        ranking_tva=ranking_tva,
        total_tva=rating_tva + ranking_tva,
    )
