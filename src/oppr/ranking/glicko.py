"""Glicko rating system.

Glicko extends Elo with a rating deviation (RD) expressing confidence in
the rating. New players start uncertain (RD 200); RD shrinks as results
come in and grows again during inactivity.

See https://en.wikipedia.org/wiki/Glicko_rating_system
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, replace

from oppr.core.config import DEFAULT_CONFIG
from oppr.core.constants import RatingConstants
from oppr.ranking.base import (
    BaseRatingData,
    MatchResult,
    PlayerRatingResult,
    RatingUpdateResult,
    simulate_tournament_matches,
)


@dataclass(frozen=True)
class GlickoRating(BaseRatingData):
    """Glicko rating: ``value`` plus its rating deviation."""

    deviation: float = 200.0

    @property
    def rating_deviation(self) -> float:
        return self.deviation


class GlickoRatingSystem:
    """Glicko implementation of the RatingSystem protocol.

    Attributes:
        id: Registry id, ``"glicko"``.
        name: Display name.
        constants: Default rating, RD bounds, decay and q.
    """

    id = "glicko"
    name = "Glicko Rating System"

    def __init__(self, constants: RatingConstants | None = None) -> None:
        self.constants = constants if constants is not None else DEFAULT_CONFIG.rating

    def create_new_rating(self) -> GlickoRating:
        return GlickoRating(value=self.constants.default_rating, deviation=self.constants.max_rd)

    def update_rating(
        self,
        current_rating: GlickoRating,
        results: Sequence[MatchResult[GlickoRating]],
    ) -> RatingUpdateResult[GlickoRating]:
        """Update a rating from one rating period of results.

        With no results the rating is returned unchanged.
        """
        if not results:
            return RatingUpdateResult(new_rating=current_rating)

        new_rating = self._calculate_new_rating(current_rating, results)
        return RatingUpdateResult(
            new_rating=new_rating,
            change=new_rating.value - current_rating.value,
        )

    def get_rating_value(self, rating: GlickoRating) -> float:
        return rating.value

    def is_provisional(self, rating: GlickoRating, event_count: int) -> bool:
        return event_count < self.constants.provisional_threshold

    def apply_inactivity_decay(
        self, rating: GlickoRating, days_since_last_event: float
    ) -> GlickoRating:
        """Grow RD by 0.3 per inactive day, up to the maximum RD."""
        new_rd = min(
            rating.deviation + days_since_last_event * self.constants.rd_decay_per_day,
            self.constants.max_rd,
        )
        return replace(rating, deviation=new_rd)

    def simulate_tournament_matches(
        self,
        player_index: int,
        standings: Sequence[PlayerRatingResult[GlickoRating]],
        opponents_range: int | None = None,
    ) -> list[MatchResult[GlickoRating]]:
        """Head-to-head results from standings, 32 neighbours each side by default."""
        if opponents_range is None:
            opponents_range = self.constants.opponents_range
        return simulate_tournament_matches(player_index, standings, opponents_range)

    def _calculate_new_rating(
        self,
        current: GlickoRating,
        results: Sequence[MatchResult[GlickoRating]],
    ) -> GlickoRating:
        q = self.constants.q
        d_squared = self._calculate_d_squared(results, current.value)

        total = 0.0
        for result in results:
            opponent = result.opponent_rating
            g = self._calculate_g(opponent.deviation)
            e = self._calculate_expected_score(current.value, opponent.value, opponent.deviation)
            total += g * (result.score - e)

        inverse_variance = 1 / (current.deviation * current.deviation) + 1 / d_squared
        new_value = current.value + (q * q / inverse_variance) * total
        new_rd = math.sqrt(1 / inverse_variance)

        return GlickoRating(
            value=math.floor(new_value * 100 + 0.5) / 100,
            deviation=max(self.constants.min_rd, min(new_rd, self.constants.max_rd)),
        )

    def _calculate_g(self, rd: float) -> float:
        """g(RD) = 1 / sqrt(1 + 3 q^2 RD^2 / pi^2)."""
        q = self.constants.q
        return 1 / math.sqrt(1 + (3 * q * q * rd * rd) / (math.pi * math.pi))

    def _calculate_expected_score(
        self, rating: float, opponent_rating: float, opponent_rd: float
    ) -> float:
        """E = 1 / (1 + 10^(-g(RD) (r - r_j) / 400))."""
        g = self._calculate_g(opponent_rd)
        return 1 / (1 + 10 ** (-g * (rating - opponent_rating) / 400))

    def _calculate_d_squared(
        self, results: Sequence[MatchResult[GlickoRating]], rating: float
    ) -> float:
        """d^2 = 1 / (q^2 * sum(g^2 E (1 - E)))."""
        q = self.constants.q
        total = 0.0
        for result in results:
            opponent = result.opponent_rating
            g = self._calculate_g(opponent.deviation)
            e = self._calculate_expected_score(rating, opponent.value, opponent.deviation)
            total += g * g * e * (1 - e)
        if total == 0:
            return math.inf
        return 1 / (q * q * total)
