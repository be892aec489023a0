"""Elo rating system."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from oppr.ranking.base import BaseRatingData, MatchResult, RatingUpdateResult


@dataclass(frozen=True)
class EloRating(BaseRatingData):
    """Elo rating; Elo tracks no deviation."""

    value: float = 1500.0


def calculate_expected_win_chance(rating_a: float, rating_b: float) -> float:
    """Calculate expected win probability for player A against player B.

    Uses the standard Elo formula:
    E_A = 1 / (1 + 10^((R_B - R_A) / 400))

    Args:
        rating_a: Rating of player A.
        rating_b: Rating of player B.

    Returns:
        Probability that A wins (0.0 to 1.0).
    """
    return 1.0 / (1.0 + 10 ** ((rating_b - rating_a) / 400))


def update_elo(
    rating_a: float,
    rating_b: float,
    score_a: float,
    k_factor: float = 32.0,
) -> tuple[float, float]:
    """Update Elo ratings after a single game.

    Args:
        rating_a: Current rating of player A.
        rating_b: Current rating of player B.
        score_a: A's result: 1 win, 0.5 draw, 0 loss.
        k_factor: K-factor for updates.

    Returns:
        Tuple of (new_rating_a, new_rating_b).
    """
    expected_a = calculate_expected_win_chance(rating_a, rating_b)
    expected_b = 1.0 - expected_a
    score_b = 1.0 - score_a

    new_rating_a = rating_a + k_factor * (score_a - expected_a)
    new_rating_b = rating_b + k_factor * (score_b - expected_b)

    return new_rating_a, new_rating_b


class EloRatingSystem:
    """Elo implementation of the RatingSystem protocol.

    All simulated games from one event are rated against the pre-event
    rating and the changes summed, so the result does not depend on the
    order of the opponents.

    Attributes:
        initial_rating: Starting rating for new players.
        k_factor: Per-game K-factor.
        provisional_threshold: Events needed before the rating is established.
    """

    id = "elo"
    name = "Elo Rating System"

    def __init__(
        self,
        initial_rating: float = 1500.0,
        k_factor: float = 32.0,
        provisional_threshold: int = 5,
    ) -> None:
        self.initial_rating = initial_rating
        self.k_factor = k_factor
        self.provisional_threshold = provisional_threshold

    def create_new_rating(self) -> EloRating:
        return EloRating(value=self.initial_rating)

    def update_rating(
        self,
        current_rating: EloRating,
        results: Sequence[MatchResult[EloRating]],
    ) -> RatingUpdateResult[EloRating]:
        if not results:
            return RatingUpdateResult(new_rating=current_rating)

        change = 0.0
        for result in results:
            new_value, _ = update_elo(
                current_rating.value,
                result.opponent_rating.value,
                result.score,
                k_factor=self.k_factor,
            )
            change += new_value - current_rating.value

        return RatingUpdateResult(
            new_rating=EloRating(value=current_rating.value + change),
            change=change,
        )

    def get_rating_value(self, rating: EloRating) -> float:
        return rating.value

    def is_provisional(self, rating: EloRating, event_count: int) -> bool:
        return event_count < self.provisional_threshold
