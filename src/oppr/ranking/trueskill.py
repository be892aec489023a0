"""TrueSkill-style rating system backed by openskill's PlackettLuce model."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from openskill.models import PlackettLuce

from oppr.ranking.base import BaseRatingData, MatchResult, RatingUpdateResult


@dataclass(frozen=True)
class OpenSkillRating(BaseRatingData):
    """Bayesian skill estimate.

    ``value`` holds the conservative ordinal (mu - 3*sigma) and
    ``deviation`` mirrors sigma.

    Attributes:
        mu: Mean skill estimate.
        sigma: Uncertainty in skill estimate.
    """

    mu: float = 25.0
    sigma: float = 25.0 / 3.0

    @classmethod
    def from_mu_sigma(cls, mu: float, sigma: float) -> OpenSkillRating:
        return cls(value=mu - 3 * sigma, deviation=sigma, mu=mu, sigma=sigma)


class OpenSkillRatingSystem:
    """PlackettLuce implementation of the RatingSystem protocol.

    Each simulated game is rated as a two-team match in sequence; the
    opponent's rating is held fixed for the event.

    Attributes:
        initial_mu: Starting mean skill estimate.
        initial_sigma: Starting uncertainty.
    """

    id = "openskill"
    name = "OpenSkill (Plackett-Luce)"

    def __init__(
        self,
        initial_mu: float = 25.0,
        initial_sigma: float | None = None,
        provisional_threshold: int = 5,
    ) -> None:
        """Initialize the rating system.

        Args:
            initial_mu: Starting mean skill estimate.
            initial_sigma: Starting uncertainty (default: mu/3).
            provisional_threshold: Events needed before the rating is established.
        """
        self.initial_mu = initial_mu
        self.initial_sigma = initial_sigma if initial_sigma else initial_mu / 3.0
        self.provisional_threshold = provisional_threshold
        self._model = PlackettLuce()

    def create_new_rating(self) -> OpenSkillRating:
        return OpenSkillRating.from_mu_sigma(self.initial_mu, self.initial_sigma)

    def update_rating(
        self,
        current_rating: OpenSkillRating,
        results: Sequence[MatchResult[OpenSkillRating]],
    ) -> RatingUpdateResult[OpenSkillRating]:
        if not results:
            return RatingUpdateResult(new_rating=current_rating)

        mu, sigma = current_rating.mu, current_rating.sigma
        for result in results:
            opponent = result.opponent_rating
            player_rating = self._model.rating(mu=mu, sigma=sigma)
            opponent_rating = self._model.rating(mu=opponent.mu, sigma=opponent.sigma)

            # Lower rank is better; equal ranks are a draw
            if result.score > 0.5:
                ranks = [1, 2]
            elif result.score < 0.5:
                ranks = [2, 1]
            else:
                ranks = [1, 1]

            new_ratings = self._model.rate([[player_rating], [opponent_rating]], ranks=ranks)
            mu, sigma = new_ratings[0][0].mu, new_ratings[0][0].sigma

        new_rating = OpenSkillRating.from_mu_sigma(mu, sigma)
        return RatingUpdateResult(
            new_rating=new_rating,
            change=new_rating.value - current_rating.value,
        )

    def get_rating_value(self, rating: OpenSkillRating) -> float:
        return rating.value

    def is_provisional(self, rating: OpenSkillRating, event_count: int) -> bool:
        return event_count < self.provisional_threshold
