"""Base protocol and data types for pluggable rating systems."""

from __future__ import annotations

import datetime as dt
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Generic, Protocol, TypeVar, runtime_checkable


@dataclass(frozen=True)
class BaseRatingData:
    """Rating data every rating system stores.

    Attributes:
        value: Primary rating value used for sorting and TVA.
        deviation: Uncertainty of the value, for systems that track one.
        last_updated: When the rating last changed.
    """

    value: float
    deviation: float | None = None
    last_updated: dt.datetime | None = None


RatingT = TypeVar("RatingT", bound=BaseRatingData)


@dataclass(frozen=True)
class MatchResult(Generic[RatingT]):
    """Result against one opponent: 1 win, 0.5 draw, 0 loss."""

    opponent_rating: RatingT
    score: float


@dataclass(frozen=True)
class RatingUpdateResult(Generic[RatingT]):
    new_rating: RatingT
    change: float | None = None


@dataclass(frozen=True)
class PlayerRatingResult(Generic[RatingT]):
    """A finishing position paired with the player's rating."""

    position: int
    rating: RatingT


@runtime_checkable
class RatingSystem(Protocol[RatingT]):
    """Protocol for rating algorithms.

    Implementations are registered by ``id`` and driven only through these
    methods, so the valuation code never depends on a concrete algorithm.
    """

    id: str
    name: str

    def create_new_rating(self) -> RatingT:
        """Initial rating for a player with no history."""
        ...

    def update_rating(
        self, current_rating: RatingT, results: Sequence[MatchResult[RatingT]]
    ) -> RatingUpdateResult[RatingT]:
        """Update a rating from results against opponents.

        Args:
            current_rating: Player's rating before the event.
            results: Head-to-head results against opponents.

        Returns:
            New rating and the change of the primary value.
        """
        ...

    def get_rating_value(self, rating: RatingT) -> float:
        """Primary value for sorting and comparison."""
        ...

    def is_provisional(self, rating: RatingT, event_count: int) -> bool:
        """Whether the rating is still provisional."""
        ...


def simulate_tournament_matches(
    player_index: int,
    standings: Sequence[PlayerRatingResult[RatingT]],
    opponents_range: int = 32,
) -> list[MatchResult[RatingT]]:
    """Turn final standings into head-to-head results for one player.

    Opponents finishing above the player count as losses, ties as draws and
    those below as wins. Only ``opponents_range`` neighbours on each side of
    the player (in position order) are used.

    Args:
        player_index: Index of the player within ``standings``.
        standings: All results, sorted by position.
        opponents_range: Neighbours considered above and below.

    Returns:
        Simulated match results in position order.
    """
    if not 0 <= player_index < len(standings):
        return []

    player_position = standings[player_index].position
    start = max(0, player_index - opponents_range)
    end = min(len(standings), player_index + opponents_range + 1)

    matches: list[MatchResult[RatingT]] = []
    for i in range(start, end):
        if i == player_index:
            continue
        opponent = standings[i]
        if opponent.position < player_position:
            score = 0.0
        elif opponent.position == player_position:
            score = 0.5
        else:
            score = 1.0
        matches.append(MatchResult(opponent_rating=opponent.rating, score=score))
    return matches
