"""Result and derived value types."""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, field

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from oppr.models.player import Player


class PlayerResult(BaseModel):
    """One player's finish in one event."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)

    player: Player
    position: int = Field(ge=1)
    opted_out: bool = False


@dataclass(frozen=True)
class TournamentValue:
    """Breakdown of an event's first place value.

    Attributes:
        base_value: Value from rated player count.
        tva_rating: Rating-based adjustment.
        tva_ranking: Ranking-based adjustment.
        total_tva: tva_rating + tva_ranking.
        tgp: Grading percentage as a fraction (1.5 == 150%).
        event_booster_multiplier: Booster multiplier (2.0 == 200%).
        first_place_value: (base_value + total_tva) * tgp * event_booster_multiplier.
    """

    base_value: float
    tva_rating: float
    tva_ranking: float
    total_tva: float
    tgp: float
    event_booster_multiplier: float
    first_place_value: float


@dataclass(frozen=True)
class PointDistribution:
    """Points awarded to one finishing position."""

    player: Player
    position: int
    linear_points: float
    dynamic_points: float
    total_points: float


@dataclass(frozen=True)
class TournamentResult:
    """Valued event with its point distribution."""

    tournament_id: str
    value: TournamentValue
    points_distribution: list[PointDistribution] = field(default_factory=list)


@dataclass(frozen=True)
class PlayerEvent:
    """A player's points from one event, with decay applied.

    Attributes:
        tournament_id: Event identifier.
        position: Finishing position.
        points_earned: Raw points awarded.
        first_place_value: Points available for first place.
        date: Event date.
        age_in_days: Age relative to the decay reference date.
        decay_multiplier: One of 1.0, 0.75, 0.5, 0.0.
        decayed_points: points_earned * decay_multiplier.
    """

    tournament_id: str
    position: int
    points_earned: float
    first_place_value: float
    date: dt.date | dt.datetime
    age_in_days: int = 0
    decay_multiplier: float = 1.0
    decayed_points: float = 0.0


@dataclass(frozen=True)
class PlayerProfile:
    """Ranking view of one player."""

    player: Player
    events: list[PlayerEvent]
    top_events: list[PlayerEvent]
    total_points: float
    efficiency: float
    ranking: int | None = None
