"""Canonical coefficients for tournament valuation, distribution and decay."""

from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict, Field


class _Constants(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class BaseValueConstants(_Constants):
    """Base value: points per rated player, capped."""

    points_per_player: float = 0.5
    max_base_value: float = 32.0
    max_player_count: int = 64
    rated_player_threshold: int = 5


class RatingTVAConstants(_Constants):
    """Linear rating contribution: ``rating * coefficient - offset``."""

    max_value: float = 25.0
    coefficient: float = 0.000546875
    offset: float = 0.703125
    perfect_rating: float = 2000.0
    min_effective_rating: float = 1285.71


class RankingTVAConstants(_Constants):
    """Logarithmic ranking contribution: ``ln(ranking) * coefficient + offset``."""

    max_value: float = 50.0
    coefficient: float = -0.211675054
    offset: float = 1.459827968


class TVAConstants(_Constants):
    rating: RatingTVAConstants = Field(default_factory=RatingTVAConstants)
    ranking: RankingTVAConstants = Field(default_factory=RankingTVAConstants)
    max_players_considered: int = 64


class TGPMultipliers(_Constants):
    four_player_groups: float = 2.0
    three_player_groups: float = 1.5
    unlimited_best_game: float = 2.0
    hybrid_best_game: float = 3.0
    unlimited_card: float = 4.0


class BallAdjustments(_Constants):
    one_ball: float = 0.33
    two_ball: float = 0.66
    three_plus_ball: float = 1.0


class UnlimitedQualifyingConstants(_Constants):
    percent_per_hour: float = 0.01
    max_bonus: float = 0.2
    min_hours_for_multiplier: float = 20.0


class FlipFrenzyConstants(_Constants):
    three_ball_divisor: float = 2.0
    one_ball_divisor: float = 3.0


class FinalsRequirements(_Constants):
    min_finalists_percent: float = 0.1
    max_finalists_percent: float = 0.5


class TGPConstants(_Constants):
    """Tournament Grading Percentage coefficients (fractions, 0.04 == 4%)."""

    base_game_value: float = 0.04
    max_without_finals: float = 1.0
    max_with_finals: float = 2.0
    max_games_for_200_percent: int = 50
    multipliers: TGPMultipliers = Field(default_factory=TGPMultipliers)
    ball_adjustments: BallAdjustments = Field(default_factory=BallAdjustments)
    unlimited_qualifying: UnlimitedQualifyingConstants = Field(
        default_factory=UnlimitedQualifyingConstants
    )
    flip_frenzy: FlipFrenzyConstants = Field(default_factory=FlipFrenzyConstants)
    finals_requirements: FinalsRequirements = Field(default_factory=FinalsRequirements)


class EventBoosterConstants(_Constants):
    none: float = 1.0
    certified: float = 1.25
    certified_plus: float = 1.5
    championship_series: float = 1.5
    major: float = 2.0


class PointDistributionConstants(_Constants):
    linear_percentage: float = 0.1
    dynamic_percentage: float = 0.9
    position_exponent: float = 0.7
    value_exponent: float = 3.0
    max_dynamic_players: int = 64


class TimeDecayConstants(_Constants):
    year_0_to_1: float = 1.0
    year_1_to_2: float = 0.75
    year_2_to_3: float = 0.5
    year_3_plus: float = 0.0
    days_per_year: int = 365


class RankingConstants(_Constants):
    top_events_count: int = 15
    entry_ranking_percentile: float = 0.1


class RatingConstants(_Constants):
    """Glicko defaults shared by the rating strategies."""

    default_rating: float = 1300.0
    min_rd: float = 10.0
    max_rd: float = 200.0
    rd_decay_per_day: float = 0.3
    opponents_range: int = 32
    q: float = math.log(10) / 400
    provisional_threshold: int = 5


class ValidationConstants(_Constants):
    min_players: int = 3
    min_private_players: int = 16
    max_games_per_machine: int = 3
    min_participation_percent: float = 0.5
