"""Ranking module for the OPPR engine.

Provides the pluggable rating system protocol, the rating system registry
and the bundled Glicko, Elo and OpenSkill implementations.
"""

from __future__ import annotations

from oppr.ranking.base import (
    BaseRatingData,
    MatchResult,
    PlayerRatingResult,
    RatingSystem,
    RatingUpdateResult,
    simulate_tournament_matches,
)
from oppr.ranking.elo import EloRating, EloRatingSystem, calculate_expected_win_chance, update_elo
from oppr.ranking.glicko import GlickoRating, GlickoRatingSystem
from oppr.ranking.player import get_player_rating_systems, get_primary_rating, has_rating
from oppr.ranking.registry import (
    RatingSystemRegistry,
    default_registry,
    get_rating_system,
    get_registered_rating_systems,
    has_rating_system,
    register_rating_system,
)
from oppr.ranking.service import current_rating, update_tournament_ratings
from oppr.ranking.trueskill import OpenSkillRating, OpenSkillRatingSystem


def register_default_systems(
    registry: RatingSystemRegistry | None = None, *, freeze: bool = False
) -> RatingSystemRegistry:
    """Register the bundled rating systems.

    Call once during application startup.

    Args:
        registry: Target registry (the default registry when None).
        freeze: Freeze the registry afterwards.

    Returns:
        The registry that was populated.
    """
    target = registry if registry is not None else default_registry
    for system in (GlickoRatingSystem(), EloRatingSystem(), OpenSkillRatingSystem()):
        target.register(system)
    if freeze:
        target.freeze()
    return target


__all__ = [
    "BaseRatingData",
    "EloRating",
    "EloRatingSystem",
    "GlickoRating",
    "GlickoRatingSystem",
    "MatchResult",
    "OpenSkillRating",
    "OpenSkillRatingSystem",
    "PlayerRatingResult",
    "RatingSystem",
    "RatingSystemRegistry",
    "RatingUpdateResult",
    "calculate_expected_win_chance",
    "current_rating",
    "default_registry",
    "get_player_rating_systems",
    "get_primary_rating",
    "get_rating_system",
    "get_registered_rating_systems",
    "has_rating",
    "has_rating_system",
    "register_default_systems",
    "register_rating_system",
    "simulate_tournament_matches",
    "update_tournament_ratings",
]
