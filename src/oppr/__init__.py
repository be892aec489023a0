"""OPPR engine: Open Pinball Player Ranking calculations.

Values events from their field strength and format, distributes points,
decays them over time and keeps pluggable player ratings.
"""

from __future__ import annotations

from oppr.core import (
    DEFAULT_CONFIG,
    ConfigurationError,
    OPPRConfig,
    OPPRError,
    RatingSystemNotFoundError,
    ValidationError,
    configure_logging,
    load_config,
)
from oppr.decay import apply_time_decay, recalculate_time_decay
from oppr.distribution import distribute_points
from oppr.importers import ParsedPlayer, parse_player_csv
from oppr.models import (
    EventBooster,
    FinalsConfig,
    Player,
    PlayerEvent,
    PlayerProfile,
    PlayerResult,
    PointDistribution,
    QualifyingConfig,
    TGPConfig,
    Tournament,
    TournamentResult,
    TournamentValue,
)
from oppr.profile import build_player_events, build_player_profile, rank_profiles
from oppr.ranking import (
    RatingSystem,
    RatingSystemRegistry,
    get_rating_system,
    register_default_systems,
    update_tournament_ratings,
)
from oppr.valuation import calculate_tournament, calculate_tournament_value

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_CONFIG",
    "ConfigurationError",
    "EventBooster",
    "FinalsConfig",
    "OPPRConfig",
    "OPPRError",
    "ParsedPlayer",
    "Player",
    "PlayerEvent",
    "PlayerProfile",
    "PlayerResult",
    "PointDistribution",
    "QualifyingConfig",
    "RatingSystem",
    "RatingSystemNotFoundError",
    "RatingSystemRegistry",
    "TGPConfig",
    "Tournament",
    "TournamentResult",
    "TournamentValue",
    "ValidationError",
    "__version__",
    "apply_time_decay",
    "build_player_events",
    "build_player_profile",
    "calculate_tournament",
    "calculate_tournament_value",
    "configure_logging",
    "distribute_points",
    "get_rating_system",
    "load_config",
    "parse_player_csv",
    "rank_profiles",
    "recalculate_time_decay",
    "register_default_systems",
    "update_tournament_ratings",
]
