"""Value types shared across the engine."""

from oppr.models.player import Player
from oppr.models.results import (
    PlayerEvent,
    PlayerProfile,
    PlayerResult,
    PointDistribution,
    TournamentResult,
    TournamentValue,
)
from oppr.models.tournament import (
    EventBooster,
    FinalsConfig,
    QualifyingConfig,
    QualifyingType,
    TGPConfig,
    Tournament,
    TournamentFormatType,
)

__all__ = [
    "EventBooster",
    "FinalsConfig",
    "Player",
    "PlayerEvent",
    "PlayerProfile",
    "PlayerResult",
    "PointDistribution",
    "QualifyingConfig",
    "QualifyingType",
    "TGPConfig",
    "Tournament",
    "TournamentFormatType",
    "TournamentResult",
    "TournamentValue",
]
