"""Tournament format descriptors."""

from __future__ import annotations

import datetime as dt
from enum import StrEnum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from oppr.models.player import Player

QualifyingType = Literal["none", "limited", "unlimited", "hybrid"]

TournamentFormatType = Literal[
    "none",
    "single-elimination",
    "double-elimination",
    "match-play",
    "best-game",
    "card-qualifying",
    "pin-golf",
    "flip-frenzy",
    "strike-format",
    "target-match-play",
    "hybrid",
]


class EventBooster(StrEnum):
    """Prestige tier of an event."""

    NONE = "none"
    CERTIFIED = "certified"
    CERTIFIED_PLUS = "certified-plus"
    CHAMPIONSHIP_SERIES = "championship-series"
    MAJOR = "major"


class _FormatModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)


class QualifyingConfig(_FormatModel):
    """Qualifying stage of an event.

    Attributes:
        type: Qualifying style.
        meaningful_games: Meaningful games each player plays.
        hours: Qualifying window length, for unlimited formats.
        four_player_groups: 4-player groups (2X game value).
        three_player_groups: 3-player groups (1.5X game value).
        multi_matchplay: Multi-matchplay; disables group multipliers.
        machine_count: Number of machines used in qualifying.
        total_entries: Total entry attempts allowed.
    """

    type: QualifyingType = "none"
    meaningful_games: float = 0
    hours: float | None = None
    four_player_groups: bool = False
    three_player_groups: bool = False
    multi_matchplay: bool = False
    machine_count: int | None = None
    total_entries: int | None = None


class FinalsConfig(_FormatModel):
    """Finals stage of an event."""

    format_type: TournamentFormatType = "none"
    meaningful_games: float = 0
    four_player_groups: bool = False
    three_player_groups: bool = False
    multi_matchplay: bool = False
    finalist_count: int | None = None


class TGPConfig(_FormatModel):
    """Qualifying/finals format used to grade an event.

    Accepts both snake_case and the camelCase keys of the JSON payloads,
    e.g. ``{"qualifying": {"type": "limited", "meaningfulGames": 7}}``.
    """

    qualifying: QualifyingConfig = Field(default_factory=QualifyingConfig)
    finals: FinalsConfig = Field(default_factory=FinalsConfig)
    ball_count_adjustment: float = 1.0


class Tournament(_FormatModel):
    """Event metadata and participants."""

    id: str
    name: str
    date: dt.date | dt.datetime
    players: list[Player] = Field(default_factory=list)
    tgp_config: TGPConfig = Field(default_factory=TGPConfig)
    event_booster: EventBooster = EventBooster.NONE
    allows_opt_out: bool = False
