"""Input validation for events, players, results and format settings.

Every check raises :class:`~oppr.core.errors.ValidationError` with a
message naming the offending value; nothing is returned on success.
"""

from __future__ import annotations

import datetime as dt
from collections import Counter
from collections.abc import Sequence

from oppr.core.config import OPPRConfig, resolve_config
from oppr.core.errors import ValidationError
from oppr.decay import DateLike, as_utc_datetime
from oppr.models import Player, PlayerResult, TGPConfig, Tournament


def validate_minimum_players(player_count: int, config: OPPRConfig | None = None) -> None:
    minimum = resolve_config(config).validation.min_players
    if player_count < minimum:
        raise ValidationError(
            f"Tournament must have at least {minimum} players (got {player_count})"
        )


def validate_private_tournament(
    player_count: int, is_private: bool, config: OPPRConfig | None = None
) -> None:
    minimum = resolve_config(config).validation.min_private_players
    if is_private and player_count < minimum:
        raise ValidationError(
            f"Private tournament must have at least {minimum} players (got {player_count})"
        )


def validate_player(player: Player) -> None:
    if not player.id:
        raise ValidationError("Player must have an ID", field="id")
    if player.rating < 0:
        raise ValidationError(
            f"Player {player.id} has invalid rating: {player.rating}", field="rating"
        )
    if player.ranking is not None and player.ranking < 0:
        raise ValidationError(
            f"Player {player.id} has invalid ranking: {player.ranking}", field="ranking"
        )


def validate_players(players: Sequence[Player]) -> None:
    """Validate each player and reject empty lists and duplicate ids."""
    if not players:
        raise ValidationError("Players list cannot be empty")

    for player in players:
        validate_player(player)

    duplicates = [pid for pid, count in Counter(p.id for p in players).items() if count > 1]
    if duplicates:
        raise ValidationError(f"Duplicate player IDs found: {', '.join(duplicates)}")


def validate_tgp_config(tgp_config: TGPConfig, config: OPPRConfig | None = None) -> None:
    """Reject negative game counts and hours, bad ball adjustments and overplayed machines."""
    qualifying = tgp_config.qualifying
    if qualifying.meaningful_games < 0:
        raise ValidationError("Qualifying meaningful games cannot be negative")
    if qualifying.hours is not None and qualifying.hours < 0:
        raise ValidationError("Qualifying hours cannot be negative")
    if tgp_config.finals.meaningful_games < 0:
        raise ValidationError("Finals meaningful games cannot be negative")
    if not 0 <= tgp_config.ball_count_adjustment <= 1:
        raise ValidationError("Ball count adjustment must be between 0 and 1")

    if qualifying.machine_count:
        max_games = resolve_config(config).validation.max_games_per_machine
        games_per_machine = qualifying.meaningful_games / qualifying.machine_count
        if games_per_machine > max_games:
            raise ValidationError(
                f"Cannot exceed {max_games} games per machine (got {games_per_machine:g})"
            )


def validate_tournament(tournament: Tournament, config: OPPRConfig | None = None) -> None:
    if not tournament.id:
        raise ValidationError("Tournament must have an ID", field="id")
    if not tournament.name:
        raise ValidationError("Tournament must have a name", field="name")

    validate_players(tournament.players)
    validate_minimum_players(len(tournament.players), config)
    validate_tgp_config(tournament.tgp_config, config)


def validate_player_results(results: Sequence[PlayerResult]) -> None:
    """Check results are non-empty with valid positions and exactly one winner.

    Ties below first place are allowed.
    """
    if not results:
        raise ValidationError("Results list cannot be empty")

    for index, result in enumerate(results):
        validate_player(result.player)
        if result.position < 1:
            raise ValidationError(f"Result {index} has invalid position: {result.position}")

    first_place_count = sum(1 for result in results if result.position == 1)
    if first_place_count != 1:
        raise ValidationError(
            f"Must have exactly one player in 1st place (found {first_place_count})"
        )


def validate_finals_requirements(
    total_participants: int, finalist_count: int, config: OPPRConfig | None = None
) -> None:
    """Finals must hold between 10% and 50% of participants for >100% TGP."""
    if total_participants <= 0:
        raise ValidationError("Total participants must be positive")

    requirements = resolve_config(config).tgp.finals_requirements
    percentage = finalist_count / total_participants
    if percentage < requirements.min_finalists_percent:
        raise ValidationError(
            f"Finals must include at least {requirements.min_finalists_percent:.0%} "
            f"of participants (got {percentage * 100:.1f}%)"
        )
    if percentage > requirements.max_finalists_percent:
        raise ValidationError(
            f"Finals cannot include more than {requirements.max_finalists_percent:.0%} "
            f"of participants (got {percentage * 100:.1f}%)"
        )


def validate_date_not_future(
    date: DateLike, field_name: str = "Date", now: dt.datetime | None = None
) -> None:
    current = as_utc_datetime(now) if now is not None else dt.datetime.now(dt.UTC)
    if as_utc_datetime(date) > current:
        raise ValidationError(f"{field_name} cannot be in the future", field=field_name)


def validate_percentage(value: float, field_name: str = "Percentage") -> None:
    if not 0 <= value <= 100:
        raise ValidationError(
            f"{field_name} must be between 0 and 100 (got {value:g})", field=field_name
        )
