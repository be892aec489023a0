"""Player list import from ranking-export CSV files.

Expected columns (the first non-blank line is a header and is skipped):

    0: name, 1: player id, 2: ranking, 3: rating, further columns ignored.
"""

from __future__ import annotations

import csv
import math
from dataclasses import dataclass

import structlog

from oppr.core.errors import ValidationError
from oppr.models import Player
from oppr.ranking.glicko import GlickoRating, GlickoRatingSystem
from oppr.validators import validate_player

logger = structlog.get_logger()

IMPORTED_RATING_DEVIATION = 100.0
IMPORTED_EVENT_COUNT = 5
MIN_COLUMNS = 4


@dataclass(frozen=True)
class ParsedPlayer:
    """A player read from CSV together with its display name."""

    player: Player
    name: str


def _parse_non_negative(raw: str, label: str, line_number: int) -> float:
    try:
        value = float(raw)
    except ValueError:
        raise ValidationError(f"Invalid {label} value: {raw}", line=line_number) from None
    if not math.isfinite(value) or value < 0:
        raise ValidationError(f"Invalid {label} value: {raw}", line=line_number)
    return value


def _parse_row(
    fields: list[str],
    line_number: int,
    use_ranking_data: bool,
    default_rating: float,
    default_ranking: int,
) -> ParsedPlayer:
    if len(fields) < MIN_COLUMNS:
        raise ValidationError(
            f"Expected at least {MIN_COLUMNS} columns, got {len(fields)}", line=line_number
        )

    name, player_id, ranking_raw, rating_raw = (f.strip() for f in fields[:MIN_COLUMNS])
    if not name:
        raise ValidationError("Name is required (column 0)", line=line_number, field="name")
    if not player_id:
        raise ValidationError("Player ID is required (column 1)", line=line_number, field="id")

    if use_ranking_data:
        if not ranking_raw:
            raise ValidationError(
                "Ranking is required when using ranking data (column 2)",
                line=line_number,
                field="ranking",
            )
        ranking = math.floor(_parse_non_negative(ranking_raw, "ranking", line_number))
        if not rating_raw:
            raise ValidationError(
                "Rating is required when using ranking data (column 3)",
                line=line_number,
                field="rating",
            )
        rating = _parse_non_negative(rating_raw, "rating", line_number)
        deviation = IMPORTED_RATING_DEVIATION
        event_count = IMPORTED_EVENT_COUNT
        is_rated = True
    else:
        rating = float(default_rating)
        ranking = default_ranking
        deviation = IMPORTED_RATING_DEVIATION
        event_count = 0
        is_rated = False

    player = Player(
        id=player_id,
        name=name,
        rating=rating,
        rating_deviation=deviation,
        ranking=ranking,
        is_rated=is_rated,
        event_count=event_count,
        ratings={GlickoRatingSystem.id: GlickoRating(value=rating, deviation=deviation)},
    )
    validate_player(player)
    return ParsedPlayer(player=player, name=name)


def parse_player_csv(
    text: str,
    use_ranking_data: bool = True,
    default_rating: float = 1200,
    default_ranking: int = 999999,
) -> list[ParsedPlayer]:
    """Parse a CSV player list.

    Blank lines are ignored and quoted fields may contain commas or doubled
    quotes. Error messages are prefixed with the 1-based line of the file.

    Args:
        text: CSV content.
        use_ranking_data: Read ranking and rating from columns 2-3 and mark
            players rated; otherwise use the defaults and mark them unrated.
        default_rating: Rating used when ranking data is ignored.
        default_ranking: Ranking used when ranking data is ignored.

    Returns:
        Parsed players in file order.

    Raises:
        ValidationError: If the file is empty, has no data rows, or a row is invalid.
    """
    rows = [
        (line_number, line.strip())
        for line_number, line in enumerate(text.splitlines(), start=1)
        if line.strip()
    ]
    if not rows:
        raise ValidationError("CSV data is empty")

    data_rows = rows[1:]
    if not data_rows:
        raise ValidationError("CSV contains no data rows")

    parsed: list[ParsedPlayer] = []
    seen_ids: set[str] = set()
    for line_number, line in data_rows:
        fields = next(csv.reader([line], skipinitialspace=True))
        entry = _parse_row(fields, line_number, use_ranking_data, default_rating, default_ranking)
        if entry.player.id in seen_ids:
            raise ValidationError(
                f"Duplicate player ID: {entry.player.id}", line=line_number, field="id"
            )
        seen_ids.add(entry.player.id)
        parsed.append(entry)

    logger.debug("players_imported", count=len(parsed), use_ranking_data=use_ranking_data)
    return parsed
