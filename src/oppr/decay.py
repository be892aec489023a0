"""Time decay of awarded points.

Points keep full value for a year, then drop to 75%, 50% and finally 0%
once the event is three years old. Ages use a fixed 365-day year.

Plain ``date`` values are read as midnight UTC and naive datetimes as UTC,
so results do not depend on the host timezone.
"""

from __future__ import annotations

import datetime as dt
import math
from collections.abc import Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, replace

import structlog

from oppr.core.config import OPPRConfig, resolve_config
from oppr.models import PlayerEvent

logger = structlog.get_logger()

DateLike = dt.date | dt.datetime

_ONE_DAY = dt.timedelta(days=1)


@dataclass(frozen=True)
class EventDecayInfo:
    """Age and decay status of one event."""

    age_in_days: int
    age_in_years: float
    decay_multiplier: float
    is_active: bool


def as_utc_datetime(value: DateLike) -> dt.datetime:
    """Timezone-aware datetime for a date or datetime, assuming UTC."""
    if isinstance(value, dt.datetime):
        return value if value.tzinfo is not None else value.replace(tzinfo=dt.UTC)
    return dt.datetime(value.year, value.month, value.day, tzinfo=dt.UTC)


def _reference(reference_date: DateLike | None) -> dt.datetime:
    if reference_date is None:
        return dt.datetime.now(dt.UTC)
    return as_utc_datetime(reference_date)


def calculate_days_between(event_date: DateLike, reference_date: DateLike | None = None) -> int:
    """Whole days from ``event_date`` to ``reference_date``, rounded down.

    Same-day inputs give 0; an event after the reference date gives a
    negative count.
    """
    diff = _reference(reference_date) - as_utc_datetime(event_date)
    return math.floor(diff / _ONE_DAY)


def calculate_event_age(
    event_date: DateLike,
    reference_date: DateLike | None = None,
    config: OPPRConfig | None = None,
) -> float:
    """Event age in (365-day) years."""
    days_per_year = resolve_config(config).time_decay.days_per_year
    return calculate_days_between(event_date, reference_date) / days_per_year


def get_decay_multiplier(age_in_years: float, config: OPPRConfig | None = None) -> float:
    """Step-function decay multiplier for an age in years.

    ``[0, 1) -> 1.0``, ``[1, 2) -> 0.75``, ``[2, 3) -> 0.5``, ``[3, inf) -> 0.0``.
    """
    constants = resolve_config(config).time_decay
    if age_in_years < 1:
        return constants.year_0_to_1
    if age_in_years < 2:
        return constants.year_1_to_2
    if age_in_years < 3:
        return constants.year_2_to_3
    return constants.year_3_plus


def calculate_decay_multiplier(
    event_date: DateLike,
    reference_date: DateLike | None = None,
    config: OPPRConfig | None = None,
) -> float:
    """Decay multiplier for an event date."""
    age = calculate_event_age(event_date, reference_date, config)
    return get_decay_multiplier(age, config)


def apply_time_decay(
    points: float,
    event_date: DateLike,
    reference_date: DateLike | None = None,
    config: OPPRConfig | None = None,
) -> float:
    """Points after decay.

    Example:
        100 points from an event ~2.4 years before the reference date are
        worth 50.
    """
    return points * calculate_decay_multiplier(event_date, reference_date, config)


def is_event_active(
    event_date: DateLike,
    reference_date: DateLike | None = None,
    config: OPPRConfig | None = None,
) -> bool:
    """True while the event is younger than three years."""
    return calculate_event_age(event_date, reference_date, config) < 3


def filter_active_events(
    event_dates: Iterable[DateLike],
    reference_date: DateLike | None = None,
    config: OPPRConfig | None = None,
) -> list[DateLike]:
    """Event dates that still carry value."""
    reference = _reference(reference_date)
    return [d for d in event_dates if is_event_active(d, reference, config)]


def get_event_decay_info(
    event_date: DateLike,
    reference_date: DateLike | None = None,
    config: OPPRConfig | None = None,
) -> EventDecayInfo:
    """Age, multiplier and active flag for an event date."""
    cfg = resolve_config(config)
    age_in_days = calculate_days_between(event_date, reference_date)
    age_in_years = age_in_days / cfg.time_decay.days_per_year
    return EventDecayInfo(
        age_in_days=age_in_days,
        age_in_years=age_in_years,
        decay_multiplier=get_decay_multiplier(age_in_years, cfg),
        is_active=age_in_years < 3,
    )


def decay_event(
    event: PlayerEvent, reference_date: DateLike, config: OPPRConfig | None = None
) -> PlayerEvent:
    """Rebuild an event's decay fields from its raw points."""
    info = get_event_decay_info(event.date, reference_date, config)
    return replace(
        event,
        age_in_days=info.age_in_days,
        decay_multiplier=info.decay_multiplier,
        decayed_points=event.points_earned * info.decay_multiplier,
    )


def recalculate_time_decay(
    events: Sequence[PlayerEvent],
    reference_date: DateLike | None = None,
    config: OPPRConfig | None = None,
    max_workers: int | None = None,
) -> list[PlayerEvent]:
    """Recompute decay for a batch of events.

    The reference date is read once for the whole batch and decayed points
    are always derived from ``points_earned``, so running the batch twice
    with the same reference date gives identical results.

    Args:
        events: Events to refresh.
        reference_date: Point in time to age events against (now when None).
        config: Coefficient set; defaults apply when None.
        max_workers: Shard the batch over a thread pool when greater than 1.

    Returns:
        New PlayerEvent objects in input order.
    """
    reference = _reference(reference_date)
    cfg = resolve_config(config)

    if max_workers is not None and max_workers > 1 and len(events) > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as pool:
            refreshed = list(pool.map(lambda e: decay_event(e, reference, cfg), events))
    else:
        refreshed = [decay_event(event, reference, cfg) for event in events]

    logger.debug(
        "time_decay_recalculated",
        events=len(refreshed),
        reference_date=reference.isoformat(),
        active=sum(1 for e in refreshed if e.decay_multiplier > 0),
    )
    return refreshed
