"""Efficiency: points earned as a percentage of points available."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Literal

from oppr.decay import as_utc_datetime
from oppr.models import PlayerEvent

TREND_THRESHOLD = 5.0

Trend = Literal["improving", "declining", "stable"]


@dataclass(frozen=True)
class EfficiencyTrend:
    overall_efficiency: float
    recent_efficiency: float
    trend: Trend


@dataclass(frozen=True)
class EfficiencyStats:
    overall: float = 0.0
    top15: float = 0.0
    best: float = 0.0
    worst: float = 0.0
    average: float = 0.0
    median: float = 0.0


def _active(events: Sequence[PlayerEvent]) -> list[PlayerEvent]:
    return [event for event in events if event.decay_multiplier > 0]


def _percentage(earned: float, available: float) -> float:
    if available == 0:
        return 0.0
    return earned / available * 100


def calculate_event_efficiency(points_earned: float, first_place_value: float) -> float:
    """Efficiency for one event.

    Example:
        15 points from a 50 point event is 30% efficient. A zero-value event
        is 0% efficient.
    """
    return _percentage(points_earned, first_place_value)


def calculate_overall_efficiency(events: Sequence[PlayerEvent]) -> float:
    """Total earned over total available for the active events.

    Events with a zero decay multiplier are ignored. Returns 0 when nothing
    is active.
    """
    active = _active(events)
    if not active:
        return 0.0
    earned = sum(event.points_earned for event in active)
    available = sum(event.first_place_value for event in active)
    return _percentage(earned, available)


def calculate_top_n_efficiency(events: Sequence[PlayerEvent], top_n: int = 15) -> float:
    """Overall efficiency of the ``top_n`` active events by raw points earned."""
    top_events = sorted(_active(events), key=lambda e: e.points_earned, reverse=True)[:top_n]
    return calculate_overall_efficiency(top_events)


def calculate_decayed_efficiency(events: Sequence[PlayerEvent]) -> float:
    """Like overall efficiency, but crediting decayed points."""
    active = _active(events)
    if not active:
        return 0.0
    earned = sum(event.decayed_points for event in active)
    available = sum(event.first_place_value for event in active)
    return _percentage(earned, available)


def analyze_efficiency_trend(
    events: Sequence[PlayerEvent], window_size: int = 10
) -> EfficiencyTrend:
    """Compare recent efficiency with overall efficiency.

    Recent efficiency covers the ``window_size`` most recent active events.
    A difference under 5 percentage points either way is ``stable``.
    """
    by_date = sorted(_active(events), key=lambda e: as_utc_datetime(e.date), reverse=True)
    overall = calculate_overall_efficiency(by_date)
    recent = calculate_overall_efficiency(by_date[:window_size])

    difference = recent - overall
    trend: Trend
    if abs(difference) < TREND_THRESHOLD:
        trend = "stable"
    elif difference > 0:
        trend = "improving"
    else:
        trend = "declining"

    return EfficiencyTrend(overall_efficiency=overall, recent_efficiency=recent, trend=trend)


def get_efficiency_stats(events: Sequence[PlayerEvent]) -> EfficiencyStats:
    """Summary statistics over per-event efficiencies of active events.

    All fields are 0 when there are no active events.
    """
    active = _active(events)
    if not active:
        return EfficiencyStats()

    efficiencies = [
        calculate_event_efficiency(event.points_earned, event.first_place_value)
        for event in active
    ]
    ranked = sorted(efficiencies, reverse=True)

    return EfficiencyStats(
        overall=calculate_overall_efficiency(active),
        top15=calculate_top_n_efficiency(active, 15),
        best=ranked[0],
        worst=ranked[-1],
        average=sum(efficiencies) / len(efficiencies),
        median=ranked[len(ranked) // 2],
    )
