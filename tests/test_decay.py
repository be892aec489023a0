"""Tests for time decay."""

import datetime as dt

import pytest

from oppr.decay import (
    apply_time_decay,
    as_utc_datetime,
    calculate_days_between,
    calculate_decay_multiplier,
    calculate_event_age,
    filter_active_events,
    get_decay_multiplier,
    get_event_decay_info,
    is_event_active,
    recalculate_time_decay,
)
from oppr.models import PlayerEvent

REFERENCE = dt.date(2024, 6, 1)


def days_ago(days):
    return REFERENCE - dt.timedelta(days=days)


class TestDecayMultiplier:
    """Tests for the step function."""

    @pytest.mark.parametrize(
        ("age", "expected"),
        [
            (0, 1.0),
            (0.999, 1.0),
            (1.0, 0.75),
            (1.999, 0.75),
            (2.0, 0.5),
            (2.999, 0.5),
            (3.0, 0.0),
            (10, 0.0),
        ],
    )
    def test_boundaries(self, age, expected):
        """Test lower edges are inclusive."""
        assert get_decay_multiplier(age) == expected

    def test_exact_year_boundary(self):
        """Test an event exactly 365 days old decays to 75%."""
        assert calculate_decay_multiplier(days_ago(364), REFERENCE) == 1.0
        assert calculate_decay_multiplier(days_ago(365), REFERENCE) == 0.75
        assert calculate_decay_multiplier(days_ago(1095), REFERENCE) == 0.0


class TestAges:
    """Tests for age calculations."""

    def test_days_between(self):
        """Test whole days are counted."""
        assert calculate_days_between(days_ago(10), REFERENCE) == 10

    def test_same_day_is_zero(self):
        """Test a later time on the same day is still day zero."""
        reference = dt.datetime(2024, 6, 1, 23, 30)
        assert calculate_days_between(REFERENCE, reference) == 0

    def test_future_event(self):
        """Test a future event has a negative age and full value."""
        assert calculate_days_between(REFERENCE + dt.timedelta(days=3), REFERENCE) == -3
        assert calculate_decay_multiplier(REFERENCE + dt.timedelta(days=3), REFERENCE) == 1.0

    def test_event_age_in_years(self):
        """Test ages use a 365-day year."""
        assert calculate_event_age(days_ago(730), REFERENCE) == pytest.approx(2.0)

    def test_naive_datetime_is_utc(self):
        """Test naive datetimes are read as UTC."""
        value = as_utc_datetime(dt.datetime(2024, 1, 1, 12))
        assert value.tzinfo == dt.UTC
        assert as_utc_datetime(dt.date(2024, 1, 1)).hour == 0


class TestApplyTimeDecay:
    """Tests for decaying points."""

    def test_two_point_four_years(self):
        """Test 100 points from ~2.4 years ago are worth 50."""
        assert apply_time_decay(100, days_ago(876), REFERENCE) == pytest.approx(50.0)

    def test_active_window(self):
        """Test events stay active for three years."""
        assert is_event_active(days_ago(1094), REFERENCE)
        assert not is_event_active(days_ago(1095), REFERENCE)

    def test_filter_active_events(self):
        """Test only active dates are kept."""
        dates = [days_ago(10), days_ago(2000), days_ago(500)]
        assert filter_active_events(dates, REFERENCE) == [days_ago(10), days_ago(500)]

    def test_decay_info(self):
        """Test decay info for an 18 month old event."""
        info = get_event_decay_info(days_ago(547), REFERENCE)
        assert info.age_in_days == 547
        assert info.decay_multiplier == 0.75
        assert info.is_active


class TestRecalculateTimeDecay:
    """Tests for batch decay recalculation."""

    @pytest.fixture
    def events(self):
        return [
            PlayerEvent(
                tournament_id=f"t{days}",
                position=1,
                points_earned=40.0,
                first_place_value=40.0,
                date=days_ago(days),
            )
            for days in (30, 400, 800, 1200)
        ]

    def test_decayed_points(self, events):
        """Test decayed points follow each event's age."""
        refreshed = recalculate_time_decay(events, REFERENCE)
        assert [e.decayed_points for e in refreshed] == [40.0, 30.0, 20.0, 0.0]
        assert [e.age_in_days for e in refreshed] == [30, 400, 800, 1200]

    def test_idempotent(self, events):
        """Test recalculating twice gives the same result."""
        once = recalculate_time_decay(events, REFERENCE)
        twice = recalculate_time_decay(once, REFERENCE)
        assert once == twice

    def test_sharded_matches_sequential(self, events):
        """Test the thread pool keeps input order and values."""
        sequential = recalculate_time_decay(events, REFERENCE)
        sharded = recalculate_time_decay(events, REFERENCE, max_workers=3)
        assert sharded == sequential

    def test_inputs_untouched(self, events):
        """Test the input events are not modified."""
        recalculate_time_decay(events, REFERENCE)
        assert all(e.decayed_points == 0.0 for e in events)
