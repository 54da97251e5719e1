"""Tests for timing module."""

import calendar
import random
from datetime import date, datetime, timedelta

import pytest

from clockify_bulk.config import ConfigError
from clockify_bulk.timing import (
    build_intervals,
    default_random_source,
    draw_lunch_start,
    get_month_end_date,
    get_working_days,
    validate_month,
)
from tests.unit.clockify.fakes import FixedRandom

SATURDAY = 5


class TestGetWorkingDays:
    """Test get_working_days function."""

    def test_leap_year_february(self):
        """February 2024 (29 days, starts Thursday) has 21 working days."""
        days = get_working_days(2024, 2)

        assert len(days) == 21
        assert days[0] == date(2024, 2, 1)
        assert days[-1] == date(2024, 2, 29)

    def test_month_starting_on_saturday(self):
        """June 2024 (30 days, starts Saturday) has 20 working days."""
        days = get_working_days(2024, 6)

        assert len(days) == 20
        assert days[0] == date(2024, 6, 3)
        assert days[-1] == date(2024, 6, 28)

    def test_december_crosses_no_year_boundary(self):
        """December stops at the 31st."""
        days = get_working_days(2024, 12)

        assert days[-1] == date(2024, 12, 31)
        assert all(d.year == 2024 and d.month == 12 for d in days)

    @pytest.mark.parametrize("year", [2023, 2024, 2025])
    @pytest.mark.parametrize("month", range(1, 13))
    def test_covers_month_exactly_once(self, year: int, month: int):
        """Working days plus weekend days make up the whole month, in order."""
        days = get_working_days(year, month)
        _, days_in_month = calendar.monthrange(year, month)
        first = date(year, month, 1)
        all_days = [first + timedelta(days=i) for i in range(days_in_month)]
        weekend = [d for d in all_days if d.weekday() >= SATURDAY]

        assert all(d.weekday() < SATURDAY for d in days)
        assert days == sorted(days)
        assert len(set(days)) == len(days)
        assert sorted(days + weekend) == all_days

    def test_idempotent(self):
        """Same input always yields the same sequence."""
        assert get_working_days(2024, 11) == get_working_days(2024, 11)

    def test_last_representable_month(self):
        """December 9999 ends on date.max without overflowing."""
        days = get_working_days(9999, 12)

        assert days[-1] == date(9999, 12, 31)
        assert len(days) == 23

    def test_first_representable_month(self):
        """January of year 1 starts on date.min."""
        days = get_working_days(1, 1)

        assert days[0] == date(1, 1, 1)


class TestGetMonthEndDate:
    """Test get_month_end_date function."""

    @pytest.mark.parametrize(
        ("year", "month", "expected"),
        [
            (2024, 2, date(2024, 2, 29)),
            (2023, 2, date(2023, 2, 28)),
            (2024, 4, date(2024, 4, 30)),
            (2024, 12, date(2024, 12, 31)),
        ],
    )
    def test_last_day(self, year: int, month: int, expected: date):
        """Test last day of month including leap years and December."""
        assert get_month_end_date(year, month) == expected


class TestValidateMonth:
    """Test validate_month function."""

    @pytest.mark.parametrize("month", [1, 6, 12])
    def test_valid_month(self, month: int):
        """Test valid months are returned unchanged."""
        assert validate_month(month) == month

    @pytest.mark.parametrize("month", [0, 13, -1])
    def test_out_of_range_month_rejected(self, month: int):
        """Test out-of-range months raise instead of rolling over."""
        with pytest.raises(ConfigError) as exc_info:
            validate_month(month)

        assert "between 1 and 12" in str(exc_info.value)


class TestDrawLunchStart:
    """Test draw_lunch_start function."""

    def test_draws_from_lunch_window(self):
        """Test the lunch window bounds are passed to the random source."""
        rng = FixedRandom(0.5)

        result = draw_lunch_start(rng)

        assert rng.calls == [(11.5, 13.0)]
        assert result == pytest.approx(12.25)

    def test_real_source_stays_in_window(self):
        """Test real draws always fall within 11:30-13:00."""
        rng = random.Random(1234)  # noqa: S311

        for _ in range(500):
            assert 11.5 <= draw_lunch_start(rng) <= 13.0

    def test_default_source_is_unseeded(self):
        """Test production sources are independent instances."""
        assert default_random_source() is not default_random_source()


def _hm(value: datetime) -> tuple[int, int]:
    return value.hour, value.minute


class TestBuildIntervals:
    """Test build_intervals function."""

    def test_single_interval(self):
        """Test single mode spans start hour to end hour with no gap."""
        day = date(2024, 6, 3)

        intervals = build_intervals(day, 9, 17)

        assert len(intervals) == 1
        assert _hm(intervals[0].start) == (9, 0)
        assert _hm(intervals[0].end) == (17, 0)
        assert intervals[0].start.date() == day
        assert intervals[0].end.date() == day
        assert intervals[0].start.second == 0

    def test_intervals_are_timezone_aware(self):
        """Test intervals carry the local timezone."""
        intervals = build_intervals(date(2024, 6, 3), 9, 17, 12.0)

        for interval in intervals:
            assert interval.start.tzinfo is not None
            assert interval.end.tzinfo is not None

    def test_split_around_lunch(self):
        """Test split mode with a lunch at 12:15."""
        morning, afternoon = build_intervals(date(2024, 6, 3), 9, 17, 12.25)

        assert _hm(morning.start) == (9, 0)
        assert _hm(morning.end) == (12, 15)
        assert _hm(afternoon.start) == (13, 15)
        assert _hm(afternoon.end) == (17, 0)

    @pytest.mark.parametrize(
        ("lunch_start", "expected_morning_end", "expected_afternoon_start"),
        [
            (11.5, (11, 30), (12, 30)),
            (13.0, (13, 0), (14, 0)),
            # Rounds to the nearest minute without overflowing the hour
            (12.9999, (13, 0), (14, 0)),
            (11.7583, (11, 45), (12, 45)),
        ],
    )
    def test_lunch_rounded_to_minute(
        self,
        lunch_start: float,
        expected_morning_end: tuple[int, int],
        expected_afternoon_start: tuple[int, int],
    ):
        """Test lunch bounds are rounded to the minute."""
        morning, afternoon = build_intervals(date(2024, 6, 3), 9, 17, lunch_start)

        assert _hm(morning.end) == expected_morning_end
        assert _hm(afternoon.start) == expected_afternoon_start

    def test_split_partitions_day_with_one_hour_gap(self):
        """Test entries never overlap and the gap is exactly one hour."""
        rng = random.Random(42)  # noqa: S311

        for _ in range(200):
            lunch = draw_lunch_start(rng)
            morning, afternoon = build_intervals(date(2024, 6, 3), 8, 16, lunch)

            assert morning.start < morning.end < afternoon.start < afternoon.end
            assert afternoon.start - morning.end == timedelta(hours=1)
            assert _hm(morning.end) >= (11, 30)
            assert _hm(afternoon.start) <= (14, 0)
