"""Working day enumeration and daily interval computation.

A month is turned into its working days (Monday to Friday, public holidays
are not considered), and each working day into one or two time intervals:

1. Single interval:
    [start_hour:00, end_hour:00]

2. Split around lunch:
    A lunch start is drawn uniformly from 11:30-13:00 (rounded to the
    minute) and the break lasts one hour.
    Morning: [start_hour:00, lunch start]
    Afternoon: [lunch end, end_hour:00]

Intervals are anchored in the system local timezone. The random source is
injected so the lunch window can be pinned in tests.
"""

from __future__ import annotations

import calendar
import random
from datetime import date, datetime, time, timedelta
from typing import Protocol

from clockify_bulk.config import ConfigError
from clockify_bulk.models import (
    LUNCH_DURATION_HOURS,
    LUNCH_EARLIEST_START,
    LUNCH_LATEST_START,
    TimeInterval,
)

# Weekday constants (Monday = 0, Friday = 4)
FRIDAY = 4

DECEMBER = 12

MINUTES_PER_HOUR = 60


class RandomSource(Protocol):
    """Source of the lunch break draw.

    `random.Random` instances (and the `random` module itself) satisfy it.
    """

    def uniform(self, a: float, b: float) -> float:
        """Return a random float N such that a <= N <= b."""
        ...


def validate_month(month: int) -> int:
    """Validate month number is within 1-12.

    Raises:
        ConfigError: If the month is out of range
    """
    if not 1 <= month <= DECEMBER:
        raise ConfigError(f"Month must be between 1 and {DECEMBER}, got {month}")
    return month


def get_month_end_date(year: int, month: int) -> date:
    """Get the last day of a given month.

    Args:
        year: Year (e.g., 2024)
        month: Month number (1-12)

    Returns:
        Date representing the last day of the month
    """
    _, days_in_month = calendar.monthrange(year, month)
    return date(year, month, days_in_month)


def get_working_days(year: int, month: int) -> list[date]:
    """List the working days (Mon-Fri) of a month in calendar order.

    Does not account for public holidays.

    Args:
        year: Year (e.g., 2024)
        month: Month number (1-12)

    Returns:
        Dates from the 1st to the last day of the month, weekends excluded
    """
    end = get_month_end_date(year, month)
    days = (date(year, month, day) for day in range(1, end.day + 1))
    return [day for day in days if day.weekday() <= FRIDAY]


def draw_lunch_start(rng: RandomSource) -> float:
    """Draw the lunch break start, in hours since midnight (11.5-13.0)."""
    return rng.uniform(LUNCH_EARLIEST_START, LUNCH_LATEST_START)


def _at_local_time(day: date, minutes: int) -> datetime:
    """Anchor a minute-of-day offset to the given day in local time."""
    midnight = datetime.combine(day, time(0, 0))
    return (midnight + timedelta(minutes=minutes)).astimezone()


def _hours_to_minutes(hours: float) -> int:
    return round(hours * MINUTES_PER_HOUR)


def build_intervals(
    day: date,
    start_hour: int,
    end_hour: int,
    lunch_start: float | None = None,
) -> list[TimeInterval]:
    """Compute the time intervals worked on a day.

    Args:
        day: The working day
        start_hour: Hour the day starts
        end_hour: Hour the day ends
        lunch_start: Lunch break start in hours since midnight, or None
            for a single uninterrupted interval

    Returns:
        One interval, or morning and afternoon intervals separated by a
        one-hour lunch break
    """
    day_start = _at_local_time(day, start_hour * MINUTES_PER_HOUR)
    day_end = _at_local_time(day, end_hour * MINUTES_PER_HOUR)

    if lunch_start is None:
        return [TimeInterval(start=day_start, end=day_end)]

    lunch_start_minutes = _hours_to_minutes(lunch_start)
    lunch_end_minutes = lunch_start_minutes + _hours_to_minutes(LUNCH_DURATION_HOURS)
    return [
        TimeInterval(start=day_start, end=_at_local_time(day, lunch_start_minutes)),
        TimeInterval(start=_at_local_time(day, lunch_end_minutes), end=day_end),
    ]


def default_random_source() -> RandomSource:
    """Create the unseeded random source used in production."""
    return random.Random()  # noqa: S311  # not used for security
