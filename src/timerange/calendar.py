"""Calendar math for day, week and month boundaries.

All helpers are pure and keep the `tzinfo` of their input, so naive datetimes stay naive (local
wall-clock time) and aware datetimes stay in their own zone. Arithmetic is wall-clock arithmetic.

Week numbering is intentionally *not* ISO-8601: week 1 of a year is the first full week (by the
configured week start) that begins on or after January 1.
"""

from __future__ import annotations

from datetime import datetime, time, timedelta, tzinfo

from src.timerange.schema import TimeRange, WeekStart

MIN_WEEK = 1
MAX_WEEK = 53

_ONE_DAY = timedelta(days=1)
_ONE_WEEK = timedelta(days=7)


def start_of_day(dt: datetime) -> datetime:
    return datetime.combine(dt.date(), time.min, tzinfo=dt.tzinfo)


def end_of_day(dt: datetime) -> datetime:
    """Last representable instant of the calendar day (`23:59:59.999999`)."""

    return datetime.combine(dt.date(), time.max, tzinfo=dt.tzinfo)


def sunday_based_weekday(dt: datetime) -> int:
    """Weekday index with Sunday=0 ... Saturday=6."""

    return (dt.weekday() + 1) % 7


def start_of_week(dt: datetime, week_start: WeekStart) -> datetime:
    days_back = (sunday_based_weekday(dt) - week_start.index) % 7
    return start_of_day(dt) - timedelta(days=days_back)


def end_of_week(dt: datetime, week_start: WeekStart) -> datetime:
    return end_of_day(start_of_week(dt, week_start) + timedelta(days=6))


def week_range(dt: datetime, week_start: WeekStart) -> TimeRange:
    """The full week containing `dt`."""

    return TimeRange(start=start_of_week(dt, week_start), end=end_of_week(dt, week_start))


def day_range(dt: datetime) -> TimeRange:
    """The full calendar day containing `dt`."""

    return TimeRange(start=start_of_day(dt), end=end_of_day(dt))


def week_bounds(
        year: int,
        week: int,
        week_start: WeekStart,
        tz: tzinfo | None = None,
) -> TimeRange:
    """Bounds of calendar week `week` of `year`.

    The first week is anchored at the week start of January 1; if that anchor falls into the
    previous year it is moved forward by one week, so week 1 never starts in December.

    Raises:
        ValueError: If `week` is outside 1..53.
    """

    if not MIN_WEEK <= week <= MAX_WEEK:
        raise ValueError(f"week must be in {MIN_WEEK}..{MAX_WEEK}, got {week}")

    jan1 = datetime(year, 1, 1, tzinfo=tz)
    anchor = start_of_week(jan1, week_start)
    if anchor.year < year:
        anchor += _ONE_WEEK

    target_start = anchor + (week - 1) * _ONE_WEEK
    return TimeRange(start=target_start, end=end_of_week(target_start, week_start))


def month_bounds(year: int, month: int, tz: tzinfo | None = None) -> TimeRange:
    """Bounds of a calendar month.

    The last day is "day 0 of the following month": the first of the next month minus one day.
    That handles month lengths and leap years without a lookup table. December always ends on the
    31st, so it never needs the following year (which does not exist for year 9999).
    """

    start = datetime(year, month, 1, tzinfo=tz)
    if month == 12:
        last_day = datetime(year, 12, 31, tzinfo=tz)
    else:
        last_day = datetime(year, month + 1, 1, tzinfo=tz) - _ONE_DAY
    return TimeRange(start=start, end=end_of_day(last_day))


def last_n_days(now: datetime, days: int) -> TimeRange:
    """The `days` calendar days ending today (inclusive); `days=1` is today.

    Raises:
        ValueError: If `days` is not positive.
    """

    if days < 1:
        raise ValueError(f"days must be positive, got {days}")

    return TimeRange(
        start=start_of_day(now - (days - 1) * _ONE_DAY),
        end=end_of_day(now),
    )
