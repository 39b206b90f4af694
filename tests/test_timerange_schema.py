"""Tests for the TimeRange value object and parser configuration."""

from __future__ import annotations

from datetime import datetime, timedelta

import pytest
from pydantic import ValidationError

from src.timerange.schema import TimeRange, TimeRangeConfig, WeekStart


def test_time_range_requires_ordered_bounds() -> None:
    with pytest.raises(ValueError):
        TimeRange(start=datetime(2025, 1, 2), end=datetime(2025, 1, 1))


def test_time_range_allows_single_instant() -> None:
    instant = datetime(2025, 1, 1, 12, 0)
    tr = TimeRange(start=instant, end=instant)
    assert tr.duration == timedelta(0)
    assert tr.contains(instant)


def test_time_range_is_immutable() -> None:
    tr = TimeRange(start=datetime(2025, 1, 1), end=datetime(2025, 1, 2))
    with pytest.raises(ValidationError):
        tr.start = datetime(2024, 1, 1)  # type: ignore[misc]


def test_time_range_contains_is_closed() -> None:
    tr = TimeRange(start=datetime(2025, 1, 1), end=datetime(2025, 1, 31, 23, 59, 59, 999999))
    assert tr.contains(datetime(2025, 1, 1))
    assert tr.contains(datetime(2025, 1, 31, 23, 59, 59, 999999))
    assert not tr.contains(datetime(2025, 2, 1))
    assert tr.as_tuple() == (tr.start, tr.end)


def test_week_start_indexes() -> None:
    assert WeekStart.sunday.index == 0
    assert WeekStart.monday.index == 1


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("monday", WeekStart.monday), ("Sunday", WeekStart.sunday), (" MONDAY ", WeekStart.monday)],
)
def test_week_start_from_name(raw: str, expected: WeekStart) -> None:
    assert WeekStart.from_name(raw) == expected


def test_week_start_from_name_rejects_other_days() -> None:
    with pytest.raises(ValueError, match="week_start"):
        WeekStart.from_name("friday")


def test_default_config_starts_on_monday() -> None:
    assert TimeRangeConfig.default().week_start == WeekStart.monday
    assert TimeRangeConfig().week_start == WeekStart.monday


def test_config_rejects_unknown_fields() -> None:
    with pytest.raises(ValidationError):
        TimeRangeConfig(week_start=WeekStart.sunday, timezone="UTC")  # type: ignore[call-arg]
