"""Pytest configuration and shared fixtures.

The repository uses a flat `src/` layout. This conftest ensures tests can import from the `src.*`
namespace when running `pytest` without installing the package, and provides parsers pinned to a
fixed reference instant.
"""

from __future__ import annotations

import sys
from datetime import datetime
from pathlib import Path

import pytest

# Ensure `import src...` works when running pytest without installing the package.
REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT))

from src.timerange.parser import TimeRangeParser  # noqa: E402
from src.timerange.schema import TimeRangeConfig, WeekStart  # noqa: E402

# Sunday, 2025-06-15 14:30 local time.
FIXED_NOW = datetime(2025, 6, 15, 14, 30)

# Wednesday, 2025-06-18 14:30 local time.
MIDWEEK_NOW = datetime(2025, 6, 18, 14, 30)


@pytest.fixture
def parser() -> TimeRangeParser:
    return TimeRangeParser(TimeRangeConfig.default(), now=FIXED_NOW)


@pytest.fixture
def monday_parser() -> TimeRangeParser:
    return TimeRangeParser(TimeRangeConfig(week_start=WeekStart.monday), now=MIDWEEK_NOW)


@pytest.fixture
def sunday_parser() -> TimeRangeParser:
    return TimeRangeParser(TimeRangeConfig(week_start=WeekStart.sunday), now=MIDWEEK_NOW)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove settings-related variables inherited from the outer environment."""

    for name in ("WEEK_START", "LOCALES", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
