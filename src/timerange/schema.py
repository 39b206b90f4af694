"""Time range value objects (Pydantic models).

`TimeRange` is the contract between the spec parser and any consumer that needs collection-window
bounds. Both bounds are inclusive: `[start, end]`.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, model_validator


class WeekStart(StrEnum):
    """First weekday of a calendar week."""

    sunday = "sunday"
    monday = "monday"

    @property
    def index(self) -> int:
        """Weekday index with Sunday=0 ... Saturday=6."""

        return 0 if self is WeekStart.sunday else 1

    @classmethod
    def from_name(cls, value: str) -> WeekStart:
        """Parse a week start name case-insensitively.

        Raises:
            ValueError: If the name is neither "monday" nor "sunday".
        """

        name = (value or "").strip().lower()
        try:
            return cls(name)
        except ValueError:
            raise ValueError(
                f"invalid week_start: {value!r} (must be 'monday' or 'sunday')"
            ) from None


class TimeRangeConfig(BaseModel):
    """Parser configuration."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    week_start: WeekStart = WeekStart.monday

    @classmethod
    def default(cls) -> TimeRangeConfig:
        return cls(week_start=WeekStart.monday)


class TimeRange(BaseModel):
    """A closed interval of datetimes.

    Datetimes are local wall-clock times. A naive datetime means "local time of the running
    process"; an aware one keeps whatever `tzinfo` the reference instant had.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    start: datetime
    end: datetime

    @model_validator(mode="after")
    def validate_range(self) -> TimeRange:
        """Validate that the interval is well-formed (`start <= end`)."""

        if self.start > self.end:
            raise ValueError("start must be <= end")
        return self

    @property
    def duration(self) -> timedelta:
        return self.end - self.start

    def contains(self, instant: datetime) -> bool:
        """Whether `instant` falls inside the closed interval."""

        return self.start <= instant <= self.end

    def as_tuple(self) -> tuple[datetime, datetime]:
        return self.start, self.end
