"""Time specification parser.

The parser is strict and deterministic:
    - it recognizes a fixed, ordered set of grammars,
    - the first grammar that produces a range wins,
    - a grammar that does not match (or matches but yields an invalid calendar value) returns
      `None` so the next grammar gets a chance,
    - if nothing matches, `UnsupportedSpecError` is raised.

Supported specs (case-insensitive):
    today | yesterday | thisweek | lastweek
    october 2025 | 2025 october | oct 2025 | märz 2025
    week 32 | week 32 2024
    2025-12-01..2025-12-31
    2025-12-02
    last 7 days | last 1 day
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date, datetime, timedelta, tzinfo

from src.timerange import calendar
from src.timerange.locales import LocaleRegistry, default_registry
from src.timerange.normalize import normalize_spec
from src.timerange.schema import TimeRange, TimeRangeConfig

logger = logging.getLogger(__name__)


class UnsupportedSpecError(ValueError):
    """Raised when no grammar accepts the time specification."""

    def __init__(self, spec: str | None) -> None:
        self.spec = spec
        super().__init__(f"unsupported time specification: {spec}")


# `[^\W\d_]` is "any Unicode letter", so non-ASCII month names like "märz" match.
_LETTERS = r"[^\W\d_]+"

_MONTH_YEAR_RE = re.compile(rf"(?P<month>{_LETTERS})\s+(?P<year>[0-9]{{4}})")
_YEAR_MONTH_RE = re.compile(rf"(?P<year>[0-9]{{4}})\s+(?P<month>{_LETTERS})")
# Digit runs are bounded so oversized numbers fall through instead of reaching int().
_WEEK_RE = re.compile(r"week\s+(?P<week>[0-9]{1,9})(?:\s+(?P<year>[0-9]{4}))?")
_DATE_RE = re.compile(r"(?P<year>[0-9]{4})-(?P<month>[0-9]{2})-(?P<day>[0-9]{2})")
_RELATIVE_RE = re.compile(r"last\s+(?P<days>[0-9]{1,9})\s+days?")

_RANGE_SEPARATOR = ".."

GrammarBuilder = Callable[[str], TimeRange | None]


@dataclass(frozen=True)
class Grammar:
    """A named grammar: returns a range when it accepts the spec, otherwise `None`."""

    name: str
    build: GrammarBuilder


def _parse_iso_date(token: str) -> date | None:
    """Parse a strict `YYYY-MM-DD` token; calendar-invalid dates return `None`."""

    match = _DATE_RE.fullmatch(token)
    if not match:
        return None
    try:
        return date(int(match.group("year")), int(match.group("month")), int(match.group("day")))
    except ValueError:
        return None


class TimeRangeParser:
    """Resolve time specifications relative to a fixed reference instant.

    `now`, `config` and `registry` are fixed at construction, so repeated calls with the same spec
    return equal ranges.
    """

    def __init__(
            self,
            config: TimeRangeConfig | None = None,
            *,
            registry: LocaleRegistry | None = None,
            now: datetime | None = None,
    ) -> None:
        self._config = config or TimeRangeConfig.default()
        self._registry = registry if registry is not None else default_registry()
        self._now = now if now is not None else datetime.now()
        self._grammars: tuple[Grammar, ...] = (
            Grammar("keyword", self._parse_keyword),
            Grammar("month_year", self._parse_month_year),
            Grammar("week_number", self._parse_week_number),
            Grammar("date_range", self._parse_date_range),
            Grammar("single_date", self._parse_single_date),
            Grammar("relative_days", self._parse_relative_days),
        )

    @property
    def now(self) -> datetime:
        return self._now

    @property
    def config(self) -> TimeRangeConfig:
        return self._config

    @property
    def _tz(self) -> tzinfo | None:
        return self._now.tzinfo

    def try_parse(self, spec: str | None) -> TimeRange | None:
        """Parse a spec, returning `None` instead of raising when it is unsupported."""

        normalized = normalize_spec(spec)
        for grammar in self._grammars:
            result = grammar.build(normalized)
            if result is not None:
                logger.debug("matched grammar=%s spec=%r", grammar.name, normalized)
                return result
        return None

    def parse(self, spec: str | None) -> TimeRange:
        """Parse a spec into a closed `TimeRange`.

        Raises:
            UnsupportedSpecError: If no grammar accepts the spec.
        """

        result = self.try_parse(spec)
        if result is None:
            logger.info("unsupported spec=%r", spec)
            raise UnsupportedSpecError(spec)
        return result

    def _parse_keyword(self, spec: str) -> TimeRange | None:
        week_start = self._config.week_start
        if spec == "today":
            return calendar.day_range(self._now)
        if spec == "yesterday":
            return calendar.day_range(self._now - timedelta(days=1))
        if spec == "thisweek":
            return calendar.week_range(self._now, week_start)
        if spec == "lastweek":
            return calendar.week_range(self._now - timedelta(days=7), week_start)
        return None

    def _parse_month_year(self, spec: str) -> TimeRange | None:
        match = _MONTH_YEAR_RE.fullmatch(spec) or _YEAR_MONTH_RE.fullmatch(spec)
        if not match:
            return None

        # Unknown month names fall through to the remaining grammars.
        month = self._registry.lookup(match.group("month"))
        if month is None:
            return None

        try:
            return calendar.month_bounds(int(match.group("year")), month, self._tz)
        except (ValueError, OverflowError):
            return None

    def _parse_week_number(self, spec: str) -> TimeRange | None:
        match = _WEEK_RE.fullmatch(spec)
        if not match:
            return None

        week = int(match.group("week"))
        if not calendar.MIN_WEEK <= week <= calendar.MAX_WEEK:
            return None

        year = int(match.group("year")) if match.group("year") else self._now.year
        try:
            return calendar.week_bounds(year, week, self._config.week_start, self._tz)
        except (ValueError, OverflowError):
            return None

    def _parse_date_range(self, spec: str) -> TimeRange | None:
        parts = spec.split(_RANGE_SEPARATOR)
        if len(parts) != 2:
            return None

        start = _parse_iso_date(parts[0].strip())
        end = _parse_iso_date(parts[1].strip())
        if start is None or end is None or start > end:
            return None

        return TimeRange(
            start=calendar.start_of_day(self._at(start)),
            end=calendar.end_of_day(self._at(end)),
        )

    def _parse_single_date(self, spec: str) -> TimeRange | None:
        day = _parse_iso_date(spec)
        if day is None:
            return None
        return calendar.day_range(self._at(day))

    def _parse_relative_days(self, spec: str) -> TimeRange | None:
        match = _RELATIVE_RE.fullmatch(spec)
        if not match:
            return None

        days = int(match.group("days"))
        if days < 1:
            return None

        try:
            return calendar.last_n_days(self._now, days)
        except OverflowError:
            return None

    def _at(self, day: date) -> datetime:
        return datetime(day.year, day.month, day.day, tzinfo=self._tz)


def parse_time_range(
        spec: str | None,
        *,
        config: TimeRangeConfig | None = None,
        registry: LocaleRegistry | None = None,
        now: datetime | None = None,
) -> TimeRange:
    """Parse a time specification with a one-off parser (convenience wrapper)."""

    return TimeRangeParser(config, registry=registry, now=now).parse(spec)
