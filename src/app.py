"""Application composition root.

This module wires together configuration, the locale registry and parser settings for the runtime.
The locale registry is assembled once here, before any spec is parsed, and is read-only afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from src.config.settings import Settings
from src.timerange.locales import LocaleRegistry
from src.timerange.parser import TimeRangeParser
from src.timerange.schema import TimeRangeConfig


@dataclass(frozen=True)
class App:
    """Shared application dependencies."""

    settings: Settings
    registry: LocaleRegistry
    config: TimeRangeConfig

    def parser(self, now: datetime | None = None) -> TimeRangeParser:
        """Create a parser bound to `now` (defaults to the current local time)."""

        return TimeRangeParser(self.config, registry=self.registry, now=now)


def create_app(settings: Settings) -> App:
    """Create the application container."""

    registry = LocaleRegistry.from_packs(settings.locale_packs())
    return App(settings=settings, registry=registry, config=settings.timerange_config())
