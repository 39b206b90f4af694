"""Locale pack value object."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True)
class LocalePack:
    """Month names for one language, keyed by lowercase name."""

    code: str
    months: Mapping[str, int]

    def __post_init__(self) -> None:
        normalized: dict[str, int] = {}
        for name, month in self.months.items():
            if not 1 <= month <= 12:
                raise ValueError(f"{self.code}: month for {name!r} must be in 1..12, got {month}")
            normalized[name.strip().casefold()] = month

        # Frozen dataclass: bypass __setattr__ to store the normalized, read-only mapping.
        object.__setattr__(self, "code", self.code.strip().lower())
        object.__setattr__(self, "months", MappingProxyType(normalized))
