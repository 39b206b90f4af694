"""English month names (full and abbreviated)."""

from __future__ import annotations

from src.timerange.locales.pack import LocalePack

_MONTH_NAMES: tuple[str, ...] = (
    "january",
    "february",
    "march",
    "april",
    "may",
    "june",
    "july",
    "august",
    "september",
    "october",
    "november",
    "december",
)

_ABBREVIATIONS: dict[str, int] = {
    "jan": 1,
    "feb": 2,
    "mar": 3,
    "apr": 4,
    "jun": 6,
    "jul": 7,
    "aug": 8,
    "sep": 9,
    "sept": 9,
    "oct": 10,
    "nov": 11,
    "dec": 12,
}

EN = LocalePack(
    code="en",
    months={**{name: idx + 1 for idx, name in enumerate(_MONTH_NAMES)}, **_ABBREVIATIONS},
)
