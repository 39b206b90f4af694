"""German month names (full, plus abbreviations where they differ from the full name)."""

from __future__ import annotations

from src.timerange.locales.pack import LocalePack

_MONTH_NAMES: tuple[str, ...] = (
    "januar",
    "februar",
    "märz",
    "april",
    "mai",
    "juni",
    "juli",
    "august",
    "september",
    "oktober",
    "november",
    "dezember",
)

DE = LocalePack(
    code="de",
    months={
        **{name: idx + 1 for idx, name in enumerate(_MONTH_NAMES)},
        "jan": 1,
        "feb": 2,
        "mär": 3,
        "okt": 10,
        "dez": 12,
    },
)
