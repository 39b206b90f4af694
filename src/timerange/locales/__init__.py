"""Month-name locale packs and the registry assembled from them.

A `LocalePack` is a small, immutable mapping of lowercase month names (full and abbreviated) to
month numbers for one language. A `LocaleRegistry` is the union of an explicit, ordered list of
packs: when two packs define the same key, the pack registered later wins.

To add a language, create a module next to `en.py` defining a `LocalePack` and add it to
`AVAILABLE_PACKS` below. Nothing is registered implicitly on import.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from src.timerange.locales.de import DE
from src.timerange.locales.en import EN
from src.timerange.locales.pack import LocalePack

AVAILABLE_PACKS: tuple[LocalePack, ...] = (EN, DE)
DEFAULT_LOCALE_CODES: tuple[str, ...] = ("en", "de")

_PACKS_BY_CODE: dict[str, LocalePack] = {pack.code: pack for pack in AVAILABLE_PACKS}


def get_pack(code: str) -> LocalePack:
    """Return the built-in locale pack for a language code.

    Raises:
        KeyError: If no pack with that code exists.
    """

    key = (code or "").strip().lower()
    try:
        return _PACKS_BY_CODE[key]
    except KeyError:
        raise KeyError(f"unknown locale: {code!r}") from None


@dataclass(frozen=True)
class LocaleRegistry:
    """Read-only month-name table built once from an ordered list of packs."""

    codes: tuple[str, ...]
    _months: Mapping[str, int] = field(repr=False)

    @classmethod
    def from_packs(cls, packs: Iterable[LocalePack]) -> LocaleRegistry:
        """Merge packs in the given order; later packs override earlier ones on collision."""

        merged: dict[str, int] = {}
        codes: list[str] = []
        for pack in packs:
            merged.update(pack.months)
            codes.append(pack.code)
        return cls(codes=tuple(codes), _months=MappingProxyType(merged))

    @classmethod
    def from_codes(cls, codes: Iterable[str]) -> LocaleRegistry:
        return cls.from_packs(get_pack(code) for code in codes)

    def lookup(self, name: str) -> int | None:
        """Case-insensitive exact month-name lookup (no prefix or fuzzy matching)."""

        return self._months.get((name or "").casefold())

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.lookup(name) is not None

    def __len__(self) -> int:
        return len(self._months)


def default_registry() -> LocaleRegistry:
    """Registry of the built-in packs in their default order (English, then German)."""

    return LocaleRegistry.from_codes(DEFAULT_LOCALE_CODES)


__all__ = [
    "AVAILABLE_PACKS",
    "DEFAULT_LOCALE_CODES",
    "LocalePack",
    "LocaleRegistry",
    "default_registry",
    "get_pack",
]
