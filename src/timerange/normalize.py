"""Time specification normalization."""

from __future__ import annotations

DEFAULT_SPEC = "today"


def normalize_spec(spec: str | None) -> str:
    """Normalize a raw time specification for grammar matching.

    Normalization is intentionally minimal:
        - Missing/blank input means "today".
        - Strip surrounding whitespace.
        - Case-fold (Unicode-aware lowercasing).

    Inner whitespace is preserved; the grammars accept one or more whitespace characters between
    tokens.
    """

    value = (spec or "").strip()
    if not value:
        return DEFAULT_SPEC
    return value.casefold()
