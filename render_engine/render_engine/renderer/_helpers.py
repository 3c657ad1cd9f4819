"""Token helpers shared by every renderer."""

from __future__ import annotations

from collections.abc import Iterable


def has_val(value: object) -> bool:
    """Return ``True`` for tokens that should survive clause assembly.

    ``None``, empty strings and whitespace-only strings are dropped; ``0``
    and ``False`` are kept.
    """
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    return True


def to_upper(value: str | None) -> str:
    """Upper-case a keyword; ``None`` becomes the empty string."""
    if value is None:
        return ""
    return str(value).upper()


def join_non_empty(tokens: Iterable[object], separator: str = " ") -> str:
    """Drop empty tokens, then join the rest with *separator*."""
    return separator.join(str(t) for t in tokens if has_val(t))
