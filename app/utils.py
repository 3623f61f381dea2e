"""Utility helpers for the FlixCatalog service."""

from __future__ import annotations

import re
from datetime import datetime

WHITESPACE_RE = re.compile(r"\s+")


def hyphenate_title(value: str) -> str:
    """Return ``value`` lowercased with whitespace runs replaced by hyphens."""

    return WHITESPACE_RE.sub("-", value.lower())


def clamp(value: int, lower: int, upper: int) -> int:
    return min(max(value, lower), upper)


def parse_year(value: object, *, default: int | None = None) -> int:
    """Return the year encoded in the first four characters of a date string.

    Falls back to ``default`` or the current year when the value is missing or
    unparseable.
    """

    fallback = default if default is not None else datetime.now().year
    if not isinstance(value, str) or len(value) < 4:
        return fallback
    try:
        return int(value[:4])
    except ValueError:
        return fallback
