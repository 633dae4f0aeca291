"""Normalization helpers.

Centralizes defensive parsing used at the import boundary. Nothing here
raises on bad input; callers decide which default applies.
"""

from __future__ import annotations

import math
from datetime import UTC, datetime
from typing import Any


def utcnow() -> datetime:
    return datetime.now(UTC)


def safe_float(value: Any) -> float | None:
    if value is None:
        return None
    if isinstance(value, str):
        value = value.strip()
        if value in ("", "--"):
            return None
    try:
        result = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(result):
        return None
    return result


def float_or_zero(value: Any) -> float:
    """Parse *value* as a float, falling back to ``0.0``."""
    parsed = safe_float(value)
    return 0.0 if parsed is None else parsed


def ensure_utc(value: datetime) -> datetime:
    """Attach UTC to naive datetimes and convert aware ones to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def parse_timestamp(value: Any, fmt: str) -> datetime | None:
    """Parse a formatted timestamp string into an aware UTC datetime.

    Returns ``None`` when *value* is empty or does not match *fmt*.
    """
    if isinstance(value, datetime):
        return ensure_utc(value)
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        parsed = datetime.strptime(value.strip(), fmt)
    except ValueError:
        return None
    return ensure_utc(parsed)
