"""Normalization helpers.

SWAPI sends numbers and dates as strings, with ``"unknown"`` / ``"n/a"``
placeholders. These helpers turn them into Python values or ``None``.
"""

from __future__ import annotations

import math
from datetime import date
from typing import Any


def safe_float(value: Any) -> float | None:
    if value is None or value == "" or isinstance(value, bool):
        return None
    try:
        result = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(result) or math.isinf(result):
        return None
    return result


def safe_int(value: Any) -> int | None:
    parsed = safe_float(value)
    if parsed is None:
        return None
    return int(parsed)


def safe_date(value: Any) -> date | None:
    """Parse an ISO ``YYYY-MM-DD`` date, returning ``None`` on failure."""
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        return date.fromisoformat(value.strip()[:10])
    except ValueError:
        return None
