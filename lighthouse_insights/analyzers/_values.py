"""Coercion helpers for loosely-typed report payloads (details items, log params, trace events)."""

import math
from typing import Any


def as_number(value: Any, default: float = 0.0) -> float:
    """Return `value` as a finite float, or `default` for anything else (bools included)."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return default
    if not math.isfinite(value):
        return default
    return float(value)


def number_or_none(value: Any) -> float | None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return float(value) if math.isfinite(value) else None


def int_or_none(value: Any) -> int | None:
    number = number_or_none(value)
    return int(number) if number is not None else None


def text_or_none(value: Any) -> str | None:
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)


def mapping_or_none(value: Any) -> dict | None:
    return value if isinstance(value, dict) else None


def item_list(details: dict | None) -> list[dict]:
    """The `items` table of an audit's details, keeping only mapping rows."""
    if not details:
        return []
    items = details.get("items")
    if not isinstance(items, list):
        return []
    return [item for item in items if isinstance(item, dict)]
