# todos/helpers.py

"""
Small pure helpers shared by the store and the view layer.

Timestamps are UTC ISO-8601 strings with millisecond precision and a "Z"
suffix (e.g. 2026-10-19T08:15:02.123Z). Every timestamp produced here has the
same width, which is what makes string comparison chronological.
"""

from __future__ import annotations

import math
import re
from collections.abc import Iterable
from datetime import UTC, datetime
from typing import Any

from .todo_models import TodoId

_WHITESPACE_RE = re.compile(r"\s+")


def now_iso() -> str:
    return datetime.now(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def normalize_title(text: str | None) -> str:
    """Collapse whitespace runs into one space and trim."""
    if not text:
        return ""
    return _WHITESPACE_RE.sub(" ", text).strip()


def compare_iso_desc(a: str, b: str) -> int:
    """
    Comparator putting more recent timestamps first.

    Both arguments must be in the canonical format produced by now_iso();
    this is not validated.
    """
    if a == b:
        return 0
    return -1 if a > b else 1


def _as_number(value: Any) -> int | float | None:
    # bool is an int subclass; a flag is not an id.
    if isinstance(value, bool) or value is None:
        return None
    # ints stay exact: no float round-trip, no overflow for huge values.
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if not isinstance(value, str):
        return None

    text = value.strip()
    try:
        return int(text)
    except ValueError:
        pass
    try:
        n = float(text)
    except ValueError:
        return None
    return n if math.isfinite(n) else None


def next_todo_id_from_existing(existing_ids: Iterable[Any]) -> TodoId:
    """
    Next free id: one more than the largest valid numeric id, or 1.

    Ids from the remote listing may arrive as numbers or numeric strings;
    anything else (including NaN/inf) is ignored instead of failing the batch.
    """
    highest: int | float = 0
    for raw in existing_ids:
        n = _as_number(raw)
        if n is not None and n > highest:
            highest = n
    return math.floor(highest) + 1


def coerce_todo_id(value: Any) -> TodoId | None:
    """Integer id for a raw remote id, or None if it has no usable integer value."""
    n = _as_number(value)
    if n is None:
        return None
    if isinstance(n, float):
        return int(n) if n.is_integer() else None
    return n
