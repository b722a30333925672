"""Named destination ids shared by page keys and links."""

from __future__ import annotations

import re
from datetime import date

SEASONAL = "seasonal"
DOT_GRID = "dots"

_DAY_PATTERN = re.compile(r"day_(\d{4})(\d{2})(\d{2})")
_ID_PATTERN = re.compile(r"[A-Za-z0-9_-]+")


def week_destination(week_num: int) -> str:
    """Return the destination id of a weekly page."""
    if week_num < 1:
        msg = "week_num must be >= 1."
        raise ValueError(msg)
    return f"week_{week_num}"


def day_destination(page_date: date) -> str:
    """Return the destination id of a daily page."""
    return f"day_{page_date.year:04d}{page_date.month:02d}{page_date.day:02d}"


def parse_day_destination(key: str) -> date | None:
    """Return the date encoded in a daily page key, or None for other keys."""
    match = _DAY_PATTERN.fullmatch(key)
    if match is None:
        return None
    try:
        return date(int(match.group(1)), int(match.group(2)), int(match.group(3)))
    except ValueError:
        return None


def collection_destination(collection_id: str) -> str:
    """Return the destination id of a named collection page."""
    if not _ID_PATTERN.fullmatch(collection_id):
        msg = (
            f"collection id '{collection_id}' must contain only letters, digits, "
            "'_' or '-'."
        )
        raise ValueError(msg)
    return f"collection_{collection_id}"
