# =============================================================================
# core/formatting.py  —  Small Presentation Helpers
# =============================================================================
#
# Pure functions shared by every renderer: French long-form dates,
# percentages and list truncation.  No I/O, no locale settings: month names
# are spelled out here so output never depends on the host's locale.
# =============================================================================

import math
from datetime import date, datetime
from typing import Optional, Sequence, TypeVar

T = TypeVar("T")

PLACEHOLDER = "—"

FRENCH_MONTHS = (
    "janvier",
    "février",
    "mars",
    "avril",
    "mai",
    "juin",
    "juillet",
    "août",
    "septembre",
    "octobre",
    "novembre",
    "décembre",
)


def _parse_iso(value: str) -> Optional[date]:
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        pass
    # the whole string must be a date; a valid prefix is not enough
    try:
        return date.fromisoformat(text)
    except ValueError:
        return None


def format_date(value: Optional[str]) -> str:
    """Format an ISO-8601 date as a French long date.

    >>> format_date("1977-12-21")
    '21 décembre 1977'
    >>> format_date(None)
    '—'
    >>> format_date("not-a-date")
    'not-a-date'
    """
    if not value:
        return PLACEHOLDER
    parsed = _parse_iso(value)
    if parsed is None:
        return value
    return f"{parsed.day} {FRENCH_MONTHS[parsed.month - 1]} {parsed.year}"


def percent(part: int, total: int) -> int:
    """Share of ``part`` in ``total``, rounded half up (0 when total is 0)."""
    if not total:
        return 0
    return math.floor(part / total * 100 + 0.5)


def truncate(items: Sequence[T], limit: int) -> tuple[list[T], int]:
    """Return the first ``limit`` items and how many were left out."""
    shown = list(items[:limit])
    return shown, max(len(items) - limit, 0)
