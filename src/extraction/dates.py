"""Date normalizer: resolve absolute and relative date expressions to ISO dates."""

from __future__ import annotations

import re
from datetime import date, datetime, timedelta
from zoneinfo import ZoneInfo

from src.extraction.models import DateSentinel

ISO_DATE_RE = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")
NUMERIC_DATE_RE = re.compile(r"^([0-9]{1,2})[-/]([0-9]{1,2})[-/]([0-9]{2}|[0-9]{4})$")

VAGUE_KEYWORDS = frozenset({"upcoming", "tbd", "later", "soon"})

# Sunday-first, so index 0 is Sunday
WEEKDAYS: tuple[str, ...] = (
    "sunday",
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
)


def today_in_timezone(tz_name: str) -> date:
    """Return the current calendar date in the *tz_name* zone."""
    return datetime.now(ZoneInfo(tz_name)).date()


def _sunday_first_index(day: date) -> int:
    # date.weekday() is Monday-first
    return (day.weekday() + 1) % 7


def normalize_date(raw: str, today: date) -> str | None:
    """Resolve a date expression relative to *today*.

    Args:
        raw: The captured date text, e.g. ``"2026-02-20"``, ``"Friday"``,
            ``"next week"`` or ``"1/20/26"``.
        today: Reference date for relative expressions.

    Returns:
        A ``YYYY-MM-DD`` string, ``DateSentinel.UPCOMING`` for vague
        keywords such as "tbd", or ``None`` when the text cannot be resolved.
    """
    text = raw.strip()
    if ISO_DATE_RE.match(text):
        return text

    lower = " ".join(text.lower().split())
    if lower in VAGUE_KEYWORDS:
        return DateSentinel.UPCOMING

    if lower == "tomorrow":
        return (today + timedelta(days=1)).isoformat()

    if lower == "next week":
        return (today + timedelta(days=7)).isoformat()

    if lower == "this week":
        days_to_sunday = 7 - _sunday_first_index(today)
        return (today + timedelta(days=days_to_sunday)).isoformat()

    if lower in WEEKDAYS:
        offset = (WEEKDAYS.index(lower) - _sunday_first_index(today) + 7) % 7 or 7
        return (today + timedelta(days=offset)).isoformat()

    match = NUMERIC_DATE_RE.match(lower)
    if match:
        month, day, year = match.groups()
        if len(year) == 2:
            year = "20" + year
        try:
            return date(int(year), int(month), int(day)).isoformat()
        except ValueError:
            return None

    return None
