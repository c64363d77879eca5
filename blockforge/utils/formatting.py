# blockforge/utils/formatting.py
"""
Locale-aware field formatting for rendered pages.

Month names and ordering are spelled out per language instead of going
through strftime, whose %b/%p output depends on the process locale.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Optional


TIMESTAMP_FALLBACK = "N/A"

_MONTHS = {
    "en": ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
           "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"),
    "fr": ("janv.", "févr.", "mars", "avr.", "mai", "juin",
           "juil.", "août", "sept.", "oct.", "nov.", "déc."),
    "es": ("ene", "feb", "mar", "abr", "may", "jun",
           "jul", "ago", "sept", "oct", "nov", "dic"),
}


def parse_timestamp(value: Any) -> Optional[datetime]:
    """
    Parse an ISO-8601 timestamp into an aware datetime.

    'Z' suffix and naive values are read as UTC. Returns None when the
    value cannot be parsed.
    """
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        dt = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    except ValueError:
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def _zone_name(dt: datetime) -> str:
    offset = dt.utcoffset()
    if not offset:
        return "UTC"
    return dt.tzname() or "UTC"


def format_timestamp(value: Any, language: str = "en") -> str:
    """
    Render date, time and timezone in the page language.

    en: "Oct 19, 2026, 02:30:05 PM UTC"
    fr: "19 oct. 2026, 14:30:05 UTC"
    es: "19 oct 2026, 14:30:05 UTC"

    Never raises; unparseable input gives TIMESTAMP_FALLBACK.
    """
    dt = parse_timestamp(value)
    if dt is None:
        return TIMESTAMP_FALLBACK

    lang = language if language in _MONTHS else "en"
    month = _MONTHS[lang][dt.month - 1]
    zone = _zone_name(dt)

    if lang == "en":
        hour12 = dt.hour % 12 or 12
        meridiem = "AM" if dt.hour < 12 else "PM"
        return (
            f"{month} {dt.day:02d}, {dt.year}, "
            f"{hour12:02d}:{dt.minute:02d}:{dt.second:02d} {meridiem} {zone}"
        )

    return (
        f"{dt.day:02d} {month} {dt.year}, "
        f"{dt.hour:02d}:{dt.minute:02d}:{dt.second:02d} {zone}"
    )


def timestamp_year(value: Any) -> Optional[int]:
    """Year of the caller-supplied timestamp (used by copyright footers)."""
    dt = parse_timestamp(value)
    return dt.year if dt else None


def truncate_text(text: str, max_length: int = 60) -> str:
    if len(text) <= max_length:
        return text
    if max_length <= 3:
        return text[:max_length]
    return text[: max_length - 3] + "..."
