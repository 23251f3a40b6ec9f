"""Time-of-day parsing and display formatting.

Parsing is strict and never raises: callers get None back and decide
whether to skip the record.
"""

from __future__ import annotations

import re
from datetime import date, datetime
from typing import Optional

_TIME_RE = re.compile(r"^\s*(\d{1,2}):(\d{2})(?::(\d{2})(?:\.\d+)?)?\s*$")


def parse_time_of_day(value: object) -> Optional[tuple[int, int]]:
    """Parse "HH:MM" or "HH:MM:SS" into (hours, minutes).

    "24:00" is accepted as the end of the day. Seconds are validated
    but dropped.
    """
    if not isinstance(value, str):
        return None
    match = _TIME_RE.match(value)
    if match is None:
        return None
    hours, minutes = int(match.group(1)), int(match.group(2))
    seconds = int(match.group(3) or 0)
    if minutes > 59 or seconds > 59:
        return None
    if hours > 24 or (hours == 24 and (minutes or seconds)):
        return None
    return hours, minutes


def fractional_hours(value: object) -> Optional[float]:
    """Convert a time of day to hours since midnight (hours + minutes/60)."""
    parsed = parse_time_of_day(value)
    if parsed is None:
        return None
    hours, minutes = parsed
    return hours + minutes / 60


def format_time(value: object) -> str:
    """Format a time of day as "HH:MM", falling back to the raw value."""
    parsed = parse_time_of_day(value)
    if parsed is None:
        return str(value)
    return f"{parsed[0]:02d}:{parsed[1]:02d}"


def format_date(value: object) -> str:
    """Format a "YYYY-MM-DD" date as "MM/DD/YYYY", falling back to the raw value."""
    try:
        return date.fromisoformat(str(value)).strftime("%m/%d/%Y")
    except ValueError:
        return str(value)


def format_timestamp(value: object) -> str:
    """Format an ISO timestamp as e.g. "Jan 05, 14:30"."""
    text = str(value)
    try:
        parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        return text
    return parsed.strftime("%b %d, %H:%M")
