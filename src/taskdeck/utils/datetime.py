"""Utilities for datetime handling."""

import math
from datetime import UTC, datetime, timedelta


def now_utc() -> datetime:
    """Get current UTC datetime."""
    return datetime.now(UTC)


def ensure_utc(dt: datetime) -> datetime:
    """Return an aware datetime, treating naive values as UTC."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt


def from_iso(value: str) -> datetime:
    """Parse ISO format string to an aware datetime."""
    # Handle both 'Z' suffix and explicit timezone
    return ensure_utc(datetime.fromisoformat(value.replace("Z", "+00:00")))


def parse_due(value: str, now: datetime | None = None) -> datetime:
    """Parse a due date given on the command line.

    Accepts ISO dates/datetimes plus the shortcuts ``today``, ``tomorrow``
    and ``+N`` (N days from now). Bare dates resolve to the end of that day.
    """
    now = now or now_utc()
    text = value.strip().lower()
    if text == "today":
        return now.replace(hour=23, minute=59, second=59, microsecond=0)
    if text == "tomorrow":
        return (now + timedelta(days=1)).replace(hour=23, minute=59, second=59, microsecond=0)
    if text.startswith("+") and text[1:].isdigit():
        return now + timedelta(days=int(text[1:]))
    parsed = from_iso(value.strip())
    if len(text) == 10:
        parsed = parsed.replace(hour=23, minute=59, second=59)
    return parsed


def relative_day(dt: datetime, now: datetime | None = None) -> str:
    """Describe a date relative to now: "today", "tomorrow", "in 3 days", ..."""
    now = now or now_utc()
    diff_days = math.ceil((ensure_utc(dt) - now).total_seconds() / 86400)
    if diff_days == 0:
        return "today"
    if diff_days == 1:
        return "tomorrow"
    if diff_days == -1:
        return "yesterday"
    if diff_days > 0:
        return f"in {diff_days} days"
    return f"{abs(diff_days)} days ago"
