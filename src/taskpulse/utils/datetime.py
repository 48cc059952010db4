"""Utilities for datetime handling."""

from datetime import UTC, date, datetime, timedelta, tzinfo
from zoneinfo import ZoneInfo


def now_utc() -> datetime:
    """Get current UTC datetime."""
    return datetime.now(UTC)


def zone(name: str) -> tzinfo:
    """Resolve a timezone name. "UTC" needs no tz database."""
    if name == "UTC":
        return UTC
    return ZoneInfo(name)


def today_in(name: str = "UTC") -> date:
    """Current calendar day in the given timezone."""
    return datetime.now(zone(name)).date()


def next_day(day: date) -> date:
    """The calendar day after ``day``."""
    return day + timedelta(days=1)


def from_iso(value: str) -> datetime:
    """Parse ISO format string to datetime."""
    # Handle both 'Z' suffix and explicit timezone
    return datetime.fromisoformat(value.replace("Z", "+00:00"))
