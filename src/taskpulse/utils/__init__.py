"""Utility helpers."""

from .datetime import from_iso, next_day, now_utc, today_in, zone

__all__ = [
    "from_iso",
    "next_day",
    "now_utc",
    "today_in",
    "zone",
]
