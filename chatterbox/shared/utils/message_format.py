"""
Message Presentation Helpers

Pure functions that derive the human-friendly fields shown under a message.
Nothing here is stored; every read recomputes the values from the message's
created_at, its geo snapshot and the current time.

    friendly_timestamp(created_at, now)  → "5 minutes ago"
    location(geo)                        → "Europe/Paris" | "Lyon/France" | None
    footer(created_at, geo, now)         → "5 minutes ago, Europe/Paris"

Relative Time Buckets:
======================
    delta < 30s           just now
    delta < 1 minute      N seconds ago
    delta < 2 minutes     a minute ago
    delta < 1 hour        N minutes ago
    1 hour <= delta < 2h  1 hour ago
    delta < 1 day         N hours ago
    delta < 2 days        yesterday
    delta < 1 week        N days ago
    otherwise             a long time ago
"""

import math
from datetime import datetime, timezone
from typing import Mapping, Optional

MINUTE = 60
HOUR = MINUTE * 60
DAY = HOUR * 24
WEEK = DAY * 7


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes; they are stored as UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def friendly_timestamp(created_at: Optional[datetime], now: Optional[datetime] = None) -> str:
    """
    Describe how long ago a message was created.

    Args:
        created_at: Creation time of the message; None until the message
            is flushed, which reads as "just now"
        now: Reference time (defaults to the current UTC time)

    Returns:
        Relative age such as "just now" or "3 days ago"
    """
    if created_at is None:
        return "just now"
    now = _as_utc(now) if now is not None else datetime.now(timezone.utc)
    delta = math.floor((now - _as_utc(created_at)).total_seconds() + 0.5)

    if delta < 30:
        return "just now"
    if delta < MINUTE:
        return f"{delta} seconds ago"
    if delta < 2 * MINUTE:
        return "a minute ago"
    if delta < HOUR:
        return f"{delta // MINUTE} minutes ago"
    if delta // HOUR == 1:
        return "1 hour ago"
    if delta < DAY:
        return f"{delta // HOUR} hours ago"
    if delta < 2 * DAY:
        return "yesterday"
    if delta < WEEK:
        return f"{delta // DAY} days ago"
    return "a long time ago"


def location(geo: Optional[Mapping[str, Optional[str]]]) -> Optional[str]:
    """
    Build a location label from a geo snapshot.

    The time zone wins when present; otherwise "city/country" when both
    parts are known.

    Args:
        geo: Mapping with country_name, region_name, city and time_zone

    Returns:
        Location label, or None when there is not enough information
    """
    if not geo:
        return None

    time_zone = geo.get("time_zone")
    if time_zone:
        return time_zone

    city = geo.get("city")
    country_name = geo.get("country_name")
    if city and country_name:
        return f"{city}/{country_name}"
    return None


def footer(
    created_at: Optional[datetime],
    geo: Optional[Mapping[str, Optional[str]]],
    now: Optional[datetime] = None,
) -> str:
    """Relative time, followed by the location when there is one."""
    timestamp = friendly_timestamp(created_at, now)
    loc = location(geo)
    if loc:
        return f"{timestamp}, {loc}"
    return timestamp
