"""Date utility functions for the Daily Floor core.

All "today"/"now" values come from here so the timezone can be pinned
through configuration and tests can pass explicit dates instead.
"""

from datetime import date, datetime, timedelta, tzinfo
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError


def get_timezone(name: Optional[str]) -> Optional[tzinfo]:
    """
    Resolve an IANA timezone name.

    Args:
        name: Zone name such as "Europe/Berlin", or None for host local time

    Returns:
        A tzinfo, or None meaning host local time
    """
    if not name:
        return None
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as err:
        raise ValueError(f"Unknown timezone: {name}") from err


def local_now(tz: Optional[tzinfo] = None) -> datetime:
    """Current wall-clock time, in ``tz`` when given, else host local time."""
    if tz is None:
        return datetime.now().astimezone()
    return datetime.now(tz)


def local_today(tz: Optional[tzinfo] = None) -> date:
    """Current calendar date in ``tz`` (host local time when None)."""
    return local_now(tz).date()


def parse_date(date_str: str) -> date:
    """
    Parse a date string in ISO format (YYYY-MM-DD).

    Args:
        date_str: Date string in ISO format

    Returns:
        Date object
    """
    try:
        return date.fromisoformat(date_str)
    except ValueError as err:
        raise ValueError(f"Invalid date format: {date_str}. Expected format: YYYY-MM-DD") from err


def days_before(day: date, days: int) -> date:
    """Return the date ``days`` calendar days before ``day``."""
    return day - timedelta(days=days)


def iter_days_back(start: date, limit: int):
    """Yield ``start`` and the days before it, at most ``limit`` dates."""
    for offset in range(limit):
        yield start - timedelta(days=offset)


def shift_month(year: int, month: int, offset: int) -> tuple[int, int]:
    """Move (year, month) back by ``offset`` months (negative moves forward)."""
    index = year * 12 + (month - 1) - offset
    return index // 12, index % 12 + 1
