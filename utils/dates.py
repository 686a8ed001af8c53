from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from typing import Any, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from config import APP_TIMEZONE


def app_tz() -> Optional[ZoneInfo]:
    if not APP_TIMEZONE:
        return None
    try:
        return ZoneInfo(APP_TIMEZONE)
    except ZoneInfoNotFoundError:
        return None


def local_now() -> datetime:
    tz = app_tz()
    if tz is None:
        return datetime.now().astimezone()
    return datetime.now(tz)


def local_today() -> date:
    return local_now().date()


def get_today() -> date:
    """FastAPI dependency for the caller's calendar date."""
    return local_today()


def ensure_aware_utc(dt: datetime) -> datetime:
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def to_day(value: Any) -> Optional[date]:
    """
    Truncate a timestamp to its calendar day.

    Strings keep only the part before the first "T" and no timezone
    conversion is applied, so "2026-01-10T23:30:00-05:00" is 2026-01-10.
    Returns None for anything that is not a valid YYYY-MM-DD prefix.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None
    head = value.strip().split("T")[0]
    if len(head) != 10:
        return None
    try:
        return date.fromisoformat(head)
    except ValueError:
        return None


def parse_timestamp(value: Any) -> Optional[datetime]:
    if isinstance(value, datetime):
        return ensure_aware_utc(value)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        dt = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    except ValueError:
        return None
    return ensure_aware_utc(dt)


def week_start(day: date) -> date:
    # weeks start on Sunday
    return day - timedelta(days=(day.weekday() + 1) % 7)


def iter_days(start: date, end: date):
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)
