"""
DateTime Utilities
==================

All timestamps persisted to MongoDB are timezone-aware UTC datetimes.

Functions:
- utc_now(): current UTC time (timezone-aware)
- ensure_utc(): normalize naive/aware datetimes to UTC
- to_iso(): ISO 8601 string with millisecond precision and 'Z' suffix
"""
from datetime import datetime, timezone as dt_timezone
from typing import Optional


def utc_now() -> datetime:
    """
    Get current UTC time as a timezone-aware datetime.

    MongoDB stores dates with millisecond precision, so microseconds are
    truncated here to keep in-memory and stored values equal.
    """
    now = datetime.now(dt_timezone.utc)
    return now.replace(microsecond=(now.microsecond // 1000) * 1000)


def ensure_utc(dt: Optional[datetime]) -> Optional[datetime]:
    """
    Normalize a datetime into a timezone-aware UTC datetime.

    - If dt is None -> None
    - If dt is naive -> assume it represents UTC (this matches MongoDB/PyMongo behavior)
    - If dt is aware -> convert to UTC
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=dt_timezone.utc)
    return dt.astimezone(dt_timezone.utc)


def to_iso(dt: Optional[datetime]) -> Optional[str]:
    """
    Convert datetime object to an ISO 8601 UTC string (e.g. "2025-12-24T10:30:00.123Z").
    Naive datetimes are treated as UTC.
    """
    if dt is None:
        return None
    dt = ensure_utc(dt)
    return dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")
