"""
Centralized DateTime Utilities
==============================

Provides consistent datetime handling across the application.

Functions:
- utc_now(): timezone-aware UTC datetime for persisted timestamps
- ensure_utc(): normalize naive/aware datetimes read back from MongoDB
- date_to_datetime() / datetime_to_date(): BSON has no date type, so calendar
  dates (experience/education ranges) are stored as midnight UTC datetimes
"""
from datetime import date, datetime, time, timezone as dt_timezone
from typing import Optional


def utc_now() -> datetime:
    """
    Get current UTC time as a timezone-aware datetime.

    Use this for all timestamps that will be persisted to MongoDB (BSON Date).
    """
    return datetime.now(dt_timezone.utc)


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


def date_to_datetime(value: Optional[date]) -> Optional[datetime]:
    """Convert a calendar date to a midnight UTC datetime for BSON storage."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return ensure_utc(value)
    return datetime.combine(value, time.min, tzinfo=dt_timezone.utc)


def datetime_to_date(value: Optional[datetime]) -> Optional[date]:
    """Inverse of date_to_datetime."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return ensure_utc(value).date()
    return value
