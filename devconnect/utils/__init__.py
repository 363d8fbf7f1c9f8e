"""Utility modules for the DevConnect backend."""

from .datetime_utils import utc_now, ensure_utc, date_to_datetime, datetime_to_date

__all__ = [
    "utc_now",
    "ensure_utc",
    "date_to_datetime",
    "datetime_to_date",
]
