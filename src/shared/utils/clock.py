"""
Time helpers.
All timestamps are naive datetimes in UTC.
"""
from __future__ import annotations

from datetime import date, datetime, timezone

DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M"
TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


def format_date(value: datetime | date | None) -> str:
    return value.strftime(DATE_FORMAT) if value else ""


def format_timestamp(value: datetime | None) -> str:
    return value.strftime(TIMESTAMP_FORMAT) if value else ""
