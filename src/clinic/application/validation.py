"""
Input checks shared by the clinic handlers
"""
from __future__ import annotations

from datetime import datetime, timedelta
from typing import Optional

from shared.exceptions import ValidationError
from shared.utils.clock import DATE_FORMAT, TIME_FORMAT


def require(message: str, *values: object) -> None:
    """Raise ValidationError(message) when any value is empty."""
    if any(not value for value in values):
        raise ValidationError(message)


def _canonical(value: str, fmt: str) -> bool:
    try:
        return datetime.strptime(value, fmt).strftime(fmt) == value
    except ValueError:
        return False


def check_date(value: str, field_name: str) -> str:
    """Accept only zero-padded ``YYYY-MM-DD``."""
    if not _canonical(value, DATE_FORMAT):
        raise ValidationError(
            f"{field_name} must be in YYYY-MM-DD format",
            details={"field": field_name, "value": value},
        )
    return value


def check_time(value: str, field_name: str) -> str:
    """Accept only zero-padded 24-hour ``HH:MM``."""
    if not _canonical(value, TIME_FORMAT):
        raise ValidationError(
            f"{field_name} must be in HH:MM format",
            details={"field": field_name, "value": value},
        )
    return value


def date_range(from_date: str, to_date: str) -> tuple[Optional[datetime], Optional[datetime]]:
    """
    Turn inclusive ``YYYY-MM-DD`` bounds into a half-open datetime range.

    The upper bound becomes midnight after `to_date`, so the whole last day
    is included. Empty bounds map to None.
    """
    start = datetime.strptime(check_date(from_date, "from_date"), DATE_FORMAT) if from_date else None
    end = None
    if to_date:
        end = datetime.strptime(check_date(to_date, "to_date"), DATE_FORMAT) + timedelta(days=1)
    return start, end
