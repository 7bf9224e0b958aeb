"""
Prescription Validity Policy
"""
from __future__ import annotations

from datetime import datetime, timedelta

DEFAULT_VALIDITY_DAYS = 30


def valid_until(issued_at: datetime, validity_days: int) -> datetime:
    """Expiry moment for a prescription; non-positive validity means the default."""
    days = validity_days if validity_days > 0 else DEFAULT_VALIDITY_DAYS
    return issued_at + timedelta(days=days)


def is_active(expires_at: datetime, now: datetime) -> bool:
    return expires_at >= now
