# /src/shared/utils/serialization.py
"""
JSON helpers for text columns that carry structured values.
"""

from __future__ import annotations

import json
from datetime import date, datetime
from decimal import Decimal
from typing import Any
from uuid import UUID


class SafeEncoder(json.JSONEncoder):
    def default(self, o: Any):
        if isinstance(o, (datetime, date)):
            return o.isoformat()
        if isinstance(o, UUID):
            return str(o)
        if isinstance(o, Decimal):
            return float(o)
        return super().default(o)


def dumps(data: Any) -> str:
    return json.dumps(data, separators=(",", ":"), cls=SafeEncoder)


def loads(s: str | None, default: Any = None) -> Any:
    """Decode a stored JSON value; empty or NULL columns yield `default`."""
    if not s:
        return default
    return json.loads(s)
