"""
Slot Generation
Fixed 30-minute grid for the clinic's working day
"""
from __future__ import annotations

from datetime import datetime, timedelta
from typing import Iterable

from clinic.domain.value_objects import TimeSlot
from shared.utils.clock import TIME_FORMAT

WORKDAY_START_HOUR = 9
WORKDAY_END_HOUR = 17
SLOT_MINUTES = 30


def generate_slots(
    booked_times: Iterable[str],
    start_hour: int = WORKDAY_START_HOUR,
    end_hour: int = WORKDAY_END_HOUR,
    slot_minutes: int = SLOT_MINUTES,
) -> list[TimeSlot]:
    """
    Build the day's slots between `start_hour` and `end_hour`.

    A slot is unavailable when one of `booked_times` (``HH:MM``) equals its
    start time exactly.
    """
    booked = set(booked_times)
    step = timedelta(minutes=slot_minutes)
    cursor = datetime(2000, 1, 1, start_hour)
    day_end = datetime(2000, 1, 1, end_hour)

    slots: list[TimeSlot] = []
    while cursor + step <= day_end:
        start = cursor.strftime(TIME_FORMAT)
        slots.append(
            TimeSlot(
                start_time=start,
                end_time=(cursor + step).strftime(TIME_FORMAT),
                is_available=start not in booked,
            )
        )
        cursor += step
    return slots
