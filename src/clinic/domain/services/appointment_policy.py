"""
Appointment Status Policy
Explicit transition table for the appointment lifecycle
"""
from __future__ import annotations

from clinic.domain.enums import AppointmentStatus
from shared.exceptions import InvalidStateTransitionError

S = AppointmentStatus

TERMINAL_STATUSES: frozenset[AppointmentStatus] = frozenset({S.CANCELLED, S.COMPLETED})

_FROM_OPEN: frozenset[AppointmentStatus] = frozenset(
    {S.CONFIRMED, S.IN_PROGRESS, S.RESCHEDULED, S.CANCELLED, S.COMPLETED, S.NO_SHOW}
)

ALLOWED_TRANSITIONS: dict[AppointmentStatus, frozenset[AppointmentStatus]] = {
    S.UNSPECIFIED: _FROM_OPEN,
    S.SCHEDULED: _FROM_OPEN,
    S.CONFIRMED: _FROM_OPEN,
    S.IN_PROGRESS: _FROM_OPEN,
    S.RESCHEDULED: _FROM_OPEN,
    S.NO_SHOW: _FROM_OPEN,
    S.CANCELLED: frozenset(),
    S.COMPLETED: frozenset(),
}

_VERBS = {
    S.CONFIRMED: "confirm",
    S.IN_PROGRESS: "start",
    S.RESCHEDULED: "reschedule",
    S.CANCELLED: "cancel",
    S.COMPLETED: "complete",
    S.NO_SHOW: "mark as no-show",
}


def can_transition(current: AppointmentStatus, target: AppointmentStatus) -> bool:
    return target in ALLOWED_TRANSITIONS.get(current, frozenset())


def ensure_transition(current: AppointmentStatus, target: AppointmentStatus) -> None:
    """
    Raise InvalidStateTransitionError unless `current -> target` is allowed.

    Messages read "appointment is already <status>" for a repeated terminal
    status and "cannot <verb> a <status> appointment" otherwise.
    """
    if can_transition(current, target):
        return
    if current == target:
        raise InvalidStateTransitionError(f"appointment is already {current.value}")
    verb = _VERBS.get(target, f"move to {target.value}")
    raise InvalidStateTransitionError(f"cannot {verb} a {current.value} appointment")
