import pytest

from clinic.domain.entities import Appointment
from clinic.domain.enums import AppointmentStatus
from clinic.domain.services.appointment_policy import (
    TERMINAL_STATUSES,
    can_transition,
    ensure_transition,
)
from shared.exceptions import InvalidStateTransitionError

S = AppointmentStatus


def _appointment(status=S.SCHEDULED, notes="bring x-rays"):
    return Appointment(
        patient_id="p1",
        doctor_id="d1",
        appointment_date="2030-01-15",
        appointment_time="10:00",
        status=status,
        notes=notes,
    )


@pytest.mark.parametrize("terminal", sorted(TERMINAL_STATUSES))
def test_terminal_statuses_have_no_exit(terminal):
    for target in S:
        assert can_transition(terminal, target) is False


@pytest.mark.parametrize("current", [S.SCHEDULED, S.CONFIRMED, S.RESCHEDULED, S.IN_PROGRESS])
def test_open_statuses_can_close(current):
    assert can_transition(current, S.CANCELLED)
    assert can_transition(current, S.COMPLETED)
    assert can_transition(current, S.RESCHEDULED)


@pytest.mark.parametrize(
    "current,target,message",
    [
        (S.CANCELLED, S.CANCELLED, "appointment is already cancelled"),
        (S.COMPLETED, S.CANCELLED, "cannot cancel a completed appointment"),
        (S.CANCELLED, S.RESCHEDULED, "cannot reschedule a cancelled appointment"),
        (S.COMPLETED, S.RESCHEDULED, "cannot reschedule a completed appointment"),
        (S.CANCELLED, S.COMPLETED, "cannot complete a cancelled appointment"),
        (S.COMPLETED, S.COMPLETED, "appointment is already completed"),
    ],
)
def test_rejected_transition_messages(current, target, message):
    with pytest.raises(InvalidStateTransitionError) as exc:
        ensure_transition(current, target)
    assert exc.value.message == message
    assert exc.value.status_code == 409


def test_cancel_records_reason_and_time():
    appt = _appointment()
    appt.cancel("feeling better")
    assert appt.status == S.CANCELLED
    assert appt.cancellation_reason == "feeling better"
    assert appt.cancelled_at is not None


def test_reschedule_appends_reason_to_notes():
    appt = _appointment()
    appt.reschedule("2030-01-16", "11:30", "doctor in surgery")
    assert appt.status == S.RESCHEDULED
    assert (appt.appointment_date, appt.appointment_time) == ("2030-01-16", "11:30")
    assert appt.notes == "bring x-rays\nRescheduled: doctor in surgery"


def test_reschedule_without_reason_keeps_notes():
    appt = _appointment()
    appt.reschedule("2030-01-16", "11:30")
    assert appt.notes == "bring x-rays"


def test_complete_replaces_notes_only_when_given():
    kept = _appointment()
    kept.complete("flu")
    assert kept.diagnosis == "flu"
    assert kept.notes == "bring x-rays"

    replaced = _appointment()
    replaced.complete("flu", "rest and fluids")
    assert replaced.notes == "rest and fluids"


def test_rescheduled_appointment_can_still_be_completed():
    appt = _appointment(status=S.RESCHEDULED)
    appt.complete("sprain")
    assert appt.status == S.COMPLETED
