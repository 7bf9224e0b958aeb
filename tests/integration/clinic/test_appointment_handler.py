import pytest

from clinic.application.commands import (
    BookAppointmentCommand,
    CancelAppointmentCommand,
    CompleteAppointmentCommand,
    RescheduleAppointmentCommand,
    UpdateDoctorCommand,
)
from clinic.domain.entities import Appointment
from clinic.domain.enums import AppointmentStatus
from clinic.infrastructure.persistence.repositories import AppointmentRepository
from shared.exceptions import (
    BusinessRuleViolationError,
    ConflictError,
    InvalidStateTransitionError,
    NotFoundError,
    StorageError,
    ValidationError,
)

DAY = "2030-01-15"


@pytest.fixture
async def people(make_patient, make_doctor):
    return await make_patient(), await make_doctor()


def _book(patient, doctor, date=DAY, time="10:00", **kwargs):
    return BookAppointmentCommand(
        patient_id=patient.id,
        doctor_id=doctor.id,
        appointment_date=date,
        appointment_time=time,
        **kwargs,
    )


async def test_book_snapshots_names(appointment_handler, people):
    patient, doctor = people
    appt = await appointment_handler.book(_book(patient, doctor, reason_for_visit="cough"))
    assert appt.status == AppointmentStatus.SCHEDULED
    assert appt.patient_name == "Jane Doe"
    assert appt.doctor_name == "Gregory House"

    loaded = await appointment_handler.get(appt.id)
    assert loaded.reason_for_visit == "cough"


async def test_book_validates_input(appointment_handler, people):
    patient, doctor = people
    with pytest.raises(ValidationError, match="patient_id and doctor_id are required"):
        await appointment_handler.book(BookAppointmentCommand("", doctor.id, DAY, "10:00"))
    with pytest.raises(ValidationError, match="appointment_date and appointment_time are required"):
        await appointment_handler.book(_book(patient, doctor, time=""))
    with pytest.raises(ValidationError):
        await appointment_handler.book(_book(patient, doctor, date="15/01/2030"))


async def test_book_unknown_parties(appointment_handler, people):
    patient, doctor = people
    with pytest.raises(NotFoundError, match="patient not found"):
        await appointment_handler.book(BookAppointmentCommand("missing", doctor.id, DAY, "10:00"))
    with pytest.raises(NotFoundError, match="doctor not found"):
        await appointment_handler.book(BookAppointmentCommand(patient.id, "missing", DAY, "10:00"))


async def test_unavailable_doctor_cannot_be_booked(appointment_handler, doctor_handler, people):
    patient, doctor = people
    await doctor_handler.update(UpdateDoctorCommand(doctor_id=doctor.id, is_available=False))
    with pytest.raises(BusinessRuleViolationError, match="doctor is not available"):
        await appointment_handler.book(_book(patient, doctor))


async def test_double_booking_then_rebook_after_cancel(appointment_handler, people):
    patient, doctor = people
    first = await appointment_handler.book(_book(patient, doctor))

    with pytest.raises(ConflictError, match="time slot is already booked"):
        await appointment_handler.book(_book(patient, doctor))

    await appointment_handler.cancel(CancelAppointmentCommand(first.id, "conflict at work"))
    second = await appointment_handler.book(_book(patient, doctor))
    assert second.id != first.id
    assert second.status == AppointmentStatus.SCHEDULED


async def test_active_slot_index_backs_the_check(session, people):
    patient, doctor = people
    repo = AppointmentRepository(session)

    def _appt():
        return Appointment(
            patient_id=patient.id,
            doctor_id=doctor.id,
            appointment_date=DAY,
            appointment_time="11:00",
        )

    await repo.add(_appt())
    with pytest.raises(ConflictError, match="time slot is already booked"):
        await repo.add(_appt())


async def test_cancel_twice_and_cancel_completed(appointment_handler, people):
    patient, doctor = people
    appt = await appointment_handler.book(_book(patient, doctor))
    cancelled = await appointment_handler.cancel(CancelAppointmentCommand(appt.id, "sick"))
    assert cancelled.status == AppointmentStatus.CANCELLED
    assert cancelled.cancellation_reason == "sick"
    assert cancelled.cancelled_at is not None

    with pytest.raises(InvalidStateTransitionError, match="appointment is already cancelled"):
        await appointment_handler.cancel(CancelAppointmentCommand(appt.id))

    done = await appointment_handler.book(_book(patient, doctor, time="12:00"))
    await appointment_handler.complete(CompleteAppointmentCommand(done.id, "healthy"))
    with pytest.raises(InvalidStateTransitionError, match="cannot cancel a completed appointment"):
        await appointment_handler.cancel(CancelAppointmentCommand(done.id))


async def test_reschedule_moves_slot_and_notes(appointment_handler, people):
    patient, doctor = people
    appt = await appointment_handler.book(_book(patient, doctor, notes="first visit"))

    moved = await appointment_handler.reschedule(
        RescheduleAppointmentCommand(appt.id, "2030-01-16", "14:30", "doctor away")
    )
    assert moved.status == AppointmentStatus.RESCHEDULED
    assert (moved.appointment_date, moved.appointment_time) == ("2030-01-16", "14:30")
    assert moved.notes == "first visit\nRescheduled: doctor away"

    # the old slot is free again
    await appointment_handler.book(_book(patient, doctor))


async def test_reschedule_to_own_slot_is_not_a_conflict(appointment_handler, people):
    patient, doctor = people
    appt = await appointment_handler.book(_book(patient, doctor))
    moved = await appointment_handler.reschedule(RescheduleAppointmentCommand(appt.id, DAY, "10:00"))
    assert moved.status == AppointmentStatus.RESCHEDULED


async def test_reschedule_into_taken_slot(appointment_handler, people):
    patient, doctor = people
    await appointment_handler.book(_book(patient, doctor, time="09:00"))
    appt = await appointment_handler.book(_book(patient, doctor, time="09:30"))
    with pytest.raises(ConflictError, match="new time slot is already booked"):
        await appointment_handler.reschedule(RescheduleAppointmentCommand(appt.id, DAY, "09:00"))


async def test_reschedule_requires_new_slot(appointment_handler, people):
    patient, doctor = people
    appt = await appointment_handler.book(_book(patient, doctor))
    with pytest.raises(ValidationError, match="new_appointment_date and new_appointment_time are required"):
        await appointment_handler.reschedule(RescheduleAppointmentCommand(appt.id, "", ""))


async def test_reschedule_terminal_appointment(appointment_handler, people):
    patient, doctor = people
    appt = await appointment_handler.book(_book(patient, doctor))
    await appointment_handler.cancel(CancelAppointmentCommand(appt.id))
    with pytest.raises(InvalidStateTransitionError, match="cannot reschedule a cancelled appointment"):
        await appointment_handler.reschedule(RescheduleAppointmentCommand(appt.id, DAY, "15:00"))


async def test_complete_increments_doctor_counter(appointment_handler, doctor_handler, session, people):
    patient, doctor = people
    appt = await appointment_handler.book(_book(patient, doctor, notes="initial"))

    done = await appointment_handler.complete(CompleteAppointmentCommand(appt.id, "migraine", "rest"))
    assert done.status == AppointmentStatus.COMPLETED
    assert done.diagnosis == "migraine"
    assert done.notes == "rest"

    session.expire_all()
    assert (await doctor_handler.get(doctor.id)).total_consultations == 1

    with pytest.raises(InvalidStateTransitionError, match="appointment is already completed"):
        await appointment_handler.complete(CompleteAppointmentCommand(appt.id, "again"))


async def test_counter_failure_does_not_fail_completion(appointment_handler, people, monkeypatch):
    patient, doctor = people
    appt = await appointment_handler.book(_book(patient, doctor))

    async def broken(doctor_id):
        raise StorageError("failed to increment doctor consultations")

    monkeypatch.setattr(appointment_handler.doctors, "increment_consultations", broken)
    done = await appointment_handler.complete(CompleteAppointmentCommand(appt.id, "ok"))
    assert done.status == AppointmentStatus.COMPLETED


async def test_available_slots(appointment_handler, people):
    patient, doctor = people
    await appointment_handler.book(_book(patient, doctor, time="09:00"))
    cancelled = await appointment_handler.book(_book(patient, doctor, time="11:00"))
    await appointment_handler.cancel(CancelAppointmentCommand(cancelled.id))
    await appointment_handler.book(_book(patient, doctor, date="2030-01-16", time="10:00"))

    result = await appointment_handler.available_slots(doctor.id, DAY)
    assert result.doctor_name == "Gregory House"
    assert len(result.slots) == 16
    taken = [s.start_time for s in result.slots if not s.is_available]
    assert taken == ["09:00"]


async def test_available_slots_requires_known_doctor(appointment_handler):
    with pytest.raises(ValidationError, match="doctor_id and date are required"):
        await appointment_handler.available_slots("", DAY)
    with pytest.raises(NotFoundError):
        await appointment_handler.available_slots("missing", DAY)


async def test_listings_filter_and_order(appointment_handler, people):
    patient, doctor = people
    a = await appointment_handler.book(_book(patient, doctor, date="2030-01-10", time="09:00"))
    await appointment_handler.book(_book(patient, doctor, date="2030-01-20", time="09:00"))
    await appointment_handler.book(_book(patient, doctor, date="2030-01-20", time="15:00"))
    await appointment_handler.cancel(CancelAppointmentCommand(a.id))

    mine = await appointment_handler.patient_appointments(patient.id)
    assert [(x.appointment_date, x.appointment_time) for x in mine] == [
        ("2030-01-20", "15:00"),
        ("2030-01-20", "09:00"),
        ("2030-01-10", "09:00"),
    ]

    cancelled = await appointment_handler.patient_appointments(patient.id, AppointmentStatus.CANCELLED)
    assert [x.id for x in cancelled] == [a.id]

    ranged = await appointment_handler.patient_appointments(patient.id, from_date="2030-01-01", to_date="2030-01-10")
    assert [x.id for x in ranged] == [a.id]

    on_day = await appointment_handler.doctor_appointments(doctor.id, date="2030-01-20")
    assert len(on_day) == 2
