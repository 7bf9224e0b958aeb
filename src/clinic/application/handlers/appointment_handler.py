"""
Appointment Handler
Booking, lifecycle transitions and slot lookup
"""
from __future__ import annotations

from typing import Optional, Sequence

from clinic.application.commands import (
    BookAppointmentCommand,
    CancelAppointmentCommand,
    CompleteAppointmentCommand,
    RescheduleAppointmentCommand,
)
from clinic.application.dto import AvailableSlotsDTO
from clinic.application.validation import check_date, check_time, require
from clinic.domain.entities import Appointment
from clinic.domain.enums import AppointmentStatus
from clinic.domain.protocols import IAppointmentRepository, IDoctorRepository, IPatientRepository
from clinic.domain.services.scheduling import generate_slots
from shared.exceptions import BusinessRuleViolationError, ConflictError, NotFoundError, StorageError
from shared.infrastructure.observability.logger import get_logger
from shared.infrastructure.observability.tracer import get_tracer

logger = get_logger(__name__)


class AppointmentHandler:
    """
    Scheduling workflow.

    At most one non-cancelled appointment may hold a (doctor, date, time)
    slot. The check here gives the caller a clear error; the partial unique
    index in the database closes the race between concurrent bookings.
    """

    def __init__(
        self,
        appointments: IAppointmentRepository,
        patients: IPatientRepository,
        doctors: IDoctorRepository,
    ) -> None:
        self.appointments = appointments
        self.patients = patients
        self.doctors = doctors

    async def book(self, cmd: BookAppointmentCommand) -> Appointment:
        with get_tracer().span("AppointmentHandler.book", doctor_id=cmd.doctor_id):
            require("patient_id and doctor_id are required", cmd.patient_id, cmd.doctor_id)
            require(
                "appointment_date and appointment_time are required",
                cmd.appointment_date,
                cmd.appointment_time,
            )
            check_date(cmd.appointment_date, "appointment_date")
            check_time(cmd.appointment_time, "appointment_time")

            patient = await self.patients.get_by_id(cmd.patient_id)
            if patient is None:
                raise NotFoundError("patient not found", details={"patient_id": cmd.patient_id})

            doctor = await self.doctors.get_by_id(cmd.doctor_id)
            if doctor is None:
                raise NotFoundError("doctor not found", details={"doctor_id": cmd.doctor_id})
            if not doctor.is_available:
                raise BusinessRuleViolationError("doctor is not available")

            if await self.appointments.has_conflict(
                cmd.doctor_id, cmd.appointment_date, cmd.appointment_time
            ):
                raise ConflictError("time slot is already booked")

            appointment = Appointment(
                patient_id=patient.id,
                patient_name=patient.full_name,
                doctor_id=doctor.id,
                doctor_name=doctor.full_name,
                appointment_date=cmd.appointment_date,
                appointment_time=cmd.appointment_time,
                status=AppointmentStatus.SCHEDULED,
                consultation_type=cmd.consultation_type,
                reason_for_visit=cmd.reason_for_visit,
                notes=cmd.notes,
            )
            created = await self.appointments.add(appointment)
            logger.info(
                "Appointment booked",
                appointment_id=created.id,
                doctor_id=created.doctor_id,
                date=created.appointment_date,
                time=created.appointment_time,
            )
            return created

    async def get(self, appointment_id: str) -> Appointment:
        with get_tracer().span("AppointmentHandler.get", appointment_id=appointment_id):
            require("appointment_id is required", appointment_id)
            appointment = await self.appointments.get_by_id(appointment_id)
            if appointment is None:
                raise NotFoundError("appointment not found", details={"appointment_id": appointment_id})
            return appointment

    async def cancel(self, cmd: CancelAppointmentCommand) -> Appointment:
        with get_tracer().span("AppointmentHandler.cancel", appointment_id=cmd.appointment_id):
            appointment = await self.get(cmd.appointment_id)
            appointment.cancel(cmd.cancellation_reason)
            updated = await self.appointments.update(appointment)
            logger.info("Appointment cancelled", appointment_id=updated.id)
            return updated

    async def reschedule(self, cmd: RescheduleAppointmentCommand) -> Appointment:
        """
        Move an appointment to a new slot.

        Only the new slot is conflict-checked, ignoring the appointment itself.
        """
        with get_tracer().span("AppointmentHandler.reschedule", appointment_id=cmd.appointment_id):
            require("appointment_id is required", cmd.appointment_id)
            require(
                "new_appointment_date and new_appointment_time are required",
                cmd.new_appointment_date,
                cmd.new_appointment_time,
            )
            check_date(cmd.new_appointment_date, "new_appointment_date")
            check_time(cmd.new_appointment_time, "new_appointment_time")

            appointment = await self.get(cmd.appointment_id)
            appointment.ensure_can_reschedule()

            if await self.appointments.has_conflict(
                appointment.doctor_id,
                cmd.new_appointment_date,
                cmd.new_appointment_time,
                exclude_id=appointment.id,
            ):
                raise ConflictError("new time slot is already booked")

            appointment.reschedule(cmd.new_appointment_date, cmd.new_appointment_time, cmd.reason)
            updated = await self.appointments.update(appointment)
            logger.info(
                "Appointment rescheduled",
                appointment_id=updated.id,
                date=updated.appointment_date,
                time=updated.appointment_time,
            )
            return updated

    async def complete(self, cmd: CompleteAppointmentCommand) -> Appointment:
        with get_tracer().span("AppointmentHandler.complete", appointment_id=cmd.appointment_id):
            appointment = await self.get(cmd.appointment_id)
            appointment.complete(cmd.diagnosis, cmd.notes)
            updated = await self.appointments.update(appointment)

            # best effort: the appointment stays completed even if the counter fails
            try:
                await self.doctors.increment_consultations(updated.doctor_id)
            except StorageError as e:
                logger.warning(
                    "Failed to increment doctor consultations",
                    doctor_id=updated.doctor_id,
                    error=str(e),
                )

            logger.info("Appointment completed", appointment_id=updated.id)
            return updated

    async def available_slots(self, doctor_id: str, date: str) -> AvailableSlotsDTO:
        """
        Fixed 30-minute slots from 09:00 to 17:00 for one day.

        The doctor's configured weekly availability is not consulted.
        """
        with get_tracer().span("AppointmentHandler.available_slots", doctor_id=doctor_id):
            require("doctor_id and date are required", doctor_id, date)
            check_date(date, "date")

            doctor = await self.doctors.get_by_id(doctor_id)
            if doctor is None:
                raise NotFoundError("doctor not found", details={"doctor_id": doctor_id})

            booked = await self.appointments.list_for_doctor_on_date(doctor_id, date)
            return AvailableSlotsDTO(
                doctor_id=doctor.id,
                doctor_name=doctor.full_name,
                date=date,
                slots=generate_slots(a.appointment_time for a in booked),
            )

    async def patient_appointments(
        self,
        patient_id: str,
        status: Optional[AppointmentStatus] = None,
        from_date: str = "",
        to_date: str = "",
    ) -> Sequence[Appointment]:
        with get_tracer().span("AppointmentHandler.patient_appointments", patient_id=patient_id):
            require("patient_id is required", patient_id)
            if from_date:
                check_date(from_date, "from_date")
            if to_date:
                check_date(to_date, "to_date")
            return await self.appointments.list_by_patient(
                patient_id, status=status, from_date=from_date, to_date=to_date
            )

    async def doctor_appointments(
        self,
        doctor_id: str,
        status: Optional[AppointmentStatus] = None,
        date: str = "",
    ) -> Sequence[Appointment]:
        with get_tracer().span("AppointmentHandler.doctor_appointments", doctor_id=doctor_id):
            require("doctor_id is required", doctor_id)
            if date:
                check_date(date, "date")
            return await self.appointments.list_by_doctor(doctor_id, status=status, appointment_date=date)
