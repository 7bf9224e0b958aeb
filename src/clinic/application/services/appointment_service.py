"""
Appointment Service
Orchestrates booking and the appointment lifecycle
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
from clinic.application.handlers import AppointmentHandler
from clinic.domain.entities import Appointment
from clinic.domain.enums import AppointmentStatus
from shared.infrastructure.observability.logger import get_logger
from shared.infrastructure.observability.tracer import get_tracer

logger = get_logger(__name__)


class AppointmentService:
    """
    Appointment service.

    Wraps AppointmentHandler with request logging and tracing.
    """

    def __init__(self, handler: AppointmentHandler) -> None:
        self.handler = handler

    async def book_appointment(self, cmd: BookAppointmentCommand) -> Appointment:
        logger.info(
            "BookAppointment request",
            patient_id=cmd.patient_id,
            doctor_id=cmd.doctor_id,
            date=cmd.appointment_date,
            time=cmd.appointment_time,
        )
        with get_tracer().span("AppointmentService.book_appointment", doctor_id=cmd.doctor_id):
            return await self.handler.book(cmd)

    async def get_appointment(self, appointment_id: str) -> Appointment:
        logger.info("GetAppointment request", appointment_id=appointment_id)
        with get_tracer().span("AppointmentService.get_appointment", appointment_id=appointment_id):
            return await self.handler.get(appointment_id)

    async def cancel_appointment(self, cmd: CancelAppointmentCommand) -> Appointment:
        logger.info("CancelAppointment request", appointment_id=cmd.appointment_id)
        with get_tracer().span("AppointmentService.cancel_appointment", appointment_id=cmd.appointment_id):
            return await self.handler.cancel(cmd)

    async def reschedule_appointment(self, cmd: RescheduleAppointmentCommand) -> Appointment:
        logger.info("RescheduleAppointment request", appointment_id=cmd.appointment_id)
        with get_tracer().span(
            "AppointmentService.reschedule_appointment", appointment_id=cmd.appointment_id
        ):
            return await self.handler.reschedule(cmd)

    async def complete_appointment(self, cmd: CompleteAppointmentCommand) -> Appointment:
        logger.info("CompleteAppointment request", appointment_id=cmd.appointment_id)
        with get_tracer().span("AppointmentService.complete_appointment", appointment_id=cmd.appointment_id):
            return await self.handler.complete(cmd)

    async def get_available_slots(self, doctor_id: str, date: str) -> AvailableSlotsDTO:
        logger.info("GetAvailableSlots request", doctor_id=doctor_id, date=date)
        with get_tracer().span("AppointmentService.get_available_slots", doctor_id=doctor_id):
            return await self.handler.available_slots(doctor_id, date)

    async def get_patient_appointments(
        self,
        patient_id: str,
        status: Optional[AppointmentStatus] = None,
        from_date: str = "",
        to_date: str = "",
    ) -> Sequence[Appointment]:
        logger.info("GetPatientAppointments request", patient_id=patient_id)
        with get_tracer().span("AppointmentService.get_patient_appointments", patient_id=patient_id):
            return await self.handler.patient_appointments(patient_id, status, from_date, to_date)

    async def get_doctor_appointments(
        self,
        doctor_id: str,
        status: Optional[AppointmentStatus] = None,
        date: str = "",
    ) -> Sequence[Appointment]:
        logger.info("GetDoctorAppointments request", doctor_id=doctor_id)
        with get_tracer().span("AppointmentService.get_doctor_appointments", doctor_id=doctor_id):
            return await self.handler.doctor_appointments(doctor_id, status, date)
