"""
Appointment API Schemas
"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from clinic.application.commands import (
    BookAppointmentCommand,
    CancelAppointmentCommand,
    CompleteAppointmentCommand,
    RescheduleAppointmentCommand,
)
from clinic.application.dto import AvailableSlotsDTO
from clinic.domain.entities import Appointment
from clinic.domain.enums import AppointmentStatus, ConsultationType
from shared.utils.clock import format_timestamp


class BookAppointmentRequest(BaseModel):
    """Book appointment request schema"""
    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    patient_id: str = ""
    doctor_id: str = ""
    appointment_date: str = Field("", description="YYYY-MM-DD")
    appointment_time: str = Field("", description="HH:MM")
    consultation_type: ConsultationType = ConsultationType.IN_PERSON
    reason_for_visit: str = ""
    notes: str = ""

    def to_command(self) -> BookAppointmentCommand:
        return BookAppointmentCommand(
            patient_id=self.patient_id,
            doctor_id=self.doctor_id,
            appointment_date=self.appointment_date,
            appointment_time=self.appointment_time,
            consultation_type=self.consultation_type,
            reason_for_visit=self.reason_for_visit,
            notes=self.notes,
        )


class CancelAppointmentRequest(BaseModel):
    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    cancellation_reason: str = ""

    def to_command(self, appointment_id: str) -> CancelAppointmentCommand:
        return CancelAppointmentCommand(
            appointment_id=appointment_id,
            cancellation_reason=self.cancellation_reason,
        )


class RescheduleAppointmentRequest(BaseModel):
    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    new_appointment_date: str = Field("", description="YYYY-MM-DD")
    new_appointment_time: str = Field("", description="HH:MM")
    reason: str = ""

    def to_command(self, appointment_id: str) -> RescheduleAppointmentCommand:
        return RescheduleAppointmentCommand(
            appointment_id=appointment_id,
            new_appointment_date=self.new_appointment_date,
            new_appointment_time=self.new_appointment_time,
            reason=self.reason,
        )


class CompleteAppointmentRequest(BaseModel):
    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    diagnosis: str = ""
    notes: str = ""

    def to_command(self, appointment_id: str) -> CompleteAppointmentCommand:
        return CompleteAppointmentCommand(
            appointment_id=appointment_id,
            diagnosis=self.diagnosis,
            notes=self.notes,
        )


class AppointmentResponse(BaseModel):
    model_config = ConfigDict(extra="forbid")

    id: str
    patient_id: str
    patient_name: str
    doctor_id: str
    doctor_name: str
    appointment_date: str
    appointment_time: str
    status: AppointmentStatus
    consultation_type: ConsultationType
    reason_for_visit: str
    notes: str
    diagnosis: str
    cancelled_at: str
    cancellation_reason: str
    created_at: str
    updated_at: str

    @classmethod
    def from_entity(cls, appointment: Appointment) -> AppointmentResponse:
        return cls(
            id=appointment.id,
            patient_id=appointment.patient_id,
            patient_name=appointment.patient_name,
            doctor_id=appointment.doctor_id,
            doctor_name=appointment.doctor_name,
            appointment_date=appointment.appointment_date,
            appointment_time=appointment.appointment_time,
            status=appointment.status,
            consultation_type=appointment.consultation_type,
            reason_for_visit=appointment.reason_for_visit,
            notes=appointment.notes,
            diagnosis=appointment.diagnosis,
            cancelled_at=format_timestamp(appointment.cancelled_at),
            cancellation_reason=appointment.cancellation_reason,
            created_at=format_timestamp(appointment.created_at),
            updated_at=format_timestamp(appointment.updated_at),
        )


class AppointmentListResponse(BaseModel):
    appointments: list[AppointmentResponse]


class TimeSlotResponse(BaseModel):
    start_time: str
    end_time: str
    is_available: bool


class AvailableSlotsResponse(BaseModel):
    doctor_id: str
    doctor_name: str
    date: str
    slots: list[TimeSlotResponse]

    @classmethod
    def from_dto(cls, dto: AvailableSlotsDTO) -> AvailableSlotsResponse:
        return cls(
            doctor_id=dto.doctor_id,
            doctor_name=dto.doctor_name,
            date=dto.date,
            slots=[
                TimeSlotResponse(
                    start_time=s.start_time,
                    end_time=s.end_time,
                    is_available=s.is_available,
                )
                for s in dto.slots
            ],
        )
