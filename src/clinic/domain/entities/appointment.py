"""
Appointment Entity
A booked consultation between a patient and a doctor
"""
from __future__ import annotations

from datetime import datetime
from typing import Optional

from clinic.domain.enums import AppointmentStatus, ConsultationType
from clinic.domain.services.appointment_policy import ensure_transition
from shared.domain.base_entity import BaseEntity
from shared.utils.clock import utcnow


class Appointment(BaseEntity):
    """
    Appointment aggregate.

    Patient and doctor names are snapshots taken at booking time. Date and
    time are kept as ``YYYY-MM-DD`` and ``HH:MM`` strings. Status changes go
    through the transition table; cancelled and completed are terminal.
    """

    def __init__(
        self,
        patient_id: str,
        doctor_id: str,
        appointment_date: str,
        appointment_time: str,
        patient_name: str = "",
        doctor_name: str = "",
        status: AppointmentStatus = AppointmentStatus.SCHEDULED,
        consultation_type: ConsultationType = ConsultationType.IN_PERSON,
        reason_for_visit: str = "",
        notes: str = "",
        diagnosis: str = "",
        cancelled_at: Optional[datetime] = None,
        cancellation_reason: str = "",
        id: Optional[str] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ) -> None:
        super().__init__(id, created_at=created_at, updated_at=updated_at)
        self.patient_id = patient_id
        self.patient_name = patient_name
        self.doctor_id = doctor_id
        self.doctor_name = doctor_name
        self.appointment_date = appointment_date
        self.appointment_time = appointment_time
        self.status = status
        self.consultation_type = consultation_type
        self.reason_for_visit = reason_for_visit
        self.notes = notes
        self.diagnosis = diagnosis
        self.cancelled_at = cancelled_at
        self.cancellation_reason = cancellation_reason

    def _move_to(self, target: AppointmentStatus) -> None:
        ensure_transition(self.status, target)
        self.status = target
        self.mark_updated()

    def cancel(self, reason: str, now: Optional[datetime] = None) -> None:
        self._move_to(AppointmentStatus.CANCELLED)
        self.cancelled_at = now or utcnow()
        self.cancellation_reason = reason

    def reschedule(self, new_date: str, new_time: str, reason: str = "") -> None:
        """Move to a new slot; a reason is appended to the notes."""
        self._move_to(AppointmentStatus.RESCHEDULED)
        self.appointment_date = new_date
        self.appointment_time = new_time
        if reason:
            self.notes = f"{self.notes}\nRescheduled: {reason}"

    def complete(self, diagnosis: str, notes: str = "") -> None:
        """Close the visit; non-empty notes replace the existing ones."""
        self._move_to(AppointmentStatus.COMPLETED)
        self.diagnosis = diagnosis
        if notes:
            self.notes = notes

    def ensure_can_reschedule(self) -> None:
        ensure_transition(self.status, AppointmentStatus.RESCHEDULED)
