"""
Prescription Entity
"""
from __future__ import annotations

from datetime import datetime
from typing import Optional

from clinic.domain.services.prescription_policy import is_active, valid_until
from clinic.domain.value_objects import Medication
from shared.domain.base_entity import BaseEntity
from shared.utils.clock import utcnow


class Prescription(BaseEntity):
    """
    Medications issued by a doctor to a patient.

    `is_active` is derived from `valid_until` on every read and is never
    written back as expired.
    """

    def __init__(
        self,
        patient_id: str,
        doctor_id: str,
        medications: list[Medication],
        prescription_date: datetime,
        valid_until: datetime,
        appointment_id: Optional[str] = None,
        patient_name: str = "",
        doctor_name: str = "",
        diagnosis: str = "",
        additional_instructions: str = "",
        is_active: bool = True,
        id: Optional[str] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ) -> None:
        super().__init__(id, created_at=created_at, updated_at=updated_at)
        self.appointment_id = appointment_id
        self.patient_id = patient_id
        self.patient_name = patient_name
        self.doctor_id = doctor_id
        self.doctor_name = doctor_name
        self.medications = list(medications)
        self.diagnosis = diagnosis
        self.additional_instructions = additional_instructions
        self.prescription_date = prescription_date
        self.valid_until = valid_until
        self.is_active = is_active

    @classmethod
    def issue(
        cls,
        *,
        patient_id: str,
        patient_name: str,
        doctor_id: str,
        doctor_name: str,
        medications: list[Medication],
        validity_days: int,
        appointment_id: Optional[str] = None,
        diagnosis: str = "",
        additional_instructions: str = "",
        now: Optional[datetime] = None,
    ) -> Prescription:
        issued_at = now or utcnow()
        return cls(
            appointment_id=appointment_id,
            patient_id=patient_id,
            patient_name=patient_name,
            doctor_id=doctor_id,
            doctor_name=doctor_name,
            medications=medications,
            diagnosis=diagnosis,
            additional_instructions=additional_instructions,
            prescription_date=issued_at,
            valid_until=valid_until(issued_at, validity_days),
            is_active=True,
            created_at=issued_at,
            updated_at=issued_at,
        )

    def refresh_validity(self, now: Optional[datetime] = None) -> Prescription:
        """Mark inactive in memory once `valid_until` has passed."""
        if not is_active(self.valid_until, now or utcnow()):
            self.is_active = False
        return self
