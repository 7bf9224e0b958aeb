"""
Medical Record Entity
"""
from __future__ import annotations

from datetime import datetime
from typing import Optional

from clinic.domain.value_objects import VitalSigns
from shared.domain.base_entity import BaseEntity


class MedicalRecord(BaseEntity):
    """A single visit entry in a patient's medical history."""

    def __init__(
        self,
        patient_id: str,
        doctor_id: str,
        visit_date: datetime,
        diagnosis: str = "",
        symptoms: str = "",
        treatment: str = "",
        prescriptions: str = "",
        lab_results: str = "",
        vital_signs: Optional[VitalSigns] = None,
        notes: str = "",
        follow_up_date: Optional[datetime] = None,
        record_type: str = "",
        id: Optional[str] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ) -> None:
        super().__init__(id, created_at=created_at, updated_at=updated_at)
        self.patient_id = patient_id
        self.doctor_id = doctor_id
        self.visit_date = visit_date
        self.diagnosis = diagnosis
        self.symptoms = symptoms
        self.treatment = treatment
        self.prescriptions = prescriptions
        self.lab_results = lab_results
        self.vital_signs = vital_signs
        self.notes = notes
        self.follow_up_date = follow_up_date
        self.record_type = record_type
