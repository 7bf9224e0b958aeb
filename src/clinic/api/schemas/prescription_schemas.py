"""
Prescription API Schemas
"""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from clinic.api.schemas.common import MedicationSchema
from clinic.application.commands import CreatePrescriptionCommand
from clinic.domain.entities import Prescription
from shared.utils.clock import format_timestamp


class CreatePrescriptionRequest(BaseModel):
    """Create prescription request schema"""
    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    appointment_id: Optional[str] = None
    patient_id: str = ""
    doctor_id: str = ""
    medications: list[MedicationSchema] = Field(default_factory=list)
    diagnosis: str = ""
    additional_instructions: str = ""
    validity_days: int = Field(0, description="Days until expiry; 0 or less means 30")

    def to_command(self) -> CreatePrescriptionCommand:
        return CreatePrescriptionCommand(
            patient_id=self.patient_id,
            doctor_id=self.doctor_id,
            medications=tuple(m.to_value() for m in self.medications),
            appointment_id=self.appointment_id,
            diagnosis=self.diagnosis,
            additional_instructions=self.additional_instructions,
            validity_days=self.validity_days,
        )


class PrescriptionResponse(BaseModel):
    model_config = ConfigDict(extra="forbid")

    id: str
    appointment_id: Optional[str] = None
    patient_id: str
    patient_name: str
    doctor_id: str
    doctor_name: str
    medications: list[MedicationSchema]
    diagnosis: str
    additional_instructions: str
    prescription_date: str
    valid_until: str
    is_active: bool
    created_at: str

    @classmethod
    def from_entity(cls, prescription: Prescription) -> PrescriptionResponse:
        return cls(
            id=prescription.id,
            appointment_id=prescription.appointment_id,
            patient_id=prescription.patient_id,
            patient_name=prescription.patient_name,
            doctor_id=prescription.doctor_id,
            doctor_name=prescription.doctor_name,
            medications=[MedicationSchema.from_value(m) for m in prescription.medications],
            diagnosis=prescription.diagnosis,
            additional_instructions=prescription.additional_instructions,
            prescription_date=format_timestamp(prescription.prescription_date),
            valid_until=format_timestamp(prescription.valid_until),
            is_active=prescription.is_active,
            created_at=format_timestamp(prescription.created_at),
        )


class PrescriptionListResponse(BaseModel):
    prescriptions: list[PrescriptionResponse]
