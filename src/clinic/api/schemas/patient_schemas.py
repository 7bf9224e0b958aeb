"""
Patient API Schemas
"""
from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from clinic.api.schemas.common import AddressSchema, VitalSignsSchema
from clinic.application.commands import (
    AddMedicalRecordCommand,
    RegisterPatientCommand,
    UpdatePatientCommand,
)
from clinic.application.dto import MedicalHistoryDTO
from clinic.domain.entities import MedicalRecord, Patient
from clinic.domain.enums import BloodGroup, Gender
from shared.utils.clock import format_date, format_timestamp


class RegisterPatientRequest(BaseModel):
    """Register patient request schema"""
    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    first_name: str = Field("", max_length=100)
    last_name: str = Field("", max_length=100)
    email: str = Field("", max_length=255)
    phone_number: str = Field("", max_length=20)
    date_of_birth: str = Field("", description="YYYY-MM-DD")
    gender: Gender = Gender.UNSPECIFIED
    blood_group: BloodGroup = BloodGroup.UNSPECIFIED
    address: Optional[AddressSchema] = None
    medical_history: str = ""
    emergency_contact: str = ""

    def to_command(self) -> RegisterPatientCommand:
        return RegisterPatientCommand(
            first_name=self.first_name,
            last_name=self.last_name,
            email=self.email,
            phone_number=self.phone_number,
            date_of_birth=self.date_of_birth,
            gender=self.gender,
            blood_group=self.blood_group,
            address=self.address.to_value() if self.address else None,
            medical_history=self.medical_history,
            emergency_contact=self.emergency_contact,
        )


class UpdatePatientRequest(BaseModel):
    """Only the supplied fields are changed"""
    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    first_name: Optional[str] = Field(None, max_length=100)
    last_name: Optional[str] = Field(None, max_length=100)
    date_of_birth: Optional[str] = None
    gender: Optional[Gender] = None
    blood_group: Optional[BloodGroup] = None
    phone_number: Optional[str] = Field(None, max_length=20)
    email: Optional[str] = Field(None, max_length=255)
    address: Optional[AddressSchema] = None

    def to_command(self, patient_id: str) -> UpdatePatientCommand:
        return UpdatePatientCommand(
            patient_id=patient_id,
            first_name=self.first_name,
            last_name=self.last_name,
            date_of_birth=self.date_of_birth,
            gender=self.gender,
            blood_group=self.blood_group,
            phone_number=self.phone_number,
            email=self.email,
            address=self.address.to_value() if self.address else None,
        )


class PatientResponse(BaseModel):
    model_config = ConfigDict(extra="forbid")

    id: str
    first_name: str
    last_name: str
    email: str
    phone_number: str
    date_of_birth: str
    gender: Gender
    blood_group: BloodGroup
    address: Optional[AddressSchema] = None
    medical_history: str
    emergency_contact: str
    created_at: str = Field(..., description="YYYY-MM-DDTHH:MM:SSZ")
    updated_at: str

    @classmethod
    def from_entity(cls, patient: Patient) -> PatientResponse:
        return cls(
            id=patient.id,
            first_name=patient.first_name,
            last_name=patient.last_name,
            email=patient.email,
            phone_number=patient.phone_number,
            date_of_birth=patient.date_of_birth,
            gender=patient.gender,
            blood_group=patient.blood_group,
            address=AddressSchema.from_value(patient.address),
            medical_history=patient.medical_history,
            emergency_contact=patient.emergency_contact,
            created_at=format_timestamp(patient.created_at),
            updated_at=format_timestamp(patient.updated_at),
        )


class PatientListResponse(BaseModel):
    patients: list[PatientResponse]


class AddMedicalRecordRequest(BaseModel):
    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    doctor_id: str = ""
    visit_date: Optional[date] = Field(None, description="Defaults to today")
    diagnosis: str = ""
    symptoms: str = ""
    treatment: str = ""
    prescriptions: str = ""
    lab_results: str = ""
    vital_signs: Optional[VitalSignsSchema] = None
    notes: str = ""
    follow_up_date: Optional[date] = None
    record_type: str = ""

    @staticmethod
    def _at_midnight(value: Optional[date]) -> Optional[datetime]:
        return datetime(value.year, value.month, value.day) if value else None

    def to_command(self, patient_id: str) -> AddMedicalRecordCommand:
        return AddMedicalRecordCommand(
            patient_id=patient_id,
            doctor_id=self.doctor_id,
            visit_date=self._at_midnight(self.visit_date),
            diagnosis=self.diagnosis,
            symptoms=self.symptoms,
            treatment=self.treatment,
            prescriptions=self.prescriptions,
            lab_results=self.lab_results,
            vital_signs=self.vital_signs.to_value() if self.vital_signs else None,
            notes=self.notes,
            follow_up_date=self._at_midnight(self.follow_up_date),
            record_type=self.record_type,
        )


class MedicalRecordResponse(BaseModel):
    id: str
    patient_id: str
    doctor_id: str
    visit_date: str
    diagnosis: str
    symptoms: str
    treatment: str
    prescriptions: str
    lab_results: str
    vital_signs: Optional[VitalSignsSchema] = None
    notes: str
    follow_up_date: str
    record_type: str
    created_at: str

    @classmethod
    def from_entity(cls, record: MedicalRecord) -> MedicalRecordResponse:
        return cls(
            id=record.id,
            patient_id=record.patient_id,
            doctor_id=record.doctor_id,
            visit_date=format_date(record.visit_date),
            diagnosis=record.diagnosis,
            symptoms=record.symptoms,
            treatment=record.treatment,
            prescriptions=record.prescriptions,
            lab_results=record.lab_results,
            vital_signs=VitalSignsSchema.from_value(record.vital_signs),
            notes=record.notes,
            follow_up_date=format_date(record.follow_up_date),
            record_type=record.record_type,
            created_at=format_timestamp(record.created_at),
        )


class MedicalHistoryEntry(BaseModel):
    record_id: str
    doctor_id: str
    visit_date: str
    diagnosis: str
    notes: str


class MedicalHistoryResponse(BaseModel):
    patient_id: str
    records: list[MedicalHistoryEntry]

    @classmethod
    def from_dto(cls, dto: MedicalHistoryDTO) -> MedicalHistoryResponse:
        return cls(
            patient_id=dto.patient_id,
            records=[
                MedicalHistoryEntry(
                    record_id=r.record_id,
                    doctor_id=r.doctor_id,
                    visit_date=r.visit_date,
                    diagnosis=r.diagnosis,
                    notes=r.notes,
                )
                for r in dto.records
            ],
        )
