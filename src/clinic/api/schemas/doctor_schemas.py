"""
Doctor API Schemas
"""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from clinic.application.commands import (
    AvailabilitySlotInput,
    RegisterDoctorCommand,
    SetAvailabilityCommand,
    UpdateDoctorCommand,
)
from clinic.application.dto import DoctorAvailabilityDTO
from clinic.domain.entities import Doctor, DoctorAvailability
from clinic.domain.enums import Specialization
from shared.utils.clock import format_timestamp


class RegisterDoctorRequest(BaseModel):
    """Register doctor request schema"""
    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    first_name: str = Field("", max_length=100)
    last_name: str = Field("", max_length=100)
    email: str = Field("", max_length=255)
    phone_number: str = Field("", max_length=20)
    license_number: str = Field("", max_length=100)
    specialization: Specialization = Specialization.UNSPECIFIED
    years_of_experience: int = Field(0, ge=0)
    qualifications: list[str] = Field(default_factory=list)
    languages: list[str] = Field(default_factory=list)
    consultation_fee: int = Field(0, ge=0, description="Fee in minor currency units")

    def to_command(self) -> RegisterDoctorCommand:
        return RegisterDoctorCommand(
            first_name=self.first_name,
            last_name=self.last_name,
            email=self.email,
            phone_number=self.phone_number,
            license_number=self.license_number,
            specialization=self.specialization,
            years_of_experience=self.years_of_experience,
            qualifications=tuple(self.qualifications),
            languages=tuple(self.languages),
            consultation_fee=self.consultation_fee,
        )


class UpdateDoctorRequest(BaseModel):
    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    phone_number: Optional[str] = Field(None, max_length=20)
    email: Optional[str] = Field(None, max_length=255)
    consultation_fee: Optional[int] = None
    is_available: Optional[bool] = None

    def to_command(self, doctor_id: str) -> UpdateDoctorCommand:
        return UpdateDoctorCommand(
            doctor_id=doctor_id,
            phone_number=self.phone_number,
            email=self.email,
            consultation_fee=self.consultation_fee,
            is_available=self.is_available,
        )


class DoctorResponse(BaseModel):
    model_config = ConfigDict(extra="forbid")

    id: str
    first_name: str
    last_name: str
    email: str
    phone_number: str
    specialization: Specialization
    license_number: str
    years_of_experience: int
    qualifications: list[str]
    languages: list[str]
    consultation_fee: int
    is_available: bool
    average_rating: float
    total_consultations: int
    created_at: str
    updated_at: str

    @classmethod
    def from_entity(cls, doctor: Doctor) -> DoctorResponse:
        return cls(
            id=doctor.id,
            first_name=doctor.first_name,
            last_name=doctor.last_name,
            email=doctor.email,
            phone_number=doctor.phone_number,
            specialization=doctor.specialization,
            license_number=doctor.license_number,
            years_of_experience=doctor.years_of_experience,
            qualifications=list(doctor.qualifications),
            languages=list(doctor.languages),
            consultation_fee=doctor.consultation_fee,
            is_available=doctor.is_available,
            average_rating=doctor.average_rating,
            total_consultations=doctor.total_consultations,
            created_at=format_timestamp(doctor.created_at),
            updated_at=format_timestamp(doctor.updated_at),
        )


class DoctorListResponse(BaseModel):
    doctors: list[DoctorResponse]


class AvailabilitySlotSchema(BaseModel):
    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    day_of_week: str = Field("", description="e.g. monday")
    start_time: str = Field("", description="HH:MM")
    end_time: str = Field("", description="HH:MM")
    slot_duration_minutes: int = Field(30, ge=0)

    @classmethod
    def from_entity(cls, slot: DoctorAvailability) -> AvailabilitySlotSchema:
        return cls(
            day_of_week=slot.day_of_week,
            start_time=slot.start_time,
            end_time=slot.end_time,
            slot_duration_minutes=slot.slot_duration_minutes,
        )


class SetAvailabilityRequest(BaseModel):
    """The full replacement set; an empty list clears availability"""
    model_config = ConfigDict(extra="forbid")

    availability_slots: list[AvailabilitySlotSchema] = Field(default_factory=list)

    def to_command(self, doctor_id: str) -> SetAvailabilityCommand:
        return SetAvailabilityCommand(
            doctor_id=doctor_id,
            slots=tuple(
                AvailabilitySlotInput(
                    day_of_week=s.day_of_week,
                    start_time=s.start_time,
                    end_time=s.end_time,
                    slot_duration_minutes=s.slot_duration_minutes,
                )
                for s in self.availability_slots
            ),
        )


class DoctorAvailabilityResponse(BaseModel):
    doctor_id: str
    availability_slots: list[AvailabilitySlotSchema]

    @classmethod
    def from_dto(cls, dto: DoctorAvailabilityDTO) -> DoctorAvailabilityResponse:
        return cls(
            doctor_id=dto.doctor_id,
            availability_slots=[AvailabilitySlotSchema.from_entity(s) for s in dto.availability_slots],
        )
