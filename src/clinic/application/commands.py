"""
Clinic Commands
Immutable inputs for handler write operations
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from clinic.domain.enums import BloodGroup, ConsultationType, Gender, Specialization
from clinic.domain.value_objects import Address, Medication, VitalSigns


# ─── Patients ───────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class RegisterPatientCommand:
    first_name: str
    last_name: str
    email: str
    phone_number: str
    date_of_birth: str = ""
    gender: Gender = Gender.UNSPECIFIED
    blood_group: BloodGroup = BloodGroup.UNSPECIFIED
    address: Optional[Address] = None
    medical_history: str = ""
    emergency_contact: str = ""


@dataclass(frozen=True)
class UpdatePatientCommand:
    """Fields left as None are not changed."""
    patient_id: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    date_of_birth: Optional[str] = None
    gender: Optional[Gender] = None
    blood_group: Optional[BloodGroup] = None
    phone_number: Optional[str] = None
    email: Optional[str] = None
    address: Optional[Address] = None


@dataclass(frozen=True)
class AddMedicalRecordCommand:
    patient_id: str
    doctor_id: str
    visit_date: Optional[datetime] = None
    diagnosis: str = ""
    symptoms: str = ""
    treatment: str = ""
    prescriptions: str = ""
    lab_results: str = ""
    vital_signs: Optional[VitalSigns] = None
    notes: str = ""
    follow_up_date: Optional[datetime] = None
    record_type: str = ""


# ─── Doctors ────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class RegisterDoctorCommand:
    first_name: str
    last_name: str
    email: str
    phone_number: str
    license_number: str
    specialization: Specialization = Specialization.UNSPECIFIED
    years_of_experience: int = 0
    qualifications: tuple[str, ...] = ()
    languages: tuple[str, ...] = ()
    consultation_fee: int = 0


@dataclass(frozen=True)
class UpdateDoctorCommand:
    """Fields left as None are not changed."""
    doctor_id: str
    phone_number: Optional[str] = None
    email: Optional[str] = None
    consultation_fee: Optional[int] = None
    is_available: Optional[bool] = None


@dataclass(frozen=True)
class AvailabilitySlotInput:
    day_of_week: str
    start_time: str
    end_time: str
    slot_duration_minutes: int = 30


@dataclass(frozen=True)
class SetAvailabilityCommand:
    doctor_id: str
    slots: tuple[AvailabilitySlotInput, ...] = field(default_factory=tuple)


# ─── Appointments ───────────────────────────────────────────────────────────

@dataclass(frozen=True)
class BookAppointmentCommand:
    patient_id: str
    doctor_id: str
    appointment_date: str
    appointment_time: str
    consultation_type: ConsultationType = ConsultationType.IN_PERSON
    reason_for_visit: str = ""
    notes: str = ""


@dataclass(frozen=True)
class CancelAppointmentCommand:
    appointment_id: str
    cancellation_reason: str = ""


@dataclass(frozen=True)
class RescheduleAppointmentCommand:
    appointment_id: str
    new_appointment_date: str
    new_appointment_time: str
    reason: str = ""


@dataclass(frozen=True)
class CompleteAppointmentCommand:
    appointment_id: str
    diagnosis: str = ""
    notes: str = ""


# ─── Prescriptions ──────────────────────────────────────────────────────────

@dataclass(frozen=True)
class CreatePrescriptionCommand:
    patient_id: str
    doctor_id: str
    medications: tuple[Medication, ...]
    appointment_id: Optional[str] = None
    diagnosis: str = ""
    additional_instructions: str = ""
    validity_days: int = 0
