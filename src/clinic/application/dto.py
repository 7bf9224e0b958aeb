"""
Clinic Read Models
Data Transfer Objects returned by query operations
"""
from __future__ import annotations

from dataclasses import dataclass, field

from clinic.domain.entities import DoctorAvailability
from clinic.domain.value_objects import TimeSlot


@dataclass(frozen=True)
class AvailableSlotsDTO:
    doctor_id: str
    doctor_name: str
    date: str
    slots: list[TimeSlot] = field(default_factory=list)


@dataclass(frozen=True)
class DoctorAvailabilityDTO:
    doctor_id: str
    availability_slots: list[DoctorAvailability] = field(default_factory=list)


@dataclass(frozen=True)
class MedicalHistoryEntryDTO:
    record_id: str
    doctor_id: str
    visit_date: str
    diagnosis: str
    notes: str


@dataclass(frozen=True)
class MedicalHistoryDTO:
    patient_id: str
    records: list[MedicalHistoryEntryDTO] = field(default_factory=list)
