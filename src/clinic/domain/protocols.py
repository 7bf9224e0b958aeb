"""
Repository Protocols (Interfaces)
Handlers depend on these; SQLAlchemy implementations live in infrastructure
"""
from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from clinic.domain.entities import (
    Appointment,
    Doctor,
    DoctorAvailability,
    MedicalRecord,
    Patient,
    Prescription,
)
from clinic.domain.enums import AppointmentStatus, Specialization


class IPatientRepository(Protocol):
    async def add(self, patient: Patient) -> Patient: ...

    async def get_by_id(self, patient_id: str) -> Optional[Patient]: ...

    async def get_by_email(self, email: str) -> Optional[Patient]: ...

    async def get_by_phone(self, phone_number: str) -> Optional[Patient]: ...

    async def update(self, patient: Patient) -> Patient: ...

    async def search(
        self,
        name: str = "",
        email: str = "",
        phone_number: str = "",
        patient_id: str = "",
    ) -> Sequence[Patient]:
        """Match any supplied criterion; name is a substring of first or last name"""
        ...

    async def delete(self, patient_id: str) -> bool: ...


class IDoctorRepository(Protocol):
    async def add(self, doctor: Doctor) -> Doctor: ...

    async def get_by_id(self, doctor_id: str) -> Optional[Doctor]: ...

    async def get_by_email(self, email: str) -> Optional[Doctor]: ...

    async def get_by_phone(self, phone_number: str) -> Optional[Doctor]: ...

    async def get_by_license(self, license_number: str) -> Optional[Doctor]: ...

    async def update(self, doctor: Doctor) -> Doctor: ...

    async def search(
        self,
        name: str = "",
        specialization: Specialization = Specialization.UNSPECIFIED,
        is_available: Optional[bool] = None,
    ) -> Sequence[Doctor]: ...

    async def increment_consultations(self, doctor_id: str) -> None:
        """Add one to the doctor's consultation counter"""
        ...

    async def replace_availability(
        self,
        doctor_id: str,
        slots: Sequence[DoctorAvailability],
    ) -> Sequence[DoctorAvailability]:
        """Delete every availability row of the doctor, then insert `slots`"""
        ...

    async def get_availability(self, doctor_id: str) -> Sequence[DoctorAvailability]: ...

    async def delete(self, doctor_id: str) -> bool: ...


class IAppointmentRepository(Protocol):
    async def add(self, appointment: Appointment) -> Appointment: ...

    async def get_by_id(self, appointment_id: str) -> Optional[Appointment]: ...

    async def update(self, appointment: Appointment) -> Appointment: ...

    async def has_conflict(
        self,
        doctor_id: str,
        appointment_date: str,
        appointment_time: str,
        exclude_id: Optional[str] = None,
    ) -> bool:
        """True when a non-cancelled appointment holds the slot"""
        ...

    async def list_for_doctor_on_date(
        self,
        doctor_id: str,
        appointment_date: str,
    ) -> Sequence[Appointment]:
        """Non-cancelled appointments of the day, earliest first"""
        ...

    async def list_by_patient(
        self,
        patient_id: str,
        status: Optional[AppointmentStatus] = None,
        from_date: str = "",
        to_date: str = "",
    ) -> Sequence[Appointment]: ...

    async def list_by_doctor(
        self,
        doctor_id: str,
        status: Optional[AppointmentStatus] = None,
        appointment_date: str = "",
    ) -> Sequence[Appointment]: ...


class IPrescriptionRepository(Protocol):
    async def add(self, prescription: Prescription) -> Prescription: ...

    async def get_by_id(self, prescription_id: str) -> Optional[Prescription]: ...

    async def get_by_appointment_id(self, appointment_id: str) -> Optional[Prescription]: ...

    async def list_by_patient(
        self,
        patient_id: str,
        from_date: Optional[datetime] = None,
        to_date: Optional[datetime] = None,
    ) -> Sequence[Prescription]: ...

    async def list_by_doctor(
        self,
        doctor_id: str,
        from_date: Optional[datetime] = None,
        to_date: Optional[datetime] = None,
    ) -> Sequence[Prescription]: ...


class IMedicalRecordRepository(Protocol):
    async def add(self, record: MedicalRecord) -> MedicalRecord: ...

    async def get_by_id(self, record_id: str) -> Optional[MedicalRecord]: ...

    async def list_by_patient(
        self,
        patient_id: str,
        from_date: Optional[datetime] = None,
        to_date: Optional[datetime] = None,
        record_type: str = "",
    ) -> Sequence[MedicalRecord]: ...

    async def update(self, record: MedicalRecord) -> MedicalRecord: ...

    async def delete(self, record_id: str) -> bool: ...
