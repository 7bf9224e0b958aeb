"""
Patient Handler
Registration, profile updates, search and medical history
"""
from __future__ import annotations

from typing import Sequence

from clinic.application.commands import (
    AddMedicalRecordCommand,
    RegisterPatientCommand,
    UpdatePatientCommand,
)
from clinic.application.dto import MedicalHistoryDTO, MedicalHistoryEntryDTO
from clinic.application.validation import check_date, date_range, require
from clinic.domain.entities import MedicalRecord, Patient
from clinic.domain.protocols import IDoctorRepository, IMedicalRecordRepository, IPatientRepository
from shared.exceptions import ConflictError, NotFoundError
from shared.infrastructure.observability.logger import get_logger
from shared.infrastructure.observability.tracer import get_tracer
from shared.utils.clock import format_date, utcnow

logger = get_logger(__name__)


class PatientHandler:
    """
    Business rules for patients.

    Email and phone number must be unique; both are checked before insert
    and enforced again by the database.
    """

    def __init__(
        self,
        patients: IPatientRepository,
        records: IMedicalRecordRepository,
        doctors: IDoctorRepository,
    ) -> None:
        self.patients = patients
        self.records = records
        self.doctors = doctors

    async def _ensure_unique(self, email: str | None, phone_number: str | None, exclude_id: str = "") -> None:
        if email:
            existing = await self.patients.get_by_email(email)
            if existing is not None and existing.id != exclude_id:
                raise ConflictError("email already registered")
        if phone_number:
            existing = await self.patients.get_by_phone(phone_number)
            if existing is not None and existing.id != exclude_id:
                raise ConflictError("phone number already registered")

    async def register(self, cmd: RegisterPatientCommand) -> Patient:
        with get_tracer().span("PatientHandler.register"):
            require("first_name and last_name are required", cmd.first_name, cmd.last_name)
            require("email and phone_number are required", cmd.email, cmd.phone_number)
            if cmd.date_of_birth:
                check_date(cmd.date_of_birth, "date_of_birth")

            await self._ensure_unique(cmd.email, cmd.phone_number)

            patient = Patient(
                first_name=cmd.first_name,
                last_name=cmd.last_name,
                email=cmd.email,
                phone_number=cmd.phone_number,
                date_of_birth=cmd.date_of_birth,
                gender=cmd.gender,
                blood_group=cmd.blood_group,
                address=cmd.address,
                medical_history=cmd.medical_history,
                emergency_contact=cmd.emergency_contact,
            )
            created = await self.patients.add(patient)
            logger.info("Patient registered", patient_id=created.id)
            return created

    async def get(self, patient_id: str) -> Patient:
        with get_tracer().span("PatientHandler.get", patient_id=patient_id):
            require("patient_id is required", patient_id)
            patient = await self.patients.get_by_id(patient_id)
            if patient is None:
                raise NotFoundError("patient not found", details={"patient_id": patient_id})
            return patient

    async def update(self, cmd: UpdatePatientCommand) -> Patient:
        """Patch only the fields present on the command."""
        with get_tracer().span("PatientHandler.update", patient_id=cmd.patient_id):
            patient = await self.get(cmd.patient_id)

            if cmd.date_of_birth:
                check_date(cmd.date_of_birth, "date_of_birth")
            await self._ensure_unique(
                cmd.email if cmd.email != patient.email else None,
                cmd.phone_number if cmd.phone_number != patient.phone_number else None,
                exclude_id=patient.id,
            )

            if cmd.first_name:
                patient.first_name = cmd.first_name
            if cmd.last_name:
                patient.last_name = cmd.last_name
            if cmd.date_of_birth:
                patient.date_of_birth = cmd.date_of_birth
            if cmd.gender is not None:
                patient.gender = cmd.gender
            if cmd.blood_group is not None:
                patient.blood_group = cmd.blood_group
            if cmd.phone_number:
                patient.phone_number = cmd.phone_number
            if cmd.email:
                patient.email = cmd.email
            if cmd.address is not None:
                patient.address = cmd.address

            return await self.patients.update(patient)

    async def search(
        self,
        name: str = "",
        email: str = "",
        phone_number: str = "",
        patient_id: str = "",
    ) -> Sequence[Patient]:
        with get_tracer().span("PatientHandler.search"):
            return await self.patients.search(
                name=name,
                email=email,
                phone_number=phone_number,
                patient_id=patient_id,
            )

    async def medical_history(
        self,
        patient_id: str,
        from_date: str = "",
        to_date: str = "",
    ) -> MedicalHistoryDTO:
        with get_tracer().span("PatientHandler.medical_history", patient_id=patient_id):
            await self.get(patient_id)
            start, end = date_range(from_date, to_date)

            records = await self.records.list_by_patient(patient_id, from_date=start, to_date=end)
            return MedicalHistoryDTO(
                patient_id=patient_id,
                records=[
                    MedicalHistoryEntryDTO(
                        record_id=record.id,
                        doctor_id=record.doctor_id,
                        visit_date=format_date(record.visit_date),
                        diagnosis=record.diagnosis,
                        notes=record.notes,
                    )
                    for record in records
                ],
            )

    async def add_medical_record(self, cmd: AddMedicalRecordCommand) -> MedicalRecord:
        with get_tracer().span("PatientHandler.add_medical_record", patient_id=cmd.patient_id):
            require("patient_id and doctor_id are required", cmd.patient_id, cmd.doctor_id)
            await self.get(cmd.patient_id)
            if await self.doctors.get_by_id(cmd.doctor_id) is None:
                raise NotFoundError("doctor not found", details={"doctor_id": cmd.doctor_id})

            record = MedicalRecord(
                patient_id=cmd.patient_id,
                doctor_id=cmd.doctor_id,
                visit_date=cmd.visit_date or utcnow(),
                diagnosis=cmd.diagnosis,
                symptoms=cmd.symptoms,
                treatment=cmd.treatment,
                prescriptions=cmd.prescriptions,
                lab_results=cmd.lab_results,
                vital_signs=cmd.vital_signs,
                notes=cmd.notes,
                follow_up_date=cmd.follow_up_date,
                record_type=cmd.record_type,
            )
            created = await self.records.add(record)
            logger.info("Medical record added", record_id=created.id, patient_id=cmd.patient_id)
            return created
