"""
Prescription Handler
"""
from __future__ import annotations

from typing import Sequence

from clinic.application.commands import CreatePrescriptionCommand
from clinic.application.validation import date_range, require
from clinic.domain.entities import Prescription
from clinic.domain.protocols import IDoctorRepository, IPatientRepository, IPrescriptionRepository
from shared.exceptions import NotFoundError, ValidationError
from shared.infrastructure.observability.logger import get_logger
from shared.infrastructure.observability.tracer import get_tracer
from shared.utils.clock import utcnow

logger = get_logger(__name__)


class PrescriptionHandler:
    """
    Issues prescriptions and serves them with freshly computed validity.

    Reads never write an expired flag back to storage.
    """

    def __init__(
        self,
        prescriptions: IPrescriptionRepository,
        patients: IPatientRepository,
        doctors: IDoctorRepository,
    ) -> None:
        self.prescriptions = prescriptions
        self.patients = patients
        self.doctors = doctors

    @staticmethod
    def _fresh(items: Sequence[Prescription]) -> list[Prescription]:
        now = utcnow()
        return [item.refresh_validity(now) for item in items]

    async def create(self, cmd: CreatePrescriptionCommand) -> Prescription:
        with get_tracer().span("PrescriptionHandler.create", patient_id=cmd.patient_id):
            require("patient_id and doctor_id are required", cmd.patient_id, cmd.doctor_id)
            if not cmd.medications:
                raise ValidationError("at least one medication is required")
            if any(not m.medication_name for m in cmd.medications):
                raise ValidationError("medication_name is required for every medication")

            patient = await self.patients.get_by_id(cmd.patient_id)
            if patient is None:
                raise NotFoundError("patient not found", details={"patient_id": cmd.patient_id})
            doctor = await self.doctors.get_by_id(cmd.doctor_id)
            if doctor is None:
                raise NotFoundError("doctor not found", details={"doctor_id": cmd.doctor_id})

            prescription = Prescription.issue(
                appointment_id=cmd.appointment_id or None,
                patient_id=patient.id,
                patient_name=patient.full_name,
                doctor_id=doctor.id,
                doctor_name=doctor.full_name,
                medications=list(cmd.medications),
                diagnosis=cmd.diagnosis,
                additional_instructions=cmd.additional_instructions,
                validity_days=cmd.validity_days,
            )
            created = await self.prescriptions.add(prescription)
            logger.info(
                "Prescription issued",
                prescription_id=created.id,
                valid_until=created.valid_until.isoformat(),
            )
            return created

    async def get(self, prescription_id: str) -> Prescription:
        with get_tracer().span("PrescriptionHandler.get", prescription_id=prescription_id):
            require("prescription_id is required", prescription_id)
            prescription = await self.prescriptions.get_by_id(prescription_id)
            if prescription is None:
                raise NotFoundError("prescription not found", details={"prescription_id": prescription_id})
            return prescription.refresh_validity()

    async def for_appointment(self, appointment_id: str) -> Prescription:
        with get_tracer().span("PrescriptionHandler.for_appointment", appointment_id=appointment_id):
            require("appointment_id is required", appointment_id)
            prescription = await self.prescriptions.get_by_appointment_id(appointment_id)
            if prescription is None:
                raise NotFoundError("prescription not found", details={"appointment_id": appointment_id})
            return prescription.refresh_validity()

    async def patient_prescriptions(
        self,
        patient_id: str,
        from_date: str = "",
        to_date: str = "",
    ) -> list[Prescription]:
        with get_tracer().span("PrescriptionHandler.patient_prescriptions", patient_id=patient_id):
            require("patient_id is required", patient_id)
            start, end = date_range(from_date, to_date)
            items = await self.prescriptions.list_by_patient(patient_id, from_date=start, to_date=end)
            return self._fresh(items)

    async def doctor_prescriptions(
        self,
        doctor_id: str,
        from_date: str = "",
        to_date: str = "",
    ) -> list[Prescription]:
        with get_tracer().span("PrescriptionHandler.doctor_prescriptions", doctor_id=doctor_id):
            require("doctor_id is required", doctor_id)
            start, end = date_range(from_date, to_date)
            items = await self.prescriptions.list_by_doctor(doctor_id, from_date=start, to_date=end)
            return self._fresh(items)
