"""
Patient Service
Orchestrates patient registration, lookup and medical history
"""
from __future__ import annotations

from typing import Sequence

from clinic.application.commands import (
    AddMedicalRecordCommand,
    RegisterPatientCommand,
    UpdatePatientCommand,
)
from clinic.application.dto import MedicalHistoryDTO
from clinic.application.handlers import PatientHandler
from clinic.domain.entities import MedicalRecord, Patient
from shared.infrastructure.observability.logger import get_logger
from shared.infrastructure.observability.tracer import get_tracer

logger = get_logger(__name__)


class PatientService:
    """
    Patient service.

    Entry point used by the HTTP routes; business rules live in
    PatientHandler.
    """

    def __init__(self, handler: PatientHandler) -> None:
        self.handler = handler

    async def register_patient(self, cmd: RegisterPatientCommand) -> Patient:
        logger.info("RegisterPatient request", email=cmd.email)
        with get_tracer().span("PatientService.register_patient"):
            return await self.handler.register(cmd)

    async def get_patient(self, patient_id: str) -> Patient:
        logger.info("GetPatient request", patient_id=patient_id)
        with get_tracer().span("PatientService.get_patient", patient_id=patient_id):
            return await self.handler.get(patient_id)

    async def update_patient(self, cmd: UpdatePatientCommand) -> Patient:
        logger.info("UpdatePatient request", patient_id=cmd.patient_id)
        with get_tracer().span("PatientService.update_patient", patient_id=cmd.patient_id):
            return await self.handler.update(cmd)

    async def search_patients(
        self,
        name: str = "",
        email: str = "",
        phone_number: str = "",
        patient_id: str = "",
    ) -> Sequence[Patient]:
        logger.info("SearchPatients request", name=name)
        with get_tracer().span("PatientService.search_patients"):
            return await self.handler.search(
                name=name,
                email=email,
                phone_number=phone_number,
                patient_id=patient_id,
            )

    async def get_medical_history(
        self,
        patient_id: str,
        from_date: str = "",
        to_date: str = "",
    ) -> MedicalHistoryDTO:
        logger.info("GetPatientMedicalHistory request", patient_id=patient_id)
        with get_tracer().span("PatientService.get_medical_history", patient_id=patient_id):
            return await self.handler.medical_history(patient_id, from_date, to_date)

    async def add_medical_record(self, cmd: AddMedicalRecordCommand) -> MedicalRecord:
        logger.info("AddMedicalRecord request", patient_id=cmd.patient_id)
        with get_tracer().span("PatientService.add_medical_record", patient_id=cmd.patient_id):
            return await self.handler.add_medical_record(cmd)
