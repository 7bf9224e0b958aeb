"""
Prescription Service
"""
from __future__ import annotations

from clinic.application.commands import CreatePrescriptionCommand
from clinic.application.handlers import PrescriptionHandler
from clinic.domain.entities import Prescription
from shared.infrastructure.observability.logger import get_logger
from shared.infrastructure.observability.tracer import get_tracer

logger = get_logger(__name__)


class PrescriptionService:
    def __init__(self, handler: PrescriptionHandler) -> None:
        self.handler = handler

    async def create_prescription(self, cmd: CreatePrescriptionCommand) -> Prescription:
        logger.info(
            "CreatePrescription request",
            patient_id=cmd.patient_id,
            doctor_id=cmd.doctor_id,
            medications=len(cmd.medications),
        )
        with get_tracer().span("PrescriptionService.create_prescription", patient_id=cmd.patient_id):
            return await self.handler.create(cmd)

    async def get_prescription(self, prescription_id: str) -> Prescription:
        logger.info("GetPrescription request", prescription_id=prescription_id)
        with get_tracer().span("PrescriptionService.get_prescription", prescription_id=prescription_id):
            return await self.handler.get(prescription_id)

    async def get_patient_prescriptions(
        self,
        patient_id: str,
        from_date: str = "",
        to_date: str = "",
    ) -> list[Prescription]:
        logger.info("GetPatientPrescriptions request", patient_id=patient_id)
        with get_tracer().span("PrescriptionService.get_patient_prescriptions", patient_id=patient_id):
            return await self.handler.patient_prescriptions(patient_id, from_date, to_date)

    async def get_doctor_prescriptions(
        self,
        doctor_id: str,
        from_date: str = "",
        to_date: str = "",
    ) -> list[Prescription]:
        logger.info("GetDoctorPrescriptions request", doctor_id=doctor_id)
        with get_tracer().span("PrescriptionService.get_doctor_prescriptions", doctor_id=doctor_id):
            return await self.handler.doctor_prescriptions(doctor_id, from_date, to_date)

    async def get_prescription_by_appointment(self, appointment_id: str) -> Prescription:
        logger.info("GetPrescriptionByAppointment request", appointment_id=appointment_id)
        with get_tracer().span(
            "PrescriptionService.get_prescription_by_appointment", appointment_id=appointment_id
        ):
            return await self.handler.for_appointment(appointment_id)
