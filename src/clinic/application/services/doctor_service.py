"""
Doctor Service
"""
from __future__ import annotations

from typing import Optional, Sequence

from clinic.application.commands import (
    RegisterDoctorCommand,
    SetAvailabilityCommand,
    UpdateDoctorCommand,
)
from clinic.application.dto import DoctorAvailabilityDTO
from clinic.application.handlers import DoctorHandler
from clinic.domain.entities import Doctor
from clinic.domain.enums import Specialization
from shared.infrastructure.observability.logger import get_logger
from shared.infrastructure.observability.tracer import get_tracer

logger = get_logger(__name__)


class DoctorService:
    def __init__(self, handler: DoctorHandler) -> None:
        self.handler = handler

    async def register_doctor(self, cmd: RegisterDoctorCommand) -> Doctor:
        logger.info("RegisterDoctor request", email=cmd.email)
        with get_tracer().span("DoctorService.register_doctor"):
            return await self.handler.register(cmd)

    async def get_doctor(self, doctor_id: str) -> Doctor:
        logger.info("GetDoctor request", doctor_id=doctor_id)
        with get_tracer().span("DoctorService.get_doctor", doctor_id=doctor_id):
            return await self.handler.get(doctor_id)

    async def update_doctor(self, cmd: UpdateDoctorCommand) -> Doctor:
        logger.info("UpdateDoctor request", doctor_id=cmd.doctor_id)
        with get_tracer().span("DoctorService.update_doctor", doctor_id=cmd.doctor_id):
            return await self.handler.update(cmd)

    async def search_doctors(
        self,
        name: str = "",
        specialization: Specialization = Specialization.UNSPECIFIED,
        is_available: Optional[bool] = None,
    ) -> Sequence[Doctor]:
        logger.info("SearchDoctors request", name=name, specialization=specialization.value)
        with get_tracer().span("DoctorService.search_doctors"):
            return await self.handler.search(
                name=name,
                specialization=specialization,
                is_available=is_available,
            )

    async def set_availability(self, cmd: SetAvailabilityCommand) -> DoctorAvailabilityDTO:
        logger.info("SetDoctorAvailability request", doctor_id=cmd.doctor_id, slots=len(cmd.slots))
        with get_tracer().span("DoctorService.set_availability", doctor_id=cmd.doctor_id):
            return await self.handler.set_availability(cmd)

    async def get_availability(self, doctor_id: str) -> DoctorAvailabilityDTO:
        logger.info("GetDoctorAvailability request", doctor_id=doctor_id)
        with get_tracer().span("DoctorService.get_availability", doctor_id=doctor_id):
            return await self.handler.get_availability(doctor_id)
