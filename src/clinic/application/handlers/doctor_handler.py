"""
Doctor Handler
"""
from __future__ import annotations

from typing import Optional, Sequence

from clinic.application.commands import (
    RegisterDoctorCommand,
    SetAvailabilityCommand,
    UpdateDoctorCommand,
)
from clinic.application.dto import DoctorAvailabilityDTO
from clinic.application.validation import check_time, require
from clinic.domain.entities import Doctor, DoctorAvailability
from clinic.domain.enums import Specialization
from clinic.domain.protocols import IDoctorRepository
from shared.exceptions import ConflictError, NotFoundError, ValidationError
from shared.infrastructure.observability.logger import get_logger
from shared.infrastructure.observability.tracer import get_tracer

logger = get_logger(__name__)


class DoctorHandler:
    """
    Business rules for doctors and their availability.

    Email, phone number and license number must each be unique.
    """

    def __init__(self, doctors: IDoctorRepository) -> None:
        self.doctors = doctors

    async def _ensure_unique(
        self,
        email: Optional[str] = None,
        phone_number: Optional[str] = None,
        license_number: Optional[str] = None,
        exclude_id: str = "",
    ) -> None:
        checks = (
            (email, self.doctors.get_by_email, "email already registered"),
            (phone_number, self.doctors.get_by_phone, "phone number already registered"),
            (license_number, self.doctors.get_by_license, "license number already registered"),
        )
        for value, lookup, message in checks:
            if not value:
                continue
            existing = await lookup(value)
            if existing is not None and existing.id != exclude_id:
                raise ConflictError(message)

    async def register(self, cmd: RegisterDoctorCommand) -> Doctor:
        with get_tracer().span("DoctorHandler.register"):
            require("first_name and last_name are required", cmd.first_name, cmd.last_name)
            require("email and phone_number are required", cmd.email, cmd.phone_number)
            require("license_number is required", cmd.license_number)

            await self._ensure_unique(cmd.email, cmd.phone_number, cmd.license_number)

            doctor = Doctor(
                first_name=cmd.first_name,
                last_name=cmd.last_name,
                email=cmd.email,
                phone_number=cmd.phone_number,
                license_number=cmd.license_number,
                specialization=cmd.specialization,
                years_of_experience=cmd.years_of_experience,
                qualifications=list(cmd.qualifications),
                languages=list(cmd.languages),
                consultation_fee=cmd.consultation_fee,
                is_available=True,
                average_rating=0.0,
                total_consultations=0,
            )
            created = await self.doctors.add(doctor)
            logger.info("Doctor registered", doctor_id=created.id)
            return created

    async def get(self, doctor_id: str) -> Doctor:
        with get_tracer().span("DoctorHandler.get", doctor_id=doctor_id):
            require("doctor_id is required", doctor_id)
            doctor = await self.doctors.get_by_id(doctor_id)
            if doctor is None:
                raise NotFoundError("doctor not found", details={"doctor_id": doctor_id})
            return doctor

    async def update(self, cmd: UpdateDoctorCommand) -> Doctor:
        with get_tracer().span("DoctorHandler.update", doctor_id=cmd.doctor_id):
            doctor = await self.get(cmd.doctor_id)
            await self._ensure_unique(
                email=cmd.email if cmd.email != doctor.email else None,
                phone_number=cmd.phone_number if cmd.phone_number != doctor.phone_number else None,
                exclude_id=doctor.id,
            )

            if cmd.phone_number:
                doctor.phone_number = cmd.phone_number
            if cmd.email:
                doctor.email = cmd.email
            if cmd.consultation_fee is not None:
                if cmd.consultation_fee < 0:
                    raise ValidationError("consultation_fee must not be negative")
                doctor.consultation_fee = cmd.consultation_fee
            if cmd.is_available is not None:
                doctor.is_available = cmd.is_available

            return await self.doctors.update(doctor)

    async def search(
        self,
        name: str = "",
        specialization: Specialization = Specialization.UNSPECIFIED,
        is_available: Optional[bool] = None,
    ) -> Sequence[Doctor]:
        with get_tracer().span("DoctorHandler.search"):
            return await self.doctors.search(
                name=name,
                specialization=specialization,
                is_available=is_available,
            )

    async def set_availability(self, cmd: SetAvailabilityCommand) -> DoctorAvailabilityDTO:
        """Replace the doctor's availability with exactly `cmd.slots`."""
        with get_tracer().span("DoctorHandler.set_availability", doctor_id=cmd.doctor_id):
            await self.get(cmd.doctor_id)

            slots = []
            for item in cmd.slots:
                require("day_of_week, start_time and end_time are required",
                        item.day_of_week, item.start_time, item.end_time)
                check_time(item.start_time, "start_time")
                check_time(item.end_time, "end_time")
                slots.append(
                    DoctorAvailability(
                        doctor_id=cmd.doctor_id,
                        day_of_week=item.day_of_week,
                        start_time=item.start_time,
                        end_time=item.end_time,
                        slot_duration_minutes=item.slot_duration_minutes or 30,
                    )
                )

            await self.doctors.replace_availability(cmd.doctor_id, slots)
            return await self.get_availability(cmd.doctor_id)

    async def get_availability(self, doctor_id: str) -> DoctorAvailabilityDTO:
        with get_tracer().span("DoctorHandler.get_availability", doctor_id=doctor_id):
            await self.get(doctor_id)
            rows = await self.doctors.get_availability(doctor_id)
            return DoctorAvailabilityDTO(doctor_id=doctor_id, availability_slots=list(rows))
