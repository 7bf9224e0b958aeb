"""
Doctor Repository Implementation
"""
from __future__ import annotations

from typing import Optional, Sequence

from sqlalchemy import delete, or_, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from clinic.domain.entities import Doctor, DoctorAvailability
from clinic.domain.enums import Specialization, parse_enum
from clinic.infrastructure.persistence.models import DoctorAvailabilityModel, DoctorModel
from shared.infrastructure.database.sqlalchemy_repository import SQLAlchemyRepository
from shared.infrastructure.observability.logger import get_logger
from shared.utils.serialization import dumps, loads

logger = get_logger(__name__)


class DoctorRepository(SQLAlchemyRepository[Doctor, DoctorModel]):
    """
    Persistence for Doctor entities and their availability rows.
    """

    entity_label = "doctor"

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(
            session=session,
            model_class=DoctorModel,
            entity_class=Doctor,
        )

    def _to_entity(self, model: DoctorModel) -> Doctor:
        return Doctor(
            id=model.id,
            first_name=model.first_name,
            last_name=model.last_name,
            email=model.email,
            phone_number=model.phone_number,
            license_number=model.license_number,
            specialization=parse_enum(Specialization, model.specialization, Specialization.UNSPECIFIED),
            years_of_experience=model.years_of_experience,
            qualifications=loads(model.qualifications, default=[]),
            languages=loads(model.languages, default=[]),
            consultation_fee=model.consultation_fee,
            is_available=model.is_available,
            average_rating=model.average_rating,
            total_consultations=model.total_consultations,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: Doctor) -> DoctorModel:
        return DoctorModel(
            id=entity.id,
            first_name=entity.first_name,
            last_name=entity.last_name,
            email=entity.email,
            phone_number=entity.phone_number,
            license_number=entity.license_number,
            specialization=entity.specialization.value,
            years_of_experience=entity.years_of_experience,
            qualifications=dumps(entity.qualifications),
            languages=dumps(entity.languages),
            consultation_fee=entity.consultation_fee,
            is_available=entity.is_available,
            average_rating=entity.average_rating,
            total_consultations=entity.total_consultations,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )

    @staticmethod
    def _availability_to_entity(model: DoctorAvailabilityModel) -> DoctorAvailability:
        return DoctorAvailability(
            id=model.id,
            doctor_id=model.doctor_id,
            day_of_week=model.day_of_week,
            start_time=model.start_time,
            end_time=model.end_time,
            slot_duration_minutes=model.slot_duration_minutes,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _conflict_message(self, error: IntegrityError) -> str:
        detail = str(error.orig)
        if "email" in detail:
            return "email already registered"
        if "phone_number" in detail:
            return "phone number already registered"
        if "license_number" in detail:
            return "license number already registered"
        return super()._conflict_message(error)

    async def _get_one_by(self, column, value: str, action: str) -> Optional[Doctor]:
        with self._errors(action):
            result = await self.session.execute(select(DoctorModel).where(column == value))
            model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def get_by_email(self, email: str) -> Optional[Doctor]:
        return await self._get_one_by(DoctorModel.email, email, "get doctor by email")

    async def get_by_phone(self, phone_number: str) -> Optional[Doctor]:
        return await self._get_one_by(DoctorModel.phone_number, phone_number, "get doctor by phone")

    async def get_by_license(self, license_number: str) -> Optional[Doctor]:
        return await self._get_one_by(DoctorModel.license_number, license_number, "get doctor by license")

    async def search(
        self,
        name: str = "",
        specialization: Specialization = Specialization.UNSPECIFIED,
        is_available: Optional[bool] = None,
    ) -> Sequence[Doctor]:
        """
        Search doctors.

        Args:
            name: Substring of first or last name
            specialization: Ignored when UNSPECIFIED
            is_available: Ignored when None
        """
        stmt = select(DoctorModel)
        if name:
            pattern = f"%{name}%"
            stmt = stmt.where(
                or_(DoctorModel.first_name.like(pattern), DoctorModel.last_name.like(pattern))
            )
        if specialization != Specialization.UNSPECIFIED:
            stmt = stmt.where(DoctorModel.specialization == specialization.value)
        if is_available is not None:
            stmt = stmt.where(DoctorModel.is_available == is_available)
        stmt = stmt.order_by(DoctorModel.last_name, DoctorModel.first_name)

        with self._errors("search doctors"):
            result = await self.session.execute(stmt)
            models = result.scalars().all()
        return [self._to_entity(model) for model in models]

    async def increment_consultations(self, doctor_id: str) -> None:
        """
        Add one to `total_consultations` inside a savepoint.

        A failure rolls back only the savepoint, so the caller's transaction
        stays usable.
        """
        with self._errors("increment doctor consultations", doctor_id=doctor_id):
            async with self.session.begin_nested():
                await self.session.execute(
                    update(DoctorModel)
                    .where(DoctorModel.id == doctor_id)
                    .values(total_consultations=DoctorModel.total_consultations + 1)
                    .execution_options(synchronize_session=False)
                )

    async def replace_availability(
        self,
        doctor_id: str,
        slots: Sequence[DoctorAvailability],
    ) -> Sequence[DoctorAvailability]:
        with self._errors("set doctor availability", doctor_id=doctor_id):
            await self.session.execute(
                delete(DoctorAvailabilityModel).where(DoctorAvailabilityModel.doctor_id == doctor_id)
            )
            models = [
                DoctorAvailabilityModel(
                    id=slot.id,
                    doctor_id=doctor_id,
                    day_of_week=slot.day_of_week,
                    start_time=slot.start_time,
                    end_time=slot.end_time,
                    slot_duration_minutes=slot.slot_duration_minutes,
                    position=position,
                    created_at=slot.created_at,
                    updated_at=slot.updated_at,
                )
                for position, slot in enumerate(slots)
            ]
            self.session.add_all(models)
            await self.session.flush()

        logger.info("Replaced doctor availability", doctor_id=doctor_id, slots=len(models))
        return [self._availability_to_entity(model) for model in models]

    async def get_availability(self, doctor_id: str) -> Sequence[DoctorAvailability]:
        with self._errors("get doctor availability", doctor_id=doctor_id):
            result = await self.session.execute(
                select(DoctorAvailabilityModel)
                .where(DoctorAvailabilityModel.doctor_id == doctor_id)
                .order_by(DoctorAvailabilityModel.position)
            )
            models = result.scalars().all()
        return [self._availability_to_entity(model) for model in models]
