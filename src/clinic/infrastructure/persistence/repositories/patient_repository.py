"""
Patient Repository Implementation
"""
from __future__ import annotations

from typing import Optional, Sequence

from sqlalchemy import or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from clinic.domain.entities import Patient
from clinic.domain.enums import BloodGroup, Gender, parse_enum
from clinic.domain.value_objects import Address
from clinic.infrastructure.persistence.models import PatientModel
from shared.infrastructure.database.sqlalchemy_repository import SQLAlchemyRepository
from shared.utils.serialization import dumps, loads


class PatientRepository(SQLAlchemyRepository[Patient, PatientModel]):
    """Persistence for Patient entities."""

    entity_label = "patient"

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(
            session=session,
            model_class=PatientModel,
            entity_class=Patient,
        )

    def _to_entity(self, model: PatientModel) -> Patient:
        """Convert ORM model to domain entity"""
        address = loads(model.address)
        return Patient(
            id=model.id,
            first_name=model.first_name,
            last_name=model.last_name,
            email=model.email,
            phone_number=model.phone_number,
            date_of_birth=model.date_of_birth or "",
            gender=parse_enum(Gender, model.gender, Gender.UNSPECIFIED),
            blood_group=parse_enum(BloodGroup, model.blood_group, BloodGroup.UNSPECIFIED),
            address=Address.from_dict(address) if address is not None else None,
            medical_history=model.medical_history or "",
            emergency_contact=model.emergency_contact or "",
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: Patient) -> PatientModel:
        """Convert domain entity to ORM model"""
        return PatientModel(
            id=entity.id,
            first_name=entity.first_name,
            last_name=entity.last_name,
            email=entity.email,
            phone_number=entity.phone_number,
            date_of_birth=entity.date_of_birth,
            gender=entity.gender.value,
            blood_group=entity.blood_group.value,
            address=dumps(entity.address.to_dict()) if entity.address is not None else None,
            medical_history=entity.medical_history,
            emergency_contact=entity.emergency_contact,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )

    def _conflict_message(self, error: IntegrityError) -> str:
        detail = str(error.orig)
        if "email" in detail:
            return "email already registered"
        if "phone_number" in detail:
            return "phone number already registered"
        return super()._conflict_message(error)

    async def get_by_email(self, email: str) -> Optional[Patient]:
        with self._errors("get patient by email"):
            result = await self.session.execute(
                select(PatientModel).where(PatientModel.email == email)
            )
            model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def get_by_phone(self, phone_number: str) -> Optional[Patient]:
        with self._errors("get patient by phone"):
            result = await self.session.execute(
                select(PatientModel).where(PatientModel.phone_number == phone_number)
            )
            model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def search(
        self,
        name: str = "",
        email: str = "",
        phone_number: str = "",
        patient_id: str = "",
    ) -> Sequence[Patient]:
        """
        Search patients.

        Every supplied criterion must match; `name` matches a substring of the
        first or last name.
        """
        stmt = select(PatientModel)
        if name:
            pattern = f"%{name}%"
            stmt = stmt.where(
                or_(PatientModel.first_name.like(pattern), PatientModel.last_name.like(pattern))
            )
        if email:
            stmt = stmt.where(PatientModel.email == email)
        if phone_number:
            stmt = stmt.where(PatientModel.phone_number == phone_number)
        if patient_id:
            stmt = stmt.where(PatientModel.id == patient_id)
        stmt = stmt.order_by(PatientModel.last_name, PatientModel.first_name)

        with self._errors("search patients"):
            result = await self.session.execute(stmt)
            models = result.scalars().all()
        return [self._to_entity(model) for model in models]
