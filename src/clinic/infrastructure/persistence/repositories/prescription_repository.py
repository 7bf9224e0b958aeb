"""
Prescription Repository Implementation
"""
from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from clinic.domain.entities import Prescription
from clinic.domain.value_objects import Medication
from clinic.infrastructure.persistence.models import PrescriptionModel
from shared.infrastructure.database.sqlalchemy_repository import SQLAlchemyRepository
from shared.utils.serialization import dumps, loads


class PrescriptionRepository(SQLAlchemyRepository[Prescription, PrescriptionModel]):
    """
    Persistence for prescriptions.

    Rows are returned exactly as stored; validity is recomputed by the
    handler on read.
    """

    entity_label = "prescription"

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(
            session=session,
            model_class=PrescriptionModel,
            entity_class=Prescription,
        )

    def _to_entity(self, model: PrescriptionModel) -> Prescription:
        return Prescription(
            id=model.id,
            appointment_id=model.appointment_id,
            patient_id=model.patient_id,
            patient_name=model.patient_name,
            doctor_id=model.doctor_id,
            doctor_name=model.doctor_name,
            medications=[Medication.from_dict(item) for item in loads(model.medications, default=[])],
            diagnosis=model.diagnosis or "",
            additional_instructions=model.additional_instructions or "",
            prescription_date=model.prescription_date,
            valid_until=model.valid_until,
            is_active=model.is_active,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: Prescription) -> PrescriptionModel:
        return PrescriptionModel(
            id=entity.id,
            appointment_id=entity.appointment_id or None,
            patient_id=entity.patient_id,
            patient_name=entity.patient_name,
            doctor_id=entity.doctor_id,
            doctor_name=entity.doctor_name,
            medications=dumps([medication.to_dict() for medication in entity.medications]),
            diagnosis=entity.diagnosis,
            additional_instructions=entity.additional_instructions,
            prescription_date=entity.prescription_date,
            valid_until=entity.valid_until,
            is_active=entity.is_active,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )

    async def _list(
        self,
        stmt: Select,
        from_date: Optional[datetime],
        to_date: Optional[datetime],
        action: str,
    ) -> Sequence[Prescription]:
        if from_date is not None:
            stmt = stmt.where(PrescriptionModel.prescription_date >= from_date)
        if to_date is not None:
            stmt = stmt.where(PrescriptionModel.prescription_date < to_date)
        stmt = stmt.order_by(PrescriptionModel.prescription_date.desc())

        with self._errors(action):
            result = await self.session.execute(stmt)
            models = result.scalars().all()
        return [self._to_entity(model) for model in models]

    async def get_by_appointment_id(self, appointment_id: str) -> Optional[Prescription]:
        """Most recent prescription issued for an appointment."""
        stmt = (
            select(PrescriptionModel)
            .where(PrescriptionModel.appointment_id == appointment_id)
            .order_by(PrescriptionModel.prescription_date.desc())
            .limit(1)
        )
        with self._errors("get prescription by appointment", appointment_id=appointment_id):
            result = await self.session.execute(stmt)
            model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def list_by_patient(
        self,
        patient_id: str,
        from_date: Optional[datetime] = None,
        to_date: Optional[datetime] = None,
    ) -> Sequence[Prescription]:
        """
        Prescriptions of a patient, newest first.

        Args:
            from_date: Inclusive lower bound on the issue date
            to_date: Exclusive upper bound on the issue date
        """
        stmt = select(PrescriptionModel).where(PrescriptionModel.patient_id == patient_id)
        return await self._list(stmt, from_date, to_date, "get patient prescriptions")

    async def list_by_doctor(
        self,
        doctor_id: str,
        from_date: Optional[datetime] = None,
        to_date: Optional[datetime] = None,
    ) -> Sequence[Prescription]:
        stmt = select(PrescriptionModel).where(PrescriptionModel.doctor_id == doctor_id)
        return await self._list(stmt, from_date, to_date, "get doctor prescriptions")
