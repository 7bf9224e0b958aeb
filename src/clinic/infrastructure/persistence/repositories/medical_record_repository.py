"""
Medical Record Repository Implementation
"""
from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from clinic.domain.entities import MedicalRecord
from clinic.domain.value_objects import VitalSigns
from clinic.infrastructure.persistence.models import MedicalRecordModel
from shared.infrastructure.database.sqlalchemy_repository import SQLAlchemyRepository
from shared.utils.serialization import dumps, loads


class MedicalRecordRepository(SQLAlchemyRepository[MedicalRecord, MedicalRecordModel]):
    """Persistence for visit records."""

    entity_label = "medical record"

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(
            session=session,
            model_class=MedicalRecordModel,
            entity_class=MedicalRecord,
        )

    def _to_entity(self, model: MedicalRecordModel) -> MedicalRecord:
        vitals = loads(model.vital_signs)
        return MedicalRecord(
            id=model.id,
            patient_id=model.patient_id,
            doctor_id=model.doctor_id,
            visit_date=model.visit_date,
            diagnosis=model.diagnosis or "",
            symptoms=model.symptoms or "",
            treatment=model.treatment or "",
            prescriptions=model.prescriptions or "",
            lab_results=model.lab_results or "",
            vital_signs=VitalSigns.from_dict(vitals) if vitals is not None else None,
            notes=model.notes or "",
            follow_up_date=model.follow_up_date,
            record_type=model.record_type or "",
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: MedicalRecord) -> MedicalRecordModel:
        return MedicalRecordModel(
            id=entity.id,
            patient_id=entity.patient_id,
            doctor_id=entity.doctor_id,
            visit_date=entity.visit_date,
            diagnosis=entity.diagnosis,
            symptoms=entity.symptoms,
            treatment=entity.treatment,
            prescriptions=entity.prescriptions,
            lab_results=entity.lab_results,
            vital_signs=dumps(entity.vital_signs.to_dict()) if entity.vital_signs is not None else None,
            notes=entity.notes,
            follow_up_date=entity.follow_up_date,
            record_type=entity.record_type,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )

    async def list_by_patient(
        self,
        patient_id: str,
        from_date: Optional[datetime] = None,
        to_date: Optional[datetime] = None,
        record_type: str = "",
    ) -> Sequence[MedicalRecord]:
        """
        Records of a patient, most recent visit first.

        `from_date` is inclusive, `to_date` exclusive.
        """
        stmt = select(MedicalRecordModel).where(MedicalRecordModel.patient_id == patient_id)
        if from_date is not None:
            stmt = stmt.where(MedicalRecordModel.visit_date >= from_date)
        if to_date is not None:
            stmt = stmt.where(MedicalRecordModel.visit_date < to_date)
        if record_type:
            stmt = stmt.where(MedicalRecordModel.record_type == record_type)
        stmt = stmt.order_by(MedicalRecordModel.visit_date.desc())

        with self._errors("get medical records", patient_id=patient_id):
            result = await self.session.execute(stmt)
            models = result.scalars().all()
        return [self._to_entity(model) for model in models]
