"""
Appointment Repository Implementation
"""
from __future__ import annotations

from typing import Optional, Sequence

from sqlalchemy import Select, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from clinic.domain.entities import Appointment
from clinic.domain.enums import AppointmentStatus, ConsultationType, parse_enum
from clinic.infrastructure.persistence.models import AppointmentModel
from shared.infrastructure.database.sqlalchemy_repository import SQLAlchemyRepository

_CANCELLED = AppointmentStatus.CANCELLED.value


class AppointmentRepository(SQLAlchemyRepository[Appointment, AppointmentModel]):
    """
    Persistence and scheduling queries for appointments.

    Listings are ordered by date then time, newest first.
    """

    entity_label = "appointment"

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(
            session=session,
            model_class=AppointmentModel,
            entity_class=Appointment,
        )

    def _to_entity(self, model: AppointmentModel) -> Appointment:
        return Appointment(
            id=model.id,
            patient_id=model.patient_id,
            patient_name=model.patient_name,
            doctor_id=model.doctor_id,
            doctor_name=model.doctor_name,
            appointment_date=model.appointment_date,
            appointment_time=model.appointment_time,
            status=parse_enum(AppointmentStatus, model.status, AppointmentStatus.UNSPECIFIED),
            consultation_type=parse_enum(ConsultationType, model.consultation_type, ConsultationType.UNSPECIFIED),
            reason_for_visit=model.reason_for_visit or "",
            notes=model.notes or "",
            diagnosis=model.diagnosis or "",
            cancelled_at=model.cancelled_at,
            cancellation_reason=model.cancellation_reason or "",
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: Appointment) -> AppointmentModel:
        return AppointmentModel(
            id=entity.id,
            patient_id=entity.patient_id,
            patient_name=entity.patient_name,
            doctor_id=entity.doctor_id,
            doctor_name=entity.doctor_name,
            appointment_date=entity.appointment_date,
            appointment_time=entity.appointment_time,
            status=entity.status.value,
            consultation_type=entity.consultation_type.value,
            reason_for_visit=entity.reason_for_visit,
            notes=entity.notes,
            diagnosis=entity.diagnosis,
            cancelled_at=entity.cancelled_at,
            cancellation_reason=entity.cancellation_reason,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )

    def _conflict_message(self, error: IntegrityError) -> str:
        detail = str(error.orig)
        if "uq_appointments_active_slot" in detail or "appointments.appointment_time" in detail:
            return "time slot is already booked"
        return super()._conflict_message(error)

    async def _list(self, stmt: Select, action: str) -> Sequence[Appointment]:
        stmt = stmt.order_by(
            AppointmentModel.appointment_date.desc(),
            AppointmentModel.appointment_time.desc(),
        )
        with self._errors(action):
            result = await self.session.execute(stmt)
            models = result.scalars().all()
        return [self._to_entity(model) for model in models]

    async def has_conflict(
        self,
        doctor_id: str,
        appointment_date: str,
        appointment_time: str,
        exclude_id: Optional[str] = None,
    ) -> bool:
        """True when another non-cancelled appointment holds (doctor, date, time)."""
        stmt = (
            select(func.count())
            .select_from(AppointmentModel)
            .where(
                AppointmentModel.doctor_id == doctor_id,
                AppointmentModel.appointment_date == appointment_date,
                AppointmentModel.appointment_time == appointment_time,
                AppointmentModel.status != _CANCELLED,
            )
        )
        if exclude_id:
            stmt = stmt.where(AppointmentModel.id != exclude_id)

        with self._errors("check appointment conflict", doctor_id=doctor_id):
            result = await self.session.execute(stmt)
            return result.scalar_one() > 0

    async def list_for_doctor_on_date(
        self,
        doctor_id: str,
        appointment_date: str,
    ) -> Sequence[Appointment]:
        stmt = (
            select(AppointmentModel)
            .where(
                AppointmentModel.doctor_id == doctor_id,
                AppointmentModel.appointment_date == appointment_date,
                AppointmentModel.status != _CANCELLED,
            )
            .order_by(AppointmentModel.appointment_time.asc())
        )
        with self._errors("get doctor appointments", doctor_id=doctor_id):
            result = await self.session.execute(stmt)
            models = result.scalars().all()
        return [self._to_entity(model) for model in models]

    async def list_by_patient(
        self,
        patient_id: str,
        status: Optional[AppointmentStatus] = None,
        from_date: str = "",
        to_date: str = "",
    ) -> Sequence[Appointment]:
        """
        Appointments of a patient.

        `from_date` and `to_date` are inclusive ``YYYY-MM-DD`` bounds; an
        UNSPECIFIED or missing status does not filter.
        """
        stmt = select(AppointmentModel).where(AppointmentModel.patient_id == patient_id)
        if status and status != AppointmentStatus.UNSPECIFIED:
            stmt = stmt.where(AppointmentModel.status == status.value)
        if from_date:
            stmt = stmt.where(AppointmentModel.appointment_date >= from_date)
        if to_date:
            stmt = stmt.where(AppointmentModel.appointment_date <= to_date)
        return await self._list(stmt, "get patient appointments")

    async def list_by_doctor(
        self,
        doctor_id: str,
        status: Optional[AppointmentStatus] = None,
        appointment_date: str = "",
    ) -> Sequence[Appointment]:
        stmt = select(AppointmentModel).where(AppointmentModel.doctor_id == doctor_id)
        if status and status != AppointmentStatus.UNSPECIFIED:
            stmt = stmt.where(AppointmentModel.status == status.value)
        if appointment_date:
            stmt = stmt.where(AppointmentModel.appointment_date == appointment_date)
        return await self._list(stmt, "get doctor appointments")
