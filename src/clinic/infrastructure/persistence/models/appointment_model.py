"""
Appointment ORM Model
Maps to the appointments table
"""
from datetime import datetime

from sqlalchemy import ForeignKey, Index, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from shared.infrastructure.database.base_model import Base

ACTIVE_SLOT_PREDICATE = text("status <> 'cancelled'")


class AppointmentModel(Base):
    """
    SQLAlchemy model for the appointments table.

    A partial unique index keeps at most one non-cancelled appointment per
    (doctor, date, time).
    """

    __tablename__ = "appointments"
    __table_args__ = (
        Index(
            "uq_appointments_active_slot",
            "doctor_id",
            "appointment_date",
            "appointment_time",
            unique=True,
            postgresql_where=ACTIVE_SLOT_PREDICATE,
            sqlite_where=ACTIVE_SLOT_PREDICATE,
        ),
        Index("ix_appointments_patient_date", "patient_id", "appointment_date"),
    )

    patient_id: Mapped[str] = mapped_column(String(36), ForeignKey("patients.id"), nullable=False)
    patient_name: Mapped[str] = mapped_column(String(201), nullable=False, default="")
    doctor_id: Mapped[str] = mapped_column(String(36), ForeignKey("doctors.id"), nullable=False, index=True)
    doctor_name: Mapped[str] = mapped_column(String(201), nullable=False, default="")
    appointment_date: Mapped[str] = mapped_column(String(10), nullable=False)
    appointment_time: Mapped[str] = mapped_column(String(5), nullable=False)
    status: Mapped[str] = mapped_column(String(16), nullable=False, default="scheduled", index=True)
    consultation_type: Mapped[str] = mapped_column(String(16), nullable=False, default="in_person")
    reason_for_visit: Mapped[str] = mapped_column(Text, nullable=False, default="")
    notes: Mapped[str] = mapped_column(Text, nullable=False, default="")
    diagnosis: Mapped[str] = mapped_column(Text, nullable=False, default="")
    cancelled_at: Mapped[datetime | None] = mapped_column(nullable=True)
    cancellation_reason: Mapped[str] = mapped_column(Text, nullable=False, default="")
