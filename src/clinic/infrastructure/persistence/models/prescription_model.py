"""
Prescription ORM Model
Maps to the prescriptions table
"""
from datetime import datetime

from sqlalchemy import Boolean, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from shared.infrastructure.database.base_model import Base


class PrescriptionModel(Base):
    """
    SQLAlchemy model for the prescriptions table.

    `is_active` is written once at issue time; readers recompute it.
    """

    __tablename__ = "prescriptions"

    appointment_id: Mapped[str | None] = mapped_column(
        String(36), nullable=True, index=True
    )
    patient_id: Mapped[str] = mapped_column(String(36), ForeignKey("patients.id"), nullable=False, index=True)
    patient_name: Mapped[str] = mapped_column(String(201), nullable=False, default="")
    doctor_id: Mapped[str] = mapped_column(String(36), ForeignKey("doctors.id"), nullable=False, index=True)
    doctor_name: Mapped[str] = mapped_column(String(201), nullable=False, default="")

    # JSON text
    medications: Mapped[str] = mapped_column(Text, nullable=False, default="[]")

    diagnosis: Mapped[str] = mapped_column(Text, nullable=False, default="")
    additional_instructions: Mapped[str] = mapped_column(Text, nullable=False, default="")
    prescription_date: Mapped[datetime] = mapped_column(nullable=False)
    valid_until: Mapped[datetime] = mapped_column(nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
