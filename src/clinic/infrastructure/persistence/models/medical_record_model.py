"""
Medical Record ORM Model
Maps to the medical_records table
"""
from datetime import datetime

from sqlalchemy import ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from shared.infrastructure.database.base_model import Base


class MedicalRecordModel(Base):
    """SQLAlchemy model for the medical_records table. Vital signs are JSON text."""

    __tablename__ = "medical_records"

    patient_id: Mapped[str] = mapped_column(String(36), ForeignKey("patients.id"), nullable=False, index=True)
    doctor_id: Mapped[str] = mapped_column(String(36), ForeignKey("doctors.id"), nullable=False)
    visit_date: Mapped[datetime] = mapped_column(nullable=False)
    diagnosis: Mapped[str] = mapped_column(Text, nullable=False, default="")
    symptoms: Mapped[str] = mapped_column(Text, nullable=False, default="")
    treatment: Mapped[str] = mapped_column(Text, nullable=False, default="")
    prescriptions: Mapped[str] = mapped_column(Text, nullable=False, default="")
    lab_results: Mapped[str] = mapped_column(Text, nullable=False, default="")
    vital_signs: Mapped[str | None] = mapped_column(Text, nullable=True)
    notes: Mapped[str] = mapped_column(Text, nullable=False, default="")
    follow_up_date: Mapped[datetime | None] = mapped_column(nullable=True)
    record_type: Mapped[str] = mapped_column(String(64), nullable=False, default="")
