"""
Doctor ORM Models
Maps to the doctors and doctor_availability tables
"""
from sqlalchemy import Boolean, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from shared.infrastructure.database.base_model import Base


class DoctorModel(Base):
    """
    SQLAlchemy model for the doctors table.

    Qualifications and languages are JSON text lists (`[]` when empty).
    """

    __tablename__ = "doctors"

    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)
    phone_number: Mapped[str] = mapped_column(String(32), nullable=False, unique=True, index=True)
    specialization: Mapped[str] = mapped_column(String(32), nullable=False, default="unspecified", index=True)
    license_number: Mapped[str] = mapped_column(String(64), nullable=False, unique=True, index=True)
    years_of_experience: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    # JSON text
    qualifications: Mapped[str] = mapped_column(Text, nullable=False, default="[]")
    languages: Mapped[str] = mapped_column(Text, nullable=False, default="[]")

    consultation_fee: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    is_available: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    average_rating: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    total_consultations: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    def __repr__(self) -> str:
        return f"<DoctorModel(id={self.id}, license_number={self.license_number})>"


class DoctorAvailabilityModel(Base):
    """SQLAlchemy model for the doctor_availability table."""

    __tablename__ = "doctor_availability"

    doctor_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("doctors.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    day_of_week: Mapped[str] = mapped_column(String(16), nullable=False)
    start_time: Mapped[str] = mapped_column(String(5), nullable=False)
    end_time: Mapped[str] = mapped_column(String(5), nullable=False)
    slot_duration_minutes: Mapped[int] = mapped_column(Integer, nullable=False, default=30)
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
