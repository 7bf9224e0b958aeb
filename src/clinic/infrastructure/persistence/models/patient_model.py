"""
Patient ORM Model
Maps to the patients table
"""
from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from shared.infrastructure.database.base_model import Base


class PatientModel(Base):
    """
    SQLAlchemy model for the patients table.

    Address is JSON text; email and phone number carry unique indexes.
    """

    __tablename__ = "patients"

    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)
    phone_number: Mapped[str] = mapped_column(String(32), nullable=False, unique=True, index=True)
    date_of_birth: Mapped[str] = mapped_column(String(10), nullable=False, default="")
    gender: Mapped[str] = mapped_column(String(16), nullable=False, default="unspecified")
    blood_group: Mapped[str] = mapped_column(String(16), nullable=False, default="unspecified")

    # JSON text
    address: Mapped[str | None] = mapped_column(Text, nullable=True)

    medical_history: Mapped[str] = mapped_column(Text, nullable=False, default="")
    emergency_contact: Mapped[str] = mapped_column(Text, nullable=False, default="")

    def __repr__(self) -> str:
        return f"<PatientModel(id={self.id}, email={self.email})>"
