"""
Doctor Entities
Doctor profile and weekly availability rows
"""
from __future__ import annotations

from datetime import datetime
from typing import Optional

from clinic.domain.enums import Specialization
from shared.domain.base_entity import BaseEntity


class Doctor(BaseEntity):
    """
    A practitioner who can be booked.

    Email, phone number and license number are each unique across all doctors.
    New doctors start available, unrated, with no consultations.
    """

    def __init__(
        self,
        first_name: str,
        last_name: str,
        email: str,
        phone_number: str,
        license_number: str,
        specialization: Specialization = Specialization.UNSPECIFIED,
        years_of_experience: int = 0,
        qualifications: Optional[list[str]] = None,
        languages: Optional[list[str]] = None,
        consultation_fee: int = 0,
        is_available: bool = True,
        average_rating: float = 0.0,
        total_consultations: int = 0,
        id: Optional[str] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ) -> None:
        super().__init__(id, created_at=created_at, updated_at=updated_at)
        self.first_name = first_name
        self.last_name = last_name
        self.email = email
        self.phone_number = phone_number
        self.license_number = license_number
        self.specialization = specialization
        self.years_of_experience = years_of_experience
        self.qualifications = list(qualifications or [])
        self.languages = list(languages or [])
        self.consultation_fee = consultation_fee
        self.is_available = is_available
        self.average_rating = average_rating
        self.total_consultations = total_consultations

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class DoctorAvailability(BaseEntity):
    """One recurring availability window, e.g. Monday 09:00-13:00."""

    def __init__(
        self,
        doctor_id: str,
        day_of_week: str,
        start_time: str,
        end_time: str,
        slot_duration_minutes: int = 30,
        id: Optional[str] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ) -> None:
        super().__init__(id, created_at=created_at, updated_at=updated_at)
        self.doctor_id = doctor_id
        self.day_of_week = day_of_week
        self.start_time = start_time
        self.end_time = end_time
        self.slot_duration_minutes = slot_duration_minutes
