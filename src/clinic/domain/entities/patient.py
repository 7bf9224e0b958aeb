"""
Patient Entity
"""
from __future__ import annotations

from datetime import datetime
from typing import Optional

from clinic.domain.enums import BloodGroup, Gender
from clinic.domain.value_objects import Address
from shared.domain.base_entity import BaseEntity


class Patient(BaseEntity):
    """
    A person registered with the clinic.

    Email and phone number are unique across all patients.

    Attributes:
        date_of_birth: ``YYYY-MM-DD`` string, empty when unknown
        address: Structured postal address, None when not provided
        medical_history: Free-text history notes
        emergency_contact: Free-text emergency contact
    """

    def __init__(
        self,
        first_name: str,
        last_name: str,
        email: str,
        phone_number: str,
        date_of_birth: str = "",
        gender: Gender = Gender.UNSPECIFIED,
        blood_group: BloodGroup = BloodGroup.UNSPECIFIED,
        address: Optional[Address] = None,
        medical_history: str = "",
        emergency_contact: str = "",
        id: Optional[str] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ) -> None:
        super().__init__(id, created_at=created_at, updated_at=updated_at)
        self.first_name = first_name
        self.last_name = last_name
        self.email = email
        self.phone_number = phone_number
        self.date_of_birth = date_of_birth
        self.gender = gender
        self.blood_group = blood_group
        self.address = address
        self.medical_history = medical_history
        self.emergency_contact = emergency_contact

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
