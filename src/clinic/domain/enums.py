"""
Clinic Enumerations
Stored and transmitted as their lower-case string values
"""
from __future__ import annotations

from enum import Enum


class AppointmentStatus(str, Enum):
    """Appointment lifecycle status"""
    UNSPECIFIED = "unspecified"
    SCHEDULED = "scheduled"
    CONFIRMED = "confirmed"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    NO_SHOW = "no_show"
    RESCHEDULED = "rescheduled"


class ConsultationType(str, Enum):
    UNSPECIFIED = "unspecified"
    IN_PERSON = "in_person"
    VIDEO = "video"
    PHONE = "phone"


class Gender(str, Enum):
    UNSPECIFIED = "unspecified"
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


class BloodGroup(str, Enum):
    UNSPECIFIED = "unspecified"
    A_POSITIVE = "a_positive"
    A_NEGATIVE = "a_negative"
    B_POSITIVE = "b_positive"
    B_NEGATIVE = "b_negative"
    AB_POSITIVE = "ab_positive"
    AB_NEGATIVE = "ab_negative"
    O_POSITIVE = "o_positive"
    O_NEGATIVE = "o_negative"


class Specialization(str, Enum):
    """Medical specialization of a doctor"""
    UNSPECIFIED = "unspecified"
    GENERAL_PRACTICE = "general_practice"
    CARDIOLOGY = "cardiology"
    DERMATOLOGY = "dermatology"
    NEUROLOGY = "neurology"
    ORTHOPEDICS = "orthopedics"
    PEDIATRICS = "pediatrics"
    PSYCHIATRY = "psychiatry"
    GYNECOLOGY = "gynecology"
    OPHTHALMOLOGY = "ophthalmology"
    ENT = "ent"
    ONCOLOGY = "oncology"
    RADIOLOGY = "radiology"


def parse_enum(enum_cls: type[Enum], value: str | None, default: Enum):
    """Map a stored string back to its enum member, falling back to `default`."""
    if not value:
        return default
    try:
        return enum_cls(value)
    except ValueError:
        return default
