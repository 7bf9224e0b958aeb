"""
Clinic Domain Services
Pure rules with no I/O
"""
from clinic.domain.services.appointment_policy import (
    ALLOWED_TRANSITIONS,
    TERMINAL_STATUSES,
    can_transition,
    ensure_transition,
)
from clinic.domain.services.prescription_policy import DEFAULT_VALIDITY_DAYS, is_active, valid_until
from clinic.domain.services.scheduling import generate_slots

__all__ = [
    "ALLOWED_TRANSITIONS",
    "TERMINAL_STATUSES",
    "can_transition",
    "ensure_transition",
    "DEFAULT_VALIDITY_DAYS",
    "is_active",
    "valid_until",
    "generate_slots",
]
