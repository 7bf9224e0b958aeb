"""
Clinic Value Objects
Structured values persisted as JSON text
"""
from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any, Mapping, Optional


def _known(cls: type, data: Mapping[str, Any] | None) -> dict[str, Any]:
    """Keep only keys that are fields of `cls`; unknown keys are dropped."""
    if not data:
        return {}
    names = {f.name for f in fields(cls)}
    return {k: v for k, v in data.items() if k in names}


@dataclass(frozen=True)
class Address:
    street: str = ""
    city: str = ""
    state: str = ""
    zip_code: str = ""
    country: str = ""

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> Address:
        return cls(**_known(cls, data))


@dataclass(frozen=True)
class Medication:
    """One line of a prescription"""
    medication_name: str
    dosage: str = ""
    frequency: str = ""
    duration: str = ""
    route: str = ""
    instructions: str = ""
    quantity: int = 0

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Medication:
        values = _known(cls, data)
        values.setdefault("medication_name", "")
        return cls(**values)


@dataclass(frozen=True)
class VitalSigns:
    """Vital signs taken at a visit; unset readings are omitted when stored."""
    temperature: Optional[float] = None
    blood_pressure: Optional[str] = None
    heart_rate: Optional[int] = None
    respiratory_rate: Optional[int] = None
    oxygen_saturation: Optional[float] = None
    weight: Optional[float] = None
    height: Optional[float] = None

    def to_dict(self) -> dict[str, Any]:
        return {k: v for k, v in asdict(self).items() if v is not None}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> VitalSigns:
        return cls(**_known(cls, data))


@dataclass(frozen=True)
class TimeSlot:
    """A fixed scheduling interval shown to callers"""
    start_time: str
    end_time: str
    is_available: bool
