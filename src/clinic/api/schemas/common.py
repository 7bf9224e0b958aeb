"""
Shared API Schemas
Value-object payloads used by several resources
"""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from clinic.domain.value_objects import Address, Medication, VitalSigns


class AddressSchema(BaseModel):
    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    street: str = ""
    city: str = ""
    state: str = ""
    zip_code: str = ""
    country: str = ""

    def to_value(self) -> Address:
        return Address(**self.model_dump())

    @classmethod
    def from_value(cls, address: Optional[Address]) -> Optional[AddressSchema]:
        return cls(**address.to_dict()) if address else None


class MedicationSchema(BaseModel):
    """One prescribed medication"""
    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    medication_name: str = Field("", description="Drug name")
    dosage: str = ""
    frequency: str = ""
    duration: str = ""
    route: str = ""
    instructions: str = ""
    quantity: int = Field(0, ge=0)

    def to_value(self) -> Medication:
        return Medication(**self.model_dump())

    @classmethod
    def from_value(cls, medication: Medication) -> MedicationSchema:
        return cls(**medication.to_dict())


class VitalSignsSchema(BaseModel):
    model_config = ConfigDict(extra="forbid")

    temperature: Optional[float] = None
    blood_pressure: Optional[str] = None
    heart_rate: Optional[int] = None
    respiratory_rate: Optional[int] = None
    oxygen_saturation: Optional[float] = None
    weight: Optional[float] = None
    height: Optional[float] = None

    def to_value(self) -> VitalSigns:
        return VitalSigns(**self.model_dump())

    @classmethod
    def from_value(cls, vitals: Optional[VitalSigns]) -> Optional[VitalSignsSchema]:
        return cls(**vitals.to_dict()) if vitals else None
