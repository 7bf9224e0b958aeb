from datetime import datetime

import pytest

from clinic.application.commands import (
    AddMedicalRecordCommand,
    RegisterPatientCommand,
    UpdatePatientCommand,
)
from clinic.domain.value_objects import Address, VitalSigns
from shared.exceptions import ConflictError, NotFoundError, ValidationError


async def test_register_and_get(patient_handler):
    created = await patient_handler.register(
        RegisterPatientCommand(
            first_name="Jane",
            last_name="Doe",
            email="jane@example.com",
            phone_number="555-0100",
            address=Address(street="1 Main St", city="Springfield"),
        )
    )
    assert len(created.id) == 36

    loaded = await patient_handler.get(created.id)
    assert loaded.full_name == "Jane Doe"
    assert loaded.address == Address(street="1 Main St", city="Springfield")


async def test_register_requires_names_and_contacts(patient_handler):
    with pytest.raises(ValidationError, match="first_name and last_name are required"):
        await patient_handler.register(RegisterPatientCommand("", "Doe", "a@x.com", "1"))
    with pytest.raises(ValidationError, match="email and phone_number are required"):
        await patient_handler.register(RegisterPatientCommand("Jane", "Doe", "", "1"))


async def test_duplicate_email_and_phone_rejected(make_patient):
    await make_patient()
    with pytest.raises(ConflictError, match="email already registered"):
        await make_patient(phone_number="555-9999")
    with pytest.raises(ConflictError, match="phone number already registered"):
        await make_patient(email="other@example.com")


async def test_get_missing_patient(patient_handler):
    with pytest.raises(NotFoundError, match="patient not found"):
        await patient_handler.get("00000000-0000-0000-0000-000000000000")
    with pytest.raises(ValidationError, match="patient_id is required"):
        await patient_handler.get("")


async def test_update_patches_supplied_fields_only(patient_handler, make_patient):
    patient = await make_patient()
    updated = await patient_handler.update(
        UpdatePatientCommand(patient_id=patient.id, phone_number="555-7777")
    )
    assert updated.phone_number == "555-7777"
    assert updated.email == "jane@example.com"
    assert updated.first_name == "Jane"


async def test_update_cannot_take_another_patients_email(patient_handler, make_patient):
    await make_patient()
    other = await make_patient(email="john@example.com", phone_number="555-0101")
    with pytest.raises(ConflictError):
        await patient_handler.update(UpdatePatientCommand(patient_id=other.id, email="jane@example.com"))


async def test_search_by_name_substring(patient_handler, make_patient):
    await make_patient()
    await make_patient(first_name="John", last_name="Smith", email="john@example.com", phone_number="555-0101")

    found = await patient_handler.search(name="Smi")
    assert [p.first_name for p in found] == ["John"]
    assert len(await patient_handler.search()) == 2


async def test_medical_history_is_filtered_and_newest_first(patient_handler, make_patient, make_doctor):
    patient = await make_patient()
    doctor = await make_doctor()
    for day, diagnosis in [(3, "cold"), (10, "flu"), (20, "checkup")]:
        await patient_handler.add_medical_record(
            AddMedicalRecordCommand(
                patient_id=patient.id,
                doctor_id=doctor.id,
                visit_date=datetime(2030, 1, day, 15, 30),
                diagnosis=diagnosis,
                vital_signs=VitalSigns(temperature=38.1),
            )
        )

    history = await patient_handler.medical_history(patient.id)
    assert [r.diagnosis for r in history.records] == ["checkup", "flu", "cold"]
    assert history.records[0].visit_date == "2030-01-20"

    ranged = await patient_handler.medical_history(patient.id, "2030-01-03", "2030-01-10")
    assert [r.diagnosis for r in ranged.records] == ["flu", "cold"]


async def test_medical_history_for_unknown_patient(patient_handler):
    with pytest.raises(NotFoundError):
        await patient_handler.medical_history("missing")
