import pytest

from clinic.application.commands import (
    AvailabilitySlotInput,
    RegisterDoctorCommand,
    SetAvailabilityCommand,
    UpdateDoctorCommand,
)
from clinic.domain.enums import Specialization
from shared.exceptions import ConflictError, NotFoundError, ValidationError


async def test_new_doctor_defaults(make_doctor, doctor_handler):
    doctor = await make_doctor()
    loaded = await doctor_handler.get(doctor.id)
    assert loaded.is_available is True
    assert loaded.total_consultations == 0
    assert loaded.average_rating == 0.0
    assert loaded.qualifications == ["MD"]
    assert loaded.languages == ["English"]


async def test_license_is_required(doctor_handler):
    with pytest.raises(ValidationError, match="license_number is required"):
        await doctor_handler.register(
            RegisterDoctorCommand("Gregory", "House", "house@example.com", "555-0200", "")
        )


@pytest.mark.parametrize(
    "overrides,message",
    [
        ({"phone_number": "555-1", "license_number": "LIC-2"}, "email already registered"),
        ({"email": "b@example.com", "license_number": "LIC-2"}, "phone number already registered"),
        ({"email": "b@example.com", "phone_number": "555-1"}, "license number already registered"),
    ],
)
async def test_unique_fields(make_doctor, overrides, message):
    await make_doctor()
    with pytest.raises(ConflictError, match=message):
        await make_doctor(**overrides)


async def test_update_fee_and_availability(make_doctor, doctor_handler):
    doctor = await make_doctor()
    updated = await doctor_handler.update(
        UpdateDoctorCommand(doctor_id=doctor.id, consultation_fee=7500, is_available=False)
    )
    assert updated.consultation_fee == 7500
    assert updated.is_available is False
    assert updated.email == "house@example.com"


async def test_negative_fee_rejected(make_doctor, doctor_handler):
    doctor = await make_doctor()
    with pytest.raises(ValidationError):
        await doctor_handler.update(UpdateDoctorCommand(doctor_id=doctor.id, consultation_fee=-1))


async def test_search_by_specialization_and_availability(make_doctor, doctor_handler):
    house = await make_doctor()
    await make_doctor(
        first_name="Lisa",
        last_name="Cuddy",
        email="cuddy@example.com",
        phone_number="555-0300",
        license_number="LIC-002",
    )
    await doctor_handler.update(UpdateDoctorCommand(doctor_id=house.id, is_available=False))

    available = await doctor_handler.search(is_available=True)
    assert [d.last_name for d in available] == ["Cuddy"]

    cardiology = await doctor_handler.search(specialization=Specialization.CARDIOLOGY)
    assert cardiology == []


async def test_set_availability_replaces_previous_set(make_doctor, doctor_handler):
    doctor = await make_doctor()
    await doctor_handler.set_availability(
        SetAvailabilityCommand(
            doctor_id=doctor.id,
            slots=(
                AvailabilitySlotInput("monday", "09:00", "12:00"),
                AvailabilitySlotInput("wednesday", "13:00", "17:00", 20),
            ),
        )
    )
    result = await doctor_handler.set_availability(
        SetAvailabilityCommand(
            doctor_id=doctor.id,
            slots=(AvailabilitySlotInput("friday", "10:00", "14:00"),),
        )
    )
    assert [(s.day_of_week, s.start_time, s.end_time) for s in result.availability_slots] == [
        ("friday", "10:00", "14:00")
    ]

    cleared = await doctor_handler.set_availability(SetAvailabilityCommand(doctor_id=doctor.id))
    assert cleared.availability_slots == []


async def test_availability_keeps_given_order(make_doctor, doctor_handler):
    doctor = await make_doctor()
    days = ("thursday", "monday", "tuesday")
    await doctor_handler.set_availability(
        SetAvailabilityCommand(
            doctor_id=doctor.id,
            slots=tuple(AvailabilitySlotInput(day, "09:00", "10:00") for day in days),
        )
    )
    result = await doctor_handler.get_availability(doctor.id)
    assert tuple(s.day_of_week for s in result.availability_slots) == days
    assert all(s.slot_duration_minutes == 30 for s in result.availability_slots)


async def test_availability_for_unknown_doctor(doctor_handler):
    with pytest.raises(NotFoundError, match="doctor not found"):
        await doctor_handler.get_availability("missing")
