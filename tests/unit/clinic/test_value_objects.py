from clinic.domain.value_objects import Address, Medication, VitalSigns


def test_address_ignores_unknown_keys_and_defaults_missing():
    address = Address.from_dict({"city": "Springfield", "planet": "Earth"})
    assert address == Address(city="Springfield")
    assert set(address.to_dict()) == {"street", "city", "state", "zip_code", "country"}


def test_address_from_empty():
    assert Address.from_dict(None) == Address()


def test_vital_signs_omit_unset_readings():
    vitals = VitalSigns(temperature=37.2, heart_rate=72)
    assert vitals.to_dict() == {"temperature": 37.2, "heart_rate": 72}
    assert VitalSigns.from_dict(vitals.to_dict()) == vitals


def test_medication_defaults():
    med = Medication.from_dict({"medication_name": "Ibuprofen", "legacy_code": "X1"})
    assert med.quantity == 0
    assert med.dosage == ""
    assert Medication.from_dict({}).medication_name == ""
