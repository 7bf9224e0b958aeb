from datetime import datetime, timedelta

import pytest

from clinic.domain.entities import Prescription
from clinic.domain.services.prescription_policy import DEFAULT_VALIDITY_DAYS, is_active, valid_until
from clinic.domain.value_objects import Medication

ISSUED = datetime(2030, 3, 1, 12, 0, 0)


@pytest.mark.parametrize("days", [0, -5])
def test_non_positive_validity_uses_default(days):
    assert valid_until(ISSUED, days) == ISSUED + timedelta(days=DEFAULT_VALIDITY_DAYS)


def test_explicit_validity():
    assert valid_until(ISSUED, 7) == datetime(2030, 3, 8, 12, 0, 0)


def test_active_until_and_including_expiry():
    expiry = ISSUED + timedelta(days=1)
    assert is_active(expiry, expiry)
    assert not is_active(expiry, expiry + timedelta(seconds=1))


def test_refresh_validity_only_flips_in_memory():
    rx = Prescription.issue(
        patient_id="p1",
        patient_name="Jane Doe",
        doctor_id="d1",
        doctor_name="Gregory House",
        medications=[Medication(medication_name="Amoxicillin", dosage="500mg")],
        validity_days=10,
        now=ISSUED,
    )
    assert rx.is_active
    assert rx.prescription_date == ISSUED
    assert rx.valid_until == ISSUED + timedelta(days=10)

    rx.refresh_validity(ISSUED + timedelta(days=5))
    assert rx.is_active

    rx.refresh_validity(ISSUED + timedelta(days=11))
    assert rx.is_active is False
