from datetime import datetime

import pytest

from clinic.application.validation import check_date, check_time, date_range, require
from shared.exceptions import ValidationError


def test_require_rejects_any_empty_value():
    require("ok", "a", "b")
    with pytest.raises(ValidationError) as exc:
        require("patient_id and doctor_id are required", "p1", "")
    assert exc.value.message == "patient_id and doctor_id are required"


@pytest.mark.parametrize("value", ["2030-1-5", "2030/01/05", "05-01-2030", "2030-02-30", ""])
def test_check_date_rejects_non_canonical(value):
    with pytest.raises(ValidationError):
        check_date(value, "appointment_date")


@pytest.mark.parametrize("value", ["9:00", "24:00", "10:60", "10:00:00", "noon"])
def test_check_time_rejects_non_canonical(value):
    with pytest.raises(ValidationError):
        check_time(value, "appointment_time")


def test_canonical_values_pass_through():
    assert check_date("2030-01-05", "date") == "2030-01-05"
    assert check_time("09:30", "time") == "09:30"


def test_date_range_includes_whole_last_day():
    start, end = date_range("2030-01-01", "2030-01-31")
    assert start == datetime(2030, 1, 1)
    assert end == datetime(2030, 2, 1)


def test_date_range_open_bounds():
    assert date_range("", "") == (None, None)
