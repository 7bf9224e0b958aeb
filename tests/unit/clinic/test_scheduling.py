from clinic.domain.services.scheduling import generate_slots


def test_workday_has_sixteen_half_hour_slots():
    slots = generate_slots([])
    assert len(slots) == 16
    assert (slots[0].start_time, slots[0].end_time) == ("09:00", "09:30")
    assert (slots[-1].start_time, slots[-1].end_time) == ("16:30", "17:00")
    assert all(s.is_available for s in slots)


def test_booked_start_time_marks_slot_unavailable():
    slots = {s.start_time: s for s in generate_slots(["10:00", "16:30"])}
    assert slots["10:00"].is_available is False
    assert slots["16:30"].is_available is False
    assert slots["10:30"].is_available is True


def test_off_grid_booking_blocks_nothing():
    slots = generate_slots(["10:15", "08:00", "17:00"])
    assert all(s.is_available for s in slots)


def test_custom_window():
    slots = generate_slots([], start_hour=8, end_hour=10, slot_minutes=60)
    assert [s.start_time for s in slots] == ["08:00", "09:00"]
