from fastapi.testclient import TestClient

DAY = "2030-01-15"


def _book(client: TestClient, patient: dict, doctor: dict, time: str = "10:00"):
    return client.post(
        "/api/v1/appointments",
        json={
            "patient_id": patient["id"],
            "doctor_id": doctor["id"],
            "appointment_date": DAY,
            "appointment_time": time,
            "consultation_type": "video",
        },
    )


def test_book_conflict_cancel_rebook(client: TestClient, api_patient, api_doctor):
    patient, doctor = api_patient(), api_doctor()

    r = _book(client, patient, doctor)
    assert r.status_code == 201, r.text
    first = r.json()
    assert first["status"] == "scheduled"
    assert first["doctor_name"] == "Gregory House"
    assert first["consultation_type"] == "video"

    r = _book(client, patient, doctor)
    assert r.status_code == 409
    assert r.json()["message"] == "time slot is already booked"

    r = client.post(f"/api/v1/appointments/{first['id']}/cancel", json={"cancellation_reason": "travel"})
    assert r.status_code == 200
    assert r.json()["status"] == "cancelled"
    assert r.json()["cancelled_at"].endswith("Z")

    r = client.post(f"/api/v1/appointments/{first['id']}/cancel", json={})
    assert r.status_code == 409
    assert r.json()["code"] == "invalid_state_transition"
    assert r.json()["message"] == "appointment is already cancelled"

    assert _book(client, patient, doctor).status_code == 201


def test_unavailable_doctor(client: TestClient, api_patient, api_doctor):
    patient, doctor = api_patient(), api_doctor()
    client.patch(f"/api/v1/doctors/{doctor['id']}", json={"is_available": False})

    r = _book(client, patient, doctor)
    assert r.status_code == 422
    assert r.json()["code"] == "business_rule_violation"


def test_bad_time_format(client: TestClient, api_patient, api_doctor):
    patient, doctor = api_patient(), api_doctor()
    r = _book(client, patient, doctor, time="9am")
    assert r.status_code == 400
    assert r.json()["message"] == "appointment_time must be in HH:MM format"


def test_reschedule_and_complete(client: TestClient, api_patient, api_doctor):
    patient, doctor = api_patient(), api_doctor()
    appt = _book(client, patient, doctor).json()

    r = client.post(
        f"/api/v1/appointments/{appt['id']}/reschedule",
        json={"new_appointment_date": DAY, "new_appointment_time": "15:00", "reason": "clinic closed"},
    )
    assert r.status_code == 200
    assert r.json()["status"] == "rescheduled"
    assert r.json()["notes"].endswith("Rescheduled: clinic closed")

    r = client.post(f"/api/v1/appointments/{appt['id']}/complete", json={"diagnosis": "tension headache"})
    assert r.status_code == 200
    assert r.json()["status"] == "completed"

    assert client.get(f"/api/v1/doctors/{doctor['id']}").json()["total_consultations"] == 1

    r = client.post(
        f"/api/v1/appointments/{appt['id']}/reschedule",
        json={"new_appointment_date": DAY, "new_appointment_time": "16:00"},
    )
    assert r.status_code == 409
    assert r.json()["message"] == "cannot reschedule a completed appointment"


def test_slots_and_listings(client: TestClient, api_patient, api_doctor):
    patient, doctor = api_patient(), api_doctor()
    _book(client, patient, doctor, time="09:00")
    _book(client, patient, doctor, time="13:30")

    r = client.get(f"/api/v1/doctors/{doctor['id']}/slots", params={"date": DAY})
    assert r.status_code == 200
    slots = r.json()["slots"]
    assert len(slots) == 16
    assert [s["start_time"] for s in slots if not s["is_available"]] == ["09:00", "13:30"]

    r = client.get(f"/api/v1/doctors/{doctor['id']}/slots")
    assert r.status_code == 400

    r = client.get(f"/api/v1/patients/{patient['id']}/appointments", params={"status": "scheduled"})
    assert [a["appointment_time"] for a in r.json()["appointments"]] == ["13:30", "09:00"]

    r = client.get(f"/api/v1/doctors/{doctor['id']}/appointments", params={"date": DAY})
    assert len(r.json()["appointments"]) == 2

    r = client.get(f"/api/v1/patients/{patient['id']}/appointments", params={"status": "lost"})
    assert r.status_code == 400
