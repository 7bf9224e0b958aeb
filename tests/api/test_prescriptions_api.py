from datetime import datetime

from fastapi.testclient import TestClient

from shared.utils.clock import TIMESTAMP_FORMAT


def _parse(ts: str) -> datetime:
    return datetime.strptime(ts, TIMESTAMP_FORMAT)


def test_create_and_read_prescription(client: TestClient, api_patient, api_doctor):
    patient, doctor = api_patient(), api_doctor()
    appt = client.post(
        "/api/v1/appointments",
        json={
            "patient_id": patient["id"],
            "doctor_id": doctor["id"],
            "appointment_date": "2030-01-15",
            "appointment_time": "10:00",
        },
    ).json()

    r = client.post(
        "/api/v1/prescriptions",
        json={
            "appointment_id": appt["id"],
            "patient_id": patient["id"],
            "doctor_id": doctor["id"],
            "medications": [
                {"medication_name": "Ibuprofen", "dosage": "400mg", "frequency": "as needed", "quantity": 20}
            ],
            "validity_days": 0,
        },
    )
    assert r.status_code == 201, r.text
    rx = r.json()
    assert rx["is_active"] is True
    assert (_parse(rx["valid_until"]) - _parse(rx["prescription_date"])).days == 30
    assert rx["medications"][0]["medication_name"] == "Ibuprofen"

    assert client.get(f"/api/v1/prescriptions/{rx['id']}").json()["id"] == rx["id"]
    assert client.get(f"/api/v1/appointments/{appt['id']}/prescription").json()["id"] == rx["id"]

    listed = client.get(f"/api/v1/patients/{patient['id']}/prescriptions").json()["prescriptions"]
    assert [p["id"] for p in listed] == [rx["id"]]

    listed = client.get(f"/api/v1/doctors/{doctor['id']}/prescriptions", params={"to_date": "2000-01-01"})
    assert listed.json()["prescriptions"] == []


def test_prescription_requires_medication(client: TestClient, api_patient, api_doctor):
    patient, doctor = api_patient(), api_doctor()
    r = client.post(
        "/api/v1/prescriptions",
        json={"patient_id": patient["id"], "doctor_id": doctor["id"], "medications": []},
    )
    assert r.status_code == 400
    assert r.json()["message"] == "at least one medication is required"


def test_missing_prescription(client: TestClient):
    r = client.get("/api/v1/prescriptions/missing")
    assert r.status_code == 404
    assert r.json()["code"] == "not_found"
