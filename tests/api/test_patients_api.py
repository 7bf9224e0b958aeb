from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from clinic.main import create_app


def test_health(client: TestClient):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"

    r = client.get("/_health/db")
    assert r.status_code == 200
    assert r.json()["ok"] is True


def test_register_and_get_patient(client: TestClient, api_patient):
    created = api_patient(address={"street": "1 Main St", "city": "Springfield"})
    assert created["gender"] == "female"
    assert created["address"]["city"] == "Springfield"
    assert created["created_at"].endswith("Z")

    r = client.get(f"/api/v1/patients/{created['id']}")
    assert r.status_code == 200
    assert r.json()["email"] == "jane@example.com"


def test_not_found_error_contract(client: TestClient):
    r = client.get("/api/v1/patients/missing", headers={"X-Request-ID": "req-123"})
    assert r.status_code == 404
    body = r.json()
    assert body["code"] == "not_found"
    assert body["message"] == "patient not found"
    assert body["correlation_id"] == "req-123"
    assert r.headers["X-Request-ID"] == "req-123"


def test_duplicate_email_is_conflict(client: TestClient, api_patient):
    api_patient()
    r = client.post(
        "/api/v1/patients",
        json={"first_name": "J", "last_name": "D", "email": "jane@example.com", "phone_number": "555-9"},
    )
    assert r.status_code == 409
    assert r.json() == {
        "code": "conflict",
        "message": "email already registered",
        "correlation_id": r.headers["X-Request-ID"],
    }


def test_missing_fields_is_validation_error(client: TestClient):
    r = client.post("/api/v1/patients", json={"email": "a@example.com", "phone_number": "1"})
    assert r.status_code == 400
    assert r.json()["message"] == "first_name and last_name are required"


def test_unknown_body_field_is_rejected(client: TestClient):
    r = client.post("/api/v1/patients", json={"first_name": "A", "nickname": "x"})
    assert r.status_code == 400
    body = r.json()
    assert body["code"] == "validation_error"
    assert body["details"]["errors"]


def test_update_and_search(client: TestClient, api_patient):
    jane = api_patient()
    api_patient(first_name="John", last_name="Smith", email="john@example.com", phone_number="555-0101")

    r = client.patch(f"/api/v1/patients/{jane['id']}", json={"blood_group": "a_negative"})
    assert r.status_code == 200
    assert r.json()["blood_group"] == "a_negative"
    assert r.json()["phone_number"] == "555-0100"

    r = client.get("/api/v1/patients", params={"name": "Smith"})
    assert r.status_code == 200
    assert [p["first_name"] for p in r.json()["patients"]] == ["John"]


def test_medical_records_and_history(client: TestClient, api_patient, api_doctor):
    patient = api_patient()
    doctor = api_doctor()

    r = client.post(
        f"/api/v1/patients/{patient['id']}/medical-records",
        json={
            "doctor_id": doctor["id"],
            "visit_date": "2030-02-01",
            "diagnosis": "bronchitis",
            "vital_signs": {"temperature": 38.4, "heart_rate": 90},
            "notes": "chest x-ray ordered",
        },
    )
    assert r.status_code == 201, r.text
    assert r.json()["vital_signs"]["temperature"] == 38.4

    r = client.get(f"/api/v1/patients/{patient['id']}/medical-history")
    assert r.status_code == 200
    records = r.json()["records"]
    assert len(records) == 1
    assert records[0]["visit_date"] == "2030-02-01"
    assert records[0]["diagnosis"] == "bronchitis"

    r = client.get(
        f"/api/v1/patients/{patient['id']}/medical-history",
        params={"from_date": "2030-03-01"},
    )
    assert r.json()["records"] == []


def test_medical_history_bad_date(client: TestClient, api_patient):
    patient = api_patient()
    r = client.get(f"/api/v1/patients/{patient['id']}/medical-history", params={"from_date": "March"})
    assert r.status_code == 400
    assert r.json()["code"] == "validation_error"


def test_failed_commit_is_reported_and_rolled_back(settings, monkeypatch):
    async def failing_commit(self):
        raise OperationalError("COMMIT", {}, Exception("disk I/O error"))

    with TestClient(create_app(settings), raise_server_exceptions=False) as c:
        monkeypatch.setattr(AsyncSession, "commit", failing_commit)
        body = {
            "first_name": "Jane",
            "last_name": "Doe",
            "email": "jane@example.com",
            "phone_number": "555-0100",
        }
        r = c.post("/api/v1/patients", json=body)
        assert r.status_code == 500
        assert r.json()["code"] == "internal_error"

        monkeypatch.undo()
        assert c.get("/api/v1/patients").json()["patients"] == []
