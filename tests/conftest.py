from typing import Awaitable, Callable

import pytest
from fastapi.testclient import TestClient

import clinic.infrastructure.persistence.models  # noqa: F401
from clinic.application.commands import RegisterDoctorCommand, RegisterPatientCommand
from clinic.application.handlers import (
    AppointmentHandler,
    DoctorHandler,
    PatientHandler,
    PrescriptionHandler,
)
from clinic.domain.entities import Doctor, Patient
from clinic.domain.enums import Specialization
from clinic.infrastructure.persistence.repositories import (
    AppointmentRepository,
    DoctorRepository,
    MedicalRecordRepository,
    PatientRepository,
    PrescriptionRepository,
)
from clinic.main import create_app
from shared.config import Settings
from shared.infrastructure.database import DatabaseSessionFactory


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'clinic.db'}",
        ENVIRONMENT="test",
        LOG_FORMAT="console",
        LOG_LEVEL="WARNING",
        AUTO_MIGRATE=True,
    )


@pytest.fixture
async def db(settings):
    factory = DatabaseSessionFactory(settings.DATABASE_URL)
    await factory.create_all()
    yield factory
    await factory.dispose()


@pytest.fixture
async def session(db):
    async with db.create_session() as s:
        yield s


@pytest.fixture
def client(settings):
    with TestClient(create_app(settings)) as c:
        yield c


# ─── handlers over one shared session ───────────────────────────────────────

@pytest.fixture
def patient_handler(session) -> PatientHandler:
    return PatientHandler(
        patients=PatientRepository(session),
        records=MedicalRecordRepository(session),
        doctors=DoctorRepository(session),
    )


@pytest.fixture
def doctor_handler(session) -> DoctorHandler:
    return DoctorHandler(DoctorRepository(session))


@pytest.fixture
def appointment_handler(session) -> AppointmentHandler:
    return AppointmentHandler(
        appointments=AppointmentRepository(session),
        patients=PatientRepository(session),
        doctors=DoctorRepository(session),
    )


@pytest.fixture
def prescription_handler(session) -> PrescriptionHandler:
    return PrescriptionHandler(
        prescriptions=PrescriptionRepository(session),
        patients=PatientRepository(session),
        doctors=DoctorRepository(session),
    )


@pytest.fixture
def make_patient(patient_handler) -> Callable[..., Awaitable[Patient]]:
    async def _make(first_name="Jane", last_name="Doe", email="jane@example.com", phone_number="555-0100"):
        return await patient_handler.register(
            RegisterPatientCommand(
                first_name=first_name,
                last_name=last_name,
                email=email,
                phone_number=phone_number,
                date_of_birth="1990-04-12",
            )
        )
    return _make


@pytest.fixture
def make_doctor(doctor_handler) -> Callable[..., Awaitable[Doctor]]:
    async def _make(
        first_name="Gregory",
        last_name="House",
        email="house@example.com",
        phone_number="555-0200",
        license_number="LIC-001",
    ):
        return await doctor_handler.register(
            RegisterDoctorCommand(
                first_name=first_name,
                last_name=last_name,
                email=email,
                phone_number=phone_number,
                license_number=license_number,
                specialization=Specialization.GENERAL_PRACTICE,
                qualifications=("MD",),
                languages=("English",),
                consultation_fee=5000,
            )
        )
    return _make


# ─── API payload helpers ────────────────────────────────────────────────────

@pytest.fixture
def api_patient(client: TestClient) -> Callable[..., dict]:
    return lambda **overrides: _register_patient(client, **overrides)


@pytest.fixture
def api_doctor(client: TestClient) -> Callable[..., dict]:
    return lambda **overrides: _register_doctor(client, **overrides)


def _register_patient(client: TestClient, **overrides) -> dict:
    body = {
        "first_name": "Jane",
        "last_name": "Doe",
        "email": "jane@example.com",
        "phone_number": "555-0100",
        "date_of_birth": "1990-04-12",
        "gender": "female",
        "blood_group": "o_positive",
    }
    body.update(overrides)
    r = client.post("/api/v1/patients", json=body)
    assert r.status_code == 201, r.text
    return r.json()


def _register_doctor(client: TestClient, **overrides) -> dict:
    body = {
        "first_name": "Gregory",
        "last_name": "House",
        "email": "house@example.com",
        "phone_number": "555-0200",
        "license_number": "LIC-001",
        "specialization": "general_practice",
        "qualifications": ["MD"],
        "languages": ["English"],
        "consultation_fee": 5000,
    }
    body.update(overrides)
    r = client.post("/api/v1/doctors", json=body)
    assert r.status_code == 201, r.text
    return r.json()
