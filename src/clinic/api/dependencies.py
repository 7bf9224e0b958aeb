"""
Clinic API Dependencies
Per-request session, repositories and services
"""
from __future__ import annotations

from typing import Annotated, AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from clinic.application.handlers import (
    AppointmentHandler,
    DoctorHandler,
    PatientHandler,
    PrescriptionHandler,
)
from clinic.application.services import (
    AppointmentService,
    DoctorService,
    PatientService,
    PrescriptionService,
)
from clinic.infrastructure.persistence.repositories import (
    AppointmentRepository,
    DoctorRepository,
    MedicalRecordRepository,
    PatientRepository,
    PrescriptionRepository,
)
from shared.infrastructure.database import DatabaseSessionFactory


async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency for a request-scoped session.

    Commits after the route returns and before the response is sent,
    so a failed commit becomes an error response. Rolls back if it raises.
    """
    factory: DatabaseSessionFactory = request.app.state.db
    async with factory.transaction() as session:
        yield session


SessionDep = Annotated[AsyncSession, Depends(get_db_session, scope="function")]


def get_patient_service(session: SessionDep) -> PatientService:
    handler = PatientHandler(
        patients=PatientRepository(session),
        records=MedicalRecordRepository(session),
        doctors=DoctorRepository(session),
    )
    return PatientService(handler)


def get_doctor_service(session: SessionDep) -> DoctorService:
    return DoctorService(DoctorHandler(DoctorRepository(session)))


def get_appointment_service(session: SessionDep) -> AppointmentService:
    handler = AppointmentHandler(
        appointments=AppointmentRepository(session),
        patients=PatientRepository(session),
        doctors=DoctorRepository(session),
    )
    return AppointmentService(handler)


def get_prescription_service(session: SessionDep) -> PrescriptionService:
    handler = PrescriptionHandler(
        prescriptions=PrescriptionRepository(session),
        patients=PatientRepository(session),
        doctors=DoctorRepository(session),
    )
    return PrescriptionService(handler)


PatientServiceDep = Annotated[PatientService, Depends(get_patient_service)]
DoctorServiceDep = Annotated[DoctorService, Depends(get_doctor_service)]
AppointmentServiceDep = Annotated[AppointmentService, Depends(get_appointment_service)]
PrescriptionServiceDep = Annotated[PrescriptionService, Depends(get_prescription_service)]
