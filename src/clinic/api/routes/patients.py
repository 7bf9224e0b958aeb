"""
Patient Routes
"""
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Query, status

from clinic.api.dependencies import AppointmentServiceDep, PatientServiceDep, PrescriptionServiceDep
from clinic.api.schemas import (
    AddMedicalRecordRequest,
    AppointmentListResponse,
    AppointmentResponse,
    MedicalHistoryResponse,
    MedicalRecordResponse,
    PatientListResponse,
    PatientResponse,
    PrescriptionListResponse,
    PrescriptionResponse,
    RegisterPatientRequest,
    UpdatePatientRequest,
)
from clinic.domain.enums import AppointmentStatus

router = APIRouter(prefix="/patients", tags=["Patients"])


@router.post(
    "",
    response_model=PatientResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register Patient",
)
async def register_patient(body: RegisterPatientRequest, service: PatientServiceDep) -> PatientResponse:
    patient = await service.register_patient(body.to_command())
    return PatientResponse.from_entity(patient)


@router.get("", response_model=PatientListResponse, summary="Search Patients")
async def search_patients(
    service: PatientServiceDep,
    name: str = Query("", description="Substring of first or last name"),
    email: str = "",
    phone_number: str = "",
    patient_id: str = "",
) -> PatientListResponse:
    patients = await service.search_patients(
        name=name,
        email=email,
        phone_number=phone_number,
        patient_id=patient_id,
    )
    return PatientListResponse(patients=[PatientResponse.from_entity(p) for p in patients])


@router.get("/{patient_id}", response_model=PatientResponse, summary="Get Patient")
async def get_patient(patient_id: str, service: PatientServiceDep) -> PatientResponse:
    return PatientResponse.from_entity(await service.get_patient(patient_id))


@router.patch("/{patient_id}", response_model=PatientResponse, summary="Update Patient")
async def update_patient(
    patient_id: str,
    body: UpdatePatientRequest,
    service: PatientServiceDep,
) -> PatientResponse:
    patient = await service.update_patient(body.to_command(patient_id))
    return PatientResponse.from_entity(patient)


@router.get(
    "/{patient_id}/medical-history",
    response_model=MedicalHistoryResponse,
    summary="Get Medical History",
)
async def get_medical_history(
    patient_id: str,
    service: PatientServiceDep,
    from_date: str = Query("", description="YYYY-MM-DD, inclusive"),
    to_date: str = Query("", description="YYYY-MM-DD, inclusive"),
) -> MedicalHistoryResponse:
    history = await service.get_medical_history(patient_id, from_date, to_date)
    return MedicalHistoryResponse.from_dto(history)


@router.post(
    "/{patient_id}/medical-records",
    response_model=MedicalRecordResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add Medical Record",
)
async def add_medical_record(
    patient_id: str,
    body: AddMedicalRecordRequest,
    service: PatientServiceDep,
) -> MedicalRecordResponse:
    record = await service.add_medical_record(body.to_command(patient_id))
    return MedicalRecordResponse.from_entity(record)


@router.get(
    "/{patient_id}/appointments",
    response_model=AppointmentListResponse,
    summary="Get Patient Appointments",
)
async def get_patient_appointments(
    patient_id: str,
    service: AppointmentServiceDep,
    status_filter: Optional[AppointmentStatus] = Query(None, alias="status"),
    from_date: str = "",
    to_date: str = "",
) -> AppointmentListResponse:
    appointments = await service.get_patient_appointments(
        patient_id, status=status_filter, from_date=from_date, to_date=to_date
    )
    return AppointmentListResponse(appointments=[AppointmentResponse.from_entity(a) for a in appointments])


@router.get(
    "/{patient_id}/prescriptions",
    response_model=PrescriptionListResponse,
    summary="Get Patient Prescriptions",
)
async def get_patient_prescriptions(
    patient_id: str,
    service: PrescriptionServiceDep,
    from_date: str = "",
    to_date: str = "",
) -> PrescriptionListResponse:
    prescriptions = await service.get_patient_prescriptions(patient_id, from_date, to_date)
    return PrescriptionListResponse(prescriptions=[PrescriptionResponse.from_entity(p) for p in prescriptions])
