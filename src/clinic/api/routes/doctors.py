"""
Doctor Routes
"""
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Query, status

from clinic.api.dependencies import AppointmentServiceDep, DoctorServiceDep, PrescriptionServiceDep
from clinic.api.schemas import (
    AppointmentListResponse,
    AppointmentResponse,
    AvailableSlotsResponse,
    DoctorAvailabilityResponse,
    DoctorListResponse,
    DoctorResponse,
    PrescriptionListResponse,
    PrescriptionResponse,
    RegisterDoctorRequest,
    SetAvailabilityRequest,
    UpdateDoctorRequest,
)
from clinic.domain.enums import AppointmentStatus, Specialization

router = APIRouter(prefix="/doctors", tags=["Doctors"])


@router.post(
    "",
    response_model=DoctorResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register Doctor",
)
async def register_doctor(body: RegisterDoctorRequest, service: DoctorServiceDep) -> DoctorResponse:
    return DoctorResponse.from_entity(await service.register_doctor(body.to_command()))


@router.get("", response_model=DoctorListResponse, summary="Search Doctors")
async def search_doctors(
    service: DoctorServiceDep,
    name: str = "",
    specialization: Specialization = Specialization.UNSPECIFIED,
    is_available: Optional[bool] = None,
) -> DoctorListResponse:
    doctors = await service.search_doctors(
        name=name,
        specialization=specialization,
        is_available=is_available,
    )
    return DoctorListResponse(doctors=[DoctorResponse.from_entity(d) for d in doctors])


@router.get("/{doctor_id}", response_model=DoctorResponse, summary="Get Doctor")
async def get_doctor(doctor_id: str, service: DoctorServiceDep) -> DoctorResponse:
    return DoctorResponse.from_entity(await service.get_doctor(doctor_id))


@router.patch("/{doctor_id}", response_model=DoctorResponse, summary="Update Doctor")
async def update_doctor(
    doctor_id: str,
    body: UpdateDoctorRequest,
    service: DoctorServiceDep,
) -> DoctorResponse:
    return DoctorResponse.from_entity(await service.update_doctor(body.to_command(doctor_id)))


@router.put(
    "/{doctor_id}/availability",
    response_model=DoctorAvailabilityResponse,
    summary="Set Doctor Availability",
    description="Replace every availability window of the doctor",
)
async def set_availability(
    doctor_id: str,
    body: SetAvailabilityRequest,
    service: DoctorServiceDep,
) -> DoctorAvailabilityResponse:
    result = await service.set_availability(body.to_command(doctor_id))
    return DoctorAvailabilityResponse.from_dto(result)


@router.get(
    "/{doctor_id}/availability",
    response_model=DoctorAvailabilityResponse,
    summary="Get Doctor Availability",
)
async def get_availability(doctor_id: str, service: DoctorServiceDep) -> DoctorAvailabilityResponse:
    return DoctorAvailabilityResponse.from_dto(await service.get_availability(doctor_id))


@router.get(
    "/{doctor_id}/slots",
    response_model=AvailableSlotsResponse,
    summary="Get Available Slots",
)
async def get_available_slots(
    doctor_id: str,
    service: AppointmentServiceDep,
    date: str = Query("", description="YYYY-MM-DD"),
) -> AvailableSlotsResponse:
    return AvailableSlotsResponse.from_dto(await service.get_available_slots(doctor_id, date))


@router.get(
    "/{doctor_id}/appointments",
    response_model=AppointmentListResponse,
    summary="Get Doctor Appointments",
)
async def get_doctor_appointments(
    doctor_id: str,
    service: AppointmentServiceDep,
    status_filter: Optional[AppointmentStatus] = Query(None, alias="status"),
    date: str = "",
) -> AppointmentListResponse:
    appointments = await service.get_doctor_appointments(doctor_id, status=status_filter, date=date)
    return AppointmentListResponse(appointments=[AppointmentResponse.from_entity(a) for a in appointments])


@router.get(
    "/{doctor_id}/prescriptions",
    response_model=PrescriptionListResponse,
    summary="Get Doctor Prescriptions",
)
async def get_doctor_prescriptions(
    doctor_id: str,
    service: PrescriptionServiceDep,
    from_date: str = "",
    to_date: str = "",
) -> PrescriptionListResponse:
    prescriptions = await service.get_doctor_prescriptions(doctor_id, from_date, to_date)
    return PrescriptionListResponse(prescriptions=[PrescriptionResponse.from_entity(p) for p in prescriptions])
