"""
Appointment Routes
Booking and lifecycle transitions
"""
from __future__ import annotations

from fastapi import APIRouter, status

from clinic.api.dependencies import AppointmentServiceDep, PrescriptionServiceDep
from clinic.api.schemas import (
    AppointmentResponse,
    BookAppointmentRequest,
    CancelAppointmentRequest,
    CompleteAppointmentRequest,
    PrescriptionResponse,
    RescheduleAppointmentRequest,
)

router = APIRouter(prefix="/appointments", tags=["Appointments"])


@router.post(
    "",
    response_model=AppointmentResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Book Appointment",
)
async def book_appointment(
    body: BookAppointmentRequest,
    service: AppointmentServiceDep,
) -> AppointmentResponse:
    return AppointmentResponse.from_entity(await service.book_appointment(body.to_command()))


@router.get("/{appointment_id}", response_model=AppointmentResponse, summary="Get Appointment")
async def get_appointment(appointment_id: str, service: AppointmentServiceDep) -> AppointmentResponse:
    return AppointmentResponse.from_entity(await service.get_appointment(appointment_id))


@router.post("/{appointment_id}/cancel", response_model=AppointmentResponse, summary="Cancel Appointment")
async def cancel_appointment(
    appointment_id: str,
    body: CancelAppointmentRequest,
    service: AppointmentServiceDep,
) -> AppointmentResponse:
    appointment = await service.cancel_appointment(body.to_command(appointment_id))
    return AppointmentResponse.from_entity(appointment)


@router.post(
    "/{appointment_id}/reschedule",
    response_model=AppointmentResponse,
    summary="Reschedule Appointment",
)
async def reschedule_appointment(
    appointment_id: str,
    body: RescheduleAppointmentRequest,
    service: AppointmentServiceDep,
) -> AppointmentResponse:
    appointment = await service.reschedule_appointment(body.to_command(appointment_id))
    return AppointmentResponse.from_entity(appointment)


@router.post(
    "/{appointment_id}/complete",
    response_model=AppointmentResponse,
    summary="Complete Appointment",
)
async def complete_appointment(
    appointment_id: str,
    body: CompleteAppointmentRequest,
    service: AppointmentServiceDep,
) -> AppointmentResponse:
    appointment = await service.complete_appointment(body.to_command(appointment_id))
    return AppointmentResponse.from_entity(appointment)


@router.get(
    "/{appointment_id}/prescription",
    response_model=PrescriptionResponse,
    summary="Get Prescription For Appointment",
)
async def get_appointment_prescription(
    appointment_id: str,
    service: PrescriptionServiceDep,
) -> PrescriptionResponse:
    return PrescriptionResponse.from_entity(await service.get_prescription_by_appointment(appointment_id))
