"""
Prescription Routes
"""
from __future__ import annotations

from fastapi import APIRouter, status

from clinic.api.dependencies import PrescriptionServiceDep
from clinic.api.schemas import CreatePrescriptionRequest, PrescriptionResponse

router = APIRouter(prefix="/prescriptions", tags=["Prescriptions"])


@router.post(
    "",
    response_model=PrescriptionResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create Prescription",
)
async def create_prescription(
    body: CreatePrescriptionRequest,
    service: PrescriptionServiceDep,
) -> PrescriptionResponse:
    return PrescriptionResponse.from_entity(await service.create_prescription(body.to_command()))


@router.get("/{prescription_id}", response_model=PrescriptionResponse, summary="Get Prescription")
async def get_prescription(prescription_id: str, service: PrescriptionServiceDep) -> PrescriptionResponse:
    return PrescriptionResponse.from_entity(await service.get_prescription(prescription_id))
