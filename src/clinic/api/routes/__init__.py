"""
Clinic API Routes
"""
from fastapi import APIRouter

from clinic.api.routes.appointments import router as appointments_router
from clinic.api.routes.doctors import router as doctors_router
from clinic.api.routes.patients import router as patients_router
from clinic.api.routes.prescriptions import router as prescriptions_router

router = APIRouter()
router.include_router(patients_router)
router.include_router(doctors_router)
router.include_router(appointments_router)
router.include_router(prescriptions_router)

__all__ = ["router"]
