"""
Clinic Application Services
"""
from clinic.application.services.appointment_service import AppointmentService
from clinic.application.services.doctor_service import DoctorService
from clinic.application.services.patient_service import PatientService
from clinic.application.services.prescription_service import PrescriptionService

__all__ = [
    "AppointmentService",
    "DoctorService",
    "PatientService",
    "PrescriptionService",
]
