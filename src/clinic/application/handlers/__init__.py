"""
Clinic Handlers
Business-rule layer between services and repositories
"""
from clinic.application.handlers.appointment_handler import AppointmentHandler
from clinic.application.handlers.doctor_handler import DoctorHandler
from clinic.application.handlers.patient_handler import PatientHandler
from clinic.application.handlers.prescription_handler import PrescriptionHandler

__all__ = [
    "AppointmentHandler",
    "DoctorHandler",
    "PatientHandler",
    "PrescriptionHandler",
]
