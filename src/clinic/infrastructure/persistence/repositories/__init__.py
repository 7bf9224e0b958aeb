"""
Clinic Repositories
SQLAlchemy implementations of the domain repository protocols
"""
from clinic.infrastructure.persistence.repositories.appointment_repository import AppointmentRepository
from clinic.infrastructure.persistence.repositories.doctor_repository import DoctorRepository
from clinic.infrastructure.persistence.repositories.medical_record_repository import MedicalRecordRepository
from clinic.infrastructure.persistence.repositories.patient_repository import PatientRepository
from clinic.infrastructure.persistence.repositories.prescription_repository import PrescriptionRepository

__all__ = [
    "AppointmentRepository",
    "DoctorRepository",
    "MedicalRecordRepository",
    "PatientRepository",
    "PrescriptionRepository",
]
