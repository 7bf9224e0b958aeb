"""
Clinic ORM Models
Importing this package registers every table on the shared declarative base
"""
from clinic.infrastructure.persistence.models.appointment_model import AppointmentModel
from clinic.infrastructure.persistence.models.doctor_model import DoctorAvailabilityModel, DoctorModel
from clinic.infrastructure.persistence.models.medical_record_model import MedicalRecordModel
from clinic.infrastructure.persistence.models.patient_model import PatientModel
from clinic.infrastructure.persistence.models.prescription_model import PrescriptionModel

__all__ = [
    "AppointmentModel",
    "DoctorAvailabilityModel",
    "DoctorModel",
    "MedicalRecordModel",
    "PatientModel",
    "PrescriptionModel",
]
