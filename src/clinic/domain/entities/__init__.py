from clinic.domain.entities.appointment import Appointment
from clinic.domain.entities.doctor import Doctor, DoctorAvailability
from clinic.domain.entities.medical_record import MedicalRecord
from clinic.domain.entities.patient import Patient
from clinic.domain.entities.prescription import Prescription

__all__ = [
    "Appointment",
    "Doctor",
    "DoctorAvailability",
    "MedicalRecord",
    "Patient",
    "Prescription",
]
