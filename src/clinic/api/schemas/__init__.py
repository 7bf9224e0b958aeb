"""
Clinic API Schemas
Pydantic request/response models
"""
from clinic.api.schemas.appointment_schemas import (
    AppointmentListResponse,
    AppointmentResponse,
    AvailableSlotsResponse,
    BookAppointmentRequest,
    CancelAppointmentRequest,
    CompleteAppointmentRequest,
    RescheduleAppointmentRequest,
)
from clinic.api.schemas.doctor_schemas import (
    DoctorAvailabilityResponse,
    DoctorListResponse,
    DoctorResponse,
    RegisterDoctorRequest,
    SetAvailabilityRequest,
    UpdateDoctorRequest,
)
from clinic.api.schemas.patient_schemas import (
    AddMedicalRecordRequest,
    MedicalHistoryResponse,
    MedicalRecordResponse,
    PatientListResponse,
    PatientResponse,
    RegisterPatientRequest,
    UpdatePatientRequest,
)
from clinic.api.schemas.prescription_schemas import (
    CreatePrescriptionRequest,
    PrescriptionListResponse,
    PrescriptionResponse,
)

__all__ = [
    "AddMedicalRecordRequest",
    "AppointmentListResponse",
    "AppointmentResponse",
    "AvailableSlotsResponse",
    "BookAppointmentRequest",
    "CancelAppointmentRequest",
    "CompleteAppointmentRequest",
    "CreatePrescriptionRequest",
    "DoctorAvailabilityResponse",
    "DoctorListResponse",
    "DoctorResponse",
    "MedicalHistoryResponse",
    "MedicalRecordResponse",
    "PatientListResponse",
    "PatientResponse",
    "PrescriptionListResponse",
    "PrescriptionResponse",
    "RegisterDoctorRequest",
    "RegisterPatientRequest",
    "RescheduleAppointmentRequest",
    "SetAvailabilityRequest",
    "UpdateDoctorRequest",
    "UpdatePatientRequest",
]
