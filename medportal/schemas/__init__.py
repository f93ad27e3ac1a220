from .dtos import (
    AppointmentCreateRequest,
    AppointmentResponse,
    DashboardSummary,
    IdentityResponse,
    LoginRequest,
    MedicalRecordResponse,
    PrescriptionCreateRequest,
    PrescriptionResponse,
    StatusUpdateRequest,
)

__all__ = [
    "AppointmentCreateRequest",
    "AppointmentResponse",
    "DashboardSummary",
    "IdentityResponse",
    "LoginRequest",
    "MedicalRecordResponse",
    "PrescriptionCreateRequest",
    "PrescriptionResponse",
    "StatusUpdateRequest",
]
