"""
Services package - application use-cases on top of the domain layer.
"""

from .appointment_service import AppointmentService
from .clinic_service import ClinicService, build_clinic_service
from .prescription_service import PrescriptionService
from .record_service import RecordService
from .role_gate import OPERATION_ROLES, RoleGate
from .session_service import SessionService

__all__ = [
    "AppointmentService",
    "ClinicService",
    "OPERATION_ROLES",
    "PrescriptionService",
    "RecordService",
    "RoleGate",
    "SessionService",
    "build_clinic_service",
]
