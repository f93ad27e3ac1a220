from .appointment_repo import AppointmentRepository
from .base import InMemoryLedger, new_store_lock
from .prescription_repo import PrescriptionRepository
from .record_repo import MedicalRecordRepository
from .unit_of_work import PrescriptionUnitOfWork

__all__ = [
    "AppointmentRepository",
    "InMemoryLedger",
    "MedicalRecordRepository",
    "PrescriptionRepository",
    "PrescriptionUnitOfWork",
    "new_store_lock",
]
