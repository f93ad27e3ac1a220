"""
Domain package - Pure business logic layer.

This package contains:
- entities.py: Domain entities and their status vocabularies
- directory.py: Name-based ownership matching
- interfaces.py: Repository contracts
"""

from .entities import Appointment, Identity, MedicalRecord, Prescription
from .interfaces import (
    IAppointmentReader,
    IAppointmentRepository,
    IAppointmentWriter,
    IMedicalRecordReader,
    IMedicalRecordRepository,
    IMedicalRecordWriter,
    IPrescriptionReader,
    IPrescriptionRepository,
    IPrescriptionWriter,
)

__all__ = [
    # Domain entities
    "Identity",
    "Appointment",
    "Prescription",
    "MedicalRecord",
    # Repository interfaces
    "IAppointmentRepository",
    "IPrescriptionRepository",
    "IMedicalRecordRepository",
    # Segregated interfaces
    "IAppointmentReader",
    "IAppointmentWriter",
    "IPrescriptionReader",
    "IPrescriptionWriter",
    "IMedicalRecordReader",
    "IMedicalRecordWriter",
]
