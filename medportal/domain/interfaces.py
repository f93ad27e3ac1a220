"""
Abstract interfaces for repositories following Interface Segregation Principle.

These interfaces define contracts without implementation details,
enabling dependency injection and easier testing.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from .entities import Appointment, MedicalRecord, Prescription


class IAppointmentReader(ABC):
    """Interface for appointment read operations."""

    @abstractmethod
    def get_by_id(self, appointment_id: str) -> Optional[Appointment]:
        """Get appointment by ID."""
        pass

    @abstractmethod
    def list_all(self) -> List[Appointment]:
        """Get every appointment in booking order."""
        pass

    @abstractmethod
    def count(self) -> int:
        """Number of stored appointments."""
        pass


class IAppointmentWriter(ABC):
    """Interface for appointment write operations."""

    @abstractmethod
    def new_id(self) -> str:
        """Reserve a fresh, never reused id."""
        pass

    @abstractmethod
    def add(self, appointment: Appointment) -> Appointment:
        """Append a new appointment."""
        pass

    @abstractmethod
    def update_status(self, appointment_id: str, status: str) -> Optional[Appointment]:
        """Overwrite the status; None when the id is unknown."""
        pass


class IAppointmentRepository(IAppointmentReader, IAppointmentWriter):
    """Complete appointment repository interface."""

    pass


class IPrescriptionReader(ABC):
    """Interface for prescription read operations."""

    @abstractmethod
    def get_by_id(self, prescription_id: str) -> Optional[Prescription]:
        """Get prescription by ID."""
        pass

    @abstractmethod
    def list_all(self) -> List[Prescription]:
        """Get every prescription in creation order."""
        pass

    @abstractmethod
    def count(self) -> int:
        """Number of stored prescriptions."""
        pass


class IPrescriptionWriter(ABC):
    """Interface for prescription write operations."""

    @abstractmethod
    def new_id(self) -> str:
        """Reserve a fresh, never reused id."""
        pass

    @abstractmethod
    def add(self, prescription: Prescription) -> Prescription:
        """Append a new prescription."""
        pass

    @abstractmethod
    def discard(self, prescription_id: str) -> bool:
        """Remove a prescription that was never committed to readers."""
        pass

    @abstractmethod
    def update_status(
        self, prescription_id: str, status: str
    ) -> Optional[Prescription]:
        """Overwrite the status; None when the id is unknown."""
        pass


class IPrescriptionRepository(IPrescriptionReader, IPrescriptionWriter):
    """Complete prescription repository interface."""

    pass


class IMedicalRecordReader(ABC):
    """Interface for medical record read operations."""

    @abstractmethod
    def list_all(self) -> List[MedicalRecord]:
        """Get every record in insertion order."""
        pass

    @abstractmethod
    def count(self) -> int:
        """Number of stored records."""
        pass


class IMedicalRecordWriter(ABC):
    """Append-only write side; records are never updated or deleted."""

    @abstractmethod
    def new_id(self) -> str:
        """Reserve a fresh, never reused id."""
        pass

    @abstractmethod
    def add(self, record: MedicalRecord) -> MedicalRecord:
        """Append a record."""
        pass


class IMedicalRecordRepository(IMedicalRecordReader, IMedicalRecordWriter):
    """Complete medical record repository interface."""

    pass
