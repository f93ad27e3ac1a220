"""
Appointment repository implementation following SOLID principles.
"""

from typing import Optional

from ..domain.entities import Appointment
from ..domain.interfaces import IAppointmentRepository
from .base import InMemoryLedger


class AppointmentRepository(InMemoryLedger[Appointment], IAppointmentRepository):
    """Process-lifetime appointment ledger."""

    def update_status(self, appointment_id: str, status: str) -> Optional[Appointment]:
        """Overwrite the status; None when the id is unknown."""
        return self._set_status(appointment_id, status)
