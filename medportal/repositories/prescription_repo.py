"""
Prescription repository implementation following SOLID principles.
"""

from typing import Optional

from ..domain.entities import Prescription
from ..domain.interfaces import IPrescriptionRepository
from .base import InMemoryLedger


class PrescriptionRepository(InMemoryLedger[Prescription], IPrescriptionRepository):
    """Process-lifetime prescription ledger."""

    def update_status(
        self, prescription_id: str, status: str
    ) -> Optional[Prescription]:
        """Overwrite the status; None when the id is unknown."""
        return self._set_status(prescription_id, status)

    def discard(self, prescription_id: str) -> bool:
        """Remove a prescription whose cascade failed before commit."""
        return self._remove(prescription_id)
