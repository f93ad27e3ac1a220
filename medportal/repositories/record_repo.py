"""
Medical record repository: append-only, no update or delete path.
"""

from ..domain.entities import MedicalRecord
from ..domain.interfaces import IMedicalRecordRepository
from .base import InMemoryLedger


class MedicalRecordRepository(InMemoryLedger[MedicalRecord], IMedicalRecordRepository):
    """Process-lifetime medical record store."""
