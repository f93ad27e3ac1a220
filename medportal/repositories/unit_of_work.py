"""
Atomic cascade writes across the prescription ledger and the record store.
"""

import threading

from ..core.logging_config import get_logger
from ..domain.entities import MedicalRecord, Prescription
from ..domain.interfaces import IMedicalRecordRepository, IPrescriptionRepository

logger = get_logger(__name__)


class PrescriptionUnitOfWork:
    """Publishes a prescription and its derived medical record as one step.

    Both repositories must share ``lock`` with their readers. The lock is held
    for the whole write, and the prescription is withdrawn again if the record
    cannot be stored, so readers see both entities or neither.
    """

    def __init__(
        self,
        prescriptions: IPrescriptionRepository,
        records: IMedicalRecordRepository,
        lock: threading.RLock,
    ) -> None:
        self.prescriptions = prescriptions
        self.records = records
        self.lock = lock

    def commit(
        self, prescription: Prescription, record: MedicalRecord
    ) -> Prescription:
        with self.lock:
            created = self.prescriptions.add(prescription)
            try:
                self.records.add(record)
            except Exception:
                self.prescriptions.discard(created.id)
                logger.error(
                    "Prescription cascade rolled back",
                    extra={"context": {"prescription_id": created.id}},
                    exc_info=True,
                )
                raise
            return created
