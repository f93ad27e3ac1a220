from typing import List

from ..domain import directory
from ..domain.entities import ROLE_PATIENT, Identity, MedicalRecord
from ..domain.interfaces import IMedicalRecordReader
from .role_gate import RoleGate


class RecordService:
    """Read-only access to medical records.

    Records are written only by the prescription cascade (and seed data),
    so this service has no create method.
    """

    def __init__(self, record_repo: IMedicalRecordReader, gate: RoleGate) -> None:
        self.record_repo = record_repo
        self.gate = gate

    def list_records(self, actor: Identity) -> List[MedicalRecord]:
        """Patients see their own records; admins and doctors see all."""
        self.gate.check(actor, "list_records")
        records = self.record_repo.list_all()

        if actor.role == ROLE_PATIENT:
            return directory.filter_owned(records, "patient_name", actor.name)
        return records

    def count(self) -> int:
        return self.record_repo.count()
