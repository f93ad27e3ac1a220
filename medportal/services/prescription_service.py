"""
Prescription service following SOLID principles.

Writing a prescription also writes the patient's medical record; both go
through ``PrescriptionUnitOfWork`` so they appear together or not at all.
"""

from datetime import datetime
from typing import Callable, List, Optional
from zoneinfo import ZoneInfo

from ..core.exceptions import NotFoundError
from ..core.logging_config import get_logger
from ..domain import directory
from ..domain.entities import (
    PRESCRIPTION_PENDING,
    PRESCRIPTION_STATUSES,
    ROLE_PATIENT,
    Identity,
    MedicalRecord,
    Prescription,
)
from ..domain.interfaces import IMedicalRecordRepository, IPrescriptionRepository
from ..repositories.unit_of_work import PrescriptionUnitOfWork
from ..schemas.dtos import PrescriptionCreateRequest, StatusUpdateRequest
from .appointment_service import AppointmentService
from .role_gate import RoleGate

logger = get_logger(__name__)


def today_factory(tz: Optional[ZoneInfo] = None) -> Callable[[], str]:
    """Build a callable returning the current ISO date in ``tz``."""

    def today() -> str:
        return datetime.now(tz).date().isoformat()

    return today


class PrescriptionService:
    """Application service for the prescription ledger and its cascade."""

    def __init__(
        self,
        prescription_repo: IPrescriptionRepository,
        record_repo: IMedicalRecordRepository,
        unit_of_work: PrescriptionUnitOfWork,
        gate: RoleGate,
        appointments: Optional[AppointmentService] = None,
        today: Optional[Callable[[], str]] = None,
    ) -> None:
        self.prescription_repo = prescription_repo
        self.record_repo = record_repo
        self.unit_of_work = unit_of_work
        self.gate = gate
        self.appointments = appointments
        self.today = today or today_factory()

    def create_prescription(
        self, actor: Identity, request: PrescriptionCreateRequest
    ) -> Prescription:
        """Write an e-prescription and its derived medical record.

        Business Rules:
        - Only doctors prescribe
        - Patient name, doctor name and medication are required
        - Status always starts as Pending
        - The record summary is the diagnosis, or a placeholder when blank
        """
        self.gate.check(actor, "create_prescription")
        request.validate()

        prescription = Prescription(
            id=self.prescription_repo.new_id(),
            patient_name=request.patient_name,
            doctor_name=request.doctor_name,
            medication=request.medication,
            dosage=request.dosage,
            instructions=request.instructions,
            diagnosis=request.diagnosis,
            lab_report=request.lab_report,
            status=PRESCRIPTION_PENDING,
            appointment_id=request.appointment_id,
        )
        record = MedicalRecord.from_prescription(
            prescription, record_id=self.record_repo.new_id(), date=self.today()
        )

        created = self.unit_of_work.commit(prescription, record)

        logger.info(
            "Prescription created",
            extra={
                "context": {
                    "prescription_id": created.id,
                    "record_id": record.id,
                    "patient_name": created.patient_name,
                    "doctor_name": created.doctor_name,
                }
            },
        )
        return created

    def prescription_draft(
        self, actor: Identity, appointment_id: str
    ) -> PrescriptionCreateRequest:
        """Pre-fill a prescription form from one of the doctor's appointments."""
        self.gate.check(actor, "prescription_draft")
        if self.appointments is None:
            raise NotFoundError(f"Appointment {appointment_id} not found")

        appointment = self.appointments.get_appointment(actor, appointment_id)
        return PrescriptionCreateRequest(
            patient_name=appointment.patient_name,
            doctor_name=appointment.doctor_name,
            medication="",
            appointment_id=appointment.id,
        )

    def list_prescriptions(self, actor: Identity) -> List[Prescription]:
        """Admins and pharmacists see all; patients see their own."""
        self.gate.check(actor, "list_prescriptions")
        prescriptions = self.prescription_repo.list_all()

        if actor.role == ROLE_PATIENT:
            return directory.filter_owned(prescriptions, "patient_name", actor.name)
        return prescriptions

    def set_prescription_status(
        self, actor: Identity, prescription_id: str, status: str
    ) -> Prescription:
        """Overwrite a prescription's status (no transition graph)."""
        self.gate.check(actor, "set_prescription_status")
        StatusUpdateRequest(status=status).validate(PRESCRIPTION_STATUSES)

        updated = self.prescription_repo.update_status(prescription_id, status)
        if updated is None:
            raise NotFoundError(f"Prescription {prescription_id} not found")

        logger.info(
            "Prescription status updated",
            extra={"context": {"prescription_id": prescription_id, "status": status}},
        )
        return updated

    def count(self) -> int:
        return self.prescription_repo.count()
