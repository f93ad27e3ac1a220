"""
Clinic facade: the single entry point the presentation layer talks to.

Every method takes the acting ``Identity`` explicitly. Role checks happen in
the ``RoleGate`` the underlying services share, and listings come back
already scoped to the actor by directory matching.
"""

from typing import List, Optional
from zoneinfo import ZoneInfo

from ..core.exceptions import ForbiddenError, UnauthenticatedError
from ..core.logging_config import get_logger
from ..db.seed import seed_records
from ..domain.entities import ROLES, Appointment, Identity, MedicalRecord, Prescription
from ..repositories import (
    AppointmentRepository,
    MedicalRecordRepository,
    PrescriptionRepository,
    PrescriptionUnitOfWork,
    new_store_lock,
)
from ..schemas.dtos import (
    AppointmentCreateRequest,
    DashboardSummary,
    PrescriptionCreateRequest,
)
from .appointment_service import AppointmentService
from .prescription_service import PrescriptionService, today_factory
from .record_service import RecordService
from .role_gate import RoleGate
from .session_service import SessionService

logger = get_logger(__name__)

DASHBOARD_PATHS = {role: f"/{role}" for role in ROLES}


class ClinicService:
    """Facade over the appointment, prescription and record services."""

    def __init__(
        self,
        appointments: AppointmentService,
        prescriptions: PrescriptionService,
        records: RecordService,
        gate: RoleGate,
        sessions: Optional[SessionService] = None,
    ) -> None:
        self.appointments = appointments
        self.prescriptions = prescriptions
        self.records = records
        self.gate = gate
        self.sessions = sessions or SessionService()

    # Session
    #
    # ``login``/``logout``/``current_identity`` drive the single in-process
    # session. Multi-user adapters (the Flask app keeps one identity per
    # browser cookie) call ``identify`` and hold the identity themselves.

    def identify(self, role: str, name: str = "") -> Identity:
        """Validated identity for a role selection; the session is not touched."""
        return self.sessions.build_identity(role, name)

    def login(self, role: str, name: str = "") -> Identity:
        return self.sessions.login(role, name)

    def logout(self) -> None:
        self.sessions.logout()

    @property
    def current_identity(self) -> Identity:
        return self.sessions.current

    # Appointments

    def book_appointment(
        self, actor: Identity, request: AppointmentCreateRequest
    ) -> Appointment:
        return self.appointments.book_appointment(actor, request)

    def list_appointments(self, actor: Identity) -> List[Appointment]:
        return self.appointments.list_appointments(actor)

    def get_appointment(self, actor: Identity, appointment_id: str) -> Appointment:
        return self.appointments.get_appointment(actor, appointment_id)

    def set_appointment_status(
        self, actor: Identity, appointment_id: str, status: str
    ) -> Appointment:
        return self.appointments.set_appointment_status(actor, appointment_id, status)

    # Prescriptions

    def create_prescription(
        self, actor: Identity, request: PrescriptionCreateRequest
    ) -> Prescription:
        return self.prescriptions.create_prescription(actor, request)

    def prescription_draft(
        self, actor: Identity, appointment_id: str
    ) -> PrescriptionCreateRequest:
        return self.prescriptions.prescription_draft(actor, appointment_id)

    def list_prescriptions(self, actor: Identity) -> List[Prescription]:
        return self.prescriptions.list_prescriptions(actor)

    def set_prescription_status(
        self, actor: Identity, prescription_id: str, status: str
    ) -> Prescription:
        return self.prescriptions.set_prescription_status(
            actor, prescription_id, status
        )

    # Records

    def list_records(self, actor: Identity) -> List[MedicalRecord]:
        return self.records.list_records(actor)

    # Dashboards

    def dashboard_summary(self, actor: Identity) -> DashboardSummary:
        """Admin overview counters."""
        self.gate.check(actor, "dashboard_summary")
        return DashboardSummary(
            total_appointments=self.appointments.count(),
            total_prescriptions=self.prescriptions.count(),
            current_role=actor.role if actor.is_authenticated else "None",
        )

    @staticmethod
    def dashboard_path(role: str) -> str:
        """Where an actor with ``role`` lands after login."""
        return DASHBOARD_PATHS.get(role, "/")

    def authorize_dashboard(self, actor: Identity, role: str) -> None:
        """Refuse navigation to another role's dashboard.

        Raises:
            UnauthenticatedError: nobody is logged in (send them to login)
            ForbiddenError: logged in with a different role
        """
        if not actor.is_authenticated:
            raise UnauthenticatedError("Login required")
        if actor.role != role:
            logger.warning(
                "Dashboard access denied",
                extra={"context": {"role": actor.role, "dashboard": role}},
            )
            raise ForbiddenError(
                "Access denied for this role.",
                details={"dashboard": role, "role": actor.role},
            )


def build_clinic_service(
    demo_doctor_name: str = "Dr. Mehta",
    seed_data: bool = True,
    timezone: Optional[ZoneInfo] = None,
) -> ClinicService:
    """Wire repositories, gate and services around one shared store lock."""
    lock = new_store_lock()
    appointment_repo = AppointmentRepository(lock)
    prescription_repo = PrescriptionRepository(lock)
    record_repo = MedicalRecordRepository(lock)

    if seed_data:
        seed_records(record_repo)

    gate = RoleGate()
    appointments = AppointmentService(appointment_repo, gate, demo_doctor_name)
    prescriptions = PrescriptionService(
        prescription_repo,
        record_repo,
        PrescriptionUnitOfWork(prescription_repo, record_repo, lock),
        gate,
        appointments=appointments,
        today=today_factory(timezone),
    )
    records = RecordService(record_repo, gate)

    return ClinicService(appointments, prescriptions, records, gate)
