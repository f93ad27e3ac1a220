"""
Appointment service following SOLID principles.
"""

from typing import List

from ..core.exceptions import NotFoundError
from ..core.logging_config import get_logger
from ..domain import directory
from ..domain.entities import (
    APPOINTMENT_PENDING,
    APPOINTMENT_STATUSES,
    ROLE_ADMIN,
    ROLE_DOCTOR,
    Appointment,
    Identity,
)
from ..domain.interfaces import IAppointmentRepository
from ..schemas.dtos import AppointmentCreateRequest, StatusUpdateRequest
from .role_gate import RoleGate

logger = get_logger(__name__)


class AppointmentService:
    """Application service for the appointment ledger.

    This service:
    - Asks the role gate before every read or write
    - Scopes listings with directory matching
    - Depends on IAppointmentRepository, not a concrete store
    """

    def __init__(
        self,
        appointment_repo: IAppointmentRepository,
        gate: RoleGate,
        demo_doctor_name: str = "Dr. Mehta",
    ) -> None:
        self.appointment_repo = appointment_repo
        self.gate = gate
        self.demo_doctor_name = demo_doctor_name

    def book_appointment(
        self, actor: Identity, request: AppointmentCreateRequest
    ) -> Appointment:
        """Book a new appointment for a patient.

        Business Rules:
        - Only patients book
        - Patient and doctor names are required
        - Status always starts as Pending
        """
        self.gate.check(actor, "book_appointment")
        request.validate()

        appointment = Appointment(
            id=self.appointment_repo.new_id(),
            patient_name=request.patient_name,
            doctor_name=request.doctor_name,
            date=request.date,
            time=request.time,
            reason=request.reason,
            status=APPOINTMENT_PENDING,
        )
        created = self.appointment_repo.add(appointment)

        logger.info(
            "Appointment booked",
            extra={
                "context": {
                    "appointment_id": created.id,
                    "patient_name": created.patient_name,
                    "doctor_name": created.doctor_name,
                }
            },
        )
        return created

    def list_appointments(self, actor: Identity) -> List[Appointment]:
        """Appointments visible to ``actor``.

        Admins see everything. Doctors see their own plus the demo doctor's,
        so the demo has data even when the login name matches nobody.
        Patients see their own.
        """
        self.gate.check(actor, "list_appointments")
        appointments = self.appointment_repo.list_all()

        if actor.role == ROLE_ADMIN:
            return appointments
        if actor.role == ROLE_DOCTOR:
            return directory.filter_owned(
                appointments, "doctor_name", actor.name, self.demo_doctor_name
            )
        return directory.filter_owned(appointments, "patient_name", actor.name)

    def get_appointment(self, actor: Identity, appointment_id: str) -> Appointment:
        """Fetch one appointment the actor is allowed to see."""
        self.gate.check(actor, "get_appointment")
        for appointment in self.list_appointments(actor):
            if appointment.id == appointment_id:
                return appointment
        raise NotFoundError(f"Appointment {appointment_id} not found")

    def set_appointment_status(
        self, actor: Identity, appointment_id: str, status: str
    ) -> Appointment:
        """Overwrite an appointment's status.

        Any defined status may follow any other; only the role is enforced.
        """
        self.gate.check(actor, "set_appointment_status")
        StatusUpdateRequest(status=status).validate(APPOINTMENT_STATUSES)

        updated = self.appointment_repo.update_status(appointment_id, status)
        if updated is None:
            raise NotFoundError(f"Appointment {appointment_id} not found")

        logger.info(
            "Appointment status updated",
            extra={"context": {"appointment_id": appointment_id, "status": status}},
        )
        return updated

    def count(self) -> int:
        return self.appointment_repo.count()
