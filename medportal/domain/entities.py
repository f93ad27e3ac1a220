"""
Domain entities - Pure business logic, no framework dependencies.

Following SOLID principles:
- Single Responsibility: Each entity represents one business concept
- Open/Closed: Entities can be extended without modification
"""

from dataclasses import dataclass
from typing import Optional

from ..core.exceptions import ValidationError

# Roles
ROLE_ADMIN = "admin"
ROLE_DOCTOR = "doctor"
ROLE_PATIENT = "patient"
ROLE_PHARMACIST = "pharmacist"
ROLE_NONE = "none"

ROLES = (ROLE_ADMIN, ROLE_DOCTOR, ROLE_PATIENT, ROLE_PHARMACIST)

# Appointment statuses
APPOINTMENT_PENDING = "Pending"
APPOINTMENT_APPROVED = "Approved"
APPOINTMENT_CANCELLED = "Cancelled"

APPOINTMENT_STATUSES = (
    APPOINTMENT_PENDING,
    APPOINTMENT_APPROVED,
    APPOINTMENT_CANCELLED,
)

# Prescription statuses
PRESCRIPTION_PENDING = "Pending"
PRESCRIPTION_READY = "Ready"
PRESCRIPTION_DISPENSED = "Dispensed"

PRESCRIPTION_STATUSES = (
    PRESCRIPTION_PENDING,
    PRESCRIPTION_READY,
    PRESCRIPTION_DISPENSED,
)

# Medical record defaults when a prescription leaves them blank
DEFAULT_RECORD_SUMMARY = "Prescription generated"
DEFAULT_LAB_REPORT = "N/A"


def _require(value: Optional[str], label: str) -> None:
    if not value or not value.strip():
        raise ValidationError(f"{label} is required")


@dataclass(frozen=True)
class Identity:
    """The acting user: a role plus a free-form display name.

    There is no credential behind an identity; whoever logs in picks both
    fields. ``Identity.anonymous()`` is the empty identity before login.
    """

    role: str = ROLE_NONE
    name: str = ""

    @classmethod
    def anonymous(cls) -> "Identity":
        return cls(role=ROLE_NONE, name="")

    @property
    def is_authenticated(self) -> bool:
        return self.role != ROLE_NONE


@dataclass
class Appointment:
    """Domain entity for a patient's appointment request."""

    id: str = ""
    patient_name: str = ""
    doctor_name: str = ""
    date: str = ""
    time: str = ""
    reason: str = ""
    status: str = APPOINTMENT_PENDING

    def __post_init__(self):
        """Validate business rules."""
        _require(self.patient_name, "Patient name")
        _require(self.doctor_name, "Doctor name")
        if self.status not in APPOINTMENT_STATUSES:
            raise ValidationError(f"Invalid appointment status: {self.status}")


@dataclass
class Prescription:
    """Domain entity for an e-prescription written by a doctor."""

    id: str = ""
    patient_name: str = ""
    doctor_name: str = ""
    medication: str = ""
    dosage: str = ""
    instructions: str = ""
    diagnosis: str = ""
    lab_report: str = ""
    status: str = PRESCRIPTION_PENDING
    appointment_id: Optional[str] = None

    def __post_init__(self):
        """Validate business rules."""
        _require(self.patient_name, "Patient name")
        _require(self.doctor_name, "Doctor name")
        _require(self.medication, "Medication")
        if self.status not in PRESCRIPTION_STATUSES:
            raise ValidationError(f"Invalid prescription status: {self.status}")


@dataclass(frozen=True)
class MedicalRecord:
    """Append-only clinical summary; never changed once stored."""

    id: str = ""
    patient_name: str = ""
    doctor_name: str = ""
    summary: str = DEFAULT_RECORD_SUMMARY
    lab_report: str = DEFAULT_LAB_REPORT
    date: str = ""

    @classmethod
    def from_prescription(
        cls, prescription: Prescription, record_id: str, date: str
    ) -> "MedicalRecord":
        """Derive the record that accompanies a newly written prescription."""
        return cls(
            id=record_id,
            patient_name=prescription.patient_name,
            doctor_name=prescription.doctor_name,
            summary=(
                prescription.diagnosis
                if prescription.diagnosis.strip()
                else DEFAULT_RECORD_SUMMARY
            ),
            lab_report=(
                prescription.lab_report
                if prescription.lab_report.strip()
                else DEFAULT_LAB_REPORT
            ),
            date=date,
        )
