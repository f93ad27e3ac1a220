"""
Data Transfer Objects (DTOs) and validation schemas.

Following SOLID principles:
- Single Responsibility: Each schema validates one specific data contract
- Open/Closed: Schemas can be extended without modification

Request DTOs accept both snake_case and the camelCase keys the browser forms
send (``patientName``); responses are always snake_case.
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict, Iterable, Mapping, Optional

from ..core.exceptions import ValidationError


def _as_mapping(data: Any) -> Mapping[str, Any]:
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise ValidationError("Request body must be a JSON object")
    return data


def _field(data: Mapping[str, Any], name: str, camel: str) -> str:
    value = data.get(name, data.get(camel))
    return "" if value is None else str(value)


def _require(value: str, label: str) -> None:
    if not value or not value.strip():
        raise ValidationError(f"{label} is required")


@dataclass
class AppointmentCreateRequest:
    """DTO for appointment booking requests."""

    patient_name: str
    doctor_name: str
    date: str = ""
    time: str = ""
    reason: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AppointmentCreateRequest":
        data = _as_mapping(data)
        return cls(
            patient_name=_field(data, "patient_name", "patientName"),
            doctor_name=_field(data, "doctor_name", "doctorName"),
            date=_field(data, "date", "date"),
            time=_field(data, "time", "time"),
            reason=_field(data, "reason", "reason"),
        )

    def validate(self) -> None:
        """Validate the request data."""
        _require(self.patient_name, "Patient name")
        _require(self.doctor_name, "Doctor name")


@dataclass
class PrescriptionCreateRequest:
    """DTO for e-prescription requests."""

    patient_name: str
    doctor_name: str
    medication: str
    dosage: str = ""
    instructions: str = ""
    diagnosis: str = ""
    lab_report: str = ""
    appointment_id: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PrescriptionCreateRequest":
        data = _as_mapping(data)
        appointment_id = data.get("appointment_id", data.get("appointmentId"))
        return cls(
            patient_name=_field(data, "patient_name", "patientName"),
            doctor_name=_field(data, "doctor_name", "doctorName"),
            medication=_field(data, "medication", "medication"),
            dosage=_field(data, "dosage", "dosage"),
            instructions=_field(data, "instructions", "instructions"),
            diagnosis=_field(data, "diagnosis", "diagnosis"),
            lab_report=_field(data, "lab_report", "labReport"),
            appointment_id=str(appointment_id) if appointment_id else None,
        )

    def validate(self) -> None:
        """Validate the request data."""
        _require(self.patient_name, "Patient name")
        _require(self.doctor_name, "Doctor name")
        _require(self.medication, "Medication")

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class StatusUpdateRequest:
    """DTO for status changes on appointments and prescriptions."""

    status: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "StatusUpdateRequest":
        data = _as_mapping(data)
        return cls(status=_field(data, "status", "status"))

    def validate(self, allowed: Iterable[str]) -> None:
        """Validate the request data against the ledger's status vocabulary."""
        allowed = tuple(allowed)
        if self.status not in allowed:
            raise ValidationError(
                f"Invalid status '{self.status}'",
                details={"allowed": list(allowed)},
            )


@dataclass
class LoginRequest:
    """DTO for role selection on the login screen.

    A password field may be posted by the form; it is ignored because the
    system has no credential store.
    """

    role: str
    name: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "LoginRequest":
        data = _as_mapping(data)
        return cls(role=_field(data, "role", "role"), name=_field(data, "name", "name"))


@dataclass
class IdentityResponse:
    """DTO for the active session."""

    role: str
    name: str
    is_authenticated: bool

    @classmethod
    def from_domain(cls, identity) -> "IdentityResponse":
        return cls(
            role=identity.role,
            name=identity.name,
            is_authenticated=identity.is_authenticated,
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class AppointmentResponse:
    """DTO for appointment API responses."""

    id: str
    patient_name: str
    doctor_name: str
    date: str
    time: str
    reason: str
    status: str

    @classmethod
    def from_domain(cls, appointment) -> "AppointmentResponse":
        """Create response from domain entity."""
        return cls(
            id=appointment.id,
            patient_name=appointment.patient_name,
            doctor_name=appointment.doctor_name,
            date=appointment.date,
            time=appointment.time,
            reason=appointment.reason,
            status=appointment.status,
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class PrescriptionResponse:
    """DTO for prescription API responses."""

    id: str
    patient_name: str
    doctor_name: str
    medication: str
    dosage: str
    instructions: str
    diagnosis: str
    lab_report: str
    status: str
    appointment_id: Optional[str]

    @classmethod
    def from_domain(cls, prescription) -> "PrescriptionResponse":
        """Create response from domain entity."""
        return cls(
            id=prescription.id,
            patient_name=prescription.patient_name,
            doctor_name=prescription.doctor_name,
            medication=prescription.medication,
            dosage=prescription.dosage,
            instructions=prescription.instructions,
            diagnosis=prescription.diagnosis,
            lab_report=prescription.lab_report,
            status=prescription.status,
            appointment_id=prescription.appointment_id,
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class MedicalRecordResponse:
    """DTO for medical record API responses."""

    id: str
    patient_name: str
    doctor_name: str
    summary: str
    lab_report: str
    date: str

    @classmethod
    def from_domain(cls, record) -> "MedicalRecordResponse":
        """Create response from domain entity."""
        return cls(
            id=record.id,
            patient_name=record.patient_name,
            doctor_name=record.doctor_name,
            summary=record.summary,
            lab_report=record.lab_report,
            date=record.date,
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class DashboardSummary:
    """Counters shown on the admin dashboard."""

    total_appointments: int
    total_prescriptions: int
    current_role: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
