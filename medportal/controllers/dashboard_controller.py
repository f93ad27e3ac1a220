"""
Role dashboards.

Each dashboard bundles the listings one role works with. Navigation to a
dashboard of another role is refused by the facade (403), and an anonymous
visitor gets 401 so the UI can send them back to the login screen.
"""

from flask import Blueprint

from ..core.api_utils import api_response, get_clinic
from ..core.auth_decorators import get_current_identity
from ..core.exceptions import NotFoundError
from ..domain.entities import ROLE_ADMIN, ROLE_DOCTOR, ROLE_PATIENT, ROLE_PHARMACIST
from ..schemas.dtos import (
    AppointmentResponse,
    IdentityResponse,
    MedicalRecordResponse,
    PrescriptionResponse,
)

dashboard_bp = Blueprint("dashboard", __name__, url_prefix="/dashboard")


def _appointments(clinic, identity):
    return [
        AppointmentResponse.from_domain(a).to_dict()
        for a in clinic.list_appointments(identity)
    ]


def _prescriptions(clinic, identity):
    return [
        PrescriptionResponse.from_domain(p).to_dict()
        for p in clinic.list_prescriptions(identity)
    ]


def _records(clinic, identity):
    return [
        MedicalRecordResponse.from_domain(r).to_dict()
        for r in clinic.list_records(identity)
    ]


@dashboard_bp.route("/<role>", methods=["GET"])
def show_dashboard(role):
    """Dashboard payload for ``role`` if the session holds that role."""
    clinic = get_clinic()
    identity = get_current_identity()

    if role not in (ROLE_ADMIN, ROLE_DOCTOR, ROLE_PATIENT, ROLE_PHARMACIST):
        raise NotFoundError(f"No dashboard for role '{role}'")

    clinic.authorize_dashboard(identity, role)

    payload = {"user": IdentityResponse.from_domain(identity).to_dict()}
    if role == ROLE_ADMIN:
        payload["summary"] = clinic.dashboard_summary(identity).to_dict()
        payload["appointments"] = _appointments(clinic, identity)
    elif role == ROLE_DOCTOR:
        payload["appointments"] = _appointments(clinic, identity)
    elif role == ROLE_PATIENT:
        payload["appointments"] = _appointments(clinic, identity)
        payload["prescriptions"] = _prescriptions(clinic, identity)
        payload["records"] = _records(clinic, identity)
    else:
        payload["prescriptions"] = _prescriptions(clinic, identity)

    return api_response(True, f"{role}_dashboard", payload)
