"""
Appointment controller for handling HTTP requests following SOLID principles.

This controller:
- Handles HTTP concerns only (Single Responsibility)
- Passes the session identity to the clinic facade, which owns role policy
"""

from flask import Blueprint, request

from ..core.api_utils import api_response, get_clinic
from ..core.auth_decorators import get_current_identity, identity_required
from ..schemas.dtos import (
    AppointmentCreateRequest,
    AppointmentResponse,
    StatusUpdateRequest,
)

appointment_bp = Blueprint("appointments", __name__, url_prefix="/appointments")


@appointment_bp.route("/", methods=["GET"])
@identity_required
def list_appointments():
    """List the appointments visible to the logged-in role."""
    appointments = get_clinic().list_appointments(get_current_identity())
    return api_response(
        True,
        "appointments",
        [AppointmentResponse.from_domain(a).to_dict() for a in appointments],
    )


@appointment_bp.route("/", methods=["POST"])
@identity_required
def book_appointment():
    """Book an appointment (patients only)."""
    data = request.get_json(silent=True) or request.form
    created = get_clinic().book_appointment(
        get_current_identity(), AppointmentCreateRequest.from_dict(data)
    )
    return api_response(
        True, "appointment_booked", AppointmentResponse.from_domain(created).to_dict(), 201
    )


@appointment_bp.route("/<appointment_id>/status", methods=["PATCH"])
@identity_required
def set_appointment_status(appointment_id):
    """Overwrite an appointment's status (admins only)."""
    data = request.get_json(silent=True) or {}
    status_request = StatusUpdateRequest.from_dict(data)
    updated = get_clinic().set_appointment_status(
        get_current_identity(), appointment_id, status_request.status
    )
    return api_response(
        True, "appointment_updated", AppointmentResponse.from_domain(updated).to_dict()
    )
