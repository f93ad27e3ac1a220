"""
Prescription controller for handling HTTP requests following SOLID principles.
"""

from flask import Blueprint, request

from ..core.api_utils import api_response, get_clinic
from ..core.auth_decorators import get_current_identity, identity_required
from ..schemas.dtos import (
    PrescriptionCreateRequest,
    PrescriptionResponse,
    StatusUpdateRequest,
)

prescription_bp = Blueprint("prescriptions", __name__, url_prefix="/prescriptions")


@prescription_bp.route("/", methods=["GET"])
@identity_required
def list_prescriptions():
    """List the prescriptions visible to the logged-in role."""
    prescriptions = get_clinic().list_prescriptions(get_current_identity())
    return api_response(
        True,
        "prescriptions",
        [PrescriptionResponse.from_domain(p).to_dict() for p in prescriptions],
    )


@prescription_bp.route("/", methods=["POST"])
@identity_required
def create_prescription():
    """Write an e-prescription (doctors only); also appends a medical record."""
    data = request.get_json(silent=True) or request.form
    created = get_clinic().create_prescription(
        get_current_identity(), PrescriptionCreateRequest.from_dict(data)
    )
    return api_response(
        True,
        "prescription_created",
        PrescriptionResponse.from_domain(created).to_dict(),
        201,
    )


@prescription_bp.route("/draft/<appointment_id>", methods=["GET"])
@identity_required
def prescription_draft(appointment_id):
    """Prescription form pre-filled from one of the doctor's appointments."""
    draft = get_clinic().prescription_draft(get_current_identity(), appointment_id)
    return api_response(True, "prescription_draft", draft.to_dict())


@prescription_bp.route("/<prescription_id>/status", methods=["PATCH"])
@identity_required
def set_prescription_status(prescription_id):
    """Overwrite a prescription's status (pharmacists only)."""
    data = request.get_json(silent=True) or {}
    status_request = StatusUpdateRequest.from_dict(data)
    updated = get_clinic().set_prescription_status(
        get_current_identity(), prescription_id, status_request.status
    )
    return api_response(
        True,
        "prescription_updated",
        PrescriptionResponse.from_domain(updated).to_dict(),
    )
