from flask import Blueprint

from ..core.api_utils import api_response, get_clinic
from ..core.auth_decorators import get_current_identity, identity_required
from ..schemas.dtos import MedicalRecordResponse

record_bp = Blueprint("records", __name__, url_prefix="/records")


@record_bp.route("/", methods=["GET"])
@identity_required
def list_records():
    """Medical records visible to the logged-in role (read-only)."""
    records = get_clinic().list_records(get_current_identity())
    return api_response(
        True,
        "records",
        [MedicalRecordResponse.from_domain(r).to_dict() for r in records],
    )
