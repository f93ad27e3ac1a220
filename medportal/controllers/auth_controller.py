from flask import Blueprint, request
from flask_login import login_user, logout_user

from ..core.api_utils import api_response, get_clinic
from ..core.auth_decorators import SessionUser, get_current_identity
from ..core.logging_config import get_logger
from ..schemas.dtos import IdentityResponse, LoginRequest

auth_bp = Blueprint("auth", __name__, url_prefix="/auth")
logger = get_logger(__name__)


@auth_bp.route("/login", methods=["POST"])
def login():
    """Choose a role and display name for this browser session.

    Expected JSON: {"role": str, "name": str}
    A "password" key is accepted and ignored.
    Returns the identity and the dashboard to navigate to.
    """
    data = request.get_json(silent=True) or request.form
    login_request = LoginRequest.from_dict(data)

    clinic = get_clinic()
    identity = clinic.identify(login_request.role, login_request.name)
    login_user(SessionUser(identity))
    logger.info(
        "Session login",
        extra={"context": {"role": identity.role, "name": identity.name}},
    )

    payload = IdentityResponse.from_domain(identity).to_dict()
    payload["dashboard"] = clinic.dashboard_path(identity.role)
    return api_response(True, "login_success", payload)


@auth_bp.route("/logout", methods=["POST"])
def logout():
    """Clear this browser session's identity."""
    logger.info(
        "Session logout", extra={"context": {"role": get_current_identity().role}}
    )
    logout_user()
    return api_response(True, "logout_success")


@auth_bp.route("/session", methods=["GET"])
def session_info():
    """The identity bound to this browser session (anonymous if none)."""
    identity = get_current_identity()
    payload = IdentityResponse.from_domain(identity).to_dict()
    payload["dashboard"] = get_clinic().dashboard_path(identity.role)
    return api_response(True, "session", payload)
