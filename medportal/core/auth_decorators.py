"""
Session helpers for the Flask adapter.

The browser session stores the active identity through Flask-Login. The
cookie carries ``role:name``; ``load_identity_user`` rebuilds the identity on
every request and controllers hand it to the clinic facade explicitly.

No credential is involved: logging in is choosing a role and a display name.
Role checks for domain operations are *not* done here; they belong to the
facade's role gate. These helpers only answer "who is calling".

Examples:
    @appointment_bp.route("/", methods=["GET"])
    @identity_required
    def list_appointments():
        identity = get_current_identity()
        ...
"""

from functools import wraps
from typing import Optional

from flask import jsonify
from flask_login import UserMixin, current_user

from ..domain.entities import ROLES, Identity


class SessionUser(UserMixin):
    """Flask-Login user wrapping a domain Identity."""

    def __init__(self, identity: Identity) -> None:
        self.identity = identity

    @property
    def role(self) -> str:
        return self.identity.role

    @property
    def name(self) -> str:
        return self.identity.name

    def get_id(self) -> str:
        """Return the session key for Flask-Login (``role:name``)."""
        return f"{self.identity.role}:{self.identity.name}"


def load_identity_user(user_id: str) -> Optional[SessionUser]:
    """Flask-Login user_loader: rebuild the identity stored in the session."""
    role, sep, name = (user_id or "").partition(":")
    if not sep or role not in ROLES:
        return None
    return SessionUser(Identity(role=role, name=name))


def get_current_identity() -> Identity:
    """Identity for the current request; anonymous when nobody is logged in."""
    if current_user and getattr(current_user, "is_authenticated", False):
        identity = getattr(current_user, "identity", None)
        if identity is not None:
            return identity
    return Identity.anonymous()


def identity_required(f):
    """Decorator for endpoints that need a logged-in identity.

    Returns:
        - 401 if no identity is in the session
        - Proceeds to route otherwise (role checks happen in the facade)
    """

    @wraps(f)
    def decorated_function(*args, **kwargs):
        if not get_current_identity().is_authenticated:
            return (
                jsonify(
                    {
                        "success": False,
                        "message": "Authentication required. Please log in.",
                        "data": {"error": "unauthenticated"},
                    }
                ),
                401,
            )
        return f(*args, **kwargs)

    return decorated_function
