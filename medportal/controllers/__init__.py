from .appointment_controller import appointment_bp
from .auth_controller import auth_bp
from .dashboard_controller import dashboard_bp
from .prescription_controller import prescription_bp
from .record_controller import record_bp

__all__ = [
    "appointment_bp",
    "auth_bp",
    "dashboard_bp",
    "prescription_bp",
    "record_bp",
]
