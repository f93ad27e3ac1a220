"""
Centralized configuration module for application-wide settings.

Everything here is read from the environment (optionally populated from a
``.env`` file by ``create_app``) so tests and deployments can override it
without code changes.
"""

import logging
import os
from zoneinfo import ZoneInfo

logger = logging.getLogger(__name__)

TRUTHY_VALUES = ("true", "1", "yes")

# ===========================
# Timezone Configuration
# ===========================


def get_app_timezone() -> ZoneInfo:
    """
    Get the application timezone from environment variable.

    Returns:
        ZoneInfo: Application timezone (defaults to UTC if not configured)

    Environment Variables:
        TZ: Timezone identifier (e.g., 'Asia/Kolkata', 'UTC')
            Default: 'UTC'
    """
    tz_name = os.getenv("TZ", "UTC")

    try:
        return ZoneInfo(tz_name)
    except Exception as e:
        logger.warning(
            f"Invalid timezone '{tz_name}' specified in TZ environment variable. "
            f"Falling back to UTC. Error: {e}"
        )
        return ZoneInfo("UTC")


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower().strip() in TRUTHY_VALUES


# ===========================
# Directory Configuration
# ===========================


def get_demo_doctor_name() -> str:
    """
    Name every doctor dashboard also matches against.

    The demo keeps data visible for doctors whose login name does not match
    any booked doctor.

    Environment Variables:
        MEDPORTAL_DEMO_DOCTOR: Default 'Dr. Mehta'
    """
    return os.getenv("MEDPORTAL_DEMO_DOCTOR", "Dr. Mehta")


def get_seed_data_enabled() -> bool:
    """
    Whether the medical record store starts with the demo record.

    Environment Variables:
        MEDPORTAL_SEED_DATA: Default 'true'
    """
    return _env_flag("MEDPORTAL_SEED_DATA", "true")


# ===========================
# Logging Configuration
# ===========================


def get_logging_settings() -> dict:
    """
    Logging options consumed by ``setup_logging``.

    Environment Variables:
        LOG_LEVEL: Default 'INFO'
        LOG_TO_FILE: Default 'false'
        LOG_JSON: Default 'false'
    """
    return {
        "log_level": os.getenv("LOG_LEVEL", "INFO"),
        "log_to_file": _env_flag("LOG_TO_FILE", "false"),
        "use_json_format": _env_flag("LOG_JSON", "false"),
    }


def get_secret_key() -> str:
    """Flask session signing key (SECRET_KEY)."""
    secret = os.getenv("SECRET_KEY", "dev-secret-change-me")
    if os.getenv("FLASK_ENV") == "production" and secret == "dev-secret-change-me":
        logger.warning("SECRET_KEY is using the development default in production")
    return secret


def load_settings() -> dict:
    """Collect every setting into a mapping suitable for ``app.config``."""
    logging_settings = get_logging_settings()
    return {
        "SECRET_KEY": get_secret_key(),
        "APP_TIMEZONE": get_app_timezone(),
        "DEMO_DOCTOR_NAME": get_demo_doctor_name(),
        "SEED_DATA": get_seed_data_enabled(),
        "LOG_LEVEL": logging_settings["log_level"],
        "LOG_TO_FILE": logging_settings["log_to_file"],
        "LOG_JSON": logging_settings["use_json_format"],
    }


def log_app_config(settings: dict) -> None:
    """Log the active configuration (secrets excluded) at startup."""
    logger.info(
        "Configuration loaded",
        extra={
            "context": {
                "timezone": str(settings.get("APP_TIMEZONE")),
                "demo_doctor": settings.get("DEMO_DOCTOR_NAME"),
                "seed_data": settings.get("SEED_DATA"),
            }
        },
    )
