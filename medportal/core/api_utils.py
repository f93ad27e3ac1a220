"""
Common API utilities for consistent response formatting across all controllers.
"""

from typing import Any, Optional

from flask import current_app, jsonify

from .exceptions import MedPortalError

CLINIC_EXTENSION = "medportal"


def api_response(
    success: bool, message: str, data: Optional[Any] = None, status_code: int = 200
) -> tuple:
    """
    Standardized API response format for all endpoints.

    Args:
        success: Whether the operation was successful
        message: Human-readable message about the operation
        data: Optional data payload
        status_code: HTTP status code

    Returns:
        Tuple of (json_response, status_code)
    """
    response = {"success": success, "message": message}

    if data is not None:
        response["data"] = data

    return jsonify(response), status_code


def error_response(error: MedPortalError) -> tuple:
    """Render a domain error with its HTTP status and error code."""
    data = {"error": error.error_code}
    if error.details:
        data["details"] = error.details
    return api_response(False, error.message, data, error.status_code)


def get_clinic():
    """The ClinicService bound to the running application."""
    return current_app.extensions[CLINIC_EXTENSION]
