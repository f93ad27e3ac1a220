"""
Custom exceptions for the application.
Following SOLID principles - centralized error handling.

Every error here is local and recoverable: services raise them before any
ledger is touched, and the presentation layer turns them into a response.
"""


class MedPortalError(Exception):
    """Base class for domain errors surfaced to the presentation layer."""

    status_code = 400
    error_code = "error"

    def __init__(self, message: str, details: dict = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ForbiddenError(MedPortalError):
    """Raised when the actor's role does not match the operation's role."""

    status_code = 403
    error_code = "forbidden"


class UnauthenticatedError(MedPortalError):
    """Raised when an operation needs a logged-in identity and there is none."""

    status_code = 401
    error_code = "unauthenticated"


class ValidationError(MedPortalError, ValueError):
    """Raised for missing required fields or unrecognized values."""

    status_code = 400
    error_code = "validation"


class NotFoundError(MedPortalError):
    """Raised when a status update targets an id absent from its ledger."""

    status_code = 404
    error_code = "not_found"
