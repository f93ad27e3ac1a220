"""
Role gate: the one place that says which role may run which operation.

Services call ``RoleGate.check`` before touching any ledger, so a refused
call never has a partial effect. Presentation code reacts to the resulting
``ForbiddenError``; it must not keep its own copy of this table.
"""

from typing import Dict, Tuple

from ..core.exceptions import ForbiddenError
from ..core.logging_config import get_logger
from ..domain.entities import (
    ROLE_ADMIN,
    ROLE_DOCTOR,
    ROLE_PATIENT,
    ROLE_PHARMACIST,
    Identity,
)

logger = get_logger(__name__)

OPERATION_ROLES: Dict[str, Tuple[str, ...]] = {
    # Appointment ledger
    "book_appointment": (ROLE_PATIENT,),
    "list_appointments": (ROLE_ADMIN, ROLE_DOCTOR, ROLE_PATIENT),
    "get_appointment": (ROLE_ADMIN, ROLE_DOCTOR),
    "set_appointment_status": (ROLE_ADMIN,),
    # Prescription ledger
    "create_prescription": (ROLE_DOCTOR,),
    "prescription_draft": (ROLE_DOCTOR,),
    "list_prescriptions": (ROLE_ADMIN, ROLE_PHARMACIST, ROLE_PATIENT),
    "set_prescription_status": (ROLE_PHARMACIST,),
    # Medical record store
    "list_records": (ROLE_ADMIN, ROLE_DOCTOR, ROLE_PATIENT),
    # Dashboards
    "dashboard_summary": (ROLE_ADMIN,),
}


class RoleGate:
    """Checks an actor's role against ``OPERATION_ROLES``."""

    def __init__(self, policy: Dict[str, Tuple[str, ...]] = None) -> None:
        self.policy = dict(policy if policy is not None else OPERATION_ROLES)

    def allowed_roles(self, operation: str) -> Tuple[str, ...]:
        try:
            return self.policy[operation]
        except KeyError:
            raise KeyError(f"No role policy for operation '{operation}'") from None

    def is_allowed(self, actor: Identity, operation: str) -> bool:
        return actor.role in self.allowed_roles(operation)

    def check(self, actor: Identity, operation: str) -> None:
        """Raise ForbiddenError unless ``actor`` may run ``operation``."""
        if self.is_allowed(actor, operation):
            return

        allowed = self.allowed_roles(operation)
        logger.warning(
            f"Forbidden: role '{actor.role}' attempted {operation}",
            extra={
                "context": {
                    "operation": operation,
                    "role": actor.role,
                    "allowed_roles": list(allowed),
                }
            },
        )
        raise ForbiddenError(
            f"Role '{actor.role}' may not {operation.replace('_', ' ')}",
            details={"operation": operation, "allowed_roles": list(allowed)},
        )
