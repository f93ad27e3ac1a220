from ..core.exceptions import ValidationError
from ..core.logging_config import get_logger
from ..domain.entities import ROLES, Identity

logger = get_logger(__name__)


class SessionService:
    """Holds the single active identity.

    Login is a role selection, not authentication: no credential is checked
    because there is no credential store. Real authentication would need its
    own design (stored hashes, session tokens) and is not attempted here.
    """

    def __init__(self) -> None:
        self._current = Identity.anonymous()

    @property
    def current(self) -> Identity:
        return self._current

    @staticmethod
    def build_identity(role: str, name: str = "") -> Identity:
        """Validate a role selection without changing the active identity.

        Business Rules:
        - role must be one of admin, doctor, patient, pharmacist
        - a blank name defaults to the upper-cased role
        """
        role = (role or "").strip().lower()
        if role not in ROLES:
            raise ValidationError(
                f"Unknown role '{role}'", details={"allowed": list(ROLES)}
            )
        return Identity(role=role, name=(name or "").strip() or role.upper())

    def login(self, role: str, name: str = "") -> Identity:
        """Replace the active identity.

        An invalid role raises before anything changes, so the current
        identity is left untouched.
        """
        self._current = self.build_identity(role, name)

        logger.info(
            "Identity logged in",
            extra={"context": {"role": self._current.role, "name": self._current.name}},
        )
        return self._current

    def logout(self) -> None:
        previous = self._current
        self._current = Identity.anonymous()
        logger.info("Identity logged out", extra={"context": {"role": previous.role}})
