"""
Unit tests for SessionService login/logout.
"""

import pytest

from medportal.core.exceptions import ValidationError
from medportal.services.session_service import SessionService


@pytest.fixture
def sessions():
    return SessionService()


@pytest.mark.session
class TestSessionService:
    def test_starts_anonymous(self, sessions):
        assert sessions.current.role == "none"
        assert sessions.current.is_authenticated is False

    @pytest.mark.parametrize("role", ["admin", "doctor", "patient", "pharmacist"])
    def test_login_accepts_each_fixed_role(self, sessions, role):
        identity = sessions.login(role, "Someone")

        assert identity.role == role
        assert identity.name == "Someone"
        assert sessions.current == identity

    def test_login_does_not_check_any_credential(self, sessions):
        # Any name is accepted; there is no credential store to consult
        identity = sessions.login("doctor", "Dr. Anybody")

        assert identity.is_authenticated

    def test_blank_name_defaults_to_upper_cased_role(self, sessions):
        identity = sessions.login("pharmacist", "  ")

        assert identity.name == "PHARMACIST"

    def test_login_replaces_previous_identity(self, sessions):
        sessions.login("patient", "Asha")
        sessions.login("admin", "Root")

        assert sessions.current.role == "admin"
        assert sessions.current.name == "Root"

    @pytest.mark.parametrize("role", ["nurse", "", "none", "superuser"])
    def test_unknown_role_is_rejected_and_identity_kept(self, sessions, role):
        sessions.login("patient", "Asha")

        with pytest.raises(ValidationError, match="Unknown role"):
            sessions.login(role, "Mallory")

        assert sessions.current.role == "patient"
        assert sessions.current.name == "Asha"

    def test_logout_resets_to_anonymous(self, sessions):
        sessions.login("admin", "Root")

        sessions.logout()

        assert sessions.current.role == "none"
        assert sessions.current.name == ""

    def test_build_identity_leaves_active_session_alone(self, sessions):
        sessions.login("patient", "Asha")

        identity = sessions.build_identity(" Doctor ", "")

        assert (identity.role, identity.name) == ("doctor", "DOCTOR")
        assert sessions.current.name == "Asha"

    def test_build_identity_rejects_unknown_role(self):
        with pytest.raises(ValidationError, match="Unknown role"):
            SessionService.build_identity("nurse", "N")
