"""
Central pytest configuration for the MedPortal tests.

This file provides common fixtures and markers for both the service-level
unit tests and the Flask controller tests.
"""

import os

import pytest

# Keep the environment deterministic before the package reads it
os.environ["TESTING"] = "true"
os.environ["MEDPORTAL_ENV_LOADED"] = "1"  # skip .env loading in create_app
os.environ["LOG_TO_FILE"] = "false"
os.environ["MEDPORTAL_DEMO_DOCTOR"] = "Dr. Mehta"

from medportal.domain.entities import Identity  # noqa: E402
from medportal.main import create_app  # noqa: E402
from medportal.services.clinic_service import build_clinic_service  # noqa: E402
from tests.config.markers import (  # noqa: E402,F401
    pytest_collection_modifyitems,
    pytest_configure,
)

FIXED_DAY = "2025-12-01"


# =====================================================
# DOMAIN FIXTURES
# =====================================================


@pytest.fixture
def clinic():
    """A clinic core with empty stores and a fixed creation day."""
    service = build_clinic_service(demo_doctor_name="Dr. Mehta", seed_data=False)
    service.prescriptions.today = lambda: FIXED_DAY
    return service


@pytest.fixture
def seeded_clinic():
    """A clinic core with the demo medical record loaded."""
    service = build_clinic_service(demo_doctor_name="Dr. Mehta", seed_data=True)
    service.prescriptions.today = lambda: FIXED_DAY
    return service


@pytest.fixture
def admin() -> Identity:
    return Identity(role="admin", name="ADMIN")


@pytest.fixture
def doctor() -> Identity:
    return Identity(role="doctor", name="Dr. Mehta")


@pytest.fixture
def other_doctor() -> Identity:
    return Identity(role="doctor", name="Dr. Rao")


@pytest.fixture
def patient() -> Identity:
    return Identity(role="patient", name="Asha")


@pytest.fixture
def pharmacist() -> Identity:
    return Identity(role="pharmacist", name="PHARMACIST")


@pytest.fixture
def anonymous() -> Identity:
    return Identity.anonymous()


@pytest.fixture
def appointment_data() -> dict:
    return {
        "patientName": "Asha",
        "doctorName": "Dr. Mehta",
        "date": "2025-01-01",
        "time": "10:00",
        "reason": "cough",
    }


@pytest.fixture
def prescription_data() -> dict:
    return {
        "patientName": "Asha",
        "doctorName": "Dr. Mehta",
        "medication": "Paracetamol",
        "dosage": "1-0-1 for 5 days",
        "instructions": "After food",
        "diagnosis": "Viral fever",
        "labReport": "CBC normal",
    }


# =====================================================
# FLASK FIXTURES
# =====================================================


@pytest.fixture
def app():
    """Flask adapter with empty stores."""
    application = create_app(
        {"TESTING": True, "SEED_DATA": False, "SECRET_KEY": "test-secret"}
    )
    yield application


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def login_as(client):
    """Log the test client in with a role and name."""

    def _login(role: str, name: str = ""):
        response = client.post("/auth/login", json={"role": role, "name": name})
        assert response.status_code == 200, response.get_json()
        return response

    return _login
