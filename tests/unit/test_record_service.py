"""
Unit tests for RecordService (read-only medical record access).
"""

import pytest

from medportal.core.exceptions import ForbiddenError
from medportal.domain.entities import Identity, MedicalRecord
from medportal.services.record_service import RecordService
from medportal.services.role_gate import RoleGate
from tests.factories.repository_factories import MedicalRecordRepositoryFactory


@pytest.fixture
def reader():
    mock_reader = MedicalRecordRepositoryFactory.create_mock_reader()
    mock_reader.list_all.return_value = [
        MedicalRecord(id="1", patient_name="Rohit", doctor_name="Dr. Mehta"),
        MedicalRecord(id="2", patient_name="Asha", doctor_name="Dr. Rao"),
    ]
    mock_reader.count.return_value = 2
    return mock_reader


@pytest.mark.services
@pytest.mark.records
class TestRecordService:
    def test_patient_sees_own_records(self, reader):
        service = RecordService(reader, RoleGate())

        result = service.list_records(Identity(role="patient", name="rohit"))

        assert [r.id for r in result] == ["1"]

    @pytest.mark.parametrize("role", ["admin", "doctor"])
    def test_admin_and_doctor_see_all(self, reader, role):
        service = RecordService(reader, RoleGate())

        assert len(service.list_records(Identity(role=role, name="X"))) == 2

    @pytest.mark.parametrize("role", ["pharmacist", "none"])
    def test_other_roles_are_forbidden(self, reader, role):
        service = RecordService(reader, RoleGate())

        with pytest.raises(ForbiddenError):
            service.list_records(Identity(role=role, name="X"))

        reader.list_all.assert_not_called()

    def test_service_has_no_write_entry_point(self):
        public = {name for name in dir(RecordService) if not name.startswith("_")}

        assert public == {"list_records", "count"}

    def test_seeded_store_has_demo_record(self, seeded_clinic):
        result = seeded_clinic.list_records(Identity(role="patient", name="Rohit"))

        assert len(result) == 1
        assert result[0].summary == "Follow-up for fever. Stable."
        assert result[0].lab_report == "CBC normal. CRP slightly elevated."
        assert result[0].date == "2025-11-10"
