"""
Unit tests for PrescriptionService and its cascade into the record store.
"""

import threading

import pytest

from medportal.core.exceptions import ForbiddenError, NotFoundError, ValidationError
from medportal.domain.entities import Identity
from medportal.repositories import (
    MedicalRecordRepository,
    PrescriptionRepository,
    PrescriptionUnitOfWork,
)
from medportal.schemas.dtos import AppointmentCreateRequest, PrescriptionCreateRequest
from medportal.services.prescription_service import PrescriptionService, today_factory
from medportal.services.role_gate import RoleGate
from tests.factories.repository_factories import (
    MedicalRecordRepositoryFactory,
    PrescriptionRepositoryFactory,
)


def _request(**overrides):
    data = {
        "patient_name": "Asha",
        "doctor_name": "Dr. Mehta",
        "medication": "Paracetamol",
        "diagnosis": "Viral fever",
        "lab_report": "CBC normal",
    }
    data.update(overrides)
    return PrescriptionCreateRequest(**data)


@pytest.mark.services
@pytest.mark.prescription
class TestCreatePrescription:
    def test_creates_pending_prescription(self, clinic, doctor):
        prescription = clinic.create_prescription(doctor, _request(dosage="1-0-1"))

        assert prescription.status == "Pending"
        assert prescription.id
        assert prescription.dosage == "1-0-1"

    def test_appends_exactly_one_matching_record(self, clinic, doctor, admin):
        before = len(clinic.list_records(admin))

        clinic.create_prescription(doctor, _request())

        records = clinic.list_records(admin)
        assert len(records) == before + 1
        record = records[-1]
        assert record.patient_name == "Asha"
        assert record.doctor_name == "Dr. Mehta"
        assert record.summary == "Viral fever"
        assert record.lab_report == "CBC normal"
        assert record.date == "2025-12-01"

    def test_blank_diagnosis_uses_placeholder(self, clinic, doctor, admin):
        clinic.create_prescription(doctor, _request(diagnosis="", lab_report=""))

        record = clinic.list_records(admin)[-1]
        assert record.summary == "Prescription generated"
        assert record.lab_report == "N/A"

    @pytest.mark.parametrize("field", ["patient_name", "doctor_name", "medication"])
    def test_required_fields(self, clinic, doctor, admin, field):
        with pytest.raises(ValidationError):
            clinic.create_prescription(doctor, _request(**{field: ""}))

        assert clinic.list_prescriptions(admin) == []
        assert clinic.list_records(admin) == []

    @pytest.mark.parametrize("role", ["admin", "patient", "pharmacist", "none"])
    def test_only_doctors_prescribe(self, clinic, admin, role):
        with pytest.raises(ForbiddenError):
            clinic.create_prescription(Identity(role=role, name="X"), _request())

        assert clinic.list_prescriptions(admin) == []
        assert clinic.list_records(admin) == []

    def test_record_failure_rolls_back_prescription(self, doctor):
        prescriptions = PrescriptionRepository()
        records = MedicalRecordRepositoryFactory.create_mock_full()
        records.add.side_effect = ValidationError("Duplicate id: rec-1")
        service = PrescriptionService(
            prescriptions,
            records,
            PrescriptionUnitOfWork(prescriptions, records, threading.RLock()),
            RoleGate(),
        )

        with pytest.raises(ValidationError):
            service.create_prescription(doctor, _request())

        assert prescriptions.count() == 0
        assert prescriptions.list_all() == []

    def test_prescription_ids_are_unique(self, clinic, doctor):
        ids = {clinic.create_prescription(doctor, _request()).id for _ in range(20)}

        assert len(ids) == 20


@pytest.mark.services
@pytest.mark.prescription
class TestListPrescriptions:
    @pytest.fixture(autouse=True)
    def _prescriptions(self, clinic, doctor):
        clinic.create_prescription(doctor, _request(patient_name="Asha"))
        clinic.create_prescription(doctor, _request(patient_name="Rohit"))

    @pytest.mark.parametrize("role", ["admin", "pharmacist"])
    def test_admin_and_pharmacist_see_all(self, clinic, role):
        assert len(clinic.list_prescriptions(Identity(role=role, name="X"))) == 2

    def test_patient_sees_own(self, clinic):
        result = clinic.list_prescriptions(Identity(role="patient", name="rohit"))

        assert [p.patient_name for p in result] == ["Rohit"]

    def test_doctor_has_no_listing(self, clinic, doctor):
        with pytest.raises(ForbiddenError):
            clinic.list_prescriptions(doctor)


@pytest.mark.services
@pytest.mark.prescription
class TestPrescriptionServiceWithMocks:
    @pytest.fixture
    def repo(self):
        return PrescriptionRepositoryFactory.create_mock_full()

    @pytest.fixture
    def service(self, repo):
        records = MedicalRecordRepositoryFactory.create_mock_full()
        return PrescriptionService(
            repo,
            records,
            PrescriptionUnitOfWork(repo, records, threading.RLock()),
            RoleGate(),
            today=lambda: "2025-12-01",
        )

    def test_forbidden_caller_never_reaches_repository(self, service, repo):
        with pytest.raises(ForbiddenError):
            service.create_prescription(Identity(role="patient", name="Asha"), _request())

        repo.new_id.assert_not_called()
        repo.add.assert_not_called()

    def test_status_update_for_unknown_id(self, service, repo):
        with pytest.raises(NotFoundError):
            service.set_prescription_status(
                Identity(role="pharmacist", name="P"), "rx-9", "Ready"
            )

        repo.update_status.assert_called_once_with("rx-9", "Ready")

    def test_create_uses_repository_ids(self, service, repo):
        created = service.create_prescription(
            Identity(role="doctor", name="Dr. Mehta"), _request()
        )

        assert created.id == "rx-1"
        repo.add.assert_called_once()


@pytest.mark.services
@pytest.mark.prescription
class TestSetPrescriptionStatus:
    @pytest.fixture
    def written(self, clinic, doctor):
        return clinic.create_prescription(doctor, _request())

    def test_pharmacist_updates_status(self, clinic, pharmacist, written):
        updated = clinic.set_prescription_status(pharmacist, written.id, "Dispensed")

        assert updated.status == "Dispensed"

    def test_setting_ready_twice_equals_once(self, clinic, pharmacist, written):
        clinic.set_prescription_status(pharmacist, written.id, "Ready")
        once = [(p.id, p.status) for p in clinic.list_prescriptions(pharmacist)]

        clinic.set_prescription_status(pharmacist, written.id, "Ready")
        twice = [(p.id, p.status) for p in clinic.list_prescriptions(pharmacist)]

        assert once == twice == [(written.id, "Ready")]

    def test_backwards_transition_is_allowed(self, clinic, pharmacist, written):
        clinic.set_prescription_status(pharmacist, written.id, "Dispensed")

        updated = clinic.set_prescription_status(pharmacist, written.id, "Pending")

        assert updated.status == "Pending"

    @pytest.mark.parametrize("role", ["admin", "doctor", "patient"])
    def test_non_pharmacist_is_forbidden(self, clinic, pharmacist, written, role):
        with pytest.raises(ForbiddenError):
            clinic.set_prescription_status(
                Identity(role=role, name="Asha"), written.id, "Ready"
            )

        assert clinic.list_prescriptions(pharmacist)[0].status == "Pending"

    def test_invalid_status(self, clinic, pharmacist, written):
        with pytest.raises(ValidationError):
            clinic.set_prescription_status(pharmacist, written.id, "Approved")

    def test_unknown_id(self, clinic, pharmacist):
        with pytest.raises(NotFoundError):
            clinic.set_prescription_status(pharmacist, "nope", "Ready")


@pytest.mark.services
@pytest.mark.prescription
class TestPrescriptionDraft:
    def test_draft_prefills_from_appointment(self, clinic, patient, doctor):
        appointment = clinic.book_appointment(
            patient,
            AppointmentCreateRequest(patient_name="Asha", doctor_name="Dr. Mehta"),
        )

        draft = clinic.prescription_draft(doctor, appointment.id)

        assert draft.patient_name == "Asha"
        assert draft.doctor_name == "Dr. Mehta"
        assert draft.appointment_id == appointment.id
        assert draft.medication == ""

    def test_prescription_keeps_appointment_link(self, clinic, patient, doctor):
        appointment = clinic.book_appointment(
            patient,
            AppointmentCreateRequest(patient_name="Asha", doctor_name="Dr. Mehta"),
        )
        draft = clinic.prescription_draft(doctor, appointment.id)
        draft.medication = "Cetirizine"

        prescription = clinic.create_prescription(doctor, draft)

        assert prescription.appointment_id == appointment.id

    def test_draft_for_unknown_appointment(self, clinic, doctor):
        with pytest.raises(NotFoundError):
            clinic.prescription_draft(doctor, "missing")

    def test_draft_is_doctor_only(self, clinic, admin):
        with pytest.raises(ForbiddenError):
            clinic.prescription_draft(admin, "anything")


def test_today_factory_returns_iso_date():
    value = today_factory()()

    assert len(value) == 10
    assert value[4] == "-" and value[7] == "-"
