"""
Tests for the read-side queries.
"""
from datetime import timedelta

from clinicflow.models import AppointmentStatus, ClinicState
from clinicflow.services import queries
from tests.factories import FIXED_NOW, make_appointment, make_patient, make_payment, make_prescription


def _ids(records):
    return [r.id for r in records]


class TestPatientSearch:
    def _state(self):
        return ClinicState(patients=(
            make_patient("p1", "Asha Rao", email="asha@example.com", phone="9876500001"),
            make_patient("p2", "Vikram Das", email="VIKRAM@clinic.in", phone="9123400002"),
        ))

    def test_empty_term_returns_everyone(self):
        assert _ids(queries.search_patients(self._state(), "  ")) == ["p1", "p2"]

    def test_name_is_case_insensitive(self):
        assert _ids(queries.search_patients(self._state(), "ASHA")) == ["p1"]

    def test_email_is_case_insensitive(self):
        assert _ids(queries.search_patients(self._state(), "vikram@")) == ["p2"]

    def test_phone_substring(self):
        assert _ids(queries.search_patients(self._state(), "00002")) == ["p2"]

    def test_no_match(self):
        assert queries.search_patients(self._state(), "zzz") == []


def test_patient_name_falls_back(two_patient_state):
    assert queries.patient_name(two_patient_state, "p2") == "Vikram Das"
    assert queries.patient_name(two_patient_state, "ghost") == queries.UNKNOWN_PATIENT


def test_patient_history_is_newest_first():
    state = ClinicState(
        patients=(make_patient("p1"),),
        appointments=(
            make_appointment("old", date=FIXED_NOW - timedelta(days=10)),
            make_appointment("new", date=FIXED_NOW + timedelta(days=1)),
            make_appointment("mid", date=FIXED_NOW),
        ),
    )
    assert _ids(queries.patient_appointments(state, "p1")) == ["new", "mid", "old"]


def test_list_appointments_filters(two_patient_state):
    assert {a.id for a in queries.list_appointments(two_patient_state, patient_id="p1")} == {"a1", "a2"}
    assert queries.list_appointments(two_patient_state, status="Cancelled") == []
    assert len(queries.list_appointments(two_patient_state, status="Scheduled")) == 3


def test_billing_search_matches_patient_or_reason():
    state = ClinicState(
        patients=(make_patient("p1", "Asha Rao"), make_patient("p2", "Vikram Das")),
        appointments=(
            make_appointment("a1", "p1", reason="Migraine"),
            make_appointment("a2", "p2", reason="Knee pain"),
        ),
    )
    assert _ids(queries.search_billing(state, "knee")) == ["a2"]
    assert _ids(queries.search_billing(state, "asha")) == ["a1"]
    assert len(queries.search_billing(state, "")) == 2


def test_prescription_search_matches_medication(two_patient_state):
    assert _ids(queries.search_prescriptions(two_patient_state, "cetiri")) == ["pr2"]
    assert _ids(queries.search_prescriptions(two_patient_state, "asha")) == ["pr1"]


def test_prescription_for_appointment(two_patient_state):
    assert queries.prescription_for_appointment(two_patient_state, "a3").id == "pr2"
    assert queries.prescription_for_appointment(two_patient_state, "a2") is None


def test_dashboard_summary():
    state = ClinicState(
        patients=(make_patient("p1"), make_patient("p2")),
        appointments=(
            make_appointment("past", total_fee=500, payments=[make_payment(500)],
                             date=FIXED_NOW - timedelta(days=3), status=AppointmentStatus.COMPLETED),
            make_appointment("later-today", total_fee=800, date=FIXED_NOW + timedelta(hours=2)),
            make_appointment("cancelled", total_fee=300, date=FIXED_NOW + timedelta(days=2),
                             status=AppointmentStatus.CANCELLED),
            make_appointment("next-week", "p2", total_fee=0, date=FIXED_NOW + timedelta(days=7)),
        ),
        prescriptions=(make_prescription(),),
    )

    summary = queries.dashboard_summary(state, FIXED_NOW)

    assert summary == {"total_patients": 2, "upcoming": 2, "today": 1, "outstanding": 1100}
