"""
Tests for ClinicStore: id generation, clock and error handling around dispatch().
"""
import pytest

from clinicflow.exceptions import EmptyPrescriptionError, PaymentRejected
from clinicflow.models import AppointmentData, MedicationItem, PatientData, PrescriptionData
from clinicflow.services.actions import AddPatient
from clinicflow.services.reducer import reduce
from clinicflow.services.store import ClinicStore, new_id, sequential_ids
from tests.factories import FIXED_NOW


@pytest.fixture
def store(two_patient_state):
    return ClinicStore(state=two_patient_state, id_factory=sequential_ids(start=100), clock=lambda: FIXED_NOW)


def test_new_id_is_prefixed_and_unique():
    first, second = new_id("p"), new_id("p")

    assert first.startswith("p")
    assert first != second


def test_sequential_ids_share_one_counter():
    ids = sequential_ids(start=5)
    assert [ids("p"), ids("a"), ids("p")] == ["p5", "a6", "p7"]


def test_empty_store():
    assert ClinicStore().state.counts() == {"patients": 0, "appointments": 0, "prescriptions": 0}


def test_create_patient_uses_id_factory(store):
    patient = store.create_patient(PatientData(name="  Kiran Joshi "))

    assert patient.id == "p100"
    assert patient.name == "Kiran Joshi"
    assert store.state.find_patient("p100") is not None


def test_create_appointment(store):
    appointment = store.create_appointment(AppointmentData(patient_id="p2", date=FIXED_NOW, total_fee=400))

    assert appointment.id == "a100"
    assert store.state.find_appointment(appointment.id).total_fee == 400


def test_payment_is_dated_by_the_clock(store):
    appointment = store.add_payment("a2", 200, "Online")

    payment = appointment.payment_history[-1]
    assert payment.date == FIXED_NOW
    assert payment.method.value == "Online"
    assert appointment.balance == 300


def test_rejected_payment_keeps_state(store):
    before = store.state

    with pytest.raises(PaymentRejected):
        store.add_payment("a2", 501)

    assert store.state is before


def test_save_prescription_assigns_ids_and_issue_date(store):
    data = PrescriptionData(
        appointment_id="a2",
        medications=(MedicationItem(medication="Losartan", dosage="50 mg"), MedicationItem(medication="")),
    )

    prescription = store.save_prescription(data)

    assert prescription.patient_id == "p1"
    assert prescription.date_issued == FIXED_NOW
    assert len(prescription.medications) == 1
    assert prescription.medications[0].id.startswith("m")


def test_save_prescription_updates_existing(store):
    data = PrescriptionData(appointment_id="a1", medications=(MedicationItem(medication="Ibuprofen"),))

    prescription = store.save_prescription(data, prescription_id="pr1")

    assert prescription.id == "pr1"
    assert prescription.medication_summary == "Ibuprofen"
    assert len(store.state.prescriptions) == 2


def test_blank_prescription_is_not_saved(store):
    data = PrescriptionData(appointment_id="a2", medications=(MedicationItem(medication="  "),))

    with pytest.raises(EmptyPrescriptionError):
        store.save_prescription(data)

    assert len(store.state.prescriptions) == 2


def test_delete_patient_reports_cascade(store):
    removed = store.delete_patient("p1")

    assert removed == {"patients": 1, "appointments": 2, "prescriptions": 1}


def test_delete_appointment_reports_cascade(store):
    removed = store.delete_appointment("a3")

    assert removed == {"patients": 0, "appointments": 1, "prescriptions": 1}


class _InterleavingLock:
    """Lock that lets another writer land its state just before it is acquired."""

    def __init__(self, store, pending):
        self._store = store
        self._pending = pending

    def __enter__(self):
        if self._pending is not None:
            self._store._state, self._pending = self._pending, None
        return self

    def __exit__(self, *exc):
        return False


def test_removed_counts_ignore_concurrent_writes(store):
    concurrent = reduce(store.state, AddPatient(patient_id="p50", data=PatientData(name="Walk-in")))
    store._lock = _InterleavingLock(store, concurrent)

    removed = store.delete_patient("p2")

    assert removed == {"patients": 1, "appointments": 1, "prescriptions": 1}
    assert store.state.find_patient("p50") is not None
