"""
ClinicStore - owner of the current ClinicState.

The store is the only impure piece of the record layer: it generates ids,
reads the clock, and swaps in the state returned by the reducer. Every
mutation goes through dispatch().
"""
import itertools
import logging
import threading
import uuid
from datetime import datetime, timezone

from clinicflow.models import ClinicState, Payment, PrescriptionData
from .actions import (
    AddAppointment,
    AddPatient,
    AddPayment,
    AddPrescription,
    DeleteAppointment,
    DeletePatient,
    DeletePrescription,
    UpdateAppointment,
    UpdatePatient,
    UpdatePrescription,
)
from .reducer import reduce

logger = logging.getLogger(__name__)


def new_id(prefix):
    return f"{prefix}{uuid.uuid4().hex}"


def sequential_ids(start=1):
    """Id factory handing out p1, p2, a3, ... from one monotonic counter."""
    counter = itertools.count(start)

    def factory(prefix):
        return f"{prefix}{next(counter)}"
    return factory


def utcnow():
    return datetime.now(timezone.utc)


class ClinicStore:
    def __init__(self, state=None, id_factory=None, clock=None):
        self._state = state if state is not None else ClinicState()
        self._lock = threading.Lock()
        self.id_factory = id_factory or new_id
        self.clock = clock or utcnow

    def init_app(self, app):
        """Load the seed data configured for this app."""
        from clinicflow.seeds import load_seed_state

        self.reset(load_seed_state(app.config['SEED_DATA_DIR']))
        app.extensions['clinic_store'] = self

    @property
    def state(self) -> ClinicState:
        return self._state

    def reset(self, state):
        with self._lock:
            self._state = state
        logger.info("Store loaded: %s", state.counts())

    def _swap(self, action):
        # Returns (previous, new) from the same critical section
        with self._lock:
            previous = self._state
            self._state = reduce(previous, action)
            new_state = self._state
        logger.info("%s applied", type(action).__name__)
        return previous, new_state

    def dispatch(self, action) -> ClinicState:
        """Apply an action; on error the current state is kept."""
        return self._swap(action)[1]

    def _removed(self, action):
        before, after = (s.counts() for s in self._swap(action))
        return {key: before[key] - after[key] for key in before}

    # --- Patients ---

    def create_patient(self, data):
        patient_id = self.id_factory('p')
        state = self.dispatch(AddPatient(patient_id=patient_id, data=data))
        return state.find_patient(patient_id)

    def update_patient(self, patient_id, data):
        state = self.dispatch(UpdatePatient(patient_id=patient_id, data=data))
        return state.find_patient(patient_id)

    def delete_patient(self, patient_id):
        """Delete a patient with their appointments and prescriptions; returns what was removed."""
        removed = self._removed(DeletePatient(patient_id=patient_id))
        logger.info(f"Patient {patient_id} deleted, cascade removed {removed}")
        return removed

    # --- Appointments ---

    def create_appointment(self, data):
        appointment_id = self.id_factory('a')
        state = self.dispatch(AddAppointment(appointment_id=appointment_id, data=data))
        return state.find_appointment(appointment_id)

    def update_appointment(self, appointment_id, data):
        state = self.dispatch(UpdateAppointment(appointment_id=appointment_id, data=data))
        return state.find_appointment(appointment_id)

    def delete_appointment(self, appointment_id):
        return self._removed(DeleteAppointment(appointment_id=appointment_id))

    def add_payment(self, appointment_id, amount, method='Cash'):
        payment = Payment(id=self.id_factory('pay'), date=self.clock(), amount=amount, method=method)
        state = self.dispatch(AddPayment(appointment_id=appointment_id, payment=payment))
        return state.find_appointment(appointment_id)

    # --- Prescriptions ---

    def _with_medication_ids(self, data):
        medications = tuple(
            m if m.id else m.model_copy(update={'id': self.id_factory('m')})
            for m in data.medications
        )
        return PrescriptionData(appointment_id=data.appointment_id, medications=medications)

    def save_prescription(self, data, prescription_id=None):
        """Create a prescription, or replace the medications of an existing one."""
        data = self._with_medication_ids(data)
        if prescription_id:
            action = UpdatePrescription(prescription_id=prescription_id, data=data)
        else:
            prescription_id = self.id_factory('pr')
            action = AddPrescription(prescription_id=prescription_id, data=data, date_issued=self.clock())
        return self.dispatch(action).find_prescription(prescription_id)

    def delete_prescription(self, prescription_id):
        self.dispatch(DeletePrescription(prescription_id=prescription_id))
