"""
Pure state transitions for the clinic records.

reduce(state, action) never mutates its input. It either returns the next
state or raises a ClinicError, in which case the caller keeps the prior
state. derive() runs after every transition and restores the invariants
that depend on more than one collection.
"""
from functools import singledispatch

from clinicflow.exceptions import EmptyPrescriptionError, NotFoundError
from clinicflow.models import Appointment, ClinicState, Patient, Prescription
from clinicflow.utils.billing import validate_payment_amount
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


def reduce(state: ClinicState, action) -> ClinicState:
    return derive(_apply(action, state))


def derive(state: ClinicState) -> ClinicState:
    """Drop appointments and prescriptions whose patient no longer exists."""
    patient_ids = {p.id for p in state.patients}
    appointments = tuple(a for a in state.appointments if a.patient_id in patient_ids)
    prescriptions = tuple(pr for pr in state.prescriptions if pr.patient_id in patient_ids)
    if len(appointments) == len(state.appointments) and len(prescriptions) == len(state.prescriptions):
        return state
    return state.model_copy(update={'appointments': appointments, 'prescriptions': prescriptions})


def _replace(records, record):
    return tuple(record if r.id == record.id else r for r in records)


def _require_patient(state, patient_id):
    patient = state.find_patient(patient_id)
    if patient is None:
        raise NotFoundError(f"Patient with ID {patient_id} not found")
    return patient


def _require_appointment(state, appointment_id, message=None):
    appointment = state.find_appointment(appointment_id)
    if appointment is None:
        raise NotFoundError(message or f"Appointment with ID {appointment_id} not found")
    return appointment


def _require_prescription(state, prescription_id):
    prescription = state.find_prescription(prescription_id)
    if prescription is None:
        raise NotFoundError(f"Prescription with ID {prescription_id} not found")
    return prescription


def _clean_medications(medications):
    cleaned = tuple(m for m in medications if not m.is_blank)
    if not cleaned:
        raise EmptyPrescriptionError("At least one medication is required. The prescription was not saved.")
    return cleaned


@singledispatch
def _apply(action, state):
    raise TypeError(f"Unknown action: {type(action).__name__}")


# --- Patients ---

@_apply.register
def _(action: AddPatient, state):
    patient = Patient(id=action.patient_id, **action.data.model_dump())
    return state.model_copy(update={'patients': state.patients + (patient,)})


@_apply.register
def _(action: UpdatePatient, state):
    _require_patient(state, action.patient_id)
    patient = Patient(id=action.patient_id, **action.data.model_dump())
    return state.model_copy(update={'patients': _replace(state.patients, patient)})


@_apply.register
def _(action: DeletePatient, state):
    _require_patient(state, action.patient_id)
    # Appointments and prescriptions go in derive()
    patients = tuple(p for p in state.patients if p.id != action.patient_id)
    return state.model_copy(update={'patients': patients})


# --- Appointments ---

@_apply.register
def _(action: AddAppointment, state):
    _require_patient(state, action.data.patient_id)
    appointment = Appointment(id=action.appointment_id, **action.data.model_dump())
    return state.model_copy(update={'appointments': state.appointments + (appointment,)})


@_apply.register
def _(action: UpdateAppointment, state):
    existing = _require_appointment(state, action.appointment_id)
    fields = action.data.model_dump()
    # Owner and payment history are not editable from the appointment form
    fields['patient_id'] = existing.patient_id
    appointment = Appointment(id=existing.id, payment_history=existing.payment_history, **fields)
    return state.model_copy(update={'appointments': _replace(state.appointments, appointment)})


@_apply.register
def _(action: DeleteAppointment, state):
    _require_appointment(state, action.appointment_id)
    appointments = tuple(a for a in state.appointments if a.id != action.appointment_id)
    prescriptions = tuple(pr for pr in state.prescriptions if pr.appointment_id != action.appointment_id)
    return state.model_copy(update={'appointments': appointments, 'prescriptions': prescriptions})


@_apply.register
def _(action: AddPayment, state):
    appointment = _require_appointment(state, action.appointment_id)
    validate_payment_amount(action.payment.amount, appointment.balance)
    updated = appointment.model_copy(
        update={'payment_history': appointment.payment_history + (action.payment,)}
    )
    return state.model_copy(update={'appointments': _replace(state.appointments, updated)})


# --- Prescriptions ---

@_apply.register
def _(action: AddPrescription, state):
    appointment = _require_appointment(state, action.data.appointment_id, "Selected appointment not found.")
    prescription = Prescription(
        id=action.prescription_id,
        patient_id=appointment.patient_id,
        appointment_id=appointment.id,
        medications=_clean_medications(action.data.medications),
        date_issued=action.date_issued,
    )
    return state.model_copy(update={'prescriptions': state.prescriptions + (prescription,)})


@_apply.register
def _(action: UpdatePrescription, state):
    existing = _require_prescription(state, action.prescription_id)
    appointment = _require_appointment(state, action.data.appointment_id, "Selected appointment not found.")
    prescription = existing.model_copy(update={
        'patient_id': appointment.patient_id,
        'appointment_id': appointment.id,
        'medications': _clean_medications(action.data.medications),
    })
    return state.model_copy(update={'prescriptions': _replace(state.prescriptions, prescription)})


@_apply.register
def _(action: DeletePrescription, state):
    _require_prescription(state, action.prescription_id)
    prescriptions = tuple(pr for pr in state.prescriptions if pr.id != action.prescription_id)
    return state.model_copy(update={'prescriptions': prescriptions})
