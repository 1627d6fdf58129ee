"""
Builders for ClinicState values used across the unit tests.
"""
from datetime import datetime, timezone

from clinicflow.models import Appointment, MedicationItem, Patient, Payment, Prescription

# Same calendar day as seed appointment a6, before the 2030 follow-up
FIXED_NOW = datetime(2024, 8, 12, 9, 0, tzinfo=timezone.utc)


def make_patient(patient_id="p1", name="Test Patient", **fields):
    return Patient(id=patient_id, name=name, **fields)


def make_payment(amount, payment_id="pay1", method="Cash"):
    return Payment(id=payment_id, date=FIXED_NOW, amount=amount, method=method)


def make_appointment(appointment_id="a1", patient_id="p1", total_fee=1000, payments=(), **fields):
    fields.setdefault("date", FIXED_NOW)
    return Appointment(
        id=appointment_id,
        patient_id=patient_id,
        total_fee=total_fee,
        payment_history=tuple(payments),
        **fields,
    )


def make_prescription(prescription_id="pr1", patient_id="p1", appointment_id="a1", medications=("Paracetamol",)):
    return Prescription(
        id=prescription_id,
        patient_id=patient_id,
        appointment_id=appointment_id,
        medications=tuple(
            MedicationItem(id=f"m{idx}", medication=name, dosage="500 mg")
            for idx, name in enumerate(medications, start=1)
        ),
        date_issued=FIXED_NOW,
    )
