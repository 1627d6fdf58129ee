"""
Actions understood by the reducer.

An action carries everything the update needs, including freshly generated
ids and timestamps, so applying it is a pure function of (state, action).
"""
from clinicflow.models import AppointmentData, PatientData, Payment, PrescriptionData
from clinicflow.models.base import ClinicModel, UtcDatetime


class AddPatient(ClinicModel):
    patient_id: str
    data: PatientData


class UpdatePatient(ClinicModel):
    patient_id: str
    data: PatientData


class DeletePatient(ClinicModel):
    patient_id: str


class AddAppointment(ClinicModel):
    appointment_id: str
    data: AppointmentData


class UpdateAppointment(ClinicModel):
    appointment_id: str
    data: AppointmentData


class DeleteAppointment(ClinicModel):
    appointment_id: str


class AddPayment(ClinicModel):
    appointment_id: str
    payment: Payment


class AddPrescription(ClinicModel):
    prescription_id: str
    data: PrescriptionData
    date_issued: UtcDatetime


class UpdatePrescription(ClinicModel):
    prescription_id: str
    data: PrescriptionData


class DeletePrescription(ClinicModel):
    prescription_id: str
