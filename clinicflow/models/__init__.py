from .enums import AppointmentStatus, Gender, PaymentMethod, PaymentStatus
from .patient import Patient, PatientData
from .appointment import Appointment, AppointmentData, Payment, Vitals
from .prescription import MedicationItem, Prescription, PrescriptionData
from .state import ClinicState

__all__ = [
    "AppointmentStatus", "Gender", "PaymentMethod", "PaymentStatus",
    "Patient", "PatientData",
    "Appointment", "AppointmentData", "Payment", "Vitals",
    "MedicationItem", "Prescription", "PrescriptionData",
    "ClinicState",
]
