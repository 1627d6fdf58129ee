from typing import Optional, Tuple

from .appointment import Appointment
from .base import ClinicModel
from .patient import Patient
from .prescription import Prescription


class ClinicState(ClinicModel):
    """Everything the clinic knows, as one immutable value."""

    patients: Tuple[Patient, ...] = ()
    appointments: Tuple[Appointment, ...] = ()
    prescriptions: Tuple[Prescription, ...] = ()

    def find_patient(self, patient_id) -> Optional[Patient]:
        return next((p for p in self.patients if p.id == patient_id), None)

    def find_appointment(self, appointment_id) -> Optional[Appointment]:
        return next((a for a in self.appointments if a.id == appointment_id), None)

    def find_prescription(self, prescription_id) -> Optional[Prescription]:
        return next((pr for pr in self.prescriptions if pr.id == prescription_id), None)

    def counts(self):
        return {
            'patients': len(self.patients),
            'appointments': len(self.appointments),
            'prescriptions': len(self.prescriptions),
        }
