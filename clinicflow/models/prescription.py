from typing import Tuple

from pydantic import computed_field

from .base import ClinicModel, UtcDatetime


class MedicationItem(ClinicModel):
    """One line of a prescription. A line without a medication name is blank."""

    id: str = ''
    medication: str = ''
    dosage: str = ''      # e.g. "500 mg"
    frequency: str = ''   # e.g. "1-0-1"
    duration: str = ''    # e.g. "5 days"
    instructions: str = ''

    @property
    def is_blank(self):
        return not self.medication.strip()


class PrescriptionData(ClinicModel):
    """Fields submitted by the prescription form; the patient comes from the appointment."""

    appointment_id: str
    medications: Tuple[MedicationItem, ...] = ()


class Prescription(ClinicModel):
    """
    Prescription issued for exactly one appointment.

    Supports any number of medication lines; the list screen shows the
    first one plus a "(+N more)" counter.
    """

    id: str
    patient_id: str
    appointment_id: str
    medications: Tuple[MedicationItem, ...] = ()
    date_issued: UtcDatetime

    @computed_field
    @property
    def medication_summary(self) -> str:
        if not self.medications:
            return 'N/A'
        summary = self.medications[0].medication or 'N/A'
        if len(self.medications) > 1:
            summary += f" (+{len(self.medications) - 1} more)"
        return summary

    def __repr__(self):
        return f"<Prescription {self.id} - Patient: {self.patient_id}>"
