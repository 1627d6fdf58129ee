from typing import Annotated, Optional

from pydantic import StringConstraints

from .base import ClinicModel
from .enums import Gender

Name = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class PatientData(ClinicModel):
    """Editable patient fields, as submitted by the patient form."""

    name: Name
    email: str = ''
    phone: str = ''
    dob: Optional[str] = None  # kept as entered; formatted as "Invalid Date" if unparseable
    address: str = ''
    gender: Gender = Gender.OTHER
    medical_history: str = ''
    allergies: str = ''


class Patient(PatientData):
    id: str

    def __repr__(self):
        return f"<Patient {self.name} ({self.id})>"
