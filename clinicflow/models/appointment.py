from typing import Optional, Tuple

from pydantic import Field, computed_field, field_validator

from clinicflow.utils import billing
from .base import ClinicModel, UtcDatetime
from .enums import AppointmentStatus, PaymentMethod, PaymentStatus


class Vitals(ClinicModel):
    temp: str = ''  # e.g. "36 C"
    bp: str = ''    # e.g. "120/80 mmHg"


class Payment(ClinicModel):
    """A single payment against an appointment. Never edited once recorded."""

    id: str
    date: UtcDatetime
    amount: float
    method: PaymentMethod = PaymentMethod.CASH


class AppointmentData(ClinicModel):
    """Editable appointment fields, as submitted by the appointment form."""

    patient_id: str
    date: UtcDatetime
    duration: int = Field(default=30, ge=0)  # minutes
    reason: str = ''
    notes: str = ''
    status: AppointmentStatus = AppointmentStatus.SCHEDULED
    total_fee: float = Field(default=0, ge=0)
    vitals: Optional[Vitals] = None
    advice_given: Optional[str] = None
    follow_up_date: Optional[UtcDatetime] = None

    @field_validator('total_fee')
    @classmethod
    def fee_in_whole_cents(cls, value):
        if not billing.is_whole_cents(value):
            raise ValueError('Fee cannot include fractions of a cent')
        return value


class Appointment(AppointmentData):
    id: str
    payment_history: Tuple[Payment, ...] = ()

    @computed_field
    @property
    def paid_amount(self) -> float:
        return billing.paid_amount(self.payment_history)

    @computed_field
    @property
    def balance(self) -> float:
        return billing.outstanding_balance(self.total_fee, self.payment_history)

    @computed_field
    @property
    def payment_status(self) -> PaymentStatus:
        return billing.calculate_payment_status(self.total_fee, self.paid_amount)

    def __repr__(self):
        return f"<Appointment {self.id} - Patient: {self.patient_id} on {self.date.isoformat()}>"
