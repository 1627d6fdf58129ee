import enum


class Gender(str, enum.Enum):
    MALE = 'Male'
    FEMALE = 'Female'
    OTHER = 'Other'


class AppointmentStatus(str, enum.Enum):
    SCHEDULED = 'Scheduled'
    COMPLETED = 'Completed'
    CANCELLED = 'Cancelled'
    NO_SHOW = 'No-Show'


class PaymentStatus(str, enum.Enum):
    PAID = 'Paid'
    PARTIALLY_PAID = 'Partially Paid'
    UNPAID = 'Unpaid'


class PaymentMethod(str, enum.Enum):
    CASH = 'Cash'
    CARD = 'Card'
    ONLINE = 'Online'
    OTHER = 'Other'
