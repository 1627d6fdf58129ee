"""
Billing Utilities
Paid-to-date, outstanding balance and payment status of an appointment.

Nothing here is cached: the values are recomputed from the fee and the
payment history every time an appointment is read.
"""
import logging

from clinicflow.exceptions import PaymentRejected
from clinicflow.models.enums import PaymentStatus
from clinicflow.utils.formatting import format_currency

logger = logging.getLogger(__name__)


def paid_amount(payments):
    """
    Sum of the amounts of a payment history.

    Args:
        payments: iterable of objects with an ``amount`` attribute

    Returns:
        float: total paid, rounded to cents
    """
    return round(sum(p.amount for p in payments or ()), 2)


def calculate_payment_status(total_fee, paid):
    """
    Tri-state payment status.

    Paid needs a positive fee, so a free appointment stays Unpaid whatever
    was paid against it.
    """
    if paid >= total_fee and total_fee > 0:
        return PaymentStatus.PAID
    if 0 < paid < total_fee:
        return PaymentStatus.PARTIALLY_PAID
    return PaymentStatus.UNPAID


def is_whole_cents(value):
    """True when the amount has no fraction below one cent."""
    return abs(value * 100 - round(value * 100)) < 1e-6


def outstanding_balance(total_fee, payments):
    return round(total_fee - paid_amount(payments), 2)


def validate_payment_amount(amount, balance):
    """
    Reject a payment outside (0, balance], or one with a fraction of a cent.

    Balances are kept in whole cents.

    Raises:
        PaymentRejected: with the message shown to the user
    """
    if amount is None or not 0 < amount <= balance:
        logger.warning(f"Payment of {amount} rejected, remaining balance {balance}")
        raise PaymentRejected(
            "Payment amount must be greater than 0 and no more than the "
            f"remaining balance of {format_currency(balance)}."
        )
    if not is_whole_cents(amount):
        logger.warning(f"Payment of {amount} rejected, not a whole number of cents")
        raise PaymentRejected("Payment amount cannot include fractions of a cent.")


def total_outstanding(appointments):
    """Dashboard figure: what is still owed across all appointments."""
    return round(sum(outstanding_balance(a.total_fee, a.payment_history) for a in appointments), 2)
