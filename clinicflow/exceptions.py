"""
Domain errors raised by the record store and turned into JSON responses
by the handlers registered in create_app().
"""


class ClinicError(Exception):
    """Base class for every user-visible failure of a clinic operation."""

    status_code = 400

    def __init__(self, message):
        super().__init__(message)
        self.message = message

    def to_dict(self):
        return {'success': False, 'error': self.message}


class NotFoundError(ClinicError):
    status_code = 404


class PaymentRejected(ClinicError):
    """Payment amount outside (0, remaining balance]."""


class EmptyPrescriptionError(ClinicError):
    """Every medication line of the prescription was blank."""
