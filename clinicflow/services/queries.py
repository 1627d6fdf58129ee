"""
Read-side helpers behind the list, detail, billing and dashboard screens.
All functions take a ClinicState and never modify it.
"""
from clinicflow.models import AppointmentStatus
from clinicflow.utils.billing import total_outstanding

UNKNOWN_PATIENT = 'Unknown Patient'


def patient_name(state, patient_id):
    patient = state.find_patient(patient_id)
    return patient.name if patient else UNKNOWN_PATIENT


def _newest_first(records, attr):
    return sorted(records, key=lambda r: getattr(r, attr), reverse=True)


def search_patients(state, term=''):
    """Match name or email case-insensitively, phone as a plain substring."""
    needle = (term or '').strip().lower()
    if not needle:
        return list(state.patients)
    return [
        p for p in state.patients
        if needle in p.name.lower() or needle in p.email.lower() or needle in p.phone
    ]


def patient_appointments(state, patient_id):
    return _newest_first((a for a in state.appointments if a.patient_id == patient_id), 'date')


def patient_prescriptions(state, patient_id):
    return _newest_first((pr for pr in state.prescriptions if pr.patient_id == patient_id), 'date_issued')


def list_appointments(state, patient_id=None, status=None):
    appointments = state.appointments
    if patient_id:
        appointments = (a for a in appointments if a.patient_id == patient_id)
    if status:
        appointments = (a for a in appointments if a.status.value == status)
    return _newest_first(appointments, 'date')


def search_billing(state, term=''):
    """Appointments whose patient name or reason contains the term."""
    needle = (term or '').strip().lower()
    rows = [
        a for a in state.appointments
        if needle in patient_name(state, a.patient_id).lower() or needle in a.reason.lower()
    ]
    return _newest_first(rows, 'date')


def search_prescriptions(state, term=''):
    """Prescriptions whose patient name or any medication name contains the term."""
    needle = (term or '').strip().lower()
    rows = []
    for pr in state.prescriptions:
        medications_text = ' '.join(m.medication for m in pr.medications).lower()
        if needle in patient_name(state, pr.patient_id).lower() or needle in medications_text:
            rows.append(pr)
    return _newest_first(rows, 'date_issued')


def prescription_for_appointment(state, appointment_id):
    return next((pr for pr in state.prescriptions if pr.appointment_id == appointment_id), None)


def dashboard_summary(state, now):
    """
    Counters for the dashboard cards.

    Args:
        state: ClinicState
        now: timezone-aware datetime; "today" is its calendar day

    Returns:
        dict: total_patients, upcoming, today, outstanding
    """
    upcoming = sum(
        1 for a in state.appointments
        if a.date > now and a.status == AppointmentStatus.SCHEDULED
    )
    today = sum(1 for a in state.appointments if a.date.astimezone(now.tzinfo).date() == now.date())
    return {
        'total_patients': len(state.patients),
        'upcoming': upcoming,
        'today': today,
        'outstanding': total_outstanding(state.appointments),
    }
