from flask import Blueprint, request, jsonify
from pydantic import BaseModel
from clinicflow.extensions import store
from clinicflow.models import AppointmentData, PaymentMethod
from clinicflow.routes.prescription import render_prescription_document
from clinicflow.services import queries
from clinicflow.utils.decorators import require_confirmation
import logging

logger = logging.getLogger(__name__)

appointment_bp = Blueprint('appointment', __name__, url_prefix='/api/appointments')


class PaymentRequest(BaseModel):
    amount: float
    method: PaymentMethod = PaymentMethod.CASH


def _appointment_to_dict(state, appointment):
    """Appointment dict with the patient's display name."""
    return {
        **appointment.to_dict(),
        'patient_name': queries.patient_name(state, appointment.patient_id),
    }


def _not_found(appointment_id):
    return jsonify({
        'success': False,
        'error': f'Appointment with ID {appointment_id} not found'
    }), 404


@appointment_bp.route('', methods=['GET'])
def list_appointments():
    """
    List appointments, newest first.
    Query params:
        patient_id: Filter by patient ID (optional)
        status: Filter by status, e.g. Scheduled (optional)
    """
    state = store.state
    appointments = queries.list_appointments(
        state,
        patient_id=request.args.get('patient_id', type=str),
        status=request.args.get('status', type=str),
    )
    return jsonify({
        'success': True,
        'data': [_appointment_to_dict(state, a) for a in appointments],
        'total': len(appointments)
    }), 200


@appointment_bp.route('/<appointment_id>', methods=['GET'])
def get_appointment(appointment_id):
    state = store.state
    appointment = state.find_appointment(appointment_id)
    if not appointment:
        return _not_found(appointment_id)
    return jsonify({'success': True, 'data': _appointment_to_dict(state, appointment)}), 200


@appointment_bp.route('', methods=['POST'])
def create_appointment():
    """
    Create a new appointment for an existing patient.
    Body: patient_id, date (required); duration, reason, notes, status,
    total_fee, vitals {temp, bp}, advice_given, follow_up_date
    """
    data = AppointmentData.model_validate(request.get_json(silent=True) or {})
    appointment = store.create_appointment(data)
    logger.info(f"Appointment {appointment.id} created for patient {appointment.patient_id}")
    return jsonify({
        'success': True,
        'data': _appointment_to_dict(store.state, appointment),
        'message': 'Appointment created successfully'
    }), 201


@appointment_bp.route('/<appointment_id>', methods=['PUT'])
def update_appointment(appointment_id):
    """
    Update an appointment. The patient and payment history are kept;
    the payment status follows the new fee.
    """
    existing = store.state.find_appointment(appointment_id)
    if not existing:
        return _not_found(appointment_id)

    body = request.get_json(silent=True) or {}
    data = AppointmentData.model_validate({**body, 'patient_id': existing.patient_id})
    appointment = store.update_appointment(appointment_id, data)
    return jsonify({
        'success': True,
        'data': _appointment_to_dict(store.state, appointment),
        'message': 'Appointment updated successfully'
    }), 200


@appointment_bp.route('/<appointment_id>', methods=['DELETE'])
@require_confirmation('Are you sure you want to delete this appointment? Its prescription will also be deleted.')
def delete_appointment(appointment_id):
    removed = store.delete_appointment(appointment_id)
    return jsonify({
        'success': True,
        'removed': removed,
        'message': 'Appointment deleted successfully'
    }), 200


@appointment_bp.route('/<appointment_id>/payments', methods=['GET'])
def list_payments(appointment_id):
    appointment = store.state.find_appointment(appointment_id)
    if not appointment:
        return _not_found(appointment_id)
    return jsonify({
        'success': True,
        'data': {
            'payment_history': [p.to_dict() for p in appointment.payment_history],
            'total_fee': appointment.total_fee,
            'paid_amount': appointment.paid_amount,
            'balance': appointment.balance,
            'payment_status': appointment.payment_status.value,
        }
    }), 200


@appointment_bp.route('/<appointment_id>/payments', methods=['POST'])
def add_payment(appointment_id):
    """
    Record a payment.
    Body: amount (0 < amount <= remaining balance), method (Cash, Card, Online, Other)
    """
    payment = PaymentRequest.model_validate(request.get_json(silent=True) or {})
    appointment = store.add_payment(appointment_id, payment.amount, payment.method)
    logger.info(f"Payment of {payment.amount} recorded for appointment {appointment_id}")
    return jsonify({
        'success': True,
        'data': _appointment_to_dict(store.state, appointment),
        'message': 'Payment recorded successfully'
    }), 201


@appointment_bp.route('/<appointment_id>/prescription/print', methods=['GET'])
def print_appointment_prescription(appointment_id):
    """
    Printable prescription of an appointment.
    Query param: inline=1 to open in the browser instead of downloading.
    """
    appointment = store.state.find_appointment(appointment_id)
    if not appointment:
        return _not_found(appointment_id)
    return render_prescription_document(appointment)
