from flask import Blueprint, current_app, request, jsonify
from clinicflow.extensions import store
from clinicflow.services import queries
from clinicflow.utils.billing import total_outstanding
from clinicflow.utils.formatting import format_currency

billing_bp = Blueprint('billing', __name__, url_prefix='/api/billing')


@billing_bp.route('', methods=['GET'])
def list_billing():
    """
    Billing rows, newest first: fee, paid, balance and status per appointment.
    Query params: search (patient name or reason)
    """
    state = store.state
    appointments = queries.search_billing(state, request.args.get('search', '', type=str))
    currency = current_app.config['CURRENCY']
    rows = [{
        'appointment_id': a.id,
        'patient_id': a.patient_id,
        'patient_name': queries.patient_name(state, a.patient_id),
        'date': a.date.isoformat(),
        'reason': a.reason,
        'total_fee': a.total_fee,
        'paid_amount': a.paid_amount,
        'balance': a.balance,
        'payment_status': a.payment_status.value,
        'can_add_payment': a.balance > 0,
        'payment_history': [p.to_dict() for p in a.payment_history],
    } for a in appointments]

    outstanding = total_outstanding(appointments)
    return jsonify({
        'success': True,
        'data': rows,
        'total': len(rows),
        'outstanding': outstanding,
        'outstanding_display': format_currency(outstanding, currency)
    }), 200
