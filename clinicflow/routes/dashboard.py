from flask import Blueprint, current_app, jsonify
from clinicflow.extensions import store
from clinicflow.services import queries
from clinicflow.utils.formatting import format_currency

dashboard_bp = Blueprint('dashboard', __name__, url_prefix='/api/dashboard')


@dashboard_bp.route('', methods=['GET'])
def dashboard():
    """Total patients, upcoming and today's appointments, outstanding fees."""
    summary = queries.dashboard_summary(store.state, store.clock())
    summary['outstanding_display'] = format_currency(summary['outstanding'], current_app.config['CURRENCY'])
    return jsonify({'success': True, 'data': summary}), 200
