"""
Health check endpoints for monitoring and load balancers
"""
from flask import Blueprint, jsonify
from clinicflow.extensions import store
from datetime import datetime, timezone

health_bp = Blueprint('health', __name__, url_prefix='/health')


@health_bp.route('', methods=['GET'])
@health_bp.route('/ping', methods=['GET'])
def health_check():
    """Basic health check"""
    return jsonify({
        'status': 'healthy',
        'timestamp': datetime.now(timezone.utc).isoformat(),
        'service': 'clinicflow'
    }), 200


@health_bp.route('/ready', methods=['GET'])
def readiness_check():
    """Readiness check - reports what the record store holds"""
    return jsonify({
        'status': 'ready',
        'records': store.state.counts(),
        'timestamp': datetime.now(timezone.utc).isoformat()
    }), 200


@health_bp.route('/live', methods=['GET'])
def liveness_check():
    """Liveness check for containers"""
    return jsonify({
        'status': 'alive',
        'timestamp': datetime.now(timezone.utc).isoformat()
    }), 200
