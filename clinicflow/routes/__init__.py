from .health import health_bp
from .dashboard import dashboard_bp
from .patient import patient_bp
from .appointment import appointment_bp
from .prescription import prescription_bp
from .billing import billing_bp

__all__ = ['health_bp', 'dashboard_bp', 'patient_bp', 'appointment_bp', 'prescription_bp', 'billing_bp']
