from flask import Flask, jsonify
from pydantic import ValidationError
from .exceptions import ClinicError
from .extensions import store
import logging
import os

# Setup basic logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s %(levelname)s: %(message)s'
)
logger = logging.getLogger(__name__)


def create_app(config_name=None):
    """Create Flask application factory"""
    app = Flask(__name__)

    # Load configuration
    if config_name:
        from clinicflow.config import config
        app.config.from_object(config.get(config_name, config['default']))
    else:
        from clinicflow.config import get_config
        app.config.from_object(get_config())

    # Ensure production mode if FLASK_ENV is production
    if os.getenv('FLASK_ENV') == 'production':
        app.config['DEBUG'] = False
        app.config['TESTING'] = False

    if not app.debug and app.config.get('SECRET_KEY') in (None, '', 'dev-secret-key-change-in-production'):
        raise ValueError("SECRET_KEY environment variable must be set in production and must not be the default value")

    logging.getLogger('clinicflow').setLevel(app.config.get('LOG_LEVEL', 'INFO'))

    # Load seed data into the record store
    store.init_app(app)

    from clinicflow.utils.cors import init_cors
    init_cors(app)

    from clinicflow.middleware import setup_middleware
    setup_middleware(app)

    @app.errorhandler(ClinicError)
    def handle_clinic_error(e):
        logger.warning(f"{type(e).__name__}: {e.message}")
        return jsonify(e.to_dict()), e.status_code

    @app.errorhandler(ValidationError)
    def handle_validation_error(e):
        errors = [
            {'field': '.'.join(str(part) for part in err['loc']), 'message': err['msg']}
            for err in e.errors()
        ]
        return jsonify({
            'success': False,
            'error': 'Invalid request data',
            'details': errors
        }), 400

    @app.errorhandler(404)
    def not_found(error):
        return jsonify({
            'success': False,
            'error': 'Endpoint not found'
        }), 404

    @app.errorhandler(405)
    def method_not_allowed(error):
        return jsonify({
            'success': False,
            'error': 'Method not allowed'
        }), 405

    @app.errorhandler(500)
    def internal_error(error):
        logger.error(f"Internal Server Error: {error}", exc_info=True)
        return jsonify({
            'success': False,
            'error': 'Internal server error. Check server logs for details.'
        }), 500

    # Setup logging
    if not app.debug and not app.testing:
        from logging.handlers import RotatingFileHandler

        log_file = app.config['LOG_FILE']
        log_dir = os.path.dirname(log_file)
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir)

        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=10240000,
            backupCount=10
        )
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]'
        ))
        file_handler.setLevel(logging.INFO)
        app.logger.addHandler(file_handler)
        app.logger.setLevel(logging.INFO)
        app.logger.info('Application startup')

    # Register blueprints
    from .routes import health_bp, dashboard_bp, patient_bp, appointment_bp, prescription_bp, billing_bp
    app.register_blueprint(health_bp)  # Register health check first
    app.register_blueprint(dashboard_bp)
    app.register_blueprint(patient_bp)
    app.register_blueprint(appointment_bp)
    app.register_blueprint(prescription_bp)
    app.register_blueprint(billing_bp)

    return app
