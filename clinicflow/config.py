import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    """Base configuration"""
    SECRET_KEY = os.getenv('SECRET_KEY') or 'dev-secret-key-change-in-production'

    # Seed data (loaded once at startup, never written back)
    SEED_DATA_DIR = os.getenv('SEED_DATA_DIR', os.path.join(os.path.dirname(__file__), 'data'))

    # Logging
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_FILE = os.getenv('LOG_FILE', 'logs/app.log')

    # Billing
    CURRENCY = os.getenv('CURRENCY', 'INR')

    # Printed on every prescription
    DOCTOR_INFO = {
        'name': os.getenv('DOCTOR_NAME', 'Dr. Anjali Mehta'),
        'qualifications': os.getenv('DOCTOR_QUALIFICATIONS', 'MBBS, MD (General Medicine)'),
        'registration': os.getenv('DOCTOR_REGISTRATION', 'Reg. No. MMC-2011-04512'),
        'phone': os.getenv('DOCTOR_PHONE', '+91 98200 11223'),
    }
    CLINIC_INFO = {
        'name': os.getenv('CLINIC_NAME', 'ClinicFlow Family Clinic'),
        'address': os.getenv('CLINIC_ADDRESS', '12 Linking Road, Bandra West, Mumbai 400050'),
        'phone': os.getenv('CLINIC_PHONE', '+91 22 2640 1122'),
        'email': os.getenv('CLINIC_EMAIL', 'care@clinicflow.example'),
        'timings': os.getenv('CLINIC_TIMINGS', 'Mon-Sat 10:00 AM - 7:00 PM'),
    }


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    TESTING = False


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False
    TESTING = False

    # Security
    SESSION_COOKIE_SECURE = False  # Set to True when using HTTPS
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'

    # Ensure SECRET_KEY is set
    SECRET_KEY = os.getenv('SECRET_KEY')

    LOG_LEVEL = os.getenv('LOG_LEVEL', 'WARNING')

    MAX_CONTENT_LENGTH = int(os.getenv('MAX_CONTENT_LENGTH', '1048576'))  # 1MB of JSON is plenty


class TestingConfig(Config):
    """Testing configuration"""
    TESTING = True
    DEBUG = True
    SECRET_KEY = 'testing-secret-key'


# Configuration mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}


def get_config():
    """Get configuration based on FLASK_ENV"""
    env = os.getenv('FLASK_ENV', 'development')
    return config.get(env, config['default'])
