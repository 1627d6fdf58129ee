"""
WSGI entry point for production deployment
Used by Gunicorn, uWSGI, and other WSGI servers
"""
import os

from clinicflow import create_app

# Served apps default to the production config
application = app = create_app(os.getenv('FLASK_ENV', 'production'))
