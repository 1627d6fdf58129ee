"""
CORS for the JSON API. Browsers reading the prescription PDF need
Content-Disposition exposed to get the download name.
"""
from flask_cors import CORS


def init_cors(app):
    CORS(app,
         resources={r"/api/*": {"origins": "*"}, r"/health/*": {"origins": "*"}},
         methods=["GET", "POST", "PUT", "DELETE"],
         expose_headers=["Content-Disposition"])
    app.logger.info("CORS enabled for /api and /health")
