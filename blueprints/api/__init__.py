"""
API Blueprint - Contact relay
Handles: Contact form delivery to the owner's mailbox, liveness check
"""

from flask import Blueprint

api_bp = Blueprint('api', __name__, url_prefix='/api')

from . import routes
