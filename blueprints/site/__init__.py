"""
Site Blueprint - Public portfolio pages
Handles: Home, About, Projects, Certificates, Contact form
"""

from flask import Blueprint

site_bp = Blueprint('site', __name__, url_prefix='')

from . import routes
