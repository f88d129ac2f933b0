"""
Portfolio - Main Application Entry Point
Application Factory Pattern: the site pages and the contact relay live in
separate blueprints and can be deployed together or as a relay on its own.
"""

import os
from datetime import datetime

from flask import Flask, current_app, jsonify, render_template, request
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from config import get_config
from extensions import init_mailer, init_relay_client
from utils.errors import FixtureError

from blueprints.api import api_bp
from blueprints.site import site_bp


def create_app(config_name=None, mailer=None, relay_client=None, test_config=None):
    """
    Application Factory Pattern
    Creates and configures Flask application instance

    Args:
        config_name (str): Configuration environment name (optional)
        mailer: Object with a send(OutgoingEmail) method; SMTP from config if omitted
        relay_client: Object with send_contact_form(ContactSubmission); HTTP client if omitted
        test_config (dict): Settings applied on top of the selected configuration

    Returns:
        Flask: Configured Flask application instance
    """

    app = Flask(__name__)

    # Load configuration
    app.config.from_object(get_config(config_name))
    if test_config:
        app.config.update(test_config)

    app.logger.setLevel(app.config.get('LOG_LEVEL', 'INFO'))

    # Initialize per-app services
    initialize_extensions(app, mailer=mailer, relay_client=relay_client)

    # Register blueprints
    register_blueprints(app)

    # Register error handlers
    register_error_handlers(app)

    # Register request/response hooks
    register_hooks(app)

    return app


def initialize_extensions(app, mailer=None, relay_client=None):
    """Attach the mailer and relay client to the app instance"""
    mailer = init_mailer(app, mailer)
    if getattr(mailer, 'is_configured', True):
        app.logger.info("✓ Outbound mail configured")
    else:
        app.logger.warning("✗ EMAIL_USER / EMAIL_PASS not set, contact emails will fail to send")

    # Configure CORS for the relay endpoints
    CORS(app, resources={r"/api/*": {"origins": app.config.get('CORS_ORIGINS', ['*'])}})

    if app.config.get('ENABLE_SITE', True):
        init_relay_client(app, relay_client)
        app.logger.info(f"✓ Contact form relay: {app.config.get('API_BASE_URL')}")


def register_blueprints(app):
    """Register all application blueprints"""
    app.register_blueprint(api_bp)
    if app.config.get('ENABLE_SITE', True):
        app.register_blueprint(site_bp)


def wants_json():
    """API paths, and every path when the site pages are not mounted"""
    return request.path.startswith('/api/') or 'site' not in current_app.blueprints


def register_error_handlers(app):
    """Register custom error handlers"""

    @app.errorhandler(FixtureError)
    def fixture_error(e):
        app.logger.error(f"Content fixture error: {str(e)}")
        return render_template('503.html'), 503

    @app.errorhandler(HTTPException)
    def http_error(e):
        if wants_json():
            return jsonify({'status': 'error', 'message': e.description}), e.code
        if e.code == 404:
            return render_template('404.html'), 404
        return e

    @app.errorhandler(Exception)
    def internal_server_error(e):
        app.logger.exception(f"Server Error: {str(e)}")
        if wants_json():
            return jsonify({'status': 'error', 'message': 'Internal server error'}), 500
        return render_template('500.html'), 500


def register_hooks(app):
    """Register request/response hooks and context processors"""

    @app.context_processor
    def inject_global_vars():
        return {
            'site_owner': app.config.get('SITE_OWNER'),
            'current_year': datetime.now().year,
        }

    @app.after_request
    def add_security_headers(response):
        """Add security headers to all responses"""
        response.headers['X-Content-Type-Options'] = 'nosniff'
        response.headers['X-Frame-Options'] = 'DENY'
        response.headers['Referrer-Policy'] = 'strict-origin-when-cross-origin'
        return response


# Create app instance for gunicorn
app = create_app()

if __name__ == '__main__':
    env = os.environ.get('FLASK_ENV', 'development')
    app = create_app(env)

    # Run development server
    app.run(
        host='0.0.0.0',
        port=app.config['PORT'],
        debug=(env == 'development')
    )
