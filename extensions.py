"""
Extensions Module - Per-app service objects
Services are attached to the app in create_app() and looked up through
current_app, so tests can hand the factory their own instances.
"""

from flask import current_app

MAILER_KEY = 'mailer'
RELAY_CLIENT_KEY = 'relay_client'


def init_mailer(app, mailer=None):
    """Attach the outbound mailer to the app, building an SMTP one from config if none is given"""
    if mailer is None:
        from utils.mail import SmtpMailer
        mailer = SmtpMailer.from_config(app.config)
    app.extensions[MAILER_KEY] = mailer
    return mailer


def init_relay_client(app, relay_client=None):
    """Attach the contact relay client used by the site's contact form"""
    if relay_client is None:
        from utils.relay_client import RelayClient
        relay_client = RelayClient.from_config(app.config)
    app.extensions[RELAY_CLIENT_KEY] = relay_client
    return relay_client


def get_mailer():
    """Return the mailer bound to the current app"""
    return current_app.extensions[MAILER_KEY]


def get_relay_client():
    """Return the relay client bound to the current app"""
    return current_app.extensions[RELAY_CLIENT_KEY]


__all__ = ['init_mailer', 'init_relay_client', 'get_mailer', 'get_relay_client']
