"""
Utils Package - Centralized utility modules initialization
"""

from .errors import MailDeliveryError, RelayError, FixtureError
from .validators import (
    EMAIL_PATTERN,
    is_valid_email,
    clean_contact_data,
    validate_contact_form,
    has_missing_fields
)
from .mail import OutgoingEmail, SmtpMailer, build_contact_email, message_to_html
from .relay_client import RelayClient
from .data import (
    load_fixture,
    load_profile,
    load_projects,
    load_certificates,
    filter_projects,
    project_technologies,
    filter_certificates,
    certificate_categories
)

__all__ = [
    # Errors
    'MailDeliveryError',
    'RelayError',
    'FixtureError',

    # Validation
    'EMAIL_PATTERN',
    'is_valid_email',
    'clean_contact_data',
    'validate_contact_form',
    'has_missing_fields',

    # Mail
    'OutgoingEmail',
    'SmtpMailer',
    'build_contact_email',
    'message_to_html',

    # Relay transport
    'RelayClient',

    # Data
    'load_fixture',
    'load_profile',
    'load_projects',
    'load_certificates',
    'filter_projects',
    'project_technologies',
    'filter_certificates',
    'certificate_categories'
]
