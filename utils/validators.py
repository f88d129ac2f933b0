"""
Validators Module - Contact form validation shared by the site form and the relay
"""

import re

EMAIL_PATTERN = re.compile(r'^[^\s@]+@[^\s@]+\.[^\s@]+$')

CONTACT_FIELDS = ('name', 'email', 'subject', 'message')
MULTILINE_FIELDS = ('message',)

REQUIRED_MESSAGES = {
    'name': 'Name is required',
    'email': 'Email is required',
    'subject': 'Subject is required',
    'message': 'Message is required',
}

INVALID_EMAIL_MESSAGE = 'Please enter a valid email address'


def is_valid_email(value):
    """Check that a value has the shape of an email address"""
    return isinstance(value, str) and bool(EMAIL_PATTERN.match(value))


def clean_contact_data(raw):
    """
    Pull the contact fields out of a mapping. Single-line fields are
    stripped; the message body is kept as typed. Non-string values are
    treated as missing.

    Args:
        raw: Form data, JSON body or any mapping-like object (None allowed)

    Returns:
        dict: One string per contact field
    """
    raw = raw if hasattr(raw, 'get') else {}
    cleaned = {}
    for field in CONTACT_FIELDS:
        value = raw.get(field)
        if not isinstance(value, str):
            value = ''
        cleaned[field] = value if field in MULTILINE_FIELDS else value.strip()
    return cleaned


def validate_contact_form(data):
    """
    Validate cleaned contact data.

    Returns:
        dict: field -> error message, empty when the submission is valid
    """
    errors = {}
    for field in CONTACT_FIELDS:
        if not data.get(field, '').strip():
            errors[field] = REQUIRED_MESSAGES[field]

    if 'email' not in errors and not is_valid_email(data.get('email')):
        errors['email'] = INVALID_EMAIL_MESSAGE

    return errors


def has_missing_fields(errors):
    """True when any error is a required-field error"""
    return any(errors.get(field) == REQUIRED_MESSAGES[field] for field in CONTACT_FIELDS)


__all__ = [
    'EMAIL_PATTERN',
    'CONTACT_FIELDS',
    'INVALID_EMAIL_MESSAGE',
    'is_valid_email',
    'clean_contact_data',
    'validate_contact_form',
    'has_missing_fields',
]
