"""
API Routes - Contact relay
The relay trusts nothing from the caller: every submission is validated
again here before anything is handed to the mail provider.
"""

from flask import current_app, jsonify, request

from extensions import get_mailer
from models import ContactSubmission
from utils.errors import MailDeliveryError
from utils.mail import build_contact_email
from utils.validators import clean_contact_data, has_missing_fields, validate_contact_form
from . import api_bp

SEND_FAILED_MESSAGE = 'Failed to send message. Please try again later.'


def error_response(message, status_code, errors=None):
    body = {'status': 'error', 'message': message}
    if errors:
        body['errors'] = errors
    return jsonify(body), status_code


@api_bp.route('/contact', methods=['POST'])
def contact():
    """Validate a submission and forward it to the owner's mailbox"""
    data = clean_contact_data(request.get_json(silent=True))
    errors = validate_contact_form(data)

    if errors:
        message = 'All fields are required' if has_missing_fields(errors) else 'Invalid email address'
        current_app.logger.info(f"Contact submission rejected: {', '.join(sorted(errors))}")
        return error_response(message, 400, errors)

    submission = ContactSubmission(**data)
    email = build_contact_email(
        submission,
        sender=current_app.config.get('EMAIL_USER'),
        recipient=current_app.config.get('CONTACT_RECIPIENT'),
    )

    try:
        get_mailer().send(email)
    except MailDeliveryError as e:
        current_app.logger.error(f"Error sending contact email: {str(e)}")
        return error_response(SEND_FAILED_MESSAGE, 500)
    except Exception:
        current_app.logger.exception("Unexpected error sending contact email")
        return error_response(SEND_FAILED_MESSAGE, 500)

    return jsonify({'status': 'success', 'message': 'Message sent successfully!'}), 200


@api_bp.route('/health')
def health():
    """Liveness check, independent of the mail provider"""
    return jsonify({'status': 'ok', 'message': 'Server is running'}), 200
