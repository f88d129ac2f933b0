"""
Mail Module - Builds the contact notification email and sends it over SMTP
"""

import re
import smtplib
from dataclasses import dataclass
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText

from flask import current_app
from markupsafe import escape

from .errors import MailDeliveryError

SUBJECT_PREFIX = 'Portfolio Contact: '
LINE_BREAK = re.compile(r'\r\n|\r|\n')


@dataclass
class OutgoingEmail:
    """A fully addressed email ready to hand to a mailer"""
    sender: str
    recipient: str
    reply_to: str
    subject: str
    html: str


def message_to_html(text):
    """Escape a plain-text message and turn every line break into <br>"""
    return LINE_BREAK.sub('<br>', str(escape(text)))


def build_contact_email(submission, sender, recipient):
    """
    Build the notification sent to the site owner for one contact submission.

    Args:
        submission (ContactSubmission): Validated submission
        sender (str): Account the mail is sent from
        recipient (str): Owner mailbox receiving the notification

    Returns:
        OutgoingEmail: Message with Reply-To set to the visitor
    """
    html = (
        "<h2>New Contact Form Submission</h2>\n"
        f"<p><strong>Name:</strong> {escape(submission.name)}</p>\n"
        f"<p><strong>Email:</strong> {escape(submission.email)}</p>\n"
        f"<p><strong>Subject:</strong> {escape(submission.subject)}</p>\n"
        "<p><strong>Message:</strong></p>\n"
        f"<p>{message_to_html(submission.message)}</p>\n"
    )
    return OutgoingEmail(
        sender=sender,
        recipient=recipient,
        reply_to=submission.email,
        subject=f"{SUBJECT_PREFIX}{submission.subject}",
        html=html,
    )


class SmtpMailer:
    """Sends OutgoingEmail messages through an authenticated SMTP account"""

    def __init__(self, host, port, username, password, use_tls=True):
        self.host = host
        self.port = int(port)
        self.username = username
        self.password = password
        self.use_tls = use_tls

    @classmethod
    def from_config(cls, config):
        return cls(
            host=config.get('SMTP_HOST'),
            port=config.get('SMTP_PORT', 587),
            username=config.get('EMAIL_USER'),
            password=config.get('EMAIL_PASS'),
            use_tls=config.get('SMTP_USE_TLS', True),
        )

    @property
    def is_configured(self):
        return all([self.host, self.port, self.username, self.password])

    def build_mime(self, email):
        msg = MIMEMultipart('alternative')
        msg['Subject'] = email.subject
        msg['From'] = email.sender
        msg['To'] = email.recipient
        msg['Reply-To'] = email.reply_to
        msg.attach(MIMEText(email.html, 'html', 'utf-8'))
        return msg

    def send(self, email):
        """
        Deliver one message. Blocks until the SMTP server accepts or rejects it.

        Raises:
            MailDeliveryError: credentials missing, auth failure, network
                failure or provider rejection
        """
        if not self.is_configured:
            raise MailDeliveryError('SMTP credentials are not configured')

        msg = self.build_mime(email)
        try:
            with smtplib.SMTP(self.host, self.port) as server:
                if self.use_tls:
                    server.starttls()
                server.login(self.username, self.password)
                server.send_message(msg)
        except (smtplib.SMTPException, OSError) as e:
            raise MailDeliveryError(str(e)) from e

        current_app.logger.info(f"Contact email sent to {email.recipient} (reply-to {email.reply_to})")


__all__ = [
    'OutgoingEmail',
    'SmtpMailer',
    'build_contact_email',
    'message_to_html',
    'SUBJECT_PREFIX',
]
