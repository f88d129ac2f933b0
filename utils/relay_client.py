"""
Relay Client Module - Submits contact forms to the relay over HTTP
"""

import requests

from .errors import RelayError

CONTACT_PATH = '/api/contact'
DEFAULT_ERROR_MESSAGE = 'Failed to send message'


class RelayClient:
    """
    Thin HTTP client for the contact relay.

    One POST per submission: no retry and no idempotency key. The timeout is
    the requests default unless one is given.
    """

    def __init__(self, base_url, timeout=None, session=None):
        self.base_url = (base_url or '').rstrip('/')
        self.timeout = timeout
        self.session = session or requests.Session()

    @classmethod
    def from_config(cls, config, session=None):
        return cls(config.get('API_BASE_URL'), timeout=config.get('RELAY_TIMEOUT'), session=session)

    @property
    def contact_url(self):
        return f"{self.base_url}{CONTACT_PATH}"

    def send_contact_form(self, submission):
        """
        Send a validated submission to the relay.

        Args:
            submission (ContactSubmission): Validated form data

        Returns:
            dict: The relay's JSON response body

        Raises:
            RelayError: network failure, non-2xx status or unreadable body
        """
        try:
            response = self.session.post(
                self.contact_url,
                json=submission.model_dump(),
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise RelayError(DEFAULT_ERROR_MESSAGE) from e

        try:
            result = response.json()
        except ValueError:
            result = {}
        if not isinstance(result, dict):
            result = {}

        if not response.ok or result.get('status') != 'success':
            raise RelayError(result.get('message') or DEFAULT_ERROR_MESSAGE,
                             status_code=response.status_code)

        return result


__all__ = ['RelayClient', 'CONTACT_PATH']
