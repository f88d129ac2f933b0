"""
Errors Module - Exceptions raised across the site and relay
"""


class MailDeliveryError(Exception):
    """The outbound mail provider failed to accept a message"""


class RelayError(Exception):
    """The contact relay could not be reached or rejected a submission"""

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class FixtureError(Exception):
    """A static content fixture is missing, unreadable or malformed"""

    def __init__(self, name, reason):
        super().__init__(f"Fixture '{name}' is invalid: {reason}")
        self.name = name
        self.reason = reason


__all__ = ['MailDeliveryError', 'RelayError', 'FixtureError']
