"""
Shared fixtures. The mailer and relay client are injected through
create_app(), so no test touches SMTP or the network.
"""

import json
import shutil
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from app import create_app
from utils.errors import MailDeliveryError

DATA_DIR = Path(__file__).resolve().parent.parent / 'data'

VALID_PAYLOAD = {
    'name': 'Jane Doe',
    'email': 'jane@example.com',
    'subject': 'Hello',
    'message': 'Hi there\nSecond line',
}


class FakeMailer:
    """Records outgoing emails; raises the configured error instead when set."""

    is_configured = True

    def __init__(self, error=None):
        self.sent = []
        self.error = error

    def send(self, email):
        if self.error is not None:
            raise self.error
        self.sent.append(email)


@pytest.fixture
def data_dir(tmp_path):
    """A writable copy of the bundled content fixtures"""
    target = tmp_path / 'data'
    shutil.copytree(DATA_DIR, target)
    return target


@pytest.fixture
def mailer():
    return FakeMailer()


@pytest.fixture
def failing_mailer():
    return FakeMailer(error=MailDeliveryError('535 5.7.8 Username and Password not accepted'))


@pytest.fixture
def relay_client():
    client = MagicMock()
    client.send_contact_form.return_value = {'status': 'success', 'message': 'Message sent successfully!'}
    return client


@pytest.fixture
def make_app(data_dir, mailer, relay_client):
    def _make(**overrides):
        return create_app(
            'testing',
            mailer=overrides.pop('mailer', mailer),
            relay_client=overrides.pop('relay_client', relay_client),
            test_config={'DATA_DIR': str(data_dir), **overrides},
        )
    return _make


@pytest.fixture
def app(make_app):
    return make_app()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def valid_payload():
    return dict(VALID_PAYLOAD)


@pytest.fixture
def write_fixture(data_dir):
    """Overwrite one content fixture with a dict, list or raw text"""
    def _write(name, content):
        path = data_dir / f'{name}.json'
        if isinstance(content, str):
            path.write_text(content, encoding='utf-8')
        else:
            path.write_text(json.dumps(content), encoding='utf-8')
        return path
    return _write
