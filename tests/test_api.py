"""
Relay endpoint tests: POST /api/contact and GET /api/health.
"""

import pytest

from utils.errors import MailDeliveryError


def test_valid_submission_is_sent(client, mailer, valid_payload):
    response = client.post('/api/contact', json=valid_payload)

    assert response.status_code == 200
    body = response.get_json()
    assert body['status'] == 'success'
    assert body['message']
    assert len(mailer.sent) == 1


def test_email_is_addressed_to_owner_with_reply_to_visitor(client, mailer, valid_payload):
    client.post('/api/contact', json=valid_payload)

    email = mailer.sent[0]
    assert email.recipient == 'owner@example.com'
    assert email.sender == 'owner@example.com'
    assert email.reply_to == 'jane@example.com'
    assert email.subject == 'Portfolio Contact: Hello'


def test_line_breaks_become_br_in_html(client, mailer, valid_payload):
    client.post('/api/contact', json=valid_payload)

    html = mailer.sent[0].html
    assert 'Hi there<br>Second line' in html
    assert 'Hi there\nSecond line' not in html


def test_submitted_values_are_html_escaped(client, mailer, valid_payload):
    valid_payload['name'] = '<script>alert(1)</script>'
    client.post('/api/contact', json=valid_payload)

    html = mailer.sent[0].html
    assert '<script>' not in html
    assert '&lt;script&gt;' in html


@pytest.mark.parametrize('field', ['name', 'email', 'subject', 'message'])
def test_missing_field_is_rejected(client, mailer, valid_payload, field):
    del valid_payload[field]
    response = client.post('/api/contact', json=valid_payload)

    assert response.status_code == 400
    body = response.get_json()
    assert body['status'] == 'error'
    assert body['message'] == 'All fields are required'
    assert field in body['errors']
    assert mailer.sent == []


def test_blank_field_counts_as_missing(client, mailer, valid_payload):
    valid_payload['subject'] = '   '
    response = client.post('/api/contact', json=valid_payload)

    assert response.status_code == 400
    assert 'subject' in response.get_json()['errors']
    assert mailer.sent == []


def test_invalid_email_is_rejected(client, mailer, valid_payload):
    valid_payload['email'] = 'not-an-email'
    response = client.post('/api/contact', json=valid_payload)

    assert response.status_code == 400
    body = response.get_json()
    assert body == {
        'status': 'error',
        'message': 'Invalid email address',
        'errors': {'email': 'Please enter a valid email address'},
    }
    assert mailer.sent == []


def test_non_json_body_is_rejected(client, mailer):
    response = client.post('/api/contact', data='name=Jane', content_type='text/plain')

    assert response.status_code == 400
    assert response.get_json()['message'] == 'All fields are required'
    assert mailer.sent == []


def test_non_string_values_are_rejected(client, valid_payload):
    valid_payload['name'] = 42
    response = client.post('/api/contact', json=valid_payload)

    assert response.status_code == 400
    assert 'name' in response.get_json()['errors']


def test_long_message_is_accepted(client, mailer, valid_payload):
    valid_payload['message'] = 'x' * 5001
    response = client.post('/api/contact', json=valid_payload)

    assert response.status_code == 200
    assert response.get_json()['status'] == 'success'
    assert 'x' * 5001 in mailer.sent[0].html


def test_message_indentation_reaches_email(client, mailer, valid_payload):
    valid_payload['message'] = '  indented\n    code block\n'
    valid_payload['name'] = '  Jane Doe  '
    client.post('/api/contact', json=valid_payload)

    html = mailer.sent[0].html
    assert '<p>  indented<br>    code block<br></p>' in html
    assert '<strong>Name:</strong> Jane Doe</p>' in html


def test_provider_failure_returns_generic_500(make_app, failing_mailer, valid_payload):
    client = make_app(mailer=failing_mailer).test_client()
    response = client.post('/api/contact', json=valid_payload)

    assert response.status_code == 500
    body = response.get_json()
    assert body['status'] == 'error'
    assert body['message']
    assert '535' not in response.get_data(as_text=True)
    assert 'Password' not in response.get_data(as_text=True)


def test_unexpected_provider_exception_returns_500(make_app, valid_payload):
    class BrokenMailer:
        is_configured = True

        def send(self, email):
            raise RuntimeError('socket exploded')

    client = make_app(mailer=BrokenMailer()).test_client()
    response = client.post('/api/contact', json=valid_payload)

    assert response.status_code == 500
    assert 'socket exploded' not in response.get_data(as_text=True)


def test_provider_failure_is_logged(make_app, failing_mailer, valid_payload, caplog):
    client = make_app(mailer=failing_mailer).test_client()
    client.post('/api/contact', json=valid_payload)

    assert any('535' in record.getMessage() for record in caplog.records)


def test_health_is_ok(client):
    response = client.get('/api/health')

    assert response.status_code == 200
    body = response.get_json()
    assert body['status'] == 'ok'
    assert body['message']


def test_health_ignores_mail_provider(make_app):
    class ExplodingMailer:
        is_configured = False

        def send(self, email):
            raise MailDeliveryError('provider down')

    client = make_app(mailer=ExplodingMailer()).test_client()
    response = client.get('/api/health')

    assert response.status_code == 200
    assert response.get_json()['status'] == 'ok'


def test_contact_rejects_get(client):
    response = client.get('/api/contact')

    assert response.status_code == 405
    assert response.get_json()['status'] == 'error'


def test_unknown_api_route_is_json_404(client):
    response = client.get('/api/nope')

    assert response.status_code == 404
    assert response.get_json()['status'] == 'error'


def test_cors_headers_on_api(client):
    response = client.get('/api/health', headers={'Origin': 'https://portfolio.example.com'})

    assert response.headers['Access-Control-Allow-Origin'] in ('*', 'https://portfolio.example.com')


def test_cors_preflight_echoes_requested_headers(client):
    response = client.options('/api/contact', headers={
        'Origin': 'https://portfolio.example.com',
        'Access-Control-Request-Method': 'POST',
        'Access-Control-Request-Headers': 'content-type, x-requested-with',
    })

    assert response.status_code == 200
    assert response.headers['Access-Control-Allow-Origin'] in ('*', 'https://portfolio.example.com')
    assert 'POST' in response.headers['Access-Control-Allow-Methods']
    allowed_headers = response.headers['Access-Control-Allow-Headers'].lower()
    assert 'content-type' in allowed_headers
    assert 'x-requested-with' in allowed_headers


def test_site_pages_have_no_cors_headers(client):
    response = client.get('/', headers={'Origin': 'https://portfolio.example.com'})

    assert 'Access-Control-Allow-Origin' not in response.headers


def test_cors_restricted_origins(make_app):
    client = make_app(CORS_ORIGINS=['https://portfolio.example.com']).test_client()

    allowed = client.get('/api/health', headers={'Origin': 'https://portfolio.example.com'})
    denied = client.get('/api/health', headers={'Origin': 'https://evil.example.com'})

    assert allowed.headers['Access-Control-Allow-Origin'] == 'https://portfolio.example.com'
    assert 'Access-Control-Allow-Origin' not in denied.headers


def test_relay_only_deployment(make_app):
    client = make_app(ENABLE_SITE=False).test_client()

    assert client.get('/api/health').status_code == 200
    response = client.get('/about')
    assert response.status_code == 404
    assert response.get_json()['status'] == 'error'
