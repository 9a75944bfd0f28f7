import base64
import json

import pytest

from src.modules.inquiry import lambda_handler
from tests.fakes import FakeMailProvider


@pytest.fixture
def provider(monkeypatch, make_handler):
    provider = FakeMailProvider()
    monkeypatch.setattr(lambda_handler, "_handler", make_handler(provider))
    return provider


def test_preflight_event(provider):
    response = lambda_handler.handler({"httpMethod": "OPTIONS", "headers": {}})

    assert response["statusCode"] == 200
    assert response["body"] == ""
    assert response["headers"]["Access-Control-Allow-Methods"] == "POST, OPTIONS"


def test_get_event_is_rejected(provider):
    response = lambda_handler.handler({"httpMethod": "GET"})

    assert response["statusCode"] == 405
    assert json.loads(response["body"]) == {"error": "Method not allowed"}


def test_post_event(provider, submission_payload):
    response = lambda_handler.handler({"httpMethod": "POST", "body": json.dumps(submission_payload)})

    assert response["statusCode"] == 200
    body = json.loads(response["body"])
    assert body["emailStatus"]["adminEmailSent"] is True
    assert len(provider.sent) == 2


def test_base64_body(provider, submission_payload):
    encoded = base64.b64encode(json.dumps(submission_payload).encode()).decode()

    response = lambda_handler.handler({"httpMethod": "POST", "body": encoded, "isBase64Encoded": True})

    assert response["statusCode"] == 200


def test_http_api_v2_event_method(provider):
    response = lambda_handler.handler({"requestContext": {"http": {"method": "OPTIONS"}}})

    assert response["statusCode"] == 200


def test_missing_body_is_a_server_error(provider):
    response = lambda_handler.handler({"httpMethod": "POST"})

    assert response["statusCode"] == 500
    assert json.loads(response["body"])["error"] == "Failed to submit contact form. Please try again."
