import os

import pytest

# Keep a developer's real credentials out of the test run.
for var in ("SENDGRID_API_KEY", "SENDGRID_FROM_EMAIL", "SENDGRID_TO_EMAIL", "INQUIRY_DEBUG_RESPONSE"):
    os.environ.pop(var, None)

from src.modules.inquiry.inquiry_handler import InquiryHandler
from src.modules.inquiry.inquiry_service import MailConfig


@pytest.fixture
def mail_config():
    return MailConfig(
        api_key="SG.test-key",
        from_email="website@everguard.test",
        to_email="desk@everguard.test",
    )


@pytest.fixture
def submission_payload():
    return {
        "name": "Jane Citizen",
        "email": "jane@example.com",
        "phone": "0400 123 456",
        "company": "Citizen Pty Ltd",
        "service": "osint",
        "urgency": "high",
        "message": "Need help locating a witness.",
        "budget": "$5k-$10k",
    }


@pytest.fixture
def make_handler(mail_config):
    def _make(provider, config=None, expose_debug=False):
        api_keys = []

        def factory(api_key):
            api_keys.append(api_key)
            return provider

        handler = InquiryHandler(
            config=config or mail_config,
            provider_factory=factory,
            expose_debug=expose_debug,
        )
        handler.factory_api_keys = api_keys
        return handler

    return _make
