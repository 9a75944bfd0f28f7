import asyncio
import json
import os
import sys

# Add project root to path
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from src.common.config import settings
from src.modules.inquiry.inquiry_handler import HandlerRequest, InquiryHandler

async def test_emails():
    print("Testing Inquiry Emails...")
    recipient = os.getenv("TEST_INQUIRY_EMAIL", settings.SENDGRID_TO_EMAIL)
    print(f"Submitting a sample inquiry as {recipient}...")

    payload = {
        "name": "Test Submitter",
        "email": recipient,
        "phone": "0400 000 000",
        "service": "osint",
        "urgency": "high",
        "message": "This is a test inquiry.",
    }
    handler = InquiryHandler.from_settings(settings)
    response = await handler.handle(HandlerRequest(method="POST", body=json.dumps(payload)))
    print(f"Status: {response.status_code}")
    print(response.body)

    print("\nDone!")

if __name__ == "__main__":
    # Use real settings from .env
    asyncio.run(test_emails())
