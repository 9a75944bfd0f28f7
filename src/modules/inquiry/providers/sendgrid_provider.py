"""
SendGrid mail provider implementation.
"""
from typing import Optional, Dict, Any
import httpx

from src.common.config import settings
from .base import BaseMailProvider, MailSendResult, OutboundMessage


class SendGridProvider(BaseMailProvider):
    """SendGrid v3 Mail Send implementation."""

    name = "sendgrid"

    def __init__(
        self,
        api_key: str,
        api_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.api_url = api_url or settings.SENDGRID_API_URL
        self.timeout = timeout if timeout is not None else settings.SENDGRID_TIMEOUT_SECONDS
        self.transport = transport

    @property
    def headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

    @staticmethod
    def build_payload(message: OutboundMessage) -> Dict[str, Any]:
        # text/plain must precede text/html in the content list
        return {
            "personalizations": [{"to": [{"email": message.to_email}]}],
            "from": {"email": message.from_email, "name": message.from_name},
            "subject": message.subject,
            "content": [
                {"type": "text/plain", "value": message.text_body},
                {"type": "text/html", "value": message.html_body},
            ],
        }

    async def send(self, message: OutboundMessage) -> MailSendResult:
        """Send a message through SendGrid; 2xx means accepted."""
        try:
            async with httpx.AsyncClient(transport=self.transport) as client:
                response = await client.post(
                    self.api_url,
                    headers=self.headers,
                    json=self.build_payload(message),
                    timeout=self.timeout,
                )
        except httpx.HTTPError as e:
            return MailSendResult(
                success=False,
                error_message=str(e) or e.__class__.__name__,
            )

        if response.is_success:
            return MailSendResult(success=True, status_code=response.status_code)

        return MailSendResult(
            success=False,
            status_code=response.status_code,
            error_message=self._error_message(response),
            response_body=response.text,
        )

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        """Pull the first error message out of a SendGrid error body."""
        fallback = f"SendGrid request failed with status {response.status_code}"
        try:
            data = response.json()
        except ValueError:
            return fallback
        errors = data.get("errors") if isinstance(data, dict) else None
        if errors and isinstance(errors, list) and isinstance(errors[0], dict):
            detail = errors[0].get("message")
            if detail:
                return f"{fallback}: {detail}"
        return fallback
