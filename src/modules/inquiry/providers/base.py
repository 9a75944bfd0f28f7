"""
Abstract base class for mail providers.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional


@dataclass
class OutboundMessage:
    """A rendered email ready for delivery."""
    to_email: str
    from_email: str
    from_name: str
    subject: str
    html_body: str
    text_body: str


@dataclass
class MailSendResult:
    """Result of a single delivery attempt."""
    success: bool
    status_code: Optional[int] = None
    error_message: Optional[str] = None
    response_body: Optional[str] = None


class BaseMailProvider(ABC):
    """Abstract base class for transactional mail providers."""

    name: str

    @abstractmethod
    async def send(self, message: OutboundMessage) -> MailSendResult:
        """
        Deliver one message.

        Delivery failures are reported through the result, not raised.

        Args:
            message: The rendered message to deliver

        Returns:
            MailSendResult describing the outcome
        """
        pass
