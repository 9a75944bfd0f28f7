import logging
import re
import secrets
import string
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Optional, Tuple
from urllib.parse import quote
from zoneinfo import ZoneInfo

from src.common.config import Settings
from src.common.utils.email_service import render_template
from src.common.utils.global_messages import GlobalMessages
from src.modules.inquiry.exceptions import InquiryValidationError, MailConfigurationError
from src.modules.inquiry.providers.base import BaseMailProvider, MailSendResult, OutboundMessage
from src.modules.inquiry.schemas import EmailStatus, InquirySubmission

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("name", "email", "message")

SERVICE_LABELS = {
    "corporate-intelligence": "Corporate Intelligence",
    "insurance-investigations": "Insurance Investigations",
    "osint": "OSINT Services",
    "skip-tracing": "Skip Tracing",
    "surveillance": "Surveillance",
    "background-checks": "Background Checks",
    "other": "Other Services",
}
DEFAULT_SERVICE_LABEL = "General Inquiry"


@dataclass(frozen=True)
class UrgencyLevel:
    key: str
    color: str
    response_time: str
    priority_notice: str


URGENCY_LEVELS = {
    "low": UrgencyLevel("low", "#10B981", "within 2 business days", "Standard response time applies"),
    "medium": UrgencyLevel("medium", "#F59E0B", "within 1 business day", "Standard response time applies"),
    "high": UrgencyLevel("high", "#EF4444", "within 48 hours", "HIGH PRIORITY - Respond within 48 hours"),
    "urgent": UrgencyLevel("urgent", "#DC2626", "within 24 hours", "URGENT - Respond within 24 hours"),
}
DEFAULT_URGENCY = URGENCY_LEVELS["medium"]

INQUIRY_ID_ALPHABET = string.digits + string.ascii_lowercase
INQUIRY_ID_SUFFIX_LENGTH = 9


@dataclass(frozen=True)
class MailConfig:
    """SendGrid credentials and addresses, loaded once at startup."""
    api_key: Optional[str]
    from_email: Optional[str]
    to_email: Optional[str]

    @classmethod
    def from_settings(cls, settings: Settings) -> "MailConfig":
        return cls(
            api_key=settings.SENDGRID_API_KEY,
            from_email=settings.SENDGRID_FROM_EMAIL,
            to_email=settings.SENDGRID_TO_EMAIL,
        )

    def require(self) -> None:
        """Raise for the first missing value: API key, then from, then to."""
        if not self.api_key:
            logger.error("SENDGRID_API_KEY is missing")
            raise MailConfigurationError(GlobalMessages.MISSING_API_KEY, "SENDGRID_API_KEY")
        if not self.from_email:
            logger.error("SENDGRID_FROM_EMAIL is missing")
            raise MailConfigurationError(GlobalMessages.MISSING_FROM_EMAIL, "SENDGRID_FROM_EMAIL")
        if not self.to_email:
            logger.error("SENDGRID_TO_EMAIL is missing")
            raise MailConfigurationError(GlobalMessages.MISSING_TO_EMAIL, "SENDGRID_TO_EMAIL")


@dataclass
class InquiryOutcome:
    inquiry_id: str
    admin_result: MailSendResult
    client_result: MailSendResult

    @property
    def email_status(self) -> EmailStatus:
        return EmailStatus(
            admin_email_sent=self.admin_result.success,
            client_email_sent=self.client_result.success,
            admin_error=None if self.admin_result.success else self.admin_result.error_message,
            client_error=None if self.client_result.success else self.client_result.error_message,
        )


def validate_submission(data: Mapping[str, Any]) -> InquirySubmission:
    """Check the required fields are present and non-empty, then coerce the payload."""
    if any(not data.get(field) for field in REQUIRED_FIELDS):
        raise InquiryValidationError(GlobalMessages.REQUIRED_FIELDS_MISSING)
    return InquirySubmission.model_validate(dict(data))


def service_label(service: Optional[str]) -> str:
    return SERVICE_LABELS.get(service or "", DEFAULT_SERVICE_LABEL)


def urgency_level(urgency: Optional[str]) -> UrgencyLevel:
    return URGENCY_LEVELS.get(urgency or "", DEFAULT_URGENCY)


def generate_inquiry_id(now: Optional[datetime] = None) -> str:
    """INQ-<epoch milliseconds>-<9 base36 characters>."""
    now = now or datetime.now(timezone.utc)
    suffix = "".join(secrets.choice(INQUIRY_ID_ALPHABET) for _ in range(INQUIRY_ID_SUFFIX_LENGTH))
    return f"INQ-{int(now.timestamp() * 1000)}-{suffix}"


def format_submitted_at(now: datetime, tz_name: str) -> str:
    # e.g. 19/10/2026, 3:04:05 pm
    local = now.astimezone(ZoneInfo(tz_name))
    hour = local.hour % 12 or 12
    meridiem = "am" if local.hour < 12 else "pm"
    return f"{local:%d/%m/%Y}, {hour}:{local:%M:%S} {meridiem}"


def _single_line(value: str) -> str:
    return re.sub(r"[\r\n]+", " ", value).strip()


def build_template_context(
    submission: InquirySubmission,
    inquiry_id: str,
    submitted_at: str,
    brand_name: str,
) -> Dict[str, Any]:
    level = urgency_level(submission.urgency)
    label = service_label(submission.service)
    reply_subject = f"Re: Your inquiry to {brand_name} ({inquiry_id})"
    return {
        "brand_name": brand_name,
        "brand_upper": brand_name.upper(),
        "name": submission.name,
        "email": submission.email,
        "phone": submission.phone,
        "company": submission.company,
        "budget": submission.budget,
        "message": submission.message,
        "service_label": label,
        "urgency": level.key,
        "urgency_upper": level.key.upper(),
        "urgency_title": level.key.capitalize(),
        "urgency_color": level.color,
        "response_time": level.response_time,
        "priority_notice": level.priority_notice,
        "inquiry_id": inquiry_id,
        "submitted_at": submitted_at,
        "reply_href": f"mailto:{quote(submission.email, safe='@')}?subject={quote(reply_subject)}",
    }


def compose_admin_message(context: Dict[str, Any], config: MailConfig) -> OutboundMessage:
    text_body = (
        f"New {context['urgency']} priority inquiry ({context['inquiry_id']})\n\n"
        f"Name: {context['name']}\n"
        f"Email: {context['email']}\n"
        f"Phone: {context['phone'] or 'No phone provided'}\n"
        f"Company: {context['company'] or 'No company provided'}\n"
        f"Service: {context['service_label']}\n"
        f"Budget: {context['budget'] or 'Budget not specified'}\n\n"
        f"Message:\n{context['message']}\n\n"
        f"Priority: {context['priority_notice']}\n"
        f"Submitted: {context['submitted_at']}"
    )
    subject = (
        f"\U0001F6A8 NEW {context['urgency_upper']} PRIORITY INQUIRY - "
        f"{context['name']} - {context['service_label']}"
    )
    return OutboundMessage(
        to_email=config.to_email,
        from_email=config.from_email,
        from_name=f"{context['brand_name']} Website",
        subject=_single_line(subject),
        html_body=render_template("inquiry_admin.html", context),
        text_body=text_body,
    )


def compose_client_message(context: Dict[str, Any], config: MailConfig) -> OutboundMessage:
    text_body = (
        f"Dear {context['name']},\n\n"
        f"Thank you for contacting {context['brand_name']}. We have received your inquiry "
        f"regarding {context['service_label']} and will respond {context['response_time']}.\n\n"
        f"Service: {context['service_label']}\n"
        f"Priority Level: {context['urgency_title']} Priority\n"
        f"Reference ID: {context['inquiry_id']}\n\n"
        f"Best regards,\nThe {context['brand_name']} Team"
    )
    return OutboundMessage(
        to_email=context["email"],
        from_email=config.from_email,
        from_name=context["brand_name"],
        subject=_single_line(
            f"Thank you for contacting {context['brand_name']} - We'll respond {context['response_time']}"
        ),
        html_body=render_template("inquiry_client.html", context),
        text_body=text_body,
    )


async def _deliver(provider: BaseMailProvider, message: OutboundMessage, label: str) -> MailSendResult:
    logger.info("Attempting to send %s email to: %s", label, message.to_email)
    try:
        result = await provider.send(message)
    except Exception as e:
        logger.exception("%s email raised during delivery", label.capitalize())
        result = MailSendResult(success=False, error_message=str(e) or e.__class__.__name__)

    if result.success:
        logger.info("%s email sent successfully: %s", label.capitalize(), result.status_code)
    else:
        logger.error(
            "%s EMAIL FAILED: %s (status=%s, body=%s)",
            label.upper(), result.error_message, result.status_code, result.response_body,
        )
    return result


async def send_inquiry_emails(
    provider: BaseMailProvider,
    admin_message: OutboundMessage,
    client_message: OutboundMessage,
) -> Tuple[MailSendResult, MailSendResult]:
    """
    Send the admin alert, then the client confirmation.

    Each send is attempted exactly once and independently of the other.
    """
    admin_result = await _deliver(provider, admin_message, "admin")
    client_result = await _deliver(provider, client_message, "client")
    return admin_result, client_result


async def process_inquiry(
    submission: InquirySubmission,
    config: MailConfig,
    provider: BaseMailProvider,
    brand_name: str,
    display_timezone: str,
    now: Optional[datetime] = None,
) -> InquiryOutcome:
    """
    Render both emails for a validated submission and dispatch them.

    Args:
        submission (InquirySubmission): The validated form payload.
        config (MailConfig): Sender and recipient addresses; must already pass require().
        provider (BaseMailProvider): Delivery backend.
        brand_name (str): Business name shown in subjects and templates.
        display_timezone (str): IANA zone for the submission timestamp.
        now (datetime, optional): Submission time, defaults to the current UTC time.

    Returns:
        InquiryOutcome: The generated inquiry id and both delivery results.
    """
    now = now or datetime.now(timezone.utc)
    inquiry_id = generate_inquiry_id(now)
    context = build_template_context(
        submission,
        inquiry_id=inquiry_id,
        submitted_at=format_submitted_at(now, display_timezone),
        brand_name=brand_name,
    )
    admin_message = compose_admin_message(context, config)
    client_message = compose_client_message(context, config)

    logger.info(
        "Environment check: hasApiKey=%s hasFromEmail=%s hasToEmail=%s fromEmail=%s toEmail=%s",
        bool(config.api_key), bool(config.from_email), bool(config.to_email),
        config.from_email, config.to_email,
    )

    admin_result, client_result = await send_inquiry_emails(provider, admin_message, client_message)
    return InquiryOutcome(inquiry_id=inquiry_id, admin_result=admin_result, client_result=client_result)
