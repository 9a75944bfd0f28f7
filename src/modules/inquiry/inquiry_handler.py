"""
Framework-independent inquiry handler.

Takes a description of an HTTP request and returns a description of the
response, so the same logic backs the FastAPI route and the serverless entry
point.
"""
import json
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, Union

from src.common.config import Settings
from src.common.utils.global_messages import GlobalMessages
from src.modules.inquiry.exceptions import InquiryError
from src.modules.inquiry.inquiry_service import MailConfig, process_inquiry, validate_submission
from src.modules.inquiry.providers.base import BaseMailProvider
from src.modules.inquiry.providers.sendgrid_provider import SendGridProvider
from src.modules.inquiry.schemas import DebugInfo, ErrorResponse, InquirySubmitResponse

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type",
}
PREFLIGHT_HEADERS = {**CORS_HEADERS, "Access-Control-Allow-Methods": "POST, OPTIONS"}

ProviderFactory = Callable[[str], BaseMailProvider]


@dataclass
class HandlerRequest:
    method: str
    headers: Dict[str, str] = field(default_factory=dict)
    body: Union[str, bytes, None] = None


@dataclass
class HandlerResponse:
    status_code: int
    headers: Dict[str, str]
    body: str = ""

    def json(self) -> Any:
        return json.loads(self.body) if self.body else None


def _json_response(status_code: int, payload: Dict[str, Any]) -> HandlerResponse:
    headers = {**CORS_HEADERS, "Content-Type": "application/json"}
    return HandlerResponse(status_code=status_code, headers=headers, body=json.dumps(payload))


def _parse_body(body: Union[str, bytes, None]) -> Dict[str, Any]:
    if isinstance(body, bytes):
        body = body.decode("utf-8")
    data = json.loads(body if body is not None else "null")
    if not isinstance(data, dict):
        raise ValueError("Request body must be a JSON object")
    return data


class InquiryHandler:
    """Validates a contact form submission and sends the admin and client emails."""

    def __init__(
        self,
        config: MailConfig,
        provider_factory: ProviderFactory = SendGridProvider,
        brand_name: str = "Everguard Intelligence",
        display_timezone: str = "Australia/Sydney",
        expose_debug: bool = False,
    ):
        self.config = config
        self.provider_factory = provider_factory
        self.brand_name = brand_name
        self.display_timezone = display_timezone
        self.expose_debug = expose_debug

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        provider_factory: Optional[ProviderFactory] = None,
    ) -> "InquiryHandler":
        return cls(
            config=MailConfig.from_settings(settings),
            provider_factory=provider_factory or SendGridProvider,
            brand_name=settings.BRAND_NAME,
            display_timezone=settings.DISPLAY_TIMEZONE,
            expose_debug=settings.INQUIRY_DEBUG_RESPONSE,
        )

    async def handle(self, request: HandlerRequest) -> HandlerResponse:
        method = request.method.upper()
        if method == "OPTIONS":
            return HandlerResponse(status_code=200, headers=dict(PREFLIGHT_HEADERS), body="")
        if method != "POST":
            return _json_response(405, ErrorResponse(error=GlobalMessages.METHOD_NOT_ALLOWED).model_dump(exclude_none=True))

        try:
            return await self._submit(request)
        except InquiryError as e:
            return _json_response(e.status_code, e.to_payload())
        except Exception as e:
            logger.exception("Contact form error")
            payload = ErrorResponse(error=GlobalMessages.INQUIRY_FAILED, details=str(e))
            return _json_response(500, payload.model_dump(exclude_none=True))

    async def _submit(self, request: HandlerRequest) -> HandlerResponse:
        data = _parse_body(request.body)
        submission = validate_submission(data)
        self.config.require()

        provider = self.provider_factory(self.config.api_key)
        outcome = await process_inquiry(
            submission,
            config=self.config,
            provider=provider,
            brand_name=self.brand_name,
            display_timezone=self.display_timezone,
        )

        response = InquirySubmitResponse(
            message=GlobalMessages.INQUIRY_SUBMITTED,
            inquiry_id=outcome.inquiry_id,
            email_status=outcome.email_status,
        )
        if self.expose_debug:
            response.debug = DebugInfo(to_email=self.config.to_email, from_email=self.config.from_email)
            return _json_response(200, response.model_dump(by_alias=True))
        return _json_response(200, response.model_dump(by_alias=True, exclude={"debug"}))
