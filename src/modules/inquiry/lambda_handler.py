"""
Serverless entry point for function hosts that deliver an
``{httpMethod, headers, body}`` event and expect
``{statusCode, headers, body}`` back (Netlify Functions, AWS Lambda proxy).
"""
import asyncio
import base64
from typing import Any, Dict, Optional

from src.common.config import settings
from src.modules.inquiry.inquiry_handler import HandlerRequest, InquiryHandler

_handler: Optional[InquiryHandler] = None


def get_handler() -> InquiryHandler:
    global _handler
    if _handler is None:
        _handler = InquiryHandler.from_settings(settings)
    return _handler


def event_to_request(event: Dict[str, Any]) -> HandlerRequest:
    method = event.get("httpMethod") or event.get("requestContext", {}).get("http", {}).get("method", "")
    body = event.get("body")
    if body is not None and event.get("isBase64Encoded"):
        body = base64.b64decode(body)
    return HandlerRequest(method=method, headers=dict(event.get("headers") or {}), body=body)


def handler(event: Dict[str, Any], context: Any = None) -> Dict[str, Any]:
    response = asyncio.run(get_handler().handle(event_to_request(event)))
    return {
        "statusCode": response.status_code,
        "headers": response.headers,
        "body": response.body,
    }
