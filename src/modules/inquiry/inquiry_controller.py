# src/modules/inquiry/inquiry_controller.py

from functools import lru_cache

from fastapi import APIRouter, Depends, Request, Response

from src.common.config import settings
from src.modules.inquiry.inquiry_handler import HandlerRequest, InquiryHandler

router = APIRouter(prefix="/contact", tags=["contact"])

# Every method reaches the handler so it can answer preflight and 405 itself.
ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

@lru_cache
def get_inquiry_handler() -> InquiryHandler:
    return InquiryHandler.from_settings(settings)

@router.api_route("", methods=ALL_METHODS)
async def submit_inquiry(
    request: Request,
    handler: InquiryHandler = Depends(get_inquiry_handler),
):
    """
    Process a contact form submission.
    Sends the admin alert and the client confirmation, and reports whether each was delivered.
    """
    result = await handler.handle(
        HandlerRequest(
            method=request.method,
            headers=dict(request.headers),
            body=await request.body(),
        )
    )
    return Response(content=result.body, status_code=result.status_code, headers=result.headers)
