"""
Pydantic schemas for inquiry submissions and responses.
"""
from typing import Optional
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


# ==================== REQUEST SCHEMAS ====================

class InquirySubmission(BaseModel):
    """Contact form payload. Only name, email and message are required."""
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    name: str
    email: str
    message: str
    phone: Optional[str] = None
    company: Optional[str] = None
    service: Optional[str] = None
    urgency: Optional[str] = None
    budget: Optional[str] = None


# ==================== RESPONSE SCHEMAS ====================

class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class EmailStatus(CamelModel):
    """Per-message delivery outcome."""
    admin_email_sent: bool
    client_email_sent: bool
    admin_error: Optional[str] = None
    client_error: Optional[str] = None


class DebugInfo(CamelModel):
    to_email: Optional[str] = None
    from_email: Optional[str] = None


class InquirySubmitResponse(CamelModel):
    """Body of a completed submission, even when both sends failed."""
    success: bool = True
    message: str
    inquiry_id: str
    email_status: EmailStatus
    debug: Optional[DebugInfo] = None


class ErrorResponse(BaseModel):
    error: str
    debug: Optional[str] = None
    details: Optional[str] = None
