"""Inquiry DTOs for API layer"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class CreateInquiryDto(BaseModel):
    """Public contact form. Fields are validated in the use case so the
    honeypot check runs first."""
    listing_id: Optional[int] = None
    buyer_name: Optional[str] = None
    buyer_email: Optional[str] = None
    message: Optional[str] = None
    honeypot: Optional[str] = None


class InquiryResponse(BaseModel):
    id: int
    listing_id: int
    listing_title: str
    buyer_name: str
    buyer_email: str
    message: str
    is_read: bool
    created_at: datetime
