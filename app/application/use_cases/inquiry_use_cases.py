"""Buyer inquiry use cases"""

import logging
from typing import List

from ...core.config import settings
from ...core.exceptions import NotFoundError, RateLimitError, ValidationError
from ...domain.entities.inquiry import Inquiry
from ...domain.entities.user import User
from ...domain.repositories.unit_of_work import IUnitOfWork
from ...domain.value_objects.email import Email
from ...domain.value_objects.entity_ids import InquiryId, ListingId, MAX_ENTITY_ID
from ...infrastructure.external_services.email_service import EmailService
from ...infrastructure.external_services.rate_limiter import IRateLimiter
from ..dtos.inquiry_dtos import CreateInquiryDto, InquiryResponse

logger = logging.getLogger(__name__)

MIN_MESSAGE_LENGTH = 10


class SubmitInquiryUseCase:
    """Public contact form on a listing page.

    Order matters: the rate limit is counted first, then bots that fill the
    hidden honeypot field get a fake success with nothing stored or sent.
    """

    def __init__(self, unit_of_work: IUnitOfWork, email_service: EmailService, rate_limiter: IRateLimiter):
        self.unit_of_work = unit_of_work
        self.email_service = email_service
        self.rate_limiter = rate_limiter

    async def execute(self, request: CreateInquiryDto, client_ip: str) -> None:
        if not self.rate_limiter.hit(f"inquiry:{client_ip}"):
            raise RateLimitError(
                "Too many inquiries. Please try again later.",
                retry_after=settings.INQUIRY_RATE_WINDOW_SECONDS,
            )

        if request.honeypot:
            logger.info("Dropped honeypot inquiry from %s", client_ip)
            return

        buyer_name = (request.buyer_name or "").strip()
        message = (request.message or "").strip()
        if not request.listing_id or not buyer_name or not request.buyer_email or not message:
            raise ValidationError("All fields are required.")
        if len(message) < MIN_MESSAGE_LENGTH:
            raise ValidationError(f"Message must be at least {MIN_MESSAGE_LENGTH} characters.")
        try:
            buyer_email = Email(request.buyer_email).value
        except ValueError as e:
            raise ValidationError(str(e))
        if not 0 < request.listing_id <= MAX_ENTITY_ID:
            raise NotFoundError("Listing not found.")

        async with self.unit_of_work:
            listing = await self.unit_of_work.listings.get_by_id(ListingId(request.listing_id))
            if not listing or not listing.is_active:
                raise NotFoundError("Listing not found.")

            seller = await self.unit_of_work.users.get_by_id(listing.seller_id)
            await self.unit_of_work.inquiries.add(Inquiry(
                listing_id=listing.id,
                buyer_name=buyer_name,
                buyer_email=buyer_email,
                message=message,
            ))
            await self.unit_of_work.commit()

        logger.info("New inquiry on listing %s", listing.id.value)

        if seller:
            # Best effort, the inquiry is already saved
            sent = await self.email_service.send_inquiry_email(
                seller_email=seller.email.value,
                seller_name=seller.username.value,
                buyer_name=buyer_name,
                buyer_email=buyer_email,
                message=message,
                listing_title=listing.title,
                listing_url=f"{settings.FRONTEND_URL}/listings/{listing.slug}",
            )
            if not sent:
                logger.warning("Inquiry email for listing %s was not delivered", listing.id.value)


class ListSellerInquiriesUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, seller: User) -> List[InquiryResponse]:
        async with self.unit_of_work:
            rows = await self.unit_of_work.inquiries.list_for_seller(seller.id)

        return [
            InquiryResponse(
                id=inquiry.id.value,
                listing_id=listing.id.value,
                listing_title=listing.title,
                buyer_name=inquiry.buyer_name,
                buyer_email=inquiry.buyer_email,
                message=inquiry.message,
                is_read=inquiry.is_read,
                created_at=inquiry.created_at,
            )
            for inquiry, listing in rows
        ]


class MarkInquiryReadUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, seller: User, inquiry_id: int) -> None:
        async with self.unit_of_work:
            inquiry = await self.unit_of_work.inquiries.get_for_seller(InquiryId(inquiry_id), seller.id)
            if not inquiry:
                raise NotFoundError()
            inquiry.mark_read()
            await self.unit_of_work.inquiries.update(inquiry)
            await self.unit_of_work.commit()
