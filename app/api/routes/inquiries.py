"""Buyer inquiry routes"""

from typing import List

from fastapi import APIRouter, Depends, Path

from ...api.dependencies import (
    get_unit_of_work,
    get_email_service,
    get_rate_limiter,
    get_client_ip,
    get_current_user,
)
from ...application.dtos.inquiry_dtos import CreateInquiryDto, InquiryResponse
from ...application.dtos.user_dtos import OkResponse
from ...application.use_cases.inquiry_use_cases import (
    SubmitInquiryUseCase,
    ListSellerInquiriesUseCase,
    MarkInquiryReadUseCase,
)
from ...domain.entities.user import User
from ...domain.repositories.unit_of_work import IUnitOfWork
from ...domain.value_objects.entity_ids import MAX_ENTITY_ID
from ...infrastructure.external_services.email_service import EmailService
from ...infrastructure.external_services.rate_limiter import IRateLimiter

router = APIRouter()


@router.post("", response_model=OkResponse)
async def submit_inquiry(
    request: CreateInquiryDto,
    client_ip: str = Depends(get_client_ip),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
    email_service: EmailService = Depends(get_email_service),
    rate_limiter: IRateLimiter = Depends(get_rate_limiter),
):
    """Public contact form"""
    use_case = SubmitInquiryUseCase(unit_of_work, email_service, rate_limiter)
    await use_case.execute(request, client_ip)
    return OkResponse()


@router.get("", response_model=List[InquiryResponse])
async def list_inquiries(
    current_user: User = Depends(get_current_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
):
    return await ListSellerInquiriesUseCase(unit_of_work).execute(current_user)


@router.patch("/{inquiry_id}/read", response_model=OkResponse)
async def mark_inquiry_read(
    inquiry_id: int = Path(..., gt=0, le=MAX_ENTITY_ID),
    current_user: User = Depends(get_current_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
):
    await MarkInquiryReadUseCase(unit_of_work).execute(current_user, inquiry_id)
    return OkResponse()
