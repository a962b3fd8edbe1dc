"""AI listing generator routes"""

from fastapi import APIRouter, Depends

from ...api.dependencies import get_current_user, get_page_fetcher
from ...application.dtos.listing_dtos import GenerateListingDto, ListingDraftResponse
from ...application.use_cases.generate_listing import GenerateListingUseCase
from ...domain.entities.user import User
from ...infrastructure.external_services.page_fetcher import PageFetcher

router = APIRouter()


@router.post("/generate-listing", response_model=ListingDraftResponse)
async def generate_listing(
    request: GenerateListingDto,
    current_user: User = Depends(get_current_user),
    page_fetcher: PageFetcher = Depends(get_page_fetcher),
):
    """Draft a listing from the seller's homepage"""
    draft = await GenerateListingUseCase(page_fetcher).execute(request)
    return ListingDraftResponse(**draft.to_dict())
