"""Public seller profile routes"""

from fastapi import APIRouter, Depends

from ...api.dependencies import get_unit_of_work
from ...application.dtos.listing_dtos import ListingResponse, SellerProfileResponse
from ...application.use_cases.seller_use_cases import GetSellerProfileUseCase
from ...domain.repositories.unit_of_work import IUnitOfWork

router = APIRouter()


@router.get("/{username}", response_model=SellerProfileResponse)
async def get_seller_profile(
    username: str,
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
):
    """Seller name, member-since date and their active listings"""
    seller, listings = await GetSellerProfileUseCase(unit_of_work).execute(username)
    return SellerProfileResponse(
        username=seller.username.value,
        member_since=seller.created_at,
        listings=[ListingResponse.from_entity(listing) for listing in listings],
    )
