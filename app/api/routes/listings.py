"""Listing routes"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Path, Query

from ...api.dependencies import get_unit_of_work, get_current_user, get_optional_user
from ...application.dtos.listing_dtos import (
    CreateListingDto,
    UpdateListingDto,
    ListingImagesDto,
    ListingResponse,
    SellerListingResponse,
)
from ...application.dtos.user_dtos import OkResponse
from ...application.use_cases.listing_use_cases import (
    BrowseListingsUseCase,
    GetListingUseCase,
    ListSellerListingsUseCase,
    CreateListingUseCase,
    UpdateListingUseCase,
    DeleteListingUseCase,
    ReplaceListingImagesUseCase,
)
from ...domain.entities.user import User
from ...domain.enums import ListingCategory
from ...domain.repositories.listing_repository import ListingFilters
from ...domain.repositories.unit_of_work import IUnitOfWork
from ...domain.value_objects.entity_ids import MAX_ENTITY_ID

router = APIRouter()


@router.get("", response_model=List[ListingResponse])
async def browse_listings(
    category: Optional[ListingCategory] = None,
    min_price: Optional[int] = Query(None, ge=0),
    max_price: Optional[int] = Query(None, ge=0),
    min_revenue: Optional[int] = Query(None, ge=0),
    max_revenue: Optional[int] = Query(None, ge=0),
    q: Optional[str] = None,
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
):
    """Public marketplace search over active listings"""
    filters = ListingFilters(
        category=category,
        min_price=min_price,
        max_price=max_price,
        min_revenue=min_revenue,
        max_revenue=max_revenue,
        query=q.strip() if q and q.strip() else None,
    )
    listings = await BrowseListingsUseCase(unit_of_work).execute(filters)
    return [ListingResponse.from_entity(listing) for listing in listings]


@router.get("/mine", response_model=List[SellerListingResponse])
async def my_listings(
    current_user: User = Depends(get_current_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
):
    listings = await ListSellerListingsUseCase(unit_of_work).execute(current_user)
    return [
        SellerListingResponse.from_entity_with_count(listing, inquiry_count)
        for listing, inquiry_count in listings
    ]


@router.get("/{slug}", response_model=ListingResponse)
async def get_listing(
    slug: str,
    viewer: Optional[User] = Depends(get_optional_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
):
    listing = await GetListingUseCase(unit_of_work).execute(slug, viewer)
    return ListingResponse.from_entity(listing)


@router.post("", response_model=ListingResponse, status_code=201)
async def create_listing(
    request: CreateListingDto,
    current_user: User = Depends(get_current_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
):
    listing = await CreateListingUseCase(unit_of_work).execute(current_user, request)
    return ListingResponse.from_entity(listing)


@router.patch("/{listing_id}", response_model=ListingResponse)
async def update_listing(
    request: UpdateListingDto,
    listing_id: int = Path(..., gt=0, le=MAX_ENTITY_ID),
    current_user: User = Depends(get_current_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
):
    listing = await UpdateListingUseCase(unit_of_work).execute(current_user, listing_id, request)
    return ListingResponse.from_entity(listing)


@router.delete("/{listing_id}", response_model=OkResponse)
async def delete_listing(
    listing_id: int = Path(..., gt=0, le=MAX_ENTITY_ID),
    current_user: User = Depends(get_current_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
):
    await DeleteListingUseCase(unit_of_work).execute(current_user, listing_id)
    return OkResponse()


@router.post("/{listing_id}/images", response_model=ListingResponse)
async def replace_listing_images(
    request: ListingImagesDto,
    listing_id: int = Path(..., gt=0, le=MAX_ENTITY_ID),
    current_user: User = Depends(get_current_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
):
    """Replace the listing's image set with the given urls, in order"""
    listing = await ReplaceListingImagesUseCase(unit_of_work).execute(
        current_user, listing_id, request.urls
    )
    return ListingResponse.from_entity(listing)
