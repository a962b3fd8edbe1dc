"""Listing DTOs for API layer"""

from datetime import datetime
from typing import Optional, List, Dict

from pydantic import BaseModel, Field

from ...domain.entities.listing import Listing
from ...domain.enums import ListingCategory, ListingStatus


class GenerateListingDto(BaseModel):
    """DTO for the AI listing generator"""
    url: str
    asking_price: float


class ListingDraftResponse(BaseModel):
    title: str
    description: str
    category: ListingCategory
    tech_stack: List[str]
    monetization: List[str]
    reason_for_selling: str
    included_assets: str


class FaqDto(BaseModel):
    q: str
    a: str


class CreateListingDto(BaseModel):
    title: str = Field(..., min_length=1)
    url: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    category: ListingCategory
    asking_price: int = Field(..., gt=0)
    age_months: int = Field(..., ge=0)
    reason_for_selling: str = Field(..., min_length=1)
    monthly_revenue: Optional[int] = None
    monthly_profit: Optional[int] = None
    monthly_traffic: Optional[int] = None
    monetization: List[str] = Field(default_factory=list)
    tech_stack: List[str] = Field(default_factory=list)
    included_assets: Optional[str] = None


class UpdateListingDto(BaseModel):
    """Partial update; only fields present in the request are applied"""
    title: Optional[str] = None
    url: Optional[str] = None
    description: Optional[str] = None
    category: Optional[ListingCategory] = None
    asking_price: Optional[int] = Field(default=None, gt=0)
    monthly_revenue: Optional[int] = None
    monthly_profit: Optional[int] = None
    monthly_traffic: Optional[int] = None
    age_months: Optional[int] = Field(default=None, ge=0)
    monetization: Optional[List[str]] = None
    tech_stack: Optional[List[str]] = None
    reason_for_selling: Optional[str] = None
    included_assets: Optional[str] = None
    faqs: Optional[List[FaqDto]] = None
    status: Optional[ListingStatus] = None


class ListingImagesDto(BaseModel):
    urls: List[str]


class ListingImageResponse(BaseModel):
    url: str
    display_order: int


class ListingResponse(BaseModel):
    id: int
    seller_id: int
    title: str
    slug: str
    url: str
    description: str
    category: ListingCategory
    asking_price: int
    monthly_revenue: Optional[int] = None
    monthly_profit: Optional[int] = None
    monthly_traffic: Optional[int] = None
    age_months: int
    monetization: List[str]
    tech_stack: List[str]
    reason_for_selling: str
    included_assets: Optional[str] = None
    status: ListingStatus
    faqs: List[Dict[str, str]]
    images: List[ListingImageResponse]
    seller_username: Optional[str] = None
    seller_member_since: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, listing: Listing) -> "ListingResponse":
        return cls(
            id=listing.id.value,
            seller_id=listing.seller_id.value,
            title=listing.title,
            slug=listing.slug,
            url=listing.url,
            description=listing.description,
            category=listing.category,
            asking_price=listing.asking_price,
            monthly_revenue=listing.monthly_revenue,
            monthly_profit=listing.monthly_profit,
            monthly_traffic=listing.monthly_traffic,
            age_months=listing.age_months,
            monetization=listing.monetization,
            tech_stack=listing.tech_stack,
            reason_for_selling=listing.reason_for_selling,
            included_assets=listing.included_assets,
            status=listing.status,
            faqs=listing.faqs,
            images=[
                ListingImageResponse(url=image.url, display_order=image.display_order)
                for image in listing.images
            ],
            seller_username=listing.seller_username,
            seller_member_since=listing.seller_member_since,
            created_at=listing.created_at,
            updated_at=listing.updated_at,
        )


class SellerListingResponse(ListingResponse):
    """Dashboard row: the seller's own listing with its inquiry total"""
    inquiry_count: int = 0

    @classmethod
    def from_entity_with_count(cls, listing: Listing, inquiry_count: int) -> "SellerListingResponse":
        response = cls.from_entity(listing)
        response.inquiry_count = inquiry_count
        return response


class SellerProfileResponse(BaseModel):
    username: str
    member_since: datetime
    listings: List[ListingResponse]


class UploadResponse(BaseModel):
    url: str
