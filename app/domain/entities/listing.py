"""Listing entity with business logic"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, List, Dict, Any

from ..value_objects.entity_ids import ListingId, UserId
from ..enums import ListingCategory, ListingStatus


# Fields a seller may change after publishing
EDITABLE_FIELDS = (
    "title", "url", "description", "category", "asking_price",
    "monthly_revenue", "monthly_profit", "monthly_traffic", "age_months",
    "monetization", "tech_stack", "reason_for_selling", "included_assets",
    "faqs", "status",
)


@dataclass
class ListingImage:
    url: str
    display_order: int = 0
    id: Optional[int] = None
    created_at: datetime = field(default_factory=datetime.utcnow)


@dataclass
class Listing:
    seller_id: UserId
    title: str
    slug: str
    url: str
    description: str
    category: ListingCategory
    asking_price: int
    age_months: int
    reason_for_selling: str
    id: Optional[ListingId] = None
    monthly_revenue: Optional[int] = None
    monthly_profit: Optional[int] = None
    monthly_traffic: Optional[int] = None
    monetization: List[str] = field(default_factory=list)
    tech_stack: List[str] = field(default_factory=list)
    included_assets: Optional[str] = None
    status: ListingStatus = ListingStatus.ACTIVE
    faqs: List[Dict[str, str]] = field(default_factory=list)
    images: List[ListingImage] = field(default_factory=list)
    # Read-only, joined from the seller's account
    seller_username: Optional[str] = None
    seller_member_since: Optional[datetime] = None
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)

    @property
    def is_active(self) -> bool:
        return self.status == ListingStatus.ACTIVE

    def is_owned_by(self, user_id: UserId) -> bool:
        return self.seller_id == user_id

    def apply_changes(self, changes: Dict[str, Any]) -> None:
        """Business logic: update whitelisted fields, ignore the rest"""
        for key in EDITABLE_FIELDS:
            if key not in changes:
                continue
            value = changes[key]
            if key == "category":
                value = ListingCategory(value)
            elif key == "status":
                value = ListingStatus(value)
            setattr(self, key, value)
        self.updated_at = datetime.utcnow()

    def replace_images(self, urls: List[str], limit: int) -> None:
        """Business logic: the given urls become the full image set, in order"""
        self.images = [
            ListingImage(url=url, display_order=index)
            for index, url in enumerate(urls[:limit])
        ]
        self.updated_at = datetime.utcnow()
