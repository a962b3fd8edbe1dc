"""Listing repository interface"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, List

from ..entities.listing import Listing
from ..enums import ListingCategory
from ..value_objects.entity_ids import ListingId, UserId


@dataclass(frozen=True)
class ListingFilters:
    category: Optional[ListingCategory] = None
    min_price: Optional[int] = None
    max_price: Optional[int] = None
    min_revenue: Optional[int] = None
    max_revenue: Optional[int] = None
    query: Optional[str] = None


class IListingRepository(ABC):

    @abstractmethod
    async def get_by_id(self, listing_id: ListingId) -> Optional[Listing]:
        pass

    @abstractmethod
    async def get_by_slug(self, slug: str) -> Optional[Listing]:
        pass

    @abstractmethod
    async def slug_exists(self, slug: str) -> bool:
        pass

    @abstractmethod
    async def search_active(self, filters: ListingFilters) -> List[Listing]:
        pass

    @abstractmethod
    async def list_by_seller(self, seller_id: UserId) -> List[Listing]:
        pass

    @abstractmethod
    async def list_active_by_seller(self, seller_id: UserId) -> List[Listing]:
        """Public seller profile: active listings, oldest first"""
        pass

    @abstractmethod
    async def add(self, listing: Listing) -> Listing:
        pass

    @abstractmethod
    async def update(self, listing: Listing) -> Listing:
        """Persist field changes and the current image set"""
        pass

    @abstractmethod
    async def delete(self, listing_id: ListingId) -> None:
        pass
