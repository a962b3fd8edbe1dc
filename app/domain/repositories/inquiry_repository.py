"""Inquiry repository interface"""

from abc import ABC, abstractmethod
from typing import Dict, Optional, List, Tuple

from ..entities.inquiry import Inquiry
from ..entities.listing import Listing
from ..value_objects.entity_ids import InquiryId, UserId


class IInquiryRepository(ABC):

    @abstractmethod
    async def add(self, inquiry: Inquiry) -> Inquiry:
        pass

    @abstractmethod
    async def list_for_seller(self, seller_id: UserId) -> List[Tuple[Inquiry, Listing]]:
        """Inquiries on the seller's listings, newest first"""
        pass

    @abstractmethod
    async def count_by_listing(self, seller_id: UserId) -> Dict[int, int]:
        """Inquiry totals keyed by listing id; listings without inquiries are omitted"""
        pass

    @abstractmethod
    async def get_for_seller(self, inquiry_id: InquiryId, seller_id: UserId) -> Optional[Inquiry]:
        pass

    @abstractmethod
    async def update(self, inquiry: Inquiry) -> Inquiry:
        pass
