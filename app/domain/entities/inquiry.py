"""Buyer inquiry entity"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from ..value_objects.entity_ids import InquiryId, ListingId


@dataclass
class Inquiry:
    listing_id: ListingId
    buyer_name: str
    buyer_email: str
    message: str
    id: Optional[InquiryId] = None
    is_read: bool = False
    created_at: datetime = field(default_factory=datetime.utcnow)

    def mark_read(self) -> None:
        self.is_read = True
