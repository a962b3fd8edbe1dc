"""Inquiry repository implementation"""

from typing import Dict, Optional, List, Tuple
from sqlalchemy import func
from sqlalchemy.orm import Session

from ...domain.repositories.inquiry_repository import IInquiryRepository
from ...domain.entities.inquiry import Inquiry
from ...domain.entities.listing import Listing
from ...domain.value_objects.entity_ids import InquiryId, ListingId, UserId
from ..orm.inquiry_model import InquiryModel
from ..orm.listing_model import ListingModel
from .listing_repository_impl import map_listing


class InquiryRepositoryImpl(IInquiryRepository):

    def __init__(self, session: Session):
        self.session = session

    async def add(self, inquiry: Inquiry) -> Inquiry:
        model = InquiryModel(
            listing_id=inquiry.listing_id.value,
            buyer_name=inquiry.buyer_name,
            buyer_email=inquiry.buyer_email,
            message=inquiry.message,
            is_read=inquiry.is_read,
            created_at=inquiry.created_at,
        )
        self.session.add(model)
        self.session.flush()
        inquiry.id = InquiryId(model.id)
        return inquiry

    async def list_for_seller(self, seller_id: UserId) -> List[Tuple[Inquiry, Listing]]:
        rows = (
            self.session.query(InquiryModel, ListingModel)
            .join(ListingModel, InquiryModel.listing_id == ListingModel.id)
            .filter(ListingModel.seller_id == seller_id.value)
            .order_by(InquiryModel.created_at.desc(), InquiryModel.id.desc())
            .all()
        )
        return [(self._map_to_entity(inquiry), map_listing(listing)) for inquiry, listing in rows]

    async def count_by_listing(self, seller_id: UserId) -> Dict[int, int]:
        rows = (
            self.session.query(InquiryModel.listing_id, func.count(InquiryModel.id))
            .join(ListingModel, InquiryModel.listing_id == ListingModel.id)
            .filter(ListingModel.seller_id == seller_id.value)
            .group_by(InquiryModel.listing_id)
            .all()
        )
        return {listing_id: count for listing_id, count in rows}

    async def get_for_seller(self, inquiry_id: InquiryId, seller_id: UserId) -> Optional[Inquiry]:
        model = (
            self.session.query(InquiryModel)
            .join(ListingModel, InquiryModel.listing_id == ListingModel.id)
            .filter(InquiryModel.id == inquiry_id.value, ListingModel.seller_id == seller_id.value)
            .first()
        )
        return self._map_to_entity(model) if model else None

    async def update(self, inquiry: Inquiry) -> Inquiry:
        existing = self.session.query(InquiryModel).filter(InquiryModel.id == inquiry.id.value).first()
        if existing:
            existing.is_read = inquiry.is_read
            self.session.flush()
        return inquiry

    def _map_to_entity(self, model: InquiryModel) -> Inquiry:
        return Inquiry(
            id=InquiryId(model.id),
            listing_id=ListingId(model.listing_id),
            buyer_name=model.buyer_name,
            buyer_email=model.buyer_email,
            message=model.message,
            is_read=model.is_read,
            created_at=model.created_at,
        )
