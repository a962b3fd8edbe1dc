"""Listing repository implementation"""

from typing import Optional, List
from sqlalchemy.orm import Session, joinedload
from sqlalchemy import or_

from ...domain.repositories.listing_repository import IListingRepository, ListingFilters
from ...domain.entities.listing import Listing, ListingImage
from ...domain.enums import ListingCategory, ListingStatus
from ...domain.value_objects.entity_ids import ListingId, UserId
from ..orm.listing_model import ListingModel, ListingImageModel


class ListingRepositoryImpl(IListingRepository):
    """Repository implementation for Listing aggregate (listing + images)"""

    def __init__(self, session: Session):
        self.session = session

    async def get_by_id(self, listing_id: ListingId) -> Optional[Listing]:
        model = self._get_model(listing_id.value)
        return map_listing(model) if model else None

    async def get_by_slug(self, slug: str) -> Optional[Listing]:
        model = self.session.query(ListingModel).filter(ListingModel.slug == slug).first()
        return map_listing(model) if model else None

    async def slug_exists(self, slug: str) -> bool:
        return self.session.query(ListingModel.id).filter(ListingModel.slug == slug).first() is not None

    async def search_active(self, filters: ListingFilters) -> List[Listing]:
        """Public browse: active listings matching every supplied filter"""
        query = (
            self.session.query(ListingModel)
            .options(joinedload(ListingModel.seller))
            .filter(ListingModel.status == ListingStatus.ACTIVE.value)
        )

        if filters.category:
            query = query.filter(ListingModel.category == filters.category.value)
        if filters.min_price is not None:
            query = query.filter(ListingModel.asking_price >= filters.min_price)
        if filters.max_price is not None:
            query = query.filter(ListingModel.asking_price <= filters.max_price)
        if filters.min_revenue is not None:
            query = query.filter(ListingModel.monthly_revenue >= filters.min_revenue)
        if filters.max_revenue is not None:
            query = query.filter(ListingModel.monthly_revenue <= filters.max_revenue)
        if filters.query and filters.query.strip():
            search_term = f"%{filters.query.strip()}%"
            query = query.filter(
                or_(
                    ListingModel.title.ilike(search_term),
                    ListingModel.description.ilike(search_term),
                )
            )

        models = query.order_by(ListingModel.created_at, ListingModel.id).all()
        return [map_listing(model) for model in models]

    async def list_by_seller(self, seller_id: UserId) -> List[Listing]:
        models = (
            self.session.query(ListingModel)
            .filter(ListingModel.seller_id == seller_id.value)
            .order_by(ListingModel.created_at.desc(), ListingModel.id.desc())
            .all()
        )
        return [map_listing(model) for model in models]

    async def list_active_by_seller(self, seller_id: UserId) -> List[Listing]:
        models = (
            self.session.query(ListingModel)
            .options(joinedload(ListingModel.seller))
            .filter(
                ListingModel.seller_id == seller_id.value,
                ListingModel.status == ListingStatus.ACTIVE.value,
            )
            .order_by(ListingModel.created_at, ListingModel.id)
            .all()
        )
        return [map_listing(model) for model in models]

    async def add(self, listing: Listing) -> Listing:
        model = ListingModel(
            seller_id=listing.seller_id.value,
            slug=listing.slug,
            created_at=listing.created_at,
        )
        self._update_model_from_entity(model, listing)
        self.session.add(model)
        self.session.flush()

        listing.id = ListingId(model.id)
        return listing

    async def update(self, listing: Listing) -> Listing:
        model = self._get_model(listing.id.value)
        if model:
            self._update_model_from_entity(model, listing)
            self.session.flush()
        return listing

    async def delete(self, listing_id: ListingId) -> None:
        model = self._get_model(listing_id.value)
        if model:
            # ORM-level delete so images and inquiries cascade
            self.session.delete(model)
            self.session.flush()

    def _get_model(self, listing_id: int) -> Optional[ListingModel]:
        return self.session.query(ListingModel).filter(ListingModel.id == listing_id).first()

    def _update_model_from_entity(self, model: ListingModel, listing: Listing) -> None:
        """Update ORM model from domain entity"""
        model.title = listing.title
        model.url = listing.url
        model.description = listing.description
        model.category = listing.category.value
        model.asking_price = listing.asking_price
        model.monthly_revenue = listing.monthly_revenue
        model.monthly_profit = listing.monthly_profit
        model.monthly_traffic = listing.monthly_traffic
        model.age_months = listing.age_months
        model.monetization = list(listing.monetization)
        model.tech_stack = list(listing.tech_stack)
        model.reason_for_selling = listing.reason_for_selling
        model.included_assets = listing.included_assets
        model.status = listing.status.value
        model.faqs = list(listing.faqs)
        model.updated_at = listing.updated_at

        current = [(image.url, image.display_order) for image in model.images]
        wanted = [(image.url, image.display_order) for image in listing.images]
        if current != wanted:
            model.images = [
                ListingImageModel(url=image.url, display_order=image.display_order)
                for image in listing.images
            ]


def map_listing(model: ListingModel) -> Listing:
    """Map ORM model to domain entity"""
    return Listing(
        id=ListingId(model.id),
        seller_id=UserId(model.seller_id),
        title=model.title,
        slug=model.slug,
        url=model.url,
        description=model.description,
        category=ListingCategory(model.category),
        asking_price=model.asking_price,
        monthly_revenue=model.monthly_revenue,
        monthly_profit=model.monthly_profit,
        monthly_traffic=model.monthly_traffic,
        age_months=model.age_months,
        monetization=list(model.monetization or []),
        tech_stack=list(model.tech_stack or []),
        reason_for_selling=model.reason_for_selling,
        included_assets=model.included_assets,
        status=ListingStatus(model.status),
        faqs=list(model.faqs or []),
        images=[
            ListingImage(
                id=image.id,
                url=image.url,
                display_order=image.display_order,
                created_at=image.created_at,
            )
            for image in model.images
        ],
        seller_username=model.seller.username if model.seller else None,
        seller_member_since=model.seller.created_at if model.seller else None,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )
