"""Listing management use cases"""

import logging
from typing import List, Optional, Tuple

from ...core.config import settings
from ...core.exceptions import NotFoundError, ValidationError
from ...domain.entities.listing import Listing
from ...domain.entities.user import User
from ...domain.repositories.listing_repository import ListingFilters
from ...domain.repositories.unit_of_work import IUnitOfWork
from ...domain.services.slug import generate_slug
from ...domain.value_objects.entity_ids import ListingId
from ..dtos.listing_dtos import CreateListingDto, UpdateListingDto
from .generate_listing import validate_site_url

logger = logging.getLogger(__name__)

SLUG_ATTEMPTS = 5


class BrowseListingsUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, filters: ListingFilters) -> List[Listing]:
        async with self.unit_of_work:
            return await self.unit_of_work.listings.search_active(filters)


class GetListingUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, slug: str, viewer: Optional[User] = None) -> Listing:
        """Active listings are public; the owner can also see their own drafts"""
        async with self.unit_of_work:
            listing = await self.unit_of_work.listings.get_by_slug(slug)

        if not listing:
            raise NotFoundError("Listing not found.")
        if not listing.is_active and not (viewer and listing.is_owned_by(viewer.id)):
            raise NotFoundError("Listing not found.")
        return listing


class ListSellerListingsUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, seller: User) -> List[Tuple[Listing, int]]:
        """The seller's own listings, any status, with their inquiry totals"""
        async with self.unit_of_work:
            listings = await self.unit_of_work.listings.list_by_seller(seller.id)
            counts = await self.unit_of_work.inquiries.count_by_listing(seller.id)
        return [(listing, counts.get(listing.id.value, 0)) for listing in listings]


class CreateListingUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, seller: User, request: CreateListingDto) -> Listing:
        url = validate_site_url(request.url)

        async with self.unit_of_work:
            slug = await self._unique_slug(request.title)
            listing = Listing(
                seller_id=seller.id,
                title=request.title.strip(),
                slug=slug,
                url=url,
                description=request.description,
                category=request.category,
                asking_price=request.asking_price,
                age_months=request.age_months,
                reason_for_selling=request.reason_for_selling,
                monthly_revenue=request.monthly_revenue,
                monthly_profit=request.monthly_profit,
                monthly_traffic=request.monthly_traffic,
                monetization=request.monetization,
                tech_stack=request.tech_stack,
                included_assets=request.included_assets,
                seller_username=seller.username.value,
                seller_member_since=seller.created_at,
            )
            listing = await self.unit_of_work.listings.add(listing)
            await self.unit_of_work.commit()

        logger.info("User %s created listing %s", seller.id.value, listing.id.value)
        return listing

    async def _unique_slug(self, title: str) -> str:
        for _ in range(SLUG_ATTEMPTS):
            slug = generate_slug(title)
            if not await self.unit_of_work.listings.slug_exists(slug):
                return slug
        raise ValidationError("Could not generate a unique slug, please try again.")


async def _get_owned_listing(unit_of_work: IUnitOfWork, listing_id: int, owner: User) -> Listing:
    listing = await unit_of_work.listings.get_by_id(ListingId(listing_id))
    # Someone else's listing looks exactly like a missing one
    if not listing or not listing.is_owned_by(owner.id):
        raise NotFoundError()
    return listing


class UpdateListingUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, owner: User, listing_id: int, request: UpdateListingDto) -> Listing:
        changes = request.model_dump(exclude_unset=True)
        if "url" in changes:
            changes["url"] = validate_site_url(changes["url"])
        for required in ("title", "url", "description", "category", "asking_price",
                         "age_months", "reason_for_selling", "status"):
            if required in changes and changes[required] is None:
                raise ValidationError(f"{required} cannot be empty.")

        async with self.unit_of_work:
            listing = await _get_owned_listing(self.unit_of_work, listing_id, owner)
            listing.apply_changes(changes)
            await self.unit_of_work.listings.update(listing)
            await self.unit_of_work.commit()
        return listing


class DeleteListingUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, actor: User, listing_id: int) -> None:
        """Owners delete their own listings; admins may delete any"""
        async with self.unit_of_work:
            listing = await self.unit_of_work.listings.get_by_id(ListingId(listing_id))
            if not listing or not (actor.is_admin or listing.is_owned_by(actor.id)):
                return
            await self.unit_of_work.listings.delete(listing.id)
            await self.unit_of_work.commit()

        logger.info("User %s deleted listing %s", actor.id.value, listing_id)


class ReplaceListingImagesUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, owner: User, listing_id: int, urls: List[str]) -> Listing:
        async with self.unit_of_work:
            listing = await _get_owned_listing(self.unit_of_work, listing_id, owner)
            listing.replace_images(urls, limit=settings.MAX_LISTING_IMAGES)
            await self.unit_of_work.listings.update(listing)
            await self.unit_of_work.commit()
        return listing
