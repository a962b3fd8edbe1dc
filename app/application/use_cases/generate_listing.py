"""Generate listing draft use case"""

import logging
import math
from urllib.parse import urlparse

from ...core.exceptions import ValidationError
from ...domain.services.listing_inference import ListingDraft, generate_draft
from ...domain.value_objects.money import Money
from ...infrastructure.external_services.page_fetcher import PageFetcher
from ..dtos.listing_dtos import GenerateListingDto

logger = logging.getLogger(__name__)


def validate_site_url(url: str) -> str:
    url = (url or "").strip()
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ValidationError("Please enter a valid URL (https://...).")
    return url


class GenerateListingUseCase:
    """Scrape a seller's homepage and infer a draft listing from it.

    Fetch failures raise FetchError; the seller can still fill in the form
    by hand.
    """

    def __init__(self, page_fetcher: PageFetcher):
        self.page_fetcher = page_fetcher

    async def execute(self, request: GenerateListingDto) -> ListingDraft:
        url = validate_site_url(request.url)
        price = request.asking_price
        if price is None or not math.isfinite(price) or price <= 0:
            raise ValidationError("url and asking_price are required.")

        html = await self.page_fetcher.fetch(url)
        draft = generate_draft(url, html, Money.of(price))

        logger.info("Generated %s listing draft for %s", draft.category.value, url)
        return draft
