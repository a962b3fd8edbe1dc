"""
Domain Enums - Business domain enumerations
"""

from enum import Enum


class ListingCategory(str, Enum):
    CONTENT_SITE = "content-site"
    SAAS = "saas"
    ECOMMERCE = "ecommerce"
    TOOL_OR_APP = "tool-or-app"
    NEWSLETTER = "newsletter"
    COMMUNITY = "community"
    SERVICE_BUSINESS = "service-business"
    OTHER = "other"


class ListingStatus(str, Enum):
    ACTIVE = "active"
    UNDER_OFFER = "under_offer"
    SOLD = "sold"
    UNPUBLISHED = "unpublished"
