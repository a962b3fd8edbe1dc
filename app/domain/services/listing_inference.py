"""Heuristic listing metadata inference.

Turns the HTML of a seller's homepage into a draft listing: category,
tech stack, monetization channels, a cleaned title and a generated
description. Everything here is pure and deterministic; fetching the page
is the caller's job.
"""

import re
from dataclasses import dataclass, field, asdict
from typing import List, Optional, Pattern, Sequence, Tuple

from ..enums import ListingCategory
from ..value_objects.money import Money


TITLE_MAX_LENGTH = 60
FOR_SALE_SUFFIX = " for Sale"
DEFAULT_TITLE = "Established Website for Sale"
DEFAULT_TECH_STACK = ["HTML/CSS", "JavaScript"]

REASON_FOR_SELLING = (
    "I'm focusing on other projects and don't have the bandwidth to grow this site to its "
    "full potential. I'd love to see it in the hands of someone who can dedicate the time "
    "and resources it deserves."
)
INCLUDED_ASSETS = (
    "Domain name, full source code and codebase, all content and media assets, "
    "Google Analytics / Search Console access, social media accounts (if any), and a "
    "30-day handover period to ensure a smooth transition."
)

CATEGORY_LABELS = {
    ListingCategory.CONTENT_SITE: "content website",
    ListingCategory.SAAS: "SaaS product",
    ListingCategory.ECOMMERCE: "eCommerce store",
    ListingCategory.TOOL_OR_APP: "web application",
    ListingCategory.NEWSLETTER: "email newsletter",
    ListingCategory.COMMUNITY: "online community",
    ListingCategory.SERVICE_BUSINESS: "service business",
    ListingCategory.OTHER: "online business",
}

# Checked in order, first match wins
CATEGORY_RULES: Sequence[Tuple[ListingCategory, Pattern]] = (
    (ListingCategory.ECOMMERCE, re.compile(r"shop|store|ecommerce|woocommerce|shopify|product|cart")),
    (ListingCategory.SAAS, re.compile(r"saas|software|platform|subscription|dashboard|app")),
    (ListingCategory.NEWSLETTER, re.compile(r"newsletter|substack|email list|subscribers")),
    (ListingCategory.COMMUNITY, re.compile(r"community|forum|discord|members|membership")),
    (ListingCategory.SERVICE_BUSINESS, re.compile(r"service|agency|freelance|consulting")),
    (ListingCategory.TOOL_OR_APP, re.compile(r"tool|utility|calculator|generator")),
)

# Generator meta tag: first matching platform wins
GENERATOR_PLATFORMS: Sequence[Tuple[Pattern, List[str]]] = (
    (re.compile(r"wordpress", re.I), ["WordPress", "PHP"]),
    (re.compile(r"joomla", re.I), ["Joomla", "PHP"]),
    (re.compile(r"drupal", re.I), ["Drupal", "PHP"]),
    (re.compile(r"wix", re.I), ["Wix"]),
    (re.compile(r"squarespace", re.I), ["Squarespace"]),
    (re.compile(r"webflow", re.I), ["Webflow"]),
    (re.compile(r"ghost", re.I), ["Ghost"]),
)

# Body fingerprints: every match contributes (case-sensitive on raw HTML)
BODY_FINGERPRINTS: Sequence[Tuple[Pattern, List[str]]] = (
    (re.compile(r"cdn\.shopify\.com|myshopify\.com"), ["Shopify"]),
    (re.compile(r"/_next/"), ["Next.js", "React"]),
    (re.compile(r"react"), ["React"]),
    (re.compile(r"wp-content|wp-includes"), ["WordPress", "PHP"]),
    (re.compile(r"gatsby"), ["Gatsby"]),
    (re.compile(r"nuxt"), ["Nuxt.js", "Vue"]),
    (re.compile(r"vue"), ["Vue"]),
    (re.compile(r"angular"), ["Angular"]),
    (re.compile(r"laravel"), ["Laravel", "PHP"]),
    (re.compile(r"rails|ruby-on-rails"), ["Ruby on Rails"]),
    (re.compile(r"django"), ["Django", "Python"]),
    (re.compile(r"flask"), ["Flask", "Python"]),
)

DISPLAY_ADS = "Display Ads"
AFFILIATE = "Affiliate Marketing"
SUBSCRIPTIONS = "Subscriptions"
SPONSORED = "Sponsored Content"
DIGITAL_PRODUCTS = "Digital Products"
PRODUCT_SALES = "Product Sales"
NEWSLETTER = "Newsletter"

DISPLAY_ADS_RE = re.compile(r"adsense|display ads|banner ads|mediavine|ezoic|adthrive")
AFFILIATE_RE = re.compile(r"affiliate|amazon associates|commission")
SUBSCRIPTIONS_RE = re.compile(r"subscription|saas|monthly fee|annual plan")
SPONSORED_RE = re.compile(r"sponsored|sponsorship|brand deal")
DIGITAL_PRODUCTS_RE = re.compile(r"ebook|course|digital product|download")
PRODUCT_SALES_RE = re.compile(r"ecommerce|shop|store")
NEWSLETTER_RE = re.compile(r"newsletter|email")

TITLE_RE = re.compile(r"<title[^>]*>([^<]+)</title>", re.I)
TITLE_SUFFIX_RE = re.compile(r"\s*[|–—-]\s*[^|–—-]+$")
FOR_SALE_RE = re.compile(r"for sale", re.I)


@dataclass(frozen=True)
class PageMetadata:
    """Raw signals extracted from a homepage"""
    title: str = ""
    description: str = ""
    keywords: str = ""
    generator: str = ""


@dataclass
class ListingDraft:
    """Candidate listing handed back to the seller for review"""
    title: str
    description: str
    category: ListingCategory
    tech_stack: List[str] = field(default_factory=list)
    monetization: List[str] = field(default_factory=list)
    reason_for_selling: str = REASON_FOR_SELLING
    included_assets: str = INCLUDED_ASSETS

    def to_dict(self) -> dict:
        data = asdict(self)
        data["category"] = self.category.value
        return data


def _meta_patterns(name: str) -> Tuple[Pattern, Pattern]:
    """name-then-content and content-then-name orderings"""
    return (
        re.compile(
            r"<meta[^>]+name=[\"']" + name + r"[\"'][^>]+content=[\"']([^\"']+)[\"']", re.I
        ),
        re.compile(
            r"<meta[^>]+content=[\"']([^\"']+)[\"'][^>]+name=[\"']" + name + r"[\"']", re.I
        ),
    )


META_PATTERNS = {
    name: _meta_patterns(name) for name in ("description", "keywords", "generator")
}


def _find_meta(html: str, name: str) -> str:
    for pattern in META_PATTERNS[name]:
        match = pattern.search(html)
        if match:
            return match.group(1).strip()
    return ""


def extract_metadata(html: str) -> PageMetadata:
    """Pull title and meta tags out of raw HTML (first match wins)."""
    title_match = TITLE_RE.search(html)
    return PageMetadata(
        title=title_match.group(1).strip() if title_match else "",
        description=_find_meta(html, "description"),
        keywords=_find_meta(html, "keywords"),
        generator=_find_meta(html, "generator"),
    )


def build_search_text(metadata: PageMetadata, url: str) -> str:
    return " ".join([metadata.title, metadata.description, metadata.keywords, url])


def infer_category(text: str) -> ListingCategory:
    """Classify the search text. Rule order matters: ecommerce beats saas beats ..."""
    lowered = text.lower()
    for category, pattern in CATEGORY_RULES:
        if pattern.search(lowered):
            return category
    return ListingCategory.CONTENT_SITE


def _add_unique(labels: List[str], new_labels: Sequence[str]) -> None:
    for label in new_labels:
        if label not in labels:
            labels.append(label)


def detect_tech_stack(html: str, generator: Optional[str] = None) -> List[str]:
    """Canonical technology labels for a page.

    The generator meta tag is authoritative; body fingerprints are only
    scanned when it yields nothing.
    """
    if generator is None:
        generator = _find_meta(html, "generator")

    tech: List[str] = []
    if generator:
        for pattern, labels in GENERATOR_PLATFORMS:
            if pattern.search(generator):
                _add_unique(tech, labels)
                break

    if not tech:
        for pattern, labels in BODY_FINGERPRINTS:
            if pattern.search(html):
                _add_unique(tech, labels)

    return tech or list(DEFAULT_TECH_STACK)


def infer_monetization(text: str, category: ListingCategory) -> List[str]:
    """Every matching revenue model, in a fixed order, with a per-category fallback."""
    lowered = text.lower()
    monetization: List[str] = []

    if DISPLAY_ADS_RE.search(lowered):
        monetization.append(DISPLAY_ADS)
    if AFFILIATE_RE.search(lowered):
        monetization.append(AFFILIATE)
    if SUBSCRIPTIONS_RE.search(lowered) or category == ListingCategory.SAAS:
        monetization.append(SUBSCRIPTIONS)
    if SPONSORED_RE.search(lowered):
        monetization.append(SPONSORED)
    if DIGITAL_PRODUCTS_RE.search(lowered):
        monetization.append(DIGITAL_PRODUCTS)
    if PRODUCT_SALES_RE.search(lowered) or category == ListingCategory.ECOMMERCE:
        monetization.append(PRODUCT_SALES)
    if NEWSLETTER_RE.search(lowered) or category == ListingCategory.NEWSLETTER:
        # a paid newsletter is already covered by Subscriptions
        if SUBSCRIPTIONS not in monetization:
            monetization.append(NEWSLETTER)

    if monetization:
        return monetization

    if category == ListingCategory.CONTENT_SITE:
        return [DISPLAY_ADS, AFFILIATE]
    if category == ListingCategory.ECOMMERCE:
        return [PRODUCT_SALES]
    if category == ListingCategory.SAAS:
        return [SUBSCRIPTIONS]
    return [AFFILIATE]


def _truncate(text: str, limit: int) -> str:
    if len(text) <= limit:
        return text
    return text[:limit - 3] + "..."


def clean_title(raw_title: str) -> str:
    """Drop the trailing brand segment and make sure the title reads '... for Sale'.

    The result never exceeds TITLE_MAX_LENGTH characters, suffix included.
    """
    raw_title = raw_title.strip()
    title = TITLE_SUFFIX_RE.sub("", raw_title).strip()
    if not title:
        title = raw_title
    if not title:
        title = DEFAULT_TITLE

    title = _truncate(title, TITLE_MAX_LENGTH)
    if not FOR_SALE_RE.search(title):
        title = _truncate(title, TITLE_MAX_LENGTH - len(FOR_SALE_SUFFIX)) + FOR_SALE_SUFFIX
    return title


def build_description(
    meta_description: str,
    category: ListingCategory,
    tech_stack: Sequence[str],
    monetization: Sequence[str],
    asking_price: Money,
) -> str:
    category_label = CATEGORY_LABELS.get(category, "online business")
    tech_summary = ", ".join(tech_stack[:3])
    monetization_summary = " and ".join(monetization[:2])
    price = asking_price.formatted()

    if meta_description:
        intro = (
            f"{meta_description} This is a {category_label} with a proven track record, "
            f"now available for acquisition at {price}."
        )
    else:
        intro = (
            f"This is an established {category_label} available for acquisition at {price}. "
            f"Built on {tech_summary}, it represents a turnkey opportunity for a new owner "
            f"to take over and grow."
        )

    body = (
        f"The business is monetized through {monetization_summary}, providing a diversified "
        f"revenue base. Built on {tech_summary}, the technical stack is modern and "
        f"maintainable. A new owner can hit the ground running with an existing audience and "
        f"established SEO footprint. All assets, including the domain, codebase, and content "
        f"library, are included in the sale."
    )

    return f"{intro}\n\n{body}"


def generate_draft(url: str, html: str, asking_price: Money) -> ListingDraft:
    """Run every classifier over an already-fetched page."""
    metadata = extract_metadata(html)
    search_text = build_search_text(metadata, url)

    category = infer_category(search_text)
    tech_stack = detect_tech_stack(html, metadata.generator)
    monetization = infer_monetization(search_text, category)

    return ListingDraft(
        title=clean_title(metadata.title),
        description=build_description(
            metadata.description, category, tech_stack, monetization, asking_price
        ),
        category=category,
        tech_stack=tech_stack,
        monetization=monetization,
    )
