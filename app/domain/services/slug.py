"""URL slugs for listings"""

import re
import secrets
import unicodedata

MAX_SLUG_BASE_LENGTH = 60


def slugify(text: str) -> str:
    normalized = unicodedata.normalize("NFKD", text).encode("ascii", "ignore").decode("ascii")
    slug = re.sub(r"[^a-z0-9]+", "-", normalized.lower()).strip("-")
    return slug[:MAX_SLUG_BASE_LENGTH].rstrip("-") or "listing"


def generate_slug(title: str) -> str:
    """slugified title plus a short random suffix, e.g. acme-shop-3f9a1c"""
    return f"{slugify(title)}-{secrets.token_hex(3)}"
