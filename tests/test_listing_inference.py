"""Listing inference heuristics"""

from decimal import Decimal

import pytest

from app.domain.enums import ListingCategory
from app.domain.services.listing_inference import (
    DEFAULT_TITLE,
    REASON_FOR_SELLING,
    TITLE_MAX_LENGTH,
    build_description,
    clean_title,
    detect_tech_stack,
    extract_metadata,
    generate_draft,
    infer_category,
    infer_monetization,
)
from app.domain.value_objects.money import Money


ACME_HTML = """
<html>
<head>
  <title>Acme Shop | Acme Inc</title>
  <meta name="description" content="Handmade widgets shipped worldwide.">
</head>
<body>
  <script src="https://cdn.shopify.com/s/files/theme.js"></script>
</body>
</html>
"""


class TestExtractMetadata:

    def test_reads_title_and_meta_tags(self):
        html = (
            '<title> My Blog </title>'
            '<meta name="description" content="Recipes and tips">'
            '<meta name="keywords" content="food, cooking">'
            '<meta name="generator" content="WordPress 6.4">'
        )
        metadata = extract_metadata(html)
        assert metadata.title == "My Blog"
        assert metadata.description == "Recipes and tips"
        assert metadata.keywords == "food, cooking"
        assert metadata.generator == "WordPress 6.4"

    def test_content_before_name_attribute_order(self):
        html = "<META content='Reversed order' NAME='description'>"
        assert extract_metadata(html).description == "Reversed order"

    def test_missing_tags_are_empty(self):
        metadata = extract_metadata("<html><body>nothing here</body></html>")
        assert metadata.title == ""
        assert metadata.description == ""
        assert metadata.generator == ""


class TestInferCategory:

    def test_first_rule_wins(self):
        assert infer_category("the best shop with a mortgage calculator") == ListingCategory.ECOMMERCE

    @pytest.mark.parametrize("text, expected", [
        ("Project management software for teams", ListingCategory.SAAS),
        ("A weekly newsletter about climbing", ListingCategory.NEWSLETTER),
        ("Discord community for gardeners", ListingCategory.COMMUNITY),
        ("Boutique design agency", ListingCategory.SERVICE_BUSINESS),
        ("Free loan calculator", ListingCategory.TOOL_OR_APP),
    ])
    def test_keyword_groups(self, text, expected):
        assert infer_category(text) == expected

    def test_case_insensitive(self):
        assert infer_category("SHOPIFY THEMES") == ListingCategory.ECOMMERCE

    def test_defaults_to_content_site(self):
        assert infer_category("Thoughts on hiking in Norway") == ListingCategory.CONTENT_SITE


class TestDetectTechStack:

    def test_generator_tag_wins_over_body(self):
        html = (
            '<meta name="generator" content="WordPress 6.4.2">'
            '<script src="/_next/static/chunks/main.js"></script>'
        )
        assert detect_tech_stack(html) == ["WordPress", "PHP"]

    def test_unknown_generator_falls_back_to_body(self):
        html = '<meta name="generator" content="Hugo 0.120"><script src="/_next/app.js"></script>'
        assert detect_tech_stack(html) == ["Next.js", "React"]

    def test_body_fingerprints_union_without_duplicates(self):
        html = '<link href="/wp-content/themes/x.css"><script>window.laravel = {}</script>'
        assert detect_tech_stack(html) == ["WordPress", "PHP", "Laravel"]

    def test_default_stack(self):
        assert detect_tech_stack("<html><body>plain</body></html>") == ["HTML/CSS", "JavaScript"]

    def test_explicit_generator_argument(self):
        assert detect_tech_stack("<html></html>", generator="Ghost 5.0") == ["Ghost"]


class TestInferMonetization:

    def test_union_in_fixed_order(self):
        text = "we run adsense and amazon associates links"
        assert infer_monetization(text, ListingCategory.CONTENT_SITE) == [
            "Display Ads", "Affiliate Marketing",
        ]

    def test_subscriptions_suppress_newsletter(self):
        text = "saas with an email onboarding flow"
        result = infer_monetization(text, ListingCategory.SAAS)
        assert "Subscriptions" in result
        assert "Newsletter" not in result

    def test_newsletter_category_adds_newsletter(self):
        assert infer_monetization("weekly digest", ListingCategory.NEWSLETTER) == ["Newsletter"]

    @pytest.mark.parametrize("category, expected", [
        (ListingCategory.CONTENT_SITE, ["Display Ads", "Affiliate Marketing"]),
        (ListingCategory.COMMUNITY, ["Affiliate Marketing"]),
        (ListingCategory.TOOL_OR_APP, ["Affiliate Marketing"]),
    ])
    def test_category_fallbacks(self, category, expected):
        assert infer_monetization("nothing relevant", category) == expected

    def test_ecommerce_category_implies_product_sales(self):
        assert infer_monetization("widgets", ListingCategory.ECOMMERCE) == ["Product Sales"]


class TestCleanTitle:

    @pytest.mark.parametrize("raw, expected", [
        ("Acme Shop | Acme Inc", "Acme Shop for Sale"),
        ("Widget Guide - Widgets.com", "Widget Guide for Sale"),
        ("Recipes — Grandma", "Recipes for Sale"),
        ("Plain Title", "Plain Title for Sale"),
    ])
    def test_strips_brand_and_appends_suffix(self, raw, expected):
        assert clean_title(raw) == expected

    def test_keeps_existing_for_sale_phrase(self):
        assert clean_title("Niche Blog FOR SALE") == "Niche Blog FOR SALE"

    def test_falls_back_to_raw_title_when_stripping_empties_it(self):
        assert clean_title("| Brand") == "| Brand for Sale"

    def test_default_title(self):
        assert clean_title("") == DEFAULT_TITLE
        assert clean_title("   ") == DEFAULT_TITLE

    def test_long_titles_are_bounded(self):
        title = clean_title("A" * 200)
        assert len(title) <= TITLE_MAX_LENGTH
        assert title.endswith("... for Sale")

    def test_long_title_with_phrase_is_only_truncated(self):
        title = clean_title("Website for sale " + "x" * 100)
        assert len(title) == TITLE_MAX_LENGTH
        assert title.endswith("...")


class TestBuildDescription:

    def test_with_meta_description(self):
        description = build_description(
            "Great recipes.",
            ListingCategory.CONTENT_SITE,
            ["WordPress", "PHP"],
            ["Display Ads", "Affiliate Marketing"],
            Money.of(5000),
        )
        intro, body = description.split("\n\n")
        assert intro.startswith("Great recipes. This is a content website")
        assert "$5,000" in intro
        assert "Display Ads and Affiliate Marketing" in body
        assert "domain, codebase, and content library" in body

    def test_without_meta_description_uses_top_three_tech(self):
        description = build_description(
            "",
            ListingCategory.SAAS,
            ["Next.js", "React", "Django", "Python"],
            ["Subscriptions"],
            Money.of(Decimal("1250.5")),
        )
        intro = description.split("\n\n")[0]
        assert intro.startswith("This is an established SaaS product")
        assert "$1,250.50" in intro
        assert "Built on Next.js, React, Django," in intro
        assert "Python" not in intro


class TestGenerateDraft:

    def test_acme_shop_example(self):
        draft = generate_draft("https://example.com/shop", ACME_HTML, Money.of(5000))
        assert draft.category == ListingCategory.ECOMMERCE
        assert "Shopify" in draft.tech_stack
        assert draft.title == "Acme Shop for Sale"
        assert "Product Sales" in draft.monetization
        assert draft.description.startswith("Handmade widgets shipped worldwide.")
        assert draft.reason_for_selling == REASON_FOR_SELLING

    def test_to_dict_serializes_category(self):
        draft = generate_draft("https://example.com", "<title>Blog</title>", Money.of(100))
        data = draft.to_dict()
        assert data["category"] == "content-site"
        assert data["tech_stack"] == ["HTML/CSS", "JavaScript"]

    def test_empty_page_still_produces_a_complete_draft(self):
        draft = generate_draft("https://example.org", "", Money.of(1))
        assert draft.title == DEFAULT_TITLE
        assert draft.description
        assert draft.monetization
