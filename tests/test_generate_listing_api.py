"""POST /ai/generate-listing"""

from .helpers import register

ACME_HTML = (
    "<html><head><title>Acme Shop | Acme Inc</title></head>"
    '<body><script src="https://cdn.shopify.com/s/theme.js"></script></body></html>'
)


def test_requires_session(client, page_fetcher):
    response = client.post("/ai/generate-listing", json={
        "url": "https://example.com/shop", "asking_price": 5000,
    })
    assert response.status_code == 401
    assert page_fetcher.requested == []


def test_generates_draft(client, page_fetcher):
    register(client)
    page_fetcher.pages["https://example.com/shop"] = ACME_HTML

    response = client.post("/ai/generate-listing", json={
        "url": "https://example.com/shop", "asking_price": 5000,
    })
    assert response.status_code == 200
    draft = response.json()
    assert draft["category"] == "ecommerce"
    assert draft["title"] == "Acme Shop for Sale"
    assert "Shopify" in draft["tech_stack"]
    assert "$5,000" in draft["description"]
    assert draft["reason_for_selling"]
    assert draft["included_assets"]


def test_invalid_url_is_rejected_before_fetching(client, page_fetcher):
    register(client)
    for url in ("ftp://example.com", "example.com", "https://"):
        response = client.post("/ai/generate-listing", json={"url": url, "asking_price": 100})
        assert response.status_code == 400
        assert response.json() == {"error": "Please enter a valid URL (https://...)."}
    assert page_fetcher.requested == []


def test_non_positive_price_is_rejected(client, page_fetcher):
    register(client)
    response = client.post("/ai/generate-listing", json={
        "url": "https://example.com", "asking_price": 0,
    })
    assert response.status_code == 400
    assert page_fetcher.requested == []


def test_missing_fields(client):
    register(client)
    response = client.post("/ai/generate-listing", json={"url": "https://example.com"})
    assert response.status_code == 400
    assert "asking_price" in response.json()["error"]


def test_fetch_failure_is_recoverable(client, page_fetcher):
    register(client)
    page_fetcher.failures["https://down.example.com"] = "HTTP 503"

    response = client.post("/ai/generate-listing", json={
        "url": "https://down.example.com", "asking_price": 100,
    })
    assert response.status_code == 422
    error = response.json()["error"]
    assert "HTTP 503" in error
    assert "fill in the form manually" in error
