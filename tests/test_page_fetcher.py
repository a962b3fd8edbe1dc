"""Homepage fetcher against a mocked transport"""

import asyncio

import httpx
import pytest

from app.core.exceptions import FetchError
from app.infrastructure.external_services.page_fetcher import PageFetcher


def fetch(handler, url="https://example.com", **kwargs) -> str:
    fetcher = PageFetcher(transport=httpx.MockTransport(handler), **kwargs)
    return asyncio.run(fetcher.fetch(url))


def test_returns_decoded_body_and_sends_user_agent():
    seen = {}

    def handler(request):
        seen["user_agent"] = request.headers["user-agent"]
        return httpx.Response(200, text="<title>Hello</title>")

    assert fetch(handler) == "<title>Hello</title>"
    assert "ListingBot" in seen["user_agent"]


def test_body_is_capped():
    def handler(request):
        return httpx.Response(200, content=b"a" * 5000)

    body = fetch(handler, max_bytes=100)
    assert len(body) == 100


def test_non_success_status_raises():
    def handler(request):
        return httpx.Response(404)

    with pytest.raises(FetchError) as exc_info:
        fetch(handler)
    assert exc_info.value.reason == "HTTP 404"
    assert exc_info.value.status_code == 422
    assert "HTTP 404" in exc_info.value.message


def test_timeout_raises_fetch_error():
    def handler(request):
        raise httpx.ReadTimeout("read timed out", request=request)

    with pytest.raises(FetchError) as exc_info:
        fetch(handler)
    assert exc_info.value.reason == "timed out"


def test_connection_failure_raises_fetch_error():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(FetchError) as exc_info:
        fetch(handler)
    assert "connection refused" in exc_info.value.reason


def test_follows_redirects():
    def handler(request):
        if request.url.path == "/old":
            return httpx.Response(301, headers={"Location": "https://example.com/new"})
        return httpx.Response(200, text="moved here")

    assert fetch(handler, url="https://example.com/old") == "moved here"
