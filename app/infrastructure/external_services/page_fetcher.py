"""Homepage fetcher used by the listing generator"""

import logging
from typing import Optional

import httpx

from ...core.config import settings
from ...core.exceptions import FetchError

logger = logging.getLogger(__name__)


class PageFetcher:
    """Fetch a page with a hard timeout and a cap on bytes read."""

    def __init__(self,
                 timeout: Optional[float] = None,
                 max_bytes: Optional[int] = None,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        self.timeout = timeout if timeout is not None else settings.FETCH_TIMEOUT_SECONDS
        self.max_bytes = max_bytes if max_bytes is not None else settings.FETCH_MAX_BYTES
        self.transport = transport
        self.headers = {
            "User-Agent": settings.FETCH_USER_AGENT,
            "Accept": "text/html",
        }

    async def fetch(self, url: str) -> str:
        """Return at most max_bytes of the decoded body. Raises FetchError."""
        try:
            async with httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout),
                follow_redirects=True,
                headers=self.headers,
                transport=self.transport,
            ) as client:
                async with client.stream("GET", url) as response:
                    if not response.is_success:
                        raise FetchError(f"HTTP {response.status_code}")

                    body = bytearray()
                    async for chunk in response.aiter_bytes():
                        body.extend(chunk)
                        if len(body) >= self.max_bytes:
                            break

                    encoding = response.encoding or "utf-8"
                    return bytes(body[:self.max_bytes]).decode(encoding, errors="replace")

        except httpx.TimeoutException:
            logger.info("Timed out fetching %s", url)
            raise FetchError("timed out")
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.info("Failed to fetch %s: %s", url, e)
            raise FetchError(str(e) or e.__class__.__name__)
