"""Plain HTTP GET fetching with httpx."""

from __future__ import annotations

import logging
from typing import Dict, Optional

import httpx

from xpath_mcp.constants import DEFAULT_FETCH_TIMEOUT
from xpath_mcp.exceptions import FetchError
from xpath_mcp.fetch.base import Fetcher

logger = logging.getLogger(__name__)


class HttpFetcher(Fetcher):
    """Fetch the raw response body of an HTTP GET."""

    def __init__(
        self,
        timeout: float = DEFAULT_FETCH_TIMEOUT,
        user_agent: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        super().__init__(timeout=timeout, user_agent=user_agent)
        self._transport = transport

    def _headers(self) -> Dict[str, str]:
        headers = {"Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8"}
        if self.user_agent:
            headers["User-Agent"] = self.user_agent
        return headers

    async def fetch(self, url: str) -> str:
        logger.info("Fetching %s over HTTP", url)
        try:
            async with httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout),
                follow_redirects=True,
                headers=self._headers(),
                transport=self._transport,
            ) as client:
                response = await client.get(url)
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            reason = e.response.reason_phrase
            raise FetchError(
                url, f"HTTP {status} {reason} for {url}", status_code=status, reason=reason
            ) from e
        except httpx.TimeoutException as e:
            raise FetchError(url, f"Request to {url} timed out after {self.timeout} seconds") from e
        except httpx.HTTPError as e:
            raise FetchError(url, f"Request to {url} failed: {str(e) or e.__class__.__name__}") from e

        logger.debug("Fetched %d bytes from %s", len(response.content), url)
        return response.text
