"""Remote markup retrieval."""

from typing import Optional

from xpath_mcp.constants import DEFAULT_FETCH_TIMEOUT
from xpath_mcp.fetch.base import Fetcher
from xpath_mcp.fetch.browser_fetcher import BrowserFetcher, launch_browser
from xpath_mcp.fetch.http_fetcher import HttpFetcher
from xpath_mcp.models.enums import FetchStrategy


def create_fetcher(
    strategy: FetchStrategy = FetchStrategy.HTTP,
    timeout: float = DEFAULT_FETCH_TIMEOUT,
    user_agent: Optional[str] = None,
    headless: bool = True,
) -> Fetcher:
    """Create the fetcher for a deployment's fetch strategy."""
    if strategy is FetchStrategy.BROWSER:
        return BrowserFetcher(timeout=timeout, user_agent=user_agent, headless=headless)
    return HttpFetcher(timeout=timeout, user_agent=user_agent)


__all__ = [
    "Fetcher",
    "HttpFetcher",
    "BrowserFetcher",
    "launch_browser",
    "create_fetcher",
]
