"""Rendered-page fetching with a headless Playwright browser."""

from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncContextManager, AsyncIterator, Callable, Optional

from playwright.async_api import Browser
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import TimeoutError as PlaywrightTimeoutError
from playwright.async_api import async_playwright

from xpath_mcp.constants import DEFAULT_FETCH_TIMEOUT
from xpath_mcp.exceptions import FetchError
from xpath_mcp.fetch.base import Fetcher

logger = logging.getLogger(__name__)

BrowserLauncher = Callable[..., AsyncContextManager[Browser]]


@asynccontextmanager
async def launch_browser(headless: bool = True) -> AsyncIterator[Browser]:
    """Launch Chromium and close it on every exit path."""
    async with async_playwright() as playwright:
        browser = await playwright.chromium.launch(headless=headless)
        try:
            yield browser
        finally:
            await browser.close()
            logger.debug("Browser closed")


class BrowserFetcher(Fetcher):
    """Navigate to a URL, wait for the network to go idle and return the DOM.

    A browser is launched per fetch and never shared between invocations.
    """

    def __init__(
        self,
        timeout: float = DEFAULT_FETCH_TIMEOUT,
        user_agent: Optional[str] = None,
        headless: bool = True,
        launcher: Optional[BrowserLauncher] = None,
    ) -> None:
        super().__init__(timeout=timeout, user_agent=user_agent)
        self.headless = headless
        self._launcher = launcher or launch_browser

    async def _render(self, url: str) -> str:
        async with self._launcher(headless=self.headless) as browser:
            page = await browser.new_page(user_agent=self.user_agent)
            response = await page.goto(
                url, wait_until="networkidle", timeout=self.timeout * 1000
            )
            if response is not None and not response.ok:
                raise FetchError(
                    url,
                    f"HTTP {response.status} {response.status_text} for {url}",
                    status_code=response.status,
                    reason=response.status_text,
                )
            return await page.content()

    async def fetch(self, url: str) -> str:
        logger.info("Rendering %s in headless browser", url)
        try:
            return await asyncio.wait_for(self._render(url), timeout=self.timeout)
        except (asyncio.TimeoutError, PlaywrightTimeoutError) as e:
            raise FetchError(url, f"Navigation to {url} timed out after {self.timeout} seconds") from e
        except PlaywrightError as e:
            raise FetchError(url, f"Navigation to {url} failed: {e.message}") from e
