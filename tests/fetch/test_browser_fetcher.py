import asyncio
import unittest
from contextlib import asynccontextmanager
from unittest.mock import AsyncMock, MagicMock, patch

from playwright.async_api import Error as PlaywrightError

from xpath_mcp.exceptions import FetchError
from xpath_mcp.fetch import BrowserFetcher, launch_browser


def make_browser(goto=None, content="<html><body><p>Rendered</p></body></html>"):
    """Create a mock browser whose page returns ``content``."""
    response = MagicMock()
    response.ok = True
    response.status = 200
    response.status_text = "OK"

    page = MagicMock()
    page.goto = goto or AsyncMock(return_value=response)
    page.content = AsyncMock(return_value=content)

    browser = MagicMock()
    browser.new_page = AsyncMock(return_value=page)
    browser.close = AsyncMock()
    return browser, page, response


def make_launcher(browser):
    @asynccontextmanager
    async def launcher(headless=True):
        try:
            yield browser
        finally:
            await browser.close()

    return launcher


class TestBrowserFetcher(unittest.IsolatedAsyncioTestCase):
    """Test suite for the headless browser fetcher"""

    async def test_fetch_returns_rendered_content(self):
        browser, page, _ = make_browser()
        fetcher = BrowserFetcher(launcher=make_launcher(browser))

        content = await fetcher.fetch("https://example.com/")

        self.assertIn("<p>Rendered</p>", content)
        page.goto.assert_awaited_once()
        _, kwargs = page.goto.call_args
        self.assertEqual(kwargs["wait_until"], "networkidle")
        browser.close.assert_awaited_once()

    async def test_non_ok_navigation_raises(self):
        browser, _, response = make_browser()
        response.ok = False
        response.status = 503
        response.status_text = "Service Unavailable"
        fetcher = BrowserFetcher(launcher=make_launcher(browser))

        with self.assertRaises(FetchError) as ctx:
            await fetcher.fetch("https://example.com/")

        self.assertEqual(ctx.exception.status_code, 503)
        self.assertIn("HTTP 503 Service Unavailable", str(ctx.exception))
        browser.close.assert_awaited_once()

    async def test_navigation_failure_raises_and_closes(self):
        browser, _, _ = make_browser(
            goto=AsyncMock(side_effect=PlaywrightError("net::ERR_NAME_NOT_RESOLVED"))
        )
        fetcher = BrowserFetcher(launcher=make_launcher(browser))

        with self.assertRaises(FetchError) as ctx:
            await fetcher.fetch("https://invalid.example/")

        self.assertIn("ERR_NAME_NOT_RESOLVED", str(ctx.exception))
        browser.close.assert_awaited_once()

    async def test_timeout_raises_and_closes(self):
        async def slow_goto(*args, **kwargs):
            await asyncio.sleep(10)

        browser, _, _ = make_browser(goto=slow_goto)
        fetcher = BrowserFetcher(timeout=0.05, launcher=make_launcher(browser))

        with self.assertRaises(FetchError) as ctx:
            await fetcher.fetch("https://example.com/slow")

        self.assertIn("timed out", str(ctx.exception))
        browser.close.assert_awaited_once()


class TestLaunchBrowser(unittest.IsolatedAsyncioTestCase):
    """launch_browser must close the browser on every exit path"""

    def _patch_playwright(self, browser):
        playwright = MagicMock()
        playwright.chromium.launch = AsyncMock(return_value=browser)
        manager = MagicMock()
        manager.__aenter__ = AsyncMock(return_value=playwright)
        manager.__aexit__ = AsyncMock(return_value=False)
        return patch(
            "xpath_mcp.fetch.browser_fetcher.async_playwright",
            return_value=manager,
        ), playwright

    async def test_closes_after_use(self):
        browser = MagicMock()
        browser.close = AsyncMock()
        patcher, playwright = self._patch_playwright(browser)

        with patcher:
            async with launch_browser(headless=True) as launched:
                self.assertIs(launched, browser)

        playwright.chromium.launch.assert_awaited_once_with(headless=True)
        browser.close.assert_awaited_once()

    async def test_closes_when_body_raises(self):
        browser = MagicMock()
        browser.close = AsyncMock()
        patcher, _ = self._patch_playwright(browser)

        with patcher:
            with self.assertRaises(RuntimeError):
                async with launch_browser():
                    raise RuntimeError("evaluator blew up")

        browser.close.assert_awaited_once()

    async def test_fetcher_uses_launch_browser_by_default(self):
        browser, _, _ = make_browser(
            goto=AsyncMock(side_effect=PlaywrightError("navigation failed"))
        )
        patcher, _ = self._patch_playwright(browser)

        with patcher:
            with self.assertRaises(FetchError):
                await BrowserFetcher().fetch("https://example.com/")

        browser.close.assert_awaited_once()
