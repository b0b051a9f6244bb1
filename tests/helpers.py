"""Shared test doubles."""

from typing import List, Optional

from xpath_mcp.fetch import Fetcher


class StaticFetcher(Fetcher):
    """Fetcher returning canned markup, or raising a canned error."""

    def __init__(self, markup: str = "", error: Optional[Exception] = None):
        super().__init__()
        self.markup = markup
        self.error = error
        self.urls: List[str] = []

    async def fetch(self, url: str) -> str:
        self.urls.append(url)
        if self.error is not None:
            raise self.error
        return self.markup
