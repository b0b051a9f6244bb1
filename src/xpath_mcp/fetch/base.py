"""Fetcher interface for retrieving remote markup."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from xpath_mcp.constants import DEFAULT_FETCH_TIMEOUT


class Fetcher(ABC):
    """Retrieves markup text from a URL.

    Implementations raise ``FetchError`` on any failure, including timeouts,
    so callers never see library-specific exceptions.
    """

    def __init__(
        self,
        timeout: float = DEFAULT_FETCH_TIMEOUT,
        user_agent: Optional[str] = None,
    ) -> None:
        self.timeout = timeout
        self.user_agent = user_agent

    @abstractmethod
    async def fetch(self, url: str) -> str:
        """Return the markup found at ``url``."""
