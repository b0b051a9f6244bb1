"""Shared utilities and helpers for the xpath-mcp CLI."""

import logging
from typing import Optional

from rich.console import Console

from xpath_mcp.config import ServerSettings
from xpath_mcp.models import FetchStrategy, ServerProfile

# Shared console and logger
console = Console()
logger = logging.getLogger(__name__)


def load_settings(
    profile: Optional[ServerProfile] = None,
    fetch_strategy: Optional[FetchStrategy] = None,
    timeout: Optional[float] = None,
) -> ServerSettings:
    """Settings from the environment with command-line overrides applied."""
    return ServerSettings.from_env().with_overrides(
        profile=profile,
        fetch_strategy=fetch_strategy,
        fetch_timeout=timeout,
    )
