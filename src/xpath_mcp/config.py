"""Server settings loaded from the environment."""

import logging
import os
from dataclasses import dataclass, replace
from typing import Optional, Type, TypeVar

from dotenv import load_dotenv

from xpath_mcp.constants import DEFAULT_FETCH_TIMEOUT
from xpath_mcp.models.enums import FetchStrategy, ServerProfile

logger = logging.getLogger(__name__)

E = TypeVar("E", FetchStrategy, ServerProfile)

TRUE_VALUES = {"1", "true", "yes", "on"}
FALSE_VALUES = {"0", "false", "no", "off"}


def _env_enum(name: str, enum_cls: Type[E], default: E) -> E:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return enum_cls(raw.strip().lower())
    except ValueError:
        valid = ", ".join(member.value for member in enum_cls)
        logger.warning(
            f"Invalid {name} '{raw}'. Valid values: {valid}. Using {default.value}."
        )
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        value = -1.0
    if value <= 0:
        logger.warning(f"Invalid {name} '{raw}'. Expected a positive number. Using {default}.")
        return default
    return value


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if not raw:
        return default
    value = raw.strip().lower()
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    logger.warning(f"Invalid {name} '{raw}'. Expected true or false. Using {default}.")
    return default


@dataclass(frozen=True)
class ServerSettings:
    """Deployment settings for one adapter server.

    Attributes:
        profile: Which tool subset to serve.
        fetch_strategy: How ``xpathwithurl`` retrieves documents.
        fetch_timeout: Seconds allowed for one fetch, browser rendering included.
        user_agent: Optional User-Agent sent when fetching.
        headless: Run the browser without a window.
    """

    profile: ServerProfile = ServerProfile.XPATH
    fetch_strategy: FetchStrategy = FetchStrategy.HTTP
    fetch_timeout: float = DEFAULT_FETCH_TIMEOUT
    user_agent: Optional[str] = None
    headless: bool = True

    @classmethod
    def from_env(cls) -> "ServerSettings":
        """Read settings from the environment (and a ``.env`` file, if any).

        Reads:
        - XPATH_MCP_PROFILE: xpath, xslt, select or all (default: xpath)
        - XPATH_MCP_FETCH_STRATEGY: http or browser (default: http)
        - XPATH_MCP_FETCH_TIMEOUT: seconds (default: 30)
        - XPATH_MCP_USER_AGENT: User-Agent header for fetches
        - XPATH_MCP_HEADLESS: run the browser headless (default: true)
        """
        load_dotenv()
        return cls(
            profile=_env_enum("XPATH_MCP_PROFILE", ServerProfile, cls.profile),
            fetch_strategy=_env_enum(
                "XPATH_MCP_FETCH_STRATEGY", FetchStrategy, cls.fetch_strategy
            ),
            fetch_timeout=_env_float("XPATH_MCP_FETCH_TIMEOUT", cls.fetch_timeout),
            user_agent=os.getenv("XPATH_MCP_USER_AGENT") or None,
            headless=_env_bool("XPATH_MCP_HEADLESS", cls.headless),
        )

    def with_overrides(self, **overrides) -> "ServerSettings":
        """Copy with the given non-None fields replaced."""
        changes = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **changes)
