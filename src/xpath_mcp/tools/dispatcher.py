"""Tool dispatcher for routing tool calls to implementations."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple

from mcp.types import Tool
from pydantic import BaseModel, ValidationError

from xpath_mcp.config import ServerSettings
from xpath_mcp.exceptions import ProcessingError, ToolValidationError, UnknownToolError
from xpath_mcp.fetch import Fetcher, create_fetcher
from xpath_mcp.markup.classifier import describe_failure
from xpath_mcp.models import ToolResponse
from xpath_mcp.models.arguments import validation_issues
from xpath_mcp.tools.handlers import MarkupTools
from xpath_mcp.tools.registry import PROFILES, ToolSpec, build_tool_table

LOGGER = logging.getLogger(__name__)


class ToolDispatcher:
    """Validate tool calls, run them and wrap the output.

    Each call goes validate -> execute -> respond and leaves nothing behind.
    Unknown tools and invalid arguments raise ``ToolError``; failures while
    fetching, parsing, evaluating or transforming come back as prefixed text
    in an ordinary response.
    """

    def __init__(self, tools: Mapping[str, ToolSpec]) -> None:
        self._tools: Mapping[str, ToolSpec] = MappingProxyType(dict(tools))

    @classmethod
    def from_settings(
        cls,
        settings: ServerSettings,
        fetcher: Optional[Fetcher] = None,
    ) -> "ToolDispatcher":
        """
        Build a dispatcher for a deployment.

        Args:
            settings: Server settings; the profile selects the tools.
            fetcher: Fetcher for URL queries. Created from the settings' fetch
                strategy when omitted.
        """
        if fetcher is None:
            fetcher = create_fetcher(
                settings.fetch_strategy,
                timeout=settings.fetch_timeout,
                user_agent=settings.user_agent,
                headless=settings.headless,
            )
        handlers = MarkupTools(fetcher)
        return cls(build_tool_table(handlers, PROFILES[settings.profile].tools))

    @property
    def tools(self) -> Mapping[str, ToolSpec]:
        return self._tools

    def list_tools(self) -> List[Tool]:
        """Return MCP tool definitions."""
        return [spec.to_tool() for spec in self._tools.values()]

    def validate(
        self, name: str, arguments: Optional[Dict[str, Any]]
    ) -> Tuple[ToolSpec, BaseModel]:
        """Resolve a tool and validate its arguments.

        Raises:
            UnknownToolError: If no tool has this name.
            ToolValidationError: If the arguments do not match the tool's shape.
        """
        spec = self._tools.get(name)
        if spec is None:
            LOGGER.warning("Tool error: %s code=UNKNOWN_TOOL", name)
            raise UnknownToolError(name)

        try:
            args = spec.arguments.model_validate(arguments or {})
        except ValidationError as e:
            error = ToolValidationError(name, validation_issues(e))
            LOGGER.warning("Tool error: %s code=INVALID_ARGUMENTS: %s", name, error)
            raise error from e
        return spec, args

    async def dispatch(
        self, name: str, arguments: Optional[Dict[str, Any]]
    ) -> ToolResponse:
        """
        Execute a tool call.

        Args:
            name: Tool name.
            arguments: Raw arguments from the request.

        Returns: ToolResponse holding the tool's text.
        """
        LOGGER.info("Tool call: %s", name)
        spec, args = self.validate(name, arguments)

        try:
            text = await spec.handler(args)
        except ProcessingError as e:
            text = describe_failure(e)
            LOGGER.warning("Tool error: %s code=%s: %s", name, type(e).__name__, e)
        else:
            LOGGER.debug("Tool success: %s", name)

        return ToolResponse.from_text(text)
