"""Tool definitions and server profiles.

The tool table is built once per dispatcher and exposed read-only.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Awaitable, Callable, Dict, Iterable, Mapping, Tuple, Type

from mcp.types import Tool
from pydantic import BaseModel

from xpath_mcp.constants import DEFAULT_MIME_TYPE
from xpath_mcp.models import (
    SelectArguments,
    ServerProfile,
    TransformArguments,
    XPathArguments,
    XPathWithUrlArguments,
)
from xpath_mcp.tools.handlers import MarkupTools

MIME_TYPE_PROPERTY: Dict[str, Any] = {
    "type": "string",
    "description": "The MIME type (e.g. text/xml, application/xml, text/html, application/xhtml+xml)",
    "default": DEFAULT_MIME_TYPE,
}

QUERY_PROPERTY: Dict[str, Any] = {
    "type": "string",
    "description": "The XPath query to execute",
}

XPATH_INPUT_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "xml": {
            "type": "string",
            "description": "The XML content to query",
        },
        "query": QUERY_PROPERTY,
        "mimeType": MIME_TYPE_PROPERTY,
    },
    "required": ["xml", "query"],
}

XPATH_WITH_URL_INPUT_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "url": {
            "type": "string",
            "format": "uri",
            "description": "The URL to fetch XML/HTML content from",
        },
        "query": QUERY_PROPERTY,
        "mimeType": MIME_TYPE_PROPERTY,
    },
    "required": ["url", "query"],
}

TRANSFORM_INPUT_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "xml": {
            "type": "string",
            "description": "The XML content to transform",
        },
        "xslt": {
            "type": "string",
            "description": "The XSLT stylesheet to apply to the XML",
        },
    },
    "required": ["xml", "xslt"],
}


@dataclass(frozen=True)
class ToolSpec:
    """A named tool: its schema, argument model and handler."""

    name: str
    description: str
    arguments: Type[BaseModel]
    input_schema: Mapping[str, Any]
    handler: Callable[[Any], Awaitable[str]]

    def to_tool(self) -> Tool:
        """MCP tool definition for ``tools/list``."""
        return Tool(
            name=self.name,
            description=self.description,
            inputSchema=copy.deepcopy(dict(self.input_schema)),
        )


@dataclass(frozen=True)
class ProfileSpec:
    """Server name and tools of one adapter server."""

    server_name: str
    tools: Tuple[str, ...]


PROFILES: Mapping[ServerProfile, ProfileSpec] = MappingProxyType(
    {
        ServerProfile.XPATH: ProfileSpec("xpath", ("xpath", "xpathwithurl")),
        ServerProfile.XSLT: ProfileSpec("xslt-processor", ("transform", "xpath")),
        ServerProfile.SELECT: ProfileSpec("xpath", ("select",)),
        ServerProfile.ALL: ProfileSpec(
            "xml-tools", ("xpath", "xpathwithurl", "select", "transform")
        ),
    }
)


def build_tool_table(
    handlers: MarkupTools, names: Iterable[str]
) -> Mapping[str, ToolSpec]:
    """Build the read-only tool table for the given tool names."""
    available = {
        "xpath": ToolSpec(
            name="xpath",
            description="Query XML content using XPath",
            arguments=XPathArguments,
            input_schema=XPATH_INPUT_SCHEMA,
            handler=handlers.xpath,
        ),
        "xpathwithurl": ToolSpec(
            name="xpathwithurl",
            description="Fetch content from a URL and query it using XPath",
            arguments=XPathWithUrlArguments,
            input_schema=XPATH_WITH_URL_INPUT_SCHEMA,
            handler=handlers.xpath_with_url,
        ),
        "select": ToolSpec(
            name="select",
            description="Select query XML content using XPath",
            arguments=SelectArguments,
            input_schema=XPATH_INPUT_SCHEMA,
            handler=handlers.select,
        ),
        "transform": ToolSpec(
            name="transform",
            description="Transform XML using an XSLT stylesheet",
            arguments=TransformArguments,
            input_schema=TRANSFORM_INPUT_SCHEMA,
            handler=handlers.transform,
        ),
    }

    table = {}
    for name in names:
        if name not in available:
            raise ValueError(f"No tool named '{name}'")
        table[name] = available[name]
    return MappingProxyType(table)
