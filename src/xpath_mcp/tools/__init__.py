"""Tool layer for XPath and XSLT operations.

This module provides:
- ToolDispatcher: Validates tool calls and routes them to implementations
- MarkupTools: The tool implementations
- ToolSpec / PROFILES: The tool table and the server profiles built from it
"""

from xpath_mcp.tools.dispatcher import ToolDispatcher
from xpath_mcp.tools.handlers import MarkupTools, run_query
from xpath_mcp.tools.registry import PROFILES, ProfileSpec, ToolSpec, build_tool_table

__all__ = [
    "ToolDispatcher",
    "MarkupTools",
    "run_query",
    "ToolSpec",
    "ProfileSpec",
    "PROFILES",
    "build_tool_table",
]
