"""Centralized models for xpath-mcp."""

# Enums
from xpath_mcp.models.enums import FetchStrategy, ResultKind, ServerProfile

# Tool arguments
from xpath_mcp.models.arguments import (
    SelectArguments,
    TransformArguments,
    XPathArguments,
    XPathWithUrlArguments,
)

# Results and envelopes
from xpath_mcp.models.mcp import TextPayload, ToolResponse
from xpath_mcp.models.results import QueryResult

__all__ = [
    # Enums
    "FetchStrategy",
    "ResultKind",
    "ServerProfile",
    # Tool arguments
    "SelectArguments",
    "TransformArguments",
    "XPathArguments",
    "XPathWithUrlArguments",
    # Results and envelopes
    "QueryResult",
    "TextPayload",
    "ToolResponse",
]
