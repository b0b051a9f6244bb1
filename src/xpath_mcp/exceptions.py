"""Exception hierarchy for xpath-mcp."""

from __future__ import annotations

from typing import Iterable, Optional, Tuple


class XPathMCPError(Exception):
    """Base exception for xpath-mcp."""


# Request-shape errors. These are raised to the transport.


class ToolError(XPathMCPError):
    """Base exception for tool dispatch."""


class UnknownToolError(ToolError):
    """Tool name not recognized."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown tool: {name}")


class ToolValidationError(ToolError):
    """Tool arguments failed validation.

    Every failing field is kept as a ``(path, message)`` pair and all of them
    are enumerated in the exception message.
    """

    def __init__(self, tool_name: str, issues: Iterable[Tuple[str, str]]) -> None:
        self.tool_name = tool_name
        self.issues = list(issues)
        details = ", ".join(f"{path}: {message}" for path, message in self.issues)
        super().__init__(f"Invalid arguments: {details}")


# Processing errors. These are reported in-band as prefixed text.


class ProcessingError(XPathMCPError):
    """Base exception for failures while fetching, parsing or evaluating."""


class ParseError(ProcessingError):
    """Markup could not be parsed, or the parser left an error marker."""


class EvaluationError(ProcessingError):
    """XPath expression could not be evaluated."""


class TransformError(ProcessingError):
    """XSLT stylesheet could not be compiled or applied."""


class FetchError(ProcessingError):
    """Remote content could not be retrieved."""

    def __init__(
        self,
        url: str,
        message: str,
        status_code: Optional[int] = None,
        reason: Optional[str] = None,
    ) -> None:
        self.url = url
        self.status_code = status_code
        self.reason = reason
        super().__init__(message)
