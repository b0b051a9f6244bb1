"""Argument models for the query and transform tools."""

from typing import List, Tuple

from pydantic import AnyHttpUrl, BaseModel, Field, ValidationError, field_validator

from xpath_mcp.constants import DEFAULT_MIME_TYPE, HTML_MIME_TYPES, XML_MIME_TYPES


def normalize_mime_type(value: str) -> str:
    """Strip parameters and lower-case a MIME type."""
    return value.split(";", 1)[0].strip().lower()


def is_supported_mime_type(mime_type: str) -> bool:
    """Check whether the markup parser understands a (normalized) MIME type."""
    return (
        mime_type in HTML_MIME_TYPES
        or mime_type in XML_MIME_TYPES
        or mime_type.endswith("+xml")
    )


class _QueryArguments(BaseModel):
    query: str = Field(..., min_length=1, description="The XPath query to execute")
    mimeType: str = Field(
        DEFAULT_MIME_TYPE,
        description="The MIME type (e.g. text/xml, application/xml, text/html, application/xhtml+xml)",
    )

    @field_validator("mimeType")
    @classmethod
    def _check_mime_type(cls, value: str) -> str:
        mime_type = normalize_mime_type(value)
        if not is_supported_mime_type(mime_type):
            raise ValueError(f"Unsupported MIME type '{value}'")
        return mime_type


class XPathArguments(_QueryArguments):
    """Arguments of the ``xpath`` tool."""

    xml: str = Field(..., description="The XML content to query")


class SelectArguments(XPathArguments):
    """Arguments of the legacy ``select`` tool."""


class XPathWithUrlArguments(_QueryArguments):
    """Arguments of the ``xpathwithurl`` tool."""

    url: AnyHttpUrl = Field(..., description="The URL to fetch XML/HTML content from")


class TransformArguments(BaseModel):
    """Arguments of the ``transform`` tool."""

    xml: str = Field(..., description="The XML content to transform")
    xslt: str = Field(..., description="The XSLT stylesheet to apply to the XML")


def validation_issues(error: ValidationError) -> List[Tuple[str, str]]:
    """Flatten a pydantic error into ``(field path, message)`` pairs."""
    issues = []
    for item in error.errors():
        path = ".".join(str(part) for part in item["loc"]) or "arguments"
        issues.append((path, item["msg"]))
    return issues
