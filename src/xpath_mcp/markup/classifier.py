"""Classification of parse, query, fetch and transform failures."""

from __future__ import annotations

import logging
from typing import Dict, Optional, Type

from lxml import etree

from xpath_mcp.constants import (
    FETCH_ERROR_PREFIX,
    PARSE_ERROR_PREFIX,
    PARSER_ERROR_TAG,
    QUERY_ERROR_PREFIX,
    TRANSFORM_ERROR_PREFIX,
)
from xpath_mcp.exceptions import (
    EvaluationError,
    FetchError,
    ParseError,
    ProcessingError,
    TransformError,
)
from xpath_mcp.markup.normalizer import normalize
from xpath_mcp.markup.parser import ParsedDocument
from xpath_mcp.models.results import QueryResult

logger = logging.getLogger(__name__)

FAILURE_PREFIXES: Dict[Type[ProcessingError], str] = {
    ParseError: PARSE_ERROR_PREFIX,
    EvaluationError: QUERY_ERROR_PREFIX,
    FetchError: FETCH_ERROR_PREFIX,
    TransformError: TRANSFORM_ERROR_PREFIX,
}


def find_parser_error(document: ParsedDocument) -> Optional[etree._Element]:
    """Return the first parser-error marker element in the document, if any."""
    markers = document.tree.xpath("//*[local-name() = $name]", name=PARSER_ERROR_TAG)
    return markers[0] if markers else None


def check_document(document: ParsedDocument) -> None:
    """Reject documents carrying a parser-error marker.

    Raises:
        ParseError: With the rendered marker as its message.
    """
    marker = find_parser_error(document)
    if marker is not None:
        raise ParseError(
            normalize(QueryResult.node(marker, document.serialization_method))
        )


def describe_failure(error: ProcessingError) -> str:
    """Render a processing failure as prefixed text."""
    for cls in type(error).__mro__:
        prefix = FAILURE_PREFIXES.get(cls)
        if prefix is not None:
            return f"{prefix}{error}"
    logger.error("No failure prefix registered for %s", type(error).__name__)
    return f"Error: {error}"
