"""XPath evaluation against parsed documents."""

from __future__ import annotations

import logging
from typing import Any

from lxml import etree

from xpath_mcp.exceptions import EvaluationError
from xpath_mcp.markup.parser import ParsedDocument
from xpath_mcp.models.results import QueryResult

logger = logging.getLogger(__name__)


def is_node(value: Any) -> bool:
    """True for anything lxml returns to stand for a document node.

    Elements (including comments and processing instructions) are
    ``_Element`` instances, namespace nodes come back as ``(prefix, uri)``
    tuples, and attribute/text nodes are "smart strings" that remember where
    they came from.
    """
    if isinstance(value, (etree._Element, tuple)):
        return True
    return bool(
        getattr(value, "is_attribute", False)
        or getattr(value, "is_text", False)
        or getattr(value, "is_tail", False)
    )


def to_query_result(raw: Any, method: str = "xml") -> QueryResult:
    """Classify a raw lxml XPath result into a ``QueryResult``."""
    if raw is None:
        return QueryResult.null()
    # bool first: it is an int subclass
    if isinstance(raw, bool):
        return QueryResult.boolean(raw)
    if isinstance(raw, (int, float)):
        return QueryResult.number(raw)
    if isinstance(raw, list):
        return QueryResult.node_list(tuple(raw), method)
    if is_node(raw):
        return QueryResult.node(raw, method)
    if isinstance(raw, str):
        return QueryResult.string(raw)
    raise EvaluationError(f"Unsupported XPath result type: {type(raw).__name__}")


def _matches_document_node(document: ParsedDocument, expression: str) -> bool:
    """True when an empty node-set result actually selected the document node.

    lxml leaves the document node out of node-sets, so ``/`` comes back as ``[]``.
    """
    try:
        count = document.tree.xpath(
            f"count(({expression}))", namespaces=document.namespaces
        )
    except (etree.XPathError, ValueError):
        return False
    return bool(count)


def evaluate(document: ParsedDocument, expression: str) -> QueryResult:
    """Evaluate an XPath expression.

    Namespace prefixes declared on the document's root element can be used
    in the expression.

    Raises:
        EvaluationError: If the expression is invalid or cannot be evaluated.
    """
    try:
        raw = document.tree.xpath(
            expression, namespaces=document.namespaces, smart_strings=True
        )
    except (etree.XPathError, ValueError) as e:
        logger.debug("XPath evaluation failed for %r: %s", expression, e)
        raise EvaluationError(str(e)) from e

    if raw == [] and _matches_document_node(document, expression):
        return QueryResult.node(document.tree, document.serialization_method)

    return to_query_result(raw, document.serialization_method)
