"""Tool implementations for XPath queries and XSLT transforms."""

from __future__ import annotations

import json
import logging

from xpath_mcp.fetch import Fetcher
from xpath_mcp.markup import xslt
from xpath_mcp.markup.classifier import check_document
from xpath_mcp.markup.evaluator import evaluate
from xpath_mcp.markup.normalizer import normalize, stringify
from xpath_mcp.markup.parser import parse_document
from xpath_mcp.models import (
    QueryResult,
    SelectArguments,
    TransformArguments,
    XPathArguments,
    XPathWithUrlArguments,
)

logger = logging.getLogger(__name__)


def run_query(markup: str, expression: str, mime_type: str) -> QueryResult:
    """Parse markup, reject parser-error documents, then evaluate.

    Raises:
        ParseError: If the markup does not parse or carries an error marker.
        EvaluationError: If the expression cannot be evaluated.
    """
    document = parse_document(markup, mime_type)
    check_document(document)
    return evaluate(document, expression)


class MarkupTools:
    """Tool implementations. Each returns the text for the response envelope."""

    def __init__(self, fetcher: Fetcher) -> None:
        """Initialize with the fetcher used for URL queries."""
        self._fetcher = fetcher

    async def xpath(self, args: XPathArguments) -> str:
        """Query local markup, return normalized text."""
        return normalize(run_query(args.xml, args.query, args.mimeType))

    async def xpath_with_url(self, args: XPathWithUrlArguments) -> str:
        """Fetch remote markup, then query it."""
        url = str(args.url)
        markup = await self._fetcher.fetch(url)
        logger.debug("Querying %d characters fetched from %s", len(markup), url)
        return normalize(run_query(markup, args.query, args.mimeType))

    async def select(self, args: SelectArguments) -> str:
        """Query local markup, return the raw result as a JSON string."""
        return json.dumps(
            stringify(run_query(args.xml, args.query, args.mimeType)), ensure_ascii=False
        )

    async def transform(self, args: TransformArguments) -> str:
        """Apply a stylesheet, return its output verbatim."""
        return xslt.transform(args.xml, args.xslt)
