"""Markup parsing with lxml."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict

from lxml import etree

from xpath_mcp.constants import DEFAULT_MIME_TYPE, HTML_MIME_TYPES
from xpath_mcp.exceptions import ParseError
from xpath_mcp.models.arguments import normalize_mime_type

logger = logging.getLogger(__name__)


@dataclass
class ParsedDocument:
    """A parsed document and the MIME type it was parsed as."""

    tree: etree._ElementTree
    mime_type: str

    @property
    def is_html(self) -> bool:
        return self.mime_type in HTML_MIME_TYPES

    @property
    def serialization_method(self) -> str:
        """lxml serialization method matching the source format."""
        return "html" if self.is_html else "xml"

    @property
    def root(self) -> etree._Element:
        return self.tree.getroot()

    @property
    def namespaces(self) -> Dict[str, str]:
        """Prefixed namespaces declared on the root element."""
        return {
            prefix: uri for prefix, uri in self.root.nsmap.items() if prefix
        }


def make_xml_parser() -> etree.XMLParser:
    """Strict XML parser with entity expansion and network access disabled."""
    return etree.XMLParser(
        encoding="utf-8",
        resolve_entities=False,
        no_network=True,
        load_dtd=False,
    )


def make_html_parser() -> etree.HTMLParser:
    """Recovering HTML parser."""
    return etree.HTMLParser(encoding="utf-8", no_network=True)


def parse_document(markup: str, mime_type: str = DEFAULT_MIME_TYPE) -> ParsedDocument:
    """Parse markup text into a document.

    HTML MIME types go through lxml's recovering HTML parser; everything else
    is parsed as strict XML.

    Raises:
        ParseError: If the markup is empty or not well-formed.
    """
    mime_type = normalize_mime_type(mime_type)
    is_html = mime_type in HTML_MIME_TYPES
    parser = make_html_parser() if is_html else make_xml_parser()

    try:
        root = etree.fromstring(markup.encode("utf-8"), parser)
    except (etree.XMLSyntaxError, etree.ParserError) as e:
        logger.debug("Markup rejected by %s parser: %s", mime_type, e)
        raise ParseError(str(e)) from e

    if root is None:
        raise ParseError("Document is empty")

    return ParsedDocument(tree=root.getroottree(), mime_type=mime_type)
