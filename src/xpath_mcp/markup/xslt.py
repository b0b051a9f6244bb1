"""XSLT transformation with lxml."""

from __future__ import annotations

import logging

from lxml import etree

from xpath_mcp.exceptions import ParseError, TransformError
from xpath_mcp.markup.parser import parse_document

logger = logging.getLogger(__name__)

XML_MIME_TYPE = "application/xml"

# Stylesheets may not touch the filesystem or the network.
ACCESS_CONTROL = etree.XSLTAccessControl.DENY_ALL


def _error_text(error: etree.Error) -> str:
    text = str(error)
    if not text and getattr(error, "error_log", None):
        text = str(error.error_log.last_error)
    return text or error.__class__.__name__


def compile_stylesheet(stylesheet: str) -> etree.XSLT:
    """Parse and compile an XSLT stylesheet.

    Raises:
        TransformError: If the stylesheet is not well-formed or not valid XSLT.
    """
    try:
        document = parse_document(stylesheet, XML_MIME_TYPE)
    except ParseError as e:
        raise TransformError(f"Invalid stylesheet: {e}") from e

    try:
        return etree.XSLT(document.tree, access_control=ACCESS_CONTROL)
    except etree.XSLTParseError as e:
        raise TransformError(_error_text(e)) from e


def transform(xml: str, stylesheet: str) -> str:
    """Apply an XSLT stylesheet to an XML document.

    Returns the output exactly as serialized by the stylesheet's
    ``xsl:output`` settings.

    Raises:
        ParseError: If the input document is not well-formed.
        TransformError: If the stylesheet cannot be compiled or applied.
    """
    document = parse_document(xml, XML_MIME_TYPE)
    transformer = compile_stylesheet(stylesheet)

    try:
        result = transformer(document.tree)
    except etree.XSLTApplyError as e:
        raise TransformError(_error_text(e)) from e

    for entry in transformer.error_log:
        logger.debug("XSLT message: %s", entry.message)

    return str(result)
