"""Markup handling: parsing, XPath evaluation, normalization and XSLT."""

from xpath_mcp.markup.classifier import check_document, describe_failure, find_parser_error
from xpath_mcp.markup.evaluator import evaluate
from xpath_mcp.markup.normalizer import normalize, stringify
from xpath_mcp.markup.parser import ParsedDocument, parse_document
from xpath_mcp.markup.xslt import transform

__all__ = [
    "ParsedDocument",
    "parse_document",
    "evaluate",
    "normalize",
    "stringify",
    "find_parser_error",
    "check_document",
    "describe_failure",
    "transform",
]
