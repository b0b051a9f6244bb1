"""Deterministic text rendering of XPath results.

Every result shape funnels through ``normalize`` so callers always get the
same text for the same result, whatever branch produced it:

- null renders as ``null``
- an empty node-set renders as a status line, never as an empty string
- node-sets render one node per line, in document order
- elements render as markup, attributes as ``name="value"``, text as-is
- numbers render in decimal notation, booleans as ``true``/``false``
"""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Any, Callable, Dict, Optional

from lxml import etree

from xpath_mcp.constants import NO_MATCH_MESSAGE, NULL_RESULT
from xpath_mcp.models.enums import ResultKind
from xpath_mcp.models.results import QueryResult

XML_NAMESPACE = "http://www.w3.org/XML/1998/namespace"


def format_number(value: float) -> str:
    """Render an XPath number the way XPath's ``string()`` does."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer():
        return str(int(value))
    return format(Decimal(repr(value)), "f")


def format_boolean(value: bool) -> str:
    return "true" if value else "false"


def _attribute_name(attribute: Any) -> str:
    name = attribute.attrname
    qname = etree.QName(name)
    if not qname.namespace:
        return qname.localname
    if qname.namespace == XML_NAMESPACE:
        return f"xml:{qname.localname}"

    parent = attribute.getparent()
    if parent is not None:
        for prefix, uri in parent.nsmap.items():
            if prefix and uri == qname.namespace:
                return f"{prefix}:{qname.localname}"
    return qname.localname


def normalize_node(node: Any, method: str = "xml") -> str:
    """Render a single document node."""
    if isinstance(node, etree._ElementTree):
        return etree.tostring(node, encoding="unicode", method=method)
    if isinstance(node, etree._Element):
        return etree.tostring(node, encoding="unicode", method=method, with_tail=False)
    if isinstance(node, tuple):
        prefix, uri = node
        return f'xmlns:{prefix}="{uri}"' if prefix else f'xmlns="{uri}"'
    if getattr(node, "is_attribute", False):
        return f'{_attribute_name(node)}="{node}"'
    if node is None:
        return ""
    return str(node)


def _normalize_null(result: QueryResult) -> str:
    return NULL_RESULT


def _normalize_boolean(result: QueryResult) -> str:
    return format_boolean(result.value)


def _normalize_number(result: QueryResult) -> str:
    return format_number(result.value)


def _normalize_string(result: QueryResult) -> str:
    return result.value


def _normalize_node(result: QueryResult) -> str:
    return normalize_node(result.value, result.method)


def _normalize_node_list(result: QueryResult) -> str:
    if not result.value:
        return NO_MATCH_MESSAGE
    return "\n".join(normalize_node(node, result.method) for node in result.value)


_NORMALIZERS: Dict[ResultKind, Callable[[QueryResult], str]] = {
    ResultKind.NULL: _normalize_null,
    ResultKind.BOOLEAN: _normalize_boolean,
    ResultKind.NUMBER: _normalize_number,
    ResultKind.STRING: _normalize_string,
    ResultKind.NODE: _normalize_node,
    ResultKind.NODE_LIST: _normalize_node_list,
}


def normalize(result: QueryResult) -> str:
    """Convert a query result into its canonical text form."""
    return _NORMALIZERS[result.kind](result)


def stringify(result: QueryResult) -> Optional[str]:
    """Raw string form used by the ``select`` tool.

    Node-sets are comma-joined and an empty node-set is an empty string;
    null has no string form. Other shapes render as in ``normalize``.
    """
    if result.kind is ResultKind.NULL:
        return None
    if result.kind is ResultKind.NODE_LIST:
        return ",".join(normalize_node(node, result.method) for node in result.value)
    return normalize(result)
