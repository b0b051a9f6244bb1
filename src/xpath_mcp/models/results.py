"""Tagged query result produced by the XPath executor."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Tuple

from xpath_mcp.models.enums import ResultKind


@dataclass(frozen=True)
class QueryResult:
    """Result of one XPath evaluation.

    Attributes:
        kind: Which variant this result is.
        value: Payload for the variant. ``None`` for null, a ``bool``,
            a ``float``, a ``str``, a single node, or a tuple of nodes.
        method: Serialization method used for element nodes ("xml" or "html").
    """

    kind: ResultKind
    value: Any = None
    method: str = "xml"

    @classmethod
    def null(cls) -> "QueryResult":
        return cls(ResultKind.NULL)

    @classmethod
    def boolean(cls, value: bool) -> "QueryResult":
        return cls(ResultKind.BOOLEAN, bool(value))

    @classmethod
    def number(cls, value: float) -> "QueryResult":
        return cls(ResultKind.NUMBER, float(value))

    @classmethod
    def string(cls, value: str) -> "QueryResult":
        return cls(ResultKind.STRING, str(value))

    @classmethod
    def node(cls, node: Any, method: str = "xml") -> "QueryResult":
        return cls(ResultKind.NODE, node, method)

    @classmethod
    def node_list(cls, nodes: Tuple[Any, ...], method: str = "xml") -> "QueryResult":
        return cls(ResultKind.NODE_LIST, tuple(nodes), method)

    @property
    def is_empty(self) -> bool:
        """True for a node-set with no members."""
        return self.kind is ResultKind.NODE_LIST and not self.value
