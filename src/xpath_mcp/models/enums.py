"""Enums for xpath-mcp models."""

from enum import Enum


class ResultKind(str, Enum):
    """Shapes an XPath evaluation can produce."""

    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    NODE = "node"
    NODE_LIST = "node_list"


class FetchStrategy(str, Enum):
    """How remote documents are retrieved for ``xpathwithurl``."""

    HTTP = "http"
    BROWSER = "browser"


class ServerProfile(str, Enum):
    """Named tool subsets, one per adapter server."""

    XPATH = "xpath"
    XSLT = "xslt"
    SELECT = "select"
    ALL = "all"
