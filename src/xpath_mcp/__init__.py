"""XPath and XSLT tools served over the Model Context Protocol."""

__version__ = "0.6.2"
