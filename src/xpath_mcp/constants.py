# Defaults
DEFAULT_MIME_TYPE = "text/html"
DEFAULT_FETCH_TIMEOUT = 30.0

# MIME types understood by the markup parser. Any other "+xml" type is
# parsed as XML as well.
HTML_MIME_TYPES = frozenset({"text/html"})
XML_MIME_TYPES = frozenset(
    {
        "text/xml",
        "application/xml",
        "application/xhtml+xml",
        "image/svg+xml",
    }
)

# Local name of the element some parsers insert instead of raising
PARSER_ERROR_TAG = "parsererror"

# Result text
NO_MATCH_MESSAGE = "No nodes matched the query."
NULL_RESULT = "null"

# Failure prefixes; clients key off these to tell failure classes apart
PARSE_ERROR_PREFIX = "XML parsing error: "
QUERY_ERROR_PREFIX = "Error processing XPath query: "
FETCH_ERROR_PREFIX = "Error fetching URL: "
TRANSFORM_ERROR_PREFIX = "XSLT transformation failed: "
