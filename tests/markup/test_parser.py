import pytest

from xpath_mcp.exceptions import ParseError
from xpath_mcp.markup.parser import parse_document


def test_parse_valid_xml():
    """Test parsing then re-reading the first child's text."""
    document = parse_document("<root><item>Test</item></root>", "text/xml")

    root = document.root
    assert root.tag == "root"
    assert root[0].tag == "item"
    assert root[0].text == "Test"


def test_parse_normalizes_mime_type():
    document = parse_document("<root/>", "Application/XML; charset=utf-8")

    assert document.mime_type == "application/xml"
    assert not document.is_html
    assert document.serialization_method == "xml"


def test_parse_html_recovers_fragments():
    """HTML is parsed leniently and wrapped in a full document."""
    document = parse_document("<p>Hello<p>World", "text/html")

    assert document.is_html
    assert document.serialization_method == "html"
    assert document.root.tag == "html"
    assert [p.text for p in document.tree.iter("p")] == ["Hello", "World"]


def test_parse_defaults_to_html():
    document = parse_document("<div>x</div>")

    assert document.mime_type == "text/html"


def test_parse_malformed_xml_raises():
    with pytest.raises(ParseError):
        parse_document("<root><unclosed>", "text/xml")


def test_parse_empty_xml_raises():
    with pytest.raises(ParseError):
        parse_document("", "application/xml")


def test_parse_empty_html_raises():
    with pytest.raises(ParseError):
        parse_document("", "text/html")


def test_parse_ignores_declared_encoding():
    """Input is text, so a declared byte encoding must not garble it."""
    markup = '<?xml version="1.0" encoding="ISO-8859-1"?><root>café</root>'

    document = parse_document(markup, "text/xml")

    assert document.root.text == "café"


def test_namespaces_exclude_default_namespace():
    document = parse_document(
        '<root xmlns="urn:default" xmlns:x="urn:x"><x:a/></root>', "application/xml"
    )

    assert document.namespaces == {"x": "urn:x"}
