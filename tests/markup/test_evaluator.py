import pytest
from lxml import etree

from xpath_mcp.exceptions import EvaluationError
from xpath_mcp.markup.evaluator import evaluate, is_node, to_query_result
from xpath_mcp.markup.parser import parse_document
from xpath_mcp.models import ResultKind


@pytest.fixture
def items_document(items_xml):
    return parse_document(items_xml, "text/xml")


def test_count_is_number(items_document):
    result = evaluate(items_document, "count(//item)")

    assert result.kind is ResultKind.NUMBER
    assert result.value == 3.0


def test_comparison_is_boolean(items_document):
    result = evaluate(items_document, "count(//item) > 2")

    assert result.kind is ResultKind.BOOLEAN
    assert result.value is True


def test_string_function_is_string(items_document):
    result = evaluate(items_document, "string(//item[1])")

    assert result.kind is ResultKind.STRING
    assert result.value == "First"


def test_elements_are_node_list(items_document):
    result = evaluate(items_document, "//item")

    assert result.kind is ResultKind.NODE_LIST
    assert [node.get("id") for node in result.value] == ["1", "2", "3"]
    assert all(isinstance(node, etree._Element) for node in result.value)


def test_predicate_filters_siblings(people_xml):
    document = parse_document(people_xml, "text/xml")

    result = evaluate(document, "//person[@age >= 18]/text()")

    assert [str(node) for node in result.value] == ["Alice", "Charlie"]


def test_attribute_results_are_nodes(items_document):
    result = evaluate(items_document, "//item/@id")

    assert result.kind is ResultKind.NODE_LIST
    assert all(is_node(node) for node in result.value)


def test_html_document_uses_html_method():
    document = parse_document("<p>Hi</p>", "text/html")

    assert evaluate(document, "//p").method == "html"


def test_root_prefixes_are_usable():
    document = parse_document(
        '<root xmlns:x="urn:x"><x:a>1</x:a><x:a>2</x:a></root>', "application/xml"
    )

    result = evaluate(document, "//x:a/text()")

    assert [str(node) for node in result.value] == ["1", "2"]


@pytest.mark.parametrize(
    "expression",
    [
        "//item[",
        "//missing:item",
        "unknown-function()",
    ],
)
def test_invalid_expressions_raise(items_document, expression):
    with pytest.raises(EvaluationError):
        evaluate(items_document, expression)


def test_to_query_result_shapes():
    assert to_query_result(None).kind is ResultKind.NULL
    assert to_query_result(False).kind is ResultKind.BOOLEAN
    assert to_query_result(2).kind is ResultKind.NUMBER
    assert to_query_result("text").kind is ResultKind.STRING
    assert to_query_result(("x", "urn:x")).kind is ResultKind.NODE
    assert to_query_result([]).is_empty


def test_to_query_result_rejects_unknown_types():
    with pytest.raises(EvaluationError):
        to_query_result(object())


@pytest.mark.parametrize(
    "expression",
    ["/", "/self::node()", "//item/ancestor::node()[last()]"],
)
def test_document_node_match_is_not_empty(expression):
    document = parse_document("<root><item>a</item></root>", "text/xml")

    result = evaluate(document, expression)

    assert result.kind is ResultKind.NODE
    assert result.value is document.tree


def test_empty_match_stays_empty(items_document):
    result = evaluate(items_document, "//missing")

    assert result.kind is ResultKind.NODE_LIST
    assert result.is_empty
