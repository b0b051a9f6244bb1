from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from tests.helpers import StaticFetcher
from xpath_mcp import __version__
from xpath_mcp.cli import app
from xpath_mcp.models import FetchStrategy, ServerProfile

STYLESHEET = """<xsl:stylesheet version="1.0" xmlns:xsl="http://www.w3.org/1999/XSL/Transform">
  <xsl:output method="text"/>
  <xsl:template match="/">count=<xsl:value-of select="count(//item)"/></xsl:template>
</xsl:stylesheet>"""


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture(autouse=True)
def no_logging_setup(monkeypatch):
    for name in (
        "XPATH_MCP_PROFILE",
        "XPATH_MCP_FETCH_STRATEGY",
        "XPATH_MCP_FETCH_TIMEOUT",
        "XPATH_MCP_USER_AGENT",
        "XPATH_MCP_HEADLESS",
    ):
        monkeypatch.delenv(name, raising=False)
    with patch("xpath_mcp.cli.setup_logging"):
        yield


@pytest.fixture
def items_file(tmp_path, items_xml):
    path = tmp_path / "items.xml"
    path.write_text(items_xml, encoding="utf-8")
    return path


def test_version(runner):
    result = runner.invoke(app, ["version"])

    assert result.exit_code == 0
    assert f"xpath-mcp version {__version__}" in result.stdout


def test_tools_for_profile(runner):
    result = runner.invoke(app, ["tools", "--profile", "xslt"])

    assert result.exit_code == 0
    assert "xslt-processor" in result.stdout
    assert "transform" in result.stdout
    assert "select" not in result.stdout


def test_query_file(runner, items_file):
    result = runner.invoke(
        app, ["query", "//item[@id='3']/text()", str(items_file), "--mime-type", "text/xml"]
    )

    assert result.exit_code == 0
    assert result.stdout.strip() == "Third"


def test_query_file_raw(runner, items_file):
    result = runner.invoke(app, ["query", "count(//item)", str(items_file), "--raw"])

    assert result.exit_code == 0
    assert result.stdout.strip() == '"3"'


def test_query_reports_processing_failure(runner, tmp_path):
    path = tmp_path / "broken.xml"
    path.write_text("<root><item></root>", encoding="utf-8")

    result = runner.invoke(app, ["query", "//item", str(path), "-m", "application/xml"])

    assert result.exit_code == 0
    assert "XML parsing error: " in result.stdout


def test_query_url(runner):
    fetcher = StaticFetcher("<html><body><h1>Welcome</h1></body></html>")

    with patch("xpath_mcp.tools.dispatcher.create_fetcher", return_value=fetcher) as factory:
        result = runner.invoke(
            app, ["query", "//h1/text()", "--url", "https://example.com/", "-f", "browser"]
        )

    assert result.exit_code == 0
    assert result.stdout.strip() == "Welcome"
    assert factory.call_args.args[0] is FetchStrategy.BROWSER
    assert fetcher.urls == ["https://example.com/"]


def test_query_needs_exactly_one_source(runner, items_file):
    neither = runner.invoke(app, ["query", "//item"])
    both = runner.invoke(app, ["query", "//item", str(items_file), "--url", "https://example.com/"])

    assert neither.exit_code == 2
    assert both.exit_code == 2


def test_query_raw_rejects_url(runner):
    with patch("xpath_mcp.tools.dispatcher.create_fetcher") as factory:
        result = runner.invoke(app, ["query", "//h1", "--url", "https://example.com/", "--raw"])

    assert result.exit_code == 2
    factory.assert_not_called()


def test_query_invalid_arguments_exit_1(runner, items_file):
    result = runner.invoke(app, ["query", "//item", str(items_file), "--mime-type", "image/png"])

    assert result.exit_code == 1


def test_transform(runner, items_file, tmp_path):
    stylesheet = tmp_path / "count.xsl"
    stylesheet.write_text(STYLESHEET, encoding="utf-8")

    result = runner.invoke(app, ["transform", str(items_file), str(stylesheet)])

    assert result.exit_code == 0
    assert result.stdout.strip() == "count=3"


def test_serve_passes_overrides(runner):
    with patch("xpath_mcp.server.run") as mock_run:
        result = runner.invoke(
            app, ["serve", "--profile", "xslt", "--fetch-strategy", "http", "--timeout", "5"]
        )

    assert result.exit_code == 0
    settings = mock_run.call_args.args[0]
    assert settings.profile is ServerProfile.XSLT
    assert settings.fetch_strategy is FetchStrategy.HTTP
    assert settings.fetch_timeout == 5.0


def test_serve_defaults_from_environment(runner, monkeypatch):
    monkeypatch.setenv("XPATH_MCP_PROFILE", "select")

    with patch("xpath_mcp.server.run") as mock_run:
        result = runner.invoke(app, ["serve"])

    assert result.exit_code == 0
    assert mock_run.call_args.args[0].profile is ServerProfile.SELECT
