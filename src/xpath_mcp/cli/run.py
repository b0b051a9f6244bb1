"""One-off tool runs for the xpath-mcp CLI."""

import asyncio
from pathlib import Path
from typing import Optional

import typer

from xpath_mcp.cli.common import load_settings, logger
from xpath_mcp.constants import DEFAULT_MIME_TYPE
from xpath_mcp.exceptions import ToolError
from xpath_mcp.models import FetchStrategy, ServerProfile
from xpath_mcp.tools import ToolDispatcher

app = typer.Typer(name="run", help="Run a tool once")


def _run_tool(name: str, arguments: dict, fetch_strategy: Optional[FetchStrategy] = None):
    settings = load_settings(profile=ServerProfile.ALL, fetch_strategy=fetch_strategy)
    dispatcher = ToolDispatcher.from_settings(settings)
    try:
        response = asyncio.run(dispatcher.dispatch(name, arguments))
    except ToolError as e:
        logger.error(f"❌ {e}")
        raise typer.Exit(1)
    typer.echo(response.text)


@app.command("query")
def query(
    expression: str = typer.Argument(..., help="The XPath query to execute"),
    file: Optional[Path] = typer.Argument(
        None, exists=True, dir_okay=False, help="File holding the XML/HTML to query"
    ),
    url: Optional[str] = typer.Option(None, "--url", "-u", help="Fetch the document from a URL"),
    mime_type: str = typer.Option(DEFAULT_MIME_TYPE, "--mime-type", "-m", help="MIME type of the document"),
    fetch_strategy: Optional[FetchStrategy] = typer.Option(
        None, "--fetch-strategy", "-f", help="How --url pages are retrieved."
    ),
    raw: bool = typer.Option(False, "--raw", help="Print the JSON-quoted raw result, like the select tool (FILE only)"),
):
    """Run an XPath query against a file or a URL."""
    if (file is None) == (url is None):
        logger.error("❌ Provide exactly one of FILE or --url.")
        raise typer.Exit(2)

    if raw and url is not None:
        logger.error("❌ --raw applies to FILE queries only.")
        raise typer.Exit(2)

    if url is not None:
        _run_tool(
            "xpathwithurl",
            {"url": url, "query": expression, "mimeType": mime_type},
            fetch_strategy=fetch_strategy,
        )
        return

    markup = file.read_text(encoding="utf-8")
    _run_tool(
        "select" if raw else "xpath",
        {"xml": markup, "query": expression, "mimeType": mime_type},
    )


@app.command("transform")
def transform(
    xml_file: Path = typer.Argument(..., exists=True, dir_okay=False, help="XML document"),
    xslt_file: Path = typer.Argument(..., exists=True, dir_okay=False, help="XSLT stylesheet"),
):
    """Apply an XSLT stylesheet to an XML file."""
    _run_tool(
        "transform",
        {
            "xml": xml_file.read_text(encoding="utf-8"),
            "xslt": xslt_file.read_text(encoding="utf-8"),
        },
    )
