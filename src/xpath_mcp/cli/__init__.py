"""xpath-mcp CLI."""

import typer

from xpath_mcp.cli.run import app as run_app
from xpath_mcp.cli.server import app as server_app
from xpath_mcp.cli.utils import app as utils_app
from xpath_mcp.logging_config import setup_logging

app = typer.Typer(
    name="xpath-mcp",
    help="XPath and XSLT tools over the Model Context Protocol",
    add_completion=False,
)


@app.callback()
def main_callback():
    """Configure logging before any command runs."""
    setup_logging()


# Add single commands as subcommands
app.command("serve", help="Run an MCP server on stdio")(
    server_app.registered_commands[0].callback
)
app.command("query", help="Run an XPath query against a file or a URL")(
    run_app.registered_commands[0].callback
)
app.command("transform", help="Apply an XSLT stylesheet to an XML file")(
    run_app.registered_commands[1].callback
)
app.command("tools", help="List the tools a server profile exposes")(
    utils_app.registered_commands[0].callback
)
app.command("version", help="Show xpath-mcp version")(
    utils_app.registered_commands[1].callback
)


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
