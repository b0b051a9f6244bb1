"""Server command for the xpath-mcp CLI."""

from typing import Optional

import typer

from xpath_mcp import server as mcp_server
from xpath_mcp.cli.common import load_settings
from xpath_mcp.models import FetchStrategy, ServerProfile

app = typer.Typer(name="server", help="Server commands")


@app.command("serve")
def serve(
    profile: Optional[ServerProfile] = typer.Option(
        None, "--profile", "-p", help="Tool set to serve (default: XPATH_MCP_PROFILE or xpath)."
    ),
    fetch_strategy: Optional[FetchStrategy] = typer.Option(
        None, "--fetch-strategy", "-f", help="How xpathwithurl retrieves pages."
    ),
    timeout: Optional[float] = typer.Option(
        None, "--timeout", "-t", min=0.1, help="Fetch timeout in seconds."
    ),
):
    """Run an MCP server on stdio."""
    settings = load_settings(profile=profile, fetch_strategy=fetch_strategy, timeout=timeout)
    mcp_server.run(settings)
