"""Utility commands for the xpath-mcp CLI."""

import typer
from rich.table import Table

from xpath_mcp.cli.common import console
from xpath_mcp.fetch import HttpFetcher
from xpath_mcp.models import ServerProfile
from xpath_mcp.tools import PROFILES, MarkupTools, build_tool_table

app = typer.Typer(name="utils", help="Utility commands")


@app.command("tools")
def tools(
    profile: ServerProfile = typer.Option(
        ServerProfile.ALL, "--profile", "-p", help="Profile whose tools to list."
    ),
):
    """List the tools a server profile exposes."""
    spec = PROFILES[profile]
    # Listing never fetches; any fetcher will do.
    table_specs = build_tool_table(MarkupTools(HttpFetcher()), spec.tools)

    table = Table(title=f"{spec.server_name} ({profile.value})")
    table.add_column("Tool", style="cyan")
    table.add_column("Arguments")
    table.add_column("Description")
    for tool in table_specs.values():
        required = set(tool.input_schema.get("required", []))
        arguments = ", ".join(
            name if name in required else f"[{name}]"
            for name in tool.input_schema["properties"]
        )
        table.add_row(tool.name, arguments, tool.description)

    console.print(table)


@app.command("version")
def version():
    """Show xpath-mcp version."""
    from xpath_mcp import __version__

    typer.echo(f"xpath-mcp version {__version__}")
