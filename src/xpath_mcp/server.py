"""Stdio MCP server exposing the tool dispatcher."""

from __future__ import annotations

import asyncio
import logging
import sys
from typing import Optional

import mcp.server.stdio
from mcp.server import Server
from mcp.types import TextContent, Tool

from xpath_mcp import __version__
from xpath_mcp.config import ServerSettings
from xpath_mcp.logging_config import setup_logging
from xpath_mcp.tools import PROFILES, ToolDispatcher

logger = logging.getLogger(__name__)


def build_server(dispatcher: ToolDispatcher, name: str = "xpath") -> Server:
    """Bind a dispatcher to a low-level MCP server."""
    server = Server(name, version=__version__)

    @server.list_tools()
    async def list_tools() -> list[Tool]:
        return dispatcher.list_tools()

    # Arguments are validated by the dispatcher so every failing field is
    # reported in one message.
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: dict) -> list[TextContent]:
        response = await dispatcher.dispatch(name, arguments)
        return response.to_content()

    return server


def create_server(settings: ServerSettings) -> Server:
    """Build the server for a deployment's profile."""
    dispatcher = ToolDispatcher.from_settings(settings)
    return build_server(dispatcher, name=PROFILES[settings.profile].server_name)


async def serve_stdio(server: Server) -> None:
    """Run a server over stdin/stdout until the client disconnects."""
    async with mcp.server.stdio.stdio_server() as (read_stream, write_stream):
        logger.info(f"{server.name} MCP server running on stdio")
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options(),
        )


def run(settings: Optional[ServerSettings] = None) -> None:
    """Start a server and block until it exits; exits with status 1 on failure."""
    settings = settings or ServerSettings.from_env()
    try:
        logger.info(
            f"Starting XPath MCP server (profile={settings.profile.value}, "
            f"fetch={settings.fetch_strategy.value})..."
        )
        server = create_server(settings)
        asyncio.run(serve_stdio(server))
    except KeyboardInterrupt:
        logger.info("Server stopped by user.")
    except Exception as e:
        logger.error(f"Fatal error in XPath MCP server: {e}")
        sys.exit(1)


def main():
    """Run the MCP server."""
    setup_logging()
    run()


if __name__ == "__main__":
    main()
