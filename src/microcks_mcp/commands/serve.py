"""serve — start the MCP server."""

from __future__ import annotations

import click

from microcks_mcp.commands._base import MicrocksCommand
from microcks_mcp.commands._context import AppContext


@click.command(
    cls=MicrocksCommand,
    examples="""\
  # Start the MCP server (stdio transport, default)
  microcks-mcp serve

  # Point at a remote Microcks and serve over streamable HTTP
  microcks-mcp --api-url https://microcks.example.com serve \\
      --transport streamable-http --host 0.0.0.0 --port 9000""",
)
@click.option(
    "--transport",
    default=None,
    type=click.Choice(["stdio", "sse", "streamable-http"]),
    help="MCP transport protocol (default: [mcp] transport, else stdio).",
)
@click.option("--host", default=None, help="Bind address (HTTP transports only).")
@click.option("--port", default=None, type=int, help="Listen port (HTTP transports only).")
@click.pass_obj
def serve(app: AppContext, transport: str | None, host: str | None, port: int | None) -> None:
    """Start the MCP server exposing the Microcks tools."""
    from microcks_mcp.mcp.server import create_server

    server = create_server(app.settings, host=host, port=port)
    server.run(transport=transport or app.settings.mcp.transport)
