"""FastMCP server setup.

Composition root: builds the HTTP adapter once, injects it into the
use case, and registers the tools. Transport: stdio default, SSE and
streamable HTTP optional.
"""

from __future__ import annotations

from mcp.server.fastmcp import FastMCP

from microcks_mcp.config.settings import MicrocksSettings
from microcks_mcp.infrastructure.http_adapter import MicrocksHttpAdapter
from microcks_mcp.mcp.tools import register_tools
from microcks_mcp.services.list_services import ListServicesService

__all__ = ["SERVER_NAME", "create_server"]

SERVER_NAME = "microcks-mcp"


def create_server(
    settings: MicrocksSettings,
    *,
    host: str | None = None,
    port: int | None = None,
) -> FastMCP:
    """Create and configure the MCP server.

    *host* and *port* override the ``[mcp]`` settings for HTTP
    transports (sse, streamable-http). They are ignored under stdio.
    """
    adapter = MicrocksHttpAdapter.from_base_url(settings.microcks.api_url)
    use_case = ListServicesService(adapter)

    server = FastMCP(
        SERVER_NAME,
        host=host or settings.mcp.host,
        port=port or settings.mcp.port,
    )
    register_tools(server, use_case)
    return server
