"""MCP tool definitions — Microcks service discovery and artifact import.

Each tool has a ``*_impl`` function returning a :class:`ToolResponse`,
testable without a running server. ``register_tools()`` wraps them with
FastMCP decorators.

Failures are reported inside the tool result (``isError``), never as a
protocol-level error: by the time a failure reaches this module it is
already a short, agent-actionable message.
"""

from __future__ import annotations

import logging
from typing import Any

from mcp.types import CallToolResult, TextContent, ToolAnnotations
from pydantic import BaseModel, TypeAdapter

from microcks_mcp.domain.models import ServiceSummary
from microcks_mcp.domain.result import Error, Success
from microcks_mcp.services.list_services import ListServicesService

logger = logging.getLogger(__name__)

LIST_SERVICES_TOOL = "microcks_list_services"
IMPORT_ARTIFACT_TOOL = "microcks_import_artifact"

LIST_SERVICES_DESCRIPTION = (
    "Discover and list all available services, mocks and APIs in the connected "
    "Microcks instance. Returns service names, versions, IDs and types (REST, "
    "GraphQL, SOAP, AsyncAPI, gRPC, etc.) to help identify which mock services "
    "are available."
)
IMPORT_ARTIFACT_DESCRIPTION = (
    "Import a file artifact (OpenAPI, AsyncAPI, GraphQL schema, Protobuffer file "
    "or Collection) into Microcks"
)

_SUMMARIES = TypeAdapter(list[ServiceSummary])


class ToolResponse(BaseModel):
    """Text payload of a tool call, flagged as success or error."""

    model_config = {"frozen": True}

    text: str
    is_error: bool = False

    @classmethod
    def success(cls, text: str) -> ToolResponse:
        return cls(text=text)

    @classmethod
    def error(cls, text: str) -> ToolResponse:
        return cls(text=text, is_error=True)

    def to_call_tool_result(self) -> CallToolResult:
        """Convert to the MCP result envelope with a single text block."""
        return CallToolResult(
            content=[TextContent(type="text", text=self.text)],
            isError=self.is_error,
        )


def services_to_json(services: list[ServiceSummary]) -> str:
    """Serialize summaries to a compact JSON array of ``{id, name, version, type}``."""
    return _SUMMARIES.dump_json(services).decode("utf-8")


# ---------------------------------------------------------------------------
# Tool implementations
# ---------------------------------------------------------------------------


def list_services_impl(use_case: ListServicesService) -> ToolResponse:
    """List all services in the connected Microcks instance."""
    logger.debug("Executing %s tool", LIST_SERVICES_TOOL)

    match use_case.list_all_services():
        case Success(value=services):
            return ToolResponse.success(services_to_json(services))
        case Error(message=message):
            return ToolResponse.error(message)
        case other:
            msg = f"Unhandled result type: {type(other).__name__}"
            raise TypeError(msg)


def import_artifact_impl(name: str) -> ToolResponse:
    """Placeholder import: reports success without contacting Microcks."""
    return ToolResponse.success(f"Imported {name}")


# ---------------------------------------------------------------------------
# Registration — wraps _impl functions with FastMCP decorators
# ---------------------------------------------------------------------------


def register_tools(server: Any, use_case: ListServicesService) -> None:
    """Register both Microcks tools on the FastMCP server."""

    @server.tool(  # type: ignore[untyped-decorator]
        name=LIST_SERVICES_TOOL,
        description=LIST_SERVICES_DESCRIPTION,
        annotations=ToolAnnotations(readOnlyHint=True, openWorldHint=True),
        structured_output=False,
    )
    def list_services() -> CallToolResult:
        return list_services_impl(use_case).to_call_tool_result()

    @server.tool(  # type: ignore[untyped-decorator]
        name=IMPORT_ARTIFACT_TOOL,
        description=IMPORT_ARTIFACT_DESCRIPTION,
        structured_output=False,
    )
    def import_artifact(name: str) -> CallToolResult:
        return import_artifact_impl(name).to_call_tool_result()
