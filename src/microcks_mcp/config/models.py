"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, microcks-mcp.toml only
contains overrides. A local Microcks on port 8080 needs no file at all.
"""

from __future__ import annotations

from pydantic import BaseModel


class MicrocksConfig(BaseModel):
    """[microcks] section."""

    model_config = {"frozen": True}

    api_url: str = "http://localhost:8080"


class McpConfig(BaseModel):
    """[mcp] section."""

    model_config = {"frozen": True}

    transport: str = "stdio"
    host: str = "127.0.0.1"
    port: int = 8000

