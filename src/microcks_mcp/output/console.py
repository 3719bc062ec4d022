"""Rich Console factory and theme for microcks-mcp output.

Creates Console instances that render to a StringIO buffer, so renderers
return plain strings. In non-TTY environments (tests, pipes) Rich
automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

MICROCKS_THEME = Theme(
    {
        "mk.error": "bold red",
        "mk.id": "bold blue",
        "mk.name": "bold",
        "mk.version": "dim",
        "mk.type.rest": "green",
        "mk.type.event": "cyan",
        "mk.type.grpc": "magenta",
        "mk.type.graphql": "yellow",
    }
)

_TYPE_STYLES: dict[str, str] = {
    "REST": "mk.type.rest",
    "GENERIC_REST": "mk.type.rest",
    "SOAP_HTTP": "mk.type.rest",
    "EVENT": "mk.type.event",
    "GENERIC_EVENT": "mk.type.event",
    "GRPC": "mk.type.grpc",
    "GRAPHQL": "mk.type.graphql",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=MICROCKS_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_type(service_type: str) -> str:
    """Return the Rich style name for a Microcks service type."""
    return _TYPE_STYLES.get(service_type, "")
