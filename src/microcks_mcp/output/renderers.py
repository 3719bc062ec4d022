"""Human-readable renderers for service listings."""

from __future__ import annotations

from rich.table import Table
from rich.text import Text

from microcks_mcp.domain.models import ServiceSummary
from microcks_mcp.output.console import create_console, get_output, style_for_type


def render_services(services: list[ServiceSummary], *, no_color: bool = False) -> str:
    """Render services as a table, or a one-line notice when there are none."""
    console = create_console(no_color=no_color)
    if not services:
        console.print("No services found.")
        return get_output(console)

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("ID", style="mk.id", no_wrap=True)
    table.add_column("Name", style="mk.name")
    table.add_column("Version", style="mk.version")
    table.add_column("Type")

    for svc in services:
        table.add_row(svc.id, svc.name, svc.version, Text(svc.type, style=style_for_type(svc.type)))

    console.print(table)
    console.print(f"\n  {len(services)} services")
    return get_output(console)


def render_error(message: str, *, no_color: bool = False) -> str:
    """Render an agent error message for the terminal."""
    console = create_console(no_color=no_color)
    console.print(Text("ERROR ", style="mk.error"), Text(message), sep="")
    return get_output(console)
