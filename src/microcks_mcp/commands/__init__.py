"""Subcommand modules for microcks-mcp.

Provides register_commands() which uses deferred imports to keep
``microcks-mcp --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register standalone commands on the root CLI group."""
    from microcks_mcp.commands.list_services import list_services
    from microcks_mcp.commands.serve import serve

    cli.add_command(serve)
    cli.add_command(list_services)
