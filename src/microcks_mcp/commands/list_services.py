"""list-services — print the services of the connected Microcks instance."""

from __future__ import annotations

import click

from microcks_mcp.commands._base import MicrocksCommand
from microcks_mcp.commands._context import AppContext
from microcks_mcp.domain.result import Error, Success


@click.command(
    "list-services",
    cls=MicrocksCommand,
    examples="""\
  # Table of services on the configured Microcks
  microcks-mcp list-services

  # Same payload the microcks_list_services tool returns
  microcks-mcp --json list-services""",
)
@click.pass_obj
def list_services(app: AppContext) -> None:
    """List services, mocks and APIs known to Microcks."""
    from microcks_mcp.mcp.tools import services_to_json
    from microcks_mcp.output.renderers import render_error, render_services

    match app.list_services.list_all_services():
        case Success(value=services):
            if app.settings.json_output:
                click.echo(services_to_json(services))
            else:
                click.echo(render_services(services), nl=False)
        case Error(message=message):
            if app.settings.json_output:
                click.echo(message, err=True)
            else:
                click.echo(render_error(message), err=True, nl=False)
            raise SystemExit(1)
