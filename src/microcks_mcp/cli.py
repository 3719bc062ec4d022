"""Root CLI group for microcks-mcp with global flags and command registration."""

from __future__ import annotations

import click

from microcks_mcp import __version__
from microcks_mcp.commands import register_commands
from microcks_mcp.commands._context import AppContext
from microcks_mcp.config.settings import MicrocksSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="microcks-mcp")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-v", "--verbose", is_flag=True, help="Debug-level logging to stderr.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option("--api-url", default=None, help="Microcks server URL (overrides [microcks] api_url).")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    api_url: str | None,
) -> None:
    """microcks-mcp — Microcks tools for MCP agents."""
    settings = MicrocksSettings.from_cli(
        config_path=config_path,
        api_url=api_url,
        json_output=json_output,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
