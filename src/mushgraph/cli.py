"""Root CLI group for mushgraph with global flags and command registration."""

from __future__ import annotations

import click

from mushgraph import __version__
from mushgraph.commands import register_commands
from mushgraph.commands._context import AppContext
from mushgraph.config.settings import MushSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="mushgraph")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging to stderr.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("--trace", is_flag=True, help="Include traversal debug records (implies -v).")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    verbose: bool,
    log_json: bool,
    trace: bool,
    config_path: str | None,
) -> None:
    """Query graph description files with mushgraph."""
    settings = MushSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        verbose=verbose,
        log_json=log_json,
        trace=trace,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
