"""AppContext: shared Click context for all commands.

Created once by the root CLI group and handed to subcommands via
``@click.pass_obj``. Configures logging, loads graph files, and emits
results with the right stream and exit code.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click
import structlog

from mushgraph.domain.errors import GraphFileError
from mushgraph.output.formatters import format_result

if TYPE_CHECKING:
    from mushgraph.config.settings import MushSettings
    from mushgraph.services.loader import LoadedGraph
    from mushgraph.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: MushSettings) -> None:
        self.settings = settings

        from mushgraph.config.logging import configure_logging

        configure_logging(
            verbose=settings.verbose,
            log_json=settings.log_json,
            trace=settings.trace,
        )
        self.log = structlog.get_logger("mushgraph.cli")

    def load(self, path: Path) -> LoadedGraph:
        """Build the graph described at *path* using the configured flags.

        Load failures become a ClickException (stderr, exit code 1).
        """
        from mushgraph.services.loader import load_graph

        try:
            loaded = load_graph(path, self.settings.graph)
        except GraphFileError as exc:
            raise click.ClickException(str(exc)) from exc
        self.log.debug("graph.loaded", path=str(path), nodes=len(loaded.graph))
        return loaded

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: writes to stdout, returns normally.
        * Failure: writes to stderr, exits with code 1.
        """
        output = format_result(
            result,
            json_output=self.settings.json_output,
            width=self.settings.output.width,
            color=self.settings.output.color,
        )
        if result.ok:
            click.echo(output)
            if not self.settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
