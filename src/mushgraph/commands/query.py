"""Query commands: info, path, cycles, components, next."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from mushgraph.commands._base import MushCommand
from mushgraph.services.query import SEARCH_KINDS, QueryService

if TYPE_CHECKING:
    from mushgraph.commands._context import AppContext

_graph_file = click.argument(
    "graph_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)


@click.command(cls=MushCommand, examples="  mushgraph info graph.toml")
@_graph_file
@click.pass_obj
def info(app: AppContext, graph_file: Path) -> None:
    """Show node/edge counts and graph flags."""
    app.emit(QueryService(app.load(graph_file)).info())


@click.command(
    cls=MushCommand,
    examples="""\
  mushgraph path graph.toml a d
  mushgraph path graph.toml a d --search breadth
  mushgraph --json path graph.toml a d --search hops""",
)
@_graph_file
@click.argument("source")
@click.argument("target")
@click.option(
    "--search",
    "kind",
    type=click.Choice(SEARCH_KINDS),
    default="depth",
    show_default=True,
    help="Search strategy.",
)
@click.pass_obj
def path(app: AppContext, graph_file: Path, source: str, target: str, kind: str) -> None:
    """Search for TARGET starting from SOURCE."""
    app.emit(QueryService(app.load(graph_file)).path(source, target, kind=kind))


@click.command(cls=MushCommand, examples="  mushgraph cycles graph.toml a")
@_graph_file
@click.argument("start")
@click.pass_obj
def cycles(app: AppContext, graph_file: Path, start: str) -> None:
    """List back-edges reachable from START."""
    app.emit(QueryService(app.load(graph_file)).cycles(start))


@click.command(cls=MushCommand, examples="  mushgraph components graph.toml")
@_graph_file
@click.pass_obj
def components(app: AppContext, graph_file: Path) -> None:
    """Split the graph into depth-first groups."""
    app.emit(QueryService(app.load(graph_file)).components())


@click.command("next", cls=MushCommand, examples="  mushgraph next graph.toml a")
@_graph_file
@click.argument("node")
@click.pass_obj
def next_node(app: AppContext, graph_file: Path, node: str) -> None:
    """Show one outgoing neighbor of NODE."""
    app.emit(QueryService(app.load(graph_file)).next(node))
