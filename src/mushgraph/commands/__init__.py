"""Subcommand modules for mushgraph."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register every query command on the root CLI group."""
    from mushgraph.commands.query import components, cycles, info, next_node, path

    cli.add_command(info)
    cli.add_command(path)
    cli.add_command(cycles)
    cli.add_command(components)
    cli.add_command(next_node)
