"""Human and JSON rendering of ServiceResult.

``--json`` dumps the result model as-is. Human output uses Rich, with a
dedicated renderer per query op and a key/value fallback.
"""

from __future__ import annotations

import json as _json
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.markup import escape
from rich.table import Table

from mushgraph.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from mushgraph.services.result import ServiceResult


def _render_data(console: Console, data: dict[str, Any]) -> None:
    for key, value in data.items():
        if isinstance(value, (dict, list)):
            value = _json.dumps(value, separators=(",", ":"))
        console.print(f"  [mush.key]{escape(key)}:[/] {escape(str(value))}")


def _render_path(console: Console, data: dict[str, Any]) -> None:
    arrow = " [mush.arrow]->[/] "
    chain = arrow.join(f"[mush.node]{escape(step)}[/]" for step in data["steps"])
    console.print(f"  {escape(data['search'])}: {chain}")


def _render_cycles(console: Console, data: dict[str, Any]) -> None:
    if not data["back_edges"]:
        console.print(f"  no cycles reachable from {escape(data['start'])}")
        return
    table = Table("from", "to", title="back-edges")
    for item in data["back_edges"]:
        table.add_row(escape(item["from"]), escape(item["to"]))
    console.print(table)


def _render_components(console: Console, data: dict[str, Any]) -> None:
    table = Table("#", "size", "members")
    for index, group in enumerate(data["groups"]):
        table.add_row(str(index), str(len(group)), escape(", ".join(group)))
    console.print(table)


_RENDERERS: dict[str, Callable[[Console, dict[str, Any]], None]] = {
    "path": _render_path,
    "cycles": _render_cycles,
    "components": _render_components,
}


def format_result(
    result: ServiceResult,
    *,
    json_output: bool = False,
    width: int | None = None,
    color: bool = True,
) -> str:
    """Format a ServiceResult for display.

    Args:
        result: The service result to format.
        json_output: If True, return JSON; otherwise return human-readable text.
        width: Console width for human output.
        color: Allow ANSI colors (still suppressed when not a TTY).
    """
    if json_output:
        return result.model_dump_json(indent=2)

    console = create_console(no_color=not color, width=width)
    if result.ok:
        console.print(f"[mush.ok]OK[/]: [mush.op]{escape(result.op)}[/]")
        if result.data:
            _RENDERERS.get(result.op, _render_data)(console, result.data)
    else:
        message = result.error.message if result.error else "Unknown error"
        console.print(f"[mush.error]ERROR[/]: [mush.op]{escape(result.op)}[/] - {escape(message)}")
    return get_output(console).rstrip("\n")
