"""QueryService: named-node queries over a loaded graph.

Wraps :mod:`mushgraph.services.search` for callers that address nodes
by their file names (the CLI) and want a ServiceResult back.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from mushgraph.domain.errors import SearchNotImplementedError
from mushgraph.services import search
from mushgraph.services.result import ServiceResult

if TYPE_CHECKING:
    from mushgraph.domain.ids import NodeId
    from mushgraph.services.loader import LoadedGraph

SEARCH_KINDS = ("depth", "breadth", "hops", "dijkstra")


class QueryService:
    """Handles path, cycle, and decomposition queries."""

    def __init__(self, loaded: LoadedGraph) -> None:
        self._loaded = loaded

    # ------------------------------------------------------------------
    # Shared helpers
    # ------------------------------------------------------------------

    def _labels(self, node_ids: list[NodeId]) -> list[str]:
        return [self._loaded.label(n) for n in node_ids]

    def _resolve(self, op: str, **names: str) -> dict[str, NodeId] | ServiceResult:
        """Map role -> name to role -> id, or a NOT_FOUND result."""
        resolved: dict[str, NodeId] = {}
        for role, name in names.items():
            node_id = self._loaded.resolve(name)
            if node_id is None:
                return ServiceResult.fail(
                    op, "NOT_FOUND", f"Node '{name}' ({role}) not found in graph"
                )
            resolved[role] = node_id
        return resolved

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def info(self) -> ServiceResult:
        graph = self._loaded.graph
        return ServiceResult(
            ok=True,
            op="info",
            data={
                "nodes": len(graph),
                "edges": graph.edge_count,
                "directed": graph.directed,
                "weighted": graph.weighted,
                "tracking": graph.tracking,
            },
        )

    def path(self, source: str, target: str, *, kind: str = "depth") -> ServiceResult:
        """Search from *source* to *target* with the named search *kind*.

        ``depth`` and ``breadth`` report the recorded sequence; ``hops``
        reports the shortest path by edge count.
        """
        ids = self._resolve("path", source=source, target=target)
        if isinstance(ids, ServiceResult):
            return ids
        start, to = ids["source"], ids["target"]

        try:
            match kind:
                case "depth":
                    found = search.get_path(self._loaded.graph, search.Depth(start, to))
                case "breadth":
                    found = search.get_path(self._loaded.graph, search.Breadth(start, to))
                case "hops":
                    found = search.get_hop_path(self._loaded.graph, start, to)
                case "dijkstra":
                    found = search.get_path(self._loaded.graph, search.Dijkstra(start, to))
                case _:
                    return ServiceResult.fail(
                        "path", "INVALID_SEARCH", f"Unknown search kind '{kind}'"
                    )
        except SearchNotImplementedError as exc:
            return ServiceResult.fail("path", "NOT_IMPLEMENTED", str(exc))

        if found is None:
            return ServiceResult.fail(
                "path", "NO_PATH", f"No path from '{source}' to '{target}'"
            )
        return ServiceResult(
            ok=True,
            op="path",
            data={
                "source": source,
                "target": target,
                "search": kind,
                "count": len(found),
                "steps": self._labels(found),
            },
        )

    def cycles(self, start: str) -> ServiceResult:
        ids = self._resolve("cycles", start=start)
        if isinstance(ids, ServiceResult):
            return ids
        back_edges = search.get_cycle(self._loaded.graph, ids["start"])
        items: list[dict[str, Any]] = sorted(
            (
                {"to": self._loaded.label(to), "from": self._loaded.label(frm)}
                for to, frm in back_edges
            ),
            key=lambda item: (item["from"], item["to"]),
        )
        return ServiceResult(
            ok=True,
            op="cycles",
            data={"start": start, "count": len(items), "back_edges": items},
        )

    def components(self) -> ServiceResult:
        groups = search.get_all_nodes(self._loaded.graph)
        return ServiceResult(
            ok=True,
            op="components",
            data={"count": len(groups), "groups": [self._labels(g) for g in groups]},
        )

    def next(self, node: str) -> ServiceResult:
        ids = self._resolve("next", node=node)
        if isinstance(ids, ServiceResult):
            return ids
        nxt = search.get_next(self._loaded.graph, ids["node"])
        return ServiceResult(
            ok=True,
            op="next",
            data={"node": node, "next": None if nxt is None else self._loaded.label(nxt)},
        )
