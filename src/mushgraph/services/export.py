"""Export a backend's contents as a NetworkX DiGraph.

Stale adjacency entries (targets removed without cascade) are skipped,
so the exported graph only mentions nodes that exist.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import networkx as nx
from pydantic import BaseModel

if TYPE_CHECKING:
    from mushgraph.infrastructure.backend import Backend


def _edge_attrs(edge: Any) -> dict[str, Any]:
    if isinstance(edge, BaseModel):
        return edge.model_dump()
    if hasattr(edge, "__dict__"):
        return dict(vars(edge))
    return {}


def to_networkx(backend: Backend[Any]) -> nx.DiGraph:
    """Build a DiGraph with ``name``/``x``/``y`` node attributes.

    Edge attributes come from the payload's fields (``factor`` for the
    default :class:`~mushgraph.domain.edge.Edge`). Undirected backends
    export both mirror edges.
    """
    g: nx.DiGraph = nx.DiGraph()
    nodes = backend.with_nodes(lambda node: node)
    for node in nodes:
        g.add_node(node.id, name=node.name, x=node.position.x, y=node.position.y)
    for node in nodes:
        for to in node.edges_to:
            if not backend.contains(to):
                continue
            edge = backend.get_edge((node.id, to))
            g.add_edge(node.id, to, **_edge_attrs(edge))
    return g
