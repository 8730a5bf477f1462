"""Graph description files: TOML in, populated :class:`Graph` out.

File layout::

    [graph]              # optional, overrides the [graph] config section
    directed = true

    [[nodes]]
    name = "a"
    x = 0.0
    y = 1.0
    kind = "source"      # optional
    accepts = ["sink"]   # optional

    [[edges]]
    from = "a"
    to = "b"
    factor = 1.5         # optional

Node names are file-local handles and must be unique. Unknown names in
edges and refused connections are load errors, not warnings.
"""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from mushgraph.config.models import GraphConfig
from mushgraph.domain.edge import Edge
from mushgraph.domain.errors import GraphFileError
from mushgraph.domain.ids import NodeId
from mushgraph.domain.node import Position
from mushgraph.infrastructure.builder import GraphBuilder
from mushgraph.infrastructure.graph import Graph

logger = logging.getLogger(__name__)


class NodeSpec(BaseModel):
    """One ``[[nodes]]`` entry."""

    model_config = {"frozen": True, "extra": "forbid"}

    name: str
    x: float = 0.0
    y: float = 0.0
    kind: str | None = None
    accepts: list[str] | None = None


class EdgeSpec(BaseModel):
    """One ``[[edges]]`` entry."""

    model_config = {"frozen": True, "extra": "forbid", "populate_by_name": True}

    from_: str = Field(alias="from")
    to: str
    factor: float = 0.0


class GraphSection(BaseModel):
    """Optional ``[graph]`` table; unset flags fall back to config."""

    model_config = {"frozen": True, "extra": "forbid"}

    directed: bool | None = None
    weighted: bool | None = None
    tracking: bool | None = None


class GraphFile(BaseModel):
    model_config = {"frozen": True, "extra": "forbid"}

    graph: GraphSection = Field(default_factory=GraphSection)
    nodes: list[NodeSpec] = Field(default_factory=list)
    edges: list[EdgeSpec] = Field(default_factory=list)


@dataclass
class LoadedGraph:
    """A built graph plus the name <-> id mapping from its file."""

    graph: Graph[Edge]
    ids: dict[str, NodeId] = field(default_factory=dict)
    names: dict[NodeId, str] = field(default_factory=dict)

    def resolve(self, name: str) -> NodeId | None:
        return self.ids.get(name)

    def label(self, node_id: NodeId) -> str:
        return self.names.get(node_id, str(node_id))


def build_graph(data: dict[str, Any], config: GraphConfig | None = None) -> LoadedGraph:
    """Build a graph from already-parsed description data.

    Raises:
        GraphFileError: On schema errors, duplicate or unknown node names,
            or a connection the graph refuses.
    """
    try:
        parsed = GraphFile.model_validate(data)
    except ValidationError as exc:
        msg = f"Invalid graph description: {exc}"
        raise GraphFileError(msg) from exc

    config = config or GraphConfig()
    overrides = parsed.graph.model_dump(exclude_none=True)
    if overrides:
        config = config.model_copy(update=overrides)

    loaded = LoadedGraph(graph=GraphBuilder.from_settings(config).build())
    graph = loaded.graph

    for node_spec in parsed.nodes:
        if node_spec.name in loaded.ids:
            msg = f"Duplicate node name '{node_spec.name}'"
            raise GraphFileError(msg)
        node_id = graph.new_node()
        node = graph.get_node_mut(node_id)
        assert node is not None
        node.name = node_spec.name
        node.position = Position(node_spec.x, node_spec.y)
        node.kind = node_spec.kind
        if node_spec.accepts is not None:
            node.accepts = frozenset(node_spec.accepts)
        loaded.ids[node_spec.name] = node_id
        loaded.names[node_id] = node_spec.name

    for edge_spec in parsed.edges:
        for name in (edge_spec.from_, edge_spec.to):
            if name not in loaded.ids:
                msg = f"Edge {edge_spec.from_} -> {edge_spec.to} references unknown node '{name}'"
                raise GraphFileError(msg)
        result = graph.direct(
            loaded.ids[edge_spec.from_],
            loaded.ids[edge_spec.to],
            Edge(factor=edge_spec.factor),
        )
        if not result:
            msg = f"Edge {edge_spec.from_} -> {edge_spec.to} refused: {result.reason}"
            raise GraphFileError(msg)

    logger.debug("Built %r", graph)
    return loaded


def load_graph(path: Path, config: GraphConfig | None = None) -> LoadedGraph:
    """Read and build the graph described by the TOML file at *path*."""
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        msg = f"Cannot read {path}: {exc}"
        raise GraphFileError(msg) from exc
    try:
        data = tomllib.loads(raw)
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid TOML in {path}: {exc}"
        raise GraphFileError(msg) from exc
    return build_graph(data, config)
