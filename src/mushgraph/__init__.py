"""mushgraph: generic in-memory directed-graph engine."""

from __future__ import annotations

from mushgraph.domain.edge import Edge, GraphEdge
from mushgraph.domain.errors import (
    ConnectFailure,
    ConnectResult,
    DuplicateIdentityError,
    Endpoint,
    GraphError,
    SearchNotImplementedError,
)
from mushgraph.domain.ids import EdgeId, NodeId, SequentialIds
from mushgraph.domain.node import Guard, Node, NodeBase, Position
from mushgraph.infrastructure.backend import Backend
from mushgraph.infrastructure.builder import GraphBuilder
from mushgraph.infrastructure.graph import Graph

__version__ = "0.1.0"

__all__ = [
    "Backend",
    "ConnectFailure",
    "ConnectResult",
    "DuplicateIdentityError",
    "Edge",
    "EdgeId",
    "Endpoint",
    "Graph",
    "GraphBuilder",
    "GraphEdge",
    "GraphError",
    "Guard",
    "Node",
    "NodeBase",
    "NodeId",
    "Position",
    "SearchNotImplementedError",
    "SequentialIds",
    "__version__",
]
