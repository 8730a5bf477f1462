"""Graph: in-memory backend over two mappings.

``nodes``: NodeId -> Node, ``edges``: (from, to) -> payload. Adjacency
lives on the nodes themselves (``edges_to`` / ``edges_from``).

INVARIANT: ``direct`` validates before it mutates. A refused connection
leaves no edge entry and no adjacency change behind, not even briefly.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Callable
from typing import Any, TypeVar

from mushgraph.domain.edge import Edge
from mushgraph.domain.errors import ConnectResult, DuplicateIdentityError, Endpoint
from mushgraph.domain.ids import EdgeId, IdGenerator, NodeId, uuid_ids
from mushgraph.domain.node import Guard, Node
from mushgraph.infrastructure.backend import Backend

logger = logging.getLogger(__name__)

E = TypeVar("E")
R = TypeVar("R")


class Graph(Backend[E]):
    """Hash-map backed graph.

    Args:
        directed: When False every connection also stores its mirror edge.
        weighted: Recorded only; no algorithm consults it yet.
        tracking: Maintain each node's incoming-neighbor set.
        ids: Id generator used by :meth:`new_node`.
        edge_type: Payload class whose ``default()`` fills omitted edges.
        node_factory: Builds the default node for :meth:`new_node`.
    """

    def __init__(
        self,
        *,
        directed: bool = True,
        weighted: bool = False,
        tracking: bool = False,
        ids: IdGenerator | None = None,
        edge_type: Any = Edge,
        node_factory: Callable[[NodeId], Node] = Node,
    ) -> None:
        self._nodes: dict[NodeId, Node] = {}
        self._edges: dict[EdgeId, E] = {}
        self._directed = directed
        self._weighted = weighted
        self._tracking = tracking
        self._ids = ids or uuid_ids
        self._edge_type = edge_type
        self._node_factory = node_factory

    def __repr__(self) -> str:
        return (
            f"Graph(nodes={len(self._nodes)}, edges={len(self._edges)}, "
            f"directed={self._directed}, weighted={self._weighted}, "
            f"tracking={self._tracking})"
        )

    def __len__(self) -> int:
        return len(self._nodes)

    @property
    def directed(self) -> bool:
        return self._directed

    @property
    def weighted(self) -> bool:
        return self._weighted

    @property
    def tracking(self) -> bool:
        return self._tracking

    @property
    def edge_count(self) -> int:
        """Number of stored unidirectional edges (mirrors count twice)."""
        return len(self._edges)

    # ------------------------------------------------------------------
    # Nodes
    # ------------------------------------------------------------------

    def new_node(self) -> NodeId:
        node_id = self._ids()
        # An injected generator may collide with ids supplied via add_node.
        while node_id in self._nodes:
            node_id = self._ids()
        self._nodes[node_id] = self._node_factory(node_id)
        return node_id

    def add_node(self, node: Node) -> NodeId:
        if node.id in self._nodes:
            raise DuplicateIdentityError(node.id)
        self._nodes[node.id] = node
        return node.id

    def get_node(self, node_id: NodeId) -> Node | None:
        return self._nodes.get(node_id)

    def get_node_mut(self, node_id: NodeId) -> Node | None:
        return self._nodes.get(node_id)

    def contains(self, node_id: NodeId) -> bool:
        return node_id in self._nodes

    def remove(self, node_id: NodeId, *, cascade: bool = False) -> Node | None:
        node = self._nodes.pop(node_id, None)
        if node is None:
            return None
        if cascade:
            self._purge(node_id)
        logger.debug("Removed node %s (cascade=%s)", node_id, cascade)
        return node

    def _purge(self, node_id: NodeId) -> None:
        """Drop every edge and adjacency entry that mentions *node_id*."""
        for eid in [eid for eid in self._edges if node_id in eid]:
            del self._edges[eid]
        for node in self._nodes.values():
            node.undirect(node_id)
            node.undirect_from(node_id)

    # ------------------------------------------------------------------
    # Edges
    # ------------------------------------------------------------------

    def direct(self, from_: NodeId, to: NodeId, edge: E | None = None) -> ConnectResult:
        src = self._nodes.get(from_)
        if src is None:
            logger.debug("Connect %s -> %s refused: source missing", from_, to)
            return ConnectResult.missing(from_, to, Endpoint.FROM)
        dst = self._nodes.get(to)
        if dst is None:
            logger.debug("Connect %s -> %s refused: target missing", from_, to)
            return ConnectResult.missing(from_, to, Endpoint.TO)
        if isinstance(src, Guard) and not src.guard(dst):
            logger.debug("Connect %s -> %s refused by guard", from_, to)
            return ConnectResult.rejected(from_, to)

        payload = edge if edge is not None else self._edge_type.default()
        # Every stored edge owns its payload.
        self._edges[(from_, to)] = copy.copy(payload)
        src.direct(to)
        if self._tracking:
            dst.direct_from(from_)
        if not self._directed:
            self._edges[(to, from_)] = copy.copy(payload)
            dst.direct(from_)
            if self._tracking:
                src.direct_from(to)

        logger.debug("Connected %s -> %s", from_, to)
        return ConnectResult.success(from_, to)

    def undirect(self, from_: NodeId, to: NodeId) -> None:
        src = self._nodes.get(from_)
        dst = self._nodes.get(to)

        self._edges.pop((from_, to), None)
        if src is not None:
            src.undirect(to)
        if self._tracking and dst is not None:
            dst.undirect_from(from_)

        if not self._directed:
            self._edges.pop((to, from_), None)
            if dst is not None:
                dst.undirect(from_)
            if self._tracking and src is not None:
                src.undirect_from(to)

        logger.debug("Disconnected %s -> %s", from_, to)

    def get_edge(self, edge_id: EdgeId) -> E | None:
        return self._edges.get(edge_id)

    def get_edge_mut(self, edge_id: EdgeId) -> E | None:
        return self._edges.get(edge_id)

    # ------------------------------------------------------------------
    # Bulk
    # ------------------------------------------------------------------

    def with_nodes(self, visitor: Callable[[Node], R]) -> list[R]:
        return [visitor(node) for node in self._nodes.values()]

    def with_nodes_mut(self, visitor: Callable[[Node], None]) -> None:
        for node in list(self._nodes.values()):
            visitor(node)
