"""GraphBuilder: fluent assembly of a configured :class:`Graph`.

Every flag combination is accepted, including inert ones such as
``weighted(True)`` with no weighted algorithm available.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from mushgraph.domain.edge import Edge
from mushgraph.domain.ids import IdGenerator, NodeId, make_generator
from mushgraph.domain.node import Node
from mushgraph.infrastructure.graph import Graph

if TYPE_CHECKING:
    from mushgraph.config.models import GraphConfig


class GraphBuilder:
    """Collects graph configuration; :meth:`build` produces the graph.

    Usage::

        graph = GraphBuilder().directed(False).tracking(True).build()
    """

    def __init__(self) -> None:
        self._directed = True
        self._weighted = False
        self._tracking = False
        self._ids: IdGenerator | None = None
        self._edge_type: Any = Edge
        self._node_factory: Callable[[NodeId], Node] = Node

    @classmethod
    def from_settings(cls, config: GraphConfig) -> GraphBuilder:
        """Seed a builder from the ``[graph]`` config section."""
        return (
            cls()
            .directed(config.directed)
            .weighted(config.weighted)
            .tracking(config.tracking)
            .ids(make_generator(config.id_strategy))
        )

    def directed(self, d: bool) -> GraphBuilder:
        self._directed = d
        return self

    def weighted(self, w: bool) -> GraphBuilder:
        self._weighted = w
        return self

    def tracking(self, t: bool) -> GraphBuilder:
        """Also record, per node, which nodes point into it."""
        self._tracking = t
        return self

    def ids(self, generator: IdGenerator) -> GraphBuilder:
        self._ids = generator
        return self

    def edge_type(self, edge_type: Any) -> GraphBuilder:
        self._edge_type = edge_type
        return self

    def node_factory(self, factory: Callable[[NodeId], Node]) -> GraphBuilder:
        self._node_factory = factory
        return self

    def build(self) -> Graph[Any]:
        return Graph(
            directed=self._directed,
            weighted=self._weighted,
            tracking=self._tracking,
            ids=self._ids,
            edge_type=self._edge_type,
            node_factory=self._node_factory,
        )
