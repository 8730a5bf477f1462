"""Node state shared by every node type, and the default domain node.

``NodeBase`` holds identity and adjacency. ``Node`` adds the payload
(name, 2D position) and the edge-acceptance guard consulted by the
backend before an outgoing edge is formed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from mushgraph.domain.ids import NodeId


@runtime_checkable
class Guard(Protocol):
    """Edge-acceptance predicate of a node.

    Called on the *source* node with the prospective target. Returning
    False vetoes the edge; the graph is left untouched.
    """

    def guard(self, candidate: Node) -> bool: ...


@dataclass
class NodeBase:
    """Identity plus outgoing (and optionally incoming) neighbor sets.

    ``edges_from`` is only maintained by graphs built with tracking on.
    Entries in either set may refer to nodes that have since been removed.
    """

    id: NodeId
    edges_to: set[NodeId] = field(default_factory=set)
    edges_from: set[NodeId] = field(default_factory=set)

    def direct(self, to: NodeId) -> None:
        """Record an outgoing neighbor."""
        self.edges_to.add(to)

    def direct_from(self, from_: NodeId) -> None:
        """Record an incoming neighbor."""
        self.edges_from.add(from_)

    def undirect(self, to: NodeId) -> None:
        self.edges_to.discard(to)

    def undirect_from(self, from_: NodeId) -> None:
        self.edges_from.discard(from_)


@dataclass(frozen=True)
class Position:
    """2D placement of a node."""

    x: float = 0.0
    y: float = 0.0


@dataclass
class Node(NodeBase):
    """Default domain node.

    Attributes:
        name: Display name; not required to be unique.
        position: Placement on a 2D canvas.
        kind: Optional type tag checked by other nodes' guards.
        accepts: Kinds this node may point at. ``None`` accepts everything.
    """

    name: str = ""
    position: Position = field(default_factory=Position)
    kind: str | None = None
    accepts: frozenset[str] | None = None

    def guard(self, candidate: Node) -> bool:
        if self.accepts is None:
            return True
        return candidate.kind in self.accepts
