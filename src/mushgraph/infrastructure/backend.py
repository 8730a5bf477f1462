"""Backend: the operation set every graph storage must provide.

Traversal algorithms in :mod:`mushgraph.services.search` are written
against this contract only, so any storage satisfying it can be swapped
in for :class:`~mushgraph.infrastructure.graph.Graph`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from mushgraph.domain.errors import ConnectResult
    from mushgraph.domain.ids import EdgeId, NodeId
    from mushgraph.domain.node import Node

E = TypeVar("E")
R = TypeVar("R")


class Backend(ABC, Generic[E]):
    """Abstract graph storage over edge payload type ``E``.

    Node removal is lazy: adjacency sets of other nodes may keep
    referring to a removed id. Consumers must check :meth:`contains`
    before following an adjacency entry.
    """

    # --- configuration ---

    @property
    @abstractmethod
    def directed(self) -> bool: ...

    @property
    @abstractmethod
    def weighted(self) -> bool: ...

    @property
    @abstractmethod
    def tracking(self) -> bool:
        """Whether incoming-neighbor sets are maintained."""

    # --- nodes ---

    @abstractmethod
    def new_node(self) -> NodeId:
        """Create a node with default payload and return its id."""

    @abstractmethod
    def add_node(self, node: Node) -> NodeId:
        """Insert a caller-built node.

        Raises:
            DuplicateIdentityError: If ``node.id`` is already stored.
        """

    @abstractmethod
    def get_node(self, node_id: NodeId) -> Node | None: ...

    @abstractmethod
    def get_node_mut(self, node_id: NodeId) -> Node | None: ...

    @abstractmethod
    def contains(self, node_id: NodeId) -> bool: ...

    @abstractmethod
    def remove(self, node_id: NodeId, *, cascade: bool = False) -> Node | None:
        """Delete a node and return it, or None if it was absent.

        Without *cascade* only the node entry goes; edges and other
        nodes' adjacency entries pointing at it are left behind.
        """

    # --- edges ---

    @abstractmethod
    def direct(self, from_: NodeId, to: NodeId, edge: E | None = None) -> ConnectResult:
        """Connect *from_* to *to*. Nothing changes unless the result is ok."""

    @abstractmethod
    def undirect(self, from_: NodeId, to: NodeId) -> None:
        """Disconnect *from_* from *to*. A no-op when no such edge exists."""

    @abstractmethod
    def get_edge(self, edge_id: EdgeId) -> E | None: ...

    @abstractmethod
    def get_edge_mut(self, edge_id: EdgeId) -> E | None: ...

    # --- bulk ---

    @abstractmethod
    def with_nodes(self, visitor: Callable[[Node], R]) -> list[R]:
        """Apply a read-only *visitor* to every node; unspecified order."""

    @abstractmethod
    def with_nodes_mut(self, visitor: Callable[[Node], None]) -> None:
        """Apply a mutating *visitor* to every node; unspecified order."""

    def __contains__(self, node_id: object) -> bool:
        return self.contains(node_id)  # type: ignore[arg-type]
