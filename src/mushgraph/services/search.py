"""Traversal algorithms over any :class:`Backend`.

Depth-first and breadth-first path search, back-edge cycle detection,
decomposition into reachable groups, and single-step lookahead. Only the
backend contract is used: node lookup, existence checks, adjacency sets.

Removal is lazy, so adjacency sets may name nodes that no longer exist.
Every step re-checks existence before following an entry.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from mushgraph.domain.errors import SearchNotImplementedError

if TYPE_CHECKING:
    from mushgraph.domain.ids import EdgeId, NodeId
    from mushgraph.infrastructure.backend import Backend

logger = logging.getLogger(__name__)

type AnyBackend = Backend[Any]


# ── Search descriptors ───────────────────────────────────────────────


@dataclass(frozen=True)
class Depth:
    """Depth-first search from *start*, optionally stopping at *to*."""

    start: NodeId
    to: NodeId | None = None


@dataclass(frozen=True)
class Breadth:
    """Breadth-first search from *start*, optionally stopping at *to*."""

    start: NodeId
    to: NodeId | None = None


@dataclass(frozen=True)
class Dijkstra:
    """Weighted shortest path. Not implemented."""

    start: NodeId
    to: NodeId


type GraphSearch = Depth | Breadth | Dijkstra


def get_path(backend: AnyBackend, search: GraphSearch) -> list[NodeId] | None:
    """Run *search* and return the recorded sequence, or None.

    Raises:
        SearchNotImplementedError: For :class:`Dijkstra`.
    """
    match search:
        case Depth(start=start, to=to):
            return depth_first(backend, start, to)
        case Breadth(start=start, to=to):
            return breadth_first(backend, start, to)
        case Dijkstra():
            raise SearchNotImplementedError("dijkstra")
    msg = f"Unknown search descriptor: {search!r}"
    raise TypeError(msg)


# ── Depth-first ──────────────────────────────────────────────────────


def _live_neighbors(backend: AnyBackend, node_id: NodeId) -> Iterator[NodeId]:
    """Outgoing neighbors of *node_id* that still exist, in set order."""
    node = backend.get_node(node_id)
    if node is None:
        return iter(())
    return (n for n in tuple(node.edges_to) if backend.contains(n))


def _walk(
    backend: AnyBackend,
    start: NodeId,
    visited: set[NodeId],
    *,
    to: NodeId | None = None,
    back_edges: set[EdgeId] | None = None,
) -> list[NodeId]:
    """Iterative depth-first walk from *start*.

    Returns the nodes entered after *start*, in entry order. Stops as
    soon as *to* is entered. *visited* is updated in place so callers
    can share it across walks. When *back_edges* is given, every
    ``(neighbor, current)`` pair whose neighbor is on the active stack
    is added to it.
    """
    entered: list[NodeId] = []
    visited.add(start)
    if not backend.contains(start):
        return entered

    stack: list[tuple[NodeId, Iterator[NodeId]]] = [(start, _live_neighbors(backend, start))]
    on_stack: set[NodeId] = {start}
    if back_edges is not None:
        _record_back_edges(backend, start, on_stack, back_edges)

    while stack:
        cursor, pending = stack[-1]
        nxt = next((n for n in pending if n not in visited), None)
        if nxt is None:
            stack.pop()
            on_stack.discard(cursor)
            continue

        visited.add(nxt)
        entered.append(nxt)
        if nxt == to:
            break

        stack.append((nxt, _live_neighbors(backend, nxt)))
        on_stack.add(nxt)
        if back_edges is not None:
            _record_back_edges(backend, nxt, on_stack, back_edges)

    return entered


def _record_back_edges(
    backend: AnyBackend,
    cursor: NodeId,
    on_stack: set[NodeId],
    back_edges: set[EdgeId],
) -> None:
    node = backend.get_node(cursor)
    if node is None:
        return
    for n in node.edges_to:
        if n in on_stack:
            back_edges.add((n, cursor))


def depth_first(
    backend: AnyBackend,
    start: NodeId,
    to: NodeId | None = None,
) -> list[NodeId] | None:
    """Depth-first search from *start* toward *to*.

    The returned path lists the nodes entered after *start*, ending at
    *to*. Without a target the walk still runs, but the result is None:
    only a found target yields a path.
    """
    entered = _walk(backend, start, set(), to=to)
    logger.debug("Depth search from %s entered %d nodes", start, len(entered))
    if to is not None and to in entered:
        return entered
    return None


# ── Breadth-first ────────────────────────────────────────────────────


def breadth_first(
    backend: AnyBackend,
    start: NodeId,
    to: NodeId | None = None,
) -> list[NodeId] | None:
    """Breadth-first search from *start* toward *to*.

    Finding *to* only ends the scan of the current node's neighbors; the
    queue is still drained. The result is therefore the full visitation
    order (starting with *start*), not a shortest path. See
    :func:`get_hop_path` for that.
    """
    # An absent start yields None, even when it equals *to*.
    if not backend.contains(start):
        return None

    visited: set[NodeId] = {start}
    order: list[NodeId] = [start]
    queue: deque[NodeId] = deque([start])

    while queue:
        cursor = queue.popleft()
        for n in _live_neighbors(backend, cursor):
            if n in visited:
                continue
            visited.add(n)
            order.append(n)
            queue.append(n)
            if n == to:
                break

    logger.debug("Breadth search from %s visited %d nodes", start, len(order))
    if to is not None and to in order:
        return order
    return None


def get_hop_path(backend: AnyBackend, start: NodeId, to: NodeId) -> list[NodeId] | None:
    """Shortest path by edge count, ``[start, ..., to]``, or None if unreachable."""
    if not backend.contains(start) or not backend.contains(to):
        return None

    parents: dict[NodeId, NodeId | None] = {start: None}
    queue: deque[NodeId] = deque([start])
    while queue:
        cursor = queue.popleft()
        if cursor == to:
            path: list[NodeId] = []
            step: NodeId | None = cursor
            while step is not None:
                path.append(step)
                step = parents[step]
            return path[::-1]
        for n in _live_neighbors(backend, cursor):
            if n not in parents:
                parents[n] = cursor
                queue.append(n)
    return None


# ── Cycles and decomposition ─────────────────────────────────────────


def get_cycle(backend: AnyBackend, start: NodeId) -> set[EdgeId]:
    """Collect every back-edge reachable from *start*.

    Each entry is ``(neighbor, current)``: *current* points at *neighbor*
    while *neighbor* is still on the depth-first stack. The walk covers the
    whole reachable component rather than stopping at the first cycle.
    Empty when that component is acyclic.
    """
    back_edges: set[EdgeId] = set()
    _walk(backend, start, set(), back_edges=back_edges)
    logger.debug("Cycle search from %s found %d back-edges", start, len(back_edges))
    return back_edges


def get_all_nodes(backend: AnyBackend) -> list[list[NodeId]]:
    """Partition the graph into depth-first groups.

    Runs a target-less walk from each node not yet covered; each group
    starts with its root. The visited set is shared, so every node lands
    in exactly one group. Group order follows the backend's iteration
    order and carries no meaning.
    """
    roots = backend.with_nodes(lambda node: node.id)
    visited: set[NodeId] = set()
    groups: list[list[NodeId]] = []
    for root in roots:
        if root in visited:
            continue
        groups.append([root, *_walk(backend, root, visited)])
    logger.debug("Decomposed %d nodes into %d groups", len(roots), len(groups))
    return groups


def get_next(backend: AnyBackend, start: NodeId) -> NodeId | None:
    """First existing outgoing neighbor of *start*, or None."""
    return next(_live_neighbors(backend, start), None)


# ── Not implemented ──────────────────────────────────────────────────


def is_connected(backend: AnyBackend) -> bool:
    raise SearchNotImplementedError("is_connected")


def is_complete(backend: AnyBackend) -> bool:
    raise SearchNotImplementedError("is_complete")


def get_path_shortest(backend: AnyBackend, start: NodeId, to: NodeId) -> list[NodeId] | None:
    """Weighted shortest path. Not implemented."""
    raise SearchNotImplementedError("get_path_shortest")
