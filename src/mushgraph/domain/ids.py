"""Identity types and injectable id generators.

Two generation strategies:
- Random (default): ``uuid.uuid4()`` per node.
- Sequential: monotonically increasing integers, for deterministic tests.

INVARIANT: IDs are permanent. A NodeId is assigned once, at creation,
and a generator never hands out the same value twice.
"""

from __future__ import annotations

import itertools
import uuid
from collections.abc import Callable
from enum import StrEnum

type NodeId = uuid.UUID | int
type EdgeId = tuple[NodeId, NodeId]
"""(from, to). One unidirectional edge; an undirected relation is two of these."""

type IdGenerator = Callable[[], NodeId]


class IdStrategy(StrEnum):
    """Named id generation strategies selectable from config."""

    UUID = "uuid"
    SEQUENTIAL = "sequential"


def uuid_ids() -> NodeId:
    """Return a fresh random node id."""
    return uuid.uuid4()


class SequentialIds:
    """Callable handing out ``start, start + 1, ...`` on each call."""

    def __init__(self, start: int = 0) -> None:
        self._counter = itertools.count(start)

    def __call__(self) -> NodeId:
        return next(self._counter)


def make_generator(strategy: IdStrategy | str) -> IdGenerator:
    """Build a generator for *strategy*.

    Raises:
        ValueError: If *strategy* names no known strategy.
    """
    match IdStrategy(strategy):
        case IdStrategy.UUID:
            return uuid_ids
        case IdStrategy.SEQUENTIAL:
            return SequentialIds()
