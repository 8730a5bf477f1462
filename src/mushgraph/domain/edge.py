"""Edge payload capability and the default payload.

Edges carry no identity of their own: identity is the ``(from, to)``
EdgeId under which the backend stores the payload.
"""

from __future__ import annotations

from typing import Protocol, Self, runtime_checkable

from pydantic import BaseModel


@runtime_checkable
class GraphEdge(Protocol):
    """Anything usable as an edge payload.

    Payloads must be copyable values: the backend stores a shallow copy
    under each EdgeId it writes, so edges never share a payload object.
    """

    @classmethod
    def default(cls) -> Self: ...


class Edge(BaseModel):
    """Default edge payload: a single numeric weight/factor."""

    model_config = {"frozen": True}

    factor: float = 0.0

    @classmethod
    def default(cls) -> Edge:
        return cls()
