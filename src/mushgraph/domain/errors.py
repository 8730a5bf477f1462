"""Failure taxonomy for graph operations.

Two reporting styles, by operation kind:
- Connection attempts return a :class:`ConnectResult` that is falsy on
  failure and names the reason. Rejection is an ordinary outcome.
- Contract violations and unimplemented operations raise a
  :class:`GraphError` subclass.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel


class GraphError(Exception):
    """Base class for errors raised by mushgraph."""


class DuplicateIdentityError(GraphError):
    """A node with the same id is already stored in the graph."""

    def __init__(self, node_id: Any) -> None:
        super().__init__(f"Node '{node_id}' already exists in graph")
        self.node_id = node_id


class SearchNotImplementedError(GraphError, NotImplementedError):
    """The requested search or graph property is not implemented.

    Distinct from a ``None`` result, which always means "not found".
    """

    def __init__(self, operation: str) -> None:
        super().__init__(f"'{operation}' is not implemented")
        self.operation = operation


class GraphFileError(GraphError):
    """A graph description file could not be turned into a graph."""


class ConnectFailure(StrEnum):
    """Why a connection attempt was refused."""

    NODE_NOT_FOUND = "node_not_found"
    GUARD_REJECTED = "guard_rejected"


class Endpoint(StrEnum):
    """Which end of a connection attempt a failure refers to."""

    FROM = "from"
    TO = "to"


class ConnectResult(BaseModel):
    """Outcome of ``Backend.direct``. Truthy iff the edge was formed.

    Attributes:
        ok: Whether the edge exists after the call.
        from_id: Source of the attempted edge.
        to_id: Target of the attempted edge.
        reason: Why the attempt failed (``None`` on success).
        which: For ``NODE_NOT_FOUND``, the missing endpoint.
    """

    model_config = {"frozen": True}

    ok: bool
    from_id: Any
    to_id: Any
    reason: ConnectFailure | None = None
    which: Endpoint | None = None

    def __bool__(self) -> bool:
        return self.ok

    @classmethod
    def success(cls, from_id: Any, to_id: Any) -> ConnectResult:
        return cls(ok=True, from_id=from_id, to_id=to_id)

    @classmethod
    def missing(cls, from_id: Any, to_id: Any, which: Endpoint) -> ConnectResult:
        return cls(
            ok=False,
            from_id=from_id,
            to_id=to_id,
            reason=ConnectFailure.NODE_NOT_FOUND,
            which=which,
        )

    @classmethod
    def rejected(cls, from_id: Any, to_id: Any) -> ConnectResult:
        return cls(
            ok=False,
            from_id=from_id,
            to_id=to_id,
            reason=ConnectFailure.GUARD_REJECTED,
        )
