"""Shared pytest fixtures for mushgraph tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest
from click.testing import CliRunner

from mushgraph.domain.edge import Edge
from mushgraph.domain.ids import NodeId, SequentialIds
from mushgraph.infrastructure.builder import GraphBuilder
from mushgraph.infrastructure.graph import Graph


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def graph() -> Graph[Edge]:
    """Empty directed, non-tracking graph with deterministic integer ids."""
    return GraphBuilder().ids(SequentialIds()).build()


@pytest.fixture
def tracking_graph() -> Graph[Edge]:
    """Empty directed graph that maintains incoming-neighbor sets."""
    return GraphBuilder().tracking(True).ids(SequentialIds()).build()


@pytest.fixture
def undirected_graph() -> Graph[Edge]:
    return GraphBuilder().directed(False).tracking(True).ids(SequentialIds()).build()


@pytest.fixture
def scenario_a(graph: Graph[Edge]) -> tuple[Graph[Edge], list[NodeId]]:
    """Five nodes with n0->n1, n3->n0, n4->n3, and n2 removed.

    Returns the graph and the ids ``[n0, n1, n2, n3, n4]``.
    """
    nodes = [graph.new_node() for _ in range(5)]
    edge = Edge.default()
    assert graph.direct(nodes[0], nodes[1], edge)
    assert graph.direct(nodes[3], nodes[0], edge)
    assert graph.direct(nodes[4], nodes[3], edge)
    assert graph.remove(nodes[2]) is not None
    return graph, nodes


@pytest.fixture
def write_graph(tmp_path: Path) -> Callable[[str], Path]:
    """Write a TOML graph description into tmp_path and return its path."""

    def _write(text: str, name: str = "graph.toml") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


CHAIN_TOML = """\
[[nodes]]
name = "a"

[[nodes]]
name = "b"

[[nodes]]
name = "c"

[[nodes]]
name = "d"

[[nodes]]
name = "lonely"

[[edges]]
from = "a"
to = "b"

[[edges]]
from = "b"
to = "c"
factor = 2.5

[[edges]]
from = "c"
to = "a"

[[edges]]
from = "c"
to = "d"
"""


@pytest.fixture
def chain_file(write_graph: Callable[[str], Path]) -> Path:
    """a -> b -> c -> {a, d}, plus an isolated node."""
    return write_graph(CHAIN_TOML)
