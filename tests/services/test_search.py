"""Tests for depth-first and breadth-first path search."""

from __future__ import annotations

import networkx as nx
import pytest

from mushgraph.domain.edge import Edge
from mushgraph.domain.errors import SearchNotImplementedError
from mushgraph.domain.ids import NodeId
from mushgraph.infrastructure.graph import Graph
from mushgraph.services.export import to_networkx
from mushgraph.services.search import (
    Breadth,
    Depth,
    Dijkstra,
    breadth_first,
    depth_first,
    get_hop_path,
    get_next,
    get_path,
    get_path_shortest,
    is_complete,
    is_connected,
)

Scenario = tuple[Graph[Edge], list[NodeId]]


def _connect_all(graph: Graph[Edge], pairs: list[tuple[NodeId, NodeId]]) -> None:
    for a, b in pairs:
        assert graph.direct(a, b)


class TestScenarioC:
    def test_depth_unreachable(self, scenario_a: Scenario) -> None:
        graph, n = scenario_a
        assert get_path(graph, Depth(n[0], n[4])) is None

    def test_depth_reachable(self, scenario_a: Scenario) -> None:
        graph, n = scenario_a
        assert get_path(graph, Depth(n[4], n[0])) == [n[3], n[0]]

    def test_breadth_reachable(self, scenario_a: Scenario) -> None:
        graph, n = scenario_a
        assert get_path(graph, Breadth(n[4], n[0])) == [n[4], n[3], n[0]]

    def test_breadth_unreachable(self, scenario_a: Scenario) -> None:
        graph, n = scenario_a
        assert get_path(graph, Breadth(n[0], n[4])) is None


class TestDepthFirst:
    def test_no_target_returns_none(self, scenario_a: Scenario) -> None:
        graph, n = scenario_a
        assert depth_first(graph, n[4]) is None

    def test_path_excludes_start(self, graph: Graph[Edge]) -> None:
        a, b, c = (graph.new_node() for _ in range(3))
        _connect_all(graph, [(a, b), (b, c)])
        assert depth_first(graph, a, c) == [b, c]

    def test_start_as_target_is_not_found(self, graph: Graph[Edge]) -> None:
        a, b = graph.new_node(), graph.new_node()
        _connect_all(graph, [(a, b), (b, a)])
        assert depth_first(graph, a, a) is None

    def test_stops_at_target(self, graph: Graph[Edge]) -> None:
        a, b, c = (graph.new_node() for _ in range(3))
        _connect_all(graph, [(a, b), (b, c)])
        path = depth_first(graph, a, b)
        assert path == [b]

    def test_backtracks_to_sibling_branch(self, graph: Graph[Edge]) -> None:
        root, left, deep, right = (graph.new_node() for _ in range(4))
        _connect_all(graph, [(root, left), (left, deep), (root, right)])
        path = depth_first(graph, root, right)
        assert path is not None
        assert path[-1] == right
        assert set(path) <= {left, deep, right}

    def test_missing_start(self, graph: Graph[Edge]) -> None:
        a = graph.new_node()
        assert depth_first(graph, 404, a) is None

    def test_skips_removed_neighbor(self, graph: Graph[Edge]) -> None:
        a, gone, b = (graph.new_node() for _ in range(3))
        _connect_all(graph, [(a, gone), (gone, b), (a, b)])
        graph.remove(gone)
        assert depth_first(graph, a, b) == [b]
        assert depth_first(graph, a, gone) is None

    def test_terminates_on_cycle(self, graph: Graph[Edge]) -> None:
        a, b, c, d = (graph.new_node() for _ in range(4))
        _connect_all(graph, [(a, b), (b, c), (c, a)])
        assert depth_first(graph, a, d) is None


class TestBreadthFirst:
    def test_returns_full_visitation_order(self, graph: Graph[Edge]) -> None:
        a, b, c, d = (graph.new_node() for _ in range(4))
        _connect_all(graph, [(a, b), (b, c), (c, d)])
        # Target found at depth 1, but the queue is still drained.
        assert breadth_first(graph, a, b) == [a, b, c, d]

    def test_short_circuit_skips_rest_of_neighbor_scan(self, graph: Graph[Edge]) -> None:
        a = graph.new_node()
        leaves = [graph.new_node() for _ in range(5)]
        _connect_all(graph, [(a, leaf) for leaf in leaves])
        target = next(iter(graph.get_node(a).edges_to))  # type: ignore[union-attr]
        assert breadth_first(graph, a, target) == [a, target]

    def test_no_target_returns_none(self, scenario_a: Scenario) -> None:
        graph, n = scenario_a
        assert breadth_first(graph, n[4]) is None

    def test_start_as_target(self, graph: Graph[Edge]) -> None:
        a = graph.new_node()
        assert breadth_first(graph, a, a) == [a]

    def test_missing_start(self, graph: Graph[Edge]) -> None:
        assert breadth_first(graph, 404, 404) is None

    def test_skips_removed_neighbor(self, tracking_graph: Graph[Edge]) -> None:
        g = tracking_graph
        a, gone, b = (g.new_node() for _ in range(3))
        _connect_all(g, [(a, gone), (a, b)])
        g.remove(gone)
        assert breadth_first(g, a, b) == [a, b]


class TestHopPath:
    def test_shortest_by_edge_count(self, graph: Graph[Edge]) -> None:
        a, b, c, d = (graph.new_node() for _ in range(4))
        _connect_all(graph, [(a, b), (b, c), (c, d), (a, d)])
        assert get_hop_path(graph, a, d) == [a, d]

    def test_start_equals_target(self, graph: Graph[Edge]) -> None:
        a = graph.new_node()
        assert get_hop_path(graph, a, a) == [a]

    def test_unreachable(self, scenario_a: Scenario) -> None:
        graph, n = scenario_a
        assert get_hop_path(graph, n[0], n[4]) is None
        assert get_hop_path(graph, n[4], n[1]) == [n[4], n[3], n[0], n[1]]


class TestReachabilityAgreement:
    """Depth and breadth agree on reachability with each other and NetworkX."""

    def test_against_networkx(self, graph: Graph[Edge]) -> None:
        nodes = [graph.new_node() for _ in range(8)]
        pairs = [(0, 1), (1, 2), (2, 0), (2, 3), (4, 5), (5, 6), (6, 4), (3, 7), (7, 3)]
        _connect_all(graph, [(nodes[a], nodes[b]) for a, b in pairs])
        oracle = to_networkx(graph)

        for src in nodes:
            reachable = nx.descendants(oracle, src)
            for dst in nodes:
                if dst == src:
                    continue
                by_depth = depth_first(graph, src, dst) is not None
                by_breadth = breadth_first(graph, src, dst) is not None
                assert by_depth == by_breadth == (dst in reachable)


class TestGetNext:
    def test_returns_neighbor(self, scenario_a: Scenario) -> None:
        graph, n = scenario_a
        assert get_next(graph, n[4]) == n[3]

    def test_no_edges(self, scenario_a: Scenario) -> None:
        graph, n = scenario_a
        assert get_next(graph, n[1]) is None

    def test_missing_node(self, graph: Graph[Edge]) -> None:
        assert get_next(graph, 404) is None


class TestNotImplemented:
    def test_dijkstra_is_distinct_from_not_found(self, scenario_a: Scenario) -> None:
        graph, n = scenario_a
        with pytest.raises(SearchNotImplementedError):
            get_path(graph, Dijkstra(n[4], n[0]))

    def test_graph_properties(self, graph: Graph[Edge]) -> None:
        with pytest.raises(SearchNotImplementedError):
            is_connected(graph)
        with pytest.raises(SearchNotImplementedError):
            is_complete(graph)
        with pytest.raises(NotImplementedError):
            get_path_shortest(graph, 0, 1)

    def test_unknown_descriptor(self, graph: Graph[Edge]) -> None:
        with pytest.raises(TypeError):
            get_path(graph, "depth")  # type: ignore[arg-type]
