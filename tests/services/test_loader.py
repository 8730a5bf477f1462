"""Tests for the TOML graph description loader."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from mushgraph.config.models import GraphConfig
from mushgraph.domain.edge import Edge
from mushgraph.domain.errors import GraphFileError
from mushgraph.domain.node import Position
from mushgraph.services.loader import build_graph, load_graph

WriteGraph = Callable[[str], Path]


class TestLoadGraph:
    def test_chain(self, chain_file: Path) -> None:
        loaded = load_graph(chain_file)
        graph = loaded.graph
        assert len(graph) == 5
        assert graph.edge_count == 4
        a, b, c = (loaded.ids[name] for name in "abc")
        assert graph.get_node(a).edges_to == {b}  # type: ignore[union-attr]
        assert graph.get_edge((b, c)) == Edge(factor=2.5)
        assert loaded.label(a) == "a"

    def test_node_payload(self, write_graph: WriteGraph) -> None:
        path = write_graph(
            '[[nodes]]\nname = "a"\nx = 1.5\ny = -2.0\nkind = "src"\naccepts = ["dst"]\n'
        )
        loaded = load_graph(path)
        node = loaded.graph.get_node(loaded.ids["a"])
        assert node is not None
        assert node.name == "a"
        assert node.position == Position(1.5, -2.0)
        assert node.kind == "src"
        assert node.accepts == frozenset({"dst"})

    def test_config_flags_apply(self, chain_file: Path) -> None:
        loaded = load_graph(chain_file, GraphConfig(tracking=True, id_strategy="sequential"))
        assert loaded.graph.tracking is True
        assert loaded.ids["a"] == 0

    def test_file_section_overrides_config(self, write_graph: WriteGraph) -> None:
        path = write_graph('[graph]\ndirected = false\n\n[[nodes]]\nname = "a"\n')
        loaded = load_graph(path, GraphConfig(directed=True, tracking=True))
        assert loaded.graph.directed is False
        assert loaded.graph.tracking is True

    def test_empty_file(self, write_graph: WriteGraph) -> None:
        loaded = load_graph(write_graph(""))
        assert len(loaded.graph) == 0


class TestLoadErrors:
    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(GraphFileError, match="Cannot read"):
            load_graph(tmp_path / "nope.toml")

    def test_invalid_toml(self, write_graph: WriteGraph) -> None:
        with pytest.raises(GraphFileError, match="Invalid TOML"):
            load_graph(write_graph("[[nodes]\n"))

    def test_unknown_field(self) -> None:
        with pytest.raises(GraphFileError, match="Invalid graph description"):
            build_graph({"nodes": [{"name": "a", "colour": "red"}]})

    def test_duplicate_name(self) -> None:
        with pytest.raises(GraphFileError, match="Duplicate node name 'a'"):
            build_graph({"nodes": [{"name": "a"}, {"name": "a"}]})

    def test_unknown_edge_endpoint(self) -> None:
        data = {"nodes": [{"name": "a"}], "edges": [{"from": "a", "to": "ghost"}]}
        with pytest.raises(GraphFileError, match="unknown node 'ghost'"):
            build_graph(data)

    def test_guard_rejection(self) -> None:
        data = {
            "nodes": [
                {"name": "a", "kind": "src", "accepts": ["dst"]},
                {"name": "b", "kind": "src"},
            ],
            "edges": [{"from": "a", "to": "b"}],
        }
        with pytest.raises(GraphFileError, match="guard_rejected"):
            build_graph(data)
