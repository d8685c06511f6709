"""Tests for graph utility functions."""

import pytest

from dsugraph import (
    GraphNode,
    InvariantViolationError,
    PrimMSP,
    predecessor_map,
    reconstruct_path,
    total_weight,
    tree_edges_from_predecessors,
)


class TestPredecessors:
    """Tests for reading back predecessor links."""

    def test_predecessor_map_fresh_graph(self, make_graph):
        """Test every node starts without a predecessor."""
        G = make_graph("ABC", [("A", "B", 1.0)])
        assert predecessor_map(G) == {"A": None, "B": None, "C": None}

    def test_predecessor_map_after_prim(self, square_cycle):
        PrimMSP().compute_msp(square_cycle, "B")
        assert predecessor_map(square_cycle) == {"A": "B", "B": None, "C": "B", "D": "C"}

    def test_tree_edges(self, square_cycle):
        """Test the predecessor links are turned into graph edges."""
        PrimMSP().compute_msp(square_cycle, "A")
        edges = tree_edges_from_predecessors(square_cycle)
        assert {e.weight for e in edges} == {1.0, 2.0, 3.0}
        assert all(e in square_cycle.edges() for e in edges)

    def test_tree_edges_missing_edge(self, make_graph):
        """Test a link with no matching edge is reported."""
        G = make_graph("AB", [])
        G.get_node("B").previous = G.get_node("A")
        with pytest.raises(InvariantViolationError):
            tree_edges_from_predecessors(G)


class TestReconstructPath:
    """Tests for reconstruct_path function."""

    def test_reconstruct_path_simple(self):
        parent = {"A": None, "B": "A", "C": "B"}
        assert reconstruct_path(parent, "C") == ["A", "B", "C"]

    def test_reconstruct_path_root(self):
        assert reconstruct_path({"A": None}, "A") == ["A"]

    def test_reconstruct_path_missing_target(self):
        assert reconstruct_path({"A": None}, "Z") is None

    def test_reconstruct_path_cycle(self):
        """Test looping parent links give None instead of hanging."""
        parent = {"A": "B", "B": "A"}
        assert reconstruct_path(parent, "A") is None

    def test_reconstruct_path_from_prim(self, square_cycle):
        PrimMSP().compute_msp(square_cycle, "A")
        assert reconstruct_path(predecessor_map(square_cycle), "D") == ["A", "B", "C", "D"]


def test_total_weight(make_graph):
    G = make_graph("ABC", [("A", "B", 1.5), ("B", "C", 2.5)])
    assert total_weight(G.edges()) == 4.0
    assert total_weight([]) == 0.0
