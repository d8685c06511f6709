"""Pytest configuration and shared fixtures for dsugraph tests.

This module provides:
- A deterministic numpy RNG fixture for randomized operation sequences
- Disjoint-set fixtures parametrized over both representations
- Small reference graphs built on both graph implementations
"""

import os

import numpy as np
import pytest

from dsugraph import (
    AdjacencyListGraph,
    AdjacencyMatrixUndirectedGraph,
    DisjointSetsKind,
    make_disjoint_sets,
    set_debug_enabled,
)


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture(scope="function", autouse=True)
def debug_off():
    """Run every test with debug mode off unless the test enables it."""
    set_debug_enabled(False)
    yield
    set_debug_enabled(False)


@pytest.fixture(params=list(DisjointSetsKind), ids=lambda kind: kind.value)
def kind(request) -> DisjointSetsKind:
    """Each disjoint-set representation in turn."""
    return request.param


@pytest.fixture
def dsu(kind):
    """An empty disjoint-set structure of each kind."""
    return make_disjoint_sets(kind)


@pytest.fixture(params=["matrix", "list"])
def graph_factory(request):
    """Factory for empty undirected graphs of each implementation."""
    if request.param == "matrix":
        return AdjacencyMatrixUndirectedGraph
    return lambda: AdjacencyListGraph(directed=False)


def build_graph(factory, labels, weighted_edges):
    """Create a graph with the given node labels and (u, v, w) edges."""
    graph = factory()
    for label in labels:
        graph.add_node(label)
    for u, v, w in weighted_edges:
        graph.add_weighted_edge(u, v, w)
    return graph


@pytest.fixture
def square_cycle(graph_factory):
    """4-node cycle A-B:1, B-C:2, C-D:3, D-A:4."""
    return build_graph(
        graph_factory,
        "ABCD",
        [("A", "B", 1.0), ("B", "C", 2.0), ("C", "D", 3.0), ("D", "A", 4.0)],
    )


@pytest.fixture
def make_graph(graph_factory):
    """Build a graph of the current implementation from labels and edges."""
    return lambda labels, weighted_edges: build_graph(graph_factory, labels, weighted_edges)
