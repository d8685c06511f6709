"""
Undirected graph stored as an adjacency matrix.

Nodes are indexed ``0 .. node_count() - 1`` in insertion order. The matrix is
a square numpy object array whose cell ``[i, j]`` holds the
:class:`~dsugraph.graphs.core.GraphEdge` joining nodes ``i`` and ``j`` (the
same object is stored at ``[j, i]``) or ``None``. Adding a node grows the
matrix by one row and one column; removing a node deletes its row and column
and shifts every later index down by one.
"""

from __future__ import annotations

from typing import Dict, Hashable, List, Optional, Set

import numpy as np

from ..errors import InvalidIndexError, MissingArgumentError, NotPresentError
from .core import Graph, GraphEdge, GraphNode, NodeLike


class AdjacencyMatrixUndirectedGraph(Graph):
    """
    Undirected graph with an adjacency-matrix representation.

    Node labels must be non-None and unique; adding a node whose label is
    already present is a no-op. Directed edges are rejected.

    Complexity:
        - add_node / remove_node: O(V^2) (matrix reallocation)
        - get_node_index_of: O(1)
        - add_edge / get_edge / remove_edge: O(1)
        - neighbors / edges_of: O(V)
        - edges: O(V^2)
    """

    def __init__(self) -> None:
        super().__init__()
        self._nodes: Dict[Hashable, GraphNode] = {}
        self._order: List[GraphNode] = []
        self._positions: Dict[Hashable, int] = {}
        self._matrix: np.ndarray = np.empty((0, 0), dtype=object)

    def is_directed(self) -> bool:
        return False

    # Nodes

    def get_node(self, node: NodeLike) -> Optional[GraphNode]:
        if node is None:
            raise MissingArgumentError("Node must not be None")
        return self._nodes.get(self._label_of(node))

    def get_node_at(self, i: int) -> GraphNode:
        """Return the node stored at index ``i``."""
        self._check_index(i)
        return self._order[i]

    def get_node_index_of(self, node: NodeLike) -> int:
        """Return the matrix index of ``node``."""
        return self._positions[self._require_node(node).label]

    def nodes(self) -> Set[GraphNode]:
        return set(self._order)

    def nodes_in_order(self) -> List[GraphNode]:
        """Return the nodes sorted by matrix index."""
        return list(self._order)

    def node_count(self) -> int:
        return len(self._order)

    def add_node(self, node: NodeLike) -> bool:
        if node is None:
            raise MissingArgumentError("Node must not be None")
        if self.get_node(node) is not None:
            return False

        stored = node if isinstance(node, GraphNode) else GraphNode(node)
        n = len(self._order)
        grown = np.full((n + 1, n + 1), None, dtype=object)
        grown[:n, :n] = self._matrix
        self._matrix = grown
        self._nodes[stored.label] = stored
        self._positions[stored.label] = n
        self._order.append(stored)
        self._mod_count += 1
        return True

    def remove_node(self, node: NodeLike) -> None:
        self.remove_node_at(self.get_node_index_of(node))

    def remove_node_at(self, i: int) -> None:
        """Remove the node at index ``i``; later indices shift down by one."""
        self._check_index(i)
        removed = self._order.pop(i)
        del self._nodes[removed.label]
        del self._positions[removed.label]
        for k in range(i, len(self._order)):
            self._positions[self._order[k].label] = k
        self._matrix = np.delete(np.delete(self._matrix, i, axis=0), i, axis=1)
        self._mod_count += 1

    # Edges

    def edges(self) -> Set[GraphEdge]:
        upper = self._matrix[np.triu_indices(len(self._order))]
        return {edge for edge in upper if edge is not None}

    def edge_count(self) -> int:
        return len(self.edges())

    def get_edge(self, node1: NodeLike, node2: NodeLike) -> Optional[GraphEdge]:
        return self._matrix[self.get_node_index_of(node1), self.get_node_index_of(node2)]

    def get_edge_at(self, i: int, j: int) -> Optional[GraphEdge]:
        """Return the edge between the nodes at indices ``i`` and ``j``."""
        self._check_index(i)
        self._check_index(j)
        return self._matrix[i, j]

    def add_edge(self, edge: GraphEdge) -> bool:
        self._check_edge_orientation(edge)
        i = self.get_node_index_of(edge.node1)
        j = self.get_node_index_of(edge.node2)
        if self._matrix[i, j] is not None:
            return False

        stored = GraphEdge(self._order[i], self._order[j], False, edge.weight)
        self._matrix[i, j] = stored
        self._matrix[j, i] = stored
        self._mod_count += 1
        return True

    def add_edge_at(self, i: int, j: int) -> bool:
        """Add an unweighted edge between the nodes at indices ``i`` and ``j``."""
        return self.add_unweighted_edge(self.get_node_at(i), self.get_node_at(j))

    def add_weighted_edge_at(self, i: int, j: int, weight: float) -> bool:
        """Add a weighted edge between the nodes at indices ``i`` and ``j``."""
        return self.add_weighted_edge(self.get_node_at(i), self.get_node_at(j), weight)

    def remove_edge_at(self, i: int, j: int) -> None:
        """Remove the edge between the nodes at indices ``i`` and ``j``."""
        edge = self.get_edge_at(i, j)
        if edge is None:
            raise NotPresentError(f"No edge between indices {i} and {j}")
        self.remove_edge(edge)

    def remove_edge(self, edge: GraphEdge) -> None:
        self._check_edge_orientation(edge)
        i = self.get_node_index_of(edge.node1)
        j = self.get_node_index_of(edge.node2)
        if self._matrix[i, j] is None:
            raise NotPresentError(f"Edge {edge!r} not in graph")
        self._matrix[i, j] = None
        self._matrix[j, i] = None
        self._mod_count += 1

    def neighbors(self, node: NodeLike) -> Set[GraphNode]:
        stored = self._require_node(node)
        return {edge.other(stored) for edge in self.edges_of(stored)}

    def edges_of(self, node: NodeLike) -> Set[GraphEdge]:
        return self.edges_at(self.get_node_index_of(node))

    def neighbors_at(self, i: int) -> Set[GraphNode]:
        """Return the neighbours of the node at index ``i``."""
        return self.neighbors(self.get_node_at(i))

    def edges_at(self, i: int) -> Set[GraphEdge]:
        """Return the edges incident to the node at index ``i``."""
        self._check_index(i)
        return {edge for edge in self._matrix[i] if edge is not None}

    def predecessors(self, node: NodeLike) -> Set[GraphNode]:
        raise NotImplementedError("Predecessors are undefined in an undirected graph")

    def ingoing_edges(self, node: NodeLike) -> Set[GraphEdge]:
        raise NotImplementedError("Ingoing edges are undefined in an undirected graph")

    def clear(self) -> None:
        self._nodes.clear()
        self._order.clear()
        self._positions.clear()
        self._matrix = np.empty((0, 0), dtype=object)
        self._mod_count += 1

    # Matrix exports

    def adjacency_matrix(self) -> np.ndarray:
        """Return a boolean ``(V, V)`` matrix, True where an edge exists."""
        has_edge = np.vectorize(lambda cell: cell is not None, otypes=[bool])
        return has_edge(self._matrix)

    def weight_matrix(self, missing: float = np.inf) -> np.ndarray:
        """
        Return a float ``(V, V)`` matrix of edge weights.

        Args:
            missing: Value used where no edge exists (default ``inf``). The
                diagonal is 0 unless a self-loop is present. Unweighted edges
                count as weight 1.

        Returns:
            Symmetric float64 array indexed by node index.
        """
        n = len(self._order)
        weights = np.full((n, n), missing, dtype=np.float64)
        np.fill_diagonal(weights, 0.0)
        for (i, j), edge in np.ndenumerate(self._matrix):
            if edge is not None:
                weights[i, j] = edge.weight if edge.has_weight() else 1.0
        return weights

    def _check_index(self, i: int) -> None:
        if not 0 <= i < len(self._order):
            raise InvalidIndexError(
                f"Index {i} out of range for a graph with {len(self._order)} nodes"
            )
