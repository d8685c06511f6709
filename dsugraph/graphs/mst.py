"""
Minimum spanning tree algorithms: Kruskal and Prim.

Kruskal uses a disjoint-set structure to detect cycles. Prim grows a tree
from a source node, extracting the closest frontier node with a linear scan.

Both require an undirected graph whose edges all carry a non-negative
weight; the check runs before any state is touched.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 23.1 (MST properties), 23.2 (Kruskal and Prim).
"""

from __future__ import annotations

import math
from typing import List, Optional, Set

from ..diagnostics.core import assert_forest_edges
from ..diagnostics.debug_mode import checks_enabled
from ..disjoint import DisjointSetsKind, make_disjoint_sets
from ..logging import get_logger
from .core import Graph, GraphEdge, GraphNode, NodeColor, NodeLike
from .utils import tree_edges_from_predecessors
from .validation import require_non_negative_weights, require_source

logger = get_logger(__name__)


def _edge_sort_key(edge: GraphEdge):
    # Weight first; labels make ties reproducible across runs.
    return (edge.weight, str(edge.node1.label), str(edge.node2.label))


class KruskalMSP:
    """
    Kruskal's minimum spanning tree algorithm.

    The computer owns a disjoint-set structure of the requested kind and
    clears it at the start of every run.

    Args:
        kind: Disjoint-set representation to use (default: forest).
        check_invariants: Verify every union and the acyclicity of the
            result. ``None`` follows the process-wide debug switch.
    """

    def __init__(
        self,
        kind: DisjointSetsKind = DisjointSetsKind.FOREST,
        check_invariants: Optional[bool] = None,
    ):
        self.kind = DisjointSetsKind(kind)
        self.check_invariants = check_invariants
        self.disjoint_sets = make_disjoint_sets(self.kind, check_invariants)

    def compute_msp(self, graph: Graph) -> Set[GraphEdge]:
        """
        Compute a minimum spanning forest of ``graph``.

        Edges are scanned in non-decreasing weight order (ties broken by node
        labels); an edge is kept iff its endpoints are still in different
        sets, after which the two sets are merged.

        Args:
            graph: Undirected graph with non-negative edge weights.

        Returns:
            The selected edges. This is a spanning tree iff the graph is
            connected; otherwise one tree per connected component.

        Raises:
            MissingArgumentError: If graph is None.
            InvalidArgumentError: If graph is directed, or an edge is
                unweighted or has negative weight.

        Complexity: O(E log E) for the sort; disjoint-set work is O(E α(V))
        with the forest representation.

        Example:
            >>> G = AdjacencyMatrixUndirectedGraph()
            >>> for label in "ABC":
            ...     G.add_node(label)
            >>> G.add_weighted_edge("A", "B", 1.0)
            True
            >>> G.add_weighted_edge("B", "C", 2.0)
            True
            >>> G.add_weighted_edge("A", "C", 3.0)
            True
            >>> sorted(e.weight for e in KruskalMSP().compute_msp(G))
            [1.0, 2.0]
        """
        require_non_negative_weights(graph, "Kruskal")

        dsu = self.disjoint_sets
        dsu.clear()
        ordered = sorted(graph.iter_edges(), key=_edge_sort_key)
        for node in graph.iter_nodes():
            dsu.make_set(node)

        mst: Set[GraphEdge] = set()
        for edge in ordered:
            if dsu.find_set(edge.node1) != dsu.find_set(edge.node2):
                mst.add(edge)
                dsu.union(edge.node1, edge.node2)

        if checks_enabled(self.check_invariants):
            assert_forest_edges(graph.nodes(), mst)

        logger.debug(
            "Kruskal selected %d of %d edges (total weight %s) using %s",
            len(mst),
            len(ordered),
            sum(edge.weight for edge in mst),
            self.kind.value,
        )
        return mst


class PrimMSP:
    """
    Prim's minimum spanning tree algorithm with a list-based frontier.

    The result is written into the graph's nodes: after
    :meth:`compute_msp`, ``node.previous`` is the node's parent in the tree
    rooted at the source and ``node.distance`` the weight of the edge to that
    parent. On a disconnected graph each further component becomes its own
    tree, rooted (``previous is None``, ``distance == inf``) at the first of
    its nodes to be extracted.

    Attributes:
        frontier: Nodes not yet settled. Empty once a run completes.
    """

    def __init__(self) -> None:
        self.frontier: List[GraphNode] = []

    def compute_msp(self, graph: Graph, source: NodeLike) -> None:
        """
        Grow a minimum spanning tree of ``graph`` rooted at ``source``.

        Every node starts in the frontier: the source with distance 0, the
        others with distance ``inf``. Each step removes the frontier node with
        the smallest distance (earliest in the frontier on ties), settles it,
        and lowers the distance of every frontier neighbour reachable through
        a lighter edge.

        Args:
            graph: Undirected graph with non-negative edge weights.
            source: Root of the tree (node or label).

        Raises:
            MissingArgumentError: If graph or source is None.
            NotPresentError: If source is not a node of graph.
            InvalidArgumentError: If graph is directed, or an edge is
                unweighted or has negative weight.

        Complexity: O(V^2 + E) with the linear-scan frontier.
        """
        require_non_negative_weights(graph, "Prim")
        root = require_source(graph, source, "Prim")

        root.color = NodeColor.GREY
        root.distance = 0.0
        root.previous = None
        self.frontier = [root]
        for node in graph.iter_nodes():
            if node != root:
                node.color = NodeColor.WHITE
                node.distance = math.inf
                node.previous = None
                self.frontier.append(node)

        while self.frontier:
            u = self._extract_min()
            u.color = NodeColor.BLACK
            for edge in graph.edges_of(u):
                v = edge.other(u)
                if v.color is NodeColor.BLACK:
                    continue
                if edge.weight < v.distance:
                    v.distance = edge.weight
                    v.previous = u
                    v.color = NodeColor.GREY

        logger.debug("Prim settled %d nodes from %r", graph.node_count(), root.label)

    def _extract_min(self) -> GraphNode:
        best = 0
        for i in range(1, len(self.frontier)):
            if self.frontier[i].distance < self.frontier[best].distance:
                best = i
        return self.frontier.pop(best)


def kruskal_mst(
    graph: Graph, kind: DisjointSetsKind = DisjointSetsKind.FOREST
) -> Set[GraphEdge]:
    """Shorthand for ``KruskalMSP(kind).compute_msp(graph)``."""
    return KruskalMSP(kind).compute_msp(graph)


def prim_mst(graph: Graph, source: NodeLike) -> List[GraphEdge]:
    """
    Run Prim from ``source`` and return the tree as a list of edges.

    Returns:
        Tree edges sorted by (weight, labels). A disconnected graph yields
        one tree per component.

    Example:
        >>> G = AdjacencyListGraph()
        >>> for label in "ABC":
        ...     G.add_node(label)
        >>> G.add_weighted_edge("A", "B", 1.0)
        True
        >>> G.add_weighted_edge("B", "C", 2.0)
        True
        >>> [e.weight for e in prim_mst(G, "A")]
        [1.0, 2.0]
    """
    PrimMSP().compute_msp(graph, source)
    return sorted(tree_edges_from_predecessors(graph), key=_edge_sort_key)
