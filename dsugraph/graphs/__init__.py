"""
Graph algorithms package for dsugraph.

This package provides:
- Graph data structures (GraphNode, GraphEdge, AdjacencyListGraph,
  AdjacencyMatrixUndirectedGraph)
- Connected components via disjoint sets
- Minimum spanning trees (Kruskal over disjoint sets, Prim with a
  linear-scan frontier)
- Helpers to read back predecessor trees

Node iteration follows insertion order and Kruskal breaks weight ties by
node labels, so results are reproducible.
"""

from .components import ConnectedComponentsComputer, connected_components
from .core import AdjacencyListGraph, Graph, GraphEdge, GraphNode, NodeColor
from .matrix import AdjacencyMatrixUndirectedGraph
from .mst import KruskalMSP, PrimMSP, kruskal_mst, prim_mst
from .utils import predecessor_map, reconstruct_path, total_weight, tree_edges_from_predecessors

__all__ = [
    "Graph",
    "GraphNode",
    "GraphEdge",
    "NodeColor",
    "AdjacencyListGraph",
    "AdjacencyMatrixUndirectedGraph",
    "ConnectedComponentsComputer",
    "connected_components",
    "KruskalMSP",
    "PrimMSP",
    "kruskal_mst",
    "prim_mst",
    "predecessor_map",
    "tree_edges_from_predecessors",
    "reconstruct_path",
    "total_weight",
]

# Example usage:
# from dsugraph.graphs import AdjacencyMatrixUndirectedGraph, PrimMSP, predecessor_map
#
# G = AdjacencyMatrixUndirectedGraph()
# for label in "ABC":
#     G.add_node(label)
# G.add_weighted_edge("A", "B", 1.0)
# G.add_weighted_edge("B", "C", 2.0)
# PrimMSP().compute_msp(G, "A")
# predecessor_map(G)  # {'A': None, 'B': 'A', 'C': 'B'}
