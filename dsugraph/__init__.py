"""dsugraph - disjoint-set structures and the graph algorithms built on them."""

__version__ = "0.1.0"

# Disjoint sets
from .disjoint import (
    DisjointSets,
    DisjointSetsKind,
    ForestDisjointSets,
    LinkedListDisjointSets,
    make_disjoint_sets,
)

# Diagnostics
from .diagnostics import (
    assert_forest_edges,
    assert_partition,
    checks_enabled,
    debug_context,
    is_debug_enabled,
    is_partition,
    set_debug_enabled,
)

# Errors
from .errors import (
    AlreadyPresentError,
    ConcurrentModificationError,
    DsuGraphError,
    InvalidArgumentError,
    InvalidIndexError,
    InvariantViolationError,
    MissingArgumentError,
    NotPresentError,
)

# Graphs and algorithms
from .graphs import (
    AdjacencyListGraph,
    AdjacencyMatrixUndirectedGraph,
    ConnectedComponentsComputer,
    Graph,
    GraphEdge,
    GraphNode,
    KruskalMSP,
    NodeColor,
    PrimMSP,
    connected_components,
    kruskal_mst,
    predecessor_map,
    prim_mst,
    reconstruct_path,
    total_weight,
    tree_edges_from_predecessors,
)
from .logging import configure_logging, get_logger, set_log_level
from .multiset import Multiset

__all__ = [
    "__version__",
    # Disjoint sets
    "DisjointSets",
    "DisjointSetsKind",
    "ForestDisjointSets",
    "LinkedListDisjointSets",
    "make_disjoint_sets",
    # Graphs
    "Graph",
    "GraphNode",
    "GraphEdge",
    "NodeColor",
    "AdjacencyListGraph",
    "AdjacencyMatrixUndirectedGraph",
    # Algorithms
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
    # Collections
    "Multiset",
    # Diagnostics
    "is_partition",
    "assert_partition",
    "assert_forest_edges",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    "checks_enabled",
    # Logging
    "get_logger",
    "set_log_level",
    "configure_logging",
    # Errors
    "DsuGraphError",
    "MissingArgumentError",
    "AlreadyPresentError",
    "NotPresentError",
    "InvalidArgumentError",
    "InvalidIndexError",
    "ConcurrentModificationError",
    "InvariantViolationError",
]
