"""
Utility functions for graph algorithms.

Helpers for reading back the trees that Prim's algorithm leaves in the
``previous`` slots of the nodes, and for reconstructing root paths.
"""

from typing import Dict, Hashable, Iterable, List, Optional, Set

from ..errors import InvariantViolationError
from .core import Graph, GraphEdge


def predecessor_map(graph: Graph) -> Dict[Hashable, Optional[Hashable]]:
    """
    Return a label -> predecessor-label map from the nodes' ``previous`` slots.

    Example:
        >>> PrimMSP().compute_msp(G, "A")
        >>> predecessor_map(G)
        {'A': None, 'B': 'A', 'C': 'B'}
    """
    return {
        node.label: (node.previous.label if node.previous is not None else None)
        for node in graph.nodes_in_order()
    }


def tree_edges_from_predecessors(graph: Graph) -> Set[GraphEdge]:
    """
    Collect the graph edges joining every node to its ``previous`` node.

    Args:
        graph: Graph whose nodes were filled in by a tree-building algorithm.

    Returns:
        Set of edges of the tree (forest) encoded by the predecessor links.

    Raises:
        InvariantViolationError: If a predecessor link has no matching edge.
    """
    edges: Set[GraphEdge] = set()
    for node in graph.nodes_in_order():
        if node.previous is None:
            continue
        edge = graph.get_edge(node.previous, node)
        if edge is None:
            raise InvariantViolationError(
                f"Node {node.label!r} points to {node.previous.label!r} but no edge joins them"
            )
        edges.add(edge)
    return edges


def reconstruct_path(
    parent: Dict[Hashable, Optional[Hashable]], target: Hashable
) -> Optional[List[Hashable]]:
    """
    Reconstruct the path from the tree root to ``target`` using a parent map.

    Args:
        parent: Mapping node -> parent node (``None`` for a root), e.g. from
            :func:`predecessor_map`.
        target: Node to reconstruct the path to.

    Returns:
        List of nodes from the root to target (inclusive), or None if target
        is not in the map or the parent links loop.

    Example:
        >>> parent = {'A': None, 'B': 'A', 'C': 'B'}
        >>> reconstruct_path(parent, 'C')
        ['A', 'B', 'C']
        >>> reconstruct_path(parent, 'D')
        None
    """
    if target not in parent:
        return None

    path = []
    visited = set()
    current = target
    while current is not None:
        if current in visited:
            return None
        visited.add(current)
        path.append(current)
        current = parent.get(current)

    path.reverse()
    return path


def total_weight(edges: Iterable[GraphEdge]) -> float:
    """Sum of the weights of ``edges`` (unweighted edges count as 0)."""
    return float(sum(edge.weight for edge in edges if edge.has_weight()))
