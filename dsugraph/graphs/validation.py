"""Argument checks shared by the graph algorithms."""

from __future__ import annotations

from ..errors import InvalidArgumentError, MissingArgumentError, NotPresentError
from .core import Graph, GraphNode, NodeLike


def require_undirected(graph: Graph, algorithm: str) -> None:
    """
    Raise unless ``graph`` is a non-None undirected graph.

    Raises:
        MissingArgumentError: If graph is None.
        InvalidArgumentError: If graph is directed.
    """
    if graph is None:
        raise MissingArgumentError(f"{algorithm}: graph must not be None")
    if graph.is_directed():
        raise InvalidArgumentError(f"{algorithm}: graph must be undirected")


def require_non_negative_weights(graph: Graph, algorithm: str) -> None:
    """
    Raise unless ``graph`` is undirected and every edge has a weight >= 0.

    Raises:
        MissingArgumentError: If graph is None.
        InvalidArgumentError: If graph is directed, or an edge is unweighted
            or has a negative or NaN weight.
    """
    require_undirected(graph, algorithm)
    for edge in graph.iter_edges():
        if not edge.has_weight():
            raise InvalidArgumentError(f"{algorithm}: edge {edge!r} has no weight")
        # Also rejects NaN.
        if not edge.weight >= 0:
            raise InvalidArgumentError(
                f"{algorithm}: edge {edge!r} has a negative or NaN weight"
            )


def require_source(graph: Graph, source: NodeLike, algorithm: str) -> GraphNode:
    """Return the stored node for ``source``, raising if it is missing."""
    if source is None:
        raise MissingArgumentError(f"{algorithm}: source node must not be None")
    stored = graph.get_node(source)
    if stored is None:
        label = source.label if isinstance(source, GraphNode) else source
        raise NotPresentError(f"{algorithm}: source node {label!r} not in graph")
    return stored
