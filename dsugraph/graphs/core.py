"""
Core graph data structures.

Provides the node and edge types, the abstract :class:`Graph` contract the
algorithms rely on, and :class:`AdjacencyListGraph`, an adjacency-list
implementation that may be directed or undirected.

Nodes are identified by their label. Each stored node also carries the
per-run slots used by Prim's algorithm (color, distance, previous); those
slots are not part of the node's identity.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Hashable, Iterator, List, Optional, Set, Union

from ..errors import (
    ConcurrentModificationError,
    InvalidArgumentError,
    MissingArgumentError,
    NotPresentError,
)


class NodeColor(Enum):
    """Visitation mark of a node during a graph algorithm run."""

    WHITE = "unseen"
    GREY = "frontier"
    BLACK = "settled"


@dataclass(eq=False)
class GraphNode:
    """
    Graph node identified by its label.

    Attributes:
        label: Hashable, non-None label. Two nodes are equal iff their labels
            are equal.
        color: Visitation mark, reset by the algorithm that uses it.
        distance: Current best distance (``inf`` when unknown).
        previous: Predecessor in the tree built by the last algorithm run.
    """

    label: Hashable
    color: NodeColor = NodeColor.WHITE
    distance: float = math.inf
    previous: Optional["GraphNode"] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if self.label is None:
            raise MissingArgumentError("GraphNode label must not be None")

    def reset(self) -> None:
        """Restore the default algorithm state."""
        self.color = NodeColor.WHITE
        self.distance = math.inf
        self.previous = None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GraphNode):
            return NotImplemented
        return self.label == other.label

    def __hash__(self) -> int:
        return hash(self.label)


@dataclass(frozen=True, eq=False)
class GraphEdge:
    """
    Edge between two nodes, optionally weighted.

    Undirected edges are equal regardless of endpoint order; directed edges
    compare their ordered endpoints. The weight does not take part in
    equality, so a graph holds at most one edge per node pair.

    Attributes:
        node1: First endpoint (source, if directed).
        node2: Second endpoint (target, if directed).
        directed: Whether the edge is directed.
        weight: Edge weight, or ``None`` for an unweighted edge.
    """

    node1: GraphNode
    node2: GraphNode
    directed: bool = False
    weight: Optional[float] = None

    def __post_init__(self) -> None:
        if self.node1 is None or self.node2 is None:
            raise MissingArgumentError("GraphEdge endpoints must not be None")

    def has_weight(self) -> bool:
        return self.weight is not None

    def is_directed(self) -> bool:
        return self.directed

    def other(self, node: GraphNode) -> GraphNode:
        """Return the endpoint opposite to ``node``."""
        if node == self.node1:
            return self.node2
        if node == self.node2:
            return self.node1
        raise NotPresentError(f"Node {node.label!r} is not an endpoint of {self!r}")

    def _key(self):
        if self.directed:
            return (True, self.node1, self.node2)
        return (False, frozenset((self.node1, self.node2)))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GraphEdge):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        arrow = "->" if self.directed else "--"
        suffix = f", {self.weight}" if self.has_weight() else ""
        return f"GraphEdge({self.node1.label!r}{arrow}{self.node2.label!r}{suffix})"


NodeLike = Union[GraphNode, Hashable]


class Graph(ABC):
    """
    Abstract graph contract used by the algorithms in this package.

    Read side: :meth:`is_directed`, :meth:`nodes`, :meth:`edges`,
    :meth:`neighbors`, :meth:`get_edge`, :meth:`get_node`. Node arguments may
    be a :class:`GraphNode` or a bare label; queries always hand back the
    node instances stored in the graph.

    ``nodes()`` and ``edges()`` return snapshots. ``iter_nodes()`` and
    ``iter_edges()`` are live views that raise
    :class:`~dsugraph.errors.ConcurrentModificationError` if the graph is
    structurally modified while they are being consumed.
    """

    def __init__(self) -> None:
        self._mod_count = 0

    @abstractmethod
    def is_directed(self) -> bool:
        """Return True if the graph is directed."""

    @abstractmethod
    def get_node(self, node: NodeLike) -> Optional[GraphNode]:
        """Return the stored node with the same label, or None."""

    @abstractmethod
    def nodes(self) -> Set[GraphNode]:
        """Return the set of nodes."""

    @abstractmethod
    def edges(self) -> Set[GraphEdge]:
        """Return the set of edges."""

    @abstractmethod
    def neighbors(self, node: NodeLike) -> Set[GraphNode]:
        """Return the nodes adjacent to ``node`` (successors, if directed)."""

    @abstractmethod
    def edges_of(self, node: NodeLike) -> Set[GraphEdge]:
        """Return the edges incident to ``node`` (outgoing, if directed)."""

    @abstractmethod
    def get_edge(self, node1: NodeLike, node2: NodeLike) -> Optional[GraphEdge]:
        """Return the edge joining the two nodes, or None."""

    @abstractmethod
    def add_node(self, node: NodeLike) -> bool:
        """Add a node; return False if a node with that label already exists."""

    @abstractmethod
    def add_edge(self, edge: GraphEdge) -> bool:
        """Add an edge between existing nodes; return False if already present."""

    @abstractmethod
    def remove_node(self, node: NodeLike) -> None:
        """Remove a node and every edge incident to it."""

    @abstractmethod
    def remove_edge(self, edge: GraphEdge) -> None:
        """Remove an existing edge."""

    @abstractmethod
    def clear(self) -> None:
        """Remove every node and edge."""

    def node_count(self) -> int:
        return len(self.nodes())

    def edge_count(self) -> int:
        return len(self.edges())

    def add_weighted_edge(self, node1: NodeLike, node2: NodeLike, weight: float) -> bool:
        """Add a weighted edge between two existing nodes."""
        n1 = self._require_node(node1)
        n2 = self._require_node(node2)
        return self.add_edge(GraphEdge(n1, n2, self.is_directed(), float(weight)))

    def add_unweighted_edge(self, node1: NodeLike, node2: NodeLike) -> bool:
        """Add an unweighted edge between two existing nodes."""
        n1 = self._require_node(node1)
        n2 = self._require_node(node2)
        return self.add_edge(GraphEdge(n1, n2, self.is_directed()))

    def reset_node_state(self) -> None:
        """Reset color, distance and previous on every node."""
        for node in self.nodes():
            node.reset()

    def nodes_in_order(self) -> List[GraphNode]:
        """Return the nodes in a deterministic order; sorted by label string unless overridden."""
        return sorted(self.nodes(), key=lambda node: str(node.label))

    def iter_nodes(self) -> Iterator[GraphNode]:
        """Iterate over :meth:`nodes_in_order`, failing fast on concurrent modification."""
        return self._fail_fast(self._mod_count, self.nodes_in_order())

    def iter_edges(self) -> Iterator[GraphEdge]:
        """Iterate over the edges, failing fast on concurrent modification."""
        return self._fail_fast(self._mod_count, list(self.edges()))

    def _fail_fast(self, expected: int, items: List) -> Iterator:
        for item in items:
            self._check_unmodified(expected)
            yield item

    def __contains__(self, node: object) -> bool:
        return node is not None and self.get_node(node) is not None

    def __len__(self) -> int:
        return self.node_count()

    # Helpers for subclasses

    def _check_unmodified(self, expected: int) -> None:
        if self._mod_count != expected:
            raise ConcurrentModificationError(
                f"{type(self).__name__} was modified during iteration"
            )

    def _require_node(self, node: NodeLike) -> GraphNode:
        if node is None:
            raise MissingArgumentError("Node must not be None")
        stored = self.get_node(node)
        if stored is None:
            label = node.label if isinstance(node, GraphNode) else node
            raise NotPresentError(f"Node {label!r} not in graph")
        return stored

    def _check_edge_orientation(self, edge: GraphEdge) -> None:
        if edge is None:
            raise MissingArgumentError("Edge must not be None")
        if edge.is_directed() != self.is_directed():
            kind = "directed" if self.is_directed() else "undirected"
            raise InvalidArgumentError(f"Cannot store {edge!r} in a {kind} graph")

    @staticmethod
    def _label_of(node: NodeLike) -> Hashable:
        return node.label if isinstance(node, GraphNode) else node


class AdjacencyListGraph(Graph):
    """
    Graph with adjacency-list representation.

    Supports directed and undirected graphs. For undirected graphs every edge
    is reachable from both endpoints' adjacency entries.

    Attributes:
        directed: If True, graph is directed; otherwise undirected.

    Complexity:
        - add_node: O(1) amortized
        - add_edge / get_edge: O(1) average
        - neighbors: O(deg(v))
        - remove_node: O(V) for directed graphs, O(deg(v)) otherwise
    """

    def __init__(self, directed: bool = False):
        """
        Initialize an empty graph.

        Args:
            directed: If True, graph is directed; otherwise undirected.
        """
        super().__init__()
        self.directed = directed
        self._nodes: Dict[Hashable, GraphNode] = {}
        self._adj: Dict[GraphNode, Dict[GraphNode, GraphEdge]] = {}

    def is_directed(self) -> bool:
        return self.directed

    def get_node(self, node: NodeLike) -> Optional[GraphNode]:
        if node is None:
            raise MissingArgumentError("Node must not be None")
        return self._nodes.get(self._label_of(node))

    def nodes(self) -> Set[GraphNode]:
        return set(self._nodes.values())

    def nodes_in_order(self) -> List[GraphNode]:
        """Return the nodes in insertion order."""
        return list(self._nodes.values())

    def edges(self) -> Set[GraphEdge]:
        return {edge for row in self._adj.values() for edge in row.values()}

    def neighbors(self, node: NodeLike) -> Set[GraphNode]:
        return set(self._adj[self._require_node(node)])

    def edges_of(self, node: NodeLike) -> Set[GraphEdge]:
        return set(self._adj[self._require_node(node)].values())

    def predecessors(self, node: NodeLike) -> Set[GraphNode]:
        """Return nodes with an edge into ``node`` (neighbors, if undirected)."""
        target = self._require_node(node)
        return {source for source, row in self._adj.items() if target in row}

    def get_edge(self, node1: NodeLike, node2: NodeLike) -> Optional[GraphEdge]:
        n1 = self._require_node(node1)
        n2 = self._require_node(node2)
        return self._adj[n1].get(n2)

    def add_node(self, node: NodeLike) -> bool:
        if node is None:
            raise MissingArgumentError("Node must not be None")
        if self.get_node(node) is not None:
            return False
        stored = node if isinstance(node, GraphNode) else GraphNode(node)
        self._nodes[stored.label] = stored
        self._adj[stored] = {}
        self._mod_count += 1
        return True

    def add_edge(self, edge: GraphEdge) -> bool:
        self._check_edge_orientation(edge)
        n1 = self._require_node(edge.node1)
        n2 = self._require_node(edge.node2)
        if n2 in self._adj[n1]:
            return False

        stored = GraphEdge(n1, n2, edge.directed, edge.weight)
        self._adj[n1][n2] = stored
        if not self.directed:
            self._adj[n2][n1] = stored
        self._mod_count += 1
        return True

    def remove_node(self, node: NodeLike) -> None:
        stored = self._require_node(node)
        for row in self._adj.values():
            row.pop(stored, None)
        del self._adj[stored]
        del self._nodes[stored.label]
        self._mod_count += 1

    def remove_edge(self, edge: GraphEdge) -> None:
        self._check_edge_orientation(edge)
        n1 = self._require_node(edge.node1)
        n2 = self._require_node(edge.node2)
        if n2 not in self._adj[n1]:
            raise NotPresentError(f"Edge {edge!r} not in graph")
        del self._adj[n1][n2]
        if not self.directed and n1 != n2:
            del self._adj[n2][n1]
        self._mod_count += 1

    def clear(self) -> None:
        self._nodes.clear()
        self._adj.clear()
        self._mod_count += 1

    def node_count(self) -> int:
        return len(self._nodes)
