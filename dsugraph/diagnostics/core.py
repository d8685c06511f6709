"""Invariant checks for disjoint sets and spanning forests."""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING, Dict, Hashable, Iterable, List, Set

from ..errors import InvariantViolationError

if TYPE_CHECKING:
    from ..disjoint.base import DisjointSets
    from ..graphs.core import GraphEdge


def _partition_problems(dsu: "DisjointSets") -> List[str]:
    problems: List[str] = []
    registered = dsu.elements()
    covered: Set[Hashable] = set()

    for rep in dsu.current_representatives():
        if dsu.find_set(rep) != rep:
            problems.append(f"representative {rep!r} is not its own representative")
        members = dsu.current_elements_of_set_containing(rep)
        overlap = covered & members
        if overlap:
            problems.append(f"elements {sorted(map(repr, overlap))} appear in more than one set")
        covered |= members
        if dsu.cardinality_of_set_containing(rep) != len(members):
            problems.append(
                f"set of {rep!r} reports cardinality "
                f"{dsu.cardinality_of_set_containing(rep)} but holds {len(members)} elements"
            )

    missing = registered - covered
    if missing:
        problems.append(f"elements {sorted(map(repr, missing))} belong to no set")
    extra = covered - registered
    if extra:
        problems.append(f"sets hold unregistered elements {sorted(map(repr, extra))}")
    return problems


def is_partition(dsu: "DisjointSets") -> bool:
    """
    Check that the current sets partition exactly the registered elements.

    Parameters
    ----------
    dsu:
        Any :class:`~dsugraph.disjoint.DisjointSets` implementation.

    Returns
    -------
    bool
        True if every registered element lies in exactly one reported set and
        each representative maps to itself.
    """
    return not _partition_problems(dsu)


def assert_partition(dsu: "DisjointSets") -> None:
    """
    Raise if :func:`is_partition` would return False.

    Raises
    ------
    InvariantViolationError
        Listing every problem found.
    """
    problems = _partition_problems(dsu)
    if problems:
        raise InvariantViolationError(
            f"{type(dsu).__name__} is not a partition: " + "; ".join(problems)
        )


def assert_forest_edges(nodes: Iterable[Hashable], edges: Iterable["GraphEdge"]) -> None:
    """
    Assert that ``edges`` form an acyclic subgraph over ``nodes``.

    A graph is a forest iff ``|E| == |V| - components``; components are
    counted with a breadth-first search over the edge set.

    Raises
    ------
    InvariantViolationError
        If an edge touches an unknown node or the edges contain a cycle.
    """
    node_set = set(nodes)
    edge_list = list(edges)
    adj: Dict[Hashable, List[Hashable]] = {node: [] for node in node_set}

    for edge in edge_list:
        if edge.node1 not in node_set or edge.node2 not in node_set:
            raise InvariantViolationError(f"Edge {edge!r} touches a node outside the graph")
        adj[edge.node1].append(edge.node2)
        adj[edge.node2].append(edge.node1)

    seen: Set[Hashable] = set()
    components = 0
    for start in node_set:
        if start in seen:
            continue
        components += 1
        seen.add(start)
        queue = deque([start])
        while queue:
            current = queue.popleft()
            for neighbor in adj[current]:
                if neighbor not in seen:
                    seen.add(neighbor)
                    queue.append(neighbor)

    if len(edge_list) != len(node_set) - components:
        raise InvariantViolationError(
            f"{len(edge_list)} edges over {len(node_set)} nodes in {components} "
            f"components cannot be a forest"
        )

