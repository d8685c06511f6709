"""
Disjoint-set (union-find) data structures.

Two interchangeable representations implement the :class:`DisjointSets`
contract:

- :class:`ForestDisjointSets`: rooted trees, union by rank, path compression
- :class:`LinkedListDisjointSets`: linked lists, union by size

Algorithms pick a representation through :class:`DisjointSetsKind`.
"""

from enum import Enum
from typing import Optional

from .base import DisjointSets
from .forest import ForestDisjointSets
from .linked_list import LinkedListDisjointSets


class DisjointSetsKind(Enum):
    """Available disjoint-set representations."""

    FOREST = "forest"
    LINKED_LIST = "linked_list"


def make_disjoint_sets(
    kind: "DisjointSetsKind | str" = DisjointSetsKind.FOREST,
    check_invariants: Optional[bool] = None,
) -> DisjointSets:
    """
    Create an empty disjoint-set structure of the requested kind.

    Args:
        kind: A :class:`DisjointSetsKind` or its value (``"forest"`` or
            ``"linked_list"``).
        check_invariants: Passed to the structure; ``None`` follows the
            process-wide debug switch.

    Returns:
        A new, empty :class:`DisjointSets`.

    Raises:
        ValueError: If ``kind`` names no known representation.

    Example:
        >>> dsu = make_disjoint_sets("linked_list")
        >>> type(dsu).__name__
        'LinkedListDisjointSets'
    """
    kind = DisjointSetsKind(kind)
    if kind is DisjointSetsKind.FOREST:
        return ForestDisjointSets(check_invariants)
    return LinkedListDisjointSets(check_invariants)


__all__ = [
    "DisjointSets",
    "DisjointSetsKind",
    "ForestDisjointSets",
    "LinkedListDisjointSets",
    "make_disjoint_sets",
]
