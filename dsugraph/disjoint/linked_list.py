"""
Disjoint sets as linked lists with union by size.

Each set is a singly linked chain whose head is the representative. Every
node stores the index of its head, so ``find_set`` is a single lookup, and
the head additionally stores the set's cardinality and the index of the
chain's tail.

``union`` relinks the members of the smaller set (weighted-union heuristic),
so a sequence of m operations on n elements costs O(m + n log n) in total.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 21.2 (Linked-list representation of disjoint sets).
"""

from __future__ import annotations

from typing import Dict, List, Optional, Set

from ..logging import get_logger
from .base import DisjointSets, E

logger = get_logger(__name__)

_NIL = -1


class LinkedListDisjointSets(DisjointSets[E]):
    """
    Linked-list disjoint sets with union by size.

    Storage is an index arena: ``_next[i]`` is the successor of node ``i`` in
    its chain (``-1`` at the tail), ``_repr[i]`` the index of its chain head.
    ``_count`` and ``_tail`` are keyed by head index, so their key set is
    exactly the set of current representatives.

    Tie-break:
        When both sets have the same size, the set containing the *first*
        argument of :meth:`union` is absorbed, so the representative of the
        second argument's set survives.

    Complexity:
        - make_set / find_set / cardinality_of_set_containing: O(1)
        - union: O(size of the absorbed set)
        - current_elements_of_set_containing: O(size of the set)
    """

    def __init__(self, check_invariants: Optional[bool] = None) -> None:
        super().__init__(check_invariants)
        self._index: Dict[E, int] = {}
        self._items: List[E] = []
        self._next: List[int] = []
        self._repr: List[int] = []
        self._count: Dict[int, int] = {}
        self._tail: Dict[int, int] = {}

    def is_present(self, e: E) -> bool:
        self._require(e, "is_present")
        return e in self._index

    def make_set(self, e: E) -> None:
        self._require_absent(e, "make_set")
        i = len(self._items)
        self._index[e] = i
        self._items.append(e)
        self._next.append(_NIL)
        self._repr.append(i)
        self._count[i] = 1
        self._tail[i] = i

    def find_set(self, e: E) -> E:
        self._require_present(e, "find_set")
        return self._items[self._repr[self._index[e]]]

    def union(self, e1: E, e2: E) -> None:
        self._require_present(e1, "union")
        self._require_present(e2, "union")
        head1 = self._repr[self._index[e1]]
        head2 = self._repr[self._index[e2]]
        if head1 == head2:
            return

        if self._count[head1] <= self._count[head2]:
            self._absorb(head1, into=head2)
        else:
            self._absorb(head2, into=head1)
        self._after_union()

    def _absorb(self, absorbed: int, into: int) -> None:
        """Splice chain ``absorbed`` right after the head of chain ``into``."""
        node = absorbed
        while node != _NIL:
            self._repr[node] = into
            node = self._next[node]

        absorbed_tail = self._tail.pop(absorbed)
        self._next[absorbed_tail] = self._next[into]
        if self._next[into] == _NIL:
            self._tail[into] = absorbed_tail
        self._next[into] = absorbed

        self._count[into] += self._count.pop(absorbed)
        logger.debug(
            "absorbed set of %r into set of %r (size %d)",
            self._items[absorbed],
            self._items[into],
            self._count[into],
        )

    def _chain(self, head: int) -> List[int]:
        nodes = []
        node = head
        while node != _NIL:
            nodes.append(node)
            node = self._next[node]
        return nodes

    def current_representatives(self) -> Set[E]:
        return {self._items[head] for head in self._count}

    def current_elements_of_set_containing(self, e: E) -> Set[E]:
        self._require_present(e, "current_elements_of_set_containing")
        return {self._items[i] for i in self._chain(self._repr[self._index[e]])}

    def cardinality_of_set_containing(self, e: E) -> int:
        self._require_present(e, "cardinality_of_set_containing")
        return self._count[self._repr[self._index[e]]]

    def elements(self) -> Set[E]:
        return set(self._items)

    @property
    def num_sets(self) -> int:
        return len(self._count)

    def clear(self) -> None:
        self._index.clear()
        self._items.clear()
        self._next.clear()
        self._repr.clear()
        self._count.clear()
        self._tail.clear()
