"""
Disjoint sets as a forest of rooted trees.

Each set is a tree whose root is the representative. ``find_set`` applies
path compression and ``union`` applies union by rank, giving an amortized
cost of O(m α(n)) for m operations on n elements.

Nodes live in an index arena: element ``e`` is stored at index
``_index[e]`` and the tree structure is kept in the parallel lists
``_parent`` and ``_rank``. A node is a root iff ``_parent[i] == i``.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 21.3 (Disjoint-set forests).
"""

from __future__ import annotations

from typing import Dict, List, Optional, Set

from ..logging import get_logger
from .base import DisjointSets, E

logger = get_logger(__name__)


class ForestDisjointSets(DisjointSets[E]):
    """
    Union-by-rank / path-compression disjoint-set forest.

    Rank is an upper bound on the height of the subtree rooted at a node. It
    is only updated when two roots of equal rank are linked and is left
    untouched by path compression.

    Tie-break:
        When the two roots have equal rank, the root of the set containing
        the *second* argument of :meth:`union` becomes the new root and its
        rank grows by one.

    Complexity:
        - make_set: O(1) amortized
        - find_set / union: O(α(n)) amortized
        - current_representatives: O(n α(n))
        - current_elements_of_set_containing: O(n α(n))

    Example:
        >>> dsu = ForestDisjointSets()
        >>> for x in "abc":
        ...     dsu.make_set(x)
        >>> dsu.union("a", "b")
        >>> dsu.find_set("a")
        'b'
    """

    def __init__(self, check_invariants: Optional[bool] = None) -> None:
        super().__init__(check_invariants)
        self._index: Dict[E, int] = {}
        self._items: List[E] = []
        self._parent: List[int] = []
        self._rank: List[int] = []

    def is_present(self, e: E) -> bool:
        self._require(e, "is_present")
        return e in self._index

    def make_set(self, e: E) -> None:
        self._require_absent(e, "make_set")
        i = len(self._items)
        self._index[e] = i
        self._items.append(e)
        self._parent.append(i)
        self._rank.append(0)

    def _find_root(self, i: int) -> int:
        """Return the root index of node ``i``, compressing the path to it."""
        root = i
        while self._parent[root] != root:
            root = self._parent[root]

        # Second pass: hang every visited node directly under the root.
        while self._parent[i] != root:
            nxt = self._parent[i]
            self._parent[i] = root
            i = nxt
        return root

    def find_set(self, e: E) -> E:
        self._require_present(e, "find_set")
        return self._items[self._find_root(self._index[e])]

    def union(self, e1: E, e2: E) -> None:
        self._require_present(e1, "union")
        self._require_present(e2, "union")
        root1 = self._find_root(self._index[e1])
        root2 = self._find_root(self._index[e2])
        if root1 == root2:
            return
        self._link(root1, root2)
        self._after_union()

    def _link(self, root1: int, root2: int) -> None:
        """Attach the lower-rank root under the other; on a tie ``root2`` wins."""
        if self._rank[root1] > self._rank[root2]:
            self._parent[root2] = root1
            logger.debug("linked %r under %r", self._items[root2], self._items[root1])
        else:
            self._parent[root1] = root2
            if self._rank[root1] == self._rank[root2]:
                self._rank[root2] += 1
            logger.debug("linked %r under %r", self._items[root1], self._items[root2])

    def current_representatives(self) -> Set[E]:
        return {self._items[self._find_root(i)] for i in range(len(self._items))}

    def current_elements_of_set_containing(self, e: E) -> Set[E]:
        self._require_present(e, "current_elements_of_set_containing")
        root = self._find_root(self._index[e])
        return {
            self._items[i] for i in range(len(self._items)) if self._find_root(i) == root
        }

    def cardinality_of_set_containing(self, e: E) -> int:
        return len(self.current_elements_of_set_containing(e))

    def elements(self) -> Set[E]:
        return set(self._items)

    def rank_of(self, e: E) -> int:
        """Return the rank stored on the node holding ``e``."""
        self._require_present(e, "rank_of")
        return self._rank[self._index[e]]

    def clear(self) -> None:
        self._index.clear()
        self._items.clear()
        self._parent.clear()
        self._rank.clear()
