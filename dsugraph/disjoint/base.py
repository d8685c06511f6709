"""
Abstract disjoint-set contract shared by every representation.

A ``DisjointSets`` keeps a partition of a universe of hashable elements into
disjoint sets, each identified by one of its members (the representative).
Elements are registered one at a time with :meth:`make_set` and only removed
all together by :meth:`clear`.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 21 (Data Structures for Disjoint Sets).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, Hashable, Optional, Set, TypeVar

from ..diagnostics.core import assert_partition
from ..diagnostics.debug_mode import checks_enabled
from ..errors import AlreadyPresentError, MissingArgumentError, NotPresentError

E = TypeVar("E", bound=Hashable)


class DisjointSets(ABC, Generic[E]):
    """
    Partition of registered elements into disjoint sets.

    All query results are snapshots: the returned sets are fresh objects and
    are not updated by later unions.

    Errors (raised before any mutation):
        MissingArgumentError: an element argument is ``None``.
        AlreadyPresentError: :meth:`make_set` on a registered element.
        NotPresentError: any per-element query on an unregistered element.

    Args:
        check_invariants: Re-verify the partition after every effective
            union. ``None`` follows the process-wide debug switch.
    """

    def __init__(self, check_invariants: Optional[bool] = None) -> None:
        self.check_invariants = check_invariants

    @abstractmethod
    def is_present(self, e: E) -> bool:
        """Return True iff ``e`` was registered with :meth:`make_set`."""

    @abstractmethod
    def make_set(self, e: E) -> None:
        """Register ``e`` as a new singleton set whose representative is ``e``."""

    @abstractmethod
    def find_set(self, e: E) -> E:
        """Return the representative of the set containing ``e``."""

    @abstractmethod
    def union(self, e1: E, e2: E) -> None:
        """Merge the sets containing ``e1`` and ``e2`` (no-op if already merged)."""

    @abstractmethod
    def current_representatives(self) -> Set[E]:
        """Return one representative per current set."""

    @abstractmethod
    def current_elements_of_set_containing(self, e: E) -> Set[E]:
        """Return every element sharing ``e``'s representative."""

    @abstractmethod
    def cardinality_of_set_containing(self, e: E) -> int:
        """Return the size of the set containing ``e``."""

    @abstractmethod
    def elements(self) -> Set[E]:
        """Return every registered element."""

    @abstractmethod
    def clear(self) -> None:
        """Forget every element, leaving an empty universe."""

    @property
    def num_sets(self) -> int:
        """Number of distinct sets currently held."""
        return len(self.current_representatives())

    def __contains__(self, e: object) -> bool:
        return e is not None and self.is_present(e)  # type: ignore[arg-type]

    def __len__(self) -> int:
        return len(self.elements())

    def __repr__(self) -> str:
        return f"{type(self).__name__}(elements={len(self)}, sets={self.num_sets})"

    # Shared argument checks

    def _require(self, e: E, operation: str) -> None:
        if e is None:
            raise MissingArgumentError(f"{operation}: element must not be None")

    def _require_present(self, e: E, operation: str) -> None:
        self._require(e, operation)
        if not self.is_present(e):
            raise NotPresentError(f"{operation}: element {e!r} is not in any set")

    def _require_absent(self, e: E, operation: str) -> None:
        self._require(e, operation)
        if self.is_present(e):
            raise AlreadyPresentError(f"{operation}: element {e!r} is already in a set")

    def _after_union(self) -> None:
        if checks_enabled(self.check_invariants):
            assert_partition(self)
