"""
Counting multiset backed by a dict of occurrence counts.

Only distinct elements are stored, each with its multiplicity, so memory is
proportional to the number of distinct elements rather than to the number of
occurrences.
"""

from __future__ import annotations

from typing import Dict, Generic, Hashable, Iterator, Set, TypeVar

from .errors import ConcurrentModificationError, InvalidArgumentError, MissingArgumentError

E = TypeVar("E", bound=Hashable)


class Multiset(Generic[E]):
    """
    Multiset of hashable, non-None elements.

    Iteration yields every occurrence, with the occurrences of one element
    consecutive. Iterators are fail-fast: any structural change (an
    occurrence added or removed, or ``clear``) made after an iterator is
    created makes its next step raise
    :class:`~dsugraph.errors.ConcurrentModificationError`.

    Example:
        >>> bag = Multiset()
        >>> bag.add("a", 2)
        0
        >>> bag.add("b")
        0
        >>> sorted(bag)
        ['a', 'a', 'b']
    """

    def __init__(self) -> None:
        self._counts: Dict[E, int] = {}
        self._size = 0
        self._mod_count = 0

    def size(self) -> int:
        """Total number of occurrences."""
        return self._size

    def __len__(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return not self._counts

    def count(self, element: E) -> int:
        """Return the multiplicity of ``element`` (0 if absent)."""
        self._require(element)
        return self._counts.get(element, 0)

    def contains(self, element: E) -> bool:
        self._require(element)
        return element in self._counts

    def __contains__(self, element: object) -> bool:
        return element is not None and element in self._counts

    def add(self, element: E, occurrences: int = 1) -> int:
        """
        Add ``occurrences`` copies of ``element``.

        Returns:
            The multiplicity before the call.

        Raises:
            MissingArgumentError: If element is None.
            InvalidArgumentError: If occurrences is negative.
        """
        self._require(element)
        if occurrences < 0:
            raise InvalidArgumentError(f"Cannot add {occurrences} occurrences")
        previous = self.count(element)
        if occurrences == 0:
            return previous
        return self.set_count(element, previous + occurrences)

    def remove(self, element: E, occurrences: int = 1) -> int:
        """
        Remove up to ``occurrences`` copies of ``element``.

        Removing at least as many copies as present drops the element.

        Returns:
            The multiplicity before the call.
        """
        self._require(element)
        if occurrences < 0:
            raise InvalidArgumentError(f"Cannot remove {occurrences} occurrences")
        previous = self.count(element)
        if previous == 0 or occurrences == 0:
            return previous
        return self.set_count(element, max(previous - occurrences, 0))

    def discard(self, element: E) -> bool:
        """Remove one occurrence; return False if the element was absent."""
        return self.remove(element, 1) > 0

    def set_count(self, element: E, count: int) -> int:
        """
        Set the multiplicity of ``element``; a count of 0 drops it.

        Returns:
            The multiplicity before the call.
        """
        self._require(element)
        if count < 0:
            raise InvalidArgumentError(f"Count must be non-negative, got {count}")
        previous = self._counts.get(element, 0)
        if previous == count:
            return previous

        if count == 0:
            del self._counts[element]
        else:
            self._counts[element] = count
        self._size += count - previous
        self._mod_count += 1
        return previous

    def element_set(self) -> Set[E]:
        """Return the distinct elements (a snapshot)."""
        return set(self._counts)

    def clear(self) -> None:
        self._counts.clear()
        self._size = 0
        self._mod_count += 1

    def __iter__(self) -> Iterator[E]:
        return self._iterate(self._mod_count, list(self._counts.items()))

    def _iterate(self, expected: int, entries) -> Iterator[E]:
        for element, occurrences in entries:
            for _ in range(occurrences):
                if self._mod_count != expected:
                    raise ConcurrentModificationError("Multiset modified during iteration")
                yield element

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Multiset):
            return NotImplemented
        return self._counts == other._counts

    def __hash__(self) -> int:
        return hash(frozenset(self._counts.items()))

    def __repr__(self) -> str:
        return f"Multiset({self._counts!r})"

    def _require(self, element: E) -> None:
        if element is None:
            raise MissingArgumentError("Multiset elements must not be None")
