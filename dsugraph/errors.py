"""Exception hierarchy for dsugraph.

Every error raised by the library derives from :class:`DsuGraphError` and
from the builtin exception a caller would naturally expect, so both
``except NotPresentError`` and ``except KeyError`` work.
"""

from __future__ import annotations


class DsuGraphError(Exception):
    """Base class for all dsugraph errors."""


class MissingArgumentError(DsuGraphError, ValueError):
    """A required element, node or graph argument was ``None``."""


class AlreadyPresentError(DsuGraphError, ValueError):
    """An element was registered twice."""


class NotPresentError(DsuGraphError, KeyError):
    """An element or node is not registered in the structure."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message instead.
        return str(self.args[0]) if self.args else ""


class InvalidArgumentError(DsuGraphError, ValueError):
    """An argument is present but unusable (directed graph, bad weight, ...)."""


class InvalidIndexError(InvalidArgumentError, IndexError):
    """An index-addressed accessor received an out-of-range index."""


class ConcurrentModificationError(DsuGraphError, RuntimeError):
    """A live view was structurally modified while being iterated."""


class InvariantViolationError(DsuGraphError, AssertionError):
    """A structural invariant check failed (raised in debug mode)."""
