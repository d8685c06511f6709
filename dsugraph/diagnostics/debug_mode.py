"""Invariant checking switches for dsugraph.

Checks run after structural updates: a disjoint-set structure re-verifies its
partition after every effective union, and Kruskal verifies that the edges it
selected form a forest.

Each structure or algorithm may carry its own ``check_invariants`` flag.
``None`` (the default) defers to the process-wide switch, whose initial value
comes from the ``DSUGRAPH_DEBUG`` environment variable (``1``, ``true``,
``yes`` or ``on``).
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Iterator, Optional

_DEBUG_ENV_VAR = "DSUGRAPH_DEBUG"


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in {"1", "true", "yes", "on"}


_debug_enabled: bool = _env_flag(_DEBUG_ENV_VAR)


def is_debug_enabled() -> bool:
    """Return the process-wide invariant checking switch."""
    return _debug_enabled


def set_debug_enabled(enabled: bool) -> None:
    """Turn process-wide invariant checking on or off."""
    global _debug_enabled
    _debug_enabled = bool(enabled)


def checks_enabled(override: Optional[bool] = None) -> bool:
    """
    Decide whether a structure should check its invariants.

    Parameters
    ----------
    override:
        The structure's own ``check_invariants`` setting. ``True`` or
        ``False`` wins over the process-wide switch; ``None`` defers to it.
    """
    if override is None:
        return _debug_enabled
    return bool(override)


@contextmanager
def debug_context(enabled: bool = True) -> Iterator[None]:
    """
    Scope the process-wide switch to a ``with`` block.

    Structures created with an explicit ``check_invariants`` are unaffected.

    Example
    -------
    >>> with debug_context(True):
    ...     dsu.union("a", "b")  # partition re-checked after the union
    """
    global _debug_enabled
    previous = _debug_enabled
    _debug_enabled = bool(enabled)
    try:
        yield
    finally:
        _debug_enabled = previous
