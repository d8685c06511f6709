"""Diagnostics and debugging utilities for dsugraph."""

from .core import (
    assert_forest_edges,
    assert_partition,
    is_partition,
)
from .debug_mode import (
    checks_enabled,
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)

__all__ = [
    "is_partition",
    "assert_partition",
    "assert_forest_edges",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    "checks_enabled",
]
