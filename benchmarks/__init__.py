"""Performance benchmarks for dsugraph.

This package contains microbenchmarks for the disjoint-set representations
and the spanning tree algorithms built on them.
"""
