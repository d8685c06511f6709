"""Benchmark disjoint-set representations and spanning tree algorithms."""

import time
from typing import Dict

import numpy as np

from dsugraph import (
    AdjacencyListGraph,
    DisjointSetsKind,
    kruskal_mst,
    make_disjoint_sets,
    prim_mst,
)


def benchmark_unions(
    n_elements: int,
    n_unions: int,
    kind: DisjointSetsKind = DisjointSetsKind.FOREST,
    seed: int = 0,
) -> Dict[str, float]:
    """Benchmark random unions followed by one find per element.

    Args:
        n_elements: Number of singleton sets to start from.
        n_unions: Number of random union calls.
        kind: Disjoint-set representation.
        seed: Seed for the random pairs.

    Returns:
        Dictionary with timing results.
    """
    rng = np.random.default_rng(seed)
    pairs = rng.integers(0, n_elements, size=(n_unions, 2)).tolist()

    dsu = make_disjoint_sets(kind)
    start = time.perf_counter()
    for e in range(n_elements):
        dsu.make_set(e)
    for a, b in pairs:
        dsu.union(a, b)
    for e in range(n_elements):
        dsu.find_set(e)
    total_time = time.perf_counter() - start

    return {
        "n_elements": n_elements,
        "n_unions": n_unions,
        "num_sets": dsu.num_sets,
        "total_time_sec": total_time,
        "ops_per_sec": (2 * n_elements + n_unions) / total_time,
    }


def benchmark_mst(n_nodes: int, n_edges: int, seed: int = 0) -> Dict[str, float]:
    """Benchmark Kruskal (both representations) and Prim on a random graph."""
    rng = np.random.default_rng(seed)
    graph = AdjacencyListGraph()
    for i in range(n_nodes):
        graph.add_node(i)
    for i in range(n_nodes - 1):
        graph.add_weighted_edge(i, i + 1, float(rng.uniform(1.0, 100.0)))
    while graph.edge_count() < n_edges:
        u, v = rng.integers(0, n_nodes, size=2).tolist()
        if u != v:
            graph.add_weighted_edge(u, v, float(rng.uniform(1.0, 100.0)))

    results: Dict[str, float] = {"n_nodes": n_nodes, "n_edges": graph.edge_count()}
    for kind in DisjointSetsKind:
        start = time.perf_counter()
        kruskal_mst(graph, kind)
        results[f"kruskal_{kind.value}_sec"] = time.perf_counter() - start

    start = time.perf_counter()
    prim_mst(graph, 0)
    results["prim_sec"] = time.perf_counter() - start
    return results


if __name__ == "__main__":
    print("Benchmarking disjoint-set unions...")
    for kind in DisjointSetsKind:
        results = benchmark_unions(n_elements=50_000, n_unions=50_000, kind=kind)
        print(f"{kind.value} (50k elements, 50k unions):")
        print(f"  Total time: {results['total_time_sec']*1e3:.1f} ms")
        print(f"  Operations per second: {results['ops_per_sec']:.0f}")

    print("\nBenchmarking spanning trees (500 nodes, 3000 edges)...")
    results = benchmark_mst(n_nodes=500, n_edges=3000)
    for key, value in results.items():
        if key.endswith("_sec"):
            print(f"  {key}: {value*1e3:.1f} ms")
