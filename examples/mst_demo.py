"""Example: spanning trees and components with dsugraph

Builds a small road network, then compares Kruskal (with both disjoint-set
representations) against Prim and lists the connected components.
"""

import numpy as np

from dsugraph import (
    AdjacencyMatrixUndirectedGraph,
    DisjointSetsKind,
    connected_components,
    kruskal_mst,
    predecessor_map,
    prim_mst,
    reconstruct_path,
    total_weight,
)


def build_network():
    graph = AdjacencyMatrixUndirectedGraph()
    for city in ["Oslo", "Bergen", "Trondheim", "Stavanger", "Tromso", "Bodo"]:
        graph.add_node(city)

    roads = [
        ("Oslo", "Bergen", 463.0),
        ("Oslo", "Trondheim", 494.0),
        ("Oslo", "Stavanger", 547.0),
        ("Bergen", "Stavanger", 209.0),
        ("Bergen", "Trondheim", 696.0),
        ("Tromso", "Bodo", 555.0),
    ]
    for a, b, km in roads:
        graph.add_weighted_edge(a, b, km)
    return graph


def example_kruskal(graph):
    """Example: Kruskal with both disjoint-set representations."""
    print("=" * 60)
    print("Example 1: Kruskal")
    print("=" * 60)

    for kind in DisjointSetsKind:
        forest = kruskal_mst(graph, kind)
        print(f"{kind.value:>12}: {len(forest)} edges, {total_weight(forest):.0f} km")
        for edge in sorted(forest, key=lambda e: e.weight):
            print(f"    {edge.node1.label} - {edge.node2.label}: {edge.weight:.0f}")


def example_prim(graph):
    """Example: Prim from Oslo, read back through the predecessor links."""
    print("=" * 60)
    print("Example 2: Prim from Oslo")
    print("=" * 60)

    tree = prim_mst(graph, "Oslo")
    print(f"Tree weight: {total_weight(tree):.0f} km")

    parents = predecessor_map(graph)
    for city in ["Stavanger", "Trondheim", "Bodo"]:
        path = reconstruct_path(parents, city)
        print(f"  root path to {city}: {' -> '.join(path)}")


def example_components(graph):
    """Example: connected components and the adjacency matrix."""
    print("=" * 60)
    print("Example 3: Components")
    print("=" * 60)

    for component in connected_components(graph):
        print("  {" + ", ".join(sorted(node.label for node in component)) + "}")

    print("\nAdjacency matrix:")
    print(graph.adjacency_matrix().astype(int))
    print(f"Edges: {int(np.triu(graph.adjacency_matrix()).sum())}")


if __name__ == "__main__":
    network = build_network()
    example_kruskal(network)
    example_prim(network)
    example_components(network)
