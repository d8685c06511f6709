"""Integration tests for graphs package within dsugraph."""


def test_graphs_importable_from_main():
    """Test that graph algorithms can be imported from main dsugraph package."""
    import dsugraph

    from dsugraph import AdjacencyMatrixUndirectedGraph, kruskal_mst, prim_mst
    from dsugraph.graphs import connected_components

    assert dsugraph.connected_components is connected_components
    assert AdjacencyMatrixUndirectedGraph is not None
    assert kruskal_mst is not None and prim_mst is not None


def test_graphs_in_all_exports():
    """Test that graph exports are in __all__."""
    import dsugraph

    graph_exports = {
        'Graph', 'GraphNode', 'GraphEdge', 'NodeColor',
        'AdjacencyListGraph', 'AdjacencyMatrixUndirectedGraph',
        'KruskalMSP', 'PrimMSP', 'kruskal_mst', 'prim_mst',
        'ConnectedComponentsComputer', 'connected_components',
        'predecessor_map', 'tree_edges_from_predecessors', 'reconstruct_path',
        'total_weight',
    }

    all_exports = set(dsugraph.__all__)
    assert graph_exports.issubset(all_exports), "Graph exports missing from __all__"
    assert all(hasattr(dsugraph, name) for name in dsugraph.__all__)


def test_graphs_functional_integration(kind):
    """Test components and both spanning tree algorithms agree on one graph."""
    from dsugraph import (
        AdjacencyMatrixUndirectedGraph,
        connected_components,
        kruskal_mst,
        prim_mst,
        total_weight,
    )

    G = AdjacencyMatrixUndirectedGraph()
    for label in ["s", "a", "b", "c", "x", "y"]:
        G.add_node(label)
    G.add_weighted_edge("s", "a", 2.0)
    G.add_weighted_edge("a", "b", 1.0)
    G.add_weighted_edge("s", "b", 4.0)
    G.add_weighted_edge("b", "c", 3.0)
    G.add_weighted_edge("x", "y", 5.0)

    components = connected_components(G, kind)
    assert len(components) == 2

    kruskal = kruskal_mst(G, kind)
    assert len(kruskal) == G.node_count() - len(components)
    assert total_weight(kruskal) == total_weight(prim_mst(G, "s")) == 11.0
