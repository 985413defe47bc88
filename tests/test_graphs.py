import pytest

from contestkit.graphs import (
    INF,
    DisjointSet,
    analyze_graph,
    dfs_postorder,
    dijkstra,
    disjoint_forest,
    kruskal_mst,
    prim_mst,
)

SAMPLE_EDGES = [(0, 1), (0, 3), (3, 2), (1, 2), (4, 1), (4, 5)]

NINE_VERTEX = [
    (0, 1, 4), (0, 7, 8), (1, 2, 8), (1, 7, 11), (2, 3, 7), (2, 8, 2),
    (2, 5, 4), (3, 4, 9), (3, 5, 14), (4, 5, 10), (5, 6, 2), (6, 7, 1),
    (6, 8, 6), (7, 8, 7),
]

SIX_VERTEX = [
    (0, 1, 4), (0, 2, 1), (1, 2, 3), (1, 3, 3), (1, 4, 7), (2, 4, 2),
    (3, 4, 5), (3, 5, 2), (4, 5, 6),
]


def test_dfs_postorder_sample():
    assert dfs_postorder(6, SAMPLE_EDGES) == [2, 1, 3, 0, 5, 4]


def test_dfs_postorder_visits_each_vertex_once():
    order = dfs_postorder(8, SAMPLE_EDGES)
    assert sorted(order) == list(range(8))


def test_dfs_postorder_dag_children_first():
    edges = [(0, 1), (1, 2), (0, 2), (2, 3), (4, 3)]
    order = dfs_postorder(5, edges)
    for a, b in edges:
        assert order.index(b) < order.index(a)


def test_analyze_sample_has_cycle_and_two_trees():
    report = analyze_graph(6, SAMPLE_EDGES)
    assert report.has_cycle is True
    assert report.component_count == 2
    flat = [v for tree in report.components for v in tree]
    assert flat == dfs_postorder(6, SAMPLE_EDGES)


def test_analyze_tree_has_no_cycle():
    report = analyze_graph(4, [(0, 1), (1, 2), (1, 3)])
    assert report.has_cycle is False
    assert report.cycle_count == 0
    assert report.component_count == 1


def test_analyze_self_loop_is_cycle():
    assert analyze_graph(1, [(0, 0)]).has_cycle is True


def test_analyze_isolated_vertices_are_own_trees():
    report = analyze_graph(3, [])
    assert report.components == ((0,), (1,), (2,))


def test_invalid_vertex_rejected():
    with pytest.raises(ValueError):
        analyze_graph(2, [(0, 5)])
    with pytest.raises(ValueError):
        dijkstra(2, [(0, 1, 3)], 7)


@pytest.mark.parametrize("edges,count", [(NINE_VERTEX, 9), (SIX_VERTEX, 6)])
def test_dijkstra_distances_are_consistent(edges, count):
    settled = dijkstra(count, edges, 0)
    distance = dict(settled)
    distance[0] = 0
    assert sorted(distance) == list(range(count))
    for u, v, w in edges:
        assert distance[v] <= distance[u] + w
        assert distance[u] <= distance[v] + w
    for vertex, d in settled:
        assert any(
            (b == vertex and distance[a] + w == d)
            or (a == vertex and distance[b] + w == d)
            for a, b, w in edges
        )
    values = [d for _, d in settled]
    assert values == sorted(values)


def test_dijkstra_leaves_out_unreachable():
    assert dijkstra(3, [(0, 1, 5)], 0) == [(1, 5)]


def test_dijkstra_infinite_weight_never_taken():
    assert dijkstra(2, [(0, 1, INF)], 0) == []


@pytest.mark.parametrize("edges,count", [(NINE_VERTEX, 9), (SIX_VERTEX, 6)])
def test_prim_and_kruskal_agree(edges, count):
    prim_edges, prim_total = prim_mst(count, edges, 0)
    kruskal_edges, kruskal_total = kruskal_mst(count, edges)
    assert prim_total == kruskal_total
    assert len(prim_edges) == count - 1
    assert len(kruskal_edges) == count - 1
    assert sum(w for _, _, w in kruskal_edges) == kruskal_total


def test_mst_weight_of_nine_vertex_sample():
    assert kruskal_mst(9, NINE_VERTEX)[1] == 37


def test_prim_edges_form_spanning_tree():
    chosen, _ = prim_mst(9, NINE_VERTEX, 3)
    forest = DisjointSet(9)
    assert all(forest.union(a, b) for a, b in chosen)
    assert len({forest.find(v) for v in range(9)}) == 1


def test_prim_single_edge():
    assert prim_mst(3, [(0, 1, 5)], 0) == ([(0, 1)], 5)


def test_kruskal_weights_nondecreasing():
    chosen, _ = kruskal_mst(9, NINE_VERTEX)
    weights = [w for _, _, w in chosen]
    assert weights == sorted(weights)


def test_disjoint_set_union_and_find():
    forest = DisjointSet(4)
    assert forest.union(0, 1) is True
    assert forest.find(0) == forest.find(1)
    assert forest.find(2) != forest.find(0)
    assert forest.union(1, 0) is False


def test_disjoint_set_rejects_out_of_range():
    forest = DisjointSet(2)
    with pytest.raises(ValueError):
        forest.find(2)
    with pytest.raises(ValueError):
        DisjointSet(-1)


def test_disjoint_forest_triangle():
    report = disjoint_forest(3, [(0, 1), (1, 2), (0, 2)])
    assert report.cycle_edges == ((0, 2),)
    assert report.has_cycle is True
    assert report.component_count == 1
    assert len(set(report.parents)) == 1


def test_disjoint_forest_separate_pairs():
    report = disjoint_forest(4, [(0, 1), (2, 3)])
    assert report.has_cycle is False
    assert report.component_count == 2
    linked = sorted(v for group in report.children.values() for v in group)
    assert len(linked) == 2