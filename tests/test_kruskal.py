import pytest

from algolab.kruskal import (
    SAMPLE_EDGES,
    SAMPLE_VERTEX_COUNT,
    DisjointSet,
    Edge,
    kruskal_mst,
    main,
)


def test_sample_tree_matches_worked_example():
    tree = kruskal_mst(SAMPLE_VERTEX_COUNT, SAMPLE_EDGES)
    assert tree == [Edge(2, 3, 4), Edge(0, 3, 5), Edge(0, 1, 10)]
    assert sum(edge.weight for edge in tree) == 19


def test_tree_has_no_cycles_and_spans_components():
    tree = kruskal_mst(SAMPLE_VERTEX_COUNT, SAMPLE_EDGES)
    forest = DisjointSet(SAMPLE_VERTEX_COUNT)
    for edge in tree:
        assert forest.find(edge.u) != forest.find(edge.v)
        forest.union(edge.u, edge.v)
    for edge in SAMPLE_EDGES:
        assert forest.find(edge.u) == forest.find(edge.v)


def test_union_attaches_second_set_to_first():
    forest = DisjointSet(3)
    forest.union(0, 1)
    assert forest.find(1) == 0
    forest.union(2, 1)
    assert forest.find(0) == 2
    assert forest.find(1) == 2


def test_find_compresses_paths():
    forest = DisjointSet(4)
    forest.union(2, 3)
    forest.union(1, 2)
    forest.union(0, 1)
    assert forest.find(3) == 0
    assert forest.parent[3] == 0


def test_empty_edge_list_gives_empty_tree():
    assert kruskal_mst(3, []) == []


def test_out_of_range_vertex_raises():
    with pytest.raises(ValueError):
        kruskal_mst(2, [Edge(0, 5, 1)])


def test_negative_size_raises():
    with pytest.raises(ValueError):
        DisjointSet(-1)


def test_main_prints_tree(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.splitlines() == [
        "Edges in MST:",
        "2 - 3 = 4",
        "0 - 3 = 5",
        "0 - 1 = 10",
        "Total cost of MST: 19",
    ]