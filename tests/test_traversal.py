import pytest

from algolab.traversal import SAMPLE_GRAPH, bfs, dfs, format_traversal, main


def test_dfs_sample_graph():
    assert dfs(SAMPLE_GRAPH, 0) == [0, 1, 3, 2, 4]


def test_bfs_sample_graph():
    assert bfs(SAMPLE_GRAPH, 0) == [0, 1, 2, 3, 4]


@pytest.mark.parametrize("search", [dfs, bfs])
@pytest.mark.parametrize("start", range(5))
def test_connected_graph_visits_every_node_once(search, start):
    order = search(SAMPLE_GRAPH, start)
    assert order[0] == start
    assert sorted(order) == list(range(5))


@pytest.mark.parametrize("search", [dfs, bfs])
def test_disconnected_node_is_alone(search):
    adjacency = [[0, 1, 0], [1, 0, 0], [0, 0, 0]]
    assert search(adjacency, 2) == [2]
    assert sorted(search(adjacency, 0)) == [0, 1]


@pytest.mark.parametrize("search", [dfs, bfs])
def test_start_out_of_range(search):
    with pytest.raises(ValueError):
        search(SAMPLE_GRAPH, 5)


@pytest.mark.parametrize("search", [dfs, bfs])
def test_non_square_matrix_rejected(search):
    with pytest.raises(ValueError):
        search([[0, 1], [1]], 0)


def test_format_traversal():
    assert format_traversal("BFS", [0, 1, 2, 3, 4]) == "BFS: 0 --> 1 --> 2 --> 3 --> 4 --> NULL"


def test_format_traversal_empty_order():
    assert format_traversal("DFS", []) == "DFS: NULL"


def test_main_prints_both(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out.splitlines() == [
        "DFS: 0 --> 1 --> 3 --> 2 --> 4 --> NULL",
        "BFS: 0 --> 1 --> 2 --> 3 --> 4 --> NULL",
    ]