import itertools
import math

import pytest

from algolab.dijkstra import SAMPLE_GRAPH, dijkstra, format_distances, main


def test_sample_graph_distances():
    assert dijkstra(SAMPLE_GRAPH, 0) == [0, 8, 9, 7, 5]


@pytest.mark.parametrize("source", range(5))
def test_source_distance_is_zero(source):
    assert dijkstra(SAMPLE_GRAPH, source)[source] == 0


@pytest.mark.parametrize("source", range(5))
def test_distances_respect_every_edge(source):
    dist = dijkstra(SAMPLE_GRAPH, source)
    for u, v in itertools.product(range(5), repeat=2):
        weight = SAMPLE_GRAPH[u][v]
        if weight:
            assert dist[v] <= dist[u] + weight


def test_unreachable_vertex_is_infinite():
    graph = [[0, 1, 0], [0, 0, 0], [0, 0, 0]]
    dist = dijkstra(graph, 0)
    assert dist[:2] == [0, 1]
    assert math.isinf(dist[2])


def test_single_vertex():
    assert dijkstra([[0]], 0) == [0]


def test_source_out_of_range():
    with pytest.raises(ValueError):
        dijkstra(SAMPLE_GRAPH, 7)


def test_non_square_rejected():
    with pytest.raises(ValueError):
        dijkstra([[0, 1], [0]], 0)


def test_format_distances_header_and_rows():
    text = format_distances([0, 8, 9, 7, 5])
    lines = text.splitlines()
    assert lines[0] == "Vertex \tDistance from Source"
    assert lines[2] == "1 \t8"
    assert len(lines) == 6


def test_main_output(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out == format_distances(dijkstra(SAMPLE_GRAPH, 0))