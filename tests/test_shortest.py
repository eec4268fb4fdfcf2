import random

import pytest

from graphwalk.graph import Graph
from graphwalk.shortest import UNREACHABLE, dijkstra


def test_detour_is_shorter():
    graph = Graph(4, False)
    graph.set_edge(1, 2, 4)
    graph.set_edge(1, 3, 1)
    graph.set_edge(3, 2, 1)
    assert dijkstra(graph) == {1: 0, 2: 2, 3: 1}


def test_unreachable_vertex_keeps_sentinel():
    graph = Graph(4, True)
    graph.set_edge(1, 2, 3)
    distances = dijkstra(graph)
    assert distances[3] == UNREACHABLE
    assert distances[2] == 3


def test_distances_at_sentinel_are_not_recorded():
    graph = Graph(4, True)
    graph.set_edge(1, 2, UNREACHABLE // 2)
    graph.set_edge(2, 3, UNREACHABLE // 2)
    assert dijkstra(graph)[3] == UNREACHABLE


def test_other_source():
    graph = Graph(4, True)
    graph.set_edge(2, 3, 6)
    graph.set_edge(3, 1, 2)
    distances = dijkstra(graph, 2)
    assert distances[2] == 0
    assert distances[1] == 6 + 2


def test_distances_satisfy_edge_inequality():
    rng = random.Random(7)
    graph = Graph(9, True)
    for source in graph.vertices():
        for target in graph.vertices():
            if source != target and rng.random() < 0.4:
                graph.set_edge(source, target, rng.randint(1, 20))
    distances = dijkstra(graph)
    assert set(distances) == set(graph.vertices())
    assert distances[1] == 0
    for source in graph.vertices():
        if distances[source] == UNREACHABLE:
            continue
        for target in graph.neighbors(source):
            assert distances[target] <= distances[source] + graph.weight(source, target)


@pytest.mark.parametrize("source", [0, 5])
def test_invalid_source(source):
    with pytest.raises(ValueError):
        dijkstra(Graph(4, False), source)