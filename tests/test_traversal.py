import pytest

from graphwalk.graph import Graph
from graphwalk.traversal import bfs, bfs_all, dfs, dfs_all, topological_sort


@pytest.fixture
def tree():
    graph = Graph(5, True)
    for source, target in [(1, 2), (1, 3), (2, 4)]:
        graph.set_edge(source, target, 1)
    return graph


@pytest.fixture
def split():
    graph = Graph(7, False)
    for source, target in [(1, 4), (4, 6), (2, 5)]:
        graph.set_edge(source, target, 1)
    return graph


def test_bfs_level_order(tree):
    assert bfs_all(tree) == [1, 2, 3, 4]


def test_dfs_goes_deep_first(tree):
    assert dfs_all(tree) == [1, 2, 4, 3]


def test_bfs_marks_visited(split):
    visited = set()
    order = bfs(split, 1, visited)
    assert set(order) == visited
    assert 2 not in visited


def test_dfs_marks_visited(split):
    visited = set()
    order = dfs(split, 2, visited)
    assert order[0] == 2
    assert set(order) == visited
    assert 1 not in visited


@pytest.mark.parametrize("walk", [bfs_all, dfs_all])
def test_full_walks_cover_every_vertex_once(split, walk):
    order = walk(split)
    assert sorted(order) == list(split.vertices())
    assert len(order) == len(set(order))


def test_walks_start_with_lowest_vertex(split):
    assert bfs_all(split)[0] == dfs_all(split)[0] == min(split.vertices())


def test_dfs_handles_long_chain():
    graph = Graph(3001, True)
    for vertex in range(1, 3000):
        graph.set_edge(vertex, vertex + 1, 1)
    assert dfs_all(graph) == list(graph.vertices())


def test_topological_chain():
    graph = Graph(4, True)
    graph.set_edge(3, 2, 1)
    graph.set_edge(2, 1, 1)
    assert topological_sort(graph) == [3, 2, 1]


def test_topological_order_respects_edges():
    graph = Graph(7, True)
    edges = [(5, 1), (5, 3), (3, 2), (1, 2), (2, 6), (4, 6)]
    for source, target in edges:
        graph.set_edge(source, target, 1)
    order = topological_sort(graph)
    assert sorted(order) == list(graph.vertices())
    position = {vertex: index for index, vertex in enumerate(order)}
    for source, target in edges:
        assert position[source] < position[target]


def test_invalid_start_vertex(tree):
    with pytest.raises(ValueError):
        bfs(tree, 9)