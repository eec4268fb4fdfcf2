"""Breadth-first, depth-first and topological orderings of a graph."""

from __future__ import annotations

from collections import deque

from graphwalk.graph import Graph


def bfs(graph: Graph, start: int, visited: set[int] | None = None) -> list[int]:
    """Visit vertices breadth-first from ``start``, adding them to ``visited``."""
    if visited is None:
        visited = set()
    queue = deque([start])
    visited.add(start)
    order = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for neighbor in graph.neighbors(node):
            if neighbor not in visited:
                visited.add(neighbor)
                queue.append(neighbor)
    return order


def bfs_all(graph: Graph) -> list[int]:
    """Breadth-first order over every component, lowest vertex first."""
    visited: set[int] = set()
    order = []
    for vertex in graph.vertices():
        if vertex not in visited:
            order.extend(bfs(graph, vertex, visited))
    return order


def dfs(graph: Graph, start: int, visited: set[int] | None = None) -> list[int]:
    """Visit vertices depth-first (pre-order) from ``start``."""
    if visited is None:
        visited = set()
    visited.add(start)
    order = [start]
    stack = [iter(graph.neighbors(start))]
    while stack:
        for neighbor in stack[-1]:
            if neighbor not in visited:
                visited.add(neighbor)
                order.append(neighbor)
                stack.append(iter(graph.neighbors(neighbor)))
                break
        else:
            stack.pop()
    return order


def dfs_all(graph: Graph) -> list[int]:
    """Depth-first order over every component, lowest vertex first."""
    visited: set[int] = set()
    order = []
    for vertex in graph.vertices():
        if vertex not in visited:
            order.extend(dfs(graph, vertex, visited))
    return order


def _postorder(graph: Graph, start: int, visited: set[int], out: list[int]) -> None:
    visited.add(start)
    stack = [(start, iter(graph.neighbors(start)))]
    while stack:
        node, neighbors = stack[-1]
        for neighbor in neighbors:
            if neighbor not in visited:
                visited.add(neighbor)
                stack.append((neighbor, iter(graph.neighbors(neighbor))))
                break
        else:
            stack.pop()
            out.append(node)


def topological_sort(graph: Graph) -> list[int]:
    """Reverse depth-first finishing order of all vertices.

    For an acyclic directed graph every edge points forward in the result.
    Cycles are not detected.
    """
    visited: set[int] = set()
    finished: list[int] = []
    for vertex in graph.vertices():
        if vertex not in visited:
            _postorder(graph, vertex, visited, finished)
    return finished[::-1]