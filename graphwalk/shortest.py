"""Single-source shortest paths over a weighted graph."""

from __future__ import annotations

from collections import deque

from graphwalk.graph import Graph

# Starting distance for every vertex; distances not below it are never recorded.
UNREACHABLE = 200000


def dijkstra(graph: Graph, source: int = 1) -> dict[int, int]:
    """Shortest distance from ``source`` to every vertex.

    Vertices are relaxed from a first-in first-out queue. Vertices that
    cannot be reached keep the value ``UNREACHABLE``.
    """
    if source not in graph.vertices():
        raise ValueError(f"source vertex {source} is not in the graph")
    distances = dict.fromkeys(graph.vertices(), UNREACHABLE)
    distances[source] = 0
    queue = deque([(source, 0)])
    while queue:
        node, distance = queue.popleft()
        for neighbor in graph.neighbors(node):
            candidate = distance + graph.weight(node, neighbor)
            if candidate < distances[neighbor]:
                distances[neighbor] = candidate
                queue.append((neighbor, candidate))
    return distances