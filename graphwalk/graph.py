"""Adjacency-matrix graph over vertices numbered from 1."""

from __future__ import annotations

from collections.abc import Callable, Iterator


class Graph:
    """A graph with vertices ``1 .. nodes - 1`` and integer edge weights.

    ``nodes`` is the size of the matrix; vertex 0 is never used. A weight
    of 0 means there is no edge. Undirected graphs store every edge in
    both directions.
    """

    def __init__(self, nodes: int, directed: bool) -> None:
        if nodes < 1:
            raise ValueError(f"number of nodes must be at least 1, got {nodes}")
        self.nodes = nodes
        self.directed = bool(directed)
        size = nodes - 1
        self._weights = [[0] * size for _ in range(size)]

    def _check(self, vertex: int) -> int:
        if not 1 <= vertex < self.nodes:
            raise ValueError(
                f"vertex {vertex} is outside the range 1..{self.nodes - 1}"
            )
        return vertex - 1

    def vertices(self) -> range:
        """The vertices of the graph in ascending order."""
        return range(1, self.nodes)

    def set_edge(self, source: int, target: int, weight: int) -> None:
        """Set the weight of an edge; 0 removes it."""
        row, column = self._check(source), self._check(target)
        if row == column:
            raise ValueError(f"self-loop on vertex {source} is not allowed")
        self._weights[row][column] = weight
        if not self.directed:
            self._weights[column][row] = weight

    def weight(self, source: int, target: int) -> int:
        """The weight stored for ``source -> target`` (0 when absent)."""
        return self._weights[self._check(source)][self._check(target)]

    def has_edge(self, source: int, target: int) -> bool:
        return self.weight(source, target) != 0

    def neighbors(self, vertex: int) -> list[int]:
        """Targets of the edges leaving ``vertex``, in ascending order."""
        self._check(vertex)
        return [
            other
            for other in self.vertices()
            if other != vertex and self.has_edge(vertex, other)
        ]

    def indegree(self, vertex: int) -> int:
        self._check(vertex)
        return sum(
            1
            for other in self.vertices()
            if other != vertex and self.has_edge(other, vertex)
        )

    def outdegree(self, vertex: int) -> int:
        return len(self.neighbors(vertex))

    def total_degree(self, vertex: int) -> int:
        return self.indegree(vertex) + self.outdegree(vertex)

    def matrix(self) -> list[list[int]]:
        """A copy of the weight matrix, one row per vertex."""
        return [list(row) for row in self._weights]

    def pairs_to_ask(self) -> Iterator[tuple[int, int]]:
        """Yield the ordered pairs whose edge is still unknown.

        The check is made lazily, so edges set while iterating (such as
        the mirror of an undirected edge) are skipped.
        """
        for source in self.vertices():
            for target in self.vertices():
                if source != target and not self.has_edge(source, target):
                    yield source, target


def fill_edges(graph: Graph, ask: Callable[[int, int], int]) -> None:
    """Ask for the weight of every unknown edge and store the answers."""
    for source, target in graph.pairs_to_ask():
        graph.set_edge(source, target, ask(source, target))