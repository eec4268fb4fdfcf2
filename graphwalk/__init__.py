"""Adjacency-matrix graphs with degrees, traversals, topological sort, shortest paths and an interactive command."""

__version__ = "0.1.0"
__all__ = ["cli", "graph", "shortest", "traversal"]