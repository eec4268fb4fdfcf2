# graphwalk

A small toolkit for graphs stored as adjacency matrices, with an
interactive command for entering a graph and exploring it.

A `Graph(nodes, directed)` has the vertices `1 .. nodes - 1`: `nodes` is
the size of the matrix and vertex 0 is never used. Edge weights are
integers, and a weight of 0 means there is no edge. Undirected graphs
store every edge in both directions. Self-loops are rejected.

## Installation

```
pip install .
```

## Command line

```
graphwalk degrees
graphwalk bfs
graphwalk dfs
graphwalk topo
graphwalk dijkstra
```

Every command first reads the graph from standard input: the number of
nodes, then `0` (undirected) or `1` (directed), then one answer for each
ordered pair of distinct vertices whose edge is not yet known. Answers are
`1`/`0` for an edge, or a weight/`0` for `dijkstra`. For an undirected
graph, a pair whose mirror edge has already been set is not asked again.
Input is read as whitespace-separated integers, so it can be typed or
piped in.

After the graph is entered:

- `degrees` shows a menu: `1` displays the matrix, `2`, `3` and `4` print
  the in-, out- and total degree of each vertex, `5` exits. Any other
  number prints `Incorrect choice`. The menu also ends at the end of input.
- `bfs` and `dfs` print a breadth-first or depth-first order covering
  every vertex, starting each component from its lowest unvisited vertex.
- `topo` prints a topological order.
- `dijkstra` prints the shortest distance from vertex 1 to every vertex,
  one `vertex: distance` per line.

Input that ends early or is not an integer makes the command print an
error to standard error and exit with status 1.

## Library use

```python
from graphwalk.graph import Graph, fill_edges
from graphwalk.traversal import bfs, bfs_all, dfs, dfs_all, topological_sort
from graphwalk.shortest import dijkstra

g = Graph(5, directed=True)      # vertices 1, 2, 3, 4
g.set_edge(1, 2, 1)
g.set_edge(2, 3, 1)
g.set_edge(1, 4, 1)

print(list(g.vertices()))        # [1, 2, 3, 4]
print(g.neighbors(1))            # [2, 4]
print(g.outdegree(1), g.indegree(3), g.total_degree(2))
print(g.matrix())
print(bfs_all(g))
print(dfs_all(g))
print(topological_sort(g))
print(dijkstra(g, 1))            # {vertex: distance}
```

### `graphwalk.graph`

- `Graph.set_edge(source, target, weight)` sets a weight (0 removes the
  edge); `weight`, `has_edge` and `neighbors` read it back. Vertices out
  of range raise `ValueError`.
- `Graph.indegree`, `outdegree` and `total_degree` count edges per vertex.
- `Graph.matrix()` returns a copy of the weight matrix, one row per vertex.
- `Graph.pairs_to_ask()` yields the ordered pairs whose edge is still
  unset, checking lazily so that edges set while iterating are skipped.
- `fill_edges(graph, ask)` calls `ask(source, target)` for each of those
  pairs and stores the returned weight.

### `graphwalk.traversal`

- `bfs(graph, start, visited=None)` and `dfs(graph, start, visited=None)`
  return the order in which vertices are reached from `start`, adding them
  to the `visited` set if one is given.
- `bfs_all(graph)` and `dfs_all(graph)` cover every component.
- `topological_sort(graph)` returns the reverse depth-first finishing
  order. Cycles are not detected.

### `graphwalk.shortest`

- `dijkstra(graph, source=1)` returns a dict of distances, relaxing
  vertices from a first-in first-out queue. Unreachable vertices keep the
  value `UNREACHABLE` (200000). A source outside the graph raises
  `ValueError`.

### `graphwalk.cli`

- `degree_report(graph, choice)` returns the text for menu entries 1 to 4
  and raises `ValueError` for any other choice.
- `run_menu(graph, read, write)` drives the degree menu with `read()`
  returning integers and `write(text)` taking output; it stops at choice 5
  or when `read` raises `EOFError`.
- `main(argv=None)` is the `graphwalk` command.

## What it does not do

Graphs live only in memory: there is no file format for saving or loading
them, and the command reads a graph only by answering its prompts on
standard input. The `dijkstra` command always starts from vertex 1.

## Running the tests

```
pip install .[test]
pytest
```