"""Interactive command line for building and exploring graphs."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterator
from enum import IntEnum
from typing import TextIO

from graphwalk.graph import Graph, fill_edges
from graphwalk.shortest import dijkstra
from graphwalk.traversal import bfs_all, dfs_all, topological_sort

MENU = "Choose\n1.Display\n2.Indegree\n3.OutDegree\n4.TotalDegree\n5.Exit\n"


class MenuChoice(IntEnum):
    DISPLAY = 1
    INDEGREE = 2
    OUTDEGREE = 3
    TOTAL_DEGREE = 4
    EXIT = 5


def degree_report(graph: Graph, choice: int) -> str:
    """Text for one of the report entries (1 to 4) of the menu."""
    try:
        selected = MenuChoice(choice)
    except ValueError:
        raise ValueError(f"unknown report choice: {choice}") from None
    if selected is MenuChoice.DISPLAY:
        return "".join(
            "".join(f"{weight} " for weight in row) + "\n" for row in graph.matrix()
        )
    if selected is MenuChoice.INDEGREE:
        label, measure = "Indegree", graph.indegree
    elif selected is MenuChoice.OUTDEGREE:
        label, measure = "Outdegree", graph.outdegree
    elif selected is MenuChoice.TOTAL_DEGREE:
        label, measure = "TotalDegree", graph.total_degree
    else:
        raise ValueError(f"choice {choice} is not a report")
    return "".join(f"{label} for {v}: {measure(v)}\n" for v in graph.vertices())


def run_menu(
    graph: Graph, read: Callable[[], int], write: Callable[[str], object]
) -> None:
    """Show the degree menu until the exit choice or the end of input."""
    while True:
        write(MENU)
        try:
            choice = read()
        except EOFError:
            return
        if choice == MenuChoice.EXIT:
            write("Exiting...\n")
            return
        try:
            write(degree_report(graph, choice))
        except ValueError:
            write("Incorrect choice\n")


class _IntReader:
    """Reads whitespace-separated integers from a text stream."""

    def __init__(self, stream: TextIO) -> None:
        self._tokens = self._split(stream)

    @staticmethod
    def _split(stream: TextIO) -> Iterator[str]:
        for line in stream:
            yield from line.split()

    def __call__(self) -> int:
        try:
            token = next(self._tokens)
        except StopIteration:
            raise EOFError("unexpected end of input") from None
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"expected an integer, got {token!r}") from None


def _read_graph(
    command: str, read: Callable[[], int], write: Callable[[str], object]
) -> Graph:
    write("Enter number of nodes: " if command == "degrees" else "Enter nodes: ")
    nodes = read()
    write("Undirected/Directed (0/1): ")
    directed = read() != 0
    graph = Graph(nodes, directed)
    answer = "weight/0" if command == "dijkstra" else "1/0"

    def ask(source: int, target: int) -> int:
        write(f"Edge? {source} -> {target} ({answer}): ")
        return read()

    fill_edges(graph, ask)
    return graph


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="graphwalk", description="Enter a graph and explore it."
    )
    parser.add_argument(
        "command",
        choices=["degrees", "bfs", "dfs", "topo", "dijkstra"],
        help="what to do with the graph once it is entered",
    )
    args = parser.parse_args(argv)
    read = _IntReader(sys.stdin)
    write = sys.stdout.write

    try:
        graph = _read_graph(args.command, read, write)
        if args.command == "degrees":
            run_menu(graph, read, write)
        elif args.command == "dijkstra":
            for vertex, distance in dijkstra(graph).items():
                write(f"{vertex}: {distance}\n")
        else:
            walk = {"bfs": bfs_all, "dfs": dfs_all, "topo": topological_sort}
            write("".join(f"{vertex} " for vertex in walk[args.command](graph)))
    except (EOFError, ValueError) as error:
        sys.stdout.flush()
        print(f"graphwalk: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())