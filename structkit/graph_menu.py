"""Interactive menu for building and traversing a graph of integers."""

from __future__ import annotations

import argparse
import sys
from typing import Iterable, Iterator, TextIO

from structkit.graph import Edge, Graph

MENU = (
    "addVertex",
    "addEdge",
    "removeVertex",
    "removeEdge",
    "print",
    "bfs",
    "dfs",
    "dijkstra",
    "exit",
)

_PROMPTS = {
    "addVertex": ("vertex",),
    "addEdge": ("source", "target", "weight"),
    "removeVertex": ("vertex",),
    "removeEdge": ("source", "target"),
    "bfs": ("source",),
    "dfs": ("source",),
    "dijkstra": ("source",),
}

_SAMPLE_VERTICES = (0, 1, 2, 3, 4, 5, 6, 7)
_SAMPLE_EDGES = (
    (0, 2, 9), (0, 3, 9), (1, 0, 7), (2, 0, 9), (2, 1, 5), (2, 6, 7), (3, 1, 8),
    (3, 7, 1), (4, 2, 7), (4, 6, 9), (5, 1, 1), (5, 3, 9), (6, 4, 3), (7, 5, 2),
)


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _next_int(tokens: Iterator[str]) -> int | None:
    token = next(tokens, None)
    if token is None:
        return None
    try:
        return int(token)
    except ValueError:
        return None


def _traversal_line(order: Iterable) -> str:
    return "".join(f"{vertex} " for vertex in order) + "\n"


def _apply(graph: Graph, operation: str, values: list[int]) -> str:
    if operation == "addVertex":
        graph.add_vertex(values[0])
        return ""
    if operation == "addEdge":
        graph.add_edge(Edge(*values))
        return ""
    if operation == "removeVertex":
        graph.remove_vertex(values[0])
        return ""
    if operation == "removeEdge":
        graph.remove_edge(Edge(*values))
        return ""
    if operation == "bfs":
        return _traversal_line(graph.bfs(values[0]))
    if operation == "dfs":
        return _traversal_line(graph.dfs(values[0]))
    return graph.format_routes(graph.dijkstra(values[0]))


def run(graph: Graph, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
    """Read menu choices from ``stdin`` until ``exit`` or the input runs out."""
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    tokens = _tokens(stdin)
    while True:
        stdout.write("Select an option:\n")
        for number, name in enumerate(MENU):
            stdout.write(f"{number}. {name}\n")
        option = _next_int(tokens)
        if option is None:
            return
        operation = MENU[option % len(MENU)]
        if operation == "exit":
            return
        if operation == "print":
            stdout.write(graph.describe())
            continue
        values = []
        for field in _PROMPTS[operation]:
            stdout.write(f"Enter {field}: ")
            value = _next_int(tokens)
            if value is None:
                return
            values.append(value)
        try:
            stdout.write(_apply(graph, operation, values))
        except ValueError as error:
            stdout.write(f"{error}\n")


def _sample_graph() -> Graph:
    return Graph(_SAMPLE_VERTICES, (Edge(*spec) for spec in _SAMPLE_EDGES))


def _demo(out: TextIO) -> None:
    graph = _sample_graph()
    out.write(graph.describe())
    out.write(_traversal_line(graph.bfs(0)))
    out.write("\n")
    out.write("".join(f"{vertex} " for vertex in graph.dfs(0)))
    out.write("\n")
    out.write(graph.format_routes(graph.dijkstra(0)))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Build and traverse a directed graph.")
    parser.add_argument("--demo", action="store_true",
                        help="run the traversals on a sample graph and exit")
    args = parser.parse_args(argv)
    if args.demo:
        _demo(sys.stdout)
    else:
        run(Graph(), sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())