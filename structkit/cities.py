"""Train and car networks between cities, loaded from a CSV table."""

from __future__ import annotations

import argparse
import sys
from contextlib import ExitStack
from dataclasses import dataclass, field
from typing import Iterable, Iterator, TextIO

from structkit.graph import Edge, Graph
from structkit.sorting import quick_sort

MENU = ("sort_cities", "adjacency_lists", "traversal", "dijkstra", "exit")


@dataclass
class CityNetworks:
    """The train and car graphs plus every city that starts a connection."""

    train: Graph = field(default_factory=Graph)
    car: Graph = field(default_factory=Graph)
    cities: set = field(default_factory=set)


def load_networks(lines: Iterable[str]) -> CityNetworks:
    """Build both networks from CSV lines, skipping the header line.

    Each row is ``city,city2,train_time,train_dist,car_time,car_dist``.
    A repeated connection is an error.
    """
    networks = CityNetworks()
    rows = iter(lines)
    next(rows, None)
    for line in rows:
        if not line.strip():
            continue
        fields = [part.strip() for part in line.rstrip("\r\n").split(",")]
        if len(fields) < 6:
            raise ValueError(f"malformed row: {line!r}")
        city, city2, train_time, train_dist, car_time, car_dist = fields[:6]
        try:
            train_km = int(train_dist)
            car_km = int(car_dist)
        except ValueError:
            raise ValueError(f"invalid distance in row: {line!r}") from None
        for graph in (networks.train, networks.car):
            graph.add_vertex(city, exist_ok=True)
            graph.add_vertex(city2, exist_ok=True)
        networks.train.add_edge(Edge(city, city2, train_km, train_time))
        networks.car.add_edge(Edge(city, city2, car_km, car_time))
        networks.cities.add(city)
    return networks


def sorted_cities(cities: Iterable[str]) -> list[str]:
    """The distinct city names in ascending order."""
    ordered = list(set(cities))
    quick_sort(ordered)
    return ordered


def format_adjacency(graph: Graph, title: str) -> str:
    """Render each vertex as ``city - target km - time | ...`` under ``title``."""
    lines = [f"{title}\n"]
    for vertex in graph.vertices:
        rest = "".join(
            f"{edge.target} {edge.weight} - {edge.time} | " for edge in graph.neighbors(vertex)
        )
        lines.append(f"{vertex} - {rest}\n")
    return "".join(lines)


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _traverse(networks: CityNetworks, start: str, out: TextIO,
              bfs_file: TextIO, dfs_file: TextIO) -> None:
    for name, method, target in (("BFS", networks.train.bfs, bfs_file),
                                 ("DFS", networks.train.dfs, dfs_file)):
        try:
            order = method(start)
        except ValueError as error:
            out.write(f"{error}\n")
            continue
        target.write(f"{name} traversal starting from {start}:\n")
        target.writelines(f"{city}\n" for city in order)


def _distance(graph: Graph, start: str, end: str, out: TextIO) -> None:
    try:
        graph.bfs(start)
        distance = graph.shortest_distance(start, end)
    except ValueError as error:
        out.write(f"{error}\n")
        return
    if distance is None:
        out.write("Distancia mas corta: No hay ruta\n")
    else:
        out.write(f"Distancia mas corta: {distance} km\n")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Explore train and car routes between cities.")
    parser.add_argument("csv_file", nargs="?", default="EuropeCities.csv")
    parser.add_argument("--sorted-out", default="output603-1.out")
    parser.add_argument("--train-out", default="output603-2-train.out")
    parser.add_argument("--car-out", default="output603-2-car.out")
    parser.add_argument("--bfs-out", default="output603-3.out")
    parser.add_argument("--dfs-out", default="output603-4.out")
    args = parser.parse_args(argv)

    try:
        with open(args.csv_file, encoding="utf-8") as handle:
            networks = load_networks(handle)
    except FileNotFoundError:
        networks = CityNetworks()

    out = sys.stdout
    tokens = _tokens(sys.stdin)
    with ExitStack() as stack:
        sorted_file, train_file, car_file, bfs_file, dfs_file = (
            stack.enter_context(open(path, "w", encoding="utf-8"))
            for path in (args.sorted_out, args.train_out, args.car_out,
                         args.bfs_out, args.dfs_out)
        )
        while True:
            out.write("Select an option:\n")
            for number, name in enumerate(MENU, start=1):
                out.write(f"{number}. {name}\n")
            token = next(tokens, None)
            if token is None:
                break
            try:
                option = int(token)
            except ValueError:
                break
            operation = MENU[(option - 1) % len(MENU)]
            if operation == "exit":
                break
            if operation == "sort_cities":
                sorted_file.write("Sorted cities:\n")
                sorted_file.writelines(f"{city}\n" for city in sorted_cities(networks.cities))
            elif operation == "adjacency_lists":
                train_file.write(format_adjacency(networks.train, "Adjacency list for train:"))
                car_file.write(format_adjacency(networks.car, "Adjacency list for car:"))
            elif operation == "traversal":
                out.write("Enter a city to start the traversal: ")
                start = next(tokens, None)
                if start is None:
                    break
                _traverse(networks, start, out, bfs_file, dfs_file)
            else:
                out.write("Enter a city to start the traversal: ")
                start = next(tokens, None)
                out.write("Enter a city to end the traversal: ")
                end = next(tokens, None)
                if start is None or end is None:
                    break
                out.write("Tren - ")
                _distance(networks.train, start, end, out)
                out.write("Carro - ")
                _distance(networks.car, start, end, out)
    return 0


if __name__ == "__main__":
    sys.exit(main())