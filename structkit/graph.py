"""Directed weighted graph stored as adjacency lists."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Hashable, Iterable, Iterator


@dataclass(frozen=True)
class Edge:
    """A directed, weighted connection between two vertices."""

    source: Hashable
    target: Hashable
    weight: int = 0
    time: str = ""


@dataclass(frozen=True)
class Route:
    """Cheapest route from a start vertex to ``vertex``.

    ``cost`` is ``None`` and ``path`` is empty when the vertex cannot be reached.
    """

    vertex: Hashable
    path: tuple
    cost: int | None

    @property
    def reachable(self) -> bool:
        return self.cost is not None


class Graph:
    """Directed graph whose vertices keep their insertion order."""

    def __init__(self, vertices: Iterable[Hashable] = (), edges: Iterable[Edge] = ()):
        self._adjacency: dict[Hashable, list[Edge]] = {v: [] for v in vertices}
        for edge in edges:
            if edge.source in self._adjacency and edge.target in self._adjacency:
                self._adjacency[edge.source].append(edge)

    @property
    def vertices(self) -> list:
        """The vertices in insertion order."""
        return list(self._adjacency)

    def neighbors(self, vertex: Hashable) -> list[Edge]:
        """The edges leaving ``vertex``."""
        self._require(vertex, "El vértice no existe")
        return list(self._adjacency[vertex])

    def _require(self, vertex: Hashable, message: str) -> None:
        if vertex not in self._adjacency:
            raise ValueError(message)

    def add_vertex(self, vertex: Hashable, exist_ok: bool = False) -> None:
        """Add a vertex; an existing one is an error unless ``exist_ok``."""
        if vertex in self._adjacency:
            if exist_ok:
                return
            raise ValueError("Vértice ya existe")
        self._adjacency[vertex] = []

    def add_edge(self, edge: Edge) -> None:
        """Add an edge between two existing vertices."""
        if edge.source not in self._adjacency or edge.target not in self._adjacency:
            raise ValueError("Alguno de los vértices no existen")
        edges = self._adjacency[edge.source]
        if any(existing.target == edge.target for existing in edges):
            raise ValueError("El arco ya existe")
        edges.append(edge)

    def remove_vertex(self, vertex: Hashable) -> None:
        """Remove a vertex together with every edge that points to it."""
        self._require(vertex, "El vértice no existe")
        for source, edges in self._adjacency.items():
            self._adjacency[source] = [e for e in edges if e.target != vertex]
        del self._adjacency[vertex]

    def remove_edge(self, edge: Edge) -> None:
        """Remove the edges from ``edge.source`` to ``edge.target``, if any."""
        self._require(edge.source, "El vértice origen no existe")
        self._adjacency[edge.source] = [
            e for e in self._adjacency[edge.source] if e.target != edge.target
        ]

    def bfs(self, vertex: Hashable) -> list:
        """Vertices in breadth-first order starting at ``vertex``."""
        self._require(vertex, "El vértice no existe")
        seen = {vertex}
        queue = deque([vertex])
        order = []
        while queue:
            current = queue.popleft()
            order.append(current)
            for edge in self._adjacency[current]:
                if edge.target not in seen:
                    seen.add(edge.target)
                    queue.append(edge.target)
        return order

    def dfs(self, vertex: Hashable) -> list:
        """Vertices in depth-first order starting at ``vertex``."""
        self._require(vertex, "Vértice inválido")
        seen = {vertex}
        order = [vertex]
        stack: list[Iterator[Edge]] = [iter(self._adjacency[vertex])]
        while stack:
            for edge in stack[-1]:
                if edge.target not in seen:
                    seen.add(edge.target)
                    order.append(edge.target)
                    stack.append(iter(self._adjacency[edge.target]))
                    break
            else:
                stack.pop()
        return order

    def dijkstra(self, vertex: Hashable) -> list[Route]:
        """Cheapest routes from ``vertex`` to every vertex, in vertex order."""
        self._require(vertex, "El vértice no existe")
        vertices = self.vertices
        position = {v: i for i, v in enumerate(vertices)}
        done = [False] * len(vertices)
        cost: list[int | None] = [None] * len(vertices)
        parent: list[int | None] = [None] * len(vertices)
        current: int | None = position[vertex]
        cost[current] = 0
        while current is not None:
            done[current] = True
            for edge in self._adjacency[vertices[current]]:
                j = position[edge.target]
                if done[j]:
                    continue
                candidate = cost[current] + edge.weight
                if cost[j] is None or candidate < cost[j]:
                    cost[j] = candidate
                    parent[j] = current
            current = min(
                (i for i, c in enumerate(cost) if c is not None and not done[i]),
                key=cost.__getitem__,
                default=None,
            )

        routes = []
        for i, target in enumerate(vertices):
            if cost[i] is None:
                routes.append(Route(target, (), None))
                continue
            path = []
            step: int | None = i
            while step is not None:
                path.append(vertices[step])
                step = parent[step]
            routes.append(Route(target, tuple(reversed(path)), cost[i]))
        return routes

    def shortest_distance(self, source: Hashable, target: Hashable) -> int | None:
        """Cost of the cheapest route, or ``None`` when ``target`` is unreachable."""
        self._require(target, "El vértice no existe")
        for route in self.dijkstra(source):
            if route.vertex == target:
                return route.cost
        return None

    def format_routes(self, routes: Iterable[Route]) -> str:
        """Render routes one per line as ``vertex -> path - cost``."""
        lines = []
        for route in routes:
            if route.reachable:
                steps = "".join(f"{step} " for step in route.path)
                lines.append(f"{route.vertex} -> {steps}- {route.cost}\n")
            else:
                lines.append(f"{route.vertex} -> No hay ruta\n")
        return "".join(lines)

    def describe(self) -> str:
        """Render the adjacency lists, one vertex per line."""
        lines = []
        for vertex, edges in self._adjacency.items():
            rest = "".join(f"{e.target} {e.weight} - " for e in edges)
            lines.append(f"{vertex} - {rest}\n")
        return "".join(lines) + "\n"