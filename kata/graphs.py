"""Shortest paths on graphs given as adjacency lists."""

from __future__ import annotations

import heapq
from collections import deque
from collections.abc import Iterator, Sequence

UNREACHABLE = 1_000_000_000
"""Distance reported for a vertex that cannot be reached from the source."""

NO_PREDECESSOR = -1
"""Predecessor reported for the source and for unreachable vertices."""


def _check_source(graph: Sequence[Sequence[int]], source: int) -> None:
    if not 0 <= source < len(graph):
        raise ValueError(f"source vertex {source} is not in a graph of {len(graph)} vertices")


def _check_vertex(graph: Sequence[Sequence[int]], u: int, v: int) -> None:
    if not 0 <= v < len(graph):
        raise ValueError(f"edge {u} -> {v} points outside a graph of {len(graph)} vertices")


def _weighted_edges(
    graph: Sequence[Sequence[int]], weights: Sequence[Sequence[int]]
) -> Iterator[tuple[int, int, int]]:
    """Yield every edge as ``(from, to, weight)``, checking the input's shape."""
    if len(weights) != len(graph):
        raise ValueError("weights must hold one list per vertex")
    for u, (neighbours, edge_weights) in enumerate(zip(graph, weights)):
        if len(neighbours) != len(edge_weights):
            raise ValueError(f"vertex {u} has {len(neighbours)} edges but {len(edge_weights)} weights")
        for v, weight in zip(neighbours, edge_weights):
            _check_vertex(graph, u, v)
            yield u, v, weight


def _report(distances: Sequence[int | None]) -> list[int]:
    return [UNREACHABLE if d is None else d for d in distances]


def breadth_first_search(
    graph: Sequence[Sequence[int]], source: int
) -> tuple[list[int], list[int]]:
    """Return ``(distances, predecessors)`` of every vertex from ``source``.

    Edges are unweighted; unreachable vertices get ``UNREACHABLE`` and
    ``NO_PREDECESSOR``.
    """
    _check_source(graph, source)
    distances: list[int | None] = [None] * len(graph)
    predecessors = [NO_PREDECESSOR] * len(graph)
    distances[source] = 0
    queue = deque([source])
    while queue:
        u = queue.popleft()
        for v in graph[u]:
            _check_vertex(graph, u, v)
            if distances[v] is None:
                distances[v] = distances[u] + 1
                predecessors[v] = u
                queue.append(v)
    return _report(distances), predecessors


def dijkstra(
    graph: Sequence[Sequence[int]],
    weights: Sequence[Sequence[int]],
    source: int,
) -> tuple[list[int], list[int]]:
    """Return ``(distances, predecessors)`` using non-negative edge weights.

    ``weights[u][i]`` is the weight of the edge from ``u`` to ``graph[u][i]``.
    """
    _check_source(graph, source)
    adjacency: list[list[tuple[int, int]]] = [[] for _ in graph]
    for u, v, weight in _weighted_edges(graph, weights):
        if weight < 0:
            raise ValueError(f"edge {u} -> {v} has negative weight {weight}")
        adjacency[u].append((v, weight))

    distances: list[int | None] = [None] * len(graph)
    predecessors = [NO_PREDECESSOR] * len(graph)
    distances[source] = 0
    settled = [False] * len(graph)
    heap = [(0, source)]
    while heap:
        distance, u = heapq.heappop(heap)
        if settled[u]:
            continue
        settled[u] = True
        for v, weight in adjacency[u]:
            candidate = distance + weight
            current = distances[v]
            if current is None or candidate < current:
                distances[v] = candidate
                predecessors[v] = u
                heapq.heappush(heap, (candidate, v))
    return _report(distances), predecessors


def bellman_ford(
    graph: Sequence[Sequence[int]],
    weights: Sequence[Sequence[int]],
    source: int,
) -> tuple[list[int], list[bool], list[int]]:
    """Return ``(distances, has_path, predecessors)`` allowing negative weights.

    ``has_path[v]`` is true when ``v`` is reachable from ``source`` without
    passing through a negative cycle.
    """
    _check_source(graph, source)
    edges = list(_weighted_edges(graph, weights))
    distances: list[int | None] = [None] * len(graph)
    predecessors = [NO_PREDECESSOR] * len(graph)
    distances[source] = 0

    def relaxable(u: int, v: int, weight: int) -> bool:
        du, dv = distances[u], distances[v]
        return du is not None and (dv is None or du + weight < dv)

    for _ in range(len(graph) - 1):
        changed = False
        for u, v, weight in edges:
            if relaxable(u, v, weight):
                distances[v] = distances[u] + weight
                predecessors[v] = u
                changed = True
        if not changed:
            break

    affected = {v for u, v, weight in edges if relaxable(u, v, weight)}
    queue = deque(affected)
    while queue:
        u = queue.popleft()
        for v in graph[u]:
            if v not in affected:
                affected.add(v)
                queue.append(v)

    has_path = [
        distance is not None and vertex not in affected
        for vertex, distance in enumerate(distances)
    ]
    return _report(distances), has_path, predecessors