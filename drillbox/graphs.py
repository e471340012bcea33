"""Single-source shortest paths: BFS, Dijkstra and Bellman-Ford.

Graphs are adjacency lists: ``graph[u]`` lists the vertices reachable from
``u`` and, for weighted graphs, ``weights[u][i]`` is the weight of the edge to
``graph[u][i]``.
"""

from __future__ import annotations

import heapq
from collections import deque
from collections.abc import Sequence

INFINITY = 1_000_000_000
"""Distance reported for a vertex the source cannot reach."""

NO_PREDECESSOR = -1
"""Predecessor reported for the source and for unreachable vertices."""

Graph = Sequence[Sequence[int]]


def _check_source(graph: Graph, source: int) -> None:
    if not 0 <= source < len(graph):
        raise ValueError(f"source vertex {source} is not in a graph of {len(graph)} vertices")


def _weighted_edges(graph: Graph, weights: Graph) -> list[tuple[int, int, int]]:
    """Flatten an adjacency list and its weights into (from, to, weight) triples."""
    if len(graph) != len(weights):
        raise ValueError("graph and weights must have one entry per vertex")
    edges: list[tuple[int, int, int]] = []
    for u, (targets, costs) in enumerate(zip(graph, weights)):
        if len(targets) != len(costs):
            raise ValueError(f"vertex {u} has {len(targets)} edges but {len(costs)} weights")
        edges.extend((u, v, w) for v, w in zip(targets, costs))
    return edges


def breadth_first_search(graph: Graph, source: int) -> tuple[list[int], list[int]]:
    """Shortest edge counts from ``source`` in an unweighted graph.

    Returns ``(distances, predecessors)``.
    """
    _check_source(graph, source)
    distances = [INFINITY] * len(graph)
    predecessors = [NO_PREDECESSOR] * len(graph)
    distances[source] = 0
    queue = deque([source])
    while queue:
        u = queue.popleft()
        for v in graph[u]:
            if distances[v] == INFINITY:
                distances[v] = distances[u] + 1
                predecessors[v] = u
                queue.append(v)
    return distances, predecessors


def dijkstra(graph: Graph, weights: Graph, source: int) -> tuple[list[int], list[int]]:
    """Shortest paths from ``source`` in a graph with non-negative weights.

    Returns ``(distances, predecessors)``. Raises ValueError on a negative weight.
    """
    _check_source(graph, source)
    edges = _weighted_edges(graph, weights)
    if any(w < 0 for _, _, w in edges):
        raise ValueError("Dijkstra's algorithm requires non-negative weights")

    distances = [INFINITY] * len(graph)
    predecessors = [NO_PREDECESSOR] * len(graph)
    distances[source] = 0
    heap = [(0, source)]
    while heap:
        dist, u = heapq.heappop(heap)
        if dist > distances[u]:
            continue
        for v, w in zip(graph[u], weights[u]):
            candidate = dist + w
            if candidate < distances[v]:
                distances[v] = candidate
                predecessors[v] = u
                heapq.heappush(heap, (candidate, v))
    return distances, predecessors


def bellman_ford(
    graph: Graph, weights: Graph, source: int
) -> tuple[list[int], list[bool], list[int]]:
    """Shortest paths from ``source`` allowing negative weights.

    Returns ``(distances, has_path, predecessors)``. ``has_path[v]`` is true when
    ``v`` is reachable and no negative cycle lies on any path to it.
    """
    _check_source(graph, source)
    edges = _weighted_edges(graph, weights)
    vertex_count = len(graph)

    distances = [INFINITY] * vertex_count
    predecessors = [NO_PREDECESSOR] * vertex_count
    distances[source] = 0

    def relaxable(u: int, v: int, w: int) -> bool:
        return distances[u] != INFINITY and distances[u] + w < distances[v]

    for _ in range(vertex_count - 1):
        changed = False
        for u, v, w in edges:
            if relaxable(u, v, w):
                distances[v] = distances[u] + w
                predecessors[v] = u
                changed = True
        if not changed:
            break

    pending = deque(v for u, v, w in edges if relaxable(u, v, w))
    on_negative_cycle: set[int] = set()
    while pending:
        u = pending.popleft()
        if u in on_negative_cycle:
            continue
        on_negative_cycle.add(u)
        pending.extend(v for v in graph[u] if v not in on_negative_cycle)

    has_path = [
        dist != INFINITY and vertex not in on_negative_cycle
        for vertex, dist in enumerate(distances)
    ]
    return distances, has_path, predecessors