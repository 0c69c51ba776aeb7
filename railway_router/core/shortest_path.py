"""Shortest-path engine - Dijkstra over a snapshot of the railway graph.

Algorithm:
1. Take an adjacency snapshot of the graph (undirected, insertion-ordered)
2. Pop (distance, counter, station) entries from a binary heap
3. Skip stale entries (station already settled or a better distance known)
4. Stop as soon as the target is popped and walk predecessors back to start

Every improvement pushes a fresh heap entry instead of updating an existing one.
The counter makes ties on distance resolve by insertion order, so the result
is deterministic for a given graph.
"""

import heapq
import itertools
import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from railway_router.model.railway_graph import RailwayGraph

logger = logging.getLogger(__name__)


def compute_path(graph: "RailwayGraph", start: str, end: str) -> list[str]:
    """Least-cost path from start to end.

    Args:
        graph: Railway graph (read only)
        start: Departure station ID
        end: Arrival station ID

    Returns:
        Station IDs from start to end inclusive. [start] if start == end.
        Empty list if either station is unknown or end is unreachable.
    """
    adjacency = graph.adjacency()
    if start not in adjacency or end not in adjacency:
        return []

    distances: dict[str, int] = {start: 0}
    previous: dict[str, str] = {}
    settled: set[str] = set()
    counter = itertools.count()
    heap: list[tuple[int, int, str]] = [(0, next(counter), start)]

    while heap:
        distance, _, station = heapq.heappop(heap)

        if station in settled or distance > distances[station]:
            continue
        settled.add(station)

        if station == end:
            return _reconstruct(previous=previous, start=start, end=end)

        for neighbor, weight in adjacency[station]:
            if neighbor in settled:
                continue
            candidate = distance + weight
            if neighbor not in distances or candidate < distances[neighbor]:
                distances[neighbor] = candidate
                previous[neighbor] = station
                heapq.heappush(heap, (candidate, next(counter), neighbor))

    logger.debug(f"[ROUTE] No path from {start} to {end}")
    return []


def _reconstruct(previous: dict[str, str], start: str, end: str) -> list[str]:
    path = [end]
    while path[-1] != start:
        path.append(previous[path[-1]])
    path.reverse()
    return path


def path_cost(graph: "RailwayGraph", path: list[str] | tuple[str, ...]) -> int | None:
    """Total weight of `path` on `graph`, None if empty or a hop has no link."""
    return graph.path_cost(path)
