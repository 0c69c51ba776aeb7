"""Core routing algorithms.

- compute_path: Dijkstra shortest path over a RailwayGraph snapshot
- path_cost: Total link weight along a path
"""

from railway_router.core.shortest_path import compute_path, path_cost

__all__ = [
    "compute_path",
    "path_cost",
]
