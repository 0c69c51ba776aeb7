"""RailwayGraph - Central manager for stations and links.

Owns the station list and the link list. Provides operations for:
- Regenerating the station set (clears all links)
- Adding, re-weighting and removing links
- Read-only queries used by the shortest-path engine (adjacency, path cost)

Only the action layer mutates the graph. The shortest-path engine reads an
adjacency snapshot and never writes back.
"""

import logging
from typing import Any, Optional

from railway_router.constants import StationConfig
from railway_router.model.link import Link, make_link_key

logger = logging.getLogger(__name__)

# station -> [(neighbor, weight), ...] in link insertion order
Adjacency = dict[str, list[tuple[str, int]]]


def clamp_station_count(count: int) -> int:
    """Limit a requested station count to the supported range."""
    return max(StationConfig.MIN_COUNT, min(StationConfig.MAX_COUNT, int(count)))


def generate_station_ids(count: int) -> list[str]:
    """Station IDs for `count` stations: A, B, C, ... (count is clamped)."""
    return list(StationConfig.ALPHABET[: clamp_station_count(count)])


def is_positive_int(value: Any) -> bool:
    """True for ints > 0. Booleans are not accepted as weights."""
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


class RailwayGraph:
    """Graph representing the railway network.

    Stations are single uppercase letters. Links are undirected and unique
    per unordered station pair.

    Example:
        graph = RailwayGraph(station_count=3)
        graph.upsert_link(a="A", b="B", weight=1)
        graph.upsert_link(a="B", b="A", weight=4)  # updates, no duplicate
        graph.link_weight("A", "B")                # 4
    """

    def __init__(self, station_count: int = StationConfig.DEFAULT_COUNT) -> None:
        self.stations: list[str] = generate_station_ids(station_count)
        self.links: list[Link] = []

    # =========================================================================
    # Station Operations
    # =========================================================================

    def regenerate_stations(self, count: int) -> list[str]:
        """Replace all stations with a fresh alphabetic sequence.

        The count is clamped to [2, 26]. All links are removed unconditionally,
        so any journey built on the old network is invalid afterwards.

        Returns:
            The new station IDs.
        """
        self.stations = generate_station_ids(count)
        removed = len(self.links)
        self.links = []
        logger.info(f"[GRAPH] Regenerated {len(self.stations)} stations, cleared {removed} link(s)")
        return list(self.stations)

    def has_station(self, station: Optional[str]) -> bool:
        return station is not None and station in self.stations

    # =========================================================================
    # Link Operations
    # =========================================================================

    def find_link(self, a: str, b: str) -> Optional[Link]:
        """Find the link joining a and b (either order), or None."""
        key = make_link_key(a, b)
        for link in self.links:
            if link.key == key:
                return link
        return None

    def link_weight(self, a: str, b: str) -> Optional[int]:
        link = self.find_link(a, b)
        return link.weight if link else None

    def upsert_link(self, a: str, b: str, weight: int) -> tuple[Link, bool]:
        """Add a link or update the weight of the existing one.

        Callers validate input first (see ui.validators.validate_link); invalid
        edges here indicate a programming error.

        Args:
            a, b: Distinct station IDs
            weight: Positive integer weight

        Returns:
            Tuple of (link, was_created)

        Raises:
            ValueError: Unknown station, self-loop or non-positive weight.
        """
        if not self.has_station(a) or not self.has_station(b):
            raise ValueError(f"Unknown station in link {a}-{b}; stations are {self.stations}")
        if a == b:
            raise ValueError(f"Link endpoints must differ, got {a}-{b}")
        if not is_positive_int(weight):
            raise ValueError(f"Link weight must be a positive integer, got {weight!r}")

        key = make_link_key(a, b)
        for idx, link in enumerate(self.links):
            if link.key == key:
                updated = link.with_weight(weight)
                self.links[idx] = updated
                logger.info(f"[GRAPH] Updated link {key}: {link.weight} -> {weight}")
                return updated, False

        link = Link(a=a, b=b, weight=weight)
        self.links.append(link)
        logger.info(f"[GRAPH] Added link {key} with weight {weight}")
        return link, True

    def remove_link(self, a: str, b: str) -> Optional[Link]:
        """Disconnect a and b. Returns the removed link or None if absent."""
        link = self.find_link(a, b)
        if link is None:
            return None
        self.links.remove(link)
        logger.info(f"[GRAPH] Removed link {link.key}")
        return link

    # =========================================================================
    # Queries
    # =========================================================================

    def neighbors(self, station: str) -> list[tuple[str, int]]:
        """Adjacent stations with link weights, in link insertion order."""
        return [(link.other(station), link.weight) for link in self.links if link.touches(station)]

    def adjacency(self) -> Adjacency:
        """Snapshot of the undirected adjacency lists.

        Every station appears as a key, including isolated ones. Each link is
        listed under both of its endpoints with the same weight.
        """
        adjacency: Adjacency = {station: [] for station in self.stations}
        for link in self.links:
            adjacency[link.a].append((link.b, link.weight))
            adjacency[link.b].append((link.a, link.weight))
        return adjacency

    def path_cost(self, path: list[str] | tuple[str, ...]) -> Optional[int]:
        """Sum of link weights along a path.

        Returns:
            Total weight (0 for a single-station path), or None if the path is
            empty or a hop has no link.
        """
        if not path:
            return None
        total = 0
        for a, b in zip(path, path[1:]):
            weight = self.link_weight(a, b)
            if weight is None:
                return None
            total += weight
        return total

    def __repr__(self) -> str:
        return f"RailwayGraph(stations={len(self.stations)}, links={len(self.links)})"
