"""Data model classes for the railway network and the train journey.

- Link: Weighted undirected railroad between two stations
- RailwayGraph: Central manager owning stations and links
- Journey: Immutable train traversal record (+ pure transition functions in journey.py)
- JourneyUpdate: Result of a journey transition (next journey + log messages)
- LogMessage: Human-readable status lines for the log panel
"""

from railway_router.model.journey import Journey, JourneyPhase, JourneyUpdate
from railway_router.model.link import Link, make_link_key
from railway_router.model.message import LogMessage, MessageLevel
from railway_router.model.railway_graph import (
    RailwayGraph,
    clamp_station_count,
    generate_station_ids,
)

__all__ = [
    "Link",
    "make_link_key",
    "RailwayGraph",
    "clamp_station_count",
    "generate_station_ids",
    "Journey",
    "JourneyPhase",
    "JourneyUpdate",
    "LogMessage",
    "MessageLevel",
]
