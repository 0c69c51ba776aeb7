"""Journey - Immutable record of a train traversal and its transitions.

A Journey is a plain value. Each operation is a pure function taking the
current Journey (and the graph where routing is needed) and returning a
JourneyUpdate: the next Journey, the log messages to show, and whether the
operation was accepted. Rejected operations leave the Journey unchanged.

Phases (derived from the value, never stored):
    IDLE: no path, no train
    PATH_READY: path computed, train not running
    IN_TRANSIT: train running, not yet at the destination
    ARRIVED: train stopped at the destination, path kept for display

Re-route protocol:
    When links change while IN_TRANSIT, reroute() recomputes from the train's
    current position (never from the original source). The traversed prefix
    is kept as is and the new remaining route is spliced after it. If no
    route is left the journey is stopped.
"""

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import TYPE_CHECKING, Any, Optional

from railway_router.core.shortest_path import compute_path
from railway_router.model.message import (
    InvalidOperationMessage,
    JourneyStartedMessage,
    JourneyStoppedMessage,
    LogMessage,
    NoAlternativePathMessage,
    NoPathFoundMessage,
    PathFoundMessage,
    PathUpdatedMessage,
    TrainArrivedMessage,
    TrainMovedMessage,
)

if TYPE_CHECKING:
    from railway_router.model.railway_graph import RailwayGraph

logger = logging.getLogger(__name__)


class JourneyPhase(Enum):
    IDLE = "idle"
    PATH_READY = "path_ready"
    IN_TRANSIT = "in_transit"
    ARRIVED = "arrived"


@dataclass(frozen=True)
class Journey:
    """Train traversal over a computed path.

    Attributes:
        source: Station the path was calculated from
        destination: Station the path leads to
        path: Station IDs from source to destination (empty = no path)
        position_index: Index of the train in `path`, None if no train
        active: True while the train is running

    The position is kept as an index because a re-routed path may pass the
    same station twice.
    """

    source: Optional[str] = None
    destination: Optional[str] = None
    path: tuple[str, ...] = ()
    position_index: Optional[int] = None
    active: bool = False

    @property
    def position(self) -> Optional[str]:
        """Station the train is at, or None."""
        if self.position_index is None:
            return None
        return self.path[self.position_index]

    @property
    def phase(self) -> JourneyPhase:
        if self.active:
            return JourneyPhase.IN_TRANSIT
        if self.position_index is not None:
            return JourneyPhase.ARRIVED
        if self.path:
            return JourneyPhase.PATH_READY
        return JourneyPhase.IDLE

    @property
    def has_endpoints(self) -> bool:
        return self.source is not None and self.destination is not None

    @property
    def traversed(self) -> tuple[str, ...]:
        """Path prefix up to and including the train position."""
        if self.position_index is None:
            return ()
        return self.path[: self.position_index + 1]

    @property
    def remaining(self) -> tuple[str, ...]:
        """Path from the train position to the destination (whole path if no train)."""
        if self.position_index is None:
            return self.path
        return self.path[self.position_index :]

    def snapshot(self) -> dict[str, Any]:
        """Rendering view: {path, position, active}."""
        return {
            "path": list(self.path),
            "position": self.position,
            "active": self.active,
        }


@dataclass(frozen=True)
class JourneyUpdate:
    """Result of a journey operation."""

    journey: Journey
    messages: tuple[LogMessage, ...] = ()
    accepted: bool = True

    @staticmethod
    def rejected(journey: Journey, *messages: LogMessage) -> "JourneyUpdate":
        """No-op result: journey unchanged, messages explain why."""
        return JourneyUpdate(journey=journey, messages=messages, accepted=False)


# =============================================================================
# TRANSITIONS
# =============================================================================


def reset() -> Journey:
    """Inert journey used whenever the station set is regenerated."""
    return Journey()


def calculate_path(
    journey: Journey,
    graph: "RailwayGraph",
    source: Optional[str],
    destination: Optional[str],
) -> JourneyUpdate:
    """Compute a new path, stopping any running train first.

    On success the journey is PATH_READY with the new path. On failure the
    path is cleared and the journey is IDLE.
    """
    if source is None or destination is None:
        return JourneyUpdate.rejected(
            journey,
            InvalidOperationMessage(action="calculate path", reason="select both start and destination stations"),
        )

    path = tuple(compute_path(graph, source, destination))
    if not path:
        logger.info(f"[ROUTE] No path from {source} to {destination}")
        return JourneyUpdate(
            journey=Journey(source=source, destination=destination),
            messages=(NoPathFoundMessage(source=source, destination=destination),),
        )

    cost = graph.path_cost(path)
    logger.info(f"[ROUTE] Path {source}->{destination}: {list(path)} cost={cost}")
    return JourneyUpdate(
        journey=Journey(source=source, destination=destination, path=path),
        messages=(PathFoundMessage(source=source, destination=destination, path=path, cost=cost or 0),),
    )


def start_journey(journey: Journey) -> JourneyUpdate:
    """Place the train at the source and start running."""
    if journey.phase is not JourneyPhase.PATH_READY or not journey.has_endpoints:
        return JourneyUpdate.rejected(
            journey,
            InvalidOperationMessage(action="start journey", reason=_start_refusal_reason(journey)),
        )

    # Single-station path: the train is already at its destination
    if len(journey.path) == 1:
        started = replace(journey, position_index=0, active=False)
        return JourneyUpdate(
            journey=started,
            messages=(TrainArrivedMessage(destination=journey.path[0]),),
        )

    assert journey.source is not None and journey.destination is not None
    started = replace(journey, position_index=0, active=True)
    return JourneyUpdate(
        journey=started,
        messages=(JourneyStartedMessage(source=journey.source, destination=journey.destination),),
    )


def _start_refusal_reason(journey: Journey) -> str:
    phase = journey.phase
    if phase is JourneyPhase.IN_TRANSIT:
        return "the train is already running"
    if phase is JourneyPhase.ARRIVED:
        return "the train has arrived; stop or calculate a new path first"
    if not journey.path:
        return "no path calculated"
    return "select both start and destination stations"


def proceed(journey: Journey) -> JourneyUpdate:
    """Advance the train to the next station on the path."""
    if journey.phase is not JourneyPhase.IN_TRANSIT:
        return JourneyUpdate.rejected(
            journey,
            InvalidOperationMessage(action="proceed", reason="no journey in progress"),
        )
    assert journey.position_index is not None
    next_index = journey.position_index + 1
    if next_index >= len(journey.path):
        return JourneyUpdate.rejected(
            journey,
            InvalidOperationMessage(action="proceed", reason="already at the last station"),
        )

    station = journey.path[next_index]
    if station == journey.destination:
        arrived = replace(journey, position_index=next_index, active=False)
        return JourneyUpdate(journey=arrived, messages=(TrainArrivedMessage(destination=station),))

    moved = replace(journey, position_index=next_index)
    return JourneyUpdate(journey=moved, messages=(TrainMovedMessage(station=station),))


def stop(journey: Journey) -> JourneyUpdate:
    """Stop the simulation from any state. The path stays for display."""
    stopped = replace(journey, position_index=None, active=False)
    return JourneyUpdate(journey=stopped, messages=(JourneyStoppedMessage(position=journey.position),))


def reroute(journey: Journey, graph: "RailwayGraph") -> JourneyUpdate:
    """Recompute the remaining route after the links changed.

    Only applies while IN_TRANSIT with a destination. The result is rejected
    (without messages) when nothing needs to change.
    """
    if journey.phase is not JourneyPhase.IN_TRANSIT or journey.destination is None:
        return JourneyUpdate.rejected(journey)

    position = journey.position
    assert position is not None
    suffix = tuple(compute_path(graph, position, journey.destination))

    if not suffix:
        logger.info(f"[ROUTE] Re-route from {position} failed, stopping")
        stopped = replace(journey, position_index=None, active=False)
        return JourneyUpdate(journey=stopped, messages=(NoAlternativePathMessage(position=position),))

    new_path = journey.traversed + suffix[1:]
    if new_path == journey.path:
        return JourneyUpdate.rejected(journey)

    logger.info(f"[ROUTE] Re-routed from {position}: {list(journey.path)} -> {list(new_path)}")
    rerouted = replace(journey, path=new_path)
    cost = graph.path_cost(suffix) or 0
    return JourneyUpdate(
        journey=rerouted,
        messages=(PathUpdatedMessage(position=position, remaining=suffix, cost=cost),),
    )
