"""UI Actions - All action functions for the railway router.

Centralizes every operation the presentation layer can trigger. Actions
mutate the graph, run journey transitions through the state machine and
record log messages. They never call Streamlit, so panels decide when to
rerun and tests can call them directly.

This module handles:
- Station regeneration (resets the journey)
- Link edits (add/update/remove) followed by the re-route protocol
- Journey operations (calculate path, start, proceed, stop)
"""

import logging
from typing import Any

from railway_router.model import journey as journey_ops
from railway_router.model.journey import Journey, JourneyUpdate
from railway_router.model.message import (
    InvalidLinkMessage,
    LinkAddedMessage,
    LinkRemovedMessage,
    LinkUpdatedMessage,
    StationsRegeneratedMessage,
)
from railway_router.model.railway_graph import RailwayGraph
from railway_router.ui.state_machine import JourneyStateMachine
from railway_router.ui.validators import validate_link

logger = logging.getLogger(__name__)


def _dispatch(sm: JourneyStateMachine, event: str, update: JourneyUpdate) -> Journey:
    """Send an accepted update as an event; log rejected ones without a transition."""
    if not update.accepted:
        sm.context.log.extend(update.messages)
        return sm.journey
    if not sm.try_transition(event, update=update):
        raise RuntimeError(
            f"Journey update for '{event}' leads to phase {update.journey.phase.value} "
            f"which is not reachable from {sm.get_state_name()}"
        )
    return sm.journey


# =============================================================================
# GRAPH EDITS
# =============================================================================


def regenerate_stations(sm: JourneyStateMachine, graph: RailwayGraph, count: int) -> list[str]:
    """Replace the station set, clear all links and reset the journey."""
    stations = graph.regenerate_stations(count)
    sm.try_transition("reset_journey")
    sm.context.selection.reset(stations)
    sm.context.log.append(StationsRegeneratedMessage(stations=tuple(stations)))
    return stations


def add_or_update_link(sm: JourneyStateMachine, graph: RailwayGraph, a: str, b: str, weight: Any) -> bool:
    """Add a link or change the weight of an existing one.

    Returns:
        True if the graph changed, False if the input was rejected or the
        weight was already set.
    """
    error = validate_link(graph=graph, a=a, b=b, weight=weight)
    if error is not None:
        sm.context.log.append(error)
        return False

    old_weight = graph.link_weight(a, b)
    if old_weight == weight:
        return False

    link, created = graph.upsert_link(a=a, b=b, weight=weight)
    if created:
        sm.context.log.append(LinkAddedMessage(a=link.a, b=link.b, weight=link.weight))
    else:
        assert old_weight is not None
        sm.context.log.append(LinkUpdatedMessage(a=link.a, b=link.b, old_weight=old_weight, new_weight=link.weight))

    reroute_if_in_transit(sm=sm, graph=graph)
    return True


def remove_link(sm: JourneyStateMachine, graph: RailwayGraph, a: str, b: str) -> bool:
    """Disconnect two stations. Returns True if a link was removed."""
    link = graph.remove_link(a, b)
    if link is None:
        sm.context.log.append(InvalidLinkMessage(reason=f"no link between {a} and {b}"))
        return False
    sm.context.log.append(LinkRemovedMessage(a=link.a, b=link.b))
    reroute_if_in_transit(sm=sm, graph=graph)
    return True


def reroute_if_in_transit(sm: JourneyStateMachine, graph: RailwayGraph) -> Journey:
    """Re-route protocol, run synchronously after every link change.

    Recomputes unconditionally while the train is running, even when the
    changed link is far from the remaining route.
    """
    if not sm.is_in_transit:
        return sm.journey
    update = journey_ops.reroute(journey=sm.journey, graph=graph)
    return _dispatch(sm, "reroute", update)


# =============================================================================
# JOURNEY OPERATIONS
# =============================================================================


def calculate_path(
    sm: JourneyStateMachine,
    graph: RailwayGraph,
    source: str | None,
    destination: str | None,
) -> Journey:
    """Compute the shortest path between the selected stations."""
    sm.context.selection.source = source
    sm.context.selection.destination = destination
    update = journey_ops.calculate_path(journey=sm.journey, graph=graph, source=source, destination=destination)
    return _dispatch(sm, "calculate_path", update)


def start_journey(sm: JourneyStateMachine) -> Journey:
    """Place the train at the source station."""
    return _dispatch(sm, "start_journey", journey_ops.start_journey(sm.journey))


def proceed(sm: JourneyStateMachine) -> Journey:
    """Move the train to the next station on the path."""
    return _dispatch(sm, "proceed", journey_ops.proceed(sm.journey))


def stop_journey(sm: JourneyStateMachine) -> Journey:
    """Stop the simulation, keeping the last path for display."""
    return _dispatch(sm, "stop_journey", journey_ops.stop(sm.journey))
