"""Shared pytest fixtures for railway_router tests.

Provides small railway networks with hand-checked shortest paths and a
state machine without listeners.

NETWORKS:
    triangle: A-B=1, B-C=1, A-C=5 (shortest A->C is A -> B -> C, cost 2)
    line: A-B=1, B-C=1 only (removing B-C strands a train at B)
    with_isolated: triangle plus station D without links
"""

import pytest

from railway_router.model.railway_graph import RailwayGraph
from railway_router.ui.state_machine import JourneyStateMachine, SimulationContext


def build_graph(station_count: int, links: list[tuple[str, str, int]]) -> RailwayGraph:
    """Graph with the given links added in order."""
    graph = RailwayGraph(station_count=station_count)
    for a, b, weight in links:
        graph.upsert_link(a=a, b=b, weight=weight)
    return graph


# =============================================================================
# GRAPH FIXTURES
# =============================================================================


@pytest.fixture
def empty_graph() -> RailwayGraph:
    """Three stations A, B, C and no links."""
    return RailwayGraph(station_count=3)


@pytest.fixture
def triangle_graph() -> RailwayGraph:
    """A-B=1, B-C=1, A-C=5."""
    return build_graph(3, [("A", "B", 1), ("B", "C", 1), ("A", "C", 5)])


@pytest.fixture
def line_graph() -> RailwayGraph:
    """A-B=1, B-C=1 (no bypass around B-C)."""
    return build_graph(3, [("A", "B", 1), ("B", "C", 1)])


@pytest.fixture
def graph_with_isolated() -> RailwayGraph:
    """Triangle plus isolated station D."""
    return build_graph(4, [("A", "B", 1), ("B", "C", 1), ("A", "C", 5)])


# =============================================================================
# STATE MACHINE FIXTURES
# =============================================================================


@pytest.fixture
def sm_and_ctx() -> tuple[JourneyStateMachine, SimulationContext]:
    """Fresh state machine in Idle, without the logging listener."""
    return JourneyStateMachine.create(add_log_listener=False)


@pytest.fixture
def sm(sm_and_ctx: tuple[JourneyStateMachine, SimulationContext]) -> JourneyStateMachine:
    return sm_and_ctx[0]


@pytest.fixture
def network_builder():
    """Factory fixture: network_builder(station_count, [(a, b, weight), ...])."""
    return build_graph
