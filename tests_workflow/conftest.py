"""Shared pytest fixtures for railway_router workflow tests.

Minimal fixtures: a state machine and the reference networks used by the
end-to-end scenarios.

NETWORKS:
    triangle: A-B=1, B-C=1, A-C=5 (A -> B -> C beats the direct link)
    line: A-B=1, B-C=1 (train at B is stranded when B-C goes away)
    with_isolated: triangle plus D without links
"""

import pytest

from railway_router.model.railway_graph import RailwayGraph
from railway_router.ui.state_machine import JourneyStateMachine, SimulationContext

SMAndCtx = tuple[JourneyStateMachine, SimulationContext]


def _network(station_count: int, links: list[tuple[str, str, int]]) -> RailwayGraph:
    graph = RailwayGraph(station_count=station_count)
    for a, b, weight in links:
        graph.upsert_link(a=a, b=b, weight=weight)
    return graph


@pytest.fixture
def sm_and_ctx() -> SMAndCtx:
    """Fresh state machine in Idle with the transition logger attached."""
    return JourneyStateMachine.create(add_log_listener=True)


@pytest.fixture
def triangle() -> RailwayGraph:
    return _network(3, [("A", "B", 1), ("B", "C", 1), ("A", "C", 5)])


@pytest.fixture
def line() -> RailwayGraph:
    return _network(3, [("A", "B", 1), ("B", "C", 1)])


@pytest.fixture
def with_isolated() -> RailwayGraph:
    return _network(4, [("A", "B", 1), ("B", "C", 1), ("A", "C", 5)])
