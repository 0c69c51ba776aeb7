"""State Machine Transition Matrix - Parameterized validation of all event/state combinations.

Uses pytest.mark.parametrize to create a data-driven truth table for state transitions.
This serves as executable documentation of the state machine contract.

Test Categories:
    1. Valid transitions: Event moves to the target selected by the update's journey
    2. Invalid transitions: Event raises TransitionNotAllowed from forbidden states

Matrix Reference (from state_machine.py docstring):
    4 states × 5 update-carrying events = 20 combinations
    11 valid (18 rows counting both guarded targets)
    9 invalid
    reset_journey is valid from all 4 states
"""

import pytest
from statemachine.exceptions import TransitionNotAllowed

from railway_router.model.journey import Journey, JourneyUpdate
from railway_router.ui.state_machine import JourneyStateMachine

# =============================================================================
# SAMPLE JOURNEYS (one per resulting phase)
# =============================================================================

PATH = ("A", "B", "C")

NO_PATH = Journey(source="A", destination="D")
READY = Journey(source="A", destination="C", path=PATH)
RUNNING = Journey(source="A", destination="C", path=PATH, position_index=1, active=True)
ARRIVED = Journey(source="A", destination="C", path=PATH, position_index=2)
SINGLE_ARRIVED = Journey(source="B", destination="B", path=("B",), position_index=0)

ALL_STATES = ["idle", "path_ready", "in_transit", "arrived"]


# =============================================================================
# TRUTH TABLE: Valid Transitions
# =============================================================================
# Format: (event_name, source_state, resulting_journey, expected_target)

VALID_TRANSITIONS: list[tuple[str, str, Journey, str]] = [
    # calculate_path from anywhere
    *[("calculate_path", state, READY, "path_ready") for state in ALL_STATES],
    *[("calculate_path", state, NO_PATH, "idle") for state in ALL_STATES],
    # start_journey only from PATH_READY
    ("start_journey", "path_ready", RUNNING, "in_transit"),
    ("start_journey", "path_ready", SINGLE_ARRIVED, "arrived"),
    # proceed only while running
    ("proceed", "in_transit", RUNNING, "in_transit"),
    ("proceed", "in_transit", ARRIVED, "arrived"),
    # reroute: adopt new route or stop
    ("reroute", "in_transit", RUNNING, "in_transit"),
    ("reroute", "in_transit", READY, "path_ready"),
    # stop_journey keeps the path
    ("stop_journey", "idle", Journey(), "idle"),
    ("stop_journey", "path_ready", READY, "path_ready"),
    ("stop_journey", "in_transit", READY, "path_ready"),
    ("stop_journey", "arrived", READY, "path_ready"),
]


# =============================================================================
# TRUTH TABLE: Invalid Transitions (Events from forbidden states)
# =============================================================================
# Format: (event_name, invalid_source_states)

INVALID_TRANSITIONS: list[tuple[str, list[str]]] = [
    # Train can only depart with a ready path
    ("start_journey", ["idle", "in_transit", "arrived"]),
    # Nothing to move unless running
    ("proceed", ["idle", "path_ready", "arrived"]),
    # Re-route only applies to a running train
    ("reroute", ["idle", "path_ready", "arrived"]),
]


def _force_state(sm: JourneyStateMachine, state_name: str) -> None:
    """Force state machine to a specific state for testing.

    WARNING: This bypasses normal transition guards. Use only for testing.
    Direct assignment to current_state is supported by python-statemachine v2.
    """
    sm.current_state = getattr(sm, state_name)


class TestTransitionMatrix:
    """Parameterized tests validating the complete state machine transition matrix."""

    @pytest.mark.parametrize("event,source,journey,target", VALID_TRANSITIONS)
    def test_valid_transitions(
        self,
        sm_and_ctx: tuple,
        event: str,
        source: str,
        journey: Journey,
        target: str,
    ) -> None:
        """Guards pick the target from the phase of the resulting journey."""
        sm, ctx = sm_and_ctx
        _force_state(sm=sm, state_name=source)

        sm.send(event, update=JourneyUpdate(journey=journey))

        assert sm.current_state.id == target
        assert ctx.journey is journey
        assert sm.is_consistent()

    @pytest.mark.parametrize("event,invalid_states", INVALID_TRANSITIONS)
    def test_invalid_transitions_raise_error(
        self,
        sm_and_ctx: tuple,
        event: str,
        invalid_states: list[str],
    ) -> None:
        """Invalid transitions raise TransitionNotAllowed."""
        sm, _ = sm_and_ctx

        for state_name in invalid_states:
            _force_state(sm=sm, state_name=state_name)
            with pytest.raises(TransitionNotAllowed):
                sm.send(event, update=JourneyUpdate(journey=RUNNING))

    @pytest.mark.parametrize("source", ALL_STATES)
    def test_reset_from_every_state(self, sm_and_ctx: tuple, source: str) -> None:
        sm, ctx = sm_and_ctx
        _force_state(sm=sm, state_name=source)
        ctx.journey = RUNNING

        sm.send("reset_journey")

        assert sm.is_idle
        assert ctx.journey == Journey()

    def test_matrix_covers_every_combination(self) -> None:
        """Every (event, state) pair is either valid or invalid, never both."""
        events = ["calculate_path", "start_journey", "proceed", "reroute", "stop_journey"]
        valid = {(event, source) for event, source, _, _ in VALID_TRANSITIONS}
        invalid = {(event, state) for event, states in INVALID_TRANSITIONS for state in states}
        assert valid.isdisjoint(invalid)
        assert valid | invalid == {(event, state) for event in events for state in ALL_STATES}
