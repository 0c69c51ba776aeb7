"""State machine for the train journey simulation.

Uses python-statemachine for robust state management with:
- Clear state definitions mirroring the journey phases
- Guarded transitions (conditions read the pre-computed JourneyUpdate)
- before_* hooks that install the new Journey and record log messages
- A listener for transition logging

Architecture Overview
---------------------
The journey logic itself lives in pure functions (model/journey.py). The
action layer computes a JourneyUpdate first and then sends the matching
event with `update=...`:

1. Action computes update = journey.proceed(ctx.journey)
2. Rejected updates are only logged; no event is sent
3. Accepted updates are sent as events; guards pick the target state
4. before_<event> installs update.journey on the context and logs messages

The machine state therefore always equals ctx.journey.phase.

States:
    IDLE: No path, no train
    PATH_READY: Path calculated, train not running
    IN_TRANSIT: Train running towards the destination
    ARRIVED: Train stopped at the destination (path still shown)

Transitions:
    ANY -> PATH_READY | IDLE: calculate_path (path found / not found)
    PATH_READY -> IN_TRANSIT | ARRIVED: start_journey
    IN_TRANSIT -> IN_TRANSIT | ARRIVED: proceed
    IN_TRANSIT -> IN_TRANSIT | PATH_READY: reroute (path updated / no alternative)
    ANY -> PATH_READY | IDLE: stop_journey (path kept if there was one)
    ANY -> IDLE: reset_journey (stations regenerated)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from statemachine import State, StateMachine
from statemachine.exceptions import TransitionNotAllowed

from railway_router.constants import LogConfig
from railway_router.model.journey import Journey, JourneyPhase, JourneyUpdate
from railway_router.model.message import LogMessage

logger = logging.getLogger(__name__)


@dataclass
class RouteSelectionContext:
    """Start/destination stations selected in the UI."""

    source: str | None = None
    destination: str | None = None

    def reset(self, stations: list[str]) -> None:
        """Default to first and last station of a fresh station set."""
        self.source = stations[0] if stations else None
        self.destination = stations[-1] if stations else None

    def has_selection(self) -> bool:
        return self.source is not None and self.destination is not None


@dataclass
class EventLog:
    """Bounded list of log messages, oldest first."""

    entries: list[LogMessage] = field(default_factory=list)
    max_entries: int = LogConfig.MAX_ENTRIES

    def append(self, message: LogMessage) -> None:
        self.entries.append(message)
        logger.info(f"[LOG] {message.message}")
        # Trim oldest entries if log is too large
        while len(self.entries) > self.max_entries:
            self.entries.pop(0)

    def extend(self, messages: tuple[LogMessage, ...] | list[LogMessage]) -> None:
        for message in messages:
            self.append(message)

    def latest(self, count: int = LogConfig.VISIBLE_ENTRIES) -> list[LogMessage]:
        """Newest entries first."""
        return list(reversed(self.entries[-count:]))

    @property
    def last(self) -> LogMessage | None:
        return self.entries[-1] if self.entries else None

    def clear(self) -> None:
        self.entries = []

    def __len__(self) -> int:
        return len(self.entries)


@dataclass
class SimulationContext:
    """Shared context/model for the journey state machine.

    Note: The 'state' field is managed by python-statemachine when this
    object is passed as the model.
    """

    # State managed by python-statemachine (model pattern)
    state: str | None = None

    journey: Journey = field(default_factory=Journey)
    selection: RouteSelectionContext = field(default_factory=RouteSelectionContext)
    log: EventLog = field(default_factory=EventLog)

    def apply(self, update: JourneyUpdate) -> None:
        """Install the next journey and record its messages."""
        self.journey = update.journey
        self.log.extend(update.messages)

    def __repr__(self) -> str:
        return (
            f"SimulationContext(state={self.state}, "
            f"path={list(self.journey.path)}, "
            f"position={self.journey.position}, "
            f"active={self.journey.active})"
        )


class TransitionLogListener:
    """Listener that logs every state transition.

    Usage:
        sm = JourneyStateMachine(context=context)
        sm.add_listener(TransitionLogListener())
    """

    def after_transition(self, event: str, source: State, target: State) -> None:
        logger.info(f"[STATE] {source.name} --({event})--> {target.name}")


class JourneyStateMachine(StateMachine):
    """State machine for the train journey.

    See module docstring for the complete transition table. Every event
    except reset_journey expects an accepted JourneyUpdate as `update`.
    """

    # ==========================================================================
    # State Definitions
    # ==========================================================================

    idle = State("Idle", initial=True)
    path_ready = State("PathReady")
    in_transit = State("InTransit")
    arrived = State("Arrived")

    # ==========================================================================
    # Transitions
    # ==========================================================================

    # New path request; any running train is stopped first
    calculate_path = (
        idle.to(path_ready, cond="update_has_path")
        | idle.to(idle, unless="update_has_path")
        | path_ready.to(path_ready, cond="update_has_path")
        | path_ready.to(idle, unless="update_has_path")
        | in_transit.to(path_ready, cond="update_has_path")
        | in_transit.to(idle, unless="update_has_path")
        | arrived.to(path_ready, cond="update_has_path")
        | arrived.to(idle, unless="update_has_path")
    )

    # Place train at source (single-station path arrives immediately)
    start_journey = path_ready.to(arrived, cond="update_arrived") | path_ready.to(
        in_transit, unless="update_arrived"
    )

    # Move to next station
    proceed = in_transit.to(arrived, cond="update_arrived") | in_transit.to(in_transit, unless="update_arrived")

    # Links changed mid-journey: adopt new route or stop
    reroute = in_transit.to(in_transit, cond="update_in_transit") | in_transit.to(
        path_ready, unless="update_in_transit"
    )

    # Stop simulation; path is kept for display
    stop_journey = idle.to(idle) | path_ready.to(path_ready) | in_transit.to(path_ready) | arrived.to(path_ready)

    # Station set regenerated
    reset_journey = idle.to(idle) | path_ready.to(idle) | in_transit.to(idle) | arrived.to(idle)

    # ==========================================================================
    # Guards (Conditions)
    # ==========================================================================

    def update_has_path(self, update: JourneyUpdate) -> bool:
        """Guard: Resulting journey still has a path."""
        return bool(update.journey.path)

    def update_arrived(self, update: JourneyUpdate) -> bool:
        """Guard: Resulting journey has the train at its destination."""
        return update.journey.phase is JourneyPhase.ARRIVED

    def update_in_transit(self, update: JourneyUpdate) -> bool:
        """Guard: Resulting journey keeps the train running."""
        return update.journey.phase is JourneyPhase.IN_TRANSIT

    # ==========================================================================
    # State Check Properties
    # ==========================================================================

    @property
    def is_idle(self) -> bool:
        return self.idle.is_active

    @property
    def is_path_ready(self) -> bool:
        return self.path_ready.is_active

    @property
    def is_in_transit(self) -> bool:
        return self.in_transit.is_active

    @property
    def is_arrived(self) -> bool:
        return self.arrived.is_active

    # ==========================================================================
    # Transition Actions (before_* hooks)
    # ==========================================================================

    def before_calculate_path(self, update: JourneyUpdate) -> None:
        self.context.apply(update)

    def before_start_journey(self, update: JourneyUpdate) -> None:
        self.context.apply(update)

    def before_proceed(self, update: JourneyUpdate) -> None:
        self.context.apply(update)

    def before_reroute(self, update: JourneyUpdate) -> None:
        self.context.apply(update)

    def before_stop_journey(self, update: JourneyUpdate) -> None:
        self.context.apply(update)

    def before_reset_journey(self) -> None:
        self.context.journey = Journey()

    # ==========================================================================
    # Initialization
    # ==========================================================================

    def __init__(self, context: SimulationContext | None = None, start_value: str | None = None) -> None:
        """Initialize state machine with model pattern.

        Args:
            context: Shared context/model (creates new if None)
            start_value: Optional initial state value (for restoring state)
        """
        model = context or SimulationContext()
        super().__init__(model=model, start_value=start_value)

    # ==========================================================================
    # Utility Methods
    # ==========================================================================

    @property
    def context(self) -> SimulationContext:
        """Alias for model."""
        return self.model

    @property
    def journey(self) -> Journey:
        return self.model.journey

    def get_state_name(self) -> str:
        """Get current state name for display."""
        return self.current_state.name

    def is_consistent(self) -> bool:
        """True if the machine state matches the phase of the current journey."""
        return self.current_state.id == self.context.journey.phase.value

    def __repr__(self) -> str:
        return f"JourneyStateMachine(state={self.get_state_name()}, model={self.context!r})"

    def try_transition(self, event: str, **kwargs: Any) -> bool:
        """Attempt a transition, returning success/failure.

        Args:
            event: Transition event name
            **kwargs: Arguments for transition

        Returns:
            True if transition succeeded, False otherwise.
        """
        try:
            self.send(event, **kwargs)
            return True
        except TransitionNotAllowed:
            logger.warning(f"Transition '{event}' not allowed from {self.get_state_name()}")
            return False

    @staticmethod
    def create(add_log_listener: bool = True) -> tuple["JourneyStateMachine", SimulationContext]:
        """Factory method to create state machine with context.

        Args:
            add_log_listener: If True, adds TransitionLogListener.

        Returns:
            Tuple of (JourneyStateMachine, SimulationContext)
        """
        context = SimulationContext()
        sm = JourneyStateMachine(context=context)
        if add_log_listener:
            sm.add_listener(TransitionLogListener())
        logger.info("Created JourneyStateMachine")
        return sm, context
