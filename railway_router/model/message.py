"""Message - Human-readable status lines for the railway router log panel.

Every core operation reports what happened as one or more LogMessage objects.
The action layer appends them to the event log; the UI renders them newest
first and shows rejected input additionally as a toast.

Levels:
- INFO: graph edits, informational results (including "no path found")
- SUCCESS: path found, arrival
- WARNING: invalid operations, forced stop after failed re-route
- ERROR: rejected input (invalid edge)
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum

from railway_router.constants import StyleConfig

logger = logging.getLogger(__name__)


class MessageLevel(Enum):
    """Display level for log messages."""

    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


def format_path(path: tuple[str, ...] | list[str]) -> str:
    """Render a path as "A -> B -> C"."""
    return " -> ".join(path)


@dataclass(frozen=True)
class LogMessage(ABC):
    """Abstract base class for log panel entries.

    Subclasses store the facts as fields and build the text in `message`.
    """

    @property
    @abstractmethod
    def message(self) -> str:
        """Formatted status line."""
        raise NotImplementedError

    @property
    def level(self) -> MessageLevel:
        return MessageLevel.INFO

    @property
    def icon(self) -> str:
        return StyleConfig.LOG_ICONS[self.level.value]

    def display(self) -> None:
        """Render this message inline using the matching Streamlit function."""
        import streamlit as st

        render_fn = {
            MessageLevel.INFO: st.info,
            MessageLevel.SUCCESS: st.success,
            MessageLevel.WARNING: st.warning,
            MessageLevel.ERROR: st.error,
        }[self.level]
        render_fn(self.message)

    def toast(self) -> None:
        """Show this message as a transient popup and log it."""
        import streamlit as st

        logger.info(f"[TOAST] {self.icon} {self.message}")
        st.toast(f"{self.icon} {self.message}")

    def __str__(self) -> str:
        return self.message


# =============================================================================
# GRAPH EDITS
# =============================================================================


@dataclass(frozen=True)
class StationsRegeneratedMessage(LogMessage):
    """Station set replaced; all links cleared."""

    stations: tuple[str, ...]

    @property
    def message(self) -> str:
        return f"Generated {len(self.stations)} stations: {', '.join(self.stations)}. All links cleared."


@dataclass(frozen=True)
class LinkAddedMessage(LogMessage):
    a: str
    b: str
    weight: int

    @property
    def message(self) -> str:
        return f"Added link {self.a} - {self.b} with weight {self.weight}."


@dataclass(frozen=True)
class LinkUpdatedMessage(LogMessage):
    a: str
    b: str
    old_weight: int
    new_weight: int

    @property
    def message(self) -> str:
        return f"Updated link {self.a} - {self.b}: weight {self.old_weight} -> {self.new_weight}."


@dataclass(frozen=True)
class LinkRemovedMessage(LogMessage):
    a: str
    b: str

    @property
    def message(self) -> str:
        return f"Removed link {self.a} - {self.b}."


@dataclass(frozen=True)
class InvalidLinkMessage(LogMessage):
    """Link input rejected before reaching the graph."""

    reason: str  # e.g. "start and end stations must differ"

    @property
    def level(self) -> MessageLevel:
        return MessageLevel.ERROR

    @property
    def message(self) -> str:
        return f"Invalid edge: {self.reason}."


# =============================================================================
# ROUTING
# =============================================================================


@dataclass(frozen=True)
class PathFoundMessage(LogMessage):
    source: str
    destination: str
    path: tuple[str, ...]
    cost: int

    @property
    def level(self) -> MessageLevel:
        return MessageLevel.SUCCESS

    @property
    def message(self) -> str:
        return (
            f"Shortest path from {self.source} to {self.destination}: "
            f"{format_path(self.path)} (total weight {self.cost})"
        )


@dataclass(frozen=True)
class NoPathFoundMessage(LogMessage):
    """Not an error: the destination is simply unreachable."""

    source: str
    destination: str

    @property
    def message(self) -> str:
        return f"No path found from {self.source} to {self.destination}."


@dataclass(frozen=True)
class PathUpdatedMessage(LogMessage):
    """Re-route adopted a new remaining route."""

    position: str
    remaining: tuple[str, ...]  # new route from the train position to the destination
    cost: int

    @property
    def message(self) -> str:
        return (
            f"Network changed. Path updated from {self.position}: "
            f"{format_path(self.remaining)} (remaining weight {self.cost})"
        )


@dataclass(frozen=True)
class NoAlternativePathMessage(LogMessage):
    """Re-route found no way on from the train's position."""

    position: str

    @property
    def level(self) -> MessageLevel:
        return MessageLevel.WARNING

    @property
    def message(self) -> str:
        return f"No alternative path found from {self.position}. Stopping simulation."


# =============================================================================
# TRAIN MOVEMENT
# =============================================================================


@dataclass(frozen=True)
class JourneyStartedMessage(LogMessage):
    source: str
    destination: str

    @property
    def message(self) -> str:
        return f"{StyleConfig.TRAIN_ICON} Train departed from {self.source} towards {self.destination}."


@dataclass(frozen=True)
class TrainMovedMessage(LogMessage):
    station: str

    @property
    def message(self) -> str:
        return f"Train moved to {self.station}."


@dataclass(frozen=True)
class TrainArrivedMessage(LogMessage):
    destination: str

    @property
    def level(self) -> MessageLevel:
        return MessageLevel.SUCCESS

    @property
    def message(self) -> str:
        return f"Train arrived at destination {self.destination}."


@dataclass(frozen=True)
class JourneyStoppedMessage(LogMessage):
    """Simulation stopped by the user."""

    position: str | None = None

    @property
    def message(self) -> str:
        if self.position is None:
            return "Simulation stopped."
        return f"Simulation stopped at {self.position}."


@dataclass(frozen=True)
class InvalidOperationMessage(LogMessage):
    """Operation not possible in the current journey state. Nothing changed."""

    action: str  # e.g. "proceed"
    reason: str  # e.g. "no journey in progress"

    @property
    def level(self) -> MessageLevel:
        return MessageLevel.WARNING

    @property
    def message(self) -> str:
        return f"Cannot {self.action}: {self.reason}."
