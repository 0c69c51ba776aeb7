"""Configuration constants for Railway Router.

All configurable parameters are centralized here for easy tuning.

Classes:
    AppConfig: UI application settings
    StationConfig: Station count limits and identifier alphabet
    LinkConfig: Link weight bounds
    LogConfig: Event log settings
    StyleConfig: Visual colors and icons
    ChartConfig: Network chart dimensions
"""

import string
from pathlib import Path

# Package root directory (where railway_router/ lives)
PACKAGE_DIR = Path(__file__).parent

# Project root directory (parent of railway_router/)
PROJECT_ROOT = PACKAGE_DIR.parent


class AppConfig:
    """UI application settings."""

    TITLE = "Railway Router - Shortest Path Train Simulation"
    HEADER = "Train Traffic Visualization"
    ICON = "🚆"
    LAYOUT = "wide"


class StationConfig:
    """Station count limits and identifier alphabet."""

    # Identifiers are taken in order from this alphabet: A, B, C, ...
    ALPHABET = string.ascii_uppercase

    MIN_COUNT = 2
    MAX_COUNT = len(ALPHABET)  # 26
    DEFAULT_COUNT = 3

    assert MIN_COUNT <= DEFAULT_COUNT <= MAX_COUNT


class LinkConfig:
    """Link weight bounds.

    The core only requires weight > 0; the upper bound is enforced by the UI inputs.
    """

    MIN_WEIGHT = 1
    MAX_WEIGHT = 100
    DEFAULT_WEIGHT = 1

    # Separator for canonical link keys ("A-B")
    KEY_SEPARATOR = "-"


class LogConfig:
    """Event log settings."""

    # Oldest entries are discarded beyond this size
    MAX_ENTRIES = 200

    # Entries shown in the log panel (newest first)
    VISIBLE_ENTRIES = 25


class StyleConfig:
    """Visual colors and icons."""

    STATION_COLOR = "#4C78A8"
    SOURCE_COLOR = "#2CA02C"
    DESTINATION_COLOR = "#D62728"
    TRAIN_COLOR = "#FF7F0E"

    LINK_COLOR = "#B0B0B0"
    TRAVERSED_COLOR = "#7F7F7F"
    ROUTE_COLOR = "#1F77B4"

    LINK_WIDTH = 2
    ROUTE_WIDTH = 5

    TRAIN_ICON = "🚆"

    # Icons for log entries keyed by MessageLevel value
    LOG_ICONS = {
        "info": "ℹ️",
        "success": "✅",
        "warning": "⚠️",
        "error": "⛔",
    }


class ChartConfig:
    """Network chart dimensions."""

    WIDTH = 700
    HEIGHT = 600

    # Stations are placed on a circle of this radius around the origin
    LAYOUT_RADIUS = 1.0
    # Padding around the circle in chart units
    AXIS_PADDING = 0.3

    STATION_MARKER_SIZE = 34
    TRAIN_MARKER_SIZE = 18
    # Train marker is drawn slightly above its station
    TRAIN_OFFSET_Y = 0.13
