"""User interface components for the railway router.

File Structure (layout-based naming):
- left_panel.py: Sidebar with station count and link editing
- right_panel.py: Route selection, journey controls, log panel
- network_chart.py: Plotly network with path and train

Core Components:
- state_machine.py: JourneyStateMachine (4 states) + SimulationContext
- actions.py: All action functions (graph edits, journey operations, re-route)
- validators.py: Input validation with Optional[LogMessage] returns
"""

from railway_router.ui.actions import (
    add_or_update_link,
    calculate_path,
    proceed,
    regenerate_stations,
    remove_link,
    reroute_if_in_transit,
    start_journey,
    stop_journey,
)
from railway_router.ui.left_panel import SidebarRenderer
from railway_router.ui.network_chart import NetworkChart
from railway_router.ui.right_panel import render_control_panel, render_log_panel
from railway_router.ui.state_machine import (
    JourneyStateMachine,
    SimulationContext,
    TransitionLogListener,
)

__all__ = [
    "JourneyStateMachine",
    "SimulationContext",
    "TransitionLogListener",
    "NetworkChart",
    "SidebarRenderer",
    "render_control_panel",
    "render_log_panel",
    "add_or_update_link",
    "calculate_path",
    "proceed",
    "regenerate_stations",
    "remove_link",
    "reroute_if_in_transit",
    "start_journey",
    "stop_journey",
]
