"""Control panel and log panel for the journey simulation.

Renders:
- Start/destination selection and the Calculate Path button
- Journey controls (Start Journey, Proceed, Stop) enabled per state
- Journey status (path, train position, state)
- Log panel with the newest messages first
"""

import logging

import streamlit as st

from railway_router.constants import LogConfig, StyleConfig
from railway_router.model.message import format_path
from railway_router.model.railway_graph import RailwayGraph
from railway_router.ui import actions
from railway_router.ui.infra import get_widget_version, reload_ui
from railway_router.ui.state_machine import JourneyStateMachine, SimulationContext

logger = logging.getLogger(__name__)


def _station_index(stations: list[str], station: str | None, default: int) -> int:
    if station in stations:
        return stations.index(station)
    return default


def render_control_panel(sm: JourneyStateMachine, graph: RailwayGraph) -> None:
    """Render route selection and journey buttons."""
    ctx = sm.context
    stations = graph.stations
    version = get_widget_version()

    st.subheader("🧭 Route")
    col_src, col_dst = st.columns(2)
    with col_src:
        source = st.selectbox(
            "Start station",
            options=stations,
            index=_station_index(stations, ctx.selection.source, default=0),
            key=f"route_source_{version}",
        )
    with col_dst:
        destination = st.selectbox(
            "Destination station",
            options=stations,
            index=_station_index(stations, ctx.selection.destination, default=len(stations) - 1),
            key=f"route_destination_{version}",
        )
    ctx.selection.source = source
    ctx.selection.destination = destination

    if st.button("📐 Calculate Path", type="primary", use_container_width=True):
        actions.calculate_path(sm=sm, graph=graph, source=source, destination=destination)
        reload_ui()

    st.subheader(f"{StyleConfig.TRAIN_ICON} Simulation")
    col_start, col_next, col_stop = st.columns(3)
    with col_start:
        if st.button("▶️ Start Journey", disabled=not sm.is_path_ready, use_container_width=True):
            actions.start_journey(sm=sm)
            reload_ui()
    with col_next:
        if st.button("⏭️ Proceed", disabled=not sm.is_in_transit, use_container_width=True):
            actions.proceed(sm=sm)
            reload_ui()
    with col_stop:
        if st.button("⏹️ Stop", disabled=sm.is_idle, use_container_width=True):
            actions.stop_journey(sm=sm)
            reload_ui()

    render_journey_status(sm=sm)


def render_journey_status(sm: JourneyStateMachine) -> None:
    """Show the current journey snapshot."""
    snapshot = sm.journey.snapshot()
    path = snapshot["path"]
    st.markdown(f"**State:** {sm.get_state_name()}")
    st.markdown(f"**Path:** {format_path(path) if path else '-'}")
    position = snapshot["position"]
    st.markdown(f"**Train at:** {position if position is not None else '-'}")


def render_log_panel(ctx: SimulationContext) -> None:
    """Render the newest log entries first."""
    st.subheader("📜 Log")
    entries = ctx.log.latest(LogConfig.VISIBLE_ENTRIES)
    if not entries:
        st.caption("No events yet.")
        return
    with st.container(height=300):
        for entry in entries:
            st.markdown(f"{entry.icon} {entry.message}")
