"""Railway Router - Interactive shortest-path train simulation.

Build a railway network (stations and weighted links), calculate the
shortest path between two stations and step a train along it. Editing
links while the train is running re-routes it from its current station.

Run: streamlit run railway_router/app.py
"""

import logging
import traceback

import streamlit as st

from railway_router.constants import AppConfig, ChartConfig, StationConfig
from railway_router.model.railway_graph import RailwayGraph
from railway_router.ui import (
    JourneyStateMachine,
    NetworkChart,
    SidebarRenderer,
    render_control_panel,
    render_log_panel,
)
from railway_router.ui.infra import bump_widget_version

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


# =============================================================================
# SESSION STATE
# =============================================================================


def init_session_state() -> None:
    """Initialize session state with graph, state machine and chart renderer."""
    if "graph" not in st.session_state:
        st.session_state.graph = RailwayGraph(station_count=StationConfig.DEFAULT_COUNT)

    if "state_machine" not in st.session_state:
        sm, ctx = JourneyStateMachine.create()
        ctx.selection.reset(st.session_state.graph.stations)
        st.session_state.state_machine = sm
        st.session_state.context = ctx

    if "network_chart" not in st.session_state:
        st.session_state.network_chart = NetworkChart(width=ChartConfig.WIDTH, height=ChartConfig.HEIGHT)

    if "widget_version" not in st.session_state:
        st.session_state.widget_version = 0


def reset_ui_state() -> None:
    """Reset journey state while preserving the railway graph.

    Called when an error occurs to recover gracefully.
    """
    logger.info("Resetting UI state due to error recovery")
    sm, ctx = JourneyStateMachine.create()
    ctx.selection.reset(st.session_state.graph.stations)
    st.session_state.state_machine = sm
    st.session_state.context = ctx
    bump_widget_version()
    logger.info("UI state reset complete - graph preserved")


# =============================================================================
# MAIN
# =============================================================================


def _render_main() -> None:
    sm: JourneyStateMachine = st.session_state.state_machine
    graph: RailwayGraph = st.session_state.graph
    chart: NetworkChart = st.session_state.network_chart

    SidebarRenderer(state_machine=sm, graph=graph).render()

    col_map, col_panel = st.columns([3, 2])
    with col_map:
        last = sm.context.log.last
        if last is not None:
            last.display()
        fig = chart.render(graph=graph, journey=sm.journey)
        st.plotly_chart(fig, use_container_width=False)
    with col_panel:
        render_control_panel(sm=sm, graph=graph)
        st.divider()
        render_log_panel(ctx=sm.context)


def main() -> None:
    st.set_page_config(page_title=AppConfig.TITLE, page_icon=AppConfig.ICON, layout=AppConfig.LAYOUT)
    st.title(f"{AppConfig.ICON} {AppConfig.HEADER}")

    init_session_state()

    try:
        _render_main()
    except Exception as e:
        error_msg = f"{type(e).__name__}: {e}"
        logger.error(f"[RENDER] Error caught: {error_msg}\n{traceback.format_exc()}")
        st.error(f"⚠️ Something went wrong: {error_msg}")
        reset_ui_state()
        if st.button("🔄 Reset and Continue", type="primary"):
            st.rerun()


if __name__ == "__main__":
    main()
