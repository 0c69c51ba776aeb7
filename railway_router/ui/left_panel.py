"""Sidebar UI renderer for the railway router.

Renders the left sidebar with:
- Station count input (regenerates stations, clears links)
- Add-link form (add a new link or update the weight of an existing pair)
- Link list with inline weight editing and removal

Every graph edit goes through ui.actions so a running journey is re-routed.
"""

import logging

import streamlit as st

from railway_router.constants import LinkConfig, StationConfig
from railway_router.model.link import Link
from railway_router.model.message import InvalidLinkMessage
from railway_router.model.railway_graph import RailwayGraph
from railway_router.ui import actions
from railway_router.ui.infra import get_widget_version, reload_ui
from railway_router.ui.state_machine import JourneyStateMachine
from railway_router.ui.validators import parse_weight

logger = logging.getLogger(__name__)


class SidebarRenderer:
    """Renders the graph editing sidebar.

    Encapsulates station count, link form and link list rendering.
    """

    def __init__(self, state_machine: JourneyStateMachine, graph: RailwayGraph) -> None:
        self.sm = state_machine
        self.ctx = state_machine.context
        self.graph = graph

    def render(self) -> None:
        with st.sidebar:
            st.header("🛤️ Network")
            self._render_station_count()
            st.divider()
            self._render_add_link_form()
            st.divider()
            self._render_link_list()

    def _render_station_count(self) -> None:
        count = st.number_input(
            f"Number of Stations ({StationConfig.MIN_COUNT}-{StationConfig.MAX_COUNT})",
            min_value=StationConfig.MIN_COUNT,
            max_value=StationConfig.MAX_COUNT,
            value=len(self.graph.stations),
            step=1,
            key=f"station_count_{get_widget_version()}",
        )
        st.caption(f"Stations: {', '.join(self.graph.stations)}")
        if int(count) != len(self.graph.stations):
            actions.regenerate_stations(sm=self.sm, graph=self.graph, count=int(count))
            reload_ui(bump_widgets=True)

    def _render_add_link_form(self) -> None:
        st.subheader("Add New Edge")
        stations = self.graph.stations
        version = get_widget_version()
        with st.form(key=f"add_link_form_{version}"):
            col_a, col_b = st.columns(2)
            with col_a:
                a = st.selectbox("From", options=stations, index=0, key=f"link_a_{version}")
            with col_b:
                b = st.selectbox("To", options=stations, index=min(1, len(stations) - 1), key=f"link_b_{version}")
            weight = st.number_input(
                "Weight",
                min_value=LinkConfig.MIN_WEIGHT,
                max_value=LinkConfig.MAX_WEIGHT,
                value=LinkConfig.DEFAULT_WEIGHT,
                step=1,
                key=f"link_weight_{version}",
            )
            submitted = st.form_submit_button("➕ Add Edge", use_container_width=True)

        if submitted:
            self._submit_link(a=a, b=b, raw_weight=weight)

    def _submit_link(self, a: str, b: str, raw_weight: object) -> None:
        changed = actions.add_or_update_link(sm=self.sm, graph=self.graph, a=a, b=b, weight=parse_weight(raw_weight))
        last = self.ctx.log.last
        if not changed and isinstance(last, InvalidLinkMessage):
            last.toast()
            return
        if changed:
            reload_ui(bump_widgets=True)

    def _render_link_list(self) -> None:
        st.subheader("Edges and Weights")
        if not self.graph.links:
            st.caption("No edges added.")
            return
        for link in list(self.graph.links):
            self._render_link_row(link=link)

    def _render_link_row(self, link: Link) -> None:
        version = get_widget_version()
        col_label, col_weight, col_remove = st.columns([2, 3, 1])
        with col_label:
            st.markdown(f"**{link.a} - {link.b}**")
        with col_weight:
            new_weight = st.number_input(
                f"Weight {link.key}",
                min_value=LinkConfig.MIN_WEIGHT,
                max_value=LinkConfig.MAX_WEIGHT,
                value=link.weight,
                step=1,
                key=f"weight_{link.key}_{version}",
                label_visibility="collapsed",
            )
        with col_remove:
            remove = st.button("✖️", key=f"remove_{link.key}_{version}", help=f"Remove edge {link.key}")

        if remove:
            actions.remove_link(sm=self.sm, graph=self.graph, a=link.a, b=link.b)
            reload_ui(bump_widgets=True)
        elif parse_weight(new_weight) != link.weight:
            actions.add_or_update_link(sm=self.sm, graph=self.graph, a=link.a, b=link.b, weight=parse_weight(new_weight))
            reload_ui(bump_widgets=True)
