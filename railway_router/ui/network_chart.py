"""NetworkChart - Plotly rendering of the railway network and the train.

Renders:
- Stations on a circle (source and destination highlighted)
- Links with their weights at the midpoints
- The current path (traversed part dimmed, remaining part highlighted)
- The train marker above its current station
"""

import logging

import numpy as np
import plotly.graph_objects as go

from railway_router.constants import ChartConfig, StyleConfig
from railway_router.model.journey import Journey
from railway_router.model.railway_graph import RailwayGraph

logger = logging.getLogger(__name__)

# station -> (x, y)
Layout = dict[str, tuple[float, float]]


def circular_layout(stations: list[str], radius: float = ChartConfig.LAYOUT_RADIUS) -> Layout:
    """Place stations evenly on a circle, first station at the top, clockwise."""
    if not stations:
        return {}
    angles = np.pi / 2 - np.linspace(0.0, 2 * np.pi, num=len(stations), endpoint=False)
    xs = radius * np.cos(angles)
    ys = radius * np.sin(angles)
    return {station: (float(x), float(y)) for station, x, y in zip(stations, xs, ys)}


class NetworkChart:
    """Renders the railway network using Plotly.

    Example:
        chart = NetworkChart(width=700, height=600)
        fig = chart.render(graph=graph, journey=ctx.journey)
        st.plotly_chart(fig)
    """

    def __init__(self, width: int = ChartConfig.WIDTH, height: int = ChartConfig.HEIGHT) -> None:
        self.width = width
        self.height = height

    def render(self, graph: RailwayGraph, journey: Journey) -> go.Figure:
        """Build the full network figure for the current graph and journey."""
        layout = circular_layout(graph.stations)
        fig = go.Figure()

        self._add_links(fig=fig, graph=graph, layout=layout)
        self._add_path(fig=fig, journey=journey, layout=layout)
        self._add_stations(fig=fig, graph=graph, journey=journey, layout=layout)
        self._add_train(fig=fig, journey=journey, layout=layout)

        extent = ChartConfig.LAYOUT_RADIUS + ChartConfig.AXIS_PADDING
        fig.update_layout(
            width=self.width,
            height=self.height,
            showlegend=False,
            margin=dict(l=10, r=10, t=10, b=10),
            plot_bgcolor="white",
            xaxis=dict(visible=False, range=[-extent, extent]),
            yaxis=dict(visible=False, range=[-extent, extent], scaleanchor="x", scaleratio=1),
        )
        return fig

    def _add_links(self, fig: go.Figure, graph: RailwayGraph, layout: Layout) -> None:
        if not graph.links:
            return
        xs: list[float | None] = []
        ys: list[float | None] = []
        label_x, label_y, labels = [], [], []
        for link in graph.links:
            (x0, y0), (x1, y1) = layout[link.a], layout[link.b]
            # None breaks the line between links
            xs += [x0, x1, None]
            ys += [y0, y1, None]
            label_x.append((x0 + x1) / 2)
            label_y.append((y0 + y1) / 2)
            labels.append(str(link.weight))

        fig.add_trace(
            go.Scatter(
                x=xs,
                y=ys,
                mode="lines",
                line=dict(color=StyleConfig.LINK_COLOR, width=StyleConfig.LINK_WIDTH),
                hoverinfo="skip",
                name="Links",
            )
        )
        fig.add_trace(
            go.Scatter(
                x=label_x,
                y=label_y,
                mode="text",
                text=labels,
                textfont=dict(size=13),
                hoverinfo="skip",
                name="Weights",
            )
        )

    def _add_path(self, fig: go.Figure, journey: Journey, layout: Layout) -> None:
        if len(journey.path) < 2:
            return
        traversed = journey.traversed
        if len(traversed) >= 2:
            fig.add_trace(
                self._path_trace(stations=traversed, layout=layout, color=StyleConfig.TRAVERSED_COLOR, name="Traversed")
            )
        remaining = journey.remaining
        if len(remaining) >= 2:
            fig.add_trace(
                self._path_trace(stations=remaining, layout=layout, color=StyleConfig.ROUTE_COLOR, name="Route")
            )

    @staticmethod
    def _path_trace(stations: tuple[str, ...], layout: Layout, color: str, name: str) -> go.Scatter:
        return go.Scatter(
            x=[layout[s][0] for s in stations],
            y=[layout[s][1] for s in stations],
            mode="lines",
            line=dict(color=color, width=StyleConfig.ROUTE_WIDTH),
            hoverinfo="skip",
            name=name,
        )

    def _add_stations(self, fig: go.Figure, graph: RailwayGraph, journey: Journey, layout: Layout) -> None:
        colors = []
        for station in graph.stations:
            if station == journey.source:
                colors.append(StyleConfig.SOURCE_COLOR)
            elif station == journey.destination:
                colors.append(StyleConfig.DESTINATION_COLOR)
            else:
                colors.append(StyleConfig.STATION_COLOR)

        fig.add_trace(
            go.Scatter(
                x=[layout[s][0] for s in graph.stations],
                y=[layout[s][1] for s in graph.stations],
                mode="markers+text",
                marker=dict(size=ChartConfig.STATION_MARKER_SIZE, color=colors, line=dict(color="white", width=2)),
                text=graph.stations,
                textposition="middle center",
                textfont=dict(color="white", size=14),
                hovertemplate="Station %{text}<extra></extra>",
                name="Stations",
            )
        )

    def _add_train(self, fig: go.Figure, journey: Journey, layout: Layout) -> None:
        position = journey.position
        if position is None or position not in layout:
            return
        x, y = layout[position]
        fig.add_trace(
            go.Scatter(
                x=[x],
                y=[y + ChartConfig.TRAIN_OFFSET_Y],
                mode="markers+text",
                marker=dict(size=ChartConfig.TRAIN_MARKER_SIZE, color=StyleConfig.TRAIN_COLOR, symbol="square"),
                text=[StyleConfig.TRAIN_ICON],
                textposition="top center",
                hovertemplate=f"Train at {position}<extra></extra>",
                name="Train",
            )
        )
