"""Railway Router - Shortest-path routing and train simulation on an editable railway network.

Features:
- User-editable stations and weighted undirected links
- Dijkstra shortest path with deterministic tie-breaking
- Journey state machine with live re-routing when links change mid-journey
- Streamlit interface with a Plotly network view and an event log

Modules:
    core: Shortest-path engine
    model: Data structures (Link, RailwayGraph, Journey, messages)
    ui: Streamlit interface components (state machine, actions, panels, chart)

Example:
    from railway_router.core import compute_path
    from railway_router.model import RailwayGraph
"""
