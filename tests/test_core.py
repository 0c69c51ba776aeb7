"""Tests for the shortest-path engine.

Tests: compute_path
Focus: Optimality, undirected traversal, edge cases, deterministic tie-breaking.
Property tests compare against Floyd-Warshall on random small networks.
"""

from hypothesis import given, settings, strategies as st

from railway_router.core.shortest_path import compute_path, path_cost
from railway_router.model.railway_graph import RailwayGraph


class TestComputePath:
    """compute_path on hand-built networks."""

    def test_prefers_cheaper_detour(self, triangle_graph: RailwayGraph) -> None:
        """A -> B -> C (cost 2) beats the direct A-C link (cost 5)."""
        path = compute_path(triangle_graph, "A", "C")
        assert path == ["A", "B", "C"]
        assert triangle_graph.path_cost(path) == 2

    def test_links_are_undirected(self, triangle_graph: RailwayGraph) -> None:
        """Links entered as A-B are usable as B-A."""
        assert compute_path(triangle_graph, "C", "A") == ["C", "B", "A"]

    def test_start_equals_end(self, triangle_graph: RailwayGraph) -> None:
        assert compute_path(triangle_graph, "B", "B") == ["B"]

    def test_start_equals_end_without_links(self, empty_graph: RailwayGraph) -> None:
        assert compute_path(empty_graph, "A", "A") == ["A"]

    def test_unreachable_returns_empty(self, graph_with_isolated: RailwayGraph) -> None:
        assert compute_path(graph_with_isolated, "A", "D") == []

    def test_unknown_station_returns_empty(self, triangle_graph: RailwayGraph) -> None:
        assert compute_path(triangle_graph, "A", "Z") == []
        assert compute_path(triangle_graph, "Z", "A") == []

    def test_direct_link_when_cheapest(self, network_builder) -> None:
        graph = network_builder(3, [("A", "B", 4), ("B", "C", 4), ("A", "C", 5)])
        assert compute_path(graph, "A", "C") == ["A", "C"]

    def test_longer_hop_count_with_lower_cost(self, network_builder) -> None:
        """Cost decides, not the number of stations."""
        graph = network_builder(5, [("A", "E", 10), ("A", "B", 1), ("B", "C", 1), ("C", "D", 1), ("D", "E", 1)])
        assert compute_path(graph, "A", "E") == ["A", "B", "C", "D", "E"]

    def test_uses_current_weights(self, triangle_graph: RailwayGraph) -> None:
        """Each call reads the graph as it is now."""
        assert compute_path(triangle_graph, "A", "C") == ["A", "B", "C"]
        triangle_graph.upsert_link(a="A", b="B", weight=10)
        assert compute_path(triangle_graph, "A", "C") == ["A", "C"]

    def test_does_not_mutate_graph(self, triangle_graph: RailwayGraph) -> None:
        links_before = list(triangle_graph.links)
        stations_before = list(triangle_graph.stations)
        compute_path(triangle_graph, "A", "C")
        assert triangle_graph.links == links_before
        assert triangle_graph.stations == stations_before

    def test_path_cost_of_result(self, triangle_graph: RailwayGraph) -> None:
        assert path_cost(triangle_graph, compute_path(triangle_graph, "A", "C")) == 2
        assert path_cost(triangle_graph, compute_path(triangle_graph, "A", "A")) == 0
        assert path_cost(triangle_graph, []) is None


class TestTieBreaking:
    """Equal-cost alternatives resolve by heap insertion order."""

    def test_first_inserted_neighbor_wins(self, network_builder) -> None:
        """A-B is inserted before A-C, so B is reached first and claims D."""
        graph = network_builder(4, [("A", "B", 1), ("B", "D", 1), ("A", "C", 1), ("C", "D", 1)])
        assert compute_path(graph, "A", "D") == ["A", "B", "D"]

    def test_insertion_order_swapped(self, network_builder) -> None:
        graph = network_builder(4, [("A", "C", 1), ("C", "D", 1), ("A", "B", 1), ("B", "D", 1)])
        assert compute_path(graph, "A", "D") == ["A", "C", "D"]

    def test_repeated_calls_identical(self, network_builder) -> None:
        graph = network_builder(4, [("A", "B", 2), ("B", "D", 2), ("A", "C", 2), ("C", "D", 2), ("B", "C", 1)])
        first = compute_path(graph, "A", "D")
        assert all(compute_path(graph, "A", "D") == first for _ in range(5))


# =============================================================================
# PROPERTY TESTS
# =============================================================================


@st.composite
def random_networks(draw) -> RailwayGraph:
    """Random network with 2-7 stations and up to 12 link edits."""
    count = draw(st.integers(min_value=2, max_value=7))
    graph = RailwayGraph(station_count=count)
    pairs = st.tuples(
        st.integers(min_value=0, max_value=count - 1),
        st.integers(min_value=0, max_value=count - 1),
        st.integers(min_value=1, max_value=20),
    ).filter(lambda t: t[0] != t[1])
    for i, j, weight in draw(st.lists(pairs, max_size=12)):
        graph.upsert_link(a=graph.stations[i], b=graph.stations[j], weight=weight)
    return graph


def floyd_warshall(graph: RailwayGraph) -> dict[tuple[str, str], float]:
    """All-pairs least cost, reference implementation."""
    inf = float("inf")
    dist = {(a, b): (0 if a == b else inf) for a in graph.stations for b in graph.stations}
    for link in graph.links:
        dist[(link.a, link.b)] = min(dist[(link.a, link.b)], link.weight)
        dist[(link.b, link.a)] = min(dist[(link.b, link.a)], link.weight)
    for k in graph.stations:
        for i in graph.stations:
            for j in graph.stations:
                if dist[(i, k)] + dist[(k, j)] < dist[(i, j)]:
                    dist[(i, j)] = dist[(i, k)] + dist[(k, j)]
    return dist


class TestComputePathProperties:
    """compute_path against a brute-force reference."""

    @given(graph=random_networks(), data=st.data())
    @settings(max_examples=150, deadline=None)
    def test_path_is_valid_and_optimal(self, graph: RailwayGraph, data) -> None:
        start = data.draw(st.sampled_from(graph.stations))
        end = data.draw(st.sampled_from(graph.stations))
        best = floyd_warshall(graph)[(start, end)]

        path = compute_path(graph, start, end)

        if best == float("inf"):
            assert path == []
            return
        assert path[0] == start
        assert path[-1] == end
        for a, b in zip(path, path[1:]):
            assert graph.find_link(a, b) is not None, f"No link for hop {a}-{b}"
        assert graph.path_cost(path) == best

    @given(graph=random_networks(), data=st.data())
    @settings(max_examples=50, deadline=None)
    def test_deterministic(self, graph: RailwayGraph, data) -> None:
        start = data.draw(st.sampled_from(graph.stations))
        end = data.draw(st.sampled_from(graph.stations))
        assert compute_path(graph, start, end) == compute_path(graph, start, end)
