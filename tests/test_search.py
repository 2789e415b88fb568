"""Tests for breadth-first, Dijkstra and A* search."""

import pytest

from roadgraph.domain.errors import InvalidArgumentError
from roadgraph.domain.models import GeographicPoint, SearchStatus, SearchStrategy
from roadgraph.graph.map_graph import MapGraph
from roadgraph.graph.node import MapNode
from roadgraph.graph.search import (
    a_star_search,
    breadth_first_search,
    dijkstra_search,
    reconstruct_path,
)
from roadgraph.graph.visits import VisitRecorder

from .helpers import SIMPLE_ROADS, A, B, C, D, build_graph

SEARCH_METHODS = ["bfs", "dijkstra", "a_star_search"]
OUTSIDE = GeographicPoint(50.0, 50.0)


def test_bfs_returns_fewest_edge_route(simple_graph):
    assert simple_graph.bfs(A, C) == [A, C]


def test_dijkstra_returns_shortest_route(simple_graph):
    assert simple_graph.dijkstra(A, C) == [A, B, C]


def test_a_star_returns_shortest_route(simple_graph):
    assert simple_graph.a_star_search(A, C) == [A, B, C]


def test_results_report_cost_and_hops(simple_graph):
    bfs = breadth_first_search(simple_graph, A, C)
    dijkstra = dijkstra_search(simple_graph, A, C)

    assert bfs.status is SearchStatus.FOUND
    assert bfs.cost == 1300.0
    assert bfs.num_hops == 1
    assert dijkstra.cost == 900.0
    assert dijkstra.num_hops == 2
    assert dijkstra.strategy is SearchStrategy.DIJKSTRA


def test_a_star_visits_fewer_nodes_than_dijkstra(simple_graph):
    dijkstra = dijkstra_search(simple_graph, A, C)
    a_star = a_star_search(simple_graph, A, C)

    assert a_star.cost == pytest.approx(dijkstra.cost)
    assert dijkstra.visited == 4
    assert a_star.visited == 3


def test_bfs_visits_in_fifo_order(simple_graph):
    recorder = VisitRecorder()

    simple_graph.bfs(A, C, recorder)

    assert recorder.points == [A, B, C]


def test_dijkstra_visits_in_distance_order(simple_graph):
    recorder = VisitRecorder()

    simple_graph.dijkstra(A, C, recorder)

    assert recorder.points == [A, B, D, C]
    assert recorder.count == 4


def test_callback_does_not_change_result(simple_graph):
    seen = []

    assert simple_graph.dijkstra(A, C, seen.append) == simple_graph.dijkstra(A, C)
    assert seen


@pytest.mark.parametrize("method", SEARCH_METHODS)
def test_start_equals_goal(simple_graph, method):
    recorder = VisitRecorder()

    assert getattr(simple_graph, method)(A, A, recorder) == [A]
    assert recorder.points == [A]


@pytest.mark.parametrize("method", SEARCH_METHODS)
def test_disconnected_graph_has_no_path(disconnected_graph, method):
    assert getattr(disconnected_graph, method)(A, C) is None


@pytest.mark.parametrize("strategy", list(SearchStrategy))
def test_disconnected_graph_reports_no_path(disconnected_graph, strategy):
    result = disconnected_graph.search(strategy, A, C)

    assert result.status is SearchStatus.NO_PATH
    assert result.is_empty
    assert result.reason.startswith("No path found from")
    assert result.visited == 2


@pytest.mark.parametrize("strategy", list(SearchStrategy))
def test_missing_endpoint_reports_not_found(simple_graph, strategy, caplog):
    result = simple_graph.search(strategy, A, OUTSIDE)

    assert result.status is SearchStatus.NOT_FOUND
    assert result.path == ()
    assert result.visited == 0
    assert "Goal node" in result.reason
    assert "does not exist" in caplog.text

    result = simple_graph.search(strategy, OUTSIDE, A)
    assert result.status is SearchStatus.NOT_FOUND
    assert "Start node" in result.reason


@pytest.mark.parametrize("method", SEARCH_METHODS)
def test_missing_endpoint_returns_none(simple_graph, method):
    assert getattr(simple_graph, method)(OUTSIDE, C) is None


@pytest.mark.parametrize("method", SEARCH_METHODS)
def test_none_endpoint_raises(simple_graph, method):
    with pytest.raises(InvalidArgumentError) as excinfo:
        getattr(simple_graph, method)(None, C)
    assert excinfo.value.argument == "start"

    with pytest.raises(InvalidArgumentError) as excinfo:
        getattr(simple_graph, method)(A, None)
    assert excinfo.value.argument == "goal"


def test_one_way_roads_are_respected():
    graph = build_graph([A, B], [(A, B, "Alpha St", "residential", 450.0)], two_way=False)

    assert graph.dijkstra(A, B) == [A, B]
    assert graph.dijkstra(B, A) is None
    assert graph.bfs(B, A) is None


def _tie_graph(roads):
    return build_graph([A, B, C, D], roads)


TIE_ROADS = [
    (A, B, "Alpha St", "residential", 5.0),
    (B, C, "Bravo St", "residential", 5.0),
    (A, D, "Delta Ave", "residential", 5.0),
    (D, C, "Dune Rd", "residential", 5.0),
]


@pytest.mark.parametrize("method", ["bfs", "dijkstra"])
def test_equal_routes_are_tie_broken_independently_of_insertion_order(method):
    forward = _tie_graph(TIE_ROADS)
    backward = _tie_graph(list(reversed(TIE_ROADS)))

    results = {tuple(getattr(forward, method)(A, C)) for _ in range(5)}
    results.add(tuple(getattr(backward, method)(A, C)))

    assert results == {(A, B, C)}


def test_searches_do_not_share_state(simple_graph):
    first = simple_graph.a_star_search(A, C)
    second = simple_graph.dijkstra(A, C)
    third = simple_graph.a_star_search(C, A)
    fresh = build_graph([A, B, C, D], SIMPLE_ROADS)

    assert first == second == [A, B, C]
    assert third == fresh.a_star_search(C, A) == [C, B, A]
    assert simple_graph.bfs(D, B) == fresh.bfs(D, B)


def test_dijkstra_relaxes_through_cheaper_late_route():
    graph = MapGraph()
    points = [GeographicPoint(0.0, float(i)) for i in range(4)]
    for point in points:
        graph.add_vertex(point)
    s, x, y, t = points
    graph.add_edge(s, t, "Direct", "primary", 10.0)
    graph.add_edge(s, x, "Side", "residential", 1.0)
    graph.add_edge(x, y, "Side", "residential", 1.0)
    graph.add_edge(y, t, "Side", "residential", 1.0)

    result = dijkstra_search(graph, s, t)

    assert list(result.path) == [s, x, y, t]
    assert result.cost == 3.0
    assert breadth_first_search(graph, s, t).path == (s, t)


def test_reconstruct_path_walks_predecessors():
    nodes = [MapNode(point) for point in (A, B, C)]
    predecessors = {nodes[1]: nodes[0], nodes[2]: nodes[1]}

    assert reconstruct_path(predecessors, nodes[0], nodes[2]) == [A, B, C]
    assert reconstruct_path({}, nodes[0], nodes[0]) == [A]
