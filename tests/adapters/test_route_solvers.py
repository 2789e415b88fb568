"""Tests for the route solver adapters."""

import pytest

from roadgraph.adapters.graph.route_solvers import (
    AStarRouteSolver,
    BreadthFirstRouteSolver,
    DijkstraRouteSolver,
    solver_for,
)
from roadgraph.domain.errors import (
    ConfigurationError,
    InvalidArgumentError,
    NoRouteFoundError,
    VertexNotFoundError,
)
from roadgraph.domain.models import GeographicPoint, SearchStatus, SearchStrategy
from roadgraph.graph.visits import VisitRecorder

from ..helpers import A, B, C

SOLVERS = [BreadthFirstRouteSolver, DijkstraRouteSolver, AStarRouteSolver]


class TestRouteSolvers:
    """Test suite for the strict and safe solver entry points."""

    def test_dijkstra_solver_finds_shortest_route(self, simple_graph):
        result = DijkstraRouteSolver().solve(simple_graph, A, C)

        assert result.status is SearchStatus.FOUND
        assert result.path == (A, B, C)
        assert result.cost == 900.0

    def test_bfs_solver_finds_fewest_edges(self, simple_graph):
        result = BreadthFirstRouteSolver().solve(simple_graph, A, C)

        assert result.path == (A, C)
        assert result.strategy is SearchStrategy.BFS

    def test_a_star_solver_passes_visits_to_callback(self, simple_graph):
        recorder = VisitRecorder()

        result = AStarRouteSolver().solve(simple_graph, A, C, recorder)

        assert result.visited == recorder.count == 3

    @pytest.mark.parametrize("solver_type", SOLVERS)
    def test_solve_raises_when_no_route(self, disconnected_graph, solver_type):
        with pytest.raises(NoRouteFoundError) as excinfo:
            solver_type().solve(disconnected_graph, A, C)

        assert excinfo.value.start == A
        assert excinfo.value.goal == C

    @pytest.mark.parametrize("solver_type", SOLVERS)
    def test_solve_raises_when_point_missing(self, simple_graph, solver_type):
        outside = GeographicPoint(50.0, 50.0)

        with pytest.raises(VertexNotFoundError) as excinfo:
            solver_type().solve(simple_graph, A, outside)

        assert excinfo.value.location == outside

    @pytest.mark.parametrize("solver_type", SOLVERS)
    def test_solve_safe_returns_tagged_result(self, disconnected_graph, solver_type):
        result = solver_type().solve_safe(disconnected_graph, A, C)

        assert result.status is SearchStatus.NO_PATH
        assert result.is_empty

    @pytest.mark.parametrize("solver_type", SOLVERS)
    def test_none_endpoint_still_raises(self, simple_graph, solver_type):
        with pytest.raises(InvalidArgumentError):
            solver_type().solve_safe(simple_graph, None, C)


@pytest.mark.parametrize(
    "name, solver_type",
    [
        ("bfs", BreadthFirstRouteSolver),
        ("dijkstra", DijkstraRouteSolver),
        ("astar", AStarRouteSolver),
        (SearchStrategy.A_STAR, AStarRouteSolver),
    ],
)
def test_solver_for(name, solver_type):
    assert isinstance(solver_for(name), solver_type)


def test_solver_for_unknown_strategy():
    with pytest.raises(ConfigurationError) as excinfo:
        solver_for("greedy")

    assert excinfo.value.setting_name == "default_strategy"
