"""Route solver adapters.

These adapters implement RouteSolverPort on top of the search engine and
add:
- Strict errors (VertexNotFoundError, NoRouteFoundError) for callers that
  prefer exceptions over the tagged result
- Logging
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import ClassVar, Dict, Type, Union

from ...domain.errors import ConfigurationError, NoRouteFoundError, VertexNotFoundError
from ...domain.models import GeographicPoint, SearchResult, SearchStatus, SearchStrategy
from ...graph.map_graph import MapGraph
from ...graph.search import ignore_visit, run_search
from ...ports.graph import VisitCallback


@dataclass
class _SearchRouteSolver:
    """Base solver running one search strategy.

    Subclasses only pick the strategy.
    """

    strategy: ClassVar[SearchStrategy]
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def solve(
        self,
        graph: MapGraph,
        start: GeographicPoint,
        goal: GeographicPoint,
        on_visit: VisitCallback = ignore_visit,
    ) -> SearchResult:
        """Find a path between two intersections.

        Args:
            graph: The road network.
            start: Departure intersection.
            goal: Arrival intersection.
            on_visit: Optional visitation hook.

        Returns:
            SearchResult with status FOUND.

        Raises:
            InvalidArgumentError: If start or goal is None.
            VertexNotFoundError: If start or goal is not in the graph.
            NoRouteFoundError: If no path exists.
        """
        self._logger.debug(
            "Solving route",
            extra={
                "strategy": self.strategy.value,
                "start": str(start),
                "goal": str(goal),
            },
        )

        result = self.solve_safe(graph, start, goal, on_visit)

        if result.status is SearchStatus.NOT_FOUND:
            missing = start if start not in graph else goal
            raise VertexNotFoundError(
                result.reason or f"Point not in graph: {missing}",
                location=missing,
            )
        if result.status is SearchStatus.NO_PATH:
            self._logger.warning(
                "No route found",
                extra={"start": str(start), "goal": str(goal)},
            )
            raise NoRouteFoundError(
                f"No path from {start} to {goal}",
                start=start,
                goal=goal,
            )

        self._logger.info(
            "Route found",
            extra={
                "strategy": self.strategy.value,
                "stops": len(result.path),
                "distance_km": result.cost,
                "visited": result.visited,
            },
        )
        return result

    def solve_safe(
        self,
        graph: MapGraph,
        start: GeographicPoint,
        goal: GeographicPoint,
        on_visit: VisitCallback = ignore_visit,
    ) -> SearchResult:
        """Find a path, returning the tagged result instead of raising.

        Only a None start or goal raises (InvalidArgumentError).
        """
        return run_search(self.strategy, graph, start, goal, on_visit)


@dataclass
class BreadthFirstRouteSolver(_SearchRouteSolver):
    """Fewest-edge routes, ignoring road lengths."""

    strategy: ClassVar[SearchStrategy] = SearchStrategy.BFS


@dataclass
class DijkstraRouteSolver(_SearchRouteSolver):
    """Shortest routes using Dijkstra's algorithm."""

    strategy: ClassVar[SearchStrategy] = SearchStrategy.DIJKSTRA


@dataclass
class AStarRouteSolver(_SearchRouteSolver):
    """Shortest routes using A* with a straight-line heuristic."""

    strategy: ClassVar[SearchStrategy] = SearchStrategy.A_STAR


_SOLVERS: Dict[SearchStrategy, Type[_SearchRouteSolver]] = {
    SearchStrategy.BFS: BreadthFirstRouteSolver,
    SearchStrategy.DIJKSTRA: DijkstraRouteSolver,
    SearchStrategy.A_STAR: AStarRouteSolver,
}


def solver_for(strategy: Union[SearchStrategy, str]) -> _SearchRouteSolver:
    """Build the solver for ``strategy`` ('bfs', 'dijkstra' or 'astar').

    Raises:
        ConfigurationError: If the strategy name is unknown.
    """
    try:
        key = SearchStrategy(strategy)
    except ValueError as e:
        raise ConfigurationError(
            f"Unknown search strategy: {strategy!r}",
            setting_name="default_strategy",
            expected_type="bfs | dijkstra | astar",
            cause=e,
        )
    return _SOLVERS[key]()
