"""Graph ports - Abstractions for graph loading and routing.

These protocols define the contracts for the collaborators of the graph
core: loaders that populate a MapGraph and solvers that query it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Protocol

if TYPE_CHECKING:
    from ..domain.models import GeographicPoint, SearchResult
    from ..graph.map_graph import MapGraph

# Receives one call per node visitation, in traversal order
VisitCallback = Callable[["GeographicPoint"], None]


class GraphRepositoryPort(Protocol):
    """Port for loading road-network data.

    Implementation: adapters/graph/csv_repository.py

    A repository drives the construction API of MapGraph, adding every
    vertex before any edge.
    """

    def load(self) -> MapGraph:
        """Load the road network.

        Returns:
            A fully built graph.
        """
        ...


class RouteSolverPort(Protocol):
    """Port for route computation.

    Implementation: adapters/graph/route_solvers.py
    """

    def solve(
        self,
        graph: MapGraph,
        start: GeographicPoint,
        goal: GeographicPoint,
        on_visit: VisitCallback = ...,
    ) -> SearchResult:
        """Find a path between two intersections.

        Args:
            graph: The road network.
            start: Departure intersection.
            goal: Arrival intersection.
            on_visit: Optional visitation hook.

        Returns:
            A SearchResult with status FOUND.
        """
        ...

    def solve_safe(
        self,
        graph: MapGraph,
        start: GeographicPoint,
        goal: GeographicPoint,
        on_visit: VisitCallback = ...,
    ) -> SearchResult:
        """Find a path, reporting failures through the result status.

        Returns:
            A SearchResult with status FOUND, NO_PATH or NOT_FOUND.
        """
        ...
