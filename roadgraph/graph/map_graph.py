"""In-memory road network.

A MapGraph maps each intersection location to its node and keeps every
directed road segment. It is built once (vertices first, then edges) and
then queried any number of times; it must not be mutated while a search
is running.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Set

from ..domain.errors import InvalidArgumentError
from ..domain.models import GeographicPoint, SearchResult, SearchStrategy
from .node import MapEdge, MapNode
from .search import (
    VisitCallback,
    a_star_search,
    breadth_first_search,
    dijkstra_search,
    ignore_visit,
    run_search,
)

logger = logging.getLogger(__name__)


class MapGraph:
    """A directed graph of geographic intersections and road segments."""

    def __init__(self) -> None:
        self._nodes: Dict[GeographicPoint, MapNode] = {}
        self._edges: List[MapEdge] = []

    def vertex_count(self) -> int:
        """Return the number of intersections."""
        return len(self._nodes)

    def edge_count(self) -> int:
        """Return the number of directed road segments."""
        return len(self._edges)

    def vertices(self) -> Set[GeographicPoint]:
        """Return the intersection locations."""
        return set(self._nodes)

    def get_node(self, point: GeographicPoint) -> Optional[MapNode]:
        return self._nodes.get(point)

    def __contains__(self, point: object) -> bool:
        return point in self._nodes

    def add_vertex(self, location: Optional[GeographicPoint]) -> bool:
        """Add an intersection at ``location``.

        Returns:
            True if a node was added, False if ``location`` is None or
            already in the graph.
        """
        if location is None:
            return False
        if location in self._nodes:
            logger.debug("Vertex already in graph", extra={"location": str(location)})
            return False
        self._nodes[location] = MapNode(location)
        return True

    def add_edge(
        self,
        start: GeographicPoint,
        end: GeographicPoint,
        road_name: str,
        road_type: str,
        length: float,
    ) -> None:
        """Add a directed road segment from ``start`` to ``end``.

        Args:
            start: Location the segment leaves from.
            end: Location the segment arrives at.
            road_name: Name of the street.
            road_type: Road classification.
            length: Segment length in km.

        Raises:
            InvalidArgumentError: If an argument is None, if either point
                is not already a vertex, or if ``length`` is negative.
        """
        arguments = {
            "start": start,
            "end": end,
            "road_name": road_name,
            "road_type": road_type,
            "length": length,
        }
        for name, value in arguments.items():
            if value is None:
                raise InvalidArgumentError(f"addEdge: {name} is None", argument=name)

        start_node = self._nodes.get(start)
        end_node = self._nodes.get(end)
        if start_node is None:
            raise InvalidArgumentError(
                f"addEdge: start point {start} is not in graph", argument="start"
            )
        if end_node is None:
            raise InvalidArgumentError(
                f"addEdge: end point {end} is not in graph", argument="end"
            )

        edge = MapEdge(road_name, road_type, start_node, end_node, length)
        self._edges.append(edge)
        start_node.add_edge(edge)

    def get_neighbors(self, node: MapNode) -> Set[MapNode]:
        """Return the distinct nodes one outgoing edge away from ``node``."""
        return node.neighbors()

    def path_length(self, path: Iterable[GeographicPoint]) -> float:
        """Sum the shortest edge joining each consecutive pair of ``path``.

        Raises:
            InvalidArgumentError: If a pair is not joined by an edge.
        """
        points = list(path)
        total = 0.0
        for here, there in zip(points, points[1:]):
            node = self._nodes.get(here)
            lengths = [
                edge.length
                for edge in (node.edges if node is not None else [])
                if edge.end.location == there
            ]
            if not lengths:
                raise InvalidArgumentError(
                    f"No road from {here} to {there}", argument="path"
                )
            total += min(lengths)
        return total

    def bfs(
        self,
        start: GeographicPoint,
        goal: GeographicPoint,
        on_visit: VisitCallback = ignore_visit,
    ) -> Optional[List[GeographicPoint]]:
        """Find the fewest-edge path from ``start`` to ``goal``.

        Returns:
            The intersections from start to goal inclusive, or None if
            either point is not in the graph or no path exists.
        """
        return _path_or_none(breadth_first_search(self, start, goal, on_visit))

    def dijkstra(
        self,
        start: GeographicPoint,
        goal: GeographicPoint,
        on_visit: VisitCallback = ignore_visit,
    ) -> Optional[List[GeographicPoint]]:
        """Find the shortest path using Dijkstra's algorithm."""
        return _path_or_none(dijkstra_search(self, start, goal, on_visit))

    def a_star_search(
        self,
        start: GeographicPoint,
        goal: GeographicPoint,
        on_visit: VisitCallback = ignore_visit,
    ) -> Optional[List[GeographicPoint]]:
        """Find the shortest path using A* search."""
        return _path_or_none(a_star_search(self, start, goal, on_visit))

    def search(
        self,
        strategy: SearchStrategy,
        start: GeographicPoint,
        goal: GeographicPoint,
        on_visit: VisitCallback = ignore_visit,
    ) -> SearchResult:
        """Run ``strategy`` and return the tagged result."""
        return run_search(strategy, self, start, goal, on_visit)

    def __repr__(self) -> str:
        return f"MapGraph(vertices={self.vertex_count()}, edges={self.edge_count()})"


def _path_or_none(result: SearchResult) -> Optional[List[GeographicPoint]]:
    return list(result.path) if result.found else None
