"""Vertices and directed road segments of the road network.

Nodes are created by :class:`~roadgraph.graph.map_graph.MapGraph` only and
carry no search bookkeeping: distances, priorities and predecessors belong
to the search call that computes them.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List, Set

from ..domain.errors import InvalidArgumentError
from ..domain.models import GeographicPoint


@dataclass(frozen=True, eq=False)
class MapEdge:
    """A directed road segment between two intersections.

    Attributes:
        road_name: Name of the street
        road_type: OSM-style road classification (e.g. 'residential')
        start: Node the segment leaves from
        end: Node the segment arrives at
        length: Length of the segment in km, never negative
    """

    road_name: str
    road_type: str
    start: MapNode
    end: MapNode
    length: float

    def __post_init__(self) -> None:
        if (
            isinstance(self.length, bool)
            or not isinstance(self.length, (int, float))
            or not math.isfinite(self.length)
        ):
            raise InvalidArgumentError(
                f"Edge length must be a finite number, got {self.length!r}",
                argument="length",
            )
        if self.length < 0:
            raise InvalidArgumentError(
                f"Edge length must be non-negative, got {self.length}",
                argument="length",
            )

    def other_node(self, node: MapNode) -> MapNode:
        """Return the endpoint opposite ``node``."""
        if node == self.start:
            return self.end
        if node == self.end:
            return self.start
        raise InvalidArgumentError(
            f"{node.location} is not an endpoint of {self.road_name}",
            argument="node",
        )

    def sort_key(self) -> tuple[str, float, float, float]:
        """Order used for every neighbor enumeration."""
        return (
            self.road_name,
            self.end.location.latitude,
            self.end.location.longitude,
            self.length,
        )


@dataclass(eq=False)
class MapNode:
    """An intersection, identified by its location.

    Two nodes at the same location compare equal even if their street
    lists differ.
    """

    location: GeographicPoint
    _edges: List[MapEdge] = field(default_factory=list, repr=False)

    def add_edge(self, edge: MapEdge) -> None:
        """Register an edge leaving this node."""
        self._edges.append(edge)

    @property
    def edges(self) -> List[MapEdge]:
        """Outgoing edges sorted by road name, destination, then length."""
        return sorted(self._edges, key=MapEdge.sort_key)

    def neighbors(self) -> Set[MapNode]:
        """Return the distinct nodes reachable through one outgoing edge."""
        return {edge.end for edge in self._edges}

    def road_names(self) -> List[str]:
        return [edge.road_name for edge in self.edges]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MapNode):
            return NotImplemented
        return self.location == other.location

    def __hash__(self) -> int:
        return hash(self.location)

    def __str__(self) -> str:
        streets = ", ".join(self.road_names())
        return f"[NODE at location ({self.location}) intersects streets: {streets}]"
