"""Immutable domain models for the road-network router.

All models are frozen dataclasses with slots. They represent the core
concepts shared by the graph store, the search engine and the adapters.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional

from geopy.distance import great_circle


class SearchStrategy(str, Enum):
    """Available path-finding strategies."""

    BFS = "bfs"
    DIJKSTRA = "dijkstra"
    A_STAR = "astar"


class SearchStatus(Enum):
    """Outcome of a well-formed search query.

    Malformed queries (``None`` endpoints) raise instead of producing a
    status, so callers never have to parse diagnostic text.
    """

    FOUND = auto()
    NO_PATH = auto()
    NOT_FOUND = auto()


@dataclass(frozen=True, slots=True)
class GeographicPoint:
    """A road intersection location, compared and hashed by value."""

    latitude: float
    longitude: float

    def distance_to(self, other: GeographicPoint) -> float:
        """Return the great-circle distance to ``other`` in kilometres."""
        return great_circle(
            (self.latitude, self.longitude),
            (other.latitude, other.longitude),
        ).km

    def __str__(self) -> str:
        return f"Lat: {self.latitude}, Lon: {self.longitude}"


@dataclass(frozen=True, slots=True)
class SearchResult:
    """Tagged result of a search.

    Attributes:
        status: FOUND, NO_PATH or NOT_FOUND
        strategy: Strategy that produced the result
        start: Requested start point
        goal: Requested goal point
        path: Points from start to goal inclusive, empty unless FOUND
        cost: Summed edge length of ``path`` in km (inf when not found)
        visited: Number of visitation events emitted by the search
        reason: Diagnostic message for unsuccessful searches
    """

    status: SearchStatus
    strategy: SearchStrategy
    start: GeographicPoint
    goal: GeographicPoint
    path: tuple[GeographicPoint, ...] = field(default_factory=tuple)
    cost: float = math.inf
    visited: int = 0
    reason: Optional[str] = None

    @property
    def found(self) -> bool:
        """Check if a path was found."""
        return self.status is SearchStatus.FOUND

    @property
    def is_empty(self) -> bool:
        """Check if the result carries no path."""
        return len(self.path) == 0

    @property
    def num_hops(self) -> int:
        """Return the number of edges traversed by the path."""
        return max(len(self.path) - 1, 0)
