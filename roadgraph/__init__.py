"""Top-level package for the roadgraph project.

Shortest paths between intersections of a directed, weighted road network
using breadth-first, Dijkstra and A* search.
"""

from .domain import (
    GeographicPoint,
    InvalidArgumentError,
    SearchResult,
    SearchStatus,
    SearchStrategy,
)
from .graph import MapGraph, VisitRecorder

__all__ = [
    "GeographicPoint",
    "InvalidArgumentError",
    "MapGraph",
    "SearchResult",
    "SearchStatus",
    "SearchStrategy",
    "VisitRecorder",
]
