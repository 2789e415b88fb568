"""Road-network graph and path-finding algorithms.

This subpackage contains the in-memory graph store, its nodes and edges,
and the breadth-first, Dijkstra and A* searches built on top of it.
"""

from .map_graph import MapGraph
from .node import MapEdge, MapNode
from .search import (
    VisitCallback,
    a_star_search,
    breadth_first_search,
    dijkstra_search,
    reconstruct_path,
    run_search,
)
from .visits import VisitRecorder

__all__ = [
    "MapGraph",
    "MapNode",
    "MapEdge",
    "VisitCallback",
    "VisitRecorder",
    "breadth_first_search",
    "dijkstra_search",
    "a_star_search",
    "reconstruct_path",
    "run_search",
]
