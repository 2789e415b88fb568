"""Small road networks with known answers."""

from __future__ import annotations

from roadgraph.domain.models import GeographicPoint
from roadgraph.graph.map_graph import MapGraph

A = GeographicPoint(1.0, 1.0)
B = GeographicPoint(4.0, -1.0)
C = GeographicPoint(8.0, -1.0)
D = GeographicPoint(4.0, 4.0)

# (from, to, name, type, length km); each road is at least as long as the
# great-circle distance between its ends
SIMPLE_ROADS = [
    (A, B, "Alpha St", "residential", 450.0),
    (B, C, "Bravo St", "residential", 450.0),
    (A, C, "Coast Hwy", "motorway", 1300.0),
    (A, D, "Delta Ave", "residential", 500.0),
    (D, C, "Dune Rd", "residential", 800.0),
]


def build_graph(points, roads, two_way=True):
    graph = MapGraph()
    for point in points:
        graph.add_vertex(point)
    for start, end, name, kind, length in roads:
        graph.add_edge(start, end, name, kind, length)
        if two_way:
            graph.add_edge(end, start, name, kind, length)
    return graph
