"""CSV Graph Repository adapter.

Builds a MapGraph from two CSV files:

- intersections: ``latitude,longitude``
- roads: ``from_lat,from_lon,to_lat,to_lon,road_name,road_type,length_km``
  with an optional ``one_way`` column

Every intersection, including road endpoints missing from the
intersections file, is added before the first road, since edge insertion
needs existing endpoints. Two-way roads become two directed edges.
"""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from ...config import GraphConfig, get_config
from ...domain.errors import MapLoadError
from ...domain.models import GeographicPoint
from ...graph.map_graph import MapGraph

_TRUTHY = {"1", "true", "yes", "y"}


def _point(row: Dict[str, str], lat_key: str, lon_key: str) -> Optional[GeographicPoint]:
    lat_str = (row.get(lat_key) or "").strip()
    lon_str = (row.get(lon_key) or "").strip()
    if not lat_str or not lon_str:
        return None
    return GeographicPoint(float(lat_str), float(lon_str))


def _road(row: Dict[str, str]) -> Optional[Tuple[GeographicPoint, GeographicPoint, str, str, float, bool]]:
    start = _point(row, "from_lat", "from_lon")
    end = _point(row, "to_lat", "to_lon")
    if start is None or end is None:
        return None
    return (
        start,
        end,
        (row.get("road_name") or "").strip(),
        (row.get("road_type") or "").strip(),
        float((row.get("length_km") or "").strip()),
        (row.get("one_way") or "").strip().lower() in _TRUTHY,
    )


@dataclass
class CSVGraphRepository:
    """Graph repository that loads from CSV files.

    This adapter implements GraphRepositoryPort.

    Attributes:
        config: Graph configuration (paths, file names)
    """

    config: GraphConfig = field(default_factory=lambda: get_config().graph)
    _logger: logging.Logger = field(init=False, repr=False)

    # Cached data
    _graph: Optional[MapGraph] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load(self) -> MapGraph:
        """Load the road network from CSV files.

        Returns:
            The populated graph.

        Raises:
            MapLoadError: If the files cannot be read or parsed.
        """
        if self._graph is not None:
            return self._graph

        self._logger.debug(
            "Loading road network",
            extra={
                "intersections_path": str(self.config.intersections_path),
                "roads_path": str(self.config.roads_path),
            },
        )

        graph = MapGraph()
        self._load_intersections(graph)
        self._load_roads(graph)

        self._graph = graph
        self._logger.info(
            "Road network loaded",
            extra={"vertices": graph.vertex_count(), "edges": graph.edge_count()},
        )
        return graph

    def _load_intersections(self, graph: MapGraph) -> None:
        path = self.config.intersections_path
        try:
            with path.open(newline="", encoding="utf-8") as f:
                for row in csv.DictReader(f):
                    graph.add_vertex(_point(row, "latitude", "longitude"))
        except (OSError, KeyError, ValueError) as e:
            raise MapLoadError(
                "Failed to load intersections", file_path=str(path), cause=e
            )

    def _load_roads(self, graph: MapGraph) -> None:
        path = self.config.roads_path
        try:
            with path.open(newline="", encoding="utf-8") as f:
                roads = [road for road in map(_road, csv.DictReader(f)) if road]

            # roads may reference intersections the first file omits
            for start, end, *_ in roads:
                graph.add_vertex(start)
                graph.add_vertex(end)

            for start, end, road_name, road_type, length, one_way in roads:
                graph.add_edge(start, end, road_name, road_type, length)
                if not one_way:
                    graph.add_edge(end, start, road_name, road_type, length)
        except (OSError, KeyError, ValueError) as e:
            raise MapLoadError("Failed to load roads", file_path=str(path), cause=e)

    def clear_cache(self) -> None:
        """Clear the cached graph."""
        self._graph = None
        self._logger.debug("Graph cache cleared")
