"""Visitation hook that records the traversal order of a search."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from ..domain.models import GeographicPoint


@dataclass
class VisitRecorder:
    """Callable visitation hook that keeps every visited point in order.

    Example:
        recorder = VisitRecorder()
        graph.dijkstra(start, goal, recorder)
        print(recorder.count, recorder.points)
    """

    points: List[GeographicPoint] = field(default_factory=list)

    def __call__(self, point: GeographicPoint) -> None:
        self.points.append(point)

    @property
    def count(self) -> int:
        return len(self.points)

    def clear(self) -> None:
        self.points.clear()
