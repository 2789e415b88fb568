"""Typed domain errors for the road-network router.

All errors inherit from RoadGraphError and can optionally wrap a root
cause exception for debugging.

Malformed queries and construction calls raise InvalidArgumentError.
Queries that are well formed but unanswerable are reported softly by the
search engine through SearchStatus; only the strict solver adapters turn
them into VertexNotFoundError and NoRouteFoundError.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .models import GeographicPoint


@dataclass
class RoadGraphError(Exception):
    """Base error for the road graph domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class InvalidArgumentError(RoadGraphError, ValueError):
    """A caller passed an argument that violates a precondition.

    Attributes:
        argument: Name of the offending argument
    """

    argument: str = ""


@dataclass
class VertexNotFoundError(RoadGraphError):
    """A search endpoint is not a vertex of the graph.

    Attributes:
        location: The point that was not found
    """

    location: Optional[GeographicPoint] = None


@dataclass
class NoRouteFoundError(RoadGraphError):
    """No path connects the requested points.

    Attributes:
        start: Start point of the query
        goal: Goal point of the query
    """

    start: Optional[GeographicPoint] = None
    goal: Optional[GeographicPoint] = None


@dataclass
class MapLoadError(RoadGraphError):
    """Road-network data could not be loaded.

    Attributes:
        file_path: Path to the data file if relevant
    """

    file_path: Optional[str] = None


@dataclass
class ConfigurationError(RoadGraphError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None
