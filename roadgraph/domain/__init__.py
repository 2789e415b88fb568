"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors used
throughout the application.
"""

from .errors import (
    ConfigurationError,
    InvalidArgumentError,
    MapLoadError,
    NoRouteFoundError,
    RoadGraphError,
    VertexNotFoundError,
)
from .models import GeographicPoint, SearchResult, SearchStatus, SearchStrategy

__all__ = [
    # Models
    "GeographicPoint",
    "SearchResult",
    "SearchStatus",
    "SearchStrategy",
    # Errors
    "RoadGraphError",
    "InvalidArgumentError",
    "VertexNotFoundError",
    "NoRouteFoundError",
    "MapLoadError",
    "ConfigurationError",
]
