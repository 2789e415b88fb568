"""Shared fixtures."""

from __future__ import annotations

import pytest

from roadgraph.config import reset_config
from roadgraph.graph.map_graph import MapGraph

from .helpers import SIMPLE_ROADS, A, B, C, D, build_graph


@pytest.fixture
def simple_graph() -> MapGraph:
    """Four intersections: BFS prefers Coast Hwy, Dijkstra goes via B."""
    return build_graph([A, B, C, D], SIMPLE_ROADS)


@pytest.fixture
def disconnected_graph() -> MapGraph:
    """Two components, {A, B} and {C, D}, with no road between them."""
    return build_graph(
        [A, B, C, D],
        [
            (A, B, "Alpha St", "residential", 450.0),
            (C, D, "Dune Rd", "residential", 800.0),
        ],
    )


@pytest.fixture(autouse=True)
def fresh_config():
    reset_config()
    yield
    reset_config()
