"""Graph adapters - Implementations of graph-related ports.

Available implementations:
- CSVGraphRepository: Loads a road network from CSV files
- BreadthFirstRouteSolver, DijkstraRouteSolver, AStarRouteSolver:
  Find paths with the corresponding search strategy
"""

from .csv_repository import CSVGraphRepository
from .route_solvers import (
    AStarRouteSolver,
    BreadthFirstRouteSolver,
    DijkstraRouteSolver,
    solver_for,
)

__all__ = [
    "CSVGraphRepository",
    "BreadthFirstRouteSolver",
    "DijkstraRouteSolver",
    "AStarRouteSolver",
    "solver_for",
]
