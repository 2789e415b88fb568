"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the graph core and external adapters
such as map loaders and route solvers.
"""

from .graph import GraphRepositoryPort, RouteSolverPort, VisitCallback

__all__ = [
    "GraphRepositoryPort",
    "RouteSolverPort",
    "VisitCallback",
]
