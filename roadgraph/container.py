"""Dependency injection container.

Binds the graph loader and the route solver the command line runs with.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from .config import AppConfig, get_config


@dataclass
class Container:
    """Maps port types to the factories that build them.

    Usage:
        container = Container.create_default()
        graph = container.resolve(GraphRepositoryPort).load()

    Attributes:
        config: Application configuration
    """

    config: AppConfig = field(default_factory=get_config)

    _factories: Dict[type[Any], Callable[[], Any]] = field(
        default_factory=dict, repr=False
    )

    def register(self, port_type: type[Any], factory: Callable[[], Any]) -> None:
        """Register a factory for a port type, replacing any earlier one."""
        self._factories[port_type] = factory

    def resolve(self, port_type: type[Any]) -> Any:
        """Build an instance of a port type.

        Raises:
            KeyError: If the type is not registered.
        """
        if port_type not in self._factories:
            raise KeyError(f"Type not registered: {port_type}")
        return self._factories[port_type]()

    @classmethod
    def create_default(cls, config: Optional[AppConfig] = None) -> Container:
        """Create a container bound to the CSV loader and the configured solver.

        Raises:
            ConfigurationError: If the configured strategy is unknown.
        """
        from .adapters.graph import CSVGraphRepository, solver_for
        from .ports.graph import GraphRepositoryPort, RouteSolverPort

        config = config or get_config()
        container = cls(config=config)

        # fail fast on a bad strategy name
        solver = solver_for(config.search.default_strategy)

        container.register(
            GraphRepositoryPort,
            lambda: CSVGraphRepository(config.graph),
        )
        container.register(RouteSolverPort, lambda: solver)

        return container
