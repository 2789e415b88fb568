"""Centralized configuration using Pydantic Settings.

Configuration can be overridden via environment variables:
- RG_GRAPH_DATA_DIR=/path/to/data
- RG_SEARCH_DEFAULT_STRATEGY=dijkstra
- RG_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GraphConfig(BaseSettings):
    """Road-network data configuration.

    Environment variables prefixed with RG_GRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="RG_GRAPH_")

    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent / "data"
    )
    intersections_file: str = "intersections.csv"
    roads_file: str = "roads.csv"

    @property
    def intersections_path(self) -> Path:
        """Full path to the intersections CSV file."""
        return self.data_dir / self.intersections_file

    @property
    def roads_path(self) -> Path:
        """Full path to the roads CSV file."""
        return self.data_dir / self.roads_file


class SearchConfig(BaseSettings):
    """Path-finding configuration.

    Environment variables prefixed with RG_SEARCH_.
    """

    model_config = SettingsConfigDict(env_prefix="RG_SEARCH_")

    default_strategy: Literal["bfs", "dijkstra", "astar"] = "astar"


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with RG_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="RG_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.search.default_strategy)
        print(config.graph.roads_path)

    Environment variables prefixed with RG_.
    """

    model_config = SettingsConfigDict(env_prefix="RG_")

    graph: GraphConfig = Field(default_factory=GraphConfig)
    search: SearchConfig = Field(default_factory=SearchConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache."""
    get_config.cache_clear()


def configure_logging(config: Optional[ObservabilityConfig] = None) -> None:
    """Apply the logging level and format from ``config``."""
    config = config or get_config().observability
    logging.basicConfig(level=config.level.upper(), format=config.format, force=True)
