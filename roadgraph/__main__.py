"""Command-line route finder.

    python -m roadgraph 32.869423 -117.220917 32.869255 -117.216927 --strategy dijkstra

Loads the CSV road network configured in ``RG_GRAPH_*`` (or ``--data-dir``),
runs one search and prints the route.
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Sequence

from .config import configure_logging, get_config
from .container import Container
from .domain.errors import RoadGraphError
from .domain.models import GeographicPoint, SearchStrategy
from .graph.visits import VisitRecorder
from .ports.graph import GraphRepositoryPort, RouteSolverPort


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="roadgraph",
        description="Find a route between two intersections of a road network.",
    )
    parser.add_argument("start_lat", type=float)
    parser.add_argument("start_lon", type=float)
    parser.add_argument("goal_lat", type=float)
    parser.add_argument("goal_lon", type=float)
    parser.add_argument(
        "--strategy",
        choices=[strategy.value for strategy in SearchStrategy],
        default=None,
        help="Search strategy (defaults to RG_SEARCH_DEFAULT_STRATEGY)",
    )
    parser.add_argument("--data-dir", type=Path, default=None)
    parser.add_argument(
        "--show-visits",
        action="store_true",
        help="Print every visited intersection in traversal order",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(list(argv) if argv is not None else None)

    config = get_config()
    if args.data_dir is not None or args.strategy is not None:
        config = config.model_copy(deep=True)
        if args.data_dir is not None:
            config.graph.data_dir = args.data_dir
        if args.strategy is not None:
            config.search.default_strategy = args.strategy
    configure_logging(config.observability)

    start = GeographicPoint(args.start_lat, args.start_lon)
    goal = GeographicPoint(args.goal_lat, args.goal_lon)
    recorder = VisitRecorder()

    try:
        container = Container.create_default(config)
        graph = container.resolve(GraphRepositoryPort).load()
        solver = container.resolve(RouteSolverPort)
        result = solver.solve_safe(graph, start, goal, recorder)
    except RoadGraphError as e:
        print(f"Error: {e}")
        return 1

    if args.show_visits:
        for point in recorder.points:
            print(f"visit {point}")

    if not result.found:
        print(f"Error: {result.reason}")
        return 1

    print(f"Strategy: {result.strategy.value}")
    print("Path:")
    for point in result.path:
        print(f"  {point}")
    print(f"Total distance: {result.cost:.3f} km")
    print(f"Nodes visited: {result.visited}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
