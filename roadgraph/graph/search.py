"""Path-finding over a :class:`MapGraph`.

Three strategies share one contract: ``search(graph, start, goal, on_visit)``
returns a :class:`SearchResult`. ``None`` endpoints raise
InvalidArgumentError; endpoints missing from the graph yield NOT_FOUND and
unreachable goals yield NO_PATH.

All bookkeeping (visited set, predecessors, costs, priorities, queue) is
allocated per call. Heap entries are ``(priority, sequence, node)`` so nodes
are never compared and equal priorities pop in push order.
"""

from __future__ import annotations

import heapq
import itertools
import logging
from collections import deque
from typing import TYPE_CHECKING, Callable, Deque, Dict, List, Optional, Set, Tuple

from ..domain.errors import InvalidArgumentError
from ..domain.models import GeographicPoint, SearchResult, SearchStatus, SearchStrategy
from ..ports.graph import VisitCallback
from .node import MapNode

if TYPE_CHECKING:
    from .map_graph import MapGraph

logger = logging.getLogger(__name__)


def ignore_visit(point: GeographicPoint) -> None:
    pass


def reconstruct_path(
    predecessors: Dict[MapNode, MapNode], start: MapNode, goal: MapNode
) -> List[GeographicPoint]:
    """Rebuild the start-to-goal point sequence from a predecessor map.

    ``goal`` must be reachable through ``predecessors``; no check is made.
    """
    path: Deque[GeographicPoint] = deque()
    current = goal
    while current != start:
        path.appendleft(current.location)
        current = predecessors[current]
    path.appendleft(start.location)
    return list(path)


def _resolve_endpoints(
    graph: MapGraph,
    start: Optional[GeographicPoint],
    goal: Optional[GeographicPoint],
    strategy: SearchStrategy,
) -> Tuple[Optional[MapNode], Optional[MapNode], Optional[SearchResult]]:
    """Validate the endpoints, returning the nodes or a NOT_FOUND result."""
    if start is None or goal is None:
        raise InvalidArgumentError(
            "Cannot find route from or to a null point",
            argument="start" if start is None else "goal",
        )

    for label, point in (("Start", start), ("Goal", goal)):
        if graph.get_node(point) is None:
            reason = f"{label} node {point} does not exist"
            logger.warning(
                reason,
                extra={"strategy": strategy.value, "point": str(point)},
            )
            return None, None, SearchResult(
                status=SearchStatus.NOT_FOUND,
                strategy=strategy,
                start=start,
                goal=goal,
                reason=reason,
            )

    return graph.get_node(start), graph.get_node(goal), None


def _finish(
    graph: MapGraph,
    strategy: SearchStrategy,
    start: MapNode,
    goal: MapNode,
    predecessors: Dict[MapNode, MapNode],
    reached: bool,
    visited: int,
) -> SearchResult:
    if not reached:
        reason = f"No path found from {start.location} to {goal.location}"
        logger.info(
            reason,
            extra={"strategy": strategy.value, "visited": visited},
        )
        return SearchResult(
            status=SearchStatus.NO_PATH,
            strategy=strategy,
            start=start.location,
            goal=goal.location,
            visited=visited,
            reason=reason,
        )

    path = reconstruct_path(predecessors, start, goal)
    cost = graph.path_length(path)
    logger.debug(
        "Path found",
        extra={
            "strategy": strategy.value,
            "hops": len(path) - 1,
            "cost_km": cost,
            "visited": visited,
        },
    )
    return SearchResult(
        status=SearchStatus.FOUND,
        strategy=strategy,
        start=start.location,
        goal=goal.location,
        path=tuple(path),
        cost=cost,
        visited=visited,
    )


def breadth_first_search(
    graph: MapGraph,
    start: Optional[GeographicPoint],
    goal: Optional[GeographicPoint],
    on_visit: VisitCallback = ignore_visit,
) -> SearchResult:
    """Find the path with the fewest edges, ignoring edge lengths."""
    strategy = SearchStrategy.BFS
    start_node, goal_node, failure = _resolve_endpoints(graph, start, goal, strategy)
    if failure is not None:
        return failure
    assert start_node is not None and goal_node is not None

    predecessors: Dict[MapNode, MapNode] = {}
    visited: Set[MapNode] = {start_node}
    to_explore: Deque[MapNode] = deque([start_node])
    visits = 0
    reached = False

    while to_explore:
        current = to_explore.popleft()
        on_visit(current.location)
        visits += 1

        if current == goal_node:
            reached = True
            break

        for edge in current.edges:
            neighbor = edge.end
            if neighbor not in visited:
                # marked on enqueue so a node is queued at most once
                visited.add(neighbor)
                predecessors[neighbor] = current
                to_explore.append(neighbor)

    return _finish(graph, strategy, start_node, goal_node, predecessors, reached, visits)


def _best_first_search(
    graph: MapGraph,
    start: Optional[GeographicPoint],
    goal: Optional[GeographicPoint],
    on_visit: VisitCallback,
    strategy: SearchStrategy,
    heuristic: Optional[Callable[[MapNode, MapNode], float]],
) -> SearchResult:
    """Uniform-cost search, guided by ``heuristic`` when one is given.

    ``costs`` holds the accumulated path length g(n), ``estimates`` the
    heuristic h(n) and ``priorities`` the queue key f(n) = g(n) + h(n).
    With no heuristic, f(n) == g(n) and this is Dijkstra's algorithm.
    """
    start_node, goal_node, failure = _resolve_endpoints(graph, start, goal, strategy)
    if failure is not None:
        return failure
    assert start_node is not None and goal_node is not None

    def estimate(node: MapNode) -> float:
        if heuristic is None:
            return 0.0
        if node not in estimates:
            estimates[node] = heuristic(node, goal_node)
        return estimates[node]

    predecessors: Dict[MapNode, MapNode] = {}
    costs: Dict[MapNode, float] = {start_node: 0.0}
    estimates: Dict[MapNode, float] = {}
    priorities: Dict[MapNode, float] = {start_node: estimate(start_node)}
    finalized: Set[MapNode] = set()
    sequence = itertools.count()
    heap: List[Tuple[float, int, MapNode]] = [
        (priorities[start_node], next(sequence), start_node)
    ]
    visits = 0
    reached = False

    while heap:
        _, _, current = heapq.heappop(heap)
        on_visit(current.location)
        visits += 1

        if current in finalized:
            continue
        finalized.add(current)

        if current == goal_node:
            reached = True
            break

        for edge in current.edges:
            neighbor = edge.end
            if neighbor in finalized:
                continue
            candidate = costs[current] + edge.length
            if neighbor not in costs or candidate < costs[neighbor]:
                costs[neighbor] = candidate
                predecessors[neighbor] = current
                priorities[neighbor] = candidate + estimate(neighbor)
                heapq.heappush(heap, (priorities[neighbor], next(sequence), neighbor))

    return _finish(graph, strategy, start_node, goal_node, predecessors, reached, visits)


def dijkstra_search(
    graph: MapGraph,
    start: Optional[GeographicPoint],
    goal: Optional[GeographicPoint],
    on_visit: VisitCallback = ignore_visit,
) -> SearchResult:
    """Find the minimum-length path with Dijkstra's algorithm.

    Edge lengths are non-negative, so the first time the goal is popped
    its distance is optimal and the search stops there.
    """
    return _best_first_search(
        graph, start, goal, on_visit, SearchStrategy.DIJKSTRA, heuristic=None
    )


def straight_line_heuristic(node: MapNode, goal: MapNode) -> float:
    """Great-circle distance from ``node`` to ``goal`` in km."""
    return node.location.distance_to(goal.location)


def a_star_search(
    graph: MapGraph,
    start: Optional[GeographicPoint],
    goal: Optional[GeographicPoint],
    on_visit: VisitCallback = ignore_visit,
) -> SearchResult:
    """Find the minimum-length path with A* and a straight-line heuristic.

    The result is optimal when every edge is at least as long as the
    great-circle distance between its endpoints.
    """
    return _best_first_search(
        graph,
        start,
        goal,
        on_visit,
        SearchStrategy.A_STAR,
        heuristic=straight_line_heuristic,
    )


SEARCHES: Dict[SearchStrategy, Callable[..., SearchResult]] = {
    SearchStrategy.BFS: breadth_first_search,
    SearchStrategy.DIJKSTRA: dijkstra_search,
    SearchStrategy.A_STAR: a_star_search,
}


def run_search(
    strategy: SearchStrategy,
    graph: MapGraph,
    start: Optional[GeographicPoint],
    goal: Optional[GeographicPoint],
    on_visit: VisitCallback = ignore_visit,
) -> SearchResult:
    """Dispatch to the search function registered for ``strategy``."""
    return SEARCHES[SearchStrategy(strategy)](graph, start, goal, on_visit)


__all__ = [
    "VisitCallback",
    "ignore_visit",
    "a_star_search",
    "breadth_first_search",
    "dijkstra_search",
    "reconstruct_path",
    "run_search",
    "straight_line_heuristic",
]
