"""
Single-source Dijkstra over a campus Graph.

Uses a binary heap with lazy deletion: improved distances are pushed as new
entries and stale entries are skipped when popped, so no decrease-key is
needed. Edge weights must be non-negative.
"""

import heapq
import itertools
from typing import Dict, Hashable, Optional, Set, Tuple

from .graph import Graph
from .logging_config import get_logger

logger = get_logger(__name__)

INF = float("inf")


def dijkstra(
    graph: Graph,
    source: Hashable,
    target: Optional[Hashable] = None,
) -> Tuple[Dict[Hashable, float], Dict[Hashable, Hashable]]:
    """Compute shortest distances from ``source``.

    Args:
        graph: Graph to search
        source: Starting node (must be in the graph)
        target: Optional destination; the search stops once it is settled

    Returns:
        Tuple of (distances, predecessors) where:
            - distances[node] = shortest distance from source (inf if unreached)
            - predecessors[node] = previous node on the shortest path
              (the source and unreached nodes have no entry)

    Raises:
        KeyError: If ``source`` is not in the graph
    """
    if not graph.has_node(source):
        raise KeyError(source)

    distances: Dict[Hashable, float] = {node: INF for node in graph.all_nodes()}
    predecessors: Dict[Hashable, Hashable] = {}
    visited: Set[Hashable] = set()

    distances[source] = 0.0
    # Counter breaks ties so nodes themselves never need to be comparable
    counter = itertools.count()
    heap = [(0.0, next(counter), source)]

    while heap:
        current_dist, _, current = heapq.heappop(heap)

        if current in visited:
            continue
        visited.add(current)

        if target is not None and current == target:
            break

        for neighbor, weight in graph.neighbors(current):
            tentative = current_dist + weight
            if tentative < distances.get(neighbor, INF):
                distances[neighbor] = tentative
                predecessors[neighbor] = current
                heapq.heappush(heap, (tentative, next(counter), neighbor))

    logger.debug(f"Dijkstra from {source}: settled {len(visited)}/{len(distances)} nodes")
    return distances, predecessors
