"""
Path reconstruction for the shortest path search.

Walks the predecessor map produced by ``dijkstra`` back from the target to
the source. Any broken chain here means the search itself is inconsistent,
so failures raise PathReconstructionError rather than returning an empty path.
"""

from typing import Dict, Hashable, List, Optional, Set

from .exceptions import PathReconstructionError
from .logging_config import get_logger

logger = get_logger(__name__)


def reconstruct_path(
    predecessors: Dict[Hashable, Hashable],
    source_id: Hashable,
    target_id: Hashable,
    max_iterations: Optional[int] = None,
) -> List[Hashable]:
    """Reconstruct the shortest path from a Dijkstra predecessor map.

    Handles these broken-chain cases:
    - target (or an intermediate node) has no predecessor
    - cycle in the predecessor map
    - maximum iteration limit exceeded

    Args:
        predecessors: ``predecessors[n]`` is the node before ``n`` on the
            shortest path. The source has no entry.
        source_id: Starting node
        target_id: Destination node
        max_iterations: Upper bound on walk-back steps. If None, uses
            ``len(predecessors) + 1``.

    Returns:
        List of nodes from source to target, inclusive.

    Raises:
        PathReconstructionError: If the chain does not lead back to the source

    Example:
        >>> reconstruct_path({2: 0, 4: 2}, source_id=0, target_id=4)
        [0, 2, 4]
    """
    if source_id == target_id:
        return [source_id]

    if max_iterations is None:
        max_iterations = len(predecessors) + 1

    path: List[Hashable] = []
    current = target_id
    visited: Set[Hashable] = set()

    for _ in range(max_iterations):
        path.append(current)

        if current == source_id:
            path.reverse()
            logger.debug(f"Path reconstructed: {len(path)} nodes from {source_id} to {target_id}")
            return path

        if current in visited:
            raise PathReconstructionError(source_id, target_id, f"cycle at node {current}")
        visited.add(current)

        if current not in predecessors:
            raise PathReconstructionError(source_id, target_id, f"node {current} has no predecessor")

        current = predecessors[current]

    raise PathReconstructionError(
        source_id, target_id, f"exceeded maximum iterations ({max_iterations})"
    )
