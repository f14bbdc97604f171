"""
Generic weighted graph with an adjacency-list representation.

The graph is deliberately agnostic about its node type: any hashable value
works. The navigator uses integer location ids as nodes.

Node order: ``all_nodes()`` returns nodes in the order they were first
inserted (Python dict order). Edge order: ``neighbors()`` returns edges in
the order they were added. Parallel edges are kept; self-loops are allowed.

The graph is not safe for concurrent mutation.
"""

from typing import Dict, Generic, Hashable, Iterator, List, TypeVar

from .exceptions import NotFoundError
from .types import Edge


N = TypeVar("N", bound=Hashable)


class Graph(Generic[N]):
    """Directed weighted multigraph over opaque node identities.

    Example:
        >>> g = Graph()
        >>> g.add_undirected_edge("A", "B", 10.0)
        >>> g.edge_weight("B", "A")
        10.0
    """

    def __init__(self):
        self._adjacency: Dict[N, List[Edge]] = {}

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def add_node(self, node: N) -> None:
        """Add a node; no-op if it is already present."""
        if node not in self._adjacency:
            self._adjacency[node] = []

    def add_edge(self, from_node: N, to_node: N, weight: float) -> None:
        """Add a directed edge, inserting missing endpoints.

        The weight is not validated; callers are expected to pass
        non-negative values.
        """
        self.add_node(from_node)
        self.add_node(to_node)
        self._adjacency[from_node].append(Edge(to_node, weight))

    def add_undirected_edge(self, node1: N, node2: N, weight: float) -> None:
        """Add a pair of directed edges of equal weight."""
        self.add_edge(node1, node2, weight)
        self.add_edge(node2, node1, weight)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def neighbors(self, node: N) -> List[Edge]:
        """Outgoing edges of ``node`` in insertion order; empty if absent."""
        return list(self._adjacency.get(node, ()))

    def has_node(self, node: N) -> bool:
        return node in self._adjacency

    def has_edge(self, from_node: N, to_node: N) -> bool:
        edges = self._adjacency.get(from_node)
        if edges is None:
            return False
        return any(edge.destination == to_node for edge in edges)

    def edge_weight(self, from_node: N, to_node: N) -> float:
        """Weight of the first edge from ``from_node`` to ``to_node``.

        Raises:
            NotFoundError: If the source node or the edge is absent
        """
        edges = self._adjacency.get(from_node)
        if edges is None:
            raise NotFoundError(f"Source node {from_node!r} not found in graph")

        for edge in edges:
            if edge.destination == to_node:
                return edge.weight

        raise NotFoundError(f"Edge {from_node!r} -> {to_node!r} not found in graph")

    def all_nodes(self) -> List[N]:
        """Snapshot of node identities in insertion order."""
        return list(self._adjacency)

    def node_count(self) -> int:
        return len(self._adjacency)

    def edge_count(self) -> int:
        """Number of directed edges (an undirected walkway counts twice)."""
        return sum(len(edges) for edges in self._adjacency.values())

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def remove_node(self, node: N) -> None:
        """Remove ``node`` and every edge that points at it."""
        if self._adjacency.pop(node, None) is None:
            return

        for source, edges in self._adjacency.items():
            kept = [edge for edge in edges if edge.destination != node]
            if len(kept) != len(edges):
                self._adjacency[source] = kept

    def remove_edge(self, from_node: N, to_node: N) -> None:
        """Remove all edges from ``from_node`` to ``to_node`` (parallel ones included)."""
        edges = self._adjacency.get(from_node)
        if edges is not None:
            self._adjacency[from_node] = [e for e in edges if e.destination != to_node]

    def clear(self) -> None:
        self._adjacency.clear()

    # ------------------------------------------------------------------
    # Dunder helpers
    # ------------------------------------------------------------------

    def __contains__(self, node: object) -> bool:
        return node in self._adjacency

    def __len__(self) -> int:
        return len(self._adjacency)

    def __iter__(self) -> Iterator[N]:
        return iter(list(self._adjacency))

    def __repr__(self) -> str:
        return f"Graph(nodes={self.node_count()}, edges={self.edge_count()})"
