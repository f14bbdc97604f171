"""
Connectivity analysis for the campus walkway graph.

Converts the adjacency-list Graph to a networkx MultiDiGraph and reports its
weakly connected components. A campus with more than one component has
location pairs that no route can join; the navigator logs this at build time
so PathNotFoundError at query time does not come as a surprise.
"""

from dataclasses import dataclass, field
from typing import Hashable, List, Set

import networkx as nx

from .graph import Graph
from .logging_config import get_logger

logger = get_logger(__name__)


@dataclass
class ConnectivityReport:
    """Summary of the graph's component structure.

    Attributes:
        num_components: Number of weakly connected components
        components: Node sets, largest first
        isolated_nodes: Nodes with no incident edges at all
    """

    num_components: int
    components: List[Set[Hashable]] = field(default_factory=list)
    isolated_nodes: List[Hashable] = field(default_factory=list)

    @property
    def is_connected(self) -> bool:
        return self.num_components <= 1

    def component_of(self, node: Hashable) -> int:
        """Index of the component holding ``node``, or -1."""
        for index, component in enumerate(self.components):
            if node in component:
                return index
        return -1

    def summary(self) -> str:
        if self.num_components == 0:
            return "Graph is empty"
        if self.is_connected:
            size = len(self.components[0])
            return f"Graph is connected: {size} nodes in a single component"
        sizes = ", ".join(str(len(c)) for c in self.components)
        return (
            f"Graph is disconnected: {self.num_components} components "
            f"(sizes {sizes}), {len(self.isolated_nodes)} isolated nodes"
        )


def to_networkx(graph: Graph) -> nx.MultiDiGraph:
    """Copy a Graph into a networkx MultiDiGraph with ``weight`` edge data."""
    nx_graph = nx.MultiDiGraph()
    for node in graph.all_nodes():
        nx_graph.add_node(node)
        for edge in graph.neighbors(node):
            nx_graph.add_edge(node, edge.destination, weight=edge.weight)
    return nx_graph


def check_graph_connectivity(graph: Graph) -> ConnectivityReport:
    """Report the weakly connected components of ``graph``.

    Example:
        >>> report = check_graph_connectivity(navigator.get_graph())
        >>> report.is_connected
        True
    """
    nx_graph = to_networkx(graph)

    if nx_graph.number_of_nodes() == 0:
        return ConnectivityReport(num_components=0)

    components = sorted(
        (set(c) for c in nx.weakly_connected_components(nx_graph)),
        key=len,
        reverse=True,
    )
    isolated = list(nx.isolates(nx_graph))

    report = ConnectivityReport(
        num_components=len(components),
        components=components,
        isolated_nodes=isolated,
    )
    logger.debug(report.summary())
    return report
