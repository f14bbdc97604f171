"""
Type definitions for the campus navigator.

This module provides type aliases and small record types shared across the
graph, router and presentation helpers.
"""

from typing import Any, NamedTuple, Optional, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from .exceptions import CampusNavError
    from .path import Path

# Type Aliases for clarity
Coordinate = Tuple[float, float]  # (latitude, longitude) in decimal degrees
LocationID = int  # Stable location identifier
Distance = float  # Distance in meters
Minutes = float  # Travel time in minutes
IndexPair = Tuple[int, int]  # Index pair into a location list


class Edge(NamedTuple):
    """A directed weighted edge in the adjacency list.

    Attributes:
        destination: Node identity the edge points at
        weight: Non-negative edge weight (meters for campus walkways)
    """

    destination: Any
    weight: float


class EdgeSpec(NamedTuple):
    """A walkway descriptor used to build the router's graph.

    Attributes:
        from_index: Index of the first endpoint in the location list
        to_index: Index of the second endpoint in the location list
        weight: Walkway length in meters
    """

    from_index: int
    to_index: int
    weight: Distance


class RouteResult(NamedTuple):
    """Outcome of a routing request that does not raise.

    Exactly one of ``path`` and ``error`` is set.

    Attributes:
        path: The computed path on success
        error: The typed error on failure
    """

    path: Optional["Path"]
    error: Optional["CampusNavError"]

    @property
    def ok(self) -> bool:
        return self.error is None
