"""
All-pairs shortest walking distances between campus locations.

Runs one full Dijkstra per location and stores the results in a dense numpy
array indexed by location order. Campus graphs are small (tens of nodes), so
the n x n float64 table is cheap.
"""

from dataclasses import dataclass
from typing import Dict, List, Tuple, Union

import numpy as np

from .exceptions import NotFoundError
from .location import Location
from .logging_config import LogTimer, get_logger
from .shortest_path import dijkstra
from .types import Distance, LocationID

logger = get_logger(__name__)

LocationKey = Union[Location, str, LocationID]


@dataclass
class MatrixStats:
    """Statistics about a distance matrix.

    Attributes:
        num_locations: Number of rows/columns
        num_paths: Number of reachable ordered pairs (diagonal excluded)
        num_unreachable: Number of unreachable ordered pairs
        max_distance: Longest finite shortest distance, 0.0 if none
        memory_bytes: Size of the distance array
    """

    num_locations: int
    num_paths: int
    num_unreachable: int
    max_distance: Distance
    memory_bytes: int


class DistanceMatrix:
    """Dense table of shortest-path distances.

    Attributes:
        locations: Row/column order
        distances: ``numpy.ndarray`` of shape (n, n), ``inf`` where unreachable
    """

    def __init__(self, locations: List[Location], distances: np.ndarray):
        self.locations = list(locations)
        self.distances = distances
        self._index: Dict[LocationID, int] = {loc.id: i for i, loc in enumerate(self.locations)}

    def index_of(self, key: LocationKey) -> int:
        """Row index for a Location, location name or location id."""
        if isinstance(key, Location):
            location_id = key.id
        elif isinstance(key, str):
            matches = [loc.id for loc in self.locations if loc.name == key]
            if not matches:
                raise NotFoundError(f"Location '{key}' not in distance matrix")
            location_id = matches[0]
        else:
            location_id = key

        try:
            return self._index[location_id]
        except KeyError:
            raise NotFoundError(f"Location id {location_id} not in distance matrix") from None

    def get_distance(self, source: LocationKey, target: LocationKey) -> Distance:
        """Shortest distance in meters, ``inf`` if no path exists."""
        return float(self.distances[self.index_of(source), self.index_of(target)])

    def has_path(self, source: LocationKey, target: LocationKey) -> bool:
        return bool(np.isfinite(self.distances[self.index_of(source), self.index_of(target)]))

    def nearest(self, source: LocationKey, k: int = 3) -> List[Tuple[Location, Distance]]:
        """The ``k`` closest reachable locations by walking distance, excluding ``source``."""
        row_index = self.index_of(source)
        row = self.distances[row_index]
        order = np.argsort(row, kind="stable")

        result: List[Tuple[Location, Distance]] = []
        for col in order:
            if col == row_index or not np.isfinite(row[col]):
                continue
            result.append((self.locations[col], float(row[col])))
            if len(result) == k:
                break
        return result

    def get_stats(self) -> MatrixStats:
        n = len(self.locations)
        off_diagonal = ~np.eye(n, dtype=bool)
        finite = np.isfinite(self.distances) & off_diagonal
        num_paths = int(finite.sum())
        max_distance = float(self.distances[finite].max()) if num_paths else 0.0

        return MatrixStats(
            num_locations=n,
            num_paths=num_paths,
            num_unreachable=int(off_diagonal.sum()) - num_paths,
            max_distance=max_distance,
            memory_bytes=int(self.distances.nbytes),
        )


def compute_distance_matrix(navigator) -> DistanceMatrix:
    """Compute shortest distances between every pair of the navigator's locations.

    Args:
        navigator: An initialized Navigator

    Returns:
        DistanceMatrix with rows in ``navigator.get_all_locations()`` order
    """
    locations = navigator.get_all_locations()
    graph = navigator.get_graph()
    n = len(locations)
    matrix = np.full((n, n), np.inf, dtype=np.float64)

    with LogTimer(logger, f"Distance matrix ({n}x{n})"):
        for row, source in enumerate(locations):
            distances, _ = dijkstra(graph, source.id)
            for col, target in enumerate(locations):
                matrix[row, col] = distances.get(target.id, np.inf)

    return DistanceMatrix(locations, matrix)
