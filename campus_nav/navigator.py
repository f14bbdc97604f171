"""
Campus router.

The Navigator owns the walkway graph (keyed by location id), runs Dijkstra
per request, chains ordered via-points into a single route and converts the
most recent route's distance into a travel time through the active
navigation mode.

Error policy: every failure raises a typed CampusNavError at the point of
detection and the cached last path is left untouched. ``try_find_path`` is
the non-raising variant for presentation layers.
"""

import logging
from typing import Dict, List, Optional, Sequence, Union

from .config import NavigatorConfig
from .connectivity import check_graph_connectivity
from .exceptions import (
    CampusNavError,
    InvalidArgumentError,
    NavigationStateError,
    NotFoundError,
    PathNotFoundError,
)
from .graph import Graph
from .location import Location
from .logging_config import LogTimer, get_logger
from .navigation_mode import NavigationMode, get_navigation_mode
from .path import Path
from .path_reconstruction import reconstruct_path
from .shortest_path import INF, dijkstra
from .types import Distance, EdgeSpec, IndexPair, LocationID, Minutes, RouteResult

logger = get_logger(__name__)

LocationRef = Union[Location, str]


class Navigator:
    """Shortest-route service over a fixed set of campus locations.

    Example:
        >>> nav = Navigator()
        >>> nav.initialize_graph(locations, [(0, 1), (1, 2)], [10.0, 5.0])
        >>> path = nav.find_path("A", "C")
        >>> path.total_distance
        15.0
        >>> nav.get_estimated_time()
        0.18
    """

    def __init__(self, config: Optional[NavigatorConfig] = None):
        self.config = config or NavigatorConfig()
        self._graph: Graph = Graph()
        self._locations: List[Location] = []
        self._by_id: Dict[LocationID, Location] = {}
        self._mode: Optional[NavigationMode] = get_navigation_mode(self.config.default_mode)
        self._last_path = Path()

    # ------------------------------------------------------------------
    # Graph construction
    # ------------------------------------------------------------------

    def initialize_graph(
        self,
        locations: Sequence[Location],
        connections: Sequence[IndexPair],
        distances: Sequence[Distance],
    ) -> None:
        """Build the graph from locations and undirected index-pair walkways.

        Args:
            locations: All campus locations; ids must be unique
            connections: ``(i, j)`` index pairs into ``locations``
            distances: Walkway weight for each connection, in meters

        Raises:
            InvalidArgumentError: On a null location, a duplicate id, an
                index outside ``locations`` or mismatched list lengths
        """
        if len(connections) != len(distances):
            raise InvalidArgumentError(
                f"Got {len(connections)} connections but {len(distances)} distances"
            )

        by_id: Dict[LocationID, Location] = {}
        for loc in locations:
            if loc is None:
                raise InvalidArgumentError("Location list contains a null location")
            if loc.id in by_id:
                raise InvalidArgumentError(
                    f"Duplicate location id {loc.id}: '{by_id[loc.id].name}' and '{loc.name}'"
                )
            by_id[loc.id] = loc

        count = len(locations)
        edges: List[EdgeSpec] = []
        for (from_index, to_index), weight in zip(connections, distances):
            if not (0 <= from_index < count and 0 <= to_index < count):
                raise InvalidArgumentError(
                    f"Connection ({from_index}, {to_index}) out of bounds for {count} locations"
                )
            edges.append(EdgeSpec(from_index, to_index, weight))

        # Validation passed; swap in the new state
        with LogTimer(logger, "Graph build", level=logging.DEBUG):
            graph: Graph = Graph()
            for loc in locations:
                graph.add_node(loc.id)
            for edge in edges:
                graph.add_undirected_edge(
                    locations[edge.from_index].id, locations[edge.to_index].id, edge.weight
                )

        self._graph = graph
        self._locations = list(locations)
        self._by_id = by_id
        self._last_path = Path()

        logger.info(
            f"Campus graph built: {graph.node_count()} locations, {len(connections)} walkways"
        )

        if self.config.check_connectivity:
            report = check_graph_connectivity(graph)
            if report.is_connected:
                logger.debug(report.summary())
            else:
                logger.warning(report.summary())

    # ------------------------------------------------------------------
    # Routing
    # ------------------------------------------------------------------

    def find_path(
        self,
        start: LocationRef,
        end: LocationRef,
        vias: Optional[Sequence[LocationRef]] = None,
    ) -> Path:
        """Shortest path from ``start`` to ``end`` through ordered ``vias``.

        Endpoints and vias may be Location objects or location names.

        Raises:
            InvalidArgumentError: Null/empty/unknown endpoint, a via not in
                the graph, or a via equal to start or end
            NotFoundError: A name that matches no location
            PathNotFoundError: Some leg joins disconnected locations
        """
        start_loc = self._resolve_endpoint(start, "Start")
        end_loc = self._resolve_endpoint(end, "End")

        via_locs = [self._resolve_endpoint(via, "Via") for via in (vias or ())]
        for via in via_locs:
            if via.id in (start_loc.id, end_loc.id):
                raise InvalidArgumentError(
                    f"Via '{via.name}' cannot be the start or end location"
                )

        if not via_locs:
            path = self._shortest_path(start_loc, end_loc)
        else:
            path = self._route_through(start_loc, end_loc, via_locs)

        self._last_path = path
        logger.debug(f"Route computed: {path}")
        return path

    def try_find_path(
        self,
        start: LocationRef,
        end: LocationRef,
        vias: Optional[Sequence[LocationRef]] = None,
    ) -> RouteResult:
        """Non-raising ``find_path``: returns ``RouteResult(path, error)``.

        Only CampusNavError is converted; anything else still propagates.
        """
        try:
            return RouteResult(self.find_path(start, end, vias), None)
        except CampusNavError as e:
            logger.info(f"Routing request failed ({e.kind.value}): {e}")
            return RouteResult(None, e)

    def _route_through(self, start: Location, end: Location, vias: List[Location]) -> Path:
        stops = [start, *vias, end]
        combined = Path()
        optimum = 0.0

        for leg_start, leg_end in zip(stops, stops[1:]):
            leg = self._shortest_path(leg_start, leg_end)
            optimum += leg.total_distance
            combined = combined + leg

        # combine() re-derives distance from geometry; the search optimum wins
        combined.set_total_distance(optimum)
        logger.debug(f"Stitched {len(stops) - 1} legs, total {optimum:.2f}m")
        return combined

    def _shortest_path(self, start: Location, end: Location) -> Path:
        distances, predecessors = dijkstra(self._graph, start.id, target=end.id)

        if distances.get(end.id, INF) == INF:
            raise PathNotFoundError(start.name, end.name)

        node_ids = reconstruct_path(predecessors, start.id, end.id)

        path = Path()
        for node_id in node_ids:
            path.append(self._by_id[node_id])
        path.set_total_distance(distances[end.id])
        return path

    def _resolve_endpoint(self, ref: LocationRef, role: str) -> Location:
        if ref is None:
            raise InvalidArgumentError(f"{role} location is null")

        if isinstance(ref, str):
            if not ref:
                raise InvalidArgumentError(f"{role} location name cannot be empty")
            return self.get_location_by_name(ref)

        if not self._graph.has_node(ref.id) or self._by_id.get(ref.id) is not ref:
            raise InvalidArgumentError(f"{role} location '{ref.name}' is not in the graph")
        return ref

    # ------------------------------------------------------------------
    # Navigation mode and time estimates
    # ------------------------------------------------------------------

    def set_navigation_mode(self, mode: Union[NavigationMode, str]) -> None:
        if mode is None:
            raise InvalidArgumentError("Navigation mode cannot be null")
        if isinstance(mode, str):
            mode = get_navigation_mode(mode)
        self._mode = mode
        logger.debug(f"Navigation mode set to {mode.description()}")

    def get_navigation_mode(self) -> Optional[NavigationMode]:
        return self._mode

    def get_estimated_time(self) -> Minutes:
        """Minutes for the last computed path under the active mode, 0.0 if none.

        Raises:
            NavigationStateError: If no navigation mode is installed
        """
        if self._last_path.empty():
            return 0.0
        if self._mode is None:
            raise NavigationStateError("Navigation mode not set")
        return self._mode.calculate_time(self._last_path.total_distance)

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def get_location_by_name(self, name: str) -> Location:
        for loc in self._locations:
            if loc.name == name:
                return loc
        raise NotFoundError(f"Location '{name}' not found")

    def get_location_by_id(self, location_id: LocationID) -> Location:
        try:
            return self._by_id[location_id]
        except KeyError:
            raise NotFoundError(f"Location id {location_id} not found") from None

    def get_all_locations(self) -> List[Location]:
        return list(self._locations)

    def get_graph(self) -> Graph:
        """The walkway graph, keyed by location id. Treat as read-only."""
        return self._graph

    def get_last_path(self) -> Path:
        return self._last_path
