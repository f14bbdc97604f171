"""
campus_nav - Campus routing core

This package provides shortest-route navigation between campus locations:
- Generic weighted graph with adjacency lists
- Dijkstra shortest path with ordered via-points
- Path value type with combination and comparison semantics
- Pluggable speed models (walking, cycling)
- Connectivity report, all-pairs distance table and walking directions

Version: 1.0.0
"""

from .buildings import AcademicBuilding, Gender, HostelBuilding
from .campus_data import build_campus_navigator, build_connection_data, create_campus_locations, find_location
from .config import NavigatorConfig
from .connectivity import ConnectivityReport, check_graph_connectivity, to_networkx
from .directions import DirectionsGenerator, DirectionStep, generate_directions
from .distance_matrix import DistanceMatrix, MatrixStats, compute_distance_matrix
from .exceptions import (
    CampusNavError,
    ConfigurationError,
    ErrorKind,
    InvalidArgumentError,
    NavigationStateError,
    NotFoundError,
    OutOfRangeError,
    PathNotFoundError,
    PathReconstructionError,
    RoutingError,
)
from .geo import calculate_bearing, haversine
from .graph import Graph
from .location import Location
from .logging_config import get_logger, setup_logging
from .navigation_mode import (
    CyclingMode,
    NavigationMode,
    WalkingMode,
    available_modes,
    get_navigation_mode,
    register_navigation_mode,
)
from .navigator import Navigator
from .path import Path
from .shortest_path import dijkstra
from .types import Coordinate, Edge, EdgeSpec, LocationID, RouteResult

__all__ = [
    # Types
    "Coordinate",
    "LocationID",
    "Edge",
    "EdgeSpec",
    "RouteResult",
    # Core
    "Location",
    "AcademicBuilding",
    "HostelBuilding",
    "Gender",
    "Graph",
    "Path",
    "Navigator",
    "NavigatorConfig",
    "dijkstra",
    # Navigation modes
    "NavigationMode",
    "WalkingMode",
    "CyclingMode",
    "get_navigation_mode",
    "register_navigation_mode",
    "available_modes",
    # Analysis and presentation helpers
    "ConnectivityReport",
    "check_graph_connectivity",
    "to_networkx",
    "DistanceMatrix",
    "MatrixStats",
    "compute_distance_matrix",
    "DirectionsGenerator",
    "DirectionStep",
    "generate_directions",
    # Campus dataset
    "create_campus_locations",
    "find_location",
    "build_connection_data",
    "build_campus_navigator",
    # Geographic Utilities
    "haversine",
    "calculate_bearing",
    # Logging
    "setup_logging",
    "get_logger",
    # Exceptions
    "CampusNavError",
    "ErrorKind",
    "InvalidArgumentError",
    "OutOfRangeError",
    "NotFoundError",
    "RoutingError",
    "PathNotFoundError",
    "PathReconstructionError",
    "NavigationStateError",
    "ConfigurationError",
]

__version__ = "1.0.0"
