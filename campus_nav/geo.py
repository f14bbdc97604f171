"""
Geographic utilities for the campus navigator.

Provides great-circle distance, coordinate validation and bearing helpers
used by locations, path accumulation and walking directions.
"""

import math
from math import atan2, cos, radians, sin, sqrt

from .types import Coordinate

# Mean Earth radius in meters
EARTH_RADIUS_M = 6371000.0

MIN_LATITUDE, MAX_LATITUDE = -90.0, 90.0
MIN_LONGITUDE, MAX_LONGITUDE = -180.0, 180.0

COMPASS_POINTS = (
    "north",
    "north-east",
    "east",
    "south-east",
    "south",
    "south-west",
    "west",
    "north-west",
)


def haversine(coord1: Coordinate, coord2: Coordinate) -> float:
    """
    Calculate great-circle distance between two points using Haversine formula.

    Args:
        coord1: First coordinate as (latitude, longitude) in decimal degrees
        coord2: Second coordinate as (latitude, longitude) in decimal degrees

    Returns:
        Distance in meters (float)

    Example:
        >>> main_gate = (12.8395, 80.1365)
        >>> mess = (12.8370, 80.1380)
        >>> print(f"{haversine(main_gate, mess):.0f} m")
        321 m

    Note:
        - Earth radius is approximated as 6,371 km
        - Coordinates must be in (lat, lon) format, not (lon, lat)
    """
    lat1, lon1 = coord1
    lat2, lon2 = coord2

    # Convert to radians
    lat1, lon1, lat2, lon2 = map(radians, (lat1, lon1, lat2, lon2))

    dlat = lat2 - lat1
    dlon = lon2 - lon1
    a = sin(dlat / 2) ** 2 + cos(lat1) * cos(lat2) * sin(dlon / 2) ** 2
    # Rounding can push a just past 1 for near-antipodal points
    a = min(1.0, max(0.0, a))
    c = 2 * atan2(sqrt(a), sqrt(1 - a))

    return EARTH_RADIUS_M * c


def is_valid_latitude(lat: float) -> bool:
    return MIN_LATITUDE <= lat <= MAX_LATITUDE


def is_valid_longitude(lon: float) -> bool:
    return MIN_LONGITUDE <= lon <= MAX_LONGITUDE


def validate_coordinates(lat: float, lon: float) -> bool:
    """Return True when both latitude and longitude are in range."""
    return is_valid_latitude(lat) and is_valid_longitude(lon)


def calculate_bearing(coord1: Coordinate, coord2: Coordinate) -> float:
    """
    Calculate initial bearing (forward azimuth) between two points.

    Args:
        coord1: Start coordinate as (latitude, longitude)
        coord2: End coordinate as (latitude, longitude)

    Returns:
        Bearing in degrees (0-360), where 0 is North, 90 is East, etc.
    """
    lat1, lon1 = map(radians, coord1)
    lat2, lon2 = map(radians, coord2)

    dlon = lon2 - lon1

    x = sin(dlon) * cos(lat2)
    y = cos(lat1) * sin(lat2) - sin(lat1) * cos(lat2) * cos(dlon)

    bearing_rad = math.atan2(x, y)
    bearing_deg = (math.degrees(bearing_rad) + 360) % 360

    return bearing_deg


def bearing_to_compass(bearing: float) -> str:
    """Map a bearing in degrees to one of eight compass points.

    Example:
        >>> bearing_to_compass(44.0)
        'north-east'
    """
    index = int(((bearing % 360) + 22.5) // 45) % 8
    return COMPASS_POINTS[index]
