"""
Geolocated campus points.

A Location is the node payload of the campus graph: a named point with a
stable integer id. The router keys its graph by that id and keeps the
Location objects in a separate lookup table.
"""

from typing import Optional

from .exceptions import InvalidArgumentError
from .geo import haversine, is_valid_latitude, is_valid_longitude, validate_coordinates
from .types import Coordinate, Distance, LocationID

HIDDEN_DESCRIPTION = "[hidden]"


class Location:
    """A named point on campus.

    Attributes:
        name: Display name (non-empty)
        latitude: Latitude in decimal degrees, [-90, 90]
        longitude: Longitude in decimal degrees, [-180, 180]
        description: Free text description
        id: Stable identifier, read-only after construction

    Raises:
        InvalidArgumentError: On an empty name or out-of-range coordinate,
            both at construction time and through the setters.
    """

    kind = "Location"

    def __init__(
        self,
        name: str,
        latitude: float,
        longitude: float,
        description: str = "",
        location_id: Optional[LocationID] = None,
    ):
        self.name = name
        self.latitude = latitude
        self.longitude = longitude
        self.description = description
        self._id = -1 if location_id is None else int(location_id)

    # ------------------------------------------------------------------
    # Validated attributes
    # ------------------------------------------------------------------

    @property
    def id(self) -> LocationID:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        if not value:
            raise InvalidArgumentError("Location name cannot be empty")
        self._name = value

    @property
    def latitude(self) -> float:
        return self._latitude

    @latitude.setter
    def latitude(self, value: float) -> None:
        if value is None or not is_valid_latitude(value):
            raise InvalidArgumentError(f"Latitude must be between -90 and 90 degrees, got {value}")
        self._latitude = float(value)

    @property
    def longitude(self) -> float:
        return self._longitude

    @longitude.setter
    def longitude(self, value: float) -> None:
        if value is None or not is_valid_longitude(value):
            raise InvalidArgumentError(f"Longitude must be between -180 and 180 degrees, got {value}")
        self._longitude = float(value)

    @property
    def description(self) -> str:
        return self._description

    @description.setter
    def description(self, value: Optional[str]) -> None:
        self._description = value or ""

    @property
    def coordinate(self) -> Coordinate:
        return (self._latitude, self._longitude)

    @property
    def is_hidden(self) -> bool:
        """Hidden turn points exist for routing only and are not listed to users."""
        return self._description == HIDDEN_DESCRIPTION

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------

    def distance_to(self, other: "Location") -> Distance:
        """Great-circle distance to another location in meters."""
        if other is None:
            raise InvalidArgumentError("Cannot measure distance to a null location")
        return haversine(self.coordinate, other.coordinate)

    @staticmethod
    def validate_coordinates(lat: float, lon: float) -> bool:
        return validate_coordinates(lat, lon)

    # ------------------------------------------------------------------
    # Presentation
    # ------------------------------------------------------------------

    def describe(self) -> str:
        """Human-readable multi-line summary."""
        lines = [
            f"{self.kind}: {self._name}",
            f"  Coordinates: ({self._latitude:.6f}, {self._longitude:.6f})",
            f"  Description: {self._description}",
            f"  ID: {self._id}",
        ]
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r}, id={self._id})"

    def __str__(self) -> str:
        return self._name
