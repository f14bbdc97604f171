"""
Ordered route through campus locations.

A Path holds Location references plus a cached total distance. Appending
accumulates great-circle distance between consecutive locations; the router
may override the total with the search's optimum via ``set_total_distance``
when edge weights are not pure geometry.
"""

from typing import Iterator, List, Optional

from .exceptions import InvalidArgumentError, OutOfRangeError
from .location import Location
from .types import Distance


class Path:
    """An ordered sequence of locations with a running total distance.

    Equality compares location ids only; ordering compares cached distance only.

    Example:
        >>> path = Path(main_gate)
        >>> path.append(auditorium)
        >>> print(path)
        Path (27.81m): Main Gate -> Auditorium
    """

    def __init__(self, start: Optional[Location] = None):
        self._locations: List[Location] = []
        self._total_distance: Distance = 0.0
        if start is not None:
            self._locations.append(start)

    # ------------------------------------------------------------------
    # Building
    # ------------------------------------------------------------------

    def append(self, location: Location) -> None:
        """Append a location, adding the hop distance from the current end.

        Raises:
            InvalidArgumentError: If ``location`` is None
        """
        if location is None:
            raise InvalidArgumentError("Cannot add null location to path")

        if self._locations:
            self._total_distance += self._locations[-1].distance_to(location)
        self._locations.append(location)

    def set_total_distance(self, distance: Distance) -> None:
        """Override the cached total distance.

        Raises:
            InvalidArgumentError: If ``distance`` is negative
        """
        if distance < 0:
            raise InvalidArgumentError(f"Distance cannot be negative, got {distance}")
        self._total_distance = float(distance)

    def recalculate_distance(self) -> Distance:
        """Re-derive the total from geometry, dropping any override."""
        total = 0.0
        for prev, curr in zip(self._locations, self._locations[1:]):
            total += prev.distance_to(curr)
        self._total_distance = total
        return total

    def clear(self) -> None:
        self._locations.clear()
        self._total_distance = 0.0

    def combine(self, other: "Path") -> "Path":
        """Concatenate two paths into a new one.

        When this path ends where ``other`` starts (same location id) the join
        location appears once. The combined distance is re-accumulated from
        geometry via ``append``; the operands' cached totals are NOT summed, so
        an override installed with ``set_total_distance`` on either operand
        does not carry over. Callers that need the search optimum must set it
        on the result.
        """
        combined = Path()
        for location in self._locations:
            combined.append(location)

        start_index = 0
        if combined._locations and other._locations:
            if combined._locations[-1].id == other._locations[0].id:
                start_index = 1

        for location in other._locations[start_index:]:
            combined.append(location)

        return combined

    def __add__(self, other: "Path") -> "Path":
        if not isinstance(other, Path):
            return NotImplemented
        return self.combine(other)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def total_distance(self) -> Distance:
        return self._total_distance

    @property
    def locations(self) -> List[Location]:
        return list(self._locations)

    @property
    def first(self) -> Optional[Location]:
        return self._locations[0] if self._locations else None

    @property
    def last(self) -> Optional[Location]:
        return self._locations[-1] if self._locations else None

    def empty(self) -> bool:
        return not self._locations

    def size(self) -> int:
        return len(self._locations)

    def at(self, index: int) -> Location:
        """Bounds-checked access; negative indexes are rejected.

        Raises:
            OutOfRangeError: If ``index`` is outside [0, size)
        """
        if not 0 <= index < len(self._locations):
            raise OutOfRangeError(index, len(self._locations))
        return self._locations[index]

    def ids(self) -> List[int]:
        return [location.id for location in self._locations]

    def names(self) -> List[str]:
        return [location.name for location in self._locations]

    # ------------------------------------------------------------------
    # Operators
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._locations)

    def __getitem__(self, index: int) -> Location:
        return self.at(index)

    def __iter__(self) -> Iterator[Location]:
        return iter(list(self._locations))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self.ids() == other.ids()

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __lt__(self, other: "Path") -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self._total_distance < other._total_distance

    def __gt__(self, other: "Path") -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self._total_distance > other._total_distance

    # Paths are mutable and compare by content.
    __hash__ = None

    def __str__(self) -> str:
        return f"Path ({self._total_distance:.2f}m): {' -> '.join(self.names())}"

    def __repr__(self) -> str:
        return f"Path(ids={self.ids()}, total_distance={self._total_distance:.2f})"
