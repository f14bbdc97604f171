"""
Specialised campus locations.

Academic buildings and hostels carry facility details on top of the plain
Location record. Routing treats them exactly like any other Location.
"""

from enum import Enum
from typing import List, Optional

from .exceptions import InvalidArgumentError
from .location import Location


def _non_negative(value: int, what: str) -> int:
    if value < 0:
        raise InvalidArgumentError(f"{what} cannot be negative, got {value}")
    return int(value)


class Gender(Enum):
    """Residency type of a hostel."""

    MALE = "Male"
    FEMALE = "Female"
    COED = "Coed"


class AcademicBuilding(Location):
    """A teaching building with departments, classrooms and labs."""

    kind = "Academic Building"

    def __init__(
        self,
        name: str,
        latitude: float,
        longitude: float,
        description: str = "",
        location_id: Optional[int] = None,
    ):
        super().__init__(name, latitude, longitude, description, location_id)
        self._departments: List[str] = []
        self._classrooms = 0
        self._labs = 0
        self.has_library = False

    def add_department(self, department: str) -> None:
        if not department:
            raise InvalidArgumentError("Department name cannot be empty")
        self._departments.append(department)

    @property
    def departments(self) -> List[str]:
        return list(self._departments)

    @property
    def classrooms(self) -> int:
        return self._classrooms

    @classrooms.setter
    def classrooms(self, count: int) -> None:
        self._classrooms = _non_negative(count, "Classroom count")

    @property
    def labs(self) -> int:
        return self._labs

    @labs.setter
    def labs(self, count: int) -> None:
        self._labs = _non_negative(count, "Lab count")

    def describe(self) -> str:
        lines = [
            super().describe(),
            f"  Classrooms: {self._classrooms}",
            f"  Labs: {self._labs}",
            f"  Has Library: {'Yes' if self.has_library else 'No'}",
            f"  Departments: {', '.join(self._departments) or '-'}",
        ]
        return "\n".join(lines)


class HostelBuilding(Location):
    """A student residence."""

    kind = "Hostel Building"

    def __init__(
        self,
        name: str,
        latitude: float,
        longitude: float,
        description: str = "",
        location_id: Optional[int] = None,
    ):
        super().__init__(name, latitude, longitude, description, location_id)
        self._capacity = 0
        self._current_occupancy = 0
        self._floors = 0
        self.gender = Gender.COED
        self.has_common_room = False

    @property
    def capacity(self) -> int:
        return self._capacity

    @capacity.setter
    def capacity(self, value: int) -> None:
        self._capacity = _non_negative(value, "Capacity")

    @property
    def current_occupancy(self) -> int:
        return self._current_occupancy

    @current_occupancy.setter
    def current_occupancy(self, value: int) -> None:
        self._current_occupancy = _non_negative(value, "Occupancy")

    @property
    def availability(self) -> int:
        """Free beds; negative when the hostel is over capacity."""
        return self._capacity - self._current_occupancy

    @property
    def floors(self) -> int:
        return self._floors

    @floors.setter
    def floors(self, value: int) -> None:
        self._floors = _non_negative(value, "Floor count")

    def describe(self) -> str:
        lines = [
            super().describe(),
            f"  Capacity: {self._capacity}",
            f"  Current Occupancy: {self._current_occupancy}",
            f"  Available Beds: {self.availability}",
            f"  Number of Floors: {self._floors}",
            f"  Has Common Room: {'Yes' if self.has_common_room else 'No'}",
            f"  Gender Type: {self.gender.value}",
        ]
        return "\n".join(lines)
