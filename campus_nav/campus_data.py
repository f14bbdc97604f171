"""
Static campus dataset and graph assembly.

Holds the building table, the walkway table and the hidden turn points, and
turns them into the ``(locations, connections, distances)`` triple the
Navigator is built from. Walkways with a non-positive length are measured
from the endpoint coordinates here, before the router ever sees them.
"""

from typing import List, NamedTuple, Optional, Sequence, Tuple

from .buildings import AcademicBuilding, Gender, HostelBuilding
from .config import NavigatorConfig
from .exceptions import NotFoundError
from .geo import haversine
from .location import HIDDEN_DESCRIPTION, Location
from .logging_config import get_logger
from .navigator import Navigator
from .types import Distance, IndexPair

logger = get_logger(__name__)


class BuildingInfo(NamedTuple):
    name: str
    latitude: float
    longitude: float
    description: str
    building_type: str  # "Academic", "Hostel", "Amenity", "Administrative", "Entrance"


class PathConnection(NamedTuple):
    from_name: str
    to_name: str
    distance_m: Distance  # <= 0 means "measure from coordinates"


BUILDINGS: Tuple[BuildingInfo, ...] = (
    BuildingInfo("Main Gate", 12.839500, 80.136500, "Main entrance to the campus", "Entrance"),
    BuildingInfo("Academic Block", 12.838200, 80.137400, "Main academic building with classrooms", "Academic"),
    BuildingInfo("Admin Block", 12.838000, 80.136800, "Administrative offices", "Administrative"),
    BuildingInfo("Lab Complex", 12.837700, 80.137600, "Laboratory facilities", "Academic"),
    BuildingInfo("Hostel A", 12.837200, 80.136500, "Student hostel block A", "Hostel"),
    BuildingInfo("Hostel B", 12.836800, 80.136800, "Student hostel block B", "Hostel"),
    BuildingInfo("Hostel C", 12.836500, 80.137200, "Student hostel block C", "Hostel"),
    BuildingInfo("Hostel D", 12.836200, 80.137600, "Student hostel block D", "Hostel"),
    BuildingInfo("Mess", 12.837000, 80.138000, "Dining hall and cafeteria", "Amenity"),
    BuildingInfo("Auditorium", 12.838500, 80.136500, "Main auditorium for events", "Amenity"),
    BuildingInfo("Sports Complex", 12.836000, 80.136800, "Sports facilities including courts and grounds", "Amenity"),
    BuildingInfo("Library", 12.837900, 80.137100, "Knowledge Plaza - Central library", "Academic"),
    BuildingInfo("Lecture Hall Complex", 12.838300, 80.137000, "Additional lecture halls", "Academic"),
)

PATHS: Tuple[PathConnection, ...] = (
    PathConnection("Main Gate", "Auditorium", 111.19),
    PathConnection("Main Gate", "Admin Block", 169.93),
    PathConnection("Auditorium", "Academic Block", 103.12),
    PathConnection("Auditorium", "Lecture Hall Complex", 58.59),
    PathConnection("Admin Block", "Academic Block", 68.75),
    PathConnection("Academic Block", "Library", 46.59),
    PathConnection("Academic Block", "Lab Complex", 59.68),
    PathConnection("Library", "Lecture Hall Complex", 45.78),
    PathConnection("Lab Complex", "Mess", 89.10),
    PathConnection("Hostel A", "Admin Block", 94.72),
    PathConnection("Hostel A", "Hostel B", 55.10),
    PathConnection("Hostel B", "Hostel C", 54.71),
    PathConnection("Hostel C", "Hostel D", 54.71),
    PathConnection("Hostel D", "Mess", 98.96),
    PathConnection("Hostel C", "Sports Complex", 70.51),
    PathConnection("Hostel A", "Sports Complex", 137.34),
    PathConnection("Mess", "Lab Complex", 89.10),
    PathConnection("Sports Complex", "Hostel B", 88.96),
)

# Routing-only turn points; not listed to users
TURN_POINTS: Tuple[Tuple[str, float, float], ...] = (
    ("turn_01", 12.840104, 80.1366685),
    ("turn_02", 12.839675, 80.136476),
    ("turn_03", 12.839026, 80.136186),
    ("turn_04", 12.838454, 80.135948),
    ("turn_05", 12.837093, 80.135299),
    ("turn_06", 12.837072, 80.136278),
    ("turn_07", 12.836302, 80.136296),
    ("turn_08", 12.835422, 80.137477),
    ("turn_09", 12.838457, 80.139066),
)

_ACADEMIC_DETAILS = {
    "Academic Block": (("Computer Science", "Electronics", "Mechanical"), 20, 10),
    "Lab Complex": (("Computer Science", "Electronics"), 5, 15),
}


def normalize_name(name: str) -> str:
    """Lower-case alphanumerics only, for loose name matching.

    Example:
        >>> normalize_name("Hostel-A ")
        'hostela'
    """
    return "".join(c.lower() for c in name if c.isalnum())


def find_location(locations: Sequence[Location], name: str) -> Location:
    """Look up a location by name, exact match first, then loosely.

    Example:
        >>> find_location(create_campus_locations(), "hostel a").name
        'Hostel A'

    Raises:
        NotFoundError: If no location matches either way
    """
    for loc in locations:
        if loc.name == name:
            return loc

    wanted = normalize_name(name)
    for loc in locations:
        if wanted and normalize_name(loc.name) == wanted:
            return loc

    raise NotFoundError(f"Location '{name}' not found")


def _make_building(info: BuildingInfo, location_id: int) -> Location:
    if info.building_type == "Academic":
        academic = AcademicBuilding(info.name, info.latitude, info.longitude, info.description, location_id)
        departments, classrooms, labs = _ACADEMIC_DETAILS.get(info.name, ((), 0, 0))
        for department in departments:
            academic.add_department(department)
        academic.classrooms = classrooms
        academic.labs = labs
        academic.has_library = info.name == "Library"
        return academic

    if info.building_type == "Hostel":
        hostel = HostelBuilding(info.name, info.latitude, info.longitude, info.description, location_id)
        hostel.capacity = 550
        hostel.current_occupancy = 480
        hostel.floors = 4
        hostel.has_common_room = True
        hostel.gender = Gender.MALE if info.name in ("Hostel A", "Hostel B") else Gender.FEMALE
        return hostel

    return Location(info.name, info.latitude, info.longitude, info.description, location_id)


def create_campus_locations(
    buildings: Sequence[BuildingInfo] = BUILDINGS,
    turn_points: Sequence[Tuple[str, float, float]] = TURN_POINTS,
) -> List[Location]:
    """Instantiate every building followed by the hidden turn points.

    Ids are positions in the returned list: buildings first, then turn points.
    """
    locations = [_make_building(info, i) for i, info in enumerate(buildings)]

    offset = len(locations)
    for t, (name, lat, lon) in enumerate(turn_points):
        locations.append(Location(name, lat, lon, HIDDEN_DESCRIPTION, offset + t))

    logger.debug(f"Created {len(buildings)} buildings and {len(turn_points)} turn points")
    return locations


def build_connection_data(
    locations: Sequence[Location],
    paths: Sequence[PathConnection] = PATHS,
) -> Tuple[List[IndexPair], List[Distance]]:
    """Translate named walkways into index pairs and weights.

    Endpoint names are matched loosely (see ``normalize_name``). Walkways
    naming an unknown location are skipped with a warning. A non-positive
    length is replaced by the haversine distance between the endpoints.

    Returns:
        Tuple of (connections, distances), aligned by position
    """
    index_by_name = {normalize_name(loc.name): i for i, loc in enumerate(locations)}

    connections: List[IndexPair] = []
    distances: List[Distance] = []

    for walkway in paths:
        from_index = index_by_name.get(normalize_name(walkway.from_name))
        to_index = index_by_name.get(normalize_name(walkway.to_name))

        if from_index is None or to_index is None:
            logger.warning(
                f"Skipping walkway {walkway.from_name!r} -> {walkway.to_name!r}: unknown location"
            )
            continue

        distance = walkway.distance_m
        if distance <= 0.0:
            distance = haversine(locations[from_index].coordinate, locations[to_index].coordinate)
            logger.debug(
                f"Measured walkway {walkway.from_name} -> {walkway.to_name}: {distance:.2f}m"
            )

        connections.append((from_index, to_index))
        distances.append(distance)

    return connections, distances


def build_campus_navigator(config: Optional[NavigatorConfig] = None) -> Navigator:
    """A Navigator loaded with the full campus dataset."""
    navigator = Navigator(config)
    locations = create_campus_locations()
    connections, distances = build_connection_data(locations)
    navigator.initialize_graph(locations, connections, distances)
    return navigator
