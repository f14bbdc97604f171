"""
Speed models converting route distance to travel time.

Each mode is a name plus an average speed. The linear model covers walking
and cycling; a non-linear model subclasses NavigationMode and overrides
``calculate_time``.
"""

from typing import Callable, Dict, List

from .exceptions import InvalidArgumentError, NotFoundError
from .types import Distance, Minutes


class NavigationMode:
    """Base speed model: constant average speed.

    Args:
        name: Display name of the mode
        speed_kmh: Average speed in km/h, must be positive
    """

    def __init__(self, name: str, speed_kmh: float):
        if not name:
            raise InvalidArgumentError("Navigation mode name cannot be empty")
        if speed_kmh <= 0:
            raise InvalidArgumentError(f"Speed must be positive, got {speed_kmh}")
        self._name = name
        self._speed_kmh = float(speed_kmh)

    @property
    def name(self) -> str:
        return self._name

    @property
    def speed_kmh(self) -> float:
        return self._speed_kmh

    @property
    def meters_per_minute(self) -> float:
        return self._speed_kmh * 1000.0 / 60.0

    def calculate_time(self, distance_m: Distance) -> Minutes:
        """Travel time in minutes for ``distance_m`` meters.

        Example:
            >>> WalkingMode().calculate_time(1000)
            12.0
        """
        if distance_m < 0:
            raise InvalidArgumentError(f"Distance cannot be negative, got {distance_m}")
        return distance_m / self.meters_per_minute

    def description(self) -> str:
        return f"{self._name} at {self._speed_kmh:g} km/h"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NavigationMode):
            return NotImplemented
        return type(self) is type(other) and (self._name, self._speed_kmh) == (other._name, other._speed_kmh)

    def __hash__(self) -> int:
        return hash((type(self), self._name, self._speed_kmh))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r}, speed_kmh={self._speed_kmh:g})"


class WalkingMode(NavigationMode):
    """Walking at 5 km/h."""

    SPEED_KMH = 5.0

    def __init__(self):
        super().__init__("Walking", self.SPEED_KMH)


class CyclingMode(NavigationMode):
    """Cycling at 15 km/h."""

    SPEED_KMH = 15.0

    def __init__(self):
        super().__init__("Cycling", self.SPEED_KMH)


# ==============================================================================
# Registry
# ==============================================================================

ModeFactory = Callable[[], NavigationMode]

_MODE_REGISTRY: Dict[str, ModeFactory] = {
    "walking": WalkingMode,
    "cycling": CyclingMode,
}


def register_navigation_mode(name: str, factory: ModeFactory) -> None:
    """Make a mode selectable by name (CLI ``--mode``, config ``default_mode``)."""
    if not name:
        raise InvalidArgumentError("Navigation mode name cannot be empty")
    _MODE_REGISTRY[name.lower()] = factory


def get_navigation_mode(name: str) -> NavigationMode:
    """Instantiate a registered mode by case-insensitive name.

    Raises:
        NotFoundError: If no mode is registered under ``name``
    """
    factory = _MODE_REGISTRY.get((name or "").lower())
    if factory is None:
        raise NotFoundError(
            f"Unknown navigation mode '{name}' (available: {', '.join(available_modes())})"
        )
    return factory()


def available_modes() -> List[str]:
    return sorted(_MODE_REGISTRY)
