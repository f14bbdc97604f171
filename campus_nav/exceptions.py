"""
Custom exceptions for the campus navigator.

Provides a clear exception hierarchy for better error handling and debugging.
All exceptions inherit from CampusNavError for easy catching of all library errors,
and every error carries an ErrorKind so a presentation layer can branch on it
without isinstance chains.
"""

from enum import Enum


class ErrorKind(Enum):
    """Standard error kinds surfaced to callers."""

    INVALID_ARGUMENT = "invalid_argument"
    NOT_FOUND = "not_found"
    PATH_NOT_FOUND = "path_not_found"
    INTERNAL = "internal"
    CONFIGURATION = "configuration"


class CampusNavError(Exception):
    """Base exception for all campus navigation errors."""

    kind = ErrorKind.INTERNAL


# ==============================================================================
# Input Errors
# ==============================================================================


class InvalidArgumentError(CampusNavError, ValueError):
    """Raised when input validation fails (empty name, bad coordinate, null node...)."""

    kind = ErrorKind.INVALID_ARGUMENT


class OutOfRangeError(InvalidArgumentError, IndexError):
    """Raised when a path index is outside the path."""

    def __init__(self, index: int, size: int):
        self.index = index
        self.size = size
        super().__init__(f"Path index {index} out of range [0, {size})")


class NotFoundError(CampusNavError, LookupError):
    """Raised when a named location, graph edge or navigation mode is absent."""

    kind = ErrorKind.NOT_FOUND


# ==============================================================================
# Routing Errors
# ==============================================================================


class RoutingError(CampusNavError):
    """Base class for routing-related errors."""

    pass


class PathNotFoundError(RoutingError):
    """Raised when source and destination lie in disconnected parts of the graph."""

    kind = ErrorKind.PATH_NOT_FOUND

    def __init__(self, start, end):
        self.start = start
        self.end = end
        super().__init__(f"No path exists between {start} and {end}")


class PathReconstructionError(RoutingError):
    """Raised when the predecessor chain is broken after a successful search.

    This indicates a bug in the search, not bad user input.
    """

    def __init__(self, source, target, reason: str):
        self.source = source
        self.target = target
        self.reason = reason
        super().__init__(f"Path reconstruction from {source} to {target} failed: {reason}")


class NavigationStateError(CampusNavError):
    """Raised when the navigator has no speed model installed."""

    pass


# ==============================================================================
# Configuration Errors
# ==============================================================================


class ConfigurationError(CampusNavError):
    """Raised when configuration is invalid."""

    kind = ErrorKind.CONFIGURATION
