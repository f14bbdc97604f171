"""
Navigator configuration.

A single dataclass holds the knobs shared by the navigator and the CLI.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .exceptions import ConfigurationError, NotFoundError
from .navigation_mode import get_navigation_mode

_VALID_LEVELS = (logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR, logging.CRITICAL)


@dataclass
class NavigatorConfig:
    """Settings for building and running a Navigator.

    Attributes:
        default_mode: Registered navigation mode installed at construction
        check_connectivity: Log a connectivity report after each graph build
        log_level: Logging level for ``setup_logging``
        log_file: Optional rotating log file
        detailed_logging: Include file/line in log records
    """

    default_mode: str = "walking"
    check_connectivity: bool = True
    log_level: int = logging.INFO
    log_file: Optional[Path] = None
    detailed_logging: bool = False

    def __post_init__(self):
        if self.log_file is not None:
            self.log_file = Path(self.log_file)

    def validate(self) -> "NavigatorConfig":
        """Raise ConfigurationError on an unknown mode or log level."""
        try:
            get_navigation_mode(self.default_mode)
        except NotFoundError as e:
            raise ConfigurationError(str(e)) from e

        if self.log_level not in _VALID_LEVELS:
            raise ConfigurationError(f"Invalid log level: {self.log_level}")

        return self

    @classmethod
    def from_args(cls, args) -> "NavigatorConfig":
        """Build a config from an argparse namespace (missing attributes keep defaults)."""
        config = cls(
            default_mode=getattr(args, "mode", None) or cls.default_mode,
            log_level=logging.DEBUG if getattr(args, "verbose", False) else logging.INFO,
            log_file=getattr(args, "log_file", None),
            detailed_logging=getattr(args, "verbose", False),
        )
        return config.validate()
