"""
Logging setup for campus_nav.

Every module logs through a child of the ``campus_nav`` logger. Library code
never configures handlers; ``setup_logging`` is called once by the CLI (or by
an embedding application) to attach a console handler and, optionally, a
rotating log file.

The console and the file may run at different levels: the CLI keeps the
terminal at WARNING while a ``--log-file`` still records routing detail.
"""

import logging
import sys
import time
import traceback
from pathlib import Path
from typing import Optional
from logging.handlers import RotatingFileHandler


CONSOLE_FORMAT = "%(levelname)s %(name)s: %(message)s"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DETAILED_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s"

PACKAGE_LOGGER = "campus_nav"

# Route logs are a few lines per request; a small rotating file is plenty
LOG_FILE_MAX_BYTES = 1024 * 1024
LOG_FILE_BACKUPS = 2


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[Path] = None,
    console: bool = True,
    detailed: bool = False,
    console_level: Optional[int] = None,
) -> logging.Logger:
    """Attach handlers to the ``campus_nav`` logger.

    Calling it again replaces the previous handlers.

    Args:
        level: Level for the log file, and for the console unless
            ``console_level`` is given
        log_file: Rotating log file; parent directories are created
        console: Write records to stdout
        detailed: Add ``file:line`` to every record
        console_level: Separate threshold for the stdout handler

    Returns:
        The package logger

    Example:
        >>> setup_logging(logging.DEBUG, log_file=Path("logs/nav.log"),
        ...               console_level=logging.WARNING)
    """
    if console_level is None:
        console_level = level

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(min(level, console_level) if console else level)
    logger.handlers.clear()

    if console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(console_level)
        console_handler.setFormatter(
            logging.Formatter(DETAILED_FORMAT if detailed else CONSOLE_FORMAT)
        )
        logger.addHandler(console_handler)

    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=LOG_FILE_MAX_BYTES,
            backupCount=LOG_FILE_BACKUPS,
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(DETAILED_FORMAT if detailed else FILE_FORMAT))
        logger.addHandler(file_handler)

    # Keep records out of an embedding application's root handlers
    logger.propagate = False

    return logger


def get_logger(name: str) -> logging.Logger:
    """Module logger under ``campus_nav``.

    ``campus_nav.navigator`` is used as-is; a bare ``"scripts"`` becomes
    ``campus_nav.scripts``.
    """
    if name == PACKAGE_LOGGER or name.startswith(PACKAGE_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{PACKAGE_LOGGER}.{name}")


class LogTimer:
    """Log how long a block took, e.g. a graph build or the distance matrix.

    The duration is also kept on ``elapsed`` after the block exits.

    Example:
        >>> with LogTimer(logger, "Distance matrix (22x22)"):
        ...     matrix = compute_distance_matrix(navigator)
    """

    def __init__(self, logger: logging.Logger, operation: str, level: int = logging.INFO):
        self.logger = logger
        self.operation = operation
        self.level = level
        self.start_time: Optional[float] = None
        self.elapsed: Optional[float] = None

    def __enter__(self):
        self.start_time = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.elapsed = time.perf_counter() - self.start_time
        if exc_type is None:
            self.logger.log(self.level, f"{self.operation}: {self.elapsed * 1000:.1f}ms")
        else:
            self.logger.log(self.level, f"{self.operation} aborted after {self.elapsed * 1000:.1f}ms")
        return False


def log_exception(
    logger: logging.Logger,
    message: str,
    exc: Exception,
    level: int = logging.ERROR,
) -> None:
    """Log ``message: exc`` at ``level`` and the traceback at DEBUG.

    Callers that already show the error to the user pass a level below the
    console threshold so the record only reaches verbose consoles and log files.
    """
    logger.log(level, f"{message}: {exc}")
    logger.debug(
        "Traceback:\n" + "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    )
