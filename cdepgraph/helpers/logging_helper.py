"""
Logging helpers for the command-line entry points.

Library modules only ever call ``logging.getLogger(__name__)``; the process-wide
configuration is installed once by the CLI through ``configure_logging``.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

LEVEL_NAMES = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def verbosity_to_level(verbose: int = 0, quiet: int = 0, default: int = logging.WARNING) -> int:
    """
    Map counted ``-v`` / ``-q`` flags to a logging level.

    Each ``-v`` lowers the threshold by one step, each ``-q`` raises it.

    Examples:
        >>> verbosity_to_level(1)
        20
        >>> verbosity_to_level(2)
        10
        >>> verbosity_to_level(quiet=1)
        40
    """
    level = default - 10 * verbose + 10 * quiet
    return max(logging.DEBUG, min(logging.CRITICAL, level))


def level_from_name(name: str | None, default: int = logging.WARNING) -> int:
    """Resolve a configured level name ("info", "DEBUG", ...) to a logging level."""
    if not isinstance(name, str) or not name.strip():
        return default
    return LEVEL_NAMES.get(name.strip().lower(), default)


def configure_logging(level: int = logging.WARNING) -> None:
    """Configure logging once for the whole process."""
    logging.basicConfig(level=level, format=LOG_FORMAT, force=True)
    logger.debug("Logging configured at level %s", logging.getLevelName(level))
