"""
Helpers package.
"""

from .exceptions import ConfigError, DotReadError, GraphWriteError, TemplateError
from .logging_helper import configure_logging, level_from_name, verbosity_to_level

__all__ = [
    "ConfigError",
    "DotReadError",
    "GraphWriteError",
    "TemplateError",
    "configure_logging",
    "level_from_name",
    "verbosity_to_level",
]
