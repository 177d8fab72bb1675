"""Custom exceptions used across multiple layers.

Rules:
- Only put exceptions here if they need to be raised in one layer and caught in another.
- Keep exceptions simple and focused.
- No I/O, no config loading, no complex logic.
"""

from __future__ import annotations


class DotReadError(Exception):
    """Raised when input DOT files cannot be located or read."""


class TemplateError(Exception):
    """Raised when a graph or subgraph template cannot be loaded."""


class ConfigError(Exception):
    """Raised when a configuration value has the wrong shape."""


class GraphWriteError(Exception):
    """Raised when the rendered graph cannot be written to its output path."""
