"""
CLI command handlers.
"""

from .modules_cli import cmd_modules
from .render_cli import cmd_render

__all__ = ["cmd_modules", "cmd_render"]
