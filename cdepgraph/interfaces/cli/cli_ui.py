#!/usr/bin/env python3
"""
Rich UI components for CLI - consistent output across all commands.
"""

from __future__ import annotations

from collections.abc import Callable

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from cdepgraph.helpers.dto.graph_dto import Module

console = Console()

# Color scheme constants
COLOR_SUCCESS = "green"
COLOR_ERROR = "red"
COLOR_WARNING = "yellow"
COLOR_INFO = "cyan"


class InfoPanel:
    """
    Simple panel for displaying status/info.
    """

    @staticmethod
    def show(title: str, content: str, border_style: str = COLOR_INFO):
        """Show a single info panel."""
        panel = Panel(content, title=f"[bold]{title}[/bold]", border_style=border_style, box=box.ROUNDED)
        console.print(panel)


class TableDisplay:
    """
    Formatted tables for parse results.
    """

    @staticmethod
    def show_modules(modules: list[Module], title: str = "Modules"):
        """Display a table of modules with public/private function counts."""
        table = Table(title=title, box=box.ROUNDED, show_header=True, header_style="bold")
        table.add_column("Module", style=COLOR_INFO)
        table.add_column("Functions", justify="right")
        table.add_column("Public", justify="right", style=COLOR_SUCCESS)
        table.add_column("Private", justify="right", style=COLOR_WARNING)

        for module in modules:
            table.add_row(
                module.module_prefix,
                str(len(module.nodes)),
                str(len(module.public_nodes)),
                str(len(module.private_nodes)),
            )

        console.print(table)


def show_spinner(message: str, task_fn: Callable, *args, **kwargs):
    """
    Show a spinner while executing a task.
    Returns the result of task_fn.
    """
    with console.status(f"[bold {COLOR_INFO}]{message}[/bold {COLOR_INFO}]"):
        return task_fn(*args, **kwargs)


def print_error(message: str):
    """Print an error message."""
    console.print(f"[bold {COLOR_ERROR}]✗[/bold {COLOR_ERROR}] {message}")


def print_warning(message: str):
    """Print a warning message."""
    console.print(f"[bold {COLOR_WARNING}]⚠[/bold {COLOR_WARNING}] {message}")
