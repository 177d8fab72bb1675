"""
Shared utility functions for CLI commands.
"""

from __future__ import annotations

import argparse
import logging
from typing import Any

from cdepgraph.components.io.dot_reader_comp import read_directory, read_single_file
from cdepgraph.helpers.dto.graph_dto import GraphModel
from cdepgraph.helpers.logging_helper import configure_logging, level_from_name, verbosity_to_level
from cdepgraph.services.config_svc import ConfigService
from cdepgraph.workflows.parsing.parse_graphs_wf import parse_graphs_workflow

__all__ = [
    "build_config_service",
    "load_graph",
    "setup_logging",
]


def build_config_service(args: argparse.Namespace) -> ConfigService:
    """Create a ConfigService with command-line flags as overrides."""
    overrides: dict[str, Any] = {
        "output_path": getattr(args, "output", None),
        "graph_template": getattr(args, "graph_template", None),
        "subgraph_template": getattr(args, "subgraph_template", None),
        "include_modules": getattr(args, "include", None),
        "private_modules": getattr(args, "private", None),
        # store_true flags only override when set
        "recursive": True if getattr(args, "recursive", False) else None,
    }
    return ConfigService(overrides)


def setup_logging(args: argparse.Namespace, config: ConfigService) -> None:
    """Configure logging from -v/-q flags, falling back to the configured level."""
    verbose = getattr(args, "verbose", 0) or 0
    quiet = getattr(args, "quiet", 0) or 0
    base = level_from_name(config.get("log_level"))
    configure_logging(verbosity_to_level(verbose, quiet, default=base))


def load_graph(args: argparse.Namespace, config: ConfigService) -> GraphModel:
    """
    Read the input selected by -s/-d and parse it.

    Raises:
        DotReadError: If the input cannot be read
        ConfigError: If the recursive setting is not a flag
    """
    if args.directory:
        contents = read_directory(args.directory, recursive=config.get_bool("recursive"))
    else:
        contents = read_single_file(args.file)

    logging.getLogger(__name__).debug("Read %d file(s)", len(contents))
    return parse_graphs_workflow(contents)
