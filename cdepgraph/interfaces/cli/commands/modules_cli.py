"""
Modules command: list the modules found in the call graphs.
"""

from __future__ import annotations

import argparse

from cdepgraph.helpers.exceptions import ConfigError, DotReadError
from cdepgraph.interfaces.cli.cli_ui import TableDisplay, print_error, print_warning
from cdepgraph.interfaces.cli.utils import build_config_service, load_graph, setup_logging


def cmd_modules(args: argparse.Namespace) -> int:
    """Print a table of modules with their public and private function counts."""
    config = build_config_service(args)
    setup_logging(args, config)

    try:
        model = load_graph(args, config)
    except (DotReadError, ConfigError) as e:
        print_error(str(e))
        return 1

    if not model.modules:
        print_warning("No modules found")
        return 0

    TableDisplay.show_modules(model.modules, title=f"Modules ({model.summary.files} file(s))")
    return 0
