"""
Render command: parse call graphs and write the module-grouped graph.
"""

from __future__ import annotations

import argparse

from cdepgraph.components.rendering.graph_writer_comp import GraphWriter
from cdepgraph.helpers.exceptions import ConfigError, DotReadError, GraphWriteError, TemplateError
from cdepgraph.interfaces.cli.cli_ui import InfoPanel, print_error, print_warning, show_spinner
from cdepgraph.interfaces.cli.utils import build_config_service, load_graph, setup_logging


def cmd_render(args: argparse.Namespace) -> int:
    """
    Parse the selected DOT files and write the restructured dependency graph.
    """
    config = build_config_service(args)
    setup_logging(args, config)

    try:
        model = show_spinner("Parsing call graphs...", load_graph, args, config)
        writer = GraphWriter(model.modules, model.edges, config.make_render_options())
        result = writer.draw_graph(config.get_output_path())
    except (DotReadError, TemplateError, GraphWriteError, ConfigError) as e:
        print_error(str(e))
        return 1

    if result.modules_rendered == 0:
        print_warning("No modules matched; the output graph is empty")

    summary = model.summary
    content = f"""[bold]Output:[/bold] {result.output_path}

[bold]Files parsed:[/bold] {summary.files}
[bold]Functions:[/bold] {summary.nodes} ({summary.duplicate_nodes} duplicates merged)
[bold]Calls:[/bold] {summary.edges} ({summary.unresolved_endpoints} external endpoints)
[bold]Modules rendered:[/bold] {result.modules_rendered} of {summary.modules}
[bold]Nodes / edges written:[/bold] {result.nodes_rendered} / {result.edges_rendered}"""
    InfoPanel.show("Dependency Graph Written", content, "green")
    return 0
