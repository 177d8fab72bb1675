"""
Graph writer component.

Fills the graph and subgraph templates with the parsed modules and edges and
writes the resulting Graphviz DOT graph. Templates use ``%name%``
placeholders:

graph template:
    %graph.subgraph_cluster%   one rendered subgraph per module and visibility
    %graph.edges%              one edge definition per distinct call

subgraph template:
    %subgraph.visibility%       "pub" / "priv"
    %subgraph.visibility_long%  "Public" / "Private"
    %subgraph.modulePrefix%     module prefix, e.g. "BMS"
    %subgraph.node_defs%        node definitions of the cluster
"""

from __future__ import annotations

import logging
from pathlib import Path

from cdepgraph.helpers.dto.graph_dto import Edge, Module, Node
from cdepgraph.helpers.dto.render_dto import RenderOptions, RenderResult
from cdepgraph.helpers.exceptions import GraphWriteError, TemplateError

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).parent / "templates"
DEFAULT_GRAPH_TEMPLATE = TEMPLATES_DIR / "graph.temp"
DEFAULT_SUBGRAPH_TEMPLATE = TEMPLATES_DIR / "subgraph.temp"
DEFAULT_OUTPUT = "out.dot"

VISIBILITIES = {
    "pub": "Public",
    "priv": "Private",
}


def read_template(template_path: Path) -> str:
    """Return the exact contents of a template file, whitespace included."""
    try:
        return template_path.read_text(encoding="utf-8")
    except OSError as e:
        raise TemplateError(f"Cannot read template {template_path}: {e}") from e


def escape_label(label: str) -> str:
    return label.replace("\\", "\\\\").replace('"', '\\"')


class GraphWriter:
    """Renders a module-grouped dependency graph from parsed modules and edges."""

    NODE_DEFINITION = '%node.id% [label="%node.label%"];'
    EDGE_DEFINITION = "%edge.src.id% -> %edge.dest.id%;"

    def __init__(
        self,
        modules: list[Module],
        edges: list[Edge],
        options: RenderOptions | None = None,
    ) -> None:
        self.modules = modules
        self.edges = edges
        self.options = options or RenderOptions()
        self.graph_template_path = self.options.graph_template_path or DEFAULT_GRAPH_TEMPLATE
        self.subgraph_template_path = self.options.subgraph_template_path or DEFAULT_SUBGRAPH_TEMPLATE
        self.graph_template = ""
        self.subgraph_template = ""
        self._render_ids: dict[Node, str] = {}
        self._modules_rendered = 0
        self._edges_rendered = 0

    def read_templates(self) -> None:
        self.graph_template = read_template(Path(self.graph_template_path))
        self.subgraph_template = read_template(Path(self.subgraph_template_path))

    def selected_modules(self) -> list[Module]:
        """Modules that pass the include filter, in parse order."""
        include = set(self.options.include_modules)
        if not include:
            return list(self.modules)
        return [m for m in self.modules if m.module_prefix in include]

    def render(self) -> str:
        """Render the whole graph and return it as text."""
        if not self.graph_template or not self.subgraph_template:
            self.read_templates()

        self._render_ids = {}
        private = set(self.options.private_modules)
        subgraphs: list[str] = []

        modules = self.selected_modules()
        for module in modules:
            if module.public_nodes:
                subgraphs.append(self.render_subgraph(module, "pub", module.public_nodes))
            if module.module_prefix in private and module.private_nodes:
                subgraphs.append(self.render_subgraph(module, "priv", module.private_nodes))

        edge_defs = self.render_edges()
        self._modules_rendered = len(modules)

        graph = self.graph_template
        graph = graph.replace("%graph.edges%", "".join(edge_defs))
        graph = graph.replace("%graph.subgraph_cluster%", "".join(s + "\n" for s in subgraphs))
        return graph

    def render_subgraph(self, module: Module, visibility: str, nodes: list[Node]) -> str:
        node_defs = ""
        for node in nodes:
            node_string = self.NODE_DEFINITION
            node_string = node_string.replace("%node.id%", self._render_id(node))
            node_string = node_string.replace("%node.label%", escape_label(node.label))
            node_defs += "    " + node_string + "\n"

        subgraph = self.subgraph_template
        subgraph = subgraph.replace("%subgraph.visibility_long%", VISIBILITIES[visibility])
        subgraph = subgraph.replace("%subgraph.visibility%", visibility)
        subgraph = subgraph.replace("%subgraph.modulePrefix%", module.module_prefix)
        subgraph = subgraph.replace("%subgraph.node_defs%", node_defs)
        return subgraph

    def render_edges(self) -> list[str]:
        """Edge definitions between rendered nodes, one per distinct pair."""
        seen: set[tuple[str, str]] = set()
        edge_defs: list[str] = []
        for edge in self.edges:
            if edge.source_node is None or edge.destination_node is None:
                continue
            src = self._render_ids.get(edge.source_node)
            dest = self._render_ids.get(edge.destination_node)
            if src is None or dest is None or (src, dest) in seen:
                continue
            seen.add((src, dest))
            edge_string = self.EDGE_DEFINITION
            edge_string = edge_string.replace("%edge.src.id%", src)
            edge_string = edge_string.replace("%edge.dest.id%", dest)
            edge_defs.append("  " + edge_string + "\n")

        self._edges_rendered = len(edge_defs)
        return edge_defs

    def draw_graph(self, file_name: str | Path = DEFAULT_OUTPUT) -> RenderResult:
        """
        Render the graph and write it to file_name.

        Raises:
            TemplateError: If a template cannot be read
            GraphWriteError: If the output file cannot be written
        """
        graph = self.render()
        output_path = Path(file_name)
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(graph, encoding="utf-8")
        except OSError as e:
            raise GraphWriteError(f"Cannot write graph to {output_path}: {e}") from e

        logger.info(
            "Wrote %s: %d modules, %d nodes, %d edges",
            output_path,
            self._modules_rendered,
            len(self._render_ids),
            self._edges_rendered,
        )
        return RenderResult(
            output_path=output_path,
            modules_rendered=self._modules_rendered,
            nodes_rendered=len(self._render_ids),
            edges_rendered=self._edges_rendered,
        )

    def _render_id(self, node: Node) -> str:
        # File-local node ids collide across files; number nodes per render
        render_id = self._render_ids.get(node)
        if render_id is None:
            render_id = f"n{len(self._render_ids)}"
            self._render_ids[node] = render_id
        return render_id
