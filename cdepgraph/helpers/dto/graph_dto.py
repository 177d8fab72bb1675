"""Graph domain DTOs.

Data records produced by the lexer and the graph parser, and consumed by the
renderer and the CLI.

Rules:
- Import only stdlib and typing (no cdepgraph.* imports)
- Pure data structures only (no I/O, no business logic)
- Node and Edge compare by identity: two Nodes with equal fields are still
  different vertices until the merge step collapses them
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

TokenKind = Literal[
    "digraph_def",
    "node_stmt",
    "edge_stmt",
    "node_attr_stmt",
    "edge_attr_stmt",
    "l_brace",
    "r_brace",
    "ignored",
    "none",
]

# Bucket for functions without a module prefix
RTOS_MODULE_PREFIX = "RTOS"


@dataclass(frozen=True)
class Token:
    """Classification of a single input line."""

    kind: TokenKind
    """Statement kind"""

    value: str = ""
    """Raw payload relevant to the kind (graph name, statement text, ...)"""


@dataclass(eq=False)
class Node:
    """A function (vertex) of a call graph.

    From the DOT grammar: node_stmt: node_id [attr_list]
    """

    id: str
    """File-local node_id; not unique across files"""

    label: str
    """Function name; the semantic identity of the node"""

    module_prefix: str
    is_root: bool = False
    is_public: bool = True

    def __repr__(self) -> str:
        return f"Node(id={self.id!r}, label={self.label!r}, module_prefix={self.module_prefix!r})"


@dataclass(eq=False)
class Edge:
    """A call relationship between two nodes.

    From the DOT grammar: edge_stmt: node_id edgeRHS [attr_list]
    """

    source_id: str
    destination_id: str
    source_node: Node | None = None
    destination_node: Node | None = None

    @property
    def is_resolved(self) -> bool:
        """True when both endpoints point at a known Node."""
        return self.source_node is not None and self.destination_node is not None

    def __repr__(self) -> str:
        return f"Edge({self.source_id!r} -> {self.destination_id!r})"


@dataclass(eq=False)
class Module:
    """Nodes sharing a module prefix. Holds references, does not own them."""

    module_prefix: str
    nodes: list[Node] = field(default_factory=list)

    def add(self, node: Node) -> None:
        self.nodes.append(node)

    @property
    def public_nodes(self) -> list[Node]:
        return [n for n in self.nodes if n.is_public]

    @property
    def private_nodes(self) -> list[Node]:
        return [n for n in self.nodes if not n.is_public]


@dataclass
class ParseSummary:
    """Counters collected over one parse run."""

    files: int = 0
    nodes: int = 0
    edges: int = 0
    modules: int = 0
    duplicate_nodes: int = 0
    unresolved_endpoints: int = 0
    skipped_statements: int = 0


@dataclass
class GraphModel:
    """Global node/edge/module collections owned by one parse run.

    Nodes are unique by label. Edges only ever reference Nodes held in
    ``nodes``. Modules are filled once, after every file has been merged.
    """

    nodes: list[Node] = field(default_factory=list)
    edges: list[Edge] = field(default_factory=list)
    modules: list[Module] = field(default_factory=list)
    summary: ParseSummary = field(default_factory=ParseSummary)
    _nodes_by_label: dict[str, Node] = field(default_factory=dict, repr=False)

    def get_node_by_label(self, label: str) -> Node | None:
        """Return the canonical Node for a label, if one has been merged."""
        return self._nodes_by_label.get(label)

    def add_node(self, node: Node) -> None:
        self.nodes.append(node)
        self._nodes_by_label[node.label] = node

    def get_module(self, module_prefix: str) -> Module | None:
        for module in self.modules:
            if module.module_prefix == module_prefix:
                return module
        return None
