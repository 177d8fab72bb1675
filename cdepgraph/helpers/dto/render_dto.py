"""Rendering domain DTOs.

Rules:
- Import only stdlib and typing (no cdepgraph.* imports)
- Pure data structures only (no I/O, no business logic)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class RenderOptions:
    """Module filters and template locations for the graph writer."""

    include_modules: list[str] = field(default_factory=list)
    """Module prefixes to render; empty means every module"""

    private_modules: list[str] = field(default_factory=list)
    """Module prefixes whose private functions are rendered as well"""

    graph_template_path: Path | None = None
    """None selects the packaged default template"""

    subgraph_template_path: Path | None = None


@dataclass
class RenderResult:
    """Result from GraphWriter.draw_graph."""

    output_path: Path
    modules_rendered: int
    nodes_rendered: int
    edges_rendered: int
