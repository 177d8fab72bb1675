"""
Call-graph parsing workflow.

Turns the contents of one or more DOT call-graph files into a single
de-duplicated GraphModel:

1. Per file: lex every line, build local nodes and edges, resolve edge
   endpoints against the nodes of that file (forward references included).
2. Merge the file into the model. A node whose label is already known is a
   duplicate: it is dropped and every local edge pointing at it is rewritten
   to the canonical node. The first file to mention a label wins.
3. After all files: bucket nodes into modules by module prefix.

This module is PURE - no file access; contents are handed in by the caller.
File order is significant and is preserved.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from cdepgraph.components.parsing.label_rules_comp import is_public, is_root, module_prefix
from cdepgraph.components.parsing.lexer_comp import tokenize
from cdepgraph.components.parsing.statement_comp import (
    extract_edge_endpoints,
    extract_node_id,
    extract_node_label,
)
from cdepgraph.helpers.dto.graph_dto import Edge, GraphModel, Module, Node

logger = logging.getLogger(__name__)


@dataclass
class FileGraph:
    """Nodes and edges local to one file, before merging."""

    graph_name: str | None = None
    nodes: list[Node] = field(default_factory=list)
    edges: list[Edge] = field(default_factory=list)
    skipped_statements: int = 0


def find_node_by_id(nodes: Iterable[Node], node_id: str) -> Node | None:
    """Return the last node declared with node_id, or None when there is none."""
    found = None
    for node in nodes:
        if node.id == node_id:
            found = node
    return found


def build_node(value: str, graph_name: str | None) -> Node | None:
    """Build a Node from a node statement payload; None if it is malformed."""
    node_id = extract_node_id(value)
    label = extract_node_label(value)
    if node_id is None or label is None:
        return None

    return Node(
        id=node_id,
        label=label,
        module_prefix=module_prefix(label),
        is_root=is_root(label, graph_name),
        is_public=is_public(label),
    )


def parse_file(contents: str) -> FileGraph:
    """
    Build the local graph of a single file.

    Edges referring to ids that are never declared in the file keep a None
    reference on that side; they stand for calls leaving the analysed graph.
    """
    local = FileGraph()

    for line in contents.splitlines():
        token = tokenize(line)

        if token.kind == "digraph_def":
            if local.graph_name is None:
                local.graph_name = token.value
                logger.debug("Parsing graph: %s", local.graph_name)

        elif token.kind == "node_stmt":
            node = build_node(token.value, local.graph_name)
            if node is None:
                local.skipped_statements += 1
                logger.debug("Skipping malformed node statement: %s", token.value)
                continue
            local.nodes.append(node)

        elif token.kind == "edge_stmt":
            endpoints = extract_edge_endpoints(token.value)
            if endpoints is None:
                local.skipped_statements += 1
                logger.debug("Skipping malformed edge statement: %s", token.value)
                continue
            source_id, destination_id = endpoints
            local.edges.append(
                Edge(
                    source_id=source_id,
                    destination_id=destination_id,
                    source_node=find_node_by_id(local.nodes, source_id),
                    destination_node=find_node_by_id(local.nodes, destination_id),
                )
            )

    # Fix-up pass for edges declared before their nodes
    for edge in local.edges:
        if edge.source_node is None:
            edge.source_node = find_node_by_id(local.nodes, edge.source_id)
        if edge.destination_node is None:
            edge.destination_node = find_node_by_id(local.nodes, edge.destination_id)

    return local


def merge_into_model(model: GraphModel, local: FileGraph) -> None:
    """
    Merge one file's local graph into the model (mutates model).

    Duplicate nodes are dropped before anything is appended, so the canonical
    node for a label is always the one from the earliest merged file.
    """
    duplicates = 0
    for node in local.nodes:
        if model.get_node_by_label(node.label) is not None:
            duplicates += 1
            continue
        model.add_node(node)

    unresolved = 0
    for edge in local.edges:
        # Every local node is now either in the model or a duplicate of one
        if edge.source_node is None:
            unresolved += 1
        else:
            canonical = _canonical(model, edge.source_node)
            if canonical is not edge.source_node:
                edge.source_node = canonical
                edge.source_id = canonical.id

        if edge.destination_node is None:
            unresolved += 1
        else:
            canonical = _canonical(model, edge.destination_node)
            if canonical is not edge.destination_node:
                edge.destination_node = canonical
                edge.destination_id = canonical.id

        model.edges.append(edge)

    summary = model.summary
    summary.files += 1
    summary.duplicate_nodes += duplicates
    summary.unresolved_endpoints += unresolved
    summary.skipped_statements += local.skipped_statements
    summary.nodes = len(model.nodes)
    summary.edges = len(model.edges)


def _canonical(model: GraphModel, node: Node) -> Node:
    canonical = model.get_node_by_label(node.label)
    return node if canonical is None else canonical


def parse_file_contents(model: GraphModel, contents: str) -> FileGraph:
    """Parse one file and merge it into model. Returns the local graph."""
    local = parse_file(contents)
    merge_into_model(model, local)
    logger.debug(
        "Merged graph %s: %d local nodes, %d local edges",
        local.graph_name,
        len(local.nodes),
        len(local.edges),
    )
    return local


def group_modules(model: GraphModel) -> list[Module]:
    """
    Bucket every node of the model into the module of its prefix.

    Modules are created in first-seen order. Nodes with an empty prefix are
    left out of every module. Existing modules are rebuilt from scratch.
    """
    model.modules.clear()
    modules: dict[str, Module] = {}

    for node in model.nodes:
        if node.module_prefix == "":
            continue
        module = modules.get(node.module_prefix)
        if module is None:
            module = Module(node.module_prefix)
            modules[node.module_prefix] = module
            model.modules.append(module)
        module.add(node)

    model.summary.modules = len(model.modules)
    return model.modules


def parse_graphs_workflow(file_contents: Iterable[str]) -> GraphModel:
    """
    Parse every file in order and group the result into modules.

    Args:
        file_contents: One string per input file, in processing order

    Returns:
        GraphModel with unique nodes, merged edges and modules
    """
    model = GraphModel()

    for contents in file_contents:
        parse_file_contents(model, contents)

    group_modules(model)

    summary = model.summary
    logger.info(
        "Parsed %d file(s): %d nodes, %d edges, %d modules (%d duplicate nodes dropped, %d unresolved endpoints)",
        summary.files,
        summary.nodes,
        summary.edges,
        summary.modules,
        summary.duplicate_nodes,
        summary.unresolved_endpoints,
    )
    return model
