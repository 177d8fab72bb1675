"""
Parsing workflows.
"""

from .parse_graphs_wf import (
    FileGraph,
    find_node_by_id,
    group_modules,
    merge_into_model,
    parse_file,
    parse_file_contents,
    parse_graphs_workflow,
)

__all__ = [
    "FileGraph",
    "find_node_by_id",
    "group_modules",
    "merge_into_model",
    "parse_file",
    "parse_file_contents",
    "parse_graphs_workflow",
]
