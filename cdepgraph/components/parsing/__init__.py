"""
Parsing components.
"""

from .label_rules_comp import function_name, is_public, is_root, module_prefix
from .lexer_comp import tokenize
from .statement_comp import extract_edge_endpoints, extract_node_id, extract_node_label

__all__ = [
    "extract_edge_endpoints",
    "extract_node_id",
    "extract_node_label",
    "function_name",
    "is_public",
    "is_root",
    "module_prefix",
    "tokenize",
]
