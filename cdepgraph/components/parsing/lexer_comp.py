"""Line lexer for call-graph DOT files.

Classifies one line of a DOT file into a Token. This module is PURE - no I/O,
no state carried between lines.

Only the statement shapes produced by call-graph generators are recognised:

    digraph "name"
    {
      edge [attr_list];
      node [attr_list];
      Node1 [label="MOD_Function",height=0.2,...];
      Node1 -> Node2 [color="midnightblue",...];
    }

Anything else is classified as ``ignored``; the lexer never raises.
"""

from __future__ import annotations

import re

from cdepgraph.helpers.dto.graph_dto import Token

# Rules are applied in this order; the first match wins.
_DIGRAPH_RE = re.compile(r"\bdigraph\b(?P<name>[^{]*)")
_NODE_STMT_RE = re.compile(r'^(?P<stmt>(?:"[^"]*"|[\w.]+)\s*(?:\[.*\])?)\s*;$')

NODE_ATTR_PREFIX = "node ["
EDGE_ATTR_PREFIX = "edge ["
EDGE_OP = "->"


def tokenize(line: str) -> Token:
    """
    Classify a single line.

    Args:
        line: One line of input; surrounding whitespace is ignored

    Returns:
        Token whose value carries the payload for the statement kind:
        the graph name for ``digraph_def``, the statement text without its
        terminator for ``node_stmt``, the full line for ``edge_stmt``.

    Examples:
        >>> tokenize('digraph "ADC_Init"')
        Token(kind='digraph_def', value='ADC_Init')
        >>> tokenize("Node1 -> Node2;").kind
        'edge_stmt'
    """
    text = line.strip()

    if not text:
        return Token("none")

    match = _DIGRAPH_RE.search(text)
    if match:
        return Token("digraph_def", _unquote(match.group("name").strip()))

    if text.startswith(NODE_ATTR_PREFIX):
        return Token("node_attr_stmt", text)

    if text.startswith(EDGE_ATTR_PREFIX):
        return Token("edge_attr_stmt", text)

    if EDGE_OP in text:
        return Token("edge_stmt", text)

    match = _NODE_STMT_RE.match(text)
    if match:
        return Token("node_stmt", match.group("stmt"))

    if text == "{":
        return Token("l_brace", text)

    if text == "}":
        return Token("r_brace", text)

    return Token("ignored", text)


def _unquote(text: str) -> str:
    if len(text) >= 2 and text[0] == text[-1] == '"':
        return text[1:-1]
    return text
