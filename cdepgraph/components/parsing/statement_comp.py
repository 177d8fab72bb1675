"""Field extraction from node and edge statements.

Each extractor returns None for a statement it cannot interpret so the caller
can skip that single statement and carry on with the file.
"""

from __future__ import annotations

ATTR_LIST_OPEN = "["
ATTR_LIST_CLOSE = "]"
EDGE_OP = "->"


def extract_node_id(value: str) -> str | None:
    """
    Return the node_id of a node statement.

    Examples:
        >>> extract_node_id('Node1 [label="ADC_Init"]')
        'Node1'
        >>> extract_node_id("Node7")
        'Node7'
    """
    end = value.find(ATTR_LIST_OPEN)
    node_id = _clean(value if end == -1 else value[:end])
    return node_id or None


def extract_node_label(value: str) -> str | None:
    """
    Return the value of the first attribute in a node statement.

    The generator always emits ``label`` first. The attribute ends at the
    first comma or at the closing bracket.

    Examples:
        >>> extract_node_label('Node1 [label="ADC_Init",height=0.2]')
        'ADC_Init'
        >>> extract_node_label("Node1") is None
        True
    """
    start = value.find(ATTR_LIST_OPEN)
    if start == -1:
        return None

    attrs = value[start + 1 :]
    end = len(attrs)
    for delimiter in (",", ATTR_LIST_CLOSE):
        pos = attrs.find(delimiter)
        if pos != -1:
            end = min(end, pos)

    key, sep, attr_value = attrs[:end].partition("=")
    if not sep or not key.strip():
        return None

    label = _clean(attr_value)
    return label or None


def extract_edge_endpoints(value: str) -> tuple[str, str] | None:
    """
    Return ``(source_id, destination_id)`` of an edge statement.

    Examples:
        >>> extract_edge_endpoints('Node1 -> Node2 [color="midnightblue"];')
        ('Node1', 'Node2')
        >>> extract_edge_endpoints("Node1 -> Node3")
        ('Node1', 'Node3')
        >>> extract_edge_endpoints("-> Node3;") is None
        True
    """
    source, sep, rest = value.partition(EDGE_OP)
    if not sep:
        return None

    end = len(rest)
    # Chained edges (a -> b -> c) keep only their first hop
    for delimiter in (ATTR_LIST_OPEN, ";", EDGE_OP):
        pos = rest.find(delimiter)
        if pos != -1:
            end = min(end, pos)

    source_id = _clean(source)
    destination_id = _clean(rest[:end])
    if not source_id or not destination_id:
        return None
    return source_id, destination_id


def _clean(text: str) -> str:
    text = text.strip()
    if len(text) >= 2 and text[0] == text[-1] == '"':
        text = text[1:-1].strip()
    return text
