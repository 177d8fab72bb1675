"""
Domain-specific DTOs (Data Transfer Objects) used across multiple layers.

Domain DTOs live in helpers/dto/<domain>_dto.py and form cross-layer contracts
(interfaces → services → workflows → components).

Rules for DTO modules:
- Import only stdlib and typing (no cdepgraph.* imports)
- Contain ONLY dataclass/type definitions and simple type aliases
- No I/O, no business logic
"""

from .graph_dto import RTOS_MODULE_PREFIX, Edge, GraphModel, Module, Node, ParseSummary, Token, TokenKind
from .render_dto import RenderOptions, RenderResult

__all__ = [
    "RTOS_MODULE_PREFIX",
    "Edge",
    "GraphModel",
    "Module",
    "Node",
    "ParseSummary",
    "RenderOptions",
    "RenderResult",
    "Token",
    "TokenKind",
]
