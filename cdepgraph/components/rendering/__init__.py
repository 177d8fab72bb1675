"""
Rendering components.
"""

from .graph_writer_comp import GraphWriter

__all__ = ["GraphWriter"]
