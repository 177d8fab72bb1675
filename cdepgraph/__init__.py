"""
cdepgraph - module dependency graphs from C call-graph DOT files.
"""

from .__version__ import __version__

__all__ = ["__version__"]
