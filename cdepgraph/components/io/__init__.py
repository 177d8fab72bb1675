"""
I/O components.
"""

from .dot_reader_comp import collect_dot_files, is_dot_file, read_directory, read_single_file

__all__ = [
    "collect_dot_files",
    "is_dot_file",
    "read_directory",
    "read_single_file",
]
