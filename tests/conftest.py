"""
Pytest fixtures and configuration for the test suite.

Sample call graphs live in tests/fixtures; they follow the layout Doxygen
emits for ``*_cgraph.dot`` files.
"""

import sys
from pathlib import Path

import pytest

# Add project root to path so tests can import the cdepgraph package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def make_dot(graph_name: str, *statements: str) -> str:
    """Build a small DOT file in the generator's layout."""
    body = "\n".join(f"  {stmt}" for stmt in statements)
    return f'digraph "{graph_name}"\n{{\n  node [shape=record];\n{body}\n}}\n'


@pytest.fixture
def dot():
    """The make_dot builder, as a fixture."""
    return make_dot


@pytest.fixture
def fixtures_dir() -> Path:
    """Directory holding the sample DOT files."""
    return FIXTURES_DIR


@pytest.fixture
def bms_dot() -> str:
    return (FIXTURES_DIR / "bms_8c_cgraph.dot").read_text(encoding="utf-8")


@pytest.fixture
def contactor_dot() -> str:
    return (FIXTURES_DIR / "contactor_8c_cgraph.dot").read_text(encoding="utf-8")


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Run in an empty working directory without CDEPGRAPH_* variables."""
    import os

    for key in list(os.environ):
        if key.startswith("CDEPGRAPH_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path
