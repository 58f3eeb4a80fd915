"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest

from chuk_mcp_scales.core import Catalogue, build_catalogue


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def catalogue() -> Catalogue:
    """A freshly built note/interval catalogue."""
    return build_catalogue()


@pytest.fixture
def library_path() -> Path:
    """Path to the built-in scale library."""
    return Path(__file__).parent.parent / "src" / "chuk_mcp_scales" / "library" / "data"
