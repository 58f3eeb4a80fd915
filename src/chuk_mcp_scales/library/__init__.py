"""
Scale library - the browsable store of scale collections.

Built-in scales, modes and arpeggios ship as YAML; custom scales are
kept in a user-owned text file, one spec per line.
"""

from chuk_mcp_scales.library.loader import ScaleLibrary, read_spec_file, write_spec_file

__all__ = [
    "ScaleLibrary",
    "read_spec_file",
    "write_spec_file",
]
