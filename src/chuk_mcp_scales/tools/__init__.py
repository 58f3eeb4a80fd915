"""
MCP tool implementations.

Tools are organized by domain:
- library - Browsing collections and editing custom scales
- notes - Direct note and interval queries
"""

from chuk_mcp_scales.tools.library import register_library_tools
from chuk_mcp_scales.tools.notes import register_note_tools

__all__ = [
    "register_library_tools",
    "register_note_tools",
]
