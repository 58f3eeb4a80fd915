#!/usr/bin/env python3
"""
Async Scales MCP Server using chuk-mcp-server

This server provides MCP tools for browsing correctly spelled scales,
modes and arpeggios. Every collection is one interval pattern applied to
each root from Cb to B#, spelled letter by letter.

The server provides tools for:
- Listing and describing built-in and custom scale collections
- Viewing a collection's scale on any root
- Adding and removing custom scales (saved to a text file)
- Spelling single intervals and one-off scales
"""

import logging
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_scales.constants import CUSTOM_SCALES_FILE
from chuk_mcp_scales.core import build_catalogue
from chuk_mcp_scales.library import ScaleLibrary
from chuk_mcp_scales.tools import register_library_tools, register_note_tools

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-scales")

# Paths - built-in library ships with the package, custom scales live in the project
BASE_PATH = Path.cwd()
CUSTOM_SCALES_PATH = BASE_PATH / CUSTOM_SCALES_FILE
LIBRARY_PATH = Path(__file__).parent / "library" / "data"

# Shared catalogue and library
catalogue = build_catalogue()
scale_library = ScaleLibrary(
    library_path=LIBRARY_PATH,
    custom_path=CUSTOM_SCALES_PATH,
    catalogue=catalogue,
)

# Register all tools
library_tools = register_library_tools(mcp, scale_library)
note_tools = register_note_tools(mcp, catalogue)

# Export tool functions for direct access
scales_list_collections = library_tools["scales_list_collections"]
scales_describe_collection = library_tools["scales_describe_collection"]
scales_get_scale = library_tools["scales_get_scale"]
scales_add_custom = library_tools["scales_add_custom"]
scales_remove_custom = library_tools["scales_remove_custom"]

scales_add_interval = note_tools["scales_add_interval"]
scales_build_scale = note_tools["scales_build_scale"]

logger.info("CHUK Scales MCP Server initialized")
logger.info(f"  Library path: {LIBRARY_PATH}")
logger.info(f"  Custom scales: {CUSTOM_SCALES_PATH}")
