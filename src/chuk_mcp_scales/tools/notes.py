"""
Note tools - MCP tools for direct queries against the spelling engine.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_scales.constants import ErrorMessages
from chuk_mcp_scales.core import Catalogue, Scale
from chuk_mcp_scales.models import split_intervals

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_note_tools(mcp: ChukMCPServer, catalogue: Catalogue) -> dict[str, Any]:
    """
    Register note and interval tools with the MCP server.

    Args:
        mcp: The MCP server instance
        catalogue: The note/interval catalogue

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def scales_add_interval(note: str, interval: str) -> str:
        """
        Spell the note an interval above another note.

        Args:
            note: Starting note (e.g. 'C', 'Bb', 'f#')
            interval: Interval (e.g. '5', 'b7', '#11', 'bb2')

        Returns:
            JSON string with the resulting note

        Example:
            scales_add_interval(note="C", interval="bb7")
        """
        try:
            start = catalogue.lookup_note(note)
            if start is None:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.NOTE_NOT_FOUND.format(note=note)}
                )

            step = catalogue.lookup_interval(interval)
            if step is None:
                return json.dumps(
                    {
                        "status": "error",
                        "message": ErrorMessages.INTERVAL_NOT_FOUND.format(interval=interval),
                    }
                )

            result = start.add_interval(step)
            if result is None:
                return json.dumps(
                    {
                        "status": "error",
                        "message": ErrorMessages.NOTE_OUT_OF_RANGE.format(
                            interval=step.spelling, note=start.spelling
                        ),
                    }
                )

            return json.dumps(
                {
                    "status": "success",
                    "note": start.spelling,
                    "interval": step.spelling,
                    "semitones": step.semitones,
                    "result": result.spelling,
                }
            )
        except Exception as e:
            logger.exception("Failed to add interval")
            return json.dumps({"status": "error", "message": str(e)})

    tools["scales_add_interval"] = scales_add_interval

    @mcp.tool  # type: ignore[arg-type]
    async def scales_build_scale(root: str, intervals: str, simplify: bool = False) -> str:
        """
        Build a one-off scale from a root and an interval pattern.

        Unlike library scales, the result is returned even when it is not
        valid, so unresolved notes (null) and heavy accidentals are visible.

        Args:
            root: Root note (any note from triple flat to triple sharp)
            intervals: Comma-separated intervals (e.g. '1, b3, 5, b7')
            simplify: Respell notes with fewer accidentals

        Returns:
            JSON string with the notes and whether the scale is valid

        Example:
            scales_build_scale(root="Bb", intervals="1, #2, b4, #5, 6, 8", simplify=True)
        """
        try:
            root_note = catalogue.lookup_note(root)
            if root_note is None:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.NOTE_NOT_FOUND.format(note=root)}
                )

            pattern = split_intervals(intervals)
            scale = Scale.build(root_note, "scale", "custom", pattern, catalogue)
            if simplify:
                scale = scale.respell_all()

            return json.dumps(
                {
                    "status": "success",
                    "root": root_note.spelling,
                    "intervals": list(scale.intervals),
                    "notes": scale.spellings,
                    "valid": scale.is_valid(),
                    "display": scale.format_notes(),
                }
            )
        except Exception as e:
            logger.exception("Failed to build scale")
            return json.dumps({"status": "error", "message": str(e)})

    tools["scales_build_scale"] = scales_build_scale

    return tools
