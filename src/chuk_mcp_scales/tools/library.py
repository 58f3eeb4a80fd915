"""
Library tools - MCP tools for browsing and editing the scale library.

Tools for listing collections, viewing scales on a chosen root, and
adding or removing custom scales.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_scales.constants import ErrorMessages, LibraryCategory, SuccessMessages
from chuk_mcp_scales.core import Scale, ScaleCollection
from chuk_mcp_scales.library import ScaleLibrary
from chuk_mcp_scales.models import ScaleSpec

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def _scale_to_dict(scale: Scale) -> dict[str, Any]:
    return {
        "name": scale.name,
        "root": scale.root.spelling,
        "notes": scale.spellings,
        "intervals": list(scale.intervals),
        "display": scale.format_notes(),
    }


def _collection_summary(collection: ScaleCollection) -> dict[str, Any]:
    return {
        "name": collection.name,
        "format": collection.format,
        "type": collection.type,
        "intervals": list(collection.intervals),
        "simplify": collection.simplify,
    }


def register_library_tools(mcp: ChukMCPServer, library: ScaleLibrary) -> dict[str, Any]:
    """
    Register scale library tools with the MCP server.

    Args:
        mcp: The MCP server instance
        library: The scale library

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def scales_list_collections(category: str = "scales") -> str:
        """
        List the scale collections in a library category.

        Args:
            category: 'scales', 'modes', 'arpeggios' or 'custom'

        Returns:
            JSON string with collection summaries

        Example:
            scales_list_collections(category="modes")
        """
        try:
            collections = library.list_collections(category)
            return json.dumps(
                {
                    "status": "success",
                    "category": category,
                    "collections": [_collection_summary(c) for c in collections],
                    "count": len(collections),
                }
            )
        except Exception as e:
            logger.exception("Failed to list collections")
            return json.dumps({"status": "error", "message": str(e)})

    tools["scales_list_collections"] = scales_list_collections

    @mcp.tool  # type: ignore[arg-type]
    async def scales_describe_collection(category: str, name: str) -> str:
        """
        Describe a collection: its interval pattern and available roots.

        Args:
            category: Library category
            name: Collection name ('harmonic minor scale') or type ('harmonic minor')

        Returns:
            JSON string with the pattern and the roots that have a valid scale

        Example:
            scales_describe_collection(category="scales", name="blues")
        """
        try:
            collection = library.get_collection(category, name)
            if collection is None:
                return json.dumps(
                    {
                        "status": "error",
                        "message": ErrorMessages.COLLECTION_NOT_FOUND.format(
                            category=category, name=name
                        ),
                    }
                )

            return json.dumps(
                {
                    "status": "success",
                    "collection": {
                        **_collection_summary(collection),
                        "pattern": collection.format_pattern(),
                        "roots": collection.roots,
                    },
                }
            )
        except Exception as e:
            logger.exception("Failed to describe collection")
            return json.dumps({"status": "error", "message": str(e)})

    tools["scales_describe_collection"] = scales_describe_collection

    @mcp.tool  # type: ignore[arg-type]
    async def scales_get_scale(category: str, name: str, root: str) -> str:
        """
        Get the notes of a collection's scale on one root.

        Args:
            category: Library category
            name: Collection name or type
            root: Root note (e.g. 'Bb', 'F#', 'c')

        Returns:
            JSON string with the spelled notes

        Example:
            scales_get_scale(category="scales", name="major", root="Eb")
        """
        try:
            collection = library.get_collection(category, name)
            if collection is None:
                return json.dumps(
                    {
                        "status": "error",
                        "message": ErrorMessages.COLLECTION_NOT_FOUND.format(
                            category=category, name=name
                        ),
                    }
                )

            scale = collection.get(root)
            if scale is None:
                return json.dumps(
                    {
                        "status": "error",
                        "message": ErrorMessages.SCALE_NOT_FOUND.format(
                            name=collection.name, root=root
                        ),
                    }
                )

            return json.dumps({"status": "success", "scale": _scale_to_dict(scale)})
        except Exception as e:
            logger.exception("Failed to get scale")
            return json.dumps({"status": "error", "message": str(e)})

    tools["scales_get_scale"] = scales_get_scale

    @mcp.tool  # type: ignore[arg-type]
    async def scales_add_custom(
        format: str,
        type: str,
        intervals: str,
        simplify: bool = False,
    ) -> str:
        """
        Add a custom scale collection and save it.

        Args:
            format: Scale format (e.g. 'scale', 'arpeggio')
            type: Scale name/type (e.g. 'hungarian minor')
            intervals: Comma-separated intervals (e.g. '1, 2, b3, #4, 5, b6, 7, 8')
            simplify: Respell notes with fewer accidentals

        Returns:
            JSON string with the new collection

        Example:
            scales_add_custom(format="scale", type="hungarian minor",
                              intervals="1, 2, b3, #4, 5, b6, 7, 8")
        """
        try:
            spec = ScaleSpec(format=format, type=type, intervals=intervals, simplify=simplify)
            collection = library.add_custom(spec)

            return json.dumps(
                {
                    "status": "success",
                    "message": SuccessMessages.CUSTOM_ADDED.format(
                        format=collection.format,
                        name=collection.name,
                        count=len(collection),
                    ),
                    "collection": {
                        **_collection_summary(collection),
                        "roots": collection.roots,
                    },
                }
            )
        except Exception as e:
            logger.exception("Failed to add custom scale")
            return json.dumps({"status": "error", "message": str(e)})

    tools["scales_add_custom"] = scales_add_custom

    @mcp.tool  # type: ignore[arg-type]
    async def scales_remove_custom(name: str) -> str:
        """
        Remove a custom scale collection and save the change.

        Args:
            name: Collection name or type

        Returns:
            JSON string with status

        Example:
            scales_remove_custom(name="hungarian minor scale")
        """
        try:
            collection = library.remove_custom(name)
            if collection is None:
                return json.dumps(
                    {
                        "status": "error",
                        "message": ErrorMessages.CUSTOM_NOT_FOUND.format(name=name),
                    }
                )

            return json.dumps(
                {
                    "status": "success",
                    "message": SuccessMessages.CUSTOM_REMOVED.format(name=collection.name),
                    "remaining": len(library.list_collections(LibraryCategory.CUSTOM)),
                }
            )
        except Exception as e:
            logger.exception("Failed to remove custom scale")
            return json.dumps({"status": "error", "message": str(e)})

    tools["scales_remove_custom"] = scales_remove_custom

    return tools
