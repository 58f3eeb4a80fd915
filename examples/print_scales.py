#!/usr/bin/env python3
"""
Example: Print spelled scales from the built-in library.

This demonstrates the spelling engine end to end - a spec fanned out
across every root, with blues and simplified scales respelled.

Usage:
    python examples/print_scales.py
"""

from chuk_mcp_scales.core import ScaleCollection, build_catalogue
from chuk_mcp_scales.library import ScaleLibrary
from chuk_mcp_scales.models import ScaleSpec


def main() -> None:
    """Print a few collections."""
    catalogue = build_catalogue()
    library = ScaleLibrary(catalogue=catalogue)

    # Example 1: Every major scale
    major = library.get_collection("scales", "major")
    if major is not None:
        print_collection(major)

    # Example 2: One blues scale - the flat fifth is spelled F#, not Gb
    blues = library.get_collection("scales", "blues")
    if blues is not None:
        scale = blues.get("c")
        if scale is not None:
            print(scale.name)
            print(scale.format_notes())
            print()

    # Example 3: A spec built by hand, with simplification
    spec = ScaleSpec.from_line("scale; test; 1, #2, b4, #5, 6, 8; true")
    print_collection(ScaleCollection(spec, catalogue))


def print_collection(collection: ScaleCollection) -> None:
    """Print a collection's pattern and every valid scale."""
    print(f"Interval pattern: {collection}")
    print(collection.format_pattern())
    print()
    for scale in collection:
        print(scale.name)
        print(scale.format_notes())
    print()


if __name__ == "__main__":
    main()
