"""
Core spelling engine - notes, intervals and the scales built from them.

These are the primitives everything else composes on:
- Accidental: The seven alterations from triple flat to triple sharp
- Letter: The seven letter names A-G
- Note: A spelled pitch (letter + accidental)
- Interval: A step number (1-15) plus a quality
- Catalogue: Lookup of notes and intervals by spelling
- Scale: An interval pattern resolved against a root
- ScaleCollection: One pattern resolved against every root
"""

from chuk_mcp_scales.core.accidental import Accidental
from chuk_mcp_scales.core.catalogue import (
    Catalogue,
    IntervalCatalogue,
    NoteCatalogue,
    build_catalogue,
    build_interval_catalogue,
    build_note_catalogue,
)
from chuk_mcp_scales.core.collection import ScaleCollection
from chuk_mcp_scales.core.interval import Interval, count_semitones, interval_to_semitones
from chuk_mcp_scales.core.note import Letter, Note
from chuk_mcp_scales.core.scale import Scale, respell_note

__all__ = [
    # Notes
    "Accidental",
    "Letter",
    "Note",
    # Intervals
    "Interval",
    "count_semitones",
    "interval_to_semitones",
    # Catalogues
    "Catalogue",
    "NoteCatalogue",
    "IntervalCatalogue",
    "build_catalogue",
    "build_note_catalogue",
    "build_interval_catalogue",
    # Scales
    "Scale",
    "ScaleCollection",
    "respell_note",
]
