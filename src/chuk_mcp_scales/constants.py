"""
Constants and enums for the scale library.

No magic strings - use enums for constrained values.
"""

from enum import Enum


class LibraryCategory(str, Enum):
    """
    Groups of scale collections in the library.

    Built-in categories ship with the package; custom scales belong to the user.
    """

    SCALES = "scales"
    MODES = "modes"
    ARPEGGIOS = "arpeggios"
    CUSTOM = "custom"


BUILTIN_CATEGORIES: tuple[LibraryCategory, ...] = (
    LibraryCategory.SCALES,
    LibraryCategory.MODES,
    LibraryCategory.ARPEGGIOS,
)

# Default file name for user-owned scales
CUSTOM_SCALES_FILE = "custom.txt"


class ErrorMessages:
    """Standardized error messages."""

    UNKNOWN_CATEGORY = "Unknown category: '{category}'. Expected one of: {categories}."
    COLLECTION_NOT_FOUND = "No {category} collection named '{name}'."
    SCALE_NOT_FOUND = "No valid {name} on root '{root}'."
    NOTE_NOT_FOUND = "Unknown note: '{note}'. Expected a letter A-G with optional accidental."
    INTERVAL_NOT_FOUND = "Unknown interval: '{interval}'. Expected e.g. '5', 'b7' or '#11'."
    NOTE_OUT_OF_RANGE = "'{interval}' above '{note}' needs more than three flats or sharps."
    DUPLICATE_COLLECTION = "A custom collection named '{name}' already exists."
    CUSTOM_NOT_FOUND = "No custom collection named '{name}'."


class SuccessMessages:
    """Standardized success messages."""

    CUSTOM_ADDED = "Added custom {format} '{name}' ({count} roots)."
    CUSTOM_REMOVED = "Removed custom collection '{name}'."
