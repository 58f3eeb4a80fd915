"""
Accidental primitive - the seven pitch alterations from triple flat to triple sharp.

Accidentals double as interval qualities: a flat on an interval lowers it
by a semitone from its major/perfect size, exactly as it lowers a note.
"""

from __future__ import annotations

from enum import Enum


class Accidental(Enum):
    """
    A pitch alteration with a fixed semitone offset.

    The enum is the whole catalogue: one member per offset in -3..+3,
    declared in offset order. Spellings follow common notation, with
    'x' for a double sharp and '#x' for a triple sharp.
    """

    TRIPLE_FLAT = ("bbb", -3)
    DOUBLE_FLAT = ("bb", -2)
    FLAT = ("b", -1)
    NATURAL = ("", 0)
    SHARP = ("#", 1)
    DOUBLE_SHARP = ("x", 2)
    TRIPLE_SHARP = ("#x", 3)

    def __init__(self, symbol: str, semitones: int) -> None:
        self.symbol = symbol
        self.semitones = semitones

    @classmethod
    def from_semitones(cls, semitones: int) -> Accidental | None:
        """Get the accidental for a semitone offset, or None beyond three flats/sharps."""
        for accidental in cls:
            if accidental.semitones == semitones:
                return accidental
        return None

    @classmethod
    def parse(cls, symbol: str) -> Accidental | None:
        """Get the accidental for a symbol like 'b', '#' or 'x'."""
        for accidental in cls:
            if accidental.symbol == symbol:
                return accidental
        return None

    def __str__(self) -> str:
        return self.symbol

    def __repr__(self) -> str:
        return f"Accidental.{self.name}"
