"""
Note primitives - Letter and Note.

A Note is a spelled pitch: a letter name plus an accidental. Unlike a
pitch class, spelling matters here - C# and Db are different notes.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .accidental import Accidental
from .interval import Interval, count_semitones, interval_to_semitones


class Letter(Enum):
    """The seven letter names, in alphabetical (cyclic) order."""

    A = "A"
    B = "B"
    C = "C"
    D = "D"
    E = "E"
    F = "F"
    G = "G"

    def step(self, steps: int) -> Letter:
        """Move forward through the cyclic alphabet (G wraps to A)."""
        return _LETTERS[(_LETTERS.index(self) + steps) % len(_LETTERS)]


_LETTERS: tuple[Letter, ...] = tuple(Letter)


@dataclass(frozen=True)
class Note:
    """
    A letter name plus an accidental.

    Immutable and hashable. Enharmonic notes are distinct:
    Note(Letter.C, Accidental.SHARP) != Note(Letter.D, Accidental.FLAT).
    """

    letter: Letter
    accidental: Accidental = Accidental.NATURAL

    @property
    def spelling(self) -> str:
        """Display form, e.g. 'Bb' or 'F#'."""
        return f"{self.letter.value}{self.accidental.symbol}"

    @property
    def key(self) -> str:
        """Catalogue key: lowercase letter plus accidental symbol, e.g. 'bb'."""
        return f"{self.letter.value.lower()}{self.accidental.symbol}"

    @property
    def semitones(self) -> int:
        """Offset of this note from its natural letter."""
        return self.accidental.semitones

    def natural(self) -> Note:
        """The same letter without an accidental."""
        return Note(self.letter)

    def shift(self, semitones: int) -> Note | None:
        """
        Keep the letter and change the accidental by a number of semitones.

        Returns None if the result would need more than three flats or sharps.
        """
        accidental = Accidental.from_semitones(self.accidental.semitones + semitones)
        if accidental is None:
            return None
        return Note(self.letter, accidental)

    def add_interval(self, interval: Interval) -> Note | None:
        """
        Spell the note an interval above this one.

        The letter comes from the interval number. The natural note on that
        letter is measured against this note, and the shortfall from the
        interval's semitone size becomes the new note's accidental.

        Args:
            interval: The interval to apply

        Returns:
            The new note, or None if it would need more than three flats/sharps
        """
        required = interval_to_semitones(interval)
        target = Note(self.letter.step(interval.simple_number - 1))
        distance = count_semitones(self, target)
        return target.shift(required - distance)

    def __str__(self) -> str:
        return self.spelling

    def __repr__(self) -> str:
        return f"Note({self.spelling!r})"
