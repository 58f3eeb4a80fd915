"""
Catalogues - the spelled notes and intervals the engine can look up by name.

Catalogues are built by factory functions and passed to whatever needs
them. They are read-only once built.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from .accidental import Accidental
from .interval import MAX_NUMBER, MIN_NUMBER, Interval
from .note import Letter, Note

# Root notes stay within one flat or sharp
ROOT_ACCIDENTAL_LIMIT = 1


@dataclass(frozen=True)
class NoteCatalogue:
    """Every note from triple flat to triple sharp, keyed by lowercase spelling."""

    notes: Mapping[str, Note]
    root_notes: tuple[Note, ...]

    def lookup(self, spelling: str) -> Note | None:
        """
        Find a note by its spelling, ignoring case.

        Args:
            spelling: Note name like 'F', 'eb' or 'C#'

        Returns:
            The Note, or None if the spelling is unknown
        """
        return self.notes.get(spelling.strip().lower())

    def __len__(self) -> int:
        return len(self.notes)

    def __contains__(self, spelling: object) -> bool:
        return isinstance(spelling, str) and self.lookup(spelling) is not None


@dataclass(frozen=True)
class IntervalCatalogue:
    """Every interval up to two octaves, keyed by spelling ('b7', '#11')."""

    intervals: Mapping[str, Interval]

    def lookup(self, spelling: str) -> Interval | None:
        """Find an interval by its exact spelling, or None if unknown."""
        return self.intervals.get(spelling.strip())

    def __len__(self) -> int:
        return len(self.intervals)

    def __contains__(self, spelling: object) -> bool:
        return isinstance(spelling, str) and self.lookup(spelling) is not None


@dataclass(frozen=True)
class Catalogue:
    """The note and interval catalogues used together when building scales."""

    notes: NoteCatalogue
    intervals: IntervalCatalogue

    @property
    def root_notes(self) -> tuple[Note, ...]:
        """Notes eligible as scale roots."""
        return self.notes.root_notes

    def lookup_note(self, spelling: str) -> Note | None:
        return self.notes.lookup(spelling)

    def lookup_interval(self, spelling: str) -> Interval | None:
        return self.intervals.lookup(spelling)


def build_note_catalogue() -> NoteCatalogue:
    """Build all 49 notes and the 21 root-eligible notes, letter by letter."""
    notes: dict[str, Note] = {}
    root_notes: list[Note] = []
    for letter in Letter:
        for accidental in Accidental:
            note = Note(letter, accidental)
            notes[note.key] = note
            if abs(accidental.semitones) <= ROOT_ACCIDENTAL_LIMIT:
                root_notes.append(note)
    return NoteCatalogue(notes=MappingProxyType(notes), root_notes=tuple(root_notes))


def build_interval_catalogue() -> IntervalCatalogue:
    """Build all 105 intervals (numbers 1-15 with each quality)."""
    intervals: dict[str, Interval] = {}
    for number in range(MIN_NUMBER, MAX_NUMBER + 1):
        for quality in Accidental:
            interval = Interval(number, quality)
            intervals[interval.spelling] = interval
    return IntervalCatalogue(intervals=MappingProxyType(intervals))


def build_catalogue() -> Catalogue:
    """Build the full note and interval catalogues."""
    return Catalogue(notes=build_note_catalogue(), intervals=build_interval_catalogue())
