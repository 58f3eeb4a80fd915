"""
Scale primitive - an interval pattern resolved against a root note.

"Scale" covers any linear note sequence built this way: scales, modes and
arpeggios. Notes are spelled by letter, so respelling is a separate,
optional pass that swaps a note for an enharmonic with simpler accidentals.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, replace

from .accidental import Accidental
from .catalogue import Catalogue
from .interval import Interval
from .note import Note

# Enharmonic neighbours: the letter below (#7) and the letter above (bb2).
# Tried in this order; a later match replaces an earlier one.
ENHARMONIC_INTERVALS: tuple[Interval, ...] = (
    Interval(7, Accidental.SHARP),
    Interval(2, Accidental.DOUBLE_FLAT),
)

# Notes beyond a double sharp/flat make a scale unusable
MAX_ACCIDENTAL = 2

# Column width when printing notes and intervals
COLUMN_WIDTH = 5


def _prefers(candidate: Note, current: Note, root: Note) -> bool:
    """Whether an enharmonic candidate is a better spelling than the current note."""
    candidate_size = abs(candidate.semitones)
    current_size = abs(current.semitones)
    if candidate_size != current_size:
        return candidate_size < current_size

    # Same number of accidentals: follow the root, then prefer sharps
    candidate_distance = abs(root.semitones - candidate.semitones)
    current_distance = abs(root.semitones - current.semitones)
    if candidate_distance != current_distance:
        return candidate_distance < current_distance
    return candidate.semitones > current.semitones


def respell_note(note: Note, root: Note) -> Note:
    """
    Choose the simplest enharmonic spelling of a note within a scale.

    Both neighbours are measured against the original note. Fewer
    accidentals wins; on a tie the spelling nearer the root's accidental
    wins, then the sharper one.

    Args:
        note: The note to respell
        root: The scale's root note

    Returns:
        The chosen spelling (possibly the original note)
    """
    chosen = note
    for interval in ENHARMONIC_INTERVALS:
        candidate = note.add_interval(interval)
        if candidate is not None and _prefers(candidate, note, root):
            chosen = candidate
    return chosen


def pad_columns(items: Sequence[str], width: int = COLUMN_WIDTH) -> str:
    """Join items on one line, each but the last padded to a fixed column."""
    if not items:
        return ""
    return "".join(item.ljust(width) for item in items[:-1]) + items[-1]


@dataclass(frozen=True)
class Scale:
    """
    A root note with an interval pattern resolved into notes.

    Notes are in pattern order, one per interval, so the octave and other
    repeats appear as often as the pattern lists them. A note is None when
    its interval is unknown or its spelling would exceed three flats/sharps.

    Immutable: respelling returns a new Scale.

    Examples:
        Scale.build(d, "scale", "major", ["1", "2", "3", ...], catalogue)
        -> D E F# G A B C# D
    """

    root: Note
    format: str
    type: str
    intervals: tuple[str, ...]
    notes: tuple[Note | None, ...]

    @classmethod
    def build(
        cls,
        root: Note,
        format: str,
        type: str,
        intervals: Sequence[str],
        catalogue: Catalogue,
    ) -> Scale:
        """
        Resolve every interval in the pattern against the root.

        Args:
            root: The root note
            format: Scale format (e.g. 'scale', 'arpeggio')
            type: Scale type (e.g. 'major', 'dorian')
            intervals: Interval spellings like '1', 'b3', '#4'
            catalogue: Catalogue used to look up the interval spellings

        Returns:
            The resolved Scale
        """
        notes: list[Note | None] = []
        for spelling in intervals:
            interval = catalogue.lookup_interval(spelling)
            notes.append(root.add_interval(interval) if interval is not None else None)
        return cls(
            root=root,
            format=format,
            type=type,
            intervals=tuple(intervals),
            notes=tuple(notes),
        )

    @property
    def name(self) -> str:
        """Full name, e.g. 'Bb major scale'."""
        return f"{self.root} {self.type} {self.format}"

    @property
    def spellings(self) -> list[str | None]:
        """Note spellings in order (None for unresolved notes)."""
        return [note.spelling if note is not None else None for note in self.notes]

    def respell_at(self, index: int) -> Scale:
        """
        Respell the note at an index with its simplest enharmonic.

        Absent notes and notes equal to the root are left alone.

        Raises:
            IndexError: If the index is outside the pattern
        """
        note = self.notes[index]
        if note is None or note == self.root:
            return self

        respelled = respell_note(note, self.root)
        if respelled == note:
            return self

        notes = list(self.notes)
        notes[index] = respelled
        return replace(self, notes=tuple(notes))

    def respell_all(self) -> Scale:
        """Respell every non-root note, in pattern order."""
        scale = self
        for index in range(len(self.notes)):
            scale = scale.respell_at(index)
        return scale

    def is_valid(self) -> bool:
        """True if every note resolved and none needs more than a double sharp/flat."""
        return all(
            note is not None and abs(note.semitones) <= MAX_ACCIDENTAL for note in self.notes
        )

    def format_notes(self) -> str:
        """Notes on a single line in fixed-width columns ('?' for unresolved)."""
        return pad_columns([spelling or "?" for spelling in self.spellings])

    def __len__(self) -> int:
        return len(self.notes)

    def __str__(self) -> str:
        return self.name
