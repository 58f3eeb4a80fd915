"""
Interval primitive - a diatonic step number plus a quality.

An interval names both a letter distance (the number) and a semitone
distance (the number's major/perfect size adjusted by the quality). Both
are needed to spell notes: C to D# and C to Eb sound the same but are
different intervals.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .accidental import Accidental

if TYPE_CHECKING:
    from .note import Note

MIN_NUMBER = 1
MAX_NUMBER = 15  # two octaves

# Tone/semitone steps of the major scale, starting from the step up to the 2nd
MAJOR_STEPS: tuple[int, ...] = (2, 2, 1, 2, 2, 2, 1)

# Reference spellings for measuring letter-to-letter distances.
# Only the natural entries are ever matched.
CHROMATIC_SPELLINGS: tuple[str, ...] = (
    "C",
    "C#",
    "D",
    "Eb",
    "E",
    "F",
    "F#",
    "G",
    "Ab",
    "A",
    "Bb",
    "B",
)


@dataclass(frozen=True)
class Interval:
    """
    A diatonic interval such as '5', 'b7', '#11' or 'bb2'.

    Number is 1-15 (unison to two octaves).
    Quality is the chromatic deviation from the major/perfect interval.

    Examples:
        Interval(5) = perfect fifth
        Interval(7, Accidental.FLAT) = minor seventh
        Interval(4, Accidental.SHARP) = augmented fourth
    """

    number: int
    quality: Accidental = Accidental.NATURAL

    def __post_init__(self) -> None:
        if not MIN_NUMBER <= self.number <= MAX_NUMBER:
            raise ValueError(
                f"Interval number must be {MIN_NUMBER}-{MAX_NUMBER}, got {self.number}"
            )

    @property
    def spelling(self) -> str:
        """Text form, e.g. 'b7'."""
        return f"{self.quality.symbol}{self.number}"

    @property
    def simple_number(self) -> int:
        """
        The interval number reduced to within one octave.

        Octaves are removed while the number is above 7, so the octave
        itself collapses onto the unison: 8 -> 1, 9 -> 2, 15 -> 1.
        """
        number = self.number
        while number > 7:
            number -= 7
        return number

    @property
    def semitones(self) -> int:
        """Semitone size of the simple interval."""
        return interval_to_semitones(self)

    def __str__(self) -> str:
        return self.spelling

    def __repr__(self) -> str:
        if self.quality is Accidental.NATURAL:
            return f"Interval({self.number})"
        return f"Interval({self.number}, {self.quality!r})"


def interval_to_semitones(interval: Interval) -> int:
    """
    Convert an interval to semitones as a simple interval.

    Walks the major scale from the 2nd up to the interval's simple number,
    then applies the quality.
    """
    semitones = 0
    for position in range(2, interval.simple_number + 1):
        semitones += MAJOR_STEPS[(position - 2) % 7]
    return semitones + interval.quality.semitones


def count_semitones(first: Note, second: Note) -> int:
    """
    Count the semitones from one note up to the next occurrence of another's letter.

    Args:
        first: The lower note
        second: The upper note (only its letter is searched for)

    Returns:
        Semitones from first to second, including both accidentals
    """
    i = CHROMATIC_SPELLINGS.index(first.letter.value)
    start = i + first.accidental.semitones

    while CHROMATIC_SPELLINGS[i % 12] != second.letter.value:
        i += 1

    end = i + second.accidental.semitones
    return end - start
