"""
Tests for core spelling primitives.

Tests cover:
- Accidental (accidental.py)
- Letter and Note (note.py)
- Interval, interval_to_semitones, count_semitones (interval.py)
- NoteCatalogue, IntervalCatalogue (catalogue.py)
"""

import pytest

from chuk_mcp_scales.core import (
    Accidental,
    Catalogue,
    Interval,
    Letter,
    Note,
    build_interval_catalogue,
    build_note_catalogue,
    count_semitones,
    interval_to_semitones,
)

C = Note(Letter.C)
D = Note(Letter.D)
G = Note(Letter.G)


def add(catalogue: Catalogue, note: str, interval: str) -> Note | None:
    """Apply an interval spelling to a note spelling."""
    start = catalogue.lookup_note(note)
    step = catalogue.lookup_interval(interval)
    assert start is not None and step is not None
    return start.add_interval(step)


class TestAccidental:
    """Tests for Accidental enum."""

    def test_seven_accidentals_in_offset_order(self) -> None:
        """One accidental per offset from -3 to +3."""
        assert [a.semitones for a in Accidental] == [-3, -2, -1, 0, 1, 2, 3]

    def test_symbols(self) -> None:
        """Symbols follow common notation."""
        assert [a.symbol for a in Accidental] == ["bbb", "bb", "b", "", "#", "x", "#x"]
        assert str(Accidental.FLAT) == "b"
        assert str(Accidental.NATURAL) == ""

    def test_from_semitones_round_trip(self) -> None:
        """Every accidental is found by its own offset."""
        for accidental in Accidental:
            assert Accidental.from_semitones(accidental.semitones) is accidental

    def test_from_semitones_out_of_range(self) -> None:
        """Offsets beyond three flats/sharps are not found."""
        assert Accidental.from_semitones(4) is None
        assert Accidental.from_semitones(-4) is None

    def test_parse(self) -> None:
        """Parse accidentals by symbol."""
        assert Accidental.parse("x") is Accidental.DOUBLE_SHARP
        assert Accidental.parse("#x") is Accidental.TRIPLE_SHARP
        assert Accidental.parse("") is Accidental.NATURAL
        assert Accidental.parse("##") is None


class TestLetter:
    """Tests for Letter enum."""

    def test_step_forward(self) -> None:
        """Stepping moves through the alphabet."""
        assert Letter.C.step(2) == Letter.E
        assert Letter.C.step(6) == Letter.B

    def test_step_wraps(self) -> None:
        """G wraps round to A."""
        assert Letter.G.step(1) == Letter.A
        assert Letter.A.step(7) == Letter.A


class TestNote:
    """Tests for Note."""

    def test_spelling_and_key(self) -> None:
        """Spelling keeps case; key is lowercase."""
        b_flat = Note(Letter.B, Accidental.FLAT)
        assert b_flat.spelling == "Bb"
        assert b_flat.key == "bb"
        assert str(Note(Letter.F, Accidental.TRIPLE_SHARP)) == "F#x"

    def test_enharmonics_are_distinct(self) -> None:
        """C# and Db sound the same but are different notes."""
        assert Note(Letter.C, Accidental.SHARP) != Note(Letter.D, Accidental.FLAT)
        assert Note(Letter.C, Accidental.SHARP) == Note(Letter.C, Accidental.SHARP)

    def test_shift(self) -> None:
        """Shifting keeps the letter and changes the accidental."""
        assert C.shift(1) == Note(Letter.C, Accidental.SHARP)
        assert Note(Letter.C, Accidental.SHARP).shift(2) == Note(Letter.C, Accidental.TRIPLE_SHARP)
        assert Note(Letter.E, Accidental.FLAT).shift(1) == Note(Letter.E)

    def test_shift_out_of_range(self) -> None:
        """Shifting past three flats/sharps fails."""
        assert Note(Letter.C, Accidental.DOUBLE_SHARP).shift(2) is None
        assert Note(Letter.C, Accidental.FLAT).shift(-3) is None

    def test_natural(self) -> None:
        """Natural drops the accidental."""
        assert Note(Letter.F, Accidental.SHARP).natural() == Note(Letter.F)

    def test_add_perfect_and_augmented(self, catalogue: Catalogue) -> None:
        """Simple intervals above C."""
        assert add(catalogue, "C", "5") == G
        assert add(catalogue, "C", "#4") == Note(Letter.F, Accidental.SHARP)

    def test_add_interval_is_spelled_by_letter(self, catalogue: Catalogue) -> None:
        """Diminished intervals keep their letter, whatever the sound."""
        assert add(catalogue, "C", "bb7") == Note(Letter.B, Accidental.DOUBLE_FLAT)
        assert add(catalogue, "C", "bb2") == Note(Letter.D, Accidental.DOUBLE_FLAT)

    def test_add_interval_beyond_three_flats(self, catalogue: Catalogue) -> None:
        """Cbb up a diminished 7th would need four flats."""
        assert add(catalogue, "Cbb", "bb7") is None

    def test_add_interval_in_other_keys(self, catalogue: Catalogue) -> None:
        """Thirds and seconds from various roots."""
        assert add(catalogue, "D", "3") == Note(Letter.F, Accidental.SHARP)
        assert add(catalogue, "Eb", "b3") == Note(Letter.G, Accidental.FLAT)
        assert add(catalogue, "B", "2") == Note(Letter.C, Accidental.SHARP)
        assert add(catalogue, "D", "7") == Note(Letter.C, Accidental.SHARP)

    def test_add_compound_interval(self, catalogue: Catalogue) -> None:
        """Compound intervals spell like their simple equivalents."""
        assert add(catalogue, "G", "9") == Note(Letter.A)
        assert add(catalogue, "F", "b10") == Note(Letter.A, Accidental.FLAT)
        assert add(catalogue, "C", "8") == C


class TestInterval:
    """Tests for Interval."""

    def test_number_range(self) -> None:
        """Numbers must be 1-15."""
        with pytest.raises(ValueError):
            Interval(0)
        with pytest.raises(ValueError):
            Interval(16)

    def test_spelling(self) -> None:
        """Spelling is quality symbol then number."""
        assert Interval(7, Accidental.FLAT).spelling == "b7"
        assert str(Interval(11, Accidental.SHARP)) == "#11"
        assert str(Interval(4)) == "4"

    def test_repr(self) -> None:
        """Repr omits a natural quality."""
        assert repr(Interval(5)) == "Interval(5)"
        assert repr(Interval(3, Accidental.FLAT)) == "Interval(3, Accidental.FLAT)"

    def test_simple_numbers_within_octave(self) -> None:
        """1-7 are already simple."""
        for number in range(1, 8):
            assert Interval(number).simple_number == number

    def test_octave_collapses_to_unison(self) -> None:
        """Octaves are removed while above 7, so 8 becomes 1."""
        assert Interval(8).simple_number == 1
        assert Interval(9).simple_number == 2
        assert Interval(14).simple_number == 7
        assert Interval(15).simple_number == 1

    def test_semitones(self, catalogue: Catalogue) -> None:
        """Major-scale sizes adjusted by quality."""
        expected = {
            "1": 0,
            "3": 4,
            "#4": 6,
            "5": 7,
            "b7": 10,
            "7": 11,
            "bb2": 0,
            "8": 0,
            "b10": 3,
            "#11": 6,
            "13": 9,
        }
        for spelling, semitones in expected.items():
            interval = catalogue.lookup_interval(spelling)
            assert interval is not None
            assert interval_to_semitones(interval) == semitones, spelling
            assert interval.semitones == semitones

    def test_count_semitones(self) -> None:
        """Distances are measured up to the next occurrence of the letter."""
        assert count_semitones(C, G) == 7
        assert count_semitones(C, C) == 0
        assert count_semitones(Note(Letter.B, Accidental.FLAT), C) == 2
        assert count_semitones(Note(Letter.B), C) == 1
        assert count_semitones(Note(Letter.E, Accidental.DOUBLE_FLAT), Note(Letter.F)) == 3
        assert count_semitones(Note(Letter.C, Accidental.SHARP), Note(Letter.B)) == 10


class TestCatalogue:
    """Tests for note and interval catalogues."""

    def test_note_catalogue_size(self) -> None:
        """7 letters x 7 accidentals, 21 of them usable as roots."""
        notes = build_note_catalogue()
        assert len(notes) == 49
        assert len(notes.root_notes) == 21

    def test_root_notes(self) -> None:
        """Roots stay within one flat or sharp, in letter order."""
        roots = build_note_catalogue().root_notes
        assert all(abs(note.semitones) <= 1 for note in roots)
        assert [note.spelling for note in roots[:4]] == ["Ab", "A", "A#", "Bb"]

    def test_note_lookup_round_trip(self) -> None:
        """Every note is found by its own spelling."""
        notes = build_note_catalogue()
        for note in notes.notes.values():
            assert notes.lookup(note.spelling) == note

    def test_note_lookup_ignores_case(self) -> None:
        """Lookups are case-insensitive."""
        notes = build_note_catalogue()
        assert notes.lookup("Bb") == Note(Letter.B, Accidental.FLAT)
        assert notes.lookup("BB") == Note(Letter.B, Accidental.FLAT)
        assert notes.lookup("f#X") == Note(Letter.F, Accidental.TRIPLE_SHARP)
        assert "eb" in notes

    def test_note_lookup_not_found(self) -> None:
        """Unknown spellings return None."""
        notes = build_note_catalogue()
        assert notes.lookup("H") is None
        assert notes.lookup("Cbbbb") is None
        assert "" not in notes

    def test_interval_catalogue(self) -> None:
        """Numbers 1-15 with each of the 7 qualities."""
        intervals = build_interval_catalogue()
        assert len(intervals) == 105
        assert intervals.lookup("b7") == Interval(7, Accidental.FLAT)
        assert intervals.lookup("#11") == Interval(11, Accidental.SHARP)
        assert intervals.lookup("bbb15") == Interval(15, Accidental.TRIPLE_FLAT)

    def test_interval_lookup_not_found(self) -> None:
        """Unknown intervals return None, never a default."""
        intervals = build_interval_catalogue()
        assert intervals.lookup("16") is None
        assert intervals.lookup("b0") is None
        assert intervals.lookup("") is None
        assert "##4" not in intervals

    def test_catalogues_are_independent(self) -> None:
        """Each build returns its own read-only catalogue."""
        first = build_note_catalogue()
        second = build_note_catalogue()
        assert first.notes is not second.notes
        with pytest.raises(TypeError):
            first.notes["h"] = Note(Letter.A)  # type: ignore[index]
