"""
Tests for src/theory/progressions.py

Run with: pytest tests/test_progressions.py -v
"""

import pytest

from src.theory.errors import ScaleDegreeError, UnknownNumeralError
from src.theory.notes import Pitch
from src.theory.progressions import (
    ChordProgression, build_preset_progression, from_roman_numerals, parse_numeral
)
from src.theory.scales import Scale

C4 = Pitch("C", 60)


class TestParseNumeral:

    @pytest.mark.parametrize("numeral,expected", [
        ("I", (0, "major")),
        ("i", (0, "minor")),
        ("IV", (3, "major")),
        ("vi", (5, "minor")),
        ("VII", (6, "major")),
        ("V7", (4, "dominant7")),
        ("ii7", (1, "minor7")),
        ("Iv", (3, "major")),
    ])
    def test_parse(self, numeral, expected):
        assert parse_numeral(numeral) == expected

    @pytest.mark.parametrize("numeral", [
        "", "7", "VIII", "IIII", "X", "ii°", "V9",
        "I7V", "VI7I", "V77", "7V", "V\n", " V",
    ])
    def test_unknown_numerals_raise(self, numeral):
        with pytest.raises(UnknownNumeralError):
            parse_numeral(numeral)


class TestFromRomanNumerals:

    def test_one_four_five_in_c(self):
        prog = from_roman_numerals(Scale.major(C4), ["I", "IV", "V"], "C I-IV-V")
        assert prog.label == "C I-IV-V"
        assert [c.root.name for c in prog.chords] == ["C", "F", "G"]
        assert prog.chord_labels() == ["C Major", "F Major", "G Major"]
        assert all(c.intervals == (4, 7) for c in prog.chords)

    def test_pop_progression_in_g(self):
        scale = Scale.major(Pitch("G", 67))
        prog = from_roman_numerals(scale, ["I", "V", "vi", "IV"], "pop")
        assert prog.chord_labels() == ["G Major", "D Major", "E Minor", "C Major"]

    def test_seventh_chords(self):
        prog = from_roman_numerals(Scale.major(C4), ["ii7", "V7", "I"], "jazz")
        assert prog.chord_labels() == ["Dmin7", "G7", "C Major"]

    def test_unknown_numeral_is_not_silently_tonic(self):
        with pytest.raises(UnknownNumeralError):
            from_roman_numerals(Scale.major(C4), ["I", "bVII"], "bad")

    def test_stray_seven_inside_numeral_rejected(self):
        with pytest.raises(UnknownNumeralError):
            from_roman_numerals(Scale.major(C4), ["I", "I7V"], "bad")

    def test_unknown_numeral_is_value_error(self):
        with pytest.raises(ValueError):
            from_roman_numerals(Scale.major(C4), ["Q"], "bad")

    def test_degree_beyond_pentatonic_scale(self):
        scale = Scale.pentatonic_major(C4)
        with pytest.raises(ScaleDegreeError):
            from_roman_numerals(scale, ["I", "VII"], "bad")

    def test_degree_error_is_index_error(self):
        with pytest.raises(IndexError):
            from_roman_numerals(Scale(root=C4), ["II"], "bad")

    def test_degrees_inside_short_scale_are_allowed(self):
        prog = from_roman_numerals(Scale.pentatonic_minor(Pitch("A", 57)), ["i", "iv"], "ok")
        assert prog.chord_labels() == ["A Minor", "E Minor"]

    def test_empty_numerals(self):
        prog = from_roman_numerals(Scale.major(C4), [], "empty")
        assert len(prog) == 0


class TestPresetProgressions:

    def test_jazz_in_c(self):
        prog = build_preset_progression("jazz", C4)
        assert prog.label == "C Major ii-V-I (Jazz)"
        assert prog.chord_labels() == ["D Minor", "G Major", "C Major"]

    def test_minor_in_a(self):
        prog = build_preset_progression("minor", Pitch("A", 69))
        assert prog.label == "A Minor i-iv-v"
        assert prog.chord_labels() == ["A Minor", "D Minor", "E Minor"]

    def test_unknown_preset(self):
        with pytest.raises(ValueError):
            build_preset_progression("andalusian", C4)

    def test_progression_is_immutable_tuple(self):
        prog = ChordProgression(label="x", chords=[])
        assert prog.chords == ()
