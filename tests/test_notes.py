"""
Tests for src/theory/notes.py and src/theory/intervals.py

Run with: pytest tests/test_notes.py -v
"""

import dataclasses

import pytest

from src.theory.errors import UnknownNoteError
from src.theory.intervals import identify_interval, interval_name
from src.theory.notes import PITCH_CLASS_NAMES, Pitch, pitch_class_of, pitch_from_name


class TestPitch:
    """Construction, invariants and transposition."""

    def test_pitch_class_table(self):
        assert len(PITCH_CLASS_NAMES) == 12
        assert PITCH_CLASS_NAMES[0] == "C"
        assert PITCH_CLASS_NAMES[1] == "C#/Db"
        assert PITCH_CLASS_NAMES[11] == "B"

    def test_transpose_up_a_fifth(self):
        assert Pitch("C", 60).transpose(7) == Pitch("G", 67)

    def test_transpose_returns_new_pitch(self):
        c = Pitch("C", 60)
        e = c.transpose(4)
        assert c == Pitch("C", 60)
        assert e == Pitch("E", 64)

    def test_transpose_across_octave(self):
        assert Pitch("A", 69).transpose(5) == Pitch("D", 74)

    def test_negative_transpose_wraps_with_floor_modulo(self):
        assert Pitch("C", 60).transpose(-1) == Pitch("B", 59)
        assert Pitch("C", 0).transpose(-1) == Pitch("B", -1)
        assert Pitch.from_value(-13).name == "B"

    def test_mismatched_name_rejected(self):
        with pytest.raises(ValueError):
            Pitch("D", 60)

    def test_pitch_is_immutable(self):
        c = Pitch("C", 60)
        with pytest.raises(dataclasses.FrozenInstanceError):
            c.value = 61

    def test_pitch_class_property(self):
        assert Pitch("F#/Gb", 78).pitch_class == 6
        assert Pitch("B", -1).pitch_class == 11


class TestNoteNames:
    """Free-text note lookup."""

    @pytest.mark.parametrize("name,expected", [
        ("C", 0), ("c", 0), ("C#", 1), ("Db", 1), ("db", 1),
        ("F#", 6), ("Gb", 6), ("Bb", 10), ("bb", 10), ("B", 11),
        ("C#/Db", 1), ("A#/Bb", 10), ("Cb", 11), ("E#", 5), (" G ", 7),
    ])
    def test_pitch_class_of(self, name, expected):
        assert pitch_class_of(name) == expected

    @pytest.mark.parametrize("name", ["", "H", "C##", "Cx", "C#/D", "hello"])
    def test_unknown_names_rejected(self, name):
        with pytest.raises(UnknownNoteError):
            pitch_class_of(name)

    def test_unknown_note_is_value_error(self):
        with pytest.raises(ValueError):
            pitch_class_of("X")

    def test_pitch_from_name_uses_c4_octave(self):
        assert pitch_from_name("C") == Pitch("C", 60)
        assert pitch_from_name("Bb") == Pitch("A#/Bb", 70)

    def test_pitch_from_name_custom_base(self):
        assert pitch_from_name("e", base=48) == Pitch("E", 52)


class TestIntervals:
    """Interval naming."""

    def test_interval_names(self):
        assert interval_name(1) == "Minor 2nd"
        assert interval_name(6) == "Tritone"
        assert interval_name(12) == "Octave"

    @pytest.mark.parametrize("semitones", [0, 13, -3])
    def test_interval_name_out_of_range(self, semitones):
        with pytest.raises(ValueError):
            interval_name(semitones)

    def test_identify_interval(self):
        c = Pitch("C", 60)
        assert identify_interval(c, Pitch("G", 67)) == "Perfect 5th"
        assert identify_interval(Pitch("G", 67), c) == "Perfect 5th"
        assert identify_interval(c, Pitch("E", 76)) == "Major 3rd"

    def test_identify_unison_and_octave(self):
        c = Pitch("C", 60)
        assert identify_interval(c, c) == "Unison"
        assert identify_interval(c, Pitch("C", 72)) == "Octave"
        assert identify_interval(c, Pitch("C", 84)) == "Octave"
