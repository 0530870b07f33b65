"""
Property tests for pitch arithmetic and the fretboard grid.

Run with: pytest tests/test_properties.py -v
"""

from hypothesis import given, strategies as st

from src.theory.fretboard import Fretboard
from src.theory.notes import PITCH_CLASS_NAMES, Pitch

BOARD = Fretboard()

values = st.integers(min_value=-500, max_value=500)


class TestTransposeProperties:

    @given(values, values)
    def test_transpose_adds_semitones(self, value, semitones):
        moved = Pitch.from_value(value).transpose(semitones)
        assert moved.value == value + semitones
        assert moved.name == PITCH_CLASS_NAMES[(value + semitones) % 12]

    @given(values, values)
    def test_transpose_round_trip(self, value, semitones):
        start = Pitch.from_value(value)
        assert start.transpose(semitones).transpose(-semitones) == start

    @given(values)
    def test_octave_keeps_name(self, value):
        start = Pitch.from_value(value)
        assert start.transpose(12).name == start.name


class TestFretboardProperties:

    @given(st.integers(min_value=0, max_value=5), st.integers(min_value=0, max_value=24))
    def test_note_at_is_open_plus_fret(self, string, fret):
        assert BOARD.note_at(string, fret).value == BOARD.open_string_value(string) + fret

    @given(st.integers(min_value=0, max_value=5), st.integers(min_value=0, max_value=24),
           st.sampled_from(PITCH_CLASS_NAMES))
    def test_highlight_agrees_with_note_at(self, string, fret, name):
        grid = BOARD.highlight_membership([name])
        assert bool(grid[string, fret]) == (BOARD.note_at(string, fret).name == name)
