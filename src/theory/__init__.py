"""
Theory Subpackage

The music-theory data model:
    - notes.py: Pitch, the 12 pitch-class labels, note-name lookup
    - scales.py: Scales built from step patterns
    - chords.py: Chords built from root offsets
    - progressions.py: Roman numerals mapped onto scales
    - fretboard.py: Six-string grid lookup and highlighting
    - intervals.py: Interval names
    - errors.py: Errors raised by the above

Usage:
    from src.theory import Pitch, Scale, Fretboard

    c = Pitch("C", 60)
    board = Fretboard(frets=12)
    board.highlight_scale(Scale.major(c))
"""

from src.theory.errors import (
    UnknownNoteError, UnknownNumeralError, ScaleDegreeError, FretboardRangeError
)
from src.theory.notes import Pitch, PITCH_CLASS_NAMES, pitch_class_of, pitch_from_name
from src.theory.scales import Scale, SCALE_FORMULAS, build_scale
from src.theory.chords import Chord, CHORD_FORMULAS, CHORD_QUALITIES, build_chord
from src.theory.progressions import (
    ChordProgression, from_roman_numerals, build_preset_progression, PROGRESSION_PRESETS
)
from src.theory.fretboard import Fretboard, STANDARD_TUNING_VALUES, STANDARD_TUNING_LABELS
from src.theory.intervals import INTERVAL_NAMES, interval_name, identify_interval
