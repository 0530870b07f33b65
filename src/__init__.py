"""
Guitar Theory Companion - Source Package

A music-theory toolkit for guitarists: notes, scales, chords,
chord progressions and the fretboard.

Subpackages:
    - src.theory: Pitches, scales, chords, progressions, fretboard, intervals
    - src.practice: Interval, chord and fretboard exercises
    - src.config: Settings schema and YAML loader

Example usage:
    from src.theory import Pitch, Scale, Fretboard

    scale = Scale.major(Pitch("G", 67))
    print(scale.note_names())   # ['G', 'A', 'B', 'C', 'D', 'E', 'F#/Gb', 'G']
"""

import logging

__version__ = "0.1.0"
__author__ = "Rohan Rajendra Dhanawade"

logging.getLogger(__name__).addHandler(logging.NullHandler())
