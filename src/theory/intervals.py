"""
Intervals Module - Naming the Distance Between Two Pitches

Author: Rohan Rajendra Dhanawade
"""

from typing import Dict

from src.theory.notes import Pitch


INTERVAL_NAMES: Dict[int, str] = {
    1: "Minor 2nd",
    2: "Major 2nd",
    3: "Minor 3rd",
    4: "Major 3rd",
    5: "Perfect 4th",
    6: "Tritone",
    7: "Perfect 5th",
    8: "Minor 6th",
    9: "Major 6th",
    10: "Minor 7th",
    11: "Major 7th",
    12: "Octave",
}

UNISON = "Unison"


def interval_name(semitones: int) -> str:
    """Name an interval of 1-12 semitones."""
    if semitones not in INTERVAL_NAMES:
        raise ValueError(f"Interval must be 1-12 semitones. Got: {semitones}")
    return INTERVAL_NAMES[semitones]


def identify_interval(first: Pitch, second: Pitch) -> str:
    """
    Name the interval between two pitches, folded into one octave.

    Order does not matter. Compound intervals are reduced
    (a 10th is reported as a "Major 3rd"); equal pitches are a
    "Unison" and any other whole number of octaves is an "Octave".

    Examples:
        identify_interval(C4, G4)  → "Perfect 5th"
        identify_interval(C4, C5)  → "Octave"
    """
    distance = abs(second.value - first.value)
    if distance == 0:
        return UNISON
    folded = distance % 12
    return INTERVAL_NAMES[folded or 12]
