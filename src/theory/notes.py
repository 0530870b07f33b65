"""
Notes Module - Pitches as Semitone Values

A pitch is a canonical note label plus an absolute semitone value
(MIDI numbering, so C4 = 60). Every other part of the theory package
is built on top of this:

    Pitch("C", 60).transpose(7)  →  Pitch("G", 67)

Wrap policy:
    Labels come from PITCH_CLASS_NAMES[value % 12]. Python's ``%`` is a
    floor modulo, so negative totals wrap upward into 0..11
    (value -1 is "B", one semitone below C).

Author: Rohan Rajendra Dhanawade
"""

from dataclasses import dataclass
from typing import Dict, Tuple

from src.theory.errors import UnknownNoteError


# =============================================================================
# CONSTANTS: The 12 Pitch Classes
# =============================================================================

# Canonical labels, index = pitch class. Black keys carry both spellings.
PITCH_CLASS_NAMES: Tuple[str, ...] = (
    "C", "C#/Db", "D", "D#/Eb", "E", "F",
    "F#/Gb", "G", "G#/Ab", "A", "A#/Bb", "B",
)

# Semitone offsets of the natural letters
NATURAL_PITCH_CLASSES: Dict[str, int] = {
    "C": 0, "D": 2, "E": 4, "F": 5, "G": 7, "A": 9, "B": 11,
}

ACCIDENTALS: Dict[str, int] = {
    "": 0,
    "#": 1,
    "b": -1,
}

# Default octave base used when a note is typed without an octave (C4)
DEFAULT_BASE_VALUE = 60


# =============================================================================
# PITCH
# =============================================================================

@dataclass(frozen=True)
class Pitch:
    """
    An immutable musical pitch.

    Attributes:
        name: Canonical label, always PITCH_CLASS_NAMES[value % 12]
        value: Absolute semitone index (MIDI numbering)

    Example:
        >>> Pitch("C", 60).transpose(4)
        Pitch(name='E', value=64)
    """
    name: str
    value: int

    def __post_init__(self):
        expected = PITCH_CLASS_NAMES[self.value % 12]
        if self.name != expected:
            raise ValueError(
                f"Pitch name '{self.name}' does not match value {self.value}. "
                f"Expected: '{expected}'"
            )

    @classmethod
    def from_value(cls, value: int) -> "Pitch":
        """Build a pitch from its semitone value alone."""
        return cls(PITCH_CLASS_NAMES[value % 12], value)

    @property
    def pitch_class(self) -> int:
        return self.value % 12

    def transpose(self, semitones: int) -> "Pitch":
        """Return a new pitch ``semitones`` above (or below, if negative) this one."""
        return Pitch.from_value(self.value + semitones)

    def __str__(self) -> str:
        return self.name


# =============================================================================
# NAME LOOKUP
# =============================================================================

def pitch_class_of(name: str) -> int:
    """
    Resolve a note name to its pitch class (0-11).

    Accepts naturals ("C"), sharps ("F#"), flats ("Bb") and the
    canonical enharmonic labels ("C#/Db"). The letter is
    case-insensitive, so "f#" and "bb" work too.

    Examples:
        pitch_class_of("C")      → 0
        pitch_class_of("Db")     → 1
        pitch_class_of("A#/Bb")  → 10

    Raises:
        UnknownNoteError: If the name is not a recognised note
    """
    text = name.strip()

    # Enharmonic labels: both halves must agree
    if "/" in text:
        halves = {pitch_class_of(part) for part in text.split("/")}
        if len(halves) != 1:
            raise UnknownNoteError(f"Inconsistent enharmonic label: '{name}'")
        return halves.pop()

    if not 1 <= len(text) <= 2:
        raise UnknownNoteError(
            f"Unknown note: '{name}'. Valid notes are: {list(PITCH_CLASS_NAMES)}"
        )

    letter = text[0].upper()
    accidental = text[1:]
    if letter not in NATURAL_PITCH_CLASSES or accidental not in ACCIDENTALS:
        raise UnknownNoteError(
            f"Unknown note: '{name}'. Valid notes are: {list(PITCH_CLASS_NAMES)}"
        )

    return (NATURAL_PITCH_CLASSES[letter] + ACCIDENTALS[accidental]) % 12


def pitch_from_name(name: str, base: int = DEFAULT_BASE_VALUE) -> Pitch:
    """Turn a typed note name into a pitch in the octave starting at ``base``."""
    return Pitch.from_value(base + pitch_class_of(name))
