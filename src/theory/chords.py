"""
Chords Module - Chords from Root Offsets

Unlike scales, chord intervals are offsets from the root rather than
steps between notes:

    dominant7(C) = C, C+4 (E), C+7 (G), C+10 (A#/Bb)

Author: Rohan Rajendra Dhanawade
"""

from dataclasses import dataclass
from typing import Dict, List, Tuple

from src.theory.notes import Pitch


# =============================================================================
# CONSTANTS: Chord Formulas
# =============================================================================

# Semitone offsets from the root (the root itself is implied)
CHORD_FORMULAS: Dict[str, Tuple[int, ...]] = {
    "major": (4, 7),
    "minor": (3, 7),
    "dominant7": (4, 7, 10),
    "major7": (4, 7, 11),
    "minor7": (3, 7, 10),
}

# Label suffix appended to the root name
CHORD_SUFFIXES: Dict[str, str] = {
    "major": " Major",
    "minor": " Minor",
    "dominant7": "7",
    "major7": "Maj7",
    "minor7": "min7",
}

# Spoken quality names, as used by the training exercises
CHORD_QUALITIES: Dict[str, str] = {
    "Major": "major",
    "Minor": "minor",
    "Dominant 7": "dominant7",
    "Major 7": "major7",
    "Minor 7": "minor7",
}


# =============================================================================
# CHORD
# =============================================================================

@dataclass(frozen=True)
class Chord:
    """
    An immutable chord.

    Attributes:
        root: Root pitch
        label: Display name (e.g., "G7", "A Minor")
        intervals: Offsets from the root, in the order they are voiced
    """
    root: Pitch
    label: str = ""
    intervals: Tuple[int, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "intervals", tuple(self.intervals))

    def get_notes(self) -> List[Pitch]:
        """Return the root followed by each offset note, in declared order."""
        return [self.root] + [self.root.transpose(offset) for offset in self.intervals]

    def note_names(self) -> List[str]:
        return [note.name for note in self.get_notes()]

    @classmethod
    def major(cls, root: Pitch) -> "Chord":
        return build_chord("major", root)

    @classmethod
    def minor(cls, root: Pitch) -> "Chord":
        return build_chord("minor", root)

    @classmethod
    def dominant7(cls, root: Pitch) -> "Chord":
        return build_chord("dominant7", root)

    @classmethod
    def major7(cls, root: Pitch) -> "Chord":
        return build_chord("major7", root)

    @classmethod
    def minor7(cls, root: Pitch) -> "Chord":
        return build_chord("minor7", root)


def build_chord(preset: str, root: Pitch) -> Chord:
    """Build a named chord on ``root``. Raises ValueError for unknown presets."""
    if preset not in CHORD_FORMULAS:
        raise ValueError(
            f"Unknown chord preset: '{preset}'. Valid presets are: {list(CHORD_FORMULAS)}"
        )

    return Chord(
        root=root,
        label=root.name + CHORD_SUFFIXES[preset],
        intervals=CHORD_FORMULAS[preset],
    )


def build_chord_by_quality(quality: str, root: Pitch) -> Chord:
    """Build a chord from its spoken quality name (e.g., "Dominant 7")."""
    if quality not in CHORD_QUALITIES:
        raise ValueError(
            f"Unknown chord quality: '{quality}'. Valid qualities are: {list(CHORD_QUALITIES)}"
        )
    return build_chord(CHORD_QUALITIES[quality], root)
