"""
Scales Module - Scales from Step Patterns

A scale is a root pitch plus the semitone steps between consecutive
degrees. Its notes are the root followed by the running total of the
steps, so the major scale from C4 is:

    C(60) D(62) E(64) F(65) G(67) A(69) B(71) C(72)

Author: Rohan Rajendra Dhanawade
"""

from dataclasses import dataclass
from typing import Dict, List, Tuple

from src.theory.notes import Pitch


# =============================================================================
# CONSTANTS: Scale Formulas
# =============================================================================

# Steps between consecutive degrees (not offsets from the root)
SCALE_FORMULAS: Dict[str, Tuple[int, ...]] = {
    "major": (2, 2, 1, 2, 2, 2, 1),             # W-W-H-W-W-W-H
    "minor": (2, 1, 2, 2, 1, 2, 2),             # W-H-W-W-H-W-W (natural minor)
    "pentatonic_major": (2, 2, 3, 2, 3),
    "pentatonic_minor": (3, 2, 2, 3, 2),
    "blues": (3, 2, 1, 1, 3, 2),
}

SCALE_LABELS: Dict[str, str] = {
    "major": "Major",
    "minor": "Minor",
    "pentatonic_major": "Pentatonic Major",
    "pentatonic_minor": "Pentatonic Minor",
    "blues": "Blues",
}


# =============================================================================
# SCALE
# =============================================================================

@dataclass(frozen=True)
class Scale:
    """
    An immutable scale.

    ``Scale(root=...)`` with no intervals is a placeholder whose only
    note is the root. Rebuilding a scale means constructing a new one.

    Attributes:
        root: First degree of the scale
        label: Display name (e.g., "C Major")
        intervals: Semitone steps between consecutive degrees
    """
    root: Pitch
    label: str = ""
    intervals: Tuple[int, ...] = ()

    def __post_init__(self):
        # Accept lists from callers but store an immutable tuple
        object.__setattr__(self, "intervals", tuple(self.intervals))

    def get_notes(self) -> List[Pitch]:
        """Return the root followed by each degree, in declaration order."""
        notes = [self.root]
        current = self.root.value
        for step in self.intervals:
            current += step
            notes.append(Pitch.from_value(current))
        return notes

    def note_names(self) -> List[str]:
        return [note.name for note in self.get_notes()]

    # -------------------------------------------------------------------------
    # Presets
    # -------------------------------------------------------------------------

    @classmethod
    def major(cls, root: Pitch) -> "Scale":
        return build_scale("major", root)

    @classmethod
    def minor(cls, root: Pitch) -> "Scale":
        return build_scale("minor", root)

    @classmethod
    def pentatonic_major(cls, root: Pitch) -> "Scale":
        return build_scale("pentatonic_major", root)

    @classmethod
    def pentatonic_minor(cls, root: Pitch) -> "Scale":
        return build_scale("pentatonic_minor", root)

    @classmethod
    def blues(cls, root: Pitch) -> "Scale":
        return build_scale("blues", root)


def build_scale(preset: str, root: Pitch) -> Scale:
    """
    Build a named scale from a root pitch.

    Args:
        preset: One of SCALE_FORMULAS (e.g., "major", "blues")
        root: Root pitch

    Returns:
        Scale labelled "<root> <preset label>", e.g. "G Pentatonic Minor"

    Raises:
        ValueError: If the preset is unknown
    """
    if preset not in SCALE_FORMULAS:
        raise ValueError(
            f"Unknown scale preset: '{preset}'. Valid presets are: {list(SCALE_FORMULAS)}"
        )

    return Scale(
        root=root,
        label=f"{root.name} {SCALE_LABELS[preset]}",
        intervals=SCALE_FORMULAS[preset],
    )
