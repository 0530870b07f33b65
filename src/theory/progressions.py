"""
Progressions Module - Roman Numerals to Chords

Maps roman-numeral symbols onto the degrees of a scale:

    I-IV-V over C major  →  C Major, F Major, G Major
    ii-V7-I over C major →  D Minor, G7, C Major

Rules for a single numeral:
    1. Degree: the letters matched case-insensitively
       against I..VII → 0..6
    2. Quality: uppercase first character → major family, lowercase → minor
    3. A single trailing "7" selects the seventh chord of that family
       (dominant 7th for major, minor 7th for minor)

Author: Rohan Rajendra Dhanawade
"""

from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple
import logging
import re

from src.theory.chords import Chord, build_chord
from src.theory.errors import ScaleDegreeError, UnknownNumeralError
from src.theory.notes import Pitch
from src.theory.scales import Scale, build_scale

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

ROMAN_NUMERALS: Tuple[str, ...] = ("I", "II", "III", "IV", "V", "VI", "VII")

# Letters I and V only, optionally followed by a single trailing 7
NUMERAL_REGEX = re.compile(r"([IiVv]+)(7)?")

# (is uppercase, has 7) → chord preset
NUMERAL_CHORD_PRESETS: Dict[Tuple[bool, bool], str] = {
    (True, False): "major",
    (False, False): "minor",
    (True, True): "dominant7",
    (False, True): "minor7",
}

# name → (scale preset, numerals, label suffix)
PROGRESSION_PRESETS: Dict[str, Tuple[str, Tuple[str, ...], str]] = {
    "I-IV-V": ("major", ("I", "IV", "V"), "Major I-IV-V"),
    "pop": ("major", ("I", "V", "vi", "IV"), "Major I-V-vi-IV (Pop)"),
    "jazz": ("major", ("ii", "V", "I"), "Major ii-V-I (Jazz)"),
    "minor": ("minor", ("i", "iv", "v"), "Minor i-iv-v"),
}


# =============================================================================
# PROGRESSION
# =============================================================================

@dataclass(frozen=True)
class ChordProgression:
    """An ordered, immutable sequence of chords with a display label."""
    label: str
    chords: Tuple[Chord, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "chords", tuple(self.chords))

    def chord_labels(self) -> List[str]:
        return [chord.label for chord in self.chords]

    def __len__(self) -> int:
        return len(self.chords)


def parse_numeral(numeral: str) -> Tuple[int, str]:
    """
    Split a roman numeral into a scale degree and a chord preset.

    Examples:
        parse_numeral("IV")   → (3, "major")
        parse_numeral("vi")   → (5, "minor")
        parse_numeral("V7")   → (4, "dominant7")
        parse_numeral("ii7")  → (1, "minor7")

    Raises:
        UnknownNumeralError: If the letters are not one of I..VII
    """
    match = NUMERAL_REGEX.fullmatch(numeral)
    letters = match.group(1).upper() if match else ""
    if letters not in ROMAN_NUMERALS:
        raise UnknownNumeralError(
            f"Unknown numeral: '{numeral}'. Valid numerals are: {list(ROMAN_NUMERALS)} "
            f"(lowercase for minor, add '7' for seventh chords)"
        )

    degree = ROMAN_NUMERALS.index(letters)
    preset = NUMERAL_CHORD_PRESETS[(numeral[0].isupper(), match.group(2) is not None)]
    return degree, preset


def from_roman_numerals(
    scale: Scale,
    numerals: Sequence[str],
    label: str
) -> ChordProgression:
    """
    Build a chord progression by mapping numerals onto a scale.

    Args:
        scale: Scale whose notes supply the chord roots
        numerals: Roman numerals in playing order (e.g., ["I", "V", "vi", "IV"])
        label: Display name for the progression

    Returns:
        ChordProgression with one chord per numeral

    Raises:
        UnknownNumeralError: If a numeral is not recognised
        ScaleDegreeError: If a degree is beyond the scale's notes
                          (e.g., "VII" over a pentatonic scale)
    """
    notes = scale.get_notes()
    chords = []

    for numeral in numerals:
        degree, preset = parse_numeral(numeral)
        if degree >= len(notes):
            raise ScaleDegreeError(
                f"Numeral '{numeral}' needs degree {degree + 1} but "
                f"'{scale.label}' only has {len(notes)} notes"
            )
        chords.append(build_chord(preset, notes[degree]))

    logger.debug("Built progression %r over %r: %s", label, scale.label,
                 [chord.label for chord in chords])
    return ChordProgression(label=label, chords=tuple(chords))


def build_preset_progression(name: str, root: Pitch) -> ChordProgression:
    """Build one of PROGRESSION_PRESETS in the key of ``root``."""
    if name not in PROGRESSION_PRESETS:
        raise ValueError(
            f"Unknown progression: '{name}'. Valid progressions are: {list(PROGRESSION_PRESETS)}"
        )

    scale_preset, numerals, suffix = PROGRESSION_PRESETS[name]
    scale = build_scale(scale_preset, root)
    return from_roman_numerals(scale, numerals, f"{root.name} {suffix}")
