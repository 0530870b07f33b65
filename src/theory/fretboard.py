"""
Fretboard Module - Six Strings × Frets Grid

Every cell of the grid holds the pitch sounded at that position:

    note_at(string, fret) == Pitch.from_value(open_values[string] + fret)

Strings are ordered high-pitch first, so string 0 is the high E (64)
and string 5 the low E (40) in standard tuning.

Highlighting:
    Target notes are compared by pitch class, not by label text. "C#",
    "Db" and "C#/Db" all light up the same cells, while "A" no longer
    matches inside "A#/Bb".

Author: Rohan Rajendra Dhanawade
"""

from typing import Iterable, List, Optional, Sequence, Tuple, TYPE_CHECKING
import logging

import numpy as np

from src.theory.chords import Chord
from src.theory.errors import FretboardRangeError
from src.theory.notes import Pitch, pitch_class_of
from src.theory.scales import Scale

if TYPE_CHECKING:
    from src.config.settings import CompanionSettings

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS: Standard Tuning
# =============================================================================

NUM_STRINGS = 6
DEFAULT_FRETS = 24

# MIDI values of the open strings, high to low: E4 B3 G3 D3 A2 E2
STANDARD_TUNING_VALUES: Tuple[int, ...] = (64, 59, 55, 50, 45, 40)
STANDARD_TUNING_LABELS: Tuple[str, ...] = ("E", "B", "G", "D", "A", "E")


# =============================================================================
# FRETBOARD
# =============================================================================

class Fretboard:
    """
    An immutable grid of pitches for a six-string guitar.

    Args:
        frets: Highest fret (the grid has frets + 1 columns, fret 0 = open)
        open_values: Semitone value of each open string, high string first
        labels: Display label of each string

    Example:
        >>> board = Fretboard(frets=12)
        >>> board.note_at(0, 0)
        Pitch(name='E', value=64)
    """

    def __init__(
        self,
        frets: int = DEFAULT_FRETS,
        open_values: Sequence[int] = STANDARD_TUNING_VALUES,
        labels: Optional[Sequence[str]] = None
    ):
        if frets < 0:
            raise ValueError(f"Number of frets must be non-negative. Got: {frets}")
        if len(open_values) != NUM_STRINGS:
            raise ValueError(
                f"Expected {NUM_STRINGS} open string values. Got: {len(open_values)}"
            )

        self._frets = frets
        self._open_values = tuple(open_values)
        if labels is None:
            labels = [Pitch.from_value(v).name for v in self._open_values]
        if len(labels) != NUM_STRINGS:
            raise ValueError(f"Expected {NUM_STRINGS} string labels. Got: {len(labels)}")
        mismatched = [
            (label, value)
            for label, value in zip(labels, self._open_values)
            if pitch_class_of(label) != value % 12
        ]
        if mismatched:
            raise ValueError(f"String labels do not match open values: {mismatched}")
        self._labels = tuple(labels)

        # values[string, fret] = open value + fret
        values = np.asarray(self._open_values, dtype=np.int64)[:, None] + np.arange(frets + 1)
        values.flags.writeable = False
        self._values = values

        self._grid: Tuple[Tuple[Pitch, ...], ...] = tuple(
            tuple(Pitch.from_value(int(v)) for v in row) for row in values
        )
        logger.debug("Built fretboard: %d strings x %d frets, tuning %s",
                     NUM_STRINGS, frets, self._open_values)

    @classmethod
    def from_config(cls, settings: "CompanionSettings") -> "Fretboard":
        """Build a fretboard from loaded companion settings."""
        return cls(
            frets=settings.frets,
            open_values=settings.tuning.open_values,
            labels=settings.tuning.labels,
        )

    # -------------------------------------------------------------------------
    # Shape
    # -------------------------------------------------------------------------

    @property
    def num_strings(self) -> int:
        return NUM_STRINGS

    @property
    def num_frets(self) -> int:
        return self._frets

    @property
    def string_labels(self) -> Tuple[str, ...]:
        return self._labels

    @property
    def values(self) -> np.ndarray:
        """Read-only (strings, frets + 1) array of semitone values."""
        return self._values

    @property
    def grid(self) -> Tuple[Tuple[Pitch, ...], ...]:
        return self._grid

    def open_string_value(self, string: int) -> int:
        self._check_string(string)
        return self._open_values[string]

    # -------------------------------------------------------------------------
    # Lookup
    # -------------------------------------------------------------------------

    def _check_string(self, string: int) -> None:
        if not 0 <= string < NUM_STRINGS:
            raise FretboardRangeError(
                f"String must be 0-{NUM_STRINGS - 1}. Got: {string}"
            )

    def note_at(self, string: int, fret: int) -> Pitch:
        """
        Return the pitch at a position.

        Raises:
            FretboardRangeError: If string is not 0-5 or fret is not 0..frets
        """
        self._check_string(string)
        if not 0 <= fret <= self._frets:
            raise FretboardRangeError(
                f"Fret must be 0-{self._frets}. Got: {fret}"
            )
        return self._grid[string][fret]

    def positions_of(self, name: str) -> List[Tuple[int, int]]:
        """All (string, fret) cells sounding the named pitch class."""
        strings, frets = np.nonzero(self.highlight_membership([name]))
        return [(int(s), int(f)) for s, f in zip(strings, frets)]

    # -------------------------------------------------------------------------
    # Highlighting
    # -------------------------------------------------------------------------

    def highlight_membership(self, target_names: Iterable[str]) -> np.ndarray:
        """
        Mark every cell whose pitch class matches one of the targets.

        Args:
            target_names: Note names in any spelling ("C#", "Db", "C#/Db", "c")

        Returns:
            Boolean array of shape (strings, frets + 1)

        Raises:
            UnknownNoteError: If a target name is not a note
        """
        classes = sorted({pitch_class_of(name) for name in target_names})
        return np.isin(self._values % 12, classes)

    def highlight_scale(self, scale: Scale) -> np.ndarray:
        return self.highlight_membership(scale.note_names())

    def highlight_chord(self, chord: Chord) -> np.ndarray:
        return self.highlight_membership(chord.note_names())

    def __repr__(self) -> str:
        return f"Fretboard(frets={self._frets}, open_values={self._open_values})"
