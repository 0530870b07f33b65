"""
Exercises Module - Question Generation and Answer Checking

This module holds the data side of the training exercises: picking
random questions and judging answers. Prompting and printing belong to
whatever front end drives the exercises.

Every generator takes a ``random.Random`` so a seeded run always asks
the same questions:

    rng = random.Random(42)
    for exercise in generate_interval_exercises(rng, count=5):
        print(exercise.start, "to", exercise.end)

Author: Rohan Rajendra Dhanawade
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional, TYPE_CHECKING
import random

from src.theory.chords import CHORD_QUALITIES, Chord, build_chord_by_quality
from src.theory.errors import UnknownNoteError
from src.theory.fretboard import Fretboard, NUM_STRINGS
from src.theory.intervals import interval_name
from src.theory.notes import DEFAULT_BASE_VALUE, Pitch, pitch_class_of

if TYPE_CHECKING:
    from src.config.settings import CompanionSettings


# =============================================================================
# CONSTANTS
# =============================================================================

# Fretboard questions stay in the first position (frets 0-11)
FRETBOARD_EXERCISE_FRETS = 12

MAX_INTERVAL = 12


# =============================================================================
# EXERCISE DATA CLASSES
# =============================================================================

@dataclass(frozen=True)
class IntervalExercise:
    """Two pitches and the name of the interval between them."""
    start: Pitch
    end: Pitch
    semitones: int
    answer: str


@dataclass(frozen=True)
class ChordExercise:
    """
    A chord to recognise or construct.

    Attributes:
        chord: The chord in question
        quality: Spoken quality (e.g., "Dominant 7")
    """
    chord: Chord
    quality: str

    @property
    def answer(self) -> str:
        return f"{self.chord.root.name} {self.quality}"


@dataclass(frozen=True)
class FretboardExercise:
    """A fretboard position whose note must be named."""
    string: int
    fret: int
    pitch: Pitch

    @property
    def string_number(self) -> int:
        """String number counting from the lowest E (1 = low E)."""
        return NUM_STRINGS - self.string


# =============================================================================
# GENERATORS
# =============================================================================

def random_root(rng: random.Random, base: int = DEFAULT_BASE_VALUE) -> Pitch:
    """Pick a random pitch in the octave starting at ``base``."""
    return Pitch.from_value(base + rng.randrange(12))


def make_interval_exercise(rng: random.Random, base: int = DEFAULT_BASE_VALUE) -> IntervalExercise:
    start = random_root(rng, base)
    semitones = rng.randint(1, MAX_INTERVAL)
    return IntervalExercise(
        start=start,
        end=start.transpose(semitones),
        semitones=semitones,
        answer=interval_name(semitones),
    )


def make_chord_exercise(rng: random.Random, base: int = DEFAULT_BASE_VALUE) -> ChordExercise:
    root = random_root(rng, base)
    quality = rng.choice(list(CHORD_QUALITIES))
    return ChordExercise(chord=build_chord_by_quality(quality, root), quality=quality)


def make_fretboard_exercise(rng: random.Random, fretboard: Fretboard) -> FretboardExercise:
    highest = min(FRETBOARD_EXERCISE_FRETS, fretboard.num_frets + 1)
    string = rng.randrange(NUM_STRINGS)
    fret = rng.randrange(highest)
    return FretboardExercise(string=string, fret=fret, pitch=fretboard.note_at(string, fret))


def generate_interval_exercises(
    rng: random.Random,
    count: int = 5,
    base: int = DEFAULT_BASE_VALUE
) -> List[IntervalExercise]:
    return [make_interval_exercise(rng, base) for _ in range(count)]


def generate_chord_exercises(
    rng: random.Random,
    count: int = 5,
    base: int = DEFAULT_BASE_VALUE
) -> List[ChordExercise]:
    return [make_chord_exercise(rng, base) for _ in range(count)]


def generate_fretboard_exercises(
    rng: random.Random,
    fretboard: Fretboard,
    count: int = 5
) -> List[FretboardExercise]:
    return [make_fretboard_exercise(rng, fretboard) for _ in range(count)]


def interval_exercises_from_config(
    settings: "CompanionSettings",
    rng: random.Random
) -> List[IntervalExercise]:
    """One round of interval questions, sized and pitched by the settings."""
    return generate_interval_exercises(rng, settings.exercise_rounds, settings.root_base)


def chord_exercises_from_config(
    settings: "CompanionSettings",
    rng: random.Random
) -> List[ChordExercise]:
    return generate_chord_exercises(rng, settings.exercise_rounds, settings.root_base)


def fretboard_exercises_from_config(
    settings: "CompanionSettings",
    rng: random.Random,
    fretboard: Optional[Fretboard] = None
) -> List[FretboardExercise]:
    """One round of fretboard questions on the configured (or given) fretboard."""
    if fretboard is None:
        fretboard = Fretboard.from_config(settings)
    return generate_fretboard_exercises(rng, fretboard, settings.exercise_rounds)


# =============================================================================
# ANSWER CHECKING
# =============================================================================

def check_note_answer(answer: str, expected: Pitch) -> bool:
    """
    Judge a typed note name against the expected pitch.

    Any spelling of the right pitch class counts ("C#", "db", "C#/Db").
    Text that is not a note at all is just a wrong answer.
    """
    try:
        return pitch_class_of(answer) == expected.pitch_class
    except UnknownNoteError:
        return False


def check_chord_answer(answer_names: Iterable[str], chord: Chord) -> bool:
    """
    Judge a set of typed note names against a chord's notes.

    Order and octave do not matter; the answer must contain exactly
    the chord's pitch classes.
    """
    try:
        given = {pitch_class_of(name) for name in answer_names}
    except UnknownNoteError:
        return False
    return given == {note.pitch_class for note in chord.get_notes()}


def check_interval_answer(answer: str, exercise: IntervalExercise) -> bool:
    """Case-insensitive match against the interval name."""
    return answer.strip().lower() == exercise.answer.lower()
