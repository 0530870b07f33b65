"""
Practice Subpackage

    - exercises.py: Random interval, chord and fretboard questions
                    plus answer checking
"""

from src.practice.exercises import (
    IntervalExercise, ChordExercise, FretboardExercise,
    generate_interval_exercises, generate_chord_exercises, generate_fretboard_exercises,
    check_note_answer, check_chord_answer, check_interval_answer,
    interval_exercises_from_config, chord_exercises_from_config, fretboard_exercises_from_config,
)
