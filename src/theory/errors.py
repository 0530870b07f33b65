"""
Errors raised by the theory package.

Each error subclasses the builtin a caller would expect to catch
(``ValueError`` for bad symbols, ``IndexError`` for bad positions), so
callers that only know the builtins still handle them.
"""


class UnknownNoteError(ValueError):
    """A note name did not match any of the 12 pitch classes."""


class UnknownNumeralError(ValueError):
    """A roman numeral was not one of I..VII (in either case)."""


class ScaleDegreeError(IndexError):
    """A scale degree points past the end of the scale's notes."""


class FretboardRangeError(IndexError):
    """A (string, fret) position lies outside the fretboard grid."""
