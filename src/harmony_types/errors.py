"""
Parse errors.

All failures in this package come from turning text (or named components)
into values. Construction from raw integers never fails.
"""

from __future__ import annotations


class ParseError(ValueError):
    """Base class for everything the pitch and interval parsers reject."""

    def __init__(self, text: str, reason: str) -> None:
        self.text = text
        self.reason = reason
        super().__init__(f"{reason}: {text!r}")


class InvalidLetterError(ParseError):
    """The pitch letter is not one of C D E F G A B."""


class InvalidAccidentalError(ParseError):
    """The accidental could not be read."""


class InvalidOctaveError(ParseError):
    """The octave is not a signed integer."""


class InvalidQualityError(ParseError):
    """Unknown quality, or a quality the interval size cannot have (major fifth)."""


class InvalidSizeError(ParseError):
    """The interval numeral does not name a diatonic size."""


class IncompleteError(ParseError):
    """A required token (letter, numeral) is missing."""
