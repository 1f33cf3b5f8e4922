"""
Spelling primitives - Letter and Accidental.

A pitch name is a letter plus an accidental plus an octave. The letter fixes
the diatonic position, the accidental shifts the chromatic position away from
the letter's natural one.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import IntEnum

from harmony_types.constants import (
    ACCIDENTAL_MARKS,
    DOUBLE_FLAT,
    FLAT,
    LETTER_NAMES,
    NATURAL_MARKS,
    NATURAL_OFFSETS,
    SHARP,
    UNICODE_DOUBLE_FLAT,
    UNICODE_DOUBLE_SHARP,
    UNICODE_FLAT,
    UNICODE_NATURAL,
    UNICODE_SHARP,
)
from harmony_types.errors import InvalidAccidentalError, InvalidLetterError

_COUNTED_ACCIDENTAL = re.compile(r"\(([0-9]+)([#b])\)")


class Letter(IntEnum):
    """
    The seven letter names, valued by diatonic index (C = 0).

    Ordered C D E F G A B, i.e. in staff order starting from C.
    """

    C = 0
    D = 1
    E = 2
    F = 3
    G = 4
    A = 5
    B = 6

    @property
    def natural_offset(self) -> int:
        """Semitones from C up to the natural form of this letter."""
        return NATURAL_OFFSETS[self.value]

    @classmethod
    def from_diatonic(cls, diatonic: int) -> Letter:
        """Letter of a diatonic step count from C (mod 7, never negative)."""
        return cls(diatonic % len(LETTER_NAMES))

    @classmethod
    def parse(cls, name: str) -> Letter:
        """Parse an uppercase letter name."""
        if name in LETTER_NAMES:
            return cls(LETTER_NAMES.index(name))
        raise InvalidLetterError(name, "not a pitch letter")

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, order=True)
class Accidental:
    """
    A chromatic shift from a letter's natural pitch.

    Positive counts are sharps, negative counts flats, 0 is natural.
    Any count is allowed.
    """

    count: int = 0

    @property
    def is_natural(self) -> bool:
        return self.count == 0

    def to_ascii(self) -> str:
        """Repeated '#' or 'b'; natural is the empty string."""
        if self.count >= 0:
            return SHARP * self.count
        return FLAT * -self.count

    def to_unicode(self) -> str:
        """
        Unicode glyphs.

        Double sharp and double flat get their own glyphs; everything else is
        repeated single sharps or flats. Natural is the empty string.
        """
        if self.count == 2:
            return UNICODE_DOUBLE_SHARP
        if self.count == -2:
            return UNICODE_DOUBLE_FLAT
        if self.count >= 0:
            return UNICODE_SHARP * self.count
        return UNICODE_FLAT * -self.count

    def __str__(self) -> str:
        return self.to_ascii()

    @classmethod
    def parse(cls, text: str) -> Accidental:
        """
        Parse an accidental.

        Accepts '' or 'n'/'♮' for natural, stacked sharps ('#', '♯', 'x', '𝄪')
        or stacked flats ('b', '♭', '&', '𝄫'), and the counted forms
        '(3#)' / '(3b)'.
        Sharps and flats cannot be mixed.
        """
        if text == "" or text in NATURAL_MARKS:
            return cls(0)

        if text.startswith("("):
            match = _COUNTED_ACCIDENTAL.fullmatch(text)
            if match is None:
                raise InvalidAccidentalError(text, "malformed counted accidental")
            count = int(match.group(1))
            return cls(count if match.group(2) == SHARP else -count)

        total = 0
        for mark in text:
            shift = ACCIDENTAL_MARKS.get(mark)
            if shift is None:
                raise InvalidAccidentalError(text, f"unknown accidental mark {mark!r}")
            if total and (shift > 0) != (total > 0):
                raise InvalidAccidentalError(text, "sharps and flats cannot be mixed")
            total += shift
        return cls(total)


# Characters that can only open an accidental, never a letter
ACCIDENTAL_LEADS: frozenset[str] = frozenset(
    {
        SHARP,
        DOUBLE_FLAT,
        UNICODE_SHARP,
        UNICODE_FLAT,
        UNICODE_NATURAL,
        UNICODE_DOUBLE_SHARP,
        UNICODE_DOUBLE_FLAT,
        "(",
    }
)
