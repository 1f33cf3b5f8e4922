"""
Constants and naming-rule tables for pitches and intervals.

No magic numbers - the letter offsets and quality spans live here and
everything else looks them up.
"""

from typing import Literal

# Steps per octave on each axis
DIATONIC_OCTAVE = 7
CHROMATIC_OCTAVE = 12

# Middle C is the reference pitch (scientific pitch notation C4)
REFERENCE_OCTAVE = 4
DEFAULT_OCTAVE = REFERENCE_OCTAVE

# MIDI note number of middle C
MIDI_MIDDLE_C = 60
MIDI_RANGE = (0, 127)

# Tuning reference (A4)
A4_FREQUENCY = 440.0
A4_CHROMATIC = 9

# Letter names in diatonic order, C first
LETTER_NAMES: tuple[str, ...] = ("C", "D", "E", "F", "G", "A", "B")

# Semitones from C to each natural letter (indexed by diatonic index)
NATURAL_OFFSETS: tuple[int, ...] = (0, 2, 4, 5, 7, 9, 11)

# Expected chromatic span per size class: perfect for 0, 3, 4 and major for 1, 2, 5, 6.
# Numerically the C major scale, since every degree of it lies a perfect or major
# interval above the tonic.
REFERENCE_SPANS: tuple[int, ...] = (0, 2, 4, 5, 7, 9, 11)

PERFECT_SIZE_CLASSES: frozenset[int] = frozenset({0, 3, 4})
IMPERFECT_SIZE_CLASSES: frozenset[int] = frozenset({1, 2, 5, 6})

# Size class names (0-indexed)
SIZE_NAMES: tuple[str, ...] = (
    "unison",
    "second",
    "third",
    "fourth",
    "fifth",
    "sixth",
    "seventh",
)

# Accidental glyphs
SHARP = "#"
FLAT = "b"
DOUBLE_SHARP = "x"
DOUBLE_FLAT = "&"
NATURAL = "n"
UNICODE_SHARP = "♯"
UNICODE_FLAT = "♭"
UNICODE_NATURAL = "♮"
UNICODE_DOUBLE_SHARP = "\U0001d12a"
UNICODE_DOUBLE_FLAT = "\U0001d12b"

# Single marks and the chromatic shift each contributes
ACCIDENTAL_MARKS: dict[str, int] = {
    SHARP: 1,
    UNICODE_SHARP: 1,
    FLAT: -1,
    UNICODE_FLAT: -1,
    DOUBLE_SHARP: 2,
    UNICODE_DOUBLE_SHARP: 2,
    DOUBLE_FLAT: -2,
    UNICODE_DOUBLE_FLAT: -2,
}
NATURAL_MARKS: frozenset[str] = frozenset({NATURAL, UNICODE_NATURAL})

# Interval octave suffix, e.g. "M3+1oct"
OCTAVE_SUFFIX = "oct"

# Schema versions - frozen for v1
SchemaVersion = Literal["harmony/v1"]
SCHEMA_VERSION: SchemaVersion = "harmony/v1"
