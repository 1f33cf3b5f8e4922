"""
Pitch primitives - Pitch and Interval.

Both are StepPairs with a meaning attached:
Pitch is a displacement from middle C (C4).
Interval is a displacement between two pitches.

Arithmetic follows from that: pitch + interval is a pitch, pitch - pitch is an
interval, intervals form a group under + and unary -. Adding two pitches is
meaningless and raises TypeError.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering
from typing import Any, ClassVar

from harmony_types.constants import (
    A4_CHROMATIC,
    A4_FREQUENCY,
    CHROMATIC_OCTAVE,
    DEFAULT_OCTAVE,
    DIATONIC_OCTAVE,
    MIDI_MIDDLE_C,
    REFERENCE_OCTAVE,
)
from harmony_types.core.parse import parse_interval, parse_pitch
from harmony_types.core.quality import Quality, chromatic_span, resolve_quality
from harmony_types.core.spelling import Accidental, Letter
from harmony_types.core.steps import StepPair, floor_divmod
from harmony_types.errors import InvalidSizeError


@dataclass(frozen=True, order=True)
class Pitch:
    """
    A pitch as (diatonic, chromatic) steps from middle C.

    Spelling is part of the value: C#4 is (0, 1) and Db4 is (1, 1), two
    different pitches that happen to sound the same.

    Ordering compares diatonic steps before chromatic steps, so E#4 < Fb4 even
    though E#4 sounds higher. Sort with key=Pitch.chromatic_key to order by
    sound instead.

    Immutable and hashable.
    """

    diatonic: int = 0
    chromatic: int = 0

    @classmethod
    def from_steps(cls, steps: StepPair) -> Pitch:
        return cls(steps.diatonic, steps.chromatic)

    @classmethod
    def compose(cls, letter: Letter, accidental: Accidental | int = 0, octave: int = DEFAULT_OCTAVE) -> Pitch:
        """
        Build a pitch from its name in scientific pitch notation.

        Args:
            letter: The letter name
            accidental: Accidental, or a signed count (positive = sharps)
            octave: Octave number, 4 being the octave starting at middle C
        """
        count = accidental.count if isinstance(accidental, Accidental) else accidental
        shift = octave - REFERENCE_OCTAVE
        return cls(
            diatonic=letter.value + DIATONIC_OCTAVE * shift,
            chromatic=letter.natural_offset + count + CHROMATIC_OCTAVE * shift,
        )

    @classmethod
    def from_pitch_class(cls, letter: Letter, accidental: Accidental | int = 0) -> Pitch:
        """Pitch in the middle C octave."""
        return cls.compose(letter, accidental, REFERENCE_OCTAVE)

    @classmethod
    def parse(cls, name: str, default_octave: int = DEFAULT_OCTAVE) -> Pitch:
        """
        Parse a pitch name like 'C4', 'F#3', 'Bbb5', 'C####4' or 'G-1'.

        The octave defaults to 4 when omitted.
        """
        letter, accidental, octave = parse_pitch(name, default_octave)
        return cls.compose(letter, accidental, octave)

    @property
    def steps(self) -> StepPair:
        return StepPair(self.diatonic, self.chromatic)

    def decompose(self) -> tuple[Letter, Accidental, int]:
        """Split into (letter, accidental, octave) in scientific pitch notation."""
        octaves, index = floor_divmod(self.diatonic, DIATONIC_OCTAVE)
        letter = Letter(index)
        natural = letter.natural_offset + CHROMATIC_OCTAVE * octaves
        return letter, Accidental(self.chromatic - natural), octaves + REFERENCE_OCTAVE

    @property
    def letter(self) -> Letter:
        return Letter.from_diatonic(self.diatonic)

    @property
    def accidental(self) -> Accidental:
        return self.decompose()[1]

    @property
    def octave(self) -> int:
        return self.diatonic // DIATONIC_OCTAVE + REFERENCE_OCTAVE

    @property
    def staff_position(self) -> int:
        """Staff position with middle C at 0."""
        return self.diatonic

    @property
    def midi_number(self) -> int:
        """MIDI note number (C4 = 60). May fall outside 0-127."""
        return self.chromatic + MIDI_MIDDLE_C

    def to_frequency(self, a4: float = A4_FREQUENCY) -> float:
        """Frequency in Hz, equal temperament, tuned to the given A4."""
        return a4 * 2.0 ** ((self.chromatic - A4_CHROMATIC) / CHROMATIC_OCTAVE)

    def chromatic_key(self) -> tuple[int, int]:
        """Sort key comparing chromatic steps first."""
        return (self.chromatic, self.diatonic)

    def transpose(self, interval: Interval) -> Pitch:
        """Move this pitch by an interval."""
        return transpose(self, interval)

    def interval_to(self, other: Pitch) -> Interval:
        """Interval from this pitch up (or down) to another."""
        return distance(self, other)

    def octave_reduce(self) -> Pitch:
        """Same letter and accidental, moved into octave 4 (F6 -> F4)."""
        return Pitch.from_steps(self.steps.octave_reduce())

    def chromatic_reduce(self) -> Pitch:
        """Moved by whole octaves so the chromatic steps fall in 0-11."""
        return Pitch.from_steps(self.steps.chromatic_reduce())

    def spell(self, unicode: bool = False) -> str:
        """
        Name of the pitch: letter, accidental, octave.

        The naming rule is total: letter = diatonic mod 7,
        octave = floor(diatonic / 7) + 4 and the accidental is whatever is left
        of the chromatic steps, written as that many sharps or flats.
        """
        letter, accidental, octave = self.decompose()
        marks = accidental.to_unicode() if unicode else accidental.to_ascii()
        return f"{letter.name}{marks}{octave}"

    def __add__(self, other: Interval) -> Pitch:
        if not isinstance(other, Interval):
            return NotImplemented
        return transpose(self, other)

    def __sub__(self, other: Pitch | Interval) -> Interval | Pitch:
        if isinstance(other, Pitch):
            return distance(other, self)
        if isinstance(other, Interval):
            return transpose(self, -other)
        return NotImplemented

    def __str__(self) -> str:
        return self.spell()

    def __repr__(self) -> str:
        return f"Pitch({self.spell()})"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return self.steps.to_dict()

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> Pitch:
        """Create from dictionary."""
        return cls.from_steps(StepPair.from_dict(d))


@total_ordering
@dataclass(frozen=True)
class Interval:
    """
    An interval as (diatonic, chromatic) steps.

    A major third is (2, 4): two staff positions, four semitones. The sign of
    both coordinates gives the direction; quality is resolved from the pair
    (see resolve_quality) and never stored.

    Intervals sort by size in semitones, then by staff steps, so a diminished
    fourth (3, 4) sorts below an augmented third (2, 5).

    Immutable and hashable.
    """

    diatonic: int = 0
    chromatic: int = 0

    # Named intervals (class constants)
    UNISON: ClassVar[Interval]
    MINOR_SECOND: ClassVar[Interval]
    MAJOR_SECOND: ClassVar[Interval]
    MINOR_THIRD: ClassVar[Interval]
    MAJOR_THIRD: ClassVar[Interval]
    PERFECT_FOURTH: ClassVar[Interval]
    AUGMENTED_FOURTH: ClassVar[Interval]
    DIMINISHED_FIFTH: ClassVar[Interval]
    PERFECT_FIFTH: ClassVar[Interval]
    MINOR_SIXTH: ClassVar[Interval]
    MAJOR_SIXTH: ClassVar[Interval]
    MINOR_SEVENTH: ClassVar[Interval]
    MAJOR_SEVENTH: ClassVar[Interval]
    OCTAVE: ClassVar[Interval]

    # Short aliases
    P1: ClassVar[Interval]
    m2: ClassVar[Interval]
    M2: ClassVar[Interval]
    m3: ClassVar[Interval]
    M3: ClassVar[Interval]
    P4: ClassVar[Interval]
    A4: ClassVar[Interval]
    d5: ClassVar[Interval]
    P5: ClassVar[Interval]
    m6: ClassVar[Interval]
    M6: ClassVar[Interval]
    m7: ClassVar[Interval]
    M7: ClassVar[Interval]
    P8: ClassVar[Interval]

    @classmethod
    def from_steps(cls, steps: StepPair) -> Interval:
        return cls(steps.diatonic, steps.chromatic)

    @classmethod
    def compose(
        cls,
        size_class: int,
        quality: Quality,
        descending: bool = False,
        octaves: int = 0,
    ) -> Interval:
        """
        Build an interval from its named parts.

        Args:
            size_class: 0 (unison) to 6 (seventh)
            quality: Must suit the size (no perfect thirds, no major fifths)
            descending: Point the interval downwards
            octaves: Whole octaves added on top (compound intervals)
        """
        if not 0 <= size_class < DIATONIC_OCTAVE:
            raise InvalidSizeError(str(size_class), "size class must be 0-6")
        if octaves < 0:
            raise InvalidSizeError(str(octaves), "octave count must be >= 0")
        diatonic = size_class + DIATONIC_OCTAVE * octaves
        interval = cls(diatonic, chromatic_span(diatonic, quality))
        return -interval if descending else interval

    @classmethod
    def from_number(cls, number: int, quality: Quality) -> Interval:
        """
        Build from a conventional 1-indexed number: 3 is a third, 10 a tenth.

        Negative numbers give descending intervals.
        """
        if number == 0:
            raise InvalidSizeError("0", "interval numbers start at 1")
        octaves, size_class = floor_divmod(abs(number) - 1, DIATONIC_OCTAVE)
        return cls.compose(size_class, quality, descending=number < 0, octaves=octaves)

    @classmethod
    def parse(cls, name: str) -> Interval:
        """Parse an interval name like 'Major3', 'Perfect5', '-m3' or 'M3+1oct'."""
        return cls.from_steps(parse_interval(name))

    @property
    def steps(self) -> StepPair:
        return StepPair(self.diatonic, self.chromatic)

    @property
    def is_descending(self) -> bool:
        """Diminished unisons point down chromatically but are not descending."""
        return self.diatonic < 0

    @property
    def size_class(self) -> int:
        """0 (unison) to 6 (seventh), ignoring octaves and direction."""
        return abs(self.diatonic) % DIATONIC_OCTAVE

    @property
    def octaves(self) -> int:
        """Whole octaves spanned, ignoring direction."""
        return abs(self.diatonic) // DIATONIC_OCTAVE

    @property
    def number(self) -> int:
        """Conventional 1-indexed number, negative when descending (-3 for a third down)."""
        size = abs(self.diatonic) + 1
        return -size if self.is_descending else size

    @property
    def quality(self) -> Quality:
        return resolve_quality(self.steps)

    @property
    def semitones(self) -> int:
        return self.chromatic

    def invert(self) -> Interval:
        """Flip the direction. Not the music-theory inversion; see complement."""
        return -self

    def complement(self) -> Interval:
        """
        Invert the interval within an octave.

        M3 -> m6
        P5 -> P4
        P1 -> P8
        """
        return Interval.OCTAVE - self.octave_reduce()

    def octave_reduce(self) -> Interval:
        """
        Fold into an ascending interval smaller than an octave.

        m13 -> m6
        -m3 -> M6
        """
        return Interval.from_steps(self.steps.octave_reduce())

    def chromatic_reduce(self) -> Interval:
        return Interval.from_steps(self.steps.chromatic_reduce())

    def short_name(self) -> str:
        """Abbreviated name like 'M3', 'P5' or '-m10'."""
        sign = "-" if self.is_descending else ""
        return f"{sign}{self.quality.abbreviation}{abs(self.number)}"

    def __add__(self, other: Any) -> Any:
        if isinstance(other, Interval):
            return Interval.from_steps(self.steps + other.steps)
        if isinstance(other, Pitch):
            return transpose(other, self)
        return NotImplemented

    def __sub__(self, other: Interval) -> Interval:
        if not isinstance(other, Interval):
            return NotImplemented
        return Interval.from_steps(self.steps - other.steps)

    def __neg__(self) -> Interval:
        return Interval.from_steps(-self.steps)

    def __mul__(self, n: int) -> Interval:
        """Multiply an interval (e.g., two octaves)."""
        if not isinstance(n, int):
            return NotImplemented
        return Interval.from_steps(self.steps * n)

    def __rmul__(self, n: int) -> Interval:
        return self.__mul__(n)

    def __str__(self) -> str:
        """Display name like 'Major3', 'Augmented(2)4' or '-Minor10'."""
        sign = "-" if self.is_descending else ""
        return f"{sign}{self.quality.long_name}{abs(self.number)}"

    def __repr__(self) -> str:
        return f"Interval({self})"

    def __lt__(self, other: Interval) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return (self.chromatic, self.diatonic) < (other.chromatic, other.diatonic)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return self.steps.to_dict()

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> Interval:
        """Create from dictionary."""
        return cls.from_steps(StepPair.from_dict(d))


def transpose(pitch: Pitch, interval: Interval) -> Pitch:
    """Pitch reached by moving pitch by interval."""
    return Pitch.from_steps(pitch.steps + interval.steps)


def distance(start: Pitch, end: Pitch) -> Interval:
    """Interval from start to end; ascending when end is higher."""
    return Interval.from_steps(end.steps - start.steps)


# Initialize class constants after class is defined
Interval.UNISON = Interval(0, 0)
Interval.MINOR_SECOND = Interval(1, 1)
Interval.MAJOR_SECOND = Interval(1, 2)
Interval.MINOR_THIRD = Interval(2, 3)
Interval.MAJOR_THIRD = Interval(2, 4)
Interval.PERFECT_FOURTH = Interval(3, 5)
Interval.AUGMENTED_FOURTH = Interval(3, 6)
Interval.DIMINISHED_FIFTH = Interval(4, 6)
Interval.PERFECT_FIFTH = Interval(4, 7)
Interval.MINOR_SIXTH = Interval(5, 8)
Interval.MAJOR_SIXTH = Interval(5, 9)
Interval.MINOR_SEVENTH = Interval(6, 10)
Interval.MAJOR_SEVENTH = Interval(6, 11)
Interval.OCTAVE = Interval(7, 12)

# Short aliases
Interval.P1 = Interval.UNISON
Interval.m2 = Interval.MINOR_SECOND
Interval.M2 = Interval.MAJOR_SECOND
Interval.m3 = Interval.MINOR_THIRD
Interval.M3 = Interval.MAJOR_THIRD
Interval.P4 = Interval.PERFECT_FOURTH
Interval.A4 = Interval.AUGMENTED_FOURTH
Interval.d5 = Interval.DIMINISHED_FIFTH
Interval.P5 = Interval.PERFECT_FIFTH
Interval.m6 = Interval.MINOR_SIXTH
Interval.M6 = Interval.MAJOR_SIXTH
Interval.m7 = Interval.MINOR_SEVENTH
Interval.M7 = Interval.MAJOR_SEVENTH
Interval.P8 = Interval.OCTAVE
