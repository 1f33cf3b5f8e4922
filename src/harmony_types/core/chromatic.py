"""
Chromatic primitives - ChromaticPitch and ChromaticInterval.

Semitone-only counterparts of Pitch and Interval. They forget spelling:
C#4 and Db4 are the same ChromaticPitch. Useful at the edges where only sound
matters (MIDI, frequencies) and for re-spelling a sound as a Pitch.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from harmony_types.constants import (
    A4_CHROMATIC,
    A4_FREQUENCY,
    CHROMATIC_OCTAVE,
    DIATONIC_OCTAVE,
    MIDI_MIDDLE_C,
    MIDI_RANGE,
)
from harmony_types.core.pitch import Interval, Pitch
from harmony_types.core.spelling import Letter
from harmony_types.core.steps import floor_divmod

# Letter used to spell each chromatic step within an octave
_DEFAULT_LETTERS: tuple[Letter, ...] = (
    Letter.C,  # C
    Letter.C,  # C#
    Letter.D,  # D
    Letter.E,  # Eb
    Letter.E,  # E
    Letter.F,  # F
    Letter.F,  # F#
    Letter.G,  # G
    Letter.A,  # Ab
    Letter.A,  # A
    Letter.B,  # Bb
    Letter.B,  # B
)


@dataclass(frozen=True, order=True)
class ChromaticInterval:
    """A distance in semitones."""

    semitones: int = 0

    @classmethod
    def from_interval(cls, interval: Interval) -> ChromaticInterval:
        return cls(interval.chromatic)

    def reduce(self) -> ChromaticInterval:
        """Fold into 0-11 semitones."""
        return ChromaticInterval(self.semitones % CHROMATIC_OCTAVE)

    def __add__(self, other: Any) -> Any:
        if isinstance(other, ChromaticInterval):
            return ChromaticInterval(self.semitones + other.semitones)
        if isinstance(other, ChromaticPitch):
            return other + self
        return NotImplemented

    def __sub__(self, other: ChromaticInterval) -> ChromaticInterval:
        if not isinstance(other, ChromaticInterval):
            return NotImplemented
        return ChromaticInterval(self.semitones - other.semitones)

    def __neg__(self) -> ChromaticInterval:
        return ChromaticInterval(-self.semitones)

    def __mul__(self, n: int) -> ChromaticInterval:
        if not isinstance(n, int):
            return NotImplemented
        return ChromaticInterval(self.semitones * n)

    def __rmul__(self, n: int) -> ChromaticInterval:
        return self.__mul__(n)


@dataclass(frozen=True, order=True)
class ChromaticPitch:
    """A pitch as semitones from middle C."""

    steps: int = 0

    @classmethod
    def from_pitch(cls, pitch: Pitch) -> ChromaticPitch:
        return cls(pitch.chromatic)

    @classmethod
    def from_midi(cls, note: int) -> ChromaticPitch:
        """From a MIDI note number (60 = middle C)."""
        return cls(note - MIDI_MIDDLE_C)

    def to_midi(self) -> int | None:
        """MIDI note number, or None outside the MIDI range."""
        note = self.steps + MIDI_MIDDLE_C
        low, high = MIDI_RANGE
        return note if low <= note <= high else None

    def to_frequency(self, a4: float = A4_FREQUENCY) -> float:
        """Frequency in Hz, equal temperament, tuned to the given A4."""
        return a4 * 2.0 ** ((self.steps - A4_CHROMATIC) / CHROMATIC_OCTAVE)

    def reduce(self) -> ChromaticPitch:
        """Fold into the middle C octave (0-11)."""
        return ChromaticPitch(self.steps % CHROMATIC_OCTAVE)

    def to_pitch(self) -> Pitch:
        """
        Spell as a Pitch using at most one sharp or flat.

        Spelling: C C# D Eb E F F# G Ab A Bb B.
        """
        return self.to_pitch_named(_DEFAULT_LETTERS[self.steps % CHROMATIC_OCTAVE])

    def to_pitch_named(self, letter: Letter) -> Pitch:
        """
        Spell as a Pitch with the given letter.

        The octave is chosen so the accidental stays within six semitones,
        e.g. chromatic -1 named C is Cb4, not an eleven-fold sharp C3.
        """
        octaves, remainder = floor_divmod(self.steps, CHROMATIC_OCTAVE)
        shift = remainder - letter.natural_offset
        if shift > CHROMATIC_OCTAVE // 2:
            octaves += 1
        elif shift < -(CHROMATIC_OCTAVE // 2):
            octaves -= 1
        return Pitch(letter.value + DIATONIC_OCTAVE * octaves, self.steps)

    def __add__(self, other: ChromaticInterval) -> ChromaticPitch:
        if not isinstance(other, ChromaticInterval):
            return NotImplemented
        return ChromaticPitch(self.steps + other.semitones)

    def __sub__(self, other: Any) -> Any:
        if isinstance(other, ChromaticPitch):
            return ChromaticInterval(self.steps - other.steps)
        if isinstance(other, ChromaticInterval):
            return ChromaticPitch(self.steps - other.semitones)
        return NotImplemented
