"""
StepPair - the two-axis coordinate everything else is built on.

A displacement measured at once in staff positions (diatonic steps) and in
semitones (chromatic steps). The two numbers are independent: C to C# is
(0, 1), C to Db is (1, 1), and a quadruply sharp B is just as representable
as a plain one.

No reduction happens here. Octave folding is something the pitch and interval
types ask for explicitly.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

from harmony_types.constants import CHROMATIC_OCTAVE, DIATONIC_OCTAVE


def floor_divmod(x: int, y: int) -> tuple[int, int]:
    """
    Return (q, r) such that q * y + r == x and 0 <= r < y.

    Only defined for a positive divisor.
    """
    if y <= 0:
        raise ValueError(f"Divisor must be positive, got {y}")
    return divmod(x, y)


@dataclass(frozen=True, order=True)
class StepPair:
    """
    A (diatonic, chromatic) displacement.

    Ordered lexicographically: diatonic first, then chromatic.
    Immutable and hashable.
    """

    diatonic: int
    chromatic: int

    ZERO: ClassVar[StepPair]

    def add(self, other: StepPair) -> StepPair:
        """Componentwise sum."""
        return StepPair(self.diatonic + other.diatonic, self.chromatic + other.chromatic)

    def negate(self) -> StepPair:
        """Flip the sign of both coordinates."""
        return StepPair(-self.diatonic, -self.chromatic)

    def subtract(self, other: StepPair) -> StepPair:
        return self.add(other.negate())

    def scale(self, n: int) -> StepPair:
        """Multiply both coordinates by an integer (repeated transposition)."""
        return StepPair(self.diatonic * n, self.chromatic * n)

    def octave_reduce(self) -> StepPair:
        """
        Fold the diatonic coordinate into 0-6.

        The chromatic coordinate moves by 12 for every 7 diatonic steps removed.
        """
        octaves, diatonic = floor_divmod(self.diatonic, DIATONIC_OCTAVE)
        return StepPair(diatonic, self.chromatic - octaves * CHROMATIC_OCTAVE)

    def chromatic_reduce(self) -> StepPair:
        """Fold the chromatic coordinate into 0-11, moving diatonic by whole octaves."""
        octaves, chromatic = floor_divmod(self.chromatic, CHROMATIC_OCTAVE)
        return StepPair(self.diatonic - octaves * DIATONIC_OCTAVE, chromatic)

    def __add__(self, other: StepPair) -> StepPair:
        if not isinstance(other, StepPair):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: StepPair) -> StepPair:
        if not isinstance(other, StepPair):
            return NotImplemented
        return self.subtract(other)

    def __neg__(self) -> StepPair:
        return self.negate()

    def __mul__(self, n: int) -> StepPair:
        if not isinstance(n, int):
            return NotImplemented
        return self.scale(n)

    def __rmul__(self, n: int) -> StepPair:
        return self.__mul__(n)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {"diatonic": self.diatonic, "chromatic": self.chromatic}

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> StepPair:
        """Create from dictionary."""
        return cls(diatonic=d["diatonic"], chromatic=d["chromatic"])


StepPair.ZERO = StepPair(0, 0)
