"""
Interval quality - the Perfect/Major/Minor/Augmented/Diminished classification.

Quality is a closed set of variants resolved from a StepPair by one rule:

    size_class = diatonic mod 7
    deviation  = chromatic - (REFERENCE_SPANS[size_class] + 12 * octaves)

Unisons, fourths and fifths are measured from the perfect span and can only be
perfect, augmented or diminished. Seconds, thirds, sixths and sevenths are
measured from the major span and can only be major, minor, augmented or
diminished. Nothing ever resolves to a "perfect third" or a "major fourth".
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from harmony_types.constants import (
    CHROMATIC_OCTAVE,
    DIATONIC_OCTAVE,
    PERFECT_SIZE_CLASSES,
    REFERENCE_SPANS,
    SIZE_NAMES,
)
from harmony_types.core.steps import StepPair, floor_divmod
from harmony_types.errors import InvalidQualityError


class QualityKind(str, Enum):
    """The five quality families."""

    PERFECT = "perfect"
    MAJOR = "major"
    MINOR = "minor"
    AUGMENTED = "augmented"
    DIMINISHED = "diminished"


_ABBREVIATIONS: dict[QualityKind, str] = {
    QualityKind.PERFECT: "P",
    QualityKind.MAJOR: "M",
    QualityKind.MINOR: "m",
    QualityKind.AUGMENTED: "A",
    QualityKind.DIMINISHED: "d",
}


@dataclass(frozen=True)
class Quality:
    """
    An interval quality.

    degree counts how many times an interval is augmented or diminished
    (Quality.augmented(2) is doubly augmented). It is always 1 for perfect,
    major and minor.
    """

    kind: QualityKind
    degree: int = 1

    PERFECT: ClassVar[Quality]
    MAJOR: ClassVar[Quality]
    MINOR: ClassVar[Quality]
    AUGMENTED: ClassVar[Quality]
    DIMINISHED: ClassVar[Quality]

    def __post_init__(self) -> None:
        if self.kind in (QualityKind.AUGMENTED, QualityKind.DIMINISHED):
            if self.degree < 1:
                raise ValueError(f"Degree must be >= 1, got {self.degree}")
        elif self.degree != 1:
            raise ValueError(f"{self.kind.value} quality has no degree, got {self.degree}")

    @classmethod
    def augmented(cls, degree: int = 1) -> Quality:
        return cls(QualityKind.AUGMENTED, degree)

    @classmethod
    def diminished(cls, degree: int = 1) -> Quality:
        return cls(QualityKind.DIMINISHED, degree)

    @property
    def long_name(self) -> str:
        """Name used in display, e.g. 'Major' or 'Augmented(2)'."""
        name = self.kind.value.capitalize()
        if self.degree > 1:
            return f"{name}({self.degree})"
        return name

    @property
    def abbreviation(self) -> str:
        """Short symbol: P, M, m, or A / d repeated per degree."""
        return _ABBREVIATIONS[self.kind] * self.degree

    def __str__(self) -> str:
        return self.long_name


Quality.PERFECT = Quality(QualityKind.PERFECT)
Quality.MAJOR = Quality(QualityKind.MAJOR)
Quality.MINOR = Quality(QualityKind.MINOR)
Quality.AUGMENTED = Quality(QualityKind.AUGMENTED)
Quality.DIMINISHED = Quality(QualityKind.DIMINISHED)


def has_perfect(diatonic: int) -> bool:
    """Whether an interval of this diatonic size is measured from a perfect span."""
    return diatonic % DIATONIC_OCTAVE in PERFECT_SIZE_CLASSES


def resolve_quality(steps: StepPair) -> Quality:
    """
    Resolve the quality of an interval.

    Direction does not affect quality: a descending interval is resolved from
    its ascending counterpart, so -M3 is a major third. A diatonic size of 0
    is never descending, so (0, -1) is a diminished unison.
    """
    if steps.diatonic < 0:
        steps = steps.negate()
    octaves, size_class = floor_divmod(steps.diatonic, DIATONIC_OCTAVE)
    expected = REFERENCE_SPANS[size_class] + CHROMATIC_OCTAVE * octaves
    deviation = steps.chromatic - expected

    if size_class in PERFECT_SIZE_CLASSES:
        if deviation == 0:
            return Quality.PERFECT
        if deviation > 0:
            return Quality.augmented(deviation)
        return Quality.diminished(-deviation)

    if deviation == 0:
        return Quality.MAJOR
    if deviation == -1:
        return Quality.MINOR
    if deviation > 0:
        return Quality.augmented(deviation)
    return Quality.diminished(-deviation - 1)


def quality_offset(size_class: int, quality: Quality) -> int:
    """
    Chromatic deviation of a quality from the reference span of a size class.

    The inverse of the rule in resolve_quality. Raises InvalidQualityError for
    combinations the size cannot take.
    """
    perfect = size_class in PERFECT_SIZE_CLASSES
    kind = quality.kind

    if kind == QualityKind.AUGMENTED:
        return quality.degree
    if kind == QualityKind.DIMINISHED:
        return -quality.degree if perfect else -quality.degree - 1
    if perfect and kind == QualityKind.PERFECT:
        return 0
    if not perfect and kind == QualityKind.MAJOR:
        return 0
    if not perfect and kind == QualityKind.MINOR:
        return -1

    raise InvalidQualityError(
        f"{quality.long_name}{size_class + 1}",
        f"a {SIZE_NAMES[size_class]} cannot be {kind.value}",
    )


def chromatic_span(diatonic: int, quality: Quality) -> int:
    """Chromatic steps of an ascending interval with the given diatonic size and quality."""
    if diatonic < 0:
        raise ValueError(f"Diatonic size must be >= 0, got {diatonic}")
    octaves, size_class = floor_divmod(diatonic, DIATONIC_OCTAVE)
    return (
        REFERENCE_SPANS[size_class]
        + CHROMATIC_OCTAVE * octaves
        + quality_offset(size_class, quality)
    )
