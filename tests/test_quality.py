"""
Tests for interval quality resolution.

Tests cover:
- Quality construction and names
- Resolution of every quality family
- The perfect / major-minor asymmetry
- The inverse mapping used when building intervals
"""

import pytest

from harmony_types.core import (
    Quality,
    QualityKind,
    StepPair,
    chromatic_span,
    has_perfect,
    quality_offset,
    resolve_quality,
)
from harmony_types.errors import InvalidQualityError

PERFECT_FAMILY = {QualityKind.PERFECT, QualityKind.AUGMENTED, QualityKind.DIMINISHED}
IMPERFECT_FAMILY = {
    QualityKind.MAJOR,
    QualityKind.MINOR,
    QualityKind.AUGMENTED,
    QualityKind.DIMINISHED,
}


class TestQuality:
    """Tests for the Quality value."""

    def test_constants(self) -> None:
        """Named constants have degree 1."""
        assert Quality.PERFECT.kind == QualityKind.PERFECT
        assert Quality.AUGMENTED == Quality.augmented(1)
        assert Quality.DIMINISHED.degree == 1

    def test_degree_validation(self) -> None:
        """Degree must be >= 1 for augmented/diminished and 1 otherwise."""
        with pytest.raises(ValueError):
            Quality.augmented(0)
        with pytest.raises(ValueError):
            Quality(QualityKind.MAJOR, 2)

    def test_long_name(self) -> None:
        """Long names capitalize and add the degree when above 1."""
        assert Quality.MAJOR.long_name == "Major"
        assert Quality.diminished(1).long_name == "Diminished"
        assert Quality.augmented(3).long_name == "Augmented(3)"
        assert str(Quality.PERFECT) == "Perfect"

    def test_abbreviation(self) -> None:
        """Abbreviations repeat A and d per degree."""
        assert Quality.PERFECT.abbreviation == "P"
        assert Quality.MAJOR.abbreviation == "M"
        assert Quality.MINOR.abbreviation == "m"
        assert Quality.augmented(2).abbreviation == "AA"
        assert Quality.diminished(3).abbreviation == "ddd"


class TestResolveQuality:
    """Tests for resolve_quality."""

    @pytest.mark.parametrize(
        "steps,expected",
        [
            (StepPair(0, 0), Quality.PERFECT),
            (StepPair(0, 1), Quality.AUGMENTED),
            (StepPair(0, -1), Quality.DIMINISHED),
            (StepPair(3, 5), Quality.PERFECT),
            (StepPair(3, 6), Quality.AUGMENTED),
            (StepPair(4, 6), Quality.DIMINISHED),
            (StepPair(4, 4), Quality.diminished(3)),
            (StepPair(7, 12), Quality.PERFECT),
            (StepPair(1, 1), Quality.MINOR),
            (StepPair(1, 2), Quality.MAJOR),
            (StepPair(2, 2), Quality.DIMINISHED),
            (StepPair(2, 1), Quality.diminished(2)),
            (StepPair(2, 5), Quality.AUGMENTED),
            (StepPair(2, 6), Quality.augmented(2)),
            (StepPair(6, 9), Quality.DIMINISHED),
            (StepPair(9, 15), Quality.MINOR),
        ],
    )
    def test_resolves(self, steps: StepPair, expected: Quality) -> None:
        """Each size/deviation combination maps to its quality."""
        assert resolve_quality(steps) == expected

    def test_descending_uses_ascending_quality(self) -> None:
        """A descending major third is a major third."""
        assert resolve_quality(StepPair(-2, -4)) == Quality.MAJOR
        assert resolve_quality(StepPair(-4, -7)) == Quality.PERFECT
        assert resolve_quality(StepPair(-1, -1)) == Quality.MINOR

    def test_asymmetry(self) -> None:
        """Perfect sizes never resolve to major/minor, the rest never to perfect."""
        for diatonic in range(-21, 22):
            for chromatic in range(-40, 41):
                kind = resolve_quality(StepPair(diatonic, chromatic)).kind
                if diatonic % 7 in (0, 3, 4):
                    assert kind in PERFECT_FAMILY, (diatonic, chromatic)
                else:
                    assert kind in IMPERFECT_FAMILY, (diatonic, chromatic)

    def test_has_perfect(self) -> None:
        """Unisons, fourths, fifths and their compounds are perfect sizes."""
        assert [d for d in range(14) if has_perfect(d)] == [0, 3, 4, 7, 10, 11]
        assert has_perfect(-3)
        assert not has_perfect(-2)


class TestQualityOffset:
    """Tests for the inverse mapping."""

    def test_perfect_sizes(self) -> None:
        """Perfect sizes count from the perfect span."""
        assert quality_offset(4, Quality.PERFECT) == 0
        assert quality_offset(4, Quality.augmented(2)) == 2
        assert quality_offset(4, Quality.DIMINISHED) == -1

    def test_imperfect_sizes(self) -> None:
        """Other sizes count from the major span; diminished is below minor."""
        assert quality_offset(2, Quality.MAJOR) == 0
        assert quality_offset(2, Quality.MINOR) == -1
        assert quality_offset(2, Quality.DIMINISHED) == -2
        assert quality_offset(2, Quality.AUGMENTED) == 1

    @pytest.mark.parametrize(
        "size_class,quality",
        [
            (2, Quality.PERFECT),
            (4, Quality.MAJOR),
            (3, Quality.MINOR),
            (0, Quality.MINOR),
            (6, Quality.PERFECT),
        ],
    )
    def test_incompatible(self, size_class: int, quality: Quality) -> None:
        """No perfect thirds, no major fourths."""
        with pytest.raises(InvalidQualityError):
            quality_offset(size_class, quality)

    def test_chromatic_span(self) -> None:
        """Spans include whole octaves."""
        assert chromatic_span(2, Quality.MAJOR) == 4
        assert chromatic_span(9, Quality.MINOR) == 15
        assert chromatic_span(7, Quality.PERFECT) == 12
        with pytest.raises(ValueError):
            chromatic_span(-1, Quality.PERFECT)

    def test_inverse_of_resolve(self) -> None:
        """Building from a resolved quality gives back the same pair."""
        for diatonic in range(0, 15):
            for chromatic in range(-5, 30):
                quality = resolve_quality(StepPair(diatonic, chromatic))
                assert chromatic_span(diatonic, quality) == chromatic
