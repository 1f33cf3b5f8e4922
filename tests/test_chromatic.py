"""
Tests for ChromaticPitch and ChromaticInterval.
"""

import pytest

from harmony_types.core import ChromaticInterval, ChromaticPitch, Interval, Letter, Pitch


class TestChromaticPitch:
    """Tests for ChromaticPitch."""

    def test_from_pitch_forgets_spelling(self) -> None:
        """Enharmonic pitches share a chromatic pitch."""
        assert ChromaticPitch.from_pitch(Pitch.parse("C#4")) == ChromaticPitch.from_pitch(Pitch.parse("Db4"))
        assert ChromaticPitch.from_pitch(Pitch.parse("B#3")) == ChromaticPitch(0)

    @pytest.mark.parametrize(
        "steps,name",
        [
            (0, "C4"),
            (1, "C#4"),
            (3, "Eb4"),
            (6, "F#4"),
            (8, "Ab4"),
            (10, "Bb4"),
            (-1, "B3"),
            (13, "C#5"),
        ],
    )
    def test_to_pitch(self, steps: int, name: str) -> None:
        """Default spelling uses at most one accidental."""
        assert ChromaticPitch(steps).to_pitch() == Pitch.parse(name)

    @pytest.mark.parametrize(
        "steps,letter,name",
        [
            (0, Letter.C, "C4"),
            (0, Letter.D, "Dbb4"),
            (1, Letter.D, "Db4"),
            (-1, Letter.C, "Cb4"),
            (0, Letter.B, "B#3"),
            (11, Letter.C, "Cb5"),
        ],
    )
    def test_to_pitch_named(self, steps: int, letter: Letter, name: str) -> None:
        """Named spelling picks the octave nearest the letter."""
        assert ChromaticPitch(steps).to_pitch_named(letter) == Pitch.parse(name)

    def test_midi(self) -> None:
        """MIDI numbers map to steps from middle C; out of range gives None."""
        assert ChromaticPitch.from_midi(60) == ChromaticPitch(0)
        assert ChromaticPitch.from_midi(69).to_pitch() == Pitch.parse("A4")
        assert ChromaticPitch(0).to_midi() == 60
        assert ChromaticPitch(67).to_midi() == 127
        assert ChromaticPitch(68).to_midi() is None
        assert ChromaticPitch(-61).to_midi() is None

    def test_frequency(self) -> None:
        """Equal temperament around A4."""
        assert ChromaticPitch(9).to_frequency() == pytest.approx(440.0)
        assert ChromaticPitch(21).to_frequency() == pytest.approx(880.0)
        assert ChromaticPitch(-3).to_frequency(a4=432.0) == pytest.approx(216.0)

    def test_reduce(self) -> None:
        """Reduce folds into the middle C octave."""
        assert ChromaticPitch(-1).reduce() == ChromaticPitch(11)
        assert ChromaticPitch(25).reduce() == ChromaticPitch(1)

    def test_arithmetic(self) -> None:
        """Pitch + interval and pitch - pitch."""
        assert ChromaticPitch(0) + ChromaticInterval(7) == ChromaticPitch(7)
        assert ChromaticInterval(7) + ChromaticPitch(0) == ChromaticPitch(7)
        assert ChromaticPitch(7) - ChromaticPitch(0) == ChromaticInterval(7)
        assert ChromaticPitch(7) - ChromaticInterval(3) == ChromaticPitch(4)

    def test_pitch_plus_pitch_fails(self) -> None:
        """Adding two pitches is meaningless."""
        with pytest.raises(TypeError):
            ChromaticPitch(0) + ChromaticPitch(1)  # type: ignore[operator]


class TestChromaticInterval:
    """Tests for ChromaticInterval."""

    def test_from_interval(self) -> None:
        """Augmented fourth and diminished fifth are the same chromatic interval."""
        assert ChromaticInterval.from_interval(Interval.A4) == ChromaticInterval.from_interval(Interval.d5)
        assert ChromaticInterval.from_interval(Interval.M3) == ChromaticInterval(4)

    def test_group(self) -> None:
        """Intervals add, subtract, negate and repeat."""
        assert ChromaticInterval(4) + ChromaticInterval(3) == ChromaticInterval(7)
        assert ChromaticInterval(4) - ChromaticInterval(7) == ChromaticInterval(-3)
        assert -ChromaticInterval(5) == ChromaticInterval(-5)
        assert 3 * ChromaticInterval(4) == ChromaticInterval(12)

    def test_reduce(self) -> None:
        """Reduce folds into 0-11."""
        assert ChromaticInterval(14).reduce() == ChromaticInterval(2)
        assert ChromaticInterval(-1).reduce() == ChromaticInterval(11)
