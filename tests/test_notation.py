"""
Tests for NotationConfig and Notation.
"""

import logging
from pathlib import Path

import pytest
from pydantic import ValidationError

from harmony_types import Interval, Notation, NotationConfig, Pitch


class TestNotationConfig:
    """Tests for loading and saving configs."""

    def test_defaults(self) -> None:
        """Defaults match standard notation."""
        config = NotationConfig()
        assert config.default_octave == 4
        assert config.a4_frequency == 440.0
        assert config.unicode_accidentals is False
        assert config.short_interval_names is False

    def test_from_yaml(self, config_path: Path) -> None:
        """Settings are read from YAML."""
        config_path.write_text("default_octave: 3\na4_frequency: 442.0\nunicode_accidentals: true\n")
        config = NotationConfig.from_yaml(config_path)
        assert config.default_octave == 3
        assert config.a4_frequency == 442.0
        assert config.unicode_accidentals is True
        assert config.short_interval_names is False

    def test_empty_file(self, config_path: Path) -> None:
        """An empty file gives the defaults."""
        config_path.write_text("")
        assert NotationConfig.from_yaml(config_path) == NotationConfig()

    def test_not_a_mapping(self, config_path: Path) -> None:
        """A list document is rejected."""
        config_path.write_text("- 1\n- 2\n")
        with pytest.raises(ValueError, match="mapping"):
            NotationConfig.from_yaml(config_path)

    def test_missing_file(self, temp_dir: Path) -> None:
        """Missing files raise FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            NotationConfig.from_yaml(temp_dir / "nope.yaml")

    def test_invalid_frequency(self, config_path: Path) -> None:
        """Tuning must be positive."""
        config_path.write_text("a4_frequency: -1\n")
        with pytest.raises(ValidationError):
            NotationConfig.from_yaml(config_path)

    def test_unknown_key(self, config_path: Path) -> None:
        """Unknown settings are rejected."""
        config_path.write_text("temperament: meantone\n")
        with pytest.raises(ValidationError):
            NotationConfig.from_yaml(config_path)

    def test_round_trip(self, config_path: Path) -> None:
        """to_yaml output loads back to the same config."""
        config = NotationConfig(default_octave=2, short_interval_names=True)
        config.to_yaml(config_path)
        assert NotationConfig.from_yaml(config_path) == config

    def test_logs_load(self, config_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        """Loading is logged at info level."""
        config_path.write_text("default_octave: 5\n")
        with caplog.at_level(logging.INFO, logger="harmony_types.config"):
            NotationConfig.from_yaml(config_path)
        assert "Loaded notation config" in caplog.text


class TestNotation:
    """Tests for Notation."""

    def test_default_octave(self) -> None:
        """Pitch names without an octave use the configured one."""
        notation = Notation(NotationConfig(default_octave=3))
        assert notation.pitch("F#") == Pitch.parse("F#3")
        assert notation.pitch("F#5") == Pitch.parse("F#5")

    def test_default_config(self) -> None:
        """Without a config, octave 4 and ASCII names."""
        notation = Notation()
        assert notation.pitch("Bb") == Pitch.parse("Bb4")
        assert notation.spell_pitch(Pitch.parse("Bb4")) == "Bb4"
        assert notation.spell_interval(Interval.M3) == "Major3"

    def test_unicode_spelling(self) -> None:
        """Unicode accidentals when configured."""
        notation = Notation(NotationConfig(unicode_accidentals=True))
        assert notation.spell_pitch(Pitch.parse("F#3")) == "F♯3"
        assert notation.spell_pitch(Pitch.parse("Ebb4")) == "E𝄫4"

    def test_short_interval_names(self) -> None:
        """Abbreviated interval names when configured."""
        notation = Notation(NotationConfig(short_interval_names=True))
        assert notation.spell_interval(Interval.M3) == "M3"
        assert notation.spell_interval(-Interval.P5) == "-P5"

    def test_interval(self) -> None:
        """Interval parsing does not depend on the config."""
        assert Notation().interval("m3") == Interval.m3

    def test_frequency(self) -> None:
        """Frequency uses the configured tuning."""
        notation = Notation(NotationConfig(a4_frequency=442.0))
        assert notation.frequency(Pitch.parse("A4")) == pytest.approx(442.0)
        assert notation.frequency(Pitch.parse("A5")) == pytest.approx(884.0)
