"""
Notation - parse and spell pitches and intervals under one NotationConfig.
"""

from __future__ import annotations

from harmony_types.config import NotationConfig
from harmony_types.core.pitch import Interval, Pitch


class Notation:
    """
    Applies a NotationConfig to parsing and display.

    The values themselves do not depend on the config; only the text does.
    """

    def __init__(self, config: NotationConfig | None = None):
        self.config = config or NotationConfig()

    def pitch(self, name: str) -> Pitch:
        """Parse a pitch name, filling in the configured default octave."""
        return Pitch.parse(name, default_octave=self.config.default_octave)

    def interval(self, name: str) -> Interval:
        return Interval.parse(name)

    def spell_pitch(self, pitch: Pitch) -> str:
        return pitch.spell(unicode=self.config.unicode_accidentals)

    def spell_interval(self, interval: Interval) -> str:
        if self.config.short_interval_names:
            return interval.short_name()
        return str(interval)

    def frequency(self, pitch: Pitch) -> float:
        """Frequency in Hz under the configured A4."""
        return pitch.to_frequency(self.config.a4_frequency)
