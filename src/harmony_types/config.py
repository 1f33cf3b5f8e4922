"""
Notation configuration.

Settings that change how names are read and written, not what values mean:
the octave assumed when a pitch name omits one, the A4 tuning used for
frequencies, and the display style for accidentals and interval names.

Configs can be written as YAML:

    default_octave: 3
    a4_frequency: 442.0
    unicode_accidentals: true
    short_interval_names: false
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field

from harmony_types.constants import A4_FREQUENCY, DEFAULT_OCTAVE

logger = logging.getLogger(__name__)


class NotationConfig(BaseModel):
    """How pitch and interval names are parsed and displayed."""

    default_octave: int = Field(DEFAULT_OCTAVE, description="Octave for pitch names without one")
    a4_frequency: float = Field(A4_FREQUENCY, gt=0, description="Tuning reference for A4 in Hz")
    unicode_accidentals: bool = Field(False, description="Spell accidentals with ♯/♭ glyphs")
    short_interval_names: bool = Field(False, description="Display 'M3' rather than 'Major3'")

    model_config = {"frozen": True, "extra": "forbid"}

    @classmethod
    def from_yaml(cls, path: Path | str) -> NotationConfig:
        """
        Load a config from a YAML file.

        An empty file gives the defaults.

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the document is not a mapping
            pydantic.ValidationError: If a setting is invalid
        """
        path = Path(path)
        with open(path) as f:
            data = yaml.safe_load(f)

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError(f"Notation config must be a mapping: {path}")

        config = cls.model_validate(data)
        logger.info(f"Loaded notation config from {path}")
        return config

    def to_yaml(self, path: Path | str) -> None:
        """Write the config as YAML."""
        path = Path(path)
        with open(path, "w") as f:
            yaml.safe_dump(self.model_dump(), f, default_flow_style=False, sort_keys=False)
