"""
Core music primitives.

These are the value types everything else composes on:
- StepPair: (diatonic, chromatic) displacement with its arithmetic
- Quality: Perfect/Major/Minor/Augmented/Diminished, resolved from a StepPair
- Letter, Accidental: the parts of a pitch name
- Pitch: Displacement from middle C, named like 'F#3'
- Interval: Displacement between pitches, named like 'Major3'
- ChromaticPitch, ChromaticInterval: Semitone-only counterparts
"""

from harmony_types.core.chromatic import ChromaticInterval, ChromaticPitch
from harmony_types.core.pitch import Interval, Pitch, distance, transpose
from harmony_types.core.quality import (
    Quality,
    QualityKind,
    chromatic_span,
    has_perfect,
    quality_offset,
    resolve_quality,
)
from harmony_types.core.spelling import Accidental, Letter
from harmony_types.core.steps import StepPair, floor_divmod

__all__ = [
    # Steps
    "StepPair",
    "floor_divmod",
    # Quality
    "Quality",
    "QualityKind",
    "resolve_quality",
    "quality_offset",
    "chromatic_span",
    "has_perfect",
    # Spelling
    "Letter",
    "Accidental",
    # Pitch
    "Pitch",
    "Interval",
    "transpose",
    "distance",
    # Chromatic
    "ChromaticPitch",
    "ChromaticInterval",
]
