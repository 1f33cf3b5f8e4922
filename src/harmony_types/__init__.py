"""
harmony-types: pitches and intervals as (diatonic, chromatic) step pairs.

    >>> from harmony_types import Interval, Pitch
    >>> Pitch.parse("C4") + Interval.parse("Major3")
    Pitch(E4)
    >>> Pitch.parse("G4") - Pitch.parse("C4")
    Interval(Perfect5)
"""

from harmony_types.config import NotationConfig
from harmony_types.core import (
    Accidental,
    ChromaticInterval,
    ChromaticPitch,
    Interval,
    Letter,
    Pitch,
    Quality,
    QualityKind,
    StepPair,
    distance,
    resolve_quality,
    transpose,
)
from harmony_types.errors import (
    IncompleteError,
    InvalidAccidentalError,
    InvalidLetterError,
    InvalidOctaveError,
    InvalidQualityError,
    InvalidSizeError,
    ParseError,
)
from harmony_types.models import IntervalModel, PitchModel, StepPairModel
from harmony_types.notation import Notation

__all__ = [
    # Values
    "StepPair",
    "Pitch",
    "Interval",
    "Letter",
    "Accidental",
    "Quality",
    "QualityKind",
    "ChromaticPitch",
    "ChromaticInterval",
    "transpose",
    "distance",
    "resolve_quality",
    # Errors
    "ParseError",
    "InvalidLetterError",
    "InvalidAccidentalError",
    "InvalidOctaveError",
    "InvalidQualityError",
    "InvalidSizeError",
    "IncompleteError",
    # Serialization
    "StepPairModel",
    "PitchModel",
    "IntervalModel",
    # Configuration
    "NotationConfig",
    "Notation",
]
