"""
Pydantic models for persisting and exchanging pitches and intervals.

The raw (diatonic, chromatic) integers are the canonical state. A display
name may travel alongside them for readability; when present it is checked
against the integers, never used in their place.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator

from harmony_types.constants import SCHEMA_VERSION, SchemaVersion
from harmony_types.core.pitch import Interval, Pitch
from harmony_types.core.steps import StepPair


class StepPairModel(BaseModel):
    """A raw (diatonic, chromatic) pair."""

    schema_version: SchemaVersion = Field(SCHEMA_VERSION, alias="schema", description="Schema version")
    diatonic: int = Field(..., description="Diatonic (staff position) steps")
    chromatic: int = Field(..., description="Chromatic (semitone) steps")

    model_config = {"frozen": True, "populate_by_name": True}

    @classmethod
    def from_steps(cls, steps: StepPair) -> StepPairModel:
        return cls(diatonic=steps.diatonic, chromatic=steps.chromatic)

    def to_steps(self) -> StepPair:
        return StepPair(self.diatonic, self.chromatic)


class PitchModel(StepPairModel):
    """A pitch, as steps from middle C plus an optional display name."""

    name: str | None = Field(None, description="Display name, e.g. 'F#3'")

    @model_validator(mode="after")
    def check_name(self) -> PitchModel:
        """The name, if given, must spell exactly these steps."""
        if self.name is not None:
            named = Pitch.parse(self.name)
            if named != self.to_pitch():
                raise ValueError(
                    f"Name {self.name!r} is {named.steps}, "
                    f"not ({self.diatonic}, {self.chromatic})"
                )
        return self

    @classmethod
    def from_pitch(cls, pitch: Pitch, include_name: bool = True) -> PitchModel:
        return cls(
            diatonic=pitch.diatonic,
            chromatic=pitch.chromatic,
            name=pitch.spell() if include_name else None,
        )

    def to_pitch(self) -> Pitch:
        return Pitch(self.diatonic, self.chromatic)


class IntervalModel(StepPairModel):
    """An interval, as raw steps plus an optional display name."""

    name: str | None = Field(None, description="Display name, e.g. 'Major3'")

    @model_validator(mode="after")
    def check_name(self) -> IntervalModel:
        """The name, if given, must denote exactly these steps."""
        if self.name is not None:
            named = Interval.parse(self.name)
            if named != self.to_interval():
                raise ValueError(
                    f"Name {self.name!r} is {named.steps}, "
                    f"not ({self.diatonic}, {self.chromatic})"
                )
        return self

    @classmethod
    def from_interval(cls, interval: Interval, include_name: bool = True) -> IntervalModel:
        return cls(
            diatonic=interval.diatonic,
            chromatic=interval.chromatic,
            name=str(interval) if include_name else None,
        )

    def to_interval(self) -> Interval:
        return Interval(self.diatonic, self.chromatic)
