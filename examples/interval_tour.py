#!/usr/bin/env python3
"""
Example: A Tour of Pitches and Intervals.

Shows how spelling survives arithmetic when pitches and intervals are
(diatonic, chromatic) step pairs.

Usage:
    python examples/interval_tour.py [notation.yaml]

This example shows:
1. Parsing pitch and interval names
2. Transposing and measuring distances without losing spelling
3. Enharmonics: same sound, different pitch
4. Inversion and octave reduction
5. Saving values as JSON and reloading them
"""

import sys

from harmony_types import (
    ChromaticPitch,
    Interval,
    IntervalModel,
    Notation,
    NotationConfig,
    Pitch,
    PitchModel,
)


def main() -> None:
    """Walk through the core operations."""
    config = NotationConfig.from_yaml(sys.argv[1]) if len(sys.argv) > 1 else NotationConfig()
    notation = Notation(config)

    print("Pitch and Interval Tour")
    print("=" * 50)
    print()

    # 1. Parsing
    print("1. Parsing names...")
    for name in ["C4", "F#3", "Bbb", "E#5"]:
        pitch = notation.pitch(name)
        print(f"   {name:6} -> steps {pitch.steps.diatonic:>3}, {pitch.steps.chromatic:>3}")
    print()

    # 2. Transposition keeps the letter arithmetic
    print("2. Transposing a major third up from each pitch...")
    for name in ["C4", "E4", "G#4", "Fb4"]:
        pitch = notation.pitch(name)
        print(f"   {notation.spell_pitch(pitch):6} + M3 = {notation.spell_pitch(pitch + Interval.M3)}")
    print()

    print("   Distances:")
    for low, high in [("C4", "G4"), ("C4", "F#4"), ("C4", "Gb4"), ("E4", "C4")]:
        interval = notation.pitch(high) - notation.pitch(low)
        print(f"   {low} -> {high}: {notation.spell_interval(interval)}")
    print()

    # 3. Enharmonics
    print("3. Enharmonic pitches...")
    sharp, flat = notation.pitch("C#4"), notation.pitch("Db4")
    print(f"   C#4 == Db4? {sharp == flat}")
    print(f"   Same sound? {ChromaticPitch.from_pitch(sharp) == ChromaticPitch.from_pitch(flat)}")
    print(f"   Frequency: {notation.frequency(sharp):.2f} Hz")
    print()

    # 4. Inversion
    print("4. Inverting intervals within the octave...")
    for interval in [Interval.M3, Interval.P4, Interval.A4, Interval.m7]:
        print(
            f"   {notation.spell_interval(interval):14} -> "
            f"{notation.spell_interval(interval.complement())}"
        )
    print()

    # 5. Persistence
    print("5. JSON round trip...")
    pitch_json = PitchModel.from_pitch(notation.pitch("Ebb2")).model_dump_json(by_alias=True)
    interval_json = IntervalModel.from_interval(-Interval.parse("AA4")).model_dump_json(by_alias=True)
    print(f"   {pitch_json}")
    print(f"   {interval_json}")
    restored: Pitch = PitchModel.model_validate_json(pitch_json).to_pitch()
    print(f"   Restored: {notation.spell_pitch(restored)}")
    print()

    print("Done.")


if __name__ == "__main__":
    main()
