#!/usr/bin/env python3
"""
Example: Generate chord progressions and export them to MIDI.

This demonstrates the engine end to end: load the built-in dataset,
resolve key-independent progressions in a few keys, transpose one,
and write block-chord MIDI files you can open in any DAW.

Usage:
    python examples/generate_progressions.py
    # Creates: examples/output/<progression>_<key>.mid
"""

import random
from pathlib import Path

from chuk_mcp_chords.compiler import progression_to_midi
from chuk_mcp_chords.progressions import (
    CURATED_PROGRESSIONS,
    format_degree_symbol,
    group_by_degree,
    random_progression,
)
from chuk_mcp_chords.theory import TheoryLoader


def main() -> None:
    """Generate example progressions."""
    output_dir = Path(__file__).parent / "output"
    output_dir.mkdir(exist_ok=True)

    engine = TheoryLoader().create_engine()

    # Example 1: Curated progressions, grouped by starting degree
    print("Curated progressions in C:")
    for degree, notations in group_by_degree(CURATED_PROGRESSIONS).items():
        print(f"  Starting on {degree}:")
        for notation in notations:
            chords = engine.generate_progression("C", notation)
            print(f"    {notation:<12} {' - '.join(c.symbol for c in chords)}")

    # Example 2: One chord with extensions
    chord = engine.generate_chord("Eb", "5", "7", ["b9", "13"])
    print(f"\nDominant of Eb with b9 and 13: {chord.symbol} = {' '.join(chord.notes)}")

    # Example 3: Transposition keeps every chord's shape
    jazz = engine.generate_progression("C", "2m7 - 5 - 1M7")
    in_bb = engine.transpose_progression(jazz, "C", "Bb")
    print(f"\nii-V-I: C {[c.symbol for c in jazz]} -> Bb {[c.symbol for c in in_bb]}")

    # Example 4: Random pick, as the demo page's refresh button does
    pick = random_progression(engine, random.Random(2024))
    labels = [format_degree_symbol(d, c) for d, c in zip(pick.degrees, pick.chords, strict=True)]
    print(f"\nRandom pick: {pick.notation} in {pick.key} -> {' '.join(labels)}")

    # Example 5: MIDI export
    for key in ("C", "A"):
        notation = "1-5-6m-4"
        chords = engine.generate_progression(key, notation)
        path = output_dir / f"{notation.replace('-', '_')}_{key}.mid"
        progression_to_midi(chords, engine.dataset, tempo_bpm=96).save(str(path))
        print(f"\nCreated: {path}")

    print("\nDone! Open the MIDI files in your DAW to hear them.")


if __name__ == "__main__":
    main()
