"""
Compilation - generated chords to MIDI.

The pipeline:
    notation string → GeneratedChord list (engine)
    → MidiEvent list (block chords)
    → MIDI File
"""

from chuk_mcp_chords.compiler.midi import (
    TICKS_PER_BEAT,
    MidiEvent,
    chord_to_pitches,
    events_to_midi,
    progression_to_events,
    progression_to_midi,
)

__all__ = [
    "TICKS_PER_BEAT",
    "MidiEvent",
    "chord_to_pitches",
    "events_to_midi",
    "progression_to_events",
    "progression_to_midi",
]
