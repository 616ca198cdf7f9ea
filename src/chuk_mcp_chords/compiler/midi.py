"""
MIDI export - generated progressions as block chords.

Each chord is held for a fixed number of beats, back to back, on one track.
All operations are deterministic: same chords → same MIDI file.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from mido import Message, MetaMessage, MidiFile, MidiTrack

from chuk_mcp_chords.constants import SEMITONES_PER_OCTAVE

if TYPE_CHECKING:
    from collections.abc import Sequence

    from chuk_mcp_chords.models.chord import GeneratedChord
    from chuk_mcp_chords.models.dataset import MusicTheoryDataset


# Standard ticks per beat (quarter note) - industry standard
TICKS_PER_BEAT = 480

DEFAULT_OCTAVE = 4
DEFAULT_BEATS_PER_CHORD = 4


@dataclass(frozen=True)
class MidiEvent:
    """
    A single MIDI note event.

    All times are in ticks (absolute from start of track).
    """

    pitch: int  # MIDI note number (0-127)
    start_ticks: int
    duration_ticks: int
    velocity: int  # 0-127
    channel: int = 0  # 0-15

    def __post_init__(self) -> None:
        """Validate MIDI ranges."""
        if not 0 <= self.pitch <= 127:
            raise ValueError(f"Pitch must be 0-127, got {self.pitch}")
        if not 0 <= self.velocity <= 127:
            raise ValueError(f"Velocity must be 0-127, got {self.velocity}")
        if not 0 <= self.channel <= 15:
            raise ValueError(f"Channel must be 0-15, got {self.channel}")
        if self.start_ticks < 0:
            raise ValueError(f"Start ticks must be >= 0, got {self.start_ticks}")
        if self.duration_ticks < 0:
            raise ValueError(f"Duration ticks must be >= 0, got {self.duration_ticks}")


def events_to_midi(
    events: Sequence[MidiEvent],
    tempo_bpm: int = 120,
    ticks_per_beat: int = TICKS_PER_BEAT,
) -> MidiFile:
    """
    Convert a sequence of MidiEvents to a single-track MidiFile.

    Args:
        events: Sequence of MidiEvent objects
        tempo_bpm: Tempo in beats per minute
        ticks_per_beat: Resolution (default 480)

    Returns:
        A mido MidiFile ready to be saved
    """
    mid = MidiFile(ticks_per_beat=ticks_per_beat)
    track = MidiTrack()
    mid.tracks.append(track)

    tempo_us = int(60_000_000 / tempo_bpm)
    track.append(MetaMessage("set_tempo", tempo=tempo_us, time=0))

    messages: list[tuple[int, Message]] = []
    for event in events:
        messages.append(
            (
                event.start_ticks,
                Message(
                    "note_on",
                    channel=event.channel,
                    note=event.pitch,
                    velocity=event.velocity,
                    time=0,
                ),
            )
        )
        messages.append(
            (
                event.start_ticks + event.duration_ticks,
                Message("note_off", channel=event.channel, note=event.pitch, velocity=0, time=0),
            )
        )

    # note_off before note_on at the same tick so repeated chord tones retrigger
    messages.sort(key=lambda x: (x[0], x[1].type != "note_off"))

    current_time = 0
    for abs_time, msg in messages:
        msg.time = abs_time - current_time
        track.append(msg)
        current_time = abs_time

    track.append(MetaMessage("end_of_track", time=0))
    return mid


def chord_to_pitches(
    chord: GeneratedChord,
    note_names: Sequence[str],
    octave: int = DEFAULT_OCTAVE,
) -> list[int]:
    """
    MIDI note numbers for a chord, root in the given octave (C4 = 60).

    Intervals are used unreduced, so a 9th sits above the octave.
    """
    root_midi = note_names.index(chord.root) + (octave + 1) * SEMITONES_PER_OCTAVE
    return [root_midi + interval for interval in chord.intervals]


def progression_to_events(
    chords: Sequence[GeneratedChord],
    note_names: Sequence[str],
    octave: int = DEFAULT_OCTAVE,
    beats_per_chord: int = DEFAULT_BEATS_PER_CHORD,
    velocity: float = 0.8,
    ticks_per_beat: int = TICKS_PER_BEAT,
) -> list[MidiEvent]:
    """Lay chords out back to back, each held for beats_per_chord beats."""
    chord_ticks = beats_to_ticks(beats_per_chord, ticks_per_beat)
    midi_velocity = velocity_float_to_int(velocity)

    events: list[MidiEvent] = []
    for index, chord in enumerate(chords):
        start = index * chord_ticks
        for pitch in chord_to_pitches(chord, note_names, octave):
            events.append(
                MidiEvent(
                    pitch=pitch,
                    start_ticks=start,
                    duration_ticks=chord_ticks,
                    velocity=midi_velocity,
                )
            )
    return events


def progression_to_midi(
    chords: Sequence[GeneratedChord],
    dataset: MusicTheoryDataset,
    octave: int = DEFAULT_OCTAVE,
    beats_per_chord: int = DEFAULT_BEATS_PER_CHORD,
    velocity: float = 0.8,
    tempo_bpm: int = 120,
) -> MidiFile:
    """
    Render generated chords to a MidiFile.

    Args:
        chords: Chords from the engine, in playing order
        dataset: Dataset the chords were generated with (for note names)
        octave: Octave of each chord's root
        beats_per_chord: How long each chord is held
        velocity: 0.0-1.0
        tempo_bpm: Tempo in beats per minute

    Returns:
        A mido MidiFile ready to be saved

    Example:
        chords = engine.generate_progression("A", "6m-4-1-5")
        progression_to_midi(chords, engine.dataset).save("pop.mid")
    """
    events = progression_to_events(
        chords,
        dataset.note_names,
        octave=octave,
        beats_per_chord=beats_per_chord,
        velocity=velocity,
    )
    return events_to_midi(events, tempo_bpm=tempo_bpm)


def beats_to_ticks(beats: float, ticks_per_beat: int = TICKS_PER_BEAT) -> int:
    """Convert a beat count to ticks."""
    return int(beats * ticks_per_beat)


def velocity_float_to_int(velocity: float) -> int:
    """Convert velocity from 0.0-1.0 range to 0-127."""
    return max(0, min(127, int(velocity * 127)))
