"""
Constants for the chord system.

No magic strings - the closed lookup tables and standard messages live here.
"""

from typing import Final

# Interval token -> semitones from the root.
# Covers compound intervals (9ths, 11ths, 13ths) above the octave.
INTERVAL_SEMITONES: Final[dict[str, int]] = {
    "1": 0,
    "#1": 1,
    "b2": 1,
    "2": 2,
    "#2": 3,
    "b3": 3,
    "3": 4,
    "4": 5,
    "#4": 6,
    "b5": 6,
    "5": 7,
    "#5": 8,
    "b6": 8,
    "6": 9,
    "bb7": 9,
    "#6": 10,
    "b7": 10,
    "7": 11,
    "8": 12,
    "b9": 13,
    "9": 14,
    "#9": 15,
    "11": 17,
    "#11": 18,
    "b13": 20,
    "13": 21,
}

# Presentation glyphs and aliases -> canonical chord-type keys.
# Anything not listed is already canonical.
CHORD_TYPE_ALIASES: Final[dict[str, str]] = {
    "°": "dim",
    "o": "dim",
    "dim": "dim",
    "dim7": "dim7",
    "ø": "hdim",
    "hdim": "hdim",
    "m7b5": "hdim",
    "+": "aug",
    "aug": "aug",
}

# Canonical chord-type keys -> glyph used in a rendered chord symbol.
# Major renders bare: "C", not "CM".
CHORD_TYPE_GLYPHS: Final[dict[str, str]] = {
    "M": "",
    "dim": "°",
    "dim7": "°7",
    "hdim": "ø",
    "aug": "+",
}

DEFAULT_CHORD_TYPE: Final = "M"
DEFAULT_SCALE: Final = "major"
DEFAULT_DATASET: Final = "default"

SEMITONES_PER_OCTAVE: Final = 12
DEGREES_PER_SCALE: Final = 7


class ErrorMessages:
    """Standardized error messages."""

    UNKNOWN_KEY = "Unknown key: {key}"
    INVALID_DEGREE = "Invalid degree format: {degree}"
    UNKNOWN_CHORD_TYPE = "Unknown chord type: {chord_type}"
    INVALID_NOTATION = "Invalid chord notation: {notation}"
    DATASET_NOT_FOUND = "Theory dataset '{name}' not found."
    DATASET_INVALID = "Failed to load theory dataset from {path}: {reason}"


class SuccessMessages:
    """Standardized success messages."""

    CHORD_GENERATED = "Generated {symbol} in {key}."
    PROGRESSION_GENERATED = "Generated {count} chords in {key}."
    PROGRESSION_TRANSPOSED = "Transposed {count} chords from {from_key} to {to_key}."
    MIDI_EXPORTED = "Exported {count} chords to {path}."
