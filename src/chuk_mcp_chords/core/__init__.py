"""
Core chord engine.

These are the pieces everything else composes on:
- ChordEngine: Degrees + chord types -> concrete chords and progressions
- formula_to_semitones: Interval formulas -> semitone offsets
- normalize_chord_type / display_chord_type_symbol: Chord-type tokens
- parse_degree / parse_chord_notation / split_progression: Notation parsing
- Errors: UnknownKeyError, InvalidDegreeFormatError, UnknownChordTypeError,
  InvalidNotationError
"""

from chuk_mcp_chords.core.engine import ChordEngine
from chuk_mcp_chords.core.errors import (
    ChordEngineError,
    DatasetLoadError,
    DatasetNotFoundError,
    InvalidDegreeFormatError,
    InvalidNotationError,
    UnknownChordTypeError,
    UnknownKeyError,
)
from chuk_mcp_chords.core.intervals import formula_to_semitones, interval_to_semitones
from chuk_mcp_chords.core.notation import (
    ParsedDegree,
    display_chord_type_symbol,
    normalize_chord_type,
    parse_chord_notation,
    parse_degree,
    split_progression,
)

__all__ = [
    # Engine
    "ChordEngine",
    # Intervals
    "formula_to_semitones",
    "interval_to_semitones",
    # Notation
    "ParsedDegree",
    "display_chord_type_symbol",
    "normalize_chord_type",
    "parse_chord_notation",
    "parse_degree",
    "split_progression",
    # Errors
    "ChordEngineError",
    "DatasetLoadError",
    "DatasetNotFoundError",
    "InvalidDegreeFormatError",
    "InvalidNotationError",
    "UnknownChordTypeError",
    "UnknownKeyError",
]
