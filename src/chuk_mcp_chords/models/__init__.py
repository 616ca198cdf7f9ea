"""
Pydantic models for the chord system.

This module provides:
- MusicTheoryDataset: The theory tables the engine runs on
- ChordTypeDef: Chord-quality formula and extensions
- FunctionalGroup: Harmonic function with substitution table
- GeneratedChord: A chord resolved in a key
- ChordRef: Key-independent chord reference
- Substitution: Substitution lookup result
"""

from chuk_mcp_chords.models.chord import ChordRef, GeneratedChord, Substitution
from chuk_mcp_chords.models.dataset import ChordTypeDef, FunctionalGroup, MusicTheoryDataset

__all__ = [
    "ChordRef",
    "ChordTypeDef",
    "FunctionalGroup",
    "GeneratedChord",
    "MusicTheoryDataset",
    "Substitution",
]
