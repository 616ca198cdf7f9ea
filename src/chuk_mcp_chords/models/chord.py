"""
Chord models - what the engine hands back.

GeneratedChord is the resolved, key-specific chord.
ChordRef is the key-independent reference (degree + type + extensions)
that progressions are written in.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from chuk_mcp_chords.constants import DEFAULT_CHORD_TYPE


class ChordRef(BaseModel):
    """A chord by scale degree, independent of key."""

    degree: str = Field(..., description="Degree token, e.g. '1', 'b6', '#4'")
    type: str = Field(DEFAULT_CHORD_TYPE, description="Canonical chord-type key")
    extensions: list[str] = Field(default_factory=list, description="Extension keys")

    model_config = {"frozen": True}

    def __str__(self) -> str:
        return f"{self.degree}{self.type}{''.join(self.extensions)}"


class GeneratedChord(BaseModel):
    """
    A chord resolved in a key.

    notes and intervals line up element-wise, root first, in formula order.
    """

    symbol: str = Field(..., description="Display symbol, e.g. 'C#m7', 'F°7'")
    root: str = Field(..., description="Root note name")
    type: str = Field(..., description="Canonical chord-type key")
    notes: list[str] = Field(default_factory=list, description="Note names, formula order")
    intervals: list[int] = Field(default_factory=list, description="Semitones from the root")
    extensions: list[str] = Field(default_factory=list, description="Extension keys requested")
    degree: str = Field(..., description="Degree the chord was generated from")

    model_config = {"frozen": True}

    def to_dict(self) -> dict[str, Any]:
        """Plain dict for JSON responses."""
        return self.model_dump()

    def __str__(self) -> str:
        return self.symbol


class Substitution(BaseModel):
    """The functional group a degree belongs to and its substitutes."""

    function: str
    substitutions: list[str] = Field(default_factory=list)

    model_config = {"frozen": True}
