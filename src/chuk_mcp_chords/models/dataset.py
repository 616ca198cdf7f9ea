"""
Music-theory dataset models.

The dataset is the engine's whole world: chord-type formulas, the scale
formula used to place degrees, the key-to-semitone table, the note-name
table, and the functional groups used for substitution lookup.

Documents use camelCase keys (chordTypes, scaleFormula, ...), the models
expose snake_case attributes. Structure is validated once, at load time.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

from chuk_mcp_chords.constants import DEFAULT_SCALE, DEGREES_PER_SCALE, SEMITONES_PER_OCTAVE


class ChordTypeDef(BaseModel):
    """
    A chord quality: its base formula and the extensions it accepts.

    Formula tokens are interval names ("1", "b3", "#5"), not semitones.
    """

    formula: str = Field(..., description="Comma-separated interval tokens, e.g. '1,3,5'")
    extensions: dict[str, str] = Field(
        default_factory=dict,
        description="Extension key -> interval token, e.g. {'7': 'b7'}",
    )

    model_config = {"frozen": True}

    @field_validator("formula")
    @classmethod
    def validate_formula(cls, v: str) -> str:
        """Formula must name at least one tone."""
        if not v.strip():
            raise ValueError("Chord formula cannot be empty")
        return v

    @field_validator("extensions", mode="before")
    @classmethod
    def default_extensions(cls, v: Any) -> Any:
        # Documents write "extensions: null" for types without any
        return {} if v is None else v

    @property
    def tokens(self) -> list[str]:
        """Formula tokens, whitespace-trimmed."""
        return [token.strip() for token in self.formula.split(",")]


class FunctionalGroup(BaseModel):
    """A harmonic function (tonic, subdominant, ...) and its substitution table."""

    description: str = ""
    substitutions: dict[str, list[str]] = Field(default_factory=dict)

    model_config = {"frozen": True}


class MusicTheoryDataset(BaseModel):
    """
    The complete theory dataset handed to the engine.

    Immutable for the engine's lifetime.
    """

    chord_types: dict[str, ChordTypeDef] = Field(..., alias="chordTypes")
    scale_formula: dict[str, list[int]] = Field(..., alias="scaleFormula")
    key_signatures: dict[str, int] = Field(..., alias="keySignatures")
    note_names: list[str] = Field(..., alias="noteNames")
    functional_groups: dict[str, FunctionalGroup] = Field(
        default_factory=dict, alias="functionalGroups"
    )

    model_config = {"frozen": True, "populate_by_name": True}

    @field_validator("note_names")
    @classmethod
    def validate_note_names(cls, v: list[str]) -> list[str]:
        """One name per semitone."""
        if len(v) != SEMITONES_PER_OCTAVE:
            raise ValueError(f"noteNames must have {SEMITONES_PER_OCTAVE} entries, got {len(v)}")
        return v

    @field_validator("key_signatures")
    @classmethod
    def validate_key_signatures(cls, v: dict[str, int]) -> dict[str, int]:
        """Every key maps to a semitone 0-11."""
        for key, semitone in v.items():
            if not 0 <= semitone < SEMITONES_PER_OCTAVE:
                raise ValueError(f"Key '{key}' semitone must be 0-11, got {semitone}")
        return v

    @field_validator("scale_formula")
    @classmethod
    def validate_scale_formula(cls, v: dict[str, list[int]]) -> dict[str, list[int]]:
        """Scales are seven semitone offsets starting at the tonic."""
        for name, offsets in v.items():
            if len(offsets) != DEGREES_PER_SCALE:
                raise ValueError(
                    f"Scale '{name}' must have {DEGREES_PER_SCALE} degrees, got {len(offsets)}"
                )
            if offsets[0] != 0:
                raise ValueError(f"Scale '{name}' must start at 0, got {offsets[0]}")
            if any(not 0 <= o < SEMITONES_PER_OCTAVE for o in offsets):
                raise ValueError(f"Scale '{name}' offsets must be 0-11: {offsets}")
        return v

    @model_validator(mode="after")
    def validate_major_scale(self) -> MusicTheoryDataset:
        """Degree placement needs the major scale."""
        if DEFAULT_SCALE not in self.scale_formula:
            raise ValueError(f"scaleFormula must define '{DEFAULT_SCALE}'")
        return self

    @property
    def major_scale(self) -> list[int]:
        """Semitone offsets of the major scale degrees."""
        return self.scale_formula[DEFAULT_SCALE]

    def to_document(self) -> dict[str, Any]:
        """Serialize back to the camelCase document shape."""
        return self.model_dump(by_alias=True)
