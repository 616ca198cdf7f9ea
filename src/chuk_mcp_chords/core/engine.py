"""
Chord engine - scale degrees to concrete chords.

The engine is a pure function of its dataset: given a key, a degree, a chord
type and extensions it computes the root, the chord tones and the display
symbol. It holds no mutable state, so one instance can serve any number of
callers.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from chuk_mcp_chords.constants import DEFAULT_CHORD_TYPE
from chuk_mcp_chords.core.errors import UnknownChordTypeError, UnknownKeyError
from chuk_mcp_chords.core.intervals import formula_to_semitones, pitch_class
from chuk_mcp_chords.core.notation import (
    display_chord_type_symbol,
    normalize_chord_type,
    parse_chord_notation,
    parse_degree,
    split_progression,
)
from chuk_mcp_chords.models.chord import ChordRef, GeneratedChord, Substitution
from chuk_mcp_chords.models.dataset import ChordTypeDef, MusicTheoryDataset

logger = logging.getLogger(__name__)


class ChordEngine:
    """
    Generates chords and progressions from a music-theory dataset.

    Example:
        engine = ChordEngine(dataset)
        engine.generate_chord("C", "6", "m").notes  # ['A', 'C', 'E']
        [c.symbol for c in engine.generate_progression("G", "1-5-6m-4")]
        # ['G', 'D', 'Em', 'C']
    """

    def __init__(self, dataset: MusicTheoryDataset):
        """
        Initialize the engine.

        Args:
            dataset: A fully loaded, validated dataset
        """
        self.dataset = dataset

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ChordEngine:
        """Build an engine from a raw camelCase dataset document."""
        return cls(MusicTheoryDataset.model_validate(data))

    @property
    def keys(self) -> list[str]:
        """Key names in dataset order."""
        return list(self.dataset.key_signatures)

    @property
    def chord_types(self) -> list[str]:
        """Canonical chord-type keys in dataset order."""
        return list(self.dataset.chord_types)

    # Token handling ------------------------------------------------------

    def normalize_chord_type(self, token: str) -> str:
        """Canonical chord-type key for a glyph or alias."""
        return normalize_chord_type(token)

    def display_chord_type_symbol(self, type_key: str) -> str:
        """Glyph used for a chord type in a symbol."""
        return display_chord_type_symbol(type_key)

    def formula_to_semitones(self, formula: str) -> list[int]:
        """Semitone offsets for an interval formula."""
        return formula_to_semitones(formula)

    def parse_chord_notation(self, notation: str) -> ChordRef:
        """Split a compact chord token into degree and type."""
        return parse_chord_notation(notation)

    # Generation ----------------------------------------------------------

    def generate_chord(
        self,
        key: str,
        degree: str,
        chord_type: str = DEFAULT_CHORD_TYPE,
        extensions: Sequence[str] = (),
    ) -> GeneratedChord:
        """
        Generate a chord on a scale degree of a key.

        Args:
            key: Key name from the dataset, e.g. "C", "Db", "F#"
            degree: Degree token, e.g. "1", "b6", "#4", "2m"
            chord_type: Chord type or alias, e.g. "M", "m7", "°", "ø"
            extensions: Extension keys to add; ones the chord type doesn't
                define are skipped

        Returns:
            The generated chord

        Raises:
            UnknownKeyError: key isn't in the dataset
            InvalidDegreeFormatError: degree isn't a valid degree token
            UnknownChordTypeError: the normalized type isn't in the dataset
        """
        normalized_type = normalize_chord_type(chord_type)

        key_semitone = self.dataset.key_signatures.get(key)
        if key_semitone is None:
            raise UnknownKeyError(key)

        parsed = parse_degree(degree)
        degree_offset = self.dataset.major_scale[parsed.scale_index] + parsed.alteration
        root_semitone = pitch_class(key_semitone + degree_offset)

        type_data = self.dataset.chord_types.get(normalized_type)
        if type_data is None:
            raise UnknownChordTypeError(chord_type)

        extensions = list(extensions)
        formula = self._build_formula(type_data, extensions)
        intervals = formula_to_semitones(formula)

        note_names = self.dataset.note_names
        notes = [note_names[pitch_class(root_semitone + offset)] for offset in intervals]
        root_name = note_names[root_semitone]
        symbol = f"{root_name}{display_chord_type_symbol(normalized_type)}{''.join(extensions)}"

        return GeneratedChord(
            symbol=symbol,
            root=root_name,
            type=normalized_type,
            notes=notes,
            intervals=intervals,
            extensions=extensions,
            degree=degree,
        )

    def _build_formula(self, type_data: ChordTypeDef, extensions: Iterable[str]) -> str:
        """Base formula plus the interval of every extension the type defines, in order."""
        tokens = [type_data.formula]
        for ext in extensions:
            interval = type_data.extensions.get(ext)
            if interval is None:
                logger.debug(f"Skipping extension {ext!r}: not defined for this chord type")
                continue
            tokens.append(interval)
        return ",".join(tokens)

    def generate_progression(self, key: str, notations: str) -> list[GeneratedChord]:
        """
        Generate every chord of a hyphen-separated progression.

        All or nothing: the first token that fails to parse or generate
        aborts the whole call.

        Args:
            key: Key name from the dataset
            notations: Progression string, e.g. "1 - 5 - 6m - 4"

        Returns:
            One chord per token, in input order
        """
        chords = []
        for token in split_progression(notations):
            ref = parse_chord_notation(token)
            chords.append(self.generate_chord(key, ref.degree, ref.type))
        return chords

    def transpose_progression(
        self,
        progression: Iterable[ChordRef | GeneratedChord],
        from_key: str,
        to_key: str,
    ) -> list[GeneratedChord]:
        """
        Regenerate a progression in another key.

        Chords are re-derived from their degrees rather than shifted by
        semitones, so spelling follows the dataset's note names and the
        interval structure of every chord is unchanged.

        Raises:
            UnknownKeyError: from_key or to_key isn't in the dataset
        """
        for key in (from_key, to_key):
            if key not in self.dataset.key_signatures:
                raise UnknownKeyError(key)

        return [
            self.generate_chord(to_key, chord.degree, chord.type, chord.extensions)
            for chord in progression
        ]

    # Auxiliary lookups ---------------------------------------------------

    def get_extensions(self, chord_type: str) -> list[str]:
        """Extension keys defined on a chord type."""
        normalized_type = normalize_chord_type(chord_type)
        type_data = self.dataset.chord_types.get(normalized_type)
        if type_data is None:
            raise UnknownChordTypeError(chord_type)
        return list(type_data.extensions)

    def get_random_extensions(
        self,
        chord_type: str,
        count: int = 2,
        rng: random.Random | None = None,
    ) -> list[str]:
        """
        Pick up to `count` distinct extensions defined on a chord type.

        Unknown types and types without extensions give an empty list.
        """
        type_data = self.dataset.chord_types.get(normalize_chord_type(chord_type))
        if type_data is None or not type_data.extensions:
            return []

        available = list(type_data.extensions)
        k = max(0, min(count, len(available)))
        return (rng or random.Random()).sample(available, k)

    def get_substitutions(self, degree: str) -> Substitution | None:
        """
        Find the functional group that lists substitutes for a degree.

        Groups are scanned in dataset order; the first match wins.
        """
        for function_name, group in self.dataset.functional_groups.items():
            if degree in group.substitutions:
                return Substitution(
                    function=function_name,
                    substitutions=list(group.substitutions[degree]),
                )
        return None
