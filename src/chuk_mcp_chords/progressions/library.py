"""
Progression library - curated progressions and helpers around them.

Progressions are stored as notation strings ("6m-2m-5-1") so they stay
key-independent; the engine resolves them in whatever key is asked for.
"""

from __future__ import annotations

import random
from collections.abc import Sequence
from dataclasses import dataclass, field

from chuk_mcp_chords.constants import CHORD_TYPE_GLYPHS
from chuk_mcp_chords.core.engine import ChordEngine
from chuk_mcp_chords.core.notation import degree_prefix, split_progression
from chuk_mcp_chords.models.chord import GeneratedChord

CURATED_PROGRESSIONS: tuple[str, ...] = (
    "1-4-5-1",
    "6m-2m-5-1",
    "2m-5-1-1",
    "1-6m-2m-5",
    "1-5-6m-4",
)

DEMO_KEYS: tuple[str, ...] = ("C", "Db", "D", "Eb", "E", "F", "F#", "G", "Ab", "A", "Bb", "B")


@dataclass(frozen=True)
class ProgressionPick:
    """A progression resolved in a randomly chosen key."""

    key: str
    notation: str
    degrees: list[str] = field(default_factory=list)
    chords: list[GeneratedChord] = field(default_factory=list)

    def labels(self) -> list[str]:
        """Degree-relative labels for each chord ('1M', '6m', '7°')."""
        return [format_degree_symbol(d, c) for d, c in zip(self.degrees, self.chords, strict=True)]


def degree_labels(notations: str) -> list[str]:
    """Leading degree of every token: '6m-2m-5-1' -> ['6', '2', '5', '1']."""
    return [degree_prefix(token) for token in split_progression(notations)]


def format_degree_symbol(degree: str, chord: GeneratedChord) -> str:
    """
    Degree label with the chord's type glyph and extensions: '7' + dim -> '7°'.

    Unlike chord symbols, degree labels spell major out ('1M') so a bare
    number never reads as a missing type.
    """
    glyph = CHORD_TYPE_GLYPHS.get(chord.type) or chord.type
    return f"{degree}{glyph}{''.join(chord.extensions)}"


def group_by_degree(progressions: Sequence[str] = CURATED_PROGRESSIONS) -> dict[str, list[str]]:
    """
    Group progressions by the degree they start on.

    Groups come out in ascending degree order ('1', '2', ..., 'b6', '6').
    Progressions keep their input order inside a group.
    """
    groups: dict[str, list[str]] = {}
    for notation in progressions:
        labels = degree_labels(notation)
        groups.setdefault(labels[0], []).append(notation)
    return dict(sorted(groups.items(), key=lambda item: _degree_sort_key(item[0])))


def _degree_sort_key(label: str) -> tuple[int, int, str]:
    digits = label.lstrip("b#")
    if not digits.isdigit():
        return (99, 0, label)
    accidental = {"b": -1, "#": 1}.get(label[:1], 0)
    return (int(digits), accidental, label)


def random_progression(
    engine: ChordEngine,
    rng: random.Random | None = None,
    keys: Sequence[str] = DEMO_KEYS,
    progressions: Sequence[str] = CURATED_PROGRESSIONS,
) -> ProgressionPick:
    """
    Pick a random key and progression and generate it.

    Args:
        engine: Engine to generate with
        rng: Random source; pass a seeded one for reproducible picks
        keys: Keys to choose from
        progressions: Progressions to choose from

    Returns:
        The pick with its generated chords
    """
    rng = rng or random.Random()
    key = rng.choice(list(keys))
    notation = rng.choice(list(progressions))
    return ProgressionPick(
        key=key,
        notation=notation,
        degrees=degree_labels(notation),
        chords=engine.generate_progression(key, notation),
    )
